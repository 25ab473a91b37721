"""TIP-20 factory: token deployment."""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import action_part, token_part
from knownevents.parser.utils.types import KnownEvent, ParsedEvent


class Tip20FactoryDetector(BaseDetector):
    DETECTOR_NAME = "tip20_factory"
    EVENT_HANDLERS = {"TokenCreated": "_handle_token_created"}

    def _handle_token_created(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.CREATE_TOKEN,
            parts=[action_part("Create Token"), token_part(event.args["token"], event.args["symbol"])],
        )
