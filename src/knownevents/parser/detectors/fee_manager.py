"""Fee manager: which token a user or validator pays/receives fees in."""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import account_part, action_part, text_part
from knownevents.parser.utils.types import KnownEvent, ParsedEvent


class FeeManagerDetector(BaseDetector):
    DETECTOR_NAME = "fee_manager"
    EVENT_HANDLERS = {
        "UserTokenSet": "_handle_user_token",
        "ValidatorTokenSet": "_handle_validator_token",
    }

    def _handle_user_token(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.USER_TOKEN_SET,
            parts=[
                action_part("Set Fee Token"),
                self._token(event.args["token"]),
                text_part("for"),
                account_part(event.args["user"]),
            ],
        )

    def _handle_validator_token(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.VALIDATOR_TOKEN_SET,
            parts=[
                action_part("Set Fee Token"),
                self._token(event.args["token"]),
                text_part("for"),
                account_part(event.args["validator"]),
            ],
        )
