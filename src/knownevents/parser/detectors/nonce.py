"""Nonce manager. Both events are informational; see `is_display_worthy`."""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import account_part, action_part, text_part
from knownevents.parser.utils.types import KnownEvent, ParsedEvent


class NonceDetector(BaseDetector):
    DETECTOR_NAME = "nonce"
    EVENT_HANDLERS = {
        "NonceIncremented": "_handle_nonce_incremented",
        "ActiveKeyCountChanged": "_handle_active_key_count",
    }

    def _handle_nonce_incremented(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.NONCE_INCREMENTED,
            parts=[action_part("Increment Nonce"), account_part(event.args["account"])],
            note=[
                ("Key", text_part(str(event.args["nonceKey"]))),
                ("New Nonce", text_part(str(event.args["newNonce"]))),
            ],
        )

    def _handle_active_key_count(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.ACTIVE_KEY_COUNT_CHANGED,
            parts=[action_part("Update Active Keys"), text_part("for"), account_part(event.args["account"])],
            note=[("Count", text_part(str(event.args["newCount"])))],
        )
