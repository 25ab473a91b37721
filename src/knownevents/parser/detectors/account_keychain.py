"""Account keychain: access keys authorized to sign for an account."""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import account_part, action_part, number_part, text_part
from knownevents.parser.utils.types import KnownEvent, ParsedEvent

SIGNATURE_TYPES = {0: "secp256k1", 1: "p256", 2: "webauthn"}


class AccountKeychainDetector(BaseDetector):
    DETECTOR_NAME = "account_keychain"
    EVENT_HANDLERS = {
        "KeyAuthorized": "_handle_key_authorized",
        "KeyRevoked": "_handle_key_revoked",
        "SpendingLimitUpdated": "_handle_spending_limit",
    }

    def _handle_key_authorized(self, event: ParsedEvent) -> KnownEvent:
        args = event.args
        signature_type = SIGNATURE_TYPES.get(args["signatureType"], str(args["signatureType"]))
        return KnownEvent(
            type=KnownEventType.AUTHORIZE_KEY,
            parts=[
                action_part("Authorize Key"),
                account_part(args["publicKey"]),
                text_part("for"),
                account_part(args["account"]),
            ],
            note=[("Type", text_part(signature_type)), ("Expiry", number_part(args["expiry"]))],
        )

    def _handle_key_revoked(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.REVOKE_KEY,
            parts=[
                action_part("Revoke Key"),
                account_part(event.args["publicKey"]),
                text_part("for"),
                account_part(event.args["account"]),
            ],
        )

    def _handle_spending_limit(self, event: ParsedEvent) -> KnownEvent:
        args = event.args
        return KnownEvent(
            type=KnownEventType.SPENDING_LIMIT_UPDATE,
            parts=[
                action_part("Set Spending Limit"),
                self._amount(args["newLimit"], args["token"]),
                text_part("for key"),
                account_part(args["publicKey"]),
            ],
            note=[("Account", account_part(args["account"]))],
        )
