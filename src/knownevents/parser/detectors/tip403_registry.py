"""TIP-403 policy registry: whitelists, blacklists and policy administration."""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import account_part, action_part, policy_part, text_part
from knownevents.parser.utils.types import KnownEvent, ParsedEvent


class Tip403RegistryDetector(BaseDetector):
    DETECTOR_NAME = "tip403_registry"
    EVENT_HANDLERS = {
        "WhitelistUpdated": "_handle_whitelist",
        "BlacklistUpdated": "_handle_blacklist",
        "PolicyAdminUpdated": "_handle_policy_admin",
        "PolicyCreated": "_handle_policy_created",
    }

    def _list_update(self, event: ParsedEvent, event_type: KnownEventType, action: str) -> KnownEvent:
        return KnownEvent(
            type=event_type,
            parts=[
                action_part(action),
                account_part(event.args["account"]),
                text_part("on Policy"),
                policy_part(event.args["policyId"]),
            ],
        )

    def _handle_whitelist(self, event: ParsedEvent) -> KnownEvent:
        return self._list_update(event, KnownEventType.WHITELIST, "Whitelist")

    def _handle_blacklist(self, event: ParsedEvent) -> KnownEvent:
        return self._list_update(event, KnownEventType.BLACKLIST, "Blacklist")

    def _handle_policy_admin(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.POLICY_ADMIN_UPDATED,
            parts=[
                action_part("New Admin"),
                account_part(event.args["admin"]),
                text_part("on Policy"),
                policy_part(event.args["policyId"]),
            ],
            note=[("Updater", account_part(event.args["updater"]))],
        )

    def _handle_policy_created(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.POLICY_CREATED,
            parts=[action_part("Create Policy"), policy_part(event.args["policyId"])],
        )
