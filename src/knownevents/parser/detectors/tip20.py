"""TIP-20 fungible token events."""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import (
    account_part,
    action_part,
    number_part,
    policy_part,
    role_part,
    text_part,
    token_part,
)
from knownevents.parser.utils.addresses import is_fee_manager, is_zero_address
from knownevents.parser.utils.pairing import burn_key, memo_text, mint_key
from knownevents.parser.utils.types import EventMeta, FeeTransfer, KnownEvent, ParsedEvent


class Tip20Detector(BaseDetector):
    """Transfers, supply changes and token administration."""

    DETECTOR_NAME = "tip20"
    EVENT_HANDLERS = {
        "Transfer": "_handle_transfer",
        "TransferWithMemo": "_handle_transfer",
        "Mint": "_handle_mint",
        "Burn": "_handle_burn",
        "RoleMembershipUpdated": "_handle_role_membership",
        "PauseStateUpdate": "_handle_pause_state",
        "SupplyCapUpdate": "_handle_supply_cap",
        "RewardRecipientSet": "_handle_reward_recipient",
        "Approval": "_handle_approval",
        "BurnBlocked": "_handle_burn_blocked",
        "TransferPolicyUpdate": "_handle_transfer_policy",
        "NextQuoteTokenSet": "_handle_next_quote_token",
        "QuoteTokenUpdate": "_handle_quote_token",
        "RoleAdminUpdated": "_handle_role_admin",
    }

    def _handle_transfer(self, event: ParsedEvent) -> KnownEvent | FeeTransfer | None:
        args = event.args
        if is_fee_manager(args["to"]) and not is_zero_address(args["from"]):
            # Viewer paying: the fee payer family owns this log
            if self.context.is_viewer(args["from"]):
                return None
            return FeeTransfer(amount=args["amount"], token=event.address)

        return KnownEvent(
            type=KnownEventType.SEND,
            parts=[
                action_part("Send"),
                self._amount(args["amount"], event.address),
                text_part("to"),
                account_part(args["to"]),
            ],
            note=memo_text(args.get("memo")),
            meta=EventMeta(from_address=args["from"], to_address=args["to"]),
        )

    def _handle_mint(self, event: ParsedEvent) -> KnownEvent | None:
        # Fee AMM liquidity mints reuse the name without `amount`
        if is_fee_manager(event.address) or "amount" not in event.args:
            return None
        amount, to = event.args["amount"], event.args["to"]
        return KnownEvent(
            type=KnownEventType.MINT,
            parts=[action_part("Mint"), self._amount(amount, event.address), text_part("to"), account_part(to)],
            note=self.context.memo_for(mint_key(event.address, amount, to)),
        )

    def _handle_burn(self, event: ParsedEvent) -> KnownEvent | None:
        if "amount" not in event.args:
            return None
        amount, from_address = event.args["amount"], event.args["from"]
        return KnownEvent(
            type=KnownEventType.BURN,
            parts=[
                action_part("Burn"),
                self._amount(amount, event.address),
                text_part("from"),
                account_part(from_address),
            ],
            note=self.context.memo_for(burn_key(event.address, amount, from_address)),
        )

    def _handle_role_membership(self, event: ParsedEvent) -> KnownEvent:
        granted = event.args["hasRole"]
        return KnownEvent(
            type=KnownEventType.GRANT_ROLE if granted else KnownEventType.REVOKE_ROLE,
            parts=[
                action_part("Grant Role" if granted else "Revoke Role"),
                role_part(event.args["role"]),
                text_part("to"),
                account_part(event.args["account"]),
            ],
        )

    def _handle_pause_state(self, event: ParsedEvent) -> KnownEvent:
        paused = event.args["isPaused"]
        return KnownEvent(
            type=KnownEventType.PAUSE if paused else KnownEventType.UNPAUSE,
            parts=[
                action_part("Pause Transfers" if paused else "Resume Transfers"),
                text_part("for"),
                token_part(event.address),
            ],
        )

    def _handle_supply_cap(self, event: ParsedEvent) -> KnownEvent:
        metadata = self.context.token_metadata(event.address)
        decimals = metadata.decimals if metadata else None
        return KnownEvent(
            type=KnownEventType.SUPPLY_CAP_UPDATE,
            parts=[action_part("Supply Cap Update"), text_part("for"), self._token(event.address)],
            note=[("New", number_part(event.args["newSupplyCap"], decimals))],
        )

    def _handle_reward_recipient(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.REWARD_RECIPIENT_SET,
            parts=[
                action_part("Set Reward Recipient"),
                account_part(event.args["recipient"]),
                text_part("for holder"),
                account_part(event.args["holder"]),
            ],
        )

    def _handle_approval(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.APPROVAL,
            parts=[
                action_part("Approve"),
                self._amount(event.args["amount"], event.address),
                text_part("for spender"),
                account_part(event.args["spender"]),
            ],
        )

    def _handle_burn_blocked(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.BURN_BLOCKED,
            parts=[
                action_part("Burn Blocked"),
                self._amount(event.args["amount"], event.address),
                text_part("from"),
                account_part(event.args["from"]),
            ],
        )

    def _handle_transfer_policy(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.TRANSFER_POLICY_UPDATE,
            parts=[
                action_part("Update Transfer Policy"),
                policy_part(event.args["newPolicyId"]),
                text_part("for"),
                token_part(event.address),
            ],
            note=[("Updater", account_part(event.args["updater"]))],
        )

    def _handle_next_quote_token(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.NEXT_QUOTE_TOKEN_SET,
            parts=[
                action_part("Set Next Quote Token"),
                token_part(event.args["nextQuoteToken"]),
                text_part("for"),
                self._token(event.address),
            ],
            note=[("Updater", account_part(event.args["updater"]))],
        )

    def _handle_quote_token(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.QUOTE_TOKEN_UPDATE,
            parts=[
                action_part("Update Quote Token"),
                token_part(event.args["newQuoteToken"]),
                text_part("for"),
                self._token(event.address),
            ],
            note=[("Updater", account_part(event.args["updater"]))],
        )

    def _handle_role_admin(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.ROLE_ADMIN_UPDATED,
            parts=[
                action_part("Update Role Admin"),
                role_part(event.args["role"]),
                text_part("to"),
                role_part(event.args["newAdminRole"]),
            ],
            note=[("Sender", account_part(event.args["sender"]))],
        )
