"""Fallback classification when no detector produced anything. First match wins."""

from knownevents.domain.enums import KnownEventType, TxStatus
from knownevents.parser.handlers.parts import (
    account_part,
    action_part,
    amount_part,
    contract_call_part,
    text_part,
)
from knownevents.parser.utils.addresses import same_address
from knownevents.parser.utils.context import DetectionContext
from knownevents.parser.utils.types import FeeTransfer, KnownEvent, KnownEventPart, Receipt, TransactionCall


def _has_input(call_input: str | None) -> bool:
    return bool(call_input) and call_input != "0x"


def contract_creation_event(receipt: Receipt) -> KnownEvent | None:
    if receipt.to_address or not receipt.contract_address:
        return None
    return KnownEvent(
        type=KnownEventType.CONTRACT_CREATION,
        parts=[action_part("Create Contract"), account_part(receipt.contract_address)],
    )


def contract_call_event(receipt: Receipt, transaction: TransactionCall | None) -> KnownEvent | None:
    call_input = transaction.call_input if transaction else None
    if not receipt.to_address or not _has_input(call_input):
        return None
    return KnownEvent(
        type=KnownEventType.CONTRACT_CALL,
        parts=[action_part("Call to"), contract_call_part(receipt.to_address, call_input)],
        failed=receipt.status == TxStatus.REVERTED,
    )


def self_transfer_event(receipt: Receipt, transaction: TransactionCall | None) -> KnownEvent | None:
    call_input = transaction.call_input if transaction else None
    if not same_address(receipt.from_address, receipt.to_address) or _has_input(call_input):
        return None
    return KnownEvent(
        type=KnownEventType.SELF_TRANSFER,
        parts=[action_part("Self Transfer"), account_part(receipt.from_address)],
    )


def fee_event(fee_transfers: list[FeeTransfer], context: DetectionContext) -> KnownEvent | None:
    """`Pay Fee <amount> and <amount> ...` over every collected fee transfer."""
    if not fee_transfers:
        return None
    parts: list[KnownEventPart] = [action_part("Pay Fee")]
    for i, fee in enumerate(fee_transfers):
        if i > 0:
            parts.append(text_part("and"))
        parts.append(amount_part(context.create_amount(fee.amount, fee.token)))
    return KnownEvent(type=KnownEventType.FEE, parts=parts)


def classify_fallback(
    receipt: Receipt,
    transaction: TransactionCall | None,
    fee_transfers: list[FeeTransfer],
    context: DetectionContext,
) -> KnownEvent | None:
    return (
        contract_creation_event(receipt)
        or contract_call_event(receipt, transaction)
        or self_transfer_event(receipt, transaction)
        or fee_event(fee_transfers, context)
    )
