"""Call-data classification.

Some actions leave no distinguishing log: adding fee AMM liquidity looks like a
fee payment (a transfer into the fee manager) and validator-set management emits
nothing at all. Both are recovered from call data.
"""

import logging
from collections import deque
from collections.abc import Iterator
from typing import Any

from knownevents.domain.enums import KnownEventType
from knownevents.parser.decoder import decode_function_data
from knownevents.parser.handlers.parts import account_part, action_part, amount_part, hex_part, text_part
from knownevents.parser.utils.addresses import is_fee_manager, is_validator_config
from knownevents.parser.utils.context import DetectionContext
from knownevents.parser.utils.types import KnownEvent, TransactionCall

logger = logging.getLogger(__name__)


def iter_calls(transaction: TransactionCall) -> Iterator[TransactionCall]:
    """Breadth-first: the transaction itself, then nested calls level by level."""
    queue = deque([transaction])
    while queue:
        call = queue.popleft()
        yield call
        if call.calls:
            queue.extend(call.calls)


def find_add_liquidity_call(transaction: TransactionCall) -> dict[str, Any] | None:
    """Arguments of the first fee manager `mint(...)` call in the tree."""
    for call in iter_calls(transaction):
        call_input = call.call_input
        if not call.to or not call_input or not is_fee_manager(call.to):
            continue
        decoded = decode_function_data("fee_amm", call_input)
        if decoded is None:
            logger.debug("Skipping undecodable fee manager call %s", call_input[:10])
            continue
        spec, args = decoded
        if spec.name == "mint":
            return args
    return None


def add_liquidity_event(transaction: TransactionCall, context: DetectionContext) -> KnownEvent | None:
    args = find_add_liquidity_call(transaction)
    if args is None:
        return None
    return KnownEvent(
        type=KnownEventType.MINT,
        parts=[
            action_part("Add Liquidity"),
            amount_part(context.create_amount(args["amountValidatorToken"], args["validatorToken"])),
        ],
    )


# --- Validator config (no events) ---


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _add_validator(args: dict[str, Any]) -> KnownEvent:
    return KnownEvent(
        type=KnownEventType.ADD_VALIDATOR,
        parts=[action_part("Add Validator"), account_part(args["newValidatorAddress"])],
        note=[
            ("Public Key", hex_part(args["publicKey"])),
            ("Active", text_part(_yes_no(args["active"]))),
            ("Inbound", text_part(args["inboundAddress"])),
            ("Outbound", text_part(args["outboundAddress"])),
        ],
    )


def _update_validator(args: dict[str, Any]) -> KnownEvent:
    return KnownEvent(
        type=KnownEventType.UPDATE_VALIDATOR,
        parts=[action_part("Update Validator"), account_part(args["newValidatorAddress"])],
        note=[
            ("Public Key", hex_part(args["publicKey"])),
            ("Inbound", text_part(args["inboundAddress"])),
            ("Outbound", text_part(args["outboundAddress"])),
        ],
    )


def _change_validator_status(args: dict[str, Any]) -> KnownEvent:
    return KnownEvent(
        type=KnownEventType.VALIDATOR_STATUS_UPDATE,
        parts=[
            action_part("Activate Validator" if args["active"] else "Deactivate Validator"),
            account_part(args["validator"]),
        ],
    )


def _change_owner(args: dict[str, Any]) -> KnownEvent:
    return KnownEvent(
        type=KnownEventType.CHANGE_OWNER,
        parts=[action_part("Change Owner"), text_part("to"), account_part(args["newOwner"])],
    )


VALIDATOR_CONFIG_HANDLERS = {
    "addValidator": _add_validator,
    "updateValidator": _update_validator,
    "changeValidatorStatus": _change_validator_status,
    "changeOwner": _change_owner,
}


def classify_call(target_address: str | None, call_data: str | None) -> KnownEvent | None:
    """Classify a direct call to the validator config contract. None for anything else."""
    if not is_validator_config(target_address):
        return None
    try:
        decoded = decode_function_data("validator_config", call_data)
        if decoded is None:
            return None
        spec, args = decoded
        handler = VALIDATOR_CONFIG_HANDLERS.get(spec.name)
        return handler(args) if handler else None
    except Exception:
        logger.exception("Failed to classify call to %s", target_address)
        return None
