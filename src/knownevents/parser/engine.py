"""Classification entry points.

    classify_transaction(receipt, transaction, get_token_metadata, viewer)
        decode -> pair/dedupe -> memos -> call data -> swaps -> detectors
        -> viewer filter -> fallback

Nothing here raises on malformed input; failures are logged and degrade to
an empty result.
"""

import logging
from typing import Any

from knownevents.domain.enums import LOW_SIGNAL_EVENT_TYPES
from knownevents.parser.calls import add_liquidity_event, classify_call
from knownevents.parser.decoder import decode_log, decode_logs
from knownevents.parser.generic.fallback import classify_fallback
from knownevents.parser.generic.swap import group_swaps
from knownevents.parser.registry import build_default_registry
from knownevents.parser.utils.addresses import same_address
from knownevents.parser.utils.context import DetectionContext
from knownevents.parser.utils.pairing import build_mint_burn_memos, build_preference_map, dedupe_events
from knownevents.parser.utils.types import (
    FeeTransfer,
    GetTokenMetadataFn,
    KnownEvent,
    Log,
    Receipt,
    TransactionCall,
)

logger = logging.getLogger(__name__)

__all__ = [
    "classify_call",
    "classify_event",
    "classify_transaction",
    "involves_viewer",
    "is_display_worthy",
]


def _as_log(log: Log | dict) -> Log:
    if isinstance(log, Log):
        return log
    return Log.from_rpc(log) if "logIndex" in log or "blockNumber" in log else Log.model_validate(log)


def _as_receipt(receipt: Receipt | dict) -> Receipt:
    if isinstance(receipt, Receipt):
        return receipt
    return Receipt.from_rpc(receipt) if "from" in receipt else Receipt.model_validate(receipt)


def _as_transaction(transaction: TransactionCall | dict | None) -> TransactionCall | None:
    if transaction is None or isinstance(transaction, TransactionCall):
        return transaction
    return TransactionCall.model_validate(transaction)


def classify_event(
    log: Log | dict[str, Any],
    get_token_metadata: GetTokenMetadataFn | None = None,
) -> KnownEvent | None:
    """Classify a single log in isolation. Fee payments have no meaning alone and give None."""
    try:
        event = decode_log(_as_log(log))
        if event is None:
            return None
        context = DetectionContext(get_token_metadata=get_token_metadata)
        detected = build_default_registry(context, include_fee_payer=False).detect(event)
    except Exception:
        logger.exception("Failed to classify log")
        return None

    if isinstance(detected, FeeTransfer):
        return None
    return detected


def involves_viewer(event: KnownEvent, viewer: str) -> bool:
    """Events without parties are never filtered out."""
    if event.meta is None:
        return True
    return same_address(event.meta.from_address, viewer) or same_address(event.meta.to_address, viewer)


def is_display_worthy(event: KnownEvent) -> bool:
    """False for bookkeeping events (nonce, key count) that only add noise to a summary."""
    return event.type not in LOW_SIGNAL_EVENT_TYPES


def classify_transaction(
    receipt: Receipt | dict[str, Any],
    transaction: TransactionCall | dict[str, Any] | None = None,
    get_token_metadata: GetTokenMetadataFn | None = None,
    viewer: str | None = None,
) -> list[KnownEvent]:
    """Describe what happened in one transaction, in assembly order:
    call-data event, swaps, per-log events, then a fallback if nothing matched.
    """
    try:
        return _classify_transaction(
            _as_receipt(receipt), _as_transaction(transaction), get_token_metadata, viewer,
        )
    except Exception:
        logger.exception("Failed to classify transaction")
        return []


def _classify_transaction(
    receipt: Receipt,
    transaction: TransactionCall | None,
    get_token_metadata: GetTokenMetadataFn | None,
    viewer: str | None,
) -> list[KnownEvent]:
    events = decode_logs(receipt.logs)
    preferences = build_preference_map(events)
    memos = build_mint_burn_memos(events, preferences)
    deduped = dedupe_events(events, preferences)

    context = DetectionContext(
        get_token_metadata=get_token_metadata,
        mint_burn_memos=memos,
        viewer=viewer,
        transaction_sender=receipt.from_address,
    )
    known: list[KnownEvent] = []

    if transaction is not None:
        liquidity = add_liquidity_event(transaction, context)
        if liquidity is not None:
            known.append(liquidity)

    grouping = group_swaps(deduped, context)
    known.extend(grouping.swaps)

    registry = build_default_registry(context)
    fee_transfers: list[FeeTransfer] = []
    for index, event in enumerate(deduped):
        if index in grouping.consumed:
            continue
        detected = registry.detect(event)
        if detected is None:
            continue
        if isinstance(detected, FeeTransfer):
            fee_transfers.append(detected)
            continue
        if viewer and not involves_viewer(detected, viewer):
            continue
        known.append(detected)

    if not known:
        fallback = classify_fallback(receipt, transaction, fee_transfers, context)
        if fallback is not None:
            known.append(fallback)

    return known
