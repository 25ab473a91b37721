"""Pairing and precedence between logs that describe the same action.

A TIP-20 mint emits both `Transfer(0 -> to)` and `Mint(to)`; a memo transfer
emits both `Transfer` and `TransferWithMemo`. The richer log wins and the
plain one is dropped. Memos on mint/burn transfers move onto the Mint/Burn.
"""

import logging

from eth_utils import decode_hex

from knownevents.parser.utils.addresses import is_zero_address
from knownevents.parser.utils.types import ParsedEvent

logger = logging.getLogger(__name__)


def transfer_pair_key(event: ParsedEvent) -> str:
    """`<from topic><to topic>`, shared by a Transfer and its TransferWithMemo twin."""
    return f"{event.topics[1]}{event.topics[2]}"


def mint_key(token: str, amount: int, to: str) -> str:
    return f"mint:{token.lower()}:{amount}:{to.lower()}"


def burn_key(token: str, amount: int, from_address: str) -> str:
    return f"burn:{token.lower()}:{amount}:{from_address.lower()}"


def memo_text(memo: str | None) -> str | None:
    """bytes32 memo -> text with zero padding stripped. Empty memos give None."""
    if not memo:
        return None
    try:
        raw = decode_hex(memo)
    except ValueError:
        logger.debug("Ignoring undecodable memo %r", memo)
        return None
    text = raw.strip(b"\x00").decode("utf-8", errors="replace")
    return text or None


def _is_tip20_mint(event: ParsedEvent) -> bool:
    return event.event_name == "Mint" and "amount" in event.args


def _is_tip20_burn(event: ParsedEvent) -> bool:
    return event.event_name == "Burn" and "amount" in event.args


def _claim_key(event: ParsedEvent) -> str | None:
    if event.event_name == "TransferWithMemo":
        return transfer_pair_key(event)
    if _is_tip20_mint(event):
        return mint_key(event.address, event.args["amount"], event.args["to"])
    if _is_tip20_burn(event):
        return burn_key(event.address, event.args["amount"], event.args["from"])
    return None


def build_preference_map(events: list[ParsedEvent]) -> dict[str, str]:
    """Pairing key -> name of the event that last claimed it."""
    preferences: dict[str, str] = {}
    for event in events:
        key = _claim_key(event)
        if key is not None:
            preferences[key] = event.event_name
    return preferences


def _claimed_by_mint_or_burn(event: ParsedEvent, preferences: dict[str, str]) -> bool:
    args = event.args
    if is_zero_address(args["from"]):
        if preferences.get(mint_key(event.address, args["amount"], args["to"])) == "Mint":
            return True
    if is_zero_address(args["to"]):
        if preferences.get(burn_key(event.address, args["amount"], args["from"])) == "Burn":
            return True
    return False


def build_mint_burn_memos(events: list[ParsedEvent], preferences: dict[str, str]) -> dict[str, str]:
    """Mint/burn key -> memo text, taken from the TransferWithMemo paired with that Mint/Burn."""
    memos: dict[str, str] = {}
    for event in events:
        if event.event_name != "TransferWithMemo":
            continue
        text = memo_text(event.args.get("memo"))
        if text is None:
            continue

        args = event.args
        if is_zero_address(args["from"]):
            key = mint_key(event.address, args["amount"], args["to"])
            if preferences.get(key) == "Mint":
                memos[key] = text
        if is_zero_address(args["to"]):
            key = burn_key(event.address, args["amount"], args["from"])
            if preferences.get(key) == "Burn":
                memos[key] = text
    return memos


def dedupe_events(events: list[ParsedEvent], preferences: dict[str, str]) -> list[ParsedEvent]:
    """Drop transfers whose action is described by a richer paired log. Order is kept."""
    kept = []
    for event in events:
        if event.event_name == "Transfer":
            if preferences.get(transfer_pair_key(event)) == "TransferWithMemo":
                continue
            if _claimed_by_mint_or_burn(event, preferences):
                continue
        elif event.event_name == "TransferWithMemo":
            if _claimed_by_mint_or_burn(event, preferences):
                continue
        kept.append(event)
    return kept
