"""Swap grouping: a transfer into the stablecoin DEX followed by one out of it."""

from dataclasses import dataclass

from knownevents.domain.enums import KnownEventType
from knownevents.parser.handlers.parts import action_part, amount_part, text_part
from knownevents.parser.utils.addresses import is_stablecoin_dex
from knownevents.parser.utils.context import DetectionContext
from knownevents.parser.utils.types import KnownEvent, ParsedEvent


@dataclass(frozen=True)
class SwapGrouping:
    swaps: list[KnownEvent]
    consumed: frozenset[int]  # indices into the deduplicated event list


def is_transfer_event(event: ParsedEvent) -> bool:
    args = event.args
    return (
        event.event_name in ("Transfer", "TransferWithMemo")
        and "from" in args
        and "to" in args
        and isinstance(args.get("amount"), int)
    )


def group_swaps(events: list[ParsedEvent], context: DetectionContext) -> SwapGrouping:
    """Pair each transfer into the DEX with the first later transfer out of it.

    Greedy: a consumed index never starts a pair, but an exit leg may be
    the partner of more than one deposit.
    """
    transfers = [(i, e) for i, e in enumerate(events) if is_transfer_event(e)]
    consumed: set[int] = set()
    swaps: list[KnownEvent] = []

    for position, (index_in, sent) in enumerate(transfers):
        if index_in in consumed or not is_stablecoin_dex(sent.args["to"]):
            continue
        for index_out, received in transfers[position + 1:]:
            if not is_stablecoin_dex(received.args["from"]):
                continue
            swaps.append(KnownEvent(
                type=KnownEventType.SWAP,
                parts=[
                    action_part("Swap"),
                    amount_part(context.create_amount(sent.args["amount"], sent.address)),
                    text_part("for"),
                    amount_part(context.create_amount(received.args["amount"], received.address)),
                ],
            ))
            consumed.update((index_in, index_out))
            break

    return SwapGrouping(swaps=swaps, consumed=frozenset(consumed))
