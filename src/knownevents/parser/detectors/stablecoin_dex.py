"""Stablecoin DEX order book events.

Realized swaps are not detected here: they surface as transfers into and out of
the exchange and are grouped by `generic.swap`.
"""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import account_part, action_part, text_part, tick_part, token_part
from knownevents.parser.utils.types import KnownEvent, ParsedEvent


class StablecoinDexDetector(BaseDetector):
    DETECTOR_NAME = "stablecoin_dex"
    EVENT_HANDLERS = {
        "OrderPlaced": "_handle_order_placed",
        "FlipOrderPlaced": "_handle_order_placed",
        "OrderFilled": "_handle_order_filled",
        "OrderCancelled": "_handle_order_cancelled",
        "PairCreated": "_handle_pair_created",
    }

    def _handle_order_placed(self, event: ParsedEvent) -> KnownEvent:
        args = event.args
        is_flip = event.event_name == "FlipOrderPlaced" or bool(args.get("isFlipOrder"))
        prefix = "Flip" if is_flip else "Limit"
        side = "Buy" if args["isBid"] else "Sell"
        return KnownEvent(
            type=KnownEventType.FLIP_ORDER_PLACED if is_flip else KnownEventType.ORDER_PLACED,
            parts=[
                action_part(f"{prefix} {side}"),
                self._amount(args["amount"], args["token"]),
                text_part("at tick"),
                tick_part(args["tick"]),
            ],
            note=[("Maker", account_part(args["maker"]))],
        )

    def _handle_order_filled(self, event: ParsedEvent) -> KnownEvent:
        args = event.args
        return KnownEvent(
            type=KnownEventType.ORDER_FILLED,
            parts=[
                action_part("Partial Fill" if args["partialFill"] else "Complete Fill"),
                text_part(str(args["amountFilled"])),
            ],
        )

    def _handle_order_cancelled(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.ORDER_CANCELLED,
            parts=[action_part("Cancel Order")],
            note=[("Order", text_part(f"#{event.args['orderId']}"))],
        )

    def _handle_pair_created(self, event: ParsedEvent) -> KnownEvent:
        return KnownEvent(
            type=KnownEventType.CREATE_PAIR,
            parts=[
                action_part("Create Pair"),
                token_part(event.args["base"]),
                text_part("/"),
                token_part(event.args["quote"]),
            ],
        )
