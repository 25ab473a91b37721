"""Fee AMM liquidity pool (lives at the fee manager address).

`Mint`/`Burn` share names with TIP-20; the handlers dispatch on argument shape.
"""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import action_part, text_part
from knownevents.parser.utils.addresses import is_fee_manager
from knownevents.parser.utils.types import KnownEvent, ParsedEvent


class FeeAmmDetector(BaseDetector):
    DETECTOR_NAME = "fee_amm"
    EVENT_HANDLERS = {
        "Mint": "_handle_mint",
        "Burn": "_handle_burn",
        "RebalanceSwap": "_handle_rebalance_swap",
    }

    def _handle_mint(self, event: ParsedEvent) -> KnownEvent | None:
        args = event.args
        # Liquidity added through the fee manager is reported from call data instead
        if is_fee_manager(event.address) or "amountValidatorToken" not in args or "validatorToken" not in args:
            return None
        return KnownEvent(
            type=KnownEventType.MINT,
            parts=[action_part("Add Liquidity"), self._amount(args["amountValidatorToken"], args["validatorToken"])],
        )

    def _handle_burn(self, event: ParsedEvent) -> KnownEvent | None:
        args = event.args
        if "amountUserToken" not in args or "amountValidatorToken" not in args:
            return None
        return KnownEvent(
            type=KnownEventType.BURN,
            parts=[
                action_part("Remove Liquidity"),
                self._amount(args["amountUserToken"], args["userToken"]),
                text_part("and"),
                self._amount(args["amountValidatorToken"], args["validatorToken"]),
            ],
        )

    def _handle_rebalance_swap(self, event: ParsedEvent) -> KnownEvent:
        args = event.args
        return KnownEvent(
            type=KnownEventType.REBALANCE_SWAP,
            parts=[
                action_part("Rebalance Swap"),
                self._amount(args["amountIn"], args["userToken"]),
                text_part("for"),
                self._amount(args["amountOut"], args["validatorToken"]),
            ],
        )
