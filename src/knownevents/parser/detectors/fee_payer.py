"""Fee payments seen from the viewer's side. Only active with a viewer."""

from knownevents.domain.enums import KnownEventType
from knownevents.parser.detectors.base import BaseDetector
from knownevents.parser.handlers.parts import account_part, action_part, text_part
from knownevents.parser.utils.addresses import is_fee_manager, is_zero_address, same_address
from knownevents.parser.utils.types import EventMeta, FeeTransfer, KnownEvent, ParsedEvent


class FeePayerDetector(BaseDetector):
    """A transfer into the fee manager paid by the viewer.

    Own transaction: a plain fee. Someone else's transaction: a sponsored fee.
    """

    DETECTOR_NAME = "fee_payer"
    EVENT_HANDLERS = {
        "Transfer": "_handle_transfer",
        "TransferWithMemo": "_handle_transfer",
    }

    def _handle_transfer(self, event: ParsedEvent) -> KnownEvent | FeeTransfer | None:
        args = event.args
        if not is_fee_manager(args["to"]) or is_zero_address(args["from"]):
            return None

        sender = self.context.transaction_sender
        if not sender or not self.context.is_viewer(args["from"]):
            return None

        if same_address(args["from"], sender):
            return FeeTransfer(amount=args["amount"], token=event.address)

        return KnownEvent(
            type=KnownEventType.SPONSOR_FEE,
            parts=[
                action_part("Sponsor Fee"),
                self._amount(args["amount"], event.address),
                text_part("for"),
                account_part(sender),
            ],
            meta=EventMeta(from_address=args["from"], to_address=args["to"]),
        )
