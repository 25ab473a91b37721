"""Base detector with a declarative event name -> handler mapping."""

from knownevents.parser.handlers.parts import amount_part, token_part
from knownevents.parser.utils.context import DetectionContext
from knownevents.parser.utils.types import AmountPart, DetectionResult, ParsedEvent, TokenPart


class BaseDetector:
    """One family of contracts.

    Subclasses define:
        DETECTOR_NAME: str used in logs
        EVENT_HANDLERS: dict mapping event names to handler method names

    Handler method signature:
        def _handle_xxx(self, event) -> KnownEvent | FeeTransfer | None
    """

    DETECTOR_NAME: str = "BaseDetector"
    EVENT_HANDLERS: dict[str, str] = {}

    def __init__(self, context: DetectionContext) -> None:
        self.context = context

    def detect(self, event: ParsedEvent) -> DetectionResult | None:
        handler_name = self.EVENT_HANDLERS.get(event.event_name)
        if handler_name is None:
            return None
        handler_func = getattr(self, handler_name)
        return handler_func(event)

    def _amount(self, value: int, token: str) -> AmountPart:
        return amount_part(self.context.create_amount(value, token))

    def _token(self, address: str) -> TokenPart:
        """Token part with the symbol filled in when metadata knows it."""
        metadata = self.context.token_metadata(address)
        return token_part(address, metadata.symbol if metadata else None)
