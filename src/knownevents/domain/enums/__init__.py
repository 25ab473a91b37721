from knownevents.domain.enums.event_type import LOW_SIGNAL_EVENT_TYPES, KnownEventType
from knownevents.domain.enums.status import TxStatus

__all__ = [
    "KnownEventType",
    "LOW_SIGNAL_EVENT_TYPES",
    "TxStatus",
]
