from enum import Enum


class TxStatus(str, Enum):
    """Execution status of a transaction receipt."""

    SUCCESS = "success"
    REVERTED = "reverted"
