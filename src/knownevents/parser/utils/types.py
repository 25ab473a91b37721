"""Core data types for the classification engine."""

import logging
from collections.abc import Callable
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from knownevents.domain.enums import KnownEventType, TxStatus

logger = logging.getLogger(__name__)


def _quantity(value: Any) -> int | None:
    """JSON-RPC quantity (hex string, decimal string or int) -> int."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    try:
        return int(value, 16) if value.startswith("0x") else int(value)
    except (AttributeError, ValueError):
        return None


# --- Raw inputs ---


class Log(BaseModel):
    """A raw event log as emitted by a contract during execution."""

    model_config = ConfigDict(frozen=True)

    address: str
    topics: tuple[str, ...] = ()
    data: str = "0x"
    block_number: int | None = None
    transaction_hash: str | None = None
    log_index: int | None = None

    @classmethod
    def from_rpc(cls, raw: dict) -> "Log":
        """Build from an eth_getTransactionReceipt log entry (camelCase, hex quantities)."""
        return cls(
            address=raw.get("address", ""),
            topics=tuple(raw.get("topics") or ()),
            data=raw.get("data") or "0x",
            block_number=_quantity(raw.get("blockNumber")),
            transaction_hash=raw.get("transactionHash"),
            log_index=_quantity(raw.get("logIndex")),
        )


def _rpc_logs(raw_logs: list[dict]) -> list[Log]:
    """Convert receipt logs, skipping entries that are not valid logs."""
    logs = []
    for raw in raw_logs:
        try:
            logs.append(Log.from_rpc(raw))
        except (ValidationError, AttributeError) as exc:
            logger.debug("Skipping malformed receipt log %r: %s", raw, exc)
    return logs


class Receipt(BaseModel):
    """The part of a transaction receipt the engine reads."""

    from_address: str
    to_address: str | None = None
    status: TxStatus = TxStatus.SUCCESS
    logs: list[Log] = []
    contract_address: str | None = None
    transaction_hash: str | None = None

    @classmethod
    def from_rpc(cls, raw: dict) -> "Receipt":
        # missing or null status is treated as success
        status = raw.get("status")
        if status is None:
            status = TxStatus.SUCCESS.value
        if status not in (TxStatus.SUCCESS.value, TxStatus.REVERTED.value):
            status = TxStatus.SUCCESS if _quantity(status) == 1 else TxStatus.REVERTED
        return cls(
            from_address=raw.get("from", ""),
            to_address=raw.get("to"),
            status=status,
            logs=_rpc_logs(raw.get("logs") or []),
            contract_address=raw.get("contractAddress"),
            transaction_hash=raw.get("transactionHash"),
        )


class TransactionCall(BaseModel):
    """A transaction or one node of its call tree. `data` is accepted as an alias of `input`."""

    to: str | None = None
    input: str | None = None
    data: str | None = None
    calls: list["TransactionCall"] | None = None

    @property
    def call_input(self) -> str | None:
        return self.input if self.input is not None else self.data


TransactionCall.model_rebuild()


class ParsedEvent(BaseModel):
    """A log decoded against the known interfaces."""

    address: str  # emitting contract, checksummed
    event_name: str
    args: dict[str, Any] = {}
    topics: tuple[str, ...] = ()  # lowercased
    log_index: int | None = None


# --- Token enrichment ---


class TokenMetadata(BaseModel):
    symbol: str | None = None
    decimals: int | None = None


GetTokenMetadataFn = Callable[[str], TokenMetadata | dict | None]


class Amount(BaseModel):
    """Raw token amount; decimals/symbol are optional enrichment."""

    token: str
    value: int = Field(ge=0)
    decimals: int | None = None
    symbol: str | None = None


class Token(BaseModel):
    address: str
    symbol: str | None = None


class ContractCall(BaseModel):
    address: str
    input: str


# --- Known event parts (render left to right) ---


class AccountPart(BaseModel):
    type: Literal["account"] = "account"
    value: str


class ActionPart(BaseModel):
    type: Literal["action"] = "action"
    value: str


class AmountPart(BaseModel):
    type: Literal["amount"] = "amount"
    value: Amount


class ContractCallPart(BaseModel):
    type: Literal["contractCall"] = "contractCall"
    value: ContractCall


class DurationPart(BaseModel):
    type: Literal["duration"] = "duration"
    value: int  # seconds


class HexPart(BaseModel):
    type: Literal["hex"] = "hex"
    value: str


class NumberPart(BaseModel):
    type: Literal["number"] = "number"
    value: int | float | tuple[int, int]  # (raw value, decimals)


class RolePart(BaseModel):
    type: Literal["role"] = "role"
    value: str  # bytes32 role id


class TextPart(BaseModel):
    type: Literal["text"] = "text"
    value: str


class TickPart(BaseModel):
    type: Literal["tick"] = "tick"
    value: int


class TokenPart(BaseModel):
    type: Literal["token"] = "token"
    value: Token


KnownEventPart = Annotated[
    Union[
        AccountPart,
        ActionPart,
        AmountPart,
        ContractCallPart,
        DurationPart,
        HexPart,
        NumberPart,
        RolePart,
        TextPart,
        TickPart,
        TokenPart,
    ],
    Field(discriminator="type"),
]


class EventMeta(BaseModel):
    """Parties of an event, used only for viewer filtering."""

    from_address: str | None = None
    to_address: str | None = None


class KnownEvent(BaseModel):
    """A human-meaningful description of what happened in a transaction."""

    type: KnownEventType
    parts: list[KnownEventPart] = Field(min_length=1)
    note: str | list[tuple[str, KnownEventPart]] | None = None
    meta: EventMeta | None = None
    failed: bool = False


class FeeTransfer(BaseModel):
    """Internal marker for a fee payment log; aggregated into a `fee` event, never returned."""

    type: Literal["fee transfer"] = "fee transfer"
    amount: int
    token: str


DetectionResult = KnownEvent | FeeTransfer
