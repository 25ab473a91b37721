"""Event and call-data decoding against the known Tempo interfaces.

Signatures from `abis.py` are parsed once into specs keyed by topic0 (events)
or 4-byte selector (functions); eth-abi does the actual word decoding.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils import decode_hex, keccak, to_checksum_address

from knownevents.parser.abis import ABIS
from knownevents.parser.utils.types import Log, ParsedEvent

logger = logging.getLogger(__name__)

_DECODE_ERRORS = (DecodingError, ValueError, TypeError, OverflowError)


@dataclass(frozen=True)
class ParamSpec:
    name: str
    abi_type: str
    indexed: bool = False

    @property
    def is_dynamic(self) -> bool:
        """Indexed dynamic values are stored as their keccak hash, not the value."""
        return self.abi_type in ("string", "bytes") or self.abi_type.endswith("]")


@dataclass(frozen=True)
class EventSpec:
    family: str
    name: str
    params: tuple[ParamSpec, ...]
    topic0: str

    @property
    def indexed_params(self) -> tuple[ParamSpec, ...]:
        return tuple(p for p in self.params if p.indexed)

    @property
    def data_params(self) -> tuple[ParamSpec, ...]:
        return tuple(p for p in self.params if not p.indexed)

    @property
    def arg_names(self) -> frozenset[str]:
        return frozenset(p.name for p in self.params)


@dataclass(frozen=True)
class FunctionSpec:
    family: str
    name: str
    params: tuple[ParamSpec, ...]
    selector: str


def _parse_params(params_str: str) -> tuple[ParamSpec, ...]:
    params = []
    for i, fragment in enumerate(p for p in params_str.split(",") if p.strip()):
        tokens = fragment.split()
        indexed = "indexed" in tokens
        tokens = [t for t in tokens if t != "indexed"]
        name = tokens[-1] if len(tokens) > 1 else f"arg{i}"
        params.append(ParamSpec(name=name, abi_type=tokens[0], indexed=indexed))
    return tuple(params)


def parse_signature(signature: str, family: str) -> EventSpec | FunctionSpec:
    """Parse `Name(type [indexed] name, ...)` or `function name(...)` into a spec."""
    sig = signature.strip()
    is_function = sig.startswith("function ")
    if is_function:
        sig = sig[len("function "):].strip()

    open_paren = sig.find("(")
    close_paren = sig.rfind(")")
    if open_paren <= 0 or close_paren < open_paren:
        raise ValueError(f"Invalid signature: {signature}")

    name = sig[:open_paren].strip()
    params = _parse_params(sig[open_paren + 1:close_paren])
    canonical = f"{name}({','.join(p.abi_type for p in params)})"
    digest = keccak(text=canonical)

    if is_function:
        return FunctionSpec(family=family, name=name, params=params, selector="0x" + digest[:4].hex())
    return EventSpec(family=family, name=name, params=params, topic0="0x" + digest.hex())


class EventRegistry:
    """Lookup tables over a set of interface families."""

    def __init__(self, abis: dict[str, tuple[str, ...]]) -> None:
        self._events: list[EventSpec] = []
        self._events_by_topic: dict[str, list[EventSpec]] = {}
        self._functions: dict[str, dict[str, FunctionSpec]] = {}

        for family, signatures in abis.items():
            for signature in signatures:
                spec = parse_signature(signature, family)
                if isinstance(spec, FunctionSpec):
                    self._functions.setdefault(family, {})[spec.selector] = spec
                else:
                    self._events.append(spec)
                    self._events_by_topic.setdefault(spec.topic0, []).append(spec)

    def events_for(self, topic0: str) -> list[EventSpec]:
        return self._events_by_topic.get(topic0.lower(), [])

    def find_event(
        self,
        name: str,
        *,
        family: str | None = None,
        arg_names: set[str] | None = None,
    ) -> EventSpec | None:
        """Find an event by name. Reused names (Mint, Burn) are told apart by argument names."""
        candidates = [
            s for s in self._events
            if s.name == name and (family is None or s.family == family)
        ]
        if arg_names is not None:
            candidates = [s for s in candidates if s.arg_names == frozenset(arg_names)]
        return candidates[0] if len(candidates) == 1 else None

    def function(self, family: str, selector: str) -> FunctionSpec | None:
        return self._functions.get(family, {}).get(selector.lower())

    def find_function(self, family: str, name: str) -> FunctionSpec | None:
        for spec in self._functions.get(family, {}).values():
            if spec.name == name:
                return spec
        return None


@lru_cache(maxsize=1)
def default_registry() -> EventRegistry:
    return EventRegistry(ABIS)


def _normalize(abi_type: str, value: Any) -> Any:
    if abi_type == "address":
        return to_checksum_address(value)
    if isinstance(value, bytes):
        return "0x" + value.hex()
    return value


def _decode_event_args(spec: EventSpec, log: Log) -> dict[str, Any] | None:
    indexed = spec.indexed_params
    if len(log.topics) != len(indexed) + 1:
        return None

    args: dict[str, Any] = {}
    try:
        for param, topic in zip(indexed, log.topics[1:]):
            if param.is_dynamic:
                args[param.name] = topic.lower()
                continue
            (value,) = decode([param.abi_type], decode_hex(topic))
            args[param.name] = _normalize(param.abi_type, value)

        data_params = spec.data_params
        if data_params:
            values = decode([p.abi_type for p in data_params], decode_hex(log.data or "0x"))
            for param, value in zip(data_params, values):
                args[param.name] = _normalize(param.abi_type, value)
    except _DECODE_ERRORS as exc:
        logger.debug("Cannot decode %s log from %s: %s", spec.name, log.address, exc)
        return None

    return {p.name: args[p.name] for p in spec.params}


def decode_log(log: Log, registry: EventRegistry | None = None) -> ParsedEvent | None:
    """Decode one log; None when topic0 is unknown or the payload does not fit the signature."""
    registry = registry or default_registry()
    if not log.topics:
        return None

    for spec in registry.events_for(log.topics[0]):
        args = _decode_event_args(spec, log)
        if args is None:
            continue
        try:
            address = to_checksum_address(log.address)
        except _DECODE_ERRORS:
            logger.debug("Skipping %s log with invalid emitter %r", spec.name, log.address)
            return None
        return ParsedEvent(
            address=address,
            event_name=spec.name,
            args=args,
            topics=tuple(t.lower() for t in log.topics),
            log_index=log.log_index,
        )
    return None


def decode_logs(logs: list[Log], registry: EventRegistry | None = None) -> list[ParsedEvent]:
    """Decode every recognizable log, preserving order."""
    events = []
    for log in logs:
        event = decode_log(log, registry)
        if event is not None:
            events.append(event)
    return events


def decode_function_data(
    family: str,
    data: str | None,
    registry: EventRegistry | None = None,
) -> tuple[FunctionSpec, dict[str, Any]] | None:
    """Decode call data against one family's functions. None if the selector is unknown."""
    registry = registry or default_registry()
    try:
        raw = decode_hex(data)
    except _DECODE_ERRORS:
        return None
    if len(raw) < 4:
        return None

    spec = registry.function(family, "0x" + raw[:4].hex())
    if spec is None:
        return None

    try:
        values = decode([p.abi_type for p in spec.params], raw[4:])
    except _DECODE_ERRORS as exc:
        logger.debug("Cannot decode %s.%s call data: %s", family, spec.name, exc)
        return None
    return spec, {p.name: _normalize(p.abi_type, v) for p, v in zip(spec.params, values)}


# --- Encoding (demo receipts, tests) ---


def _encodable(abi_type: str, value: Any) -> Any:
    if abi_type.startswith("bytes") and isinstance(value, str):
        return decode_hex(value)
    return value


def encode_log(
    event_name: str,
    address: str,
    *,
    family: str | None = None,
    log_index: int | None = None,
    registry: EventRegistry | None = None,
    **args: Any,
) -> Log:
    """Build a raw log for a known event.

    Argument names that clash with Python keywords take a trailing underscore:
        encode_log("Transfer", token, from_=alice, to=bob, amount=100)
    """
    registry = registry or default_registry()
    args = {name.rstrip("_"): value for name, value in args.items()}
    spec = registry.find_event(event_name, family=family, arg_names=set(args))
    if spec is None:
        raise ValueError(f"No known event {event_name} with arguments {sorted(args)}")

    topics = [spec.topic0]
    for param in spec.indexed_params:
        value = _encodable(param.abi_type, args[param.name])
        if param.is_dynamic:
            raw = value.encode() if isinstance(value, str) else value
            topics.append("0x" + keccak(raw).hex())
        else:
            topics.append("0x" + encode([param.abi_type], [value]).hex())

    data_params = spec.data_params
    data = encode(
        [p.abi_type for p in data_params],
        [_encodable(p.abi_type, args[p.name]) for p in data_params],
    )
    return Log(address=address, topics=tuple(topics), data="0x" + data.hex(), log_index=log_index)


def encode_function_data(
    family: str,
    function_name: str,
    registry: EventRegistry | None = None,
    **args: Any,
) -> str:
    registry = registry or default_registry()
    spec = registry.find_function(family, function_name)
    if spec is None:
        raise ValueError(f"No known function {family}.{function_name}")
    data = encode(
        [p.abi_type for p in spec.params],
        [_encodable(p.abi_type, args[p.name]) for p in spec.params],
    )
    return spec.selector + data.hex()


def pad_memo(text: str | bytes) -> bytes:
    """Left-pad a memo to bytes32, the way wallets fill TransferWithMemo."""
    raw = text.encode() if isinstance(text, str) else text
    if len(raw) > 32:
        raise ValueError("memo longer than 32 bytes")
    return raw.rjust(32, b"\x00")
