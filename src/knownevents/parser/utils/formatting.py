"""Plain-text rendering of known events (CLI output, logs)."""

from decimal import Decimal

from eth_utils import keccak

from knownevents.parser.utils.types import Amount, KnownEvent, KnownEventPart

KNOWN_ROLES = (
    "DEFAULT_ADMIN_ROLE",
    "ISSUER_ROLE",
    "PAUSE_ROLE",
    "UNPAUSE_ROLE",
    "BURN_BLOCKED_ROLE",
)

_ROLE_NAMES = {"0x" + keccak(text=role).hex(): role for role in KNOWN_ROLES}


def shorten_hex(value: str, chars: int = 4) -> str:
    """0x1234…abcd"""
    if len(value) < chars * 2 + 2:
        return value
    return f"{value[:chars + 2]}…{value[-chars:]}"


def role_name(role: str) -> str | None:
    return _ROLE_NAMES.get(role.lower())


def format_duration(seconds: int) -> str:
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    parts = []
    if days > 0:
        parts.append(f"{days} day{'s' if days > 1 else ''}")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def format_amount(value: int, decimals: int | None = None) -> str:
    """Decimal-adjusted amount with thousands separators. Without decimals the raw integer is shown."""
    if decimals is None:
        return f"{value:,}"
    quantity = Decimal(value).scaleb(-decimals)
    if 0 < quantity < Decimal("0.01"):
        return "<0.01"
    return f"{quantity.normalize():,f}"


def _format_token_amount(amount: Amount) -> str:
    return f"{format_amount(amount.value, amount.decimals)} {amount.symbol or shorten_hex(amount.token)}"


def render_part(part: KnownEventPart) -> str:
    if part.type in ("action", "text"):
        return part.value
    if part.type in ("account", "hex"):
        return shorten_hex(part.value)
    if part.type == "role":
        return role_name(part.value) or shorten_hex(part.value)
    if part.type == "amount":
        return _format_token_amount(part.value)
    if part.type == "token":
        return part.value.symbol or shorten_hex(part.value.address)
    if part.type == "contractCall":
        return shorten_hex(part.value.address)
    if part.type == "duration":
        return format_duration(part.value)
    if part.type == "number":
        if isinstance(part.value, tuple):
            return format_amount(*part.value)
        return f"{part.value:,}"
    return str(part.value)


def render_text(event: KnownEvent) -> str:
    """Render parts left to right, e.g. `Send 1.5 USD to 0x1111…1111`."""
    text = " ".join(render_part(part) for part in event.parts)
    if event.failed:
        text += " (failed)"
    return text


def render_note(event: KnownEvent) -> str | None:
    if event.note is None:
        return None
    if isinstance(event.note, str):
        return event.note
    return ", ".join(f"{label}: {render_part(part)}" for label, part in event.note)
