"""Reusable builders for KnownEvent parts.

Keeps detectors close to the sentence they produce, e.g.
    [action_part("Send"), amount_part(amount), text_part("to"), account_part(to)]
"""

from knownevents.parser.utils.types import (
    AccountPart,
    ActionPart,
    Amount,
    AmountPart,
    ContractCall,
    ContractCallPart,
    DurationPart,
    HexPart,
    NumberPart,
    RolePart,
    TextPart,
    TickPart,
    Token,
    TokenPart,
)


def action_part(value: str) -> ActionPart:
    return ActionPart(value=value)


def text_part(value: str) -> TextPart:
    return TextPart(value=value)


def account_part(address: str) -> AccountPart:
    return AccountPart(value=address)


def amount_part(amount: Amount) -> AmountPart:
    return AmountPart(value=amount)


def token_part(address: str, symbol: str | None = None) -> TokenPart:
    return TokenPart(value=Token(address=address, symbol=symbol))


def role_part(role: str) -> RolePart:
    return RolePart(value=role)


def tick_part(tick: int) -> TickPart:
    return TickPart(value=tick)


def hex_part(value: str) -> HexPart:
    return HexPart(value=value)


def duration_part(seconds: int) -> DurationPart:
    return DurationPart(value=seconds)


def number_part(value: int | float, decimals: int | None = None) -> NumberPart:
    """Plain number, or a (value, decimals) pair when the token's decimals are known."""
    if decimals is None:
        return NumberPart(value=value)
    return NumberPart(value=(value, decimals))


def contract_call_part(address: str, call_input: str) -> ContractCallPart:
    return ContractCallPart(value=ContractCall(address=address, input=call_input))


def policy_part(policy_id: int) -> TextPart:
    return TextPart(value=f"#{policy_id}")
