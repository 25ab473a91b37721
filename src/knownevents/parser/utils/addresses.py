"""Address comparison helpers. Comparison is case-insensitive; inputs are not validated."""

from knownevents.config import settings

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def same_address(a: str | None, b: str | None) -> bool:
    if not a or not b:
        return False
    return a.lower() == b.lower()


def is_zero_address(address: str | None) -> bool:
    return same_address(address, ZERO_ADDRESS)


def is_fee_manager(address: str | None) -> bool:
    """Fee collection address: transfers into it are fee payments by convention."""
    return same_address(address, settings.fee_manager_address)


def is_stablecoin_dex(address: str | None) -> bool:
    return same_address(address, settings.stablecoin_dex_address)


def is_validator_config(address: str | None) -> bool:
    return same_address(address, settings.validator_config_address)
