import pytest

from knownevents.parser.utils.context import metadata_lookup

TOKEN = "0x2000000000000000000000000000000000000001"
TOKEN_B = "0x2000000000000000000000000000000000000002"


@pytest.fixture()
def token_metadata():
    """Synchronous lookup for the two test tokens (6 decimals, like Tempo stablecoins)."""
    return metadata_lookup({
        TOKEN: {"symbol": "AlphaUSD", "decimals": 6},
        TOKEN_B: {"symbol": "BetaUSD", "decimals": 6},
    })
