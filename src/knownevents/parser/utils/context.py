"""DetectionContext: read-only inputs shared by every detector for one classification."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from knownevents.parser.utils.addresses import same_address
from knownevents.parser.utils.types import Amount, GetTokenMetadataFn, TokenMetadata

logger = logging.getLogger(__name__)


class DetectionContext:
    """Enrichment callback, memo map and viewer information for one transaction.

    The memo map is frozen on construction; detectors only read from it.
    """

    def __init__(
        self,
        get_token_metadata: GetTokenMetadataFn | None = None,
        mint_burn_memos: Mapping[str, str] | None = None,
        viewer: str | None = None,
        transaction_sender: str | None = None,
    ) -> None:
        self._get_token_metadata = get_token_metadata
        self.mint_burn_memos: Mapping[str, str] = MappingProxyType(dict(mint_burn_memos or {}))
        self.viewer = viewer
        self.transaction_sender = transaction_sender

    def token_metadata(self, token: str) -> TokenMetadata | None:
        """Look up symbol/decimals. A failing or malformed lookup counts as unknown."""
        if self._get_token_metadata is None:
            return None
        try:
            metadata = self._get_token_metadata(token)
            if metadata is None or isinstance(metadata, TokenMetadata):
                return metadata
            return TokenMetadata.model_validate(metadata)
        except Exception:
            logger.warning("Token metadata lookup failed for %s", token, exc_info=True)
            return None

    def create_amount(self, value: int, token: str) -> Amount:
        metadata = self.token_metadata(token)
        if metadata is None:
            return Amount(token=token, value=value)
        return Amount(token=token, value=value, decimals=metadata.decimals, symbol=metadata.symbol)

    def memo_for(self, key: str) -> str | None:
        return self.mint_burn_memos.get(key)

    def is_viewer(self, address: str | None) -> bool:
        return self.viewer is not None and same_address(address, self.viewer)


def metadata_lookup(mapping: Mapping[str, TokenMetadata | dict]) -> GetTokenMetadataFn:
    """Turn pre-fetched metadata (token address -> metadata) into a synchronous callback."""
    by_address = {address.lower(): metadata for address, metadata in mapping.items()}

    def get_token_metadata(token: str) -> TokenMetadata | dict | None:
        return by_address.get(token.lower())

    return get_token_metadata
