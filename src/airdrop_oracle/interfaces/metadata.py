"""MetadataResolver protocol - display fields for the minted NFT."""

from __future__ import annotations

from typing import Protocol

from airdrop_oracle.models.claims import ClaimInfo, TokenMetadata


class MetadataResolver(Protocol):
    """Resolves the collection name and token URI of the original NFT."""

    async def resolve(self, claim: ClaimInfo) -> TokenMetadata:
        ...
