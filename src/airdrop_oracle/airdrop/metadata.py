"""Metadata resolvers - collection name and token URI for the minted NFT."""

from __future__ import annotations

import logging
from typing import Callable

from airdrop_oracle.errors import AuthenticationError
from airdrop_oracle.ethereum.erc721 import ContractCallReverted, Erc721Contract
from airdrop_oracle.models.claims import ClaimInfo, TokenMetadata

log = logging.getLogger(__name__)


class StaticMetadataResolver:
    """Returns the same configured metadata for every claim."""

    def __init__(self, name: str, token_uri: str) -> None:
        self._metadata = TokenMetadata(name=name, token_uri=token_uri)

    async def resolve(self, claim: ClaimInfo) -> TokenMetadata:
        return self._metadata


class Erc721MetadataResolver:
    """Reads ``name()`` and ``tokenURI(id)`` from the source contract."""

    def __init__(self, contract_factory: Callable[[str], Erc721Contract]) -> None:
        self._contract_factory = contract_factory

    async def resolve(self, claim: ClaimInfo) -> TokenMetadata:
        contract = self._contract_factory(claim.source_contract_address)
        try:
            name = await contract.name()
            token_uri = await contract.token_uri(claim.token_id)
        except ContractCallReverted as exc:
            raise AuthenticationError(
                f"Token {claim.source_token_id} does not exist on {claim.source_contract_address}"
            ) from exc
        log.debug("Metadata for %s #%s: %s %s", contract.address, claim.token_id, name, token_uri)
        return TokenMetadata(name=name, token_uri=token_uri)
