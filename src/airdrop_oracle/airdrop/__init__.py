"""Airdrop claim flow - parsing, verification, object resolution and minting."""

from airdrop_oracle.airdrop.builder import DEFAULT_GAS_BUDGET, build_mint_invocation
from airdrop_oracle.airdrop.metadata import Erc721MetadataResolver, StaticMetadataResolver
from airdrop_oracle.airdrop.parser import parse_claim_info
from airdrop_oracle.airdrop.resolver import (
    GAS_COIN_TYPE,
    format_object_id,
    oracle_object_type,
    resolve_gas_and_oracle,
)
from airdrop_oracle.airdrop.service import AirdropService
from airdrop_oracle.airdrop.verification import (
    ChainedClaimVerifier,
    Eip712SignatureVerifier,
    Erc721OwnershipVerifier,
)

__all__ = [
    "AirdropService",
    "ChainedClaimVerifier",
    "DEFAULT_GAS_BUDGET",
    "Eip712SignatureVerifier",
    "Erc721MetadataResolver",
    "Erc721OwnershipVerifier",
    "GAS_COIN_TYPE",
    "StaticMetadataResolver",
    "build_mint_invocation",
    "format_object_id",
    "oracle_object_type",
    "parse_claim_info",
    "resolve_gas_and_oracle",
]
