"""Data models for the airdrop oracle."""

from airdrop_oracle.models.chain import (
    MintInvocation,
    MoveCallResult,
    OwnedObject,
    ResolvedAuthority,
)
from airdrop_oracle.models.claims import (
    AirdropClaimRequest,
    AirdropClaimResponse,
    ClaimInfo,
    TokenMetadata,
)
from airdrop_oracle.models.config import ContractCoordinates, OracleConfig

__all__ = [
    "MintInvocation", "MoveCallResult", "OwnedObject", "ResolvedAuthority",
    "AirdropClaimRequest", "AirdropClaimResponse", "ClaimInfo", "TokenMetadata",
    "ContractCoordinates", "OracleConfig",
]
