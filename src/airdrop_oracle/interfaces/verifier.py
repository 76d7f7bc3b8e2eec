"""ClaimVerifier protocol - authenticates a claim before any chain access."""

from __future__ import annotations

from typing import Protocol

from airdrop_oracle.models.claims import AirdropClaimRequest, ClaimInfo


class ClaimVerifier(Protocol):
    """Checks that the claimant is entitled to the claimed NFT."""

    async def verify(self, request: AirdropClaimRequest, claim: ClaimInfo) -> None:
        """Return normally if the claim is authentic, raise AuthenticationError if not."""
        ...
