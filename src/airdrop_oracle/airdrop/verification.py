"""Claim verifiers - signature and source-chain ownership checks."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from eth_account import Account
from eth_account.messages import encode_typed_data

from airdrop_oracle.airdrop.parser import load_wallet_message
from airdrop_oracle.errors import AuthenticationError
from airdrop_oracle.ethereum.erc721 import ContractCallReverted, Erc721Contract
from airdrop_oracle.interfaces.verifier import ClaimVerifier
from airdrop_oracle.models.claims import AirdropClaimRequest, ClaimInfo

log = logging.getLogger(__name__)


class Eip712SignatureVerifier:
    """Requires the wallet message to be signed by ``source_owner_address``.

    The wallet message is EIP-712 typed data; the signer is recovered from
    the signature and compared case-insensitively with the claimed owner.
    """

    async def verify(self, request: AirdropClaimRequest, claim: ClaimInfo) -> None:
        typed_data = load_wallet_message(request.wallet_message)
        try:
            signable = encode_typed_data(full_message=typed_data)
            signer = Account.recover_message(signable, signature=request.signature)
        except Exception as exc:
            log.info("Signature recovery failed for %s: %s", claim.source_owner_address, exc)
            raise AuthenticationError("Invalid signature for wallet message") from exc

        if signer.lower() != claim.source_owner_address.lower():
            log.info(
                "Signature by %s does not match claimed owner %s",
                signer, claim.source_owner_address,
            )
            raise AuthenticationError("Wallet message was not signed by source_owner_address")


class Erc721OwnershipVerifier:
    """Requires ``source_owner_address`` to currently own the claimed token."""

    def __init__(self, contract_factory: Callable[[str], Erc721Contract]) -> None:
        self._contract_factory = contract_factory

    async def verify(self, request: AirdropClaimRequest, claim: ClaimInfo) -> None:
        contract = self._contract_factory(claim.source_contract_address)
        try:
            owner = await contract.owner_of(claim.token_id)
        except ContractCallReverted as exc:
            raise AuthenticationError(
                f"Token {claim.source_token_id} does not exist on {claim.source_contract_address}"
            ) from exc

        if owner.lower() != claim.source_owner_address.lower():
            raise AuthenticationError(
                f"{claim.source_owner_address} does not own token {claim.source_token_id}"
            )
        log.debug(
            "Ownership confirmed: %s owns %s #%s",
            owner, claim.source_contract_address, claim.source_token_id,
        )


class ChainedClaimVerifier:
    """Runs verifiers in order; the first rejection wins."""

    def __init__(self, verifiers: Sequence[ClaimVerifier] = ()) -> None:
        self._verifiers = list(verifiers)
        if not self._verifiers:
            log.warning("Claim verification is disabled; every claim will be accepted")

    async def verify(self, request: AirdropClaimRequest, claim: ClaimInfo) -> None:
        for verifier in self._verifiers:
            await verifier.verify(request, claim)
