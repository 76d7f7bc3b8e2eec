"""Mint invocation builder - binds a claim to the airdrop entry function."""

from __future__ import annotations

from airdrop_oracle.models.chain import MintInvocation, ResolvedAuthority
from airdrop_oracle.models.claims import ClaimInfo, TokenMetadata
from airdrop_oracle.models.config import ContractCoordinates

DEFAULT_GAS_BUDGET = 2000


def build_mint_invocation(
    claim: ClaimInfo,
    authority: ResolvedAuthority,
    metadata: TokenMetadata,
    contract: ContractCoordinates,
    oracle_address: str,
) -> MintInvocation:
    """Assemble the move call that mints the airdrop NFT to the claimant.

    The argument order matches the entry function signature and must not
    change. The oracle account is always the sender.
    """
    arguments = (
        authority.oracle_object_id,
        claim.destination_sui_address,
        claim.source_contract_address,
        claim.token_id,
        metadata.name,
        metadata.token_uri,
    )
    return MintInvocation(
        package_object_id=contract.package,
        module=contract.module,
        function=contract.entry_function,
        arguments=arguments,
        gas_object_id=authority.gas_object_id,
        gas_budget=DEFAULT_GAS_BUDGET,
        sender=oracle_address,
    )
