"""Airdrop claim service - ties parsing, verification and minting together."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from airdrop_oracle.airdrop.builder import build_mint_invocation
from airdrop_oracle.airdrop.parser import parse_claim_info
from airdrop_oracle.airdrop.resolver import oracle_object_type, resolve_gas_and_oracle
from airdrop_oracle.errors import ClaimError, IntegrityError, TransientError
from airdrop_oracle.interfaces.connection import Connection
from airdrop_oracle.interfaces.metadata import MetadataResolver
from airdrop_oracle.interfaces.verifier import ClaimVerifier
from airdrop_oracle.models.chain import MoveCallResult
from airdrop_oracle.models.claims import (
    AirdropClaimRequest,
    AirdropClaimResponse,
    ClaimInfo,
)
from airdrop_oracle.models.config import OracleConfig

log = logging.getLogger(__name__)

T = TypeVar("T")


def explorer_link(base_url: str, object_id: str) -> str:
    """Sui explorer page for ``object_id``."""
    return f"{base_url.rstrip('/')}/objects/{object_id.removeprefix('0x')}"


class AirdropService:
    """Mints a linked Sui NFT for each verified source-chain claim.

    The oracle account signs and pays for every mint. Claims against the
    same oracle account are serialized from object resolution through
    submission so two mints never race for the same gas coin.
    """

    def __init__(
        self,
        config: OracleConfig,
        connection_factory: Callable[[], Connection],
        verifier: ClaimVerifier,
        metadata: MetadataResolver,
    ) -> None:
        self._config = config
        self._connection_factory = connection_factory
        self._verifier = verifier
        self._metadata = metadata
        self._oracle_type = oracle_object_type(
            config.contract.package,
            config.contract.module,
            config.contract.admin_identifier,
        )
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def oracle_type(self) -> str:
        return self._oracle_type

    def _lock_for(self, address: str) -> asyncio.Lock:
        lock = self._locks.get(address)
        if lock is None:
            lock = self._locks[address] = asyncio.Lock()
        return lock

    async def _bounded(self, aw: Awaitable[T], what: str) -> T:
        try:
            return await asyncio.wait_for(aw, timeout=self._config.rpc_timeout)
        except asyncio.TimeoutError as exc:
            raise TransientError(
                f"{what} did not complete within {self._config.rpc_timeout}s"
            ) from exc

    async def claim(self, request: AirdropClaimRequest) -> AirdropClaimResponse:
        """Verify a claim, mint the linked NFT and describe the result."""
        claim = parse_claim_info(request.wallet_message, self._config.supported_chains)
        log.info(
            "Claim received: %s %s #%s -> %s",
            claim.source_chain, claim.source_contract_address,
            claim.source_token_id, claim.destination_sui_address,
        )

        try:
            await self._bounded(self._verifier.verify(request, claim), "claim verification")
            object_id = await self._mint(claim)
        except ClaimError as exc:
            if exc.status_code >= 500:
                log.error(
                    "Claim for %s #%s failed: %s",
                    claim.source_contract_address, claim.source_token_id, exc,
                )
            else:
                log.info(
                    "Claim for %s #%s rejected: %s",
                    claim.source_contract_address, claim.source_token_id, exc,
                )
            raise

        return AirdropClaimResponse(
            source_chain=claim.source_chain,
            source_contract_address=claim.source_contract_address,
            source_token_id=claim.source_token_id,
            sui_explorer_link=explorer_link(self._config.explorer_base_url, object_id),
        )

    async def _mint(self, claim: ClaimInfo) -> str:
        """Resolve authority, execute the mint call and return the created object id."""
        metadata = await self._bounded(self._metadata.resolve(claim), "metadata lookup")
        oracle_address = self._config.oracle_address

        connection = self._connection_factory()
        try:
            async with self._lock_for(oracle_address):
                authority = await self._bounded(
                    resolve_gas_and_oracle(connection, oracle_address, self._oracle_type),
                    "oracle object query",
                )
                invocation = build_mint_invocation(
                    claim, authority, metadata, self._config.contract, oracle_address,
                )
                result: MoveCallResult = await self._bounded(
                    connection.call_move_function(invocation), "move call",
                )
        finally:
            await connection.close()

        if len(result.created) != 1:
            raise IntegrityError(
                f"Unexpected number of objects created: {list(result.created)} "
                f"(tx {result.digest or '?'})"
            )

        object_id = result.created[0]
        log.info("Created object %s (tx %s)", object_id, result.digest or "?")
        return object_id
