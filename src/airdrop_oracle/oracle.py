"""Service wiring - builds an AirdropService from an OracleConfig."""

from __future__ import annotations

import logging
from functools import partial

from airdrop_oracle.airdrop.metadata import Erc721MetadataResolver, StaticMetadataResolver
from airdrop_oracle.airdrop.service import AirdropService
from airdrop_oracle.airdrop.verification import (
    ChainedClaimVerifier,
    Eip712SignatureVerifier,
    Erc721OwnershipVerifier,
)
from airdrop_oracle.ethereum.erc721 import Erc721Contract
from airdrop_oracle.interfaces.connection import Connection
from airdrop_oracle.interfaces.metadata import MetadataResolver
from airdrop_oracle.interfaces.verifier import ClaimVerifier
from airdrop_oracle.models.claims import AirdropClaimRequest
from airdrop_oracle.models.config import OracleConfig
from airdrop_oracle.sui.connection import SuiGatewayConnection
from airdrop_oracle.sui.keys import load_ed25519_key

log = logging.getLogger(__name__)


def _erc721_factory(cfg: OracleConfig, feature: str) -> partial[Erc721Contract]:
    if not cfg.ethereum_rpc_url:
        raise ValueError(f"{feature} requires an Ethereum RPC URL (ETHEREUM_RPC_URL)")
    return partial(Erc721Contract, cfg.ethereum_rpc_url, timeout=cfg.rpc_timeout)


def build_verifier(cfg: OracleConfig) -> ClaimVerifier:
    verifiers: list[ClaimVerifier] = []
    if cfg.verify_signature:
        verifiers.append(Eip712SignatureVerifier())
    if cfg.verify_ownership:
        verifiers.append(Erc721OwnershipVerifier(_erc721_factory(cfg, "verify_ownership")))
    return ChainedClaimVerifier(verifiers)


def build_metadata_resolver(cfg: OracleConfig) -> MetadataResolver:
    if cfg.onchain_metadata:
        return Erc721MetadataResolver(_erc721_factory(cfg, "onchain_metadata"))
    return StaticMetadataResolver(cfg.collection_name, cfg.token_uri)


def build_connection_factory(cfg: OracleConfig):
    """Return a zero-argument callable opening a gateway connection per claim."""
    keypair = load_ed25519_key(cfg.oracle_private_key) if cfg.oracle_private_key else None
    if keypair is None:
        log.warning("No oracle private key configured; move calls cannot be signed")

    def _open() -> Connection:
        return SuiGatewayConnection(cfg.gateway_endpoint, keypair, timeout=cfg.rpc_timeout)

    return _open


def build_service(cfg: OracleConfig) -> AirdropService:
    """Wire the production components for ``cfg``."""
    log.info("Building airdrop service")
    log.info("  Gateway: %s", cfg.gateway_endpoint)
    log.info("  Oracle:  %s", cfg.oracle_address)
    log.info(
        "  Entry:   %s::%s::%s",
        cfg.contract.package, cfg.contract.module, cfg.contract.entry_function,
    )
    return AirdropService(
        config=cfg,
        connection_factory=build_connection_factory(cfg),
        verifier=build_verifier(cfg),
        metadata=build_metadata_resolver(cfg),
    )


async def run_claim(cfg: OracleConfig, payload: object) -> dict:
    """Process one claim request payload and return the response DTO."""
    request = AirdropClaimRequest.from_dict(payload)
    service = build_service(cfg)
    response = await service.claim(request)
    return response.to_dict()
