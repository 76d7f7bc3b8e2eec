"""Configuration model for the oracle service."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PACKAGE = "0x2"
DEFAULT_MODULE = "CrossChainAirdrop"
DEFAULT_ENTRY_FUNCTION = "claim"
DEFAULT_ADMIN_IDENTIFIER = "CrossChainAirdropOracle"


@dataclass(frozen=True)
class ContractCoordinates:
    """Where the airdrop entry function lives on Sui."""

    package: str = DEFAULT_PACKAGE
    module: str = DEFAULT_MODULE
    entry_function: str = DEFAULT_ENTRY_FUNCTION
    admin_identifier: str = DEFAULT_ADMIN_IDENTIFIER


@dataclass(frozen=True)
class OracleConfig:
    """Complete oracle configuration. Built once at startup."""

    # Sui
    gateway_endpoint: str = "http://127.0.0.1:5001"
    rpc_timeout: float = 30.0  # seconds per chain round trip
    explorer_base_url: str = "https://djgd7fpxio1yh.cloudfront.net"

    # Oracle account
    oracle_address: str = ""
    oracle_private_key: str = ""  # base64 Ed25519 seed, from ORACLE_PRIVATE_KEY

    # Contract
    contract: ContractCoordinates = ContractCoordinates()

    # Source chain
    supported_chains: tuple[str, ...] = ("ethereum",)
    ethereum_rpc_url: str = ""
    verify_signature: bool = True
    verify_ownership: bool = False  # needs ethereum_rpc_url
    onchain_metadata: bool = False  # needs ethereum_rpc_url

    # Display metadata used when not read from the source chain
    collection_name: str = "BoredApeYachtClub"
    token_uri: str = "ipfs://abc"

    log_level: str = "info"
