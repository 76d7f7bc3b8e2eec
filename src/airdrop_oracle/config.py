"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from airdrop_oracle.models.config import ContractCoordinates, OracleConfig

_TRUE = {"1", "true", "yes", "on"}


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE


def _as_chains(value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(v).strip() for v in value if str(v).strip())


def load_config(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> OracleConfig:
    """Load oracle configuration from a TOML file and environment variables.

    Priority (highest wins):
        1. Environment variables (SUI_GATEWAY_ENDPOINT, ORACLE_ADDRESS, etc.)
        2. TOML config file
        3. Defaults from OracleConfig
    """
    env = os.environ if environ is None else environ

    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    values: dict = {}
    contract: dict = {}

    # ── Sui section ────────────────────────────────────────
    sui = raw.get("sui", {})
    if v := sui.get("gateway_endpoint"):
        values["gateway_endpoint"] = str(v)
    if v := sui.get("rpc_timeout"):
        values["rpc_timeout"] = float(v)
    if v := sui.get("explorer_base_url"):
        values["explorer_base_url"] = str(v)

    # ── Oracle section ─────────────────────────────────────
    oracle = raw.get("oracle", {})
    if v := oracle.get("address"):
        values["oracle_address"] = str(v)
    if v := oracle.get("private_key"):
        values["oracle_private_key"] = str(v)

    # ── Contract section ───────────────────────────────────
    contract_raw = raw.get("contract", {})
    for key in ("package", "module", "entry_function", "admin_identifier"):
        if v := contract_raw.get(key):
            contract[key] = str(v)

    # ── Source chain section ───────────────────────────────
    source = raw.get("source", {})
    if (v := source.get("supported_chains")) is not None:
        values["supported_chains"] = _as_chains(v)
    if v := source.get("ethereum_rpc_url"):
        values["ethereum_rpc_url"] = str(v)
    for key in ("verify_signature", "verify_ownership", "onchain_metadata"):
        if key in source:
            values[key] = _as_bool(source[key])

    # ── Metadata section ───────────────────────────────────
    metadata = raw.get("metadata", {})
    if v := metadata.get("collection_name"):
        values["collection_name"] = str(v)
    if v := metadata.get("token_uri"):
        values["token_uri"] = str(v)

    # ── Logging section ────────────────────────────────────
    if v := raw.get("logging", {}).get("level"):
        values["log_level"] = str(v)

    # ── Environment variable overrides (highest priority) ──
    if v := env.get("SUI_GATEWAY_ENDPOINT"):
        values["gateway_endpoint"] = v
    if v := env.get("SUI_EXPLORER_BASE_URL"):
        values["explorer_base_url"] = v
    if v := env.get("ORACLE_ADDRESS"):
        values["oracle_address"] = v
    if v := env.get("ORACLE_PRIVATE_KEY"):
        values["oracle_private_key"] = v
    if v := env.get("ORACLE_CONTRACT_PACKAGE"):
        contract["package"] = v
    if v := env.get("ORACLE_CONTRACT_MODULE"):
        contract["module"] = v
    if v := env.get("ORACLE_CONTRACT_ENTRY_FUNCTION"):
        contract["entry_function"] = v
    if v := env.get("ORACLE_CONTRACT_ADMIN_IDENTIFIER"):
        contract["admin_identifier"] = v
    if v := env.get("ETHEREUM_RPC_URL"):
        values["ethereum_rpc_url"] = v

    return OracleConfig(contract=ContractCoordinates(**contract), **values)
