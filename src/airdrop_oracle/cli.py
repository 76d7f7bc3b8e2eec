"""CLI entry point for the airdrop oracle."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from airdrop_oracle.airdrop.resolver import (
    GAS_COIN_TYPE,
    oracle_object_type,
    select_gas_and_oracle,
)
from airdrop_oracle.config import load_config
from airdrop_oracle.errors import ClaimError
from airdrop_oracle.oracle import build_connection_factory, run_claim


def _require_oracle(cfg):
    """Exit with error if no oracle account is configured."""
    if not cfg.oracle_address:
        click.echo("Error: No oracle address configured.", err=True)
        click.echo("Set ORACLE_ADDRESS env var or [oracle] address in config.", err=True)
        sys.exit(1)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """airdrop-oracle - mint Sui NFTs for cross-chain airdrop claims."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg

    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show oracle configuration."""
    cfg = ctx.obj["config"]
    contract = cfg.contract
    click.echo(f"Gateway:    {cfg.gateway_endpoint}")
    click.echo(f"Explorer:   {cfg.explorer_base_url}")
    click.echo(f"Oracle:     {cfg.oracle_address or '(not set)'}")
    click.echo(f"Key:        {'***configured***' if cfg.oracle_private_key else '(not set)'}")
    click.echo(f"Entry:      {contract.package}::{contract.module}::{contract.entry_function}")
    click.echo(
        "Oracle obj: "
        + oracle_object_type(contract.package, contract.module, contract.admin_identifier)
    )
    click.echo(f"Chains:     {', '.join(cfg.supported_chains) or '(any)'}")
    click.echo(f"Signature:  {'verified' if cfg.verify_signature else 'NOT verified'}")
    click.echo(f"Ownership:  {'verified' if cfg.verify_ownership else 'NOT verified'}")
    click.echo(f"Eth RPC:    {cfg.ethereum_rpc_url or '(not set)'}")


@cli.command()
@click.pass_context
def objects(ctx: click.Context) -> None:
    """List the oracle account's objects and the gas/oracle selection."""
    cfg = ctx.obj["config"]
    _require_oracle(cfg)
    contract = cfg.contract
    oracle_type = oracle_object_type(
        contract.package, contract.module, contract.admin_identifier,
    )

    async def _objects():
        connection = build_connection_factory(cfg)()
        try:
            return await connection.get_objects_owned_by(cfg.oracle_address)
        finally:
            await connection.close()

    try:
        owned = asyncio.run(_objects())
    except ClaimError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Oracle {cfg.oracle_address} owns {len(owned)} objects")
    for obj in owned:
        marker = ""
        if obj.object_type == GAS_COIN_TYPE:
            marker = "  [gas]"
        elif obj.object_type == oracle_type:
            marker = "  [oracle]"
        click.echo(f"  {obj.object_id}  {obj.object_type}{marker}")

    try:
        authority = select_gas_and_oracle(owned, oracle_type)
    except ClaimError as exc:
        click.echo(f"\nNot ready to mint: {exc}", err=True)
        sys.exit(1)
    click.echo(f"\nGas:    {authority.gas_object_id}")
    click.echo(f"Oracle: {authority.oracle_object_id}")


# ── Claims ─────────────────────────────────────────────


@cli.command()
@click.argument("request_file", type=click.File("r"))
@click.pass_context
def claim(ctx: click.Context, request_file) -> None:
    """Process a claim request JSON file ('-' for stdin) and print the response."""
    cfg = ctx.obj["config"]
    _require_oracle(cfg)

    try:
        payload = json.load(request_file)
    except ValueError as exc:
        click.echo(f"Error: request is not valid JSON: {exc}", err=True)
        sys.exit(1)

    try:
        response = asyncio.run(run_claim(cfg, payload))
    except ClaimError as exc:
        click.echo(f"Error ({exc.status_code}): {exc.public_message}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(response, indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
