"""Gas and oracle object resolution for the oracle account."""

from __future__ import annotations

import logging

from airdrop_oracle.errors import IntegrityError, NotFoundError
from airdrop_oracle.interfaces.connection import Connection
from airdrop_oracle.models.chain import OwnedObject, ResolvedAuthority

log = logging.getLogger(__name__)

GAS_COIN_TYPE = "0x2::Coin::Coin<0x2::GAS::GAS>"


def format_object_id(object_id: str) -> str:
    """Return the 0x-prefixed form of an object id."""
    if object_id.startswith("0x"):
        return object_id
    return f"0x{object_id}"


def oracle_object_type(package: str, module: str, admin_identifier: str) -> str:
    return f"{package}::{module}::{admin_identifier}"


def select_gas_and_oracle(
    objects: list[OwnedObject], oracle_type: str
) -> ResolvedAuthority:
    """Pick the first gas coin and the single oracle capability from ``objects``."""
    gas = next((o for o in objects if o.object_type == GAS_COIN_TYPE), None)
    if gas is None:
        raise NotFoundError(f"No {GAS_COIN_TYPE} object owned by the oracle account")

    oracles = [o for o in objects if o.object_type == oracle_type]
    if len(oracles) != 1:
        raise IntegrityError(
            f"Unexpected number of oracle objects of type {oracle_type}: "
            f"{[o.object_id for o in oracles]}"
        )

    return ResolvedAuthority(
        gas_object_id=format_object_id(gas.object_id),
        oracle_object_id=format_object_id(oracles[0].object_id),
    )


async def resolve_gas_and_oracle(
    connection: Connection, oracle_address: str, oracle_type: str
) -> ResolvedAuthority:
    """Query the oracle account's objects once and select gas + oracle."""
    objects = await connection.get_objects_owned_by(oracle_address)
    log.debug("Oracle account %s owns %d objects", oracle_address, len(objects))
    authority = select_gas_and_oracle(objects, oracle_type)
    log.debug(
        "Resolved gas=%s oracle=%s", authority.gas_object_id, authority.oracle_object_id,
    )
    return authority
