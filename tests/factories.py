"""Synthetic claim and chain-object factories for testing."""

from __future__ import annotations

import json

from eth_account import Account
from eth_account.messages import encode_typed_data

from airdrop_oracle.airdrop.resolver import GAS_COIN_TYPE
from airdrop_oracle.models.chain import OwnedObject
from airdrop_oracle.models.claims import AirdropClaimRequest

ORACLE_ADDRESS = "0x6cb8fa2c9e6d9c4b3a0b2a1bcd9a5b2e0e4e3f71"
GAS_OBJECT_ID = "5a3c9e1f2b7d4a6e8c0b1d2f3a4b5c6d7e8f9a0b"
ORACLE_OBJECT_ID = "9f0e1d2c3b4a59687766554433221100ffeeddcc"
CREATED_OBJECT_ID = "7bc832ec31709638cd8d9323e90edf332gff4389"

ORACLE_TYPE = "0x2::CrossChainAirdrop::CrossChainAirdropOracle"

# Key from the web3.py documentation; never funded.
CLAIMER_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"

CLAIM_DEFAULTS = {
    "source_chain": "ethereum",
    "source_contract_address": "0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D",
    "source_token_id": "8937",
    "source_owner_address": "0x09dbc4a902199bbe7f7ec29b3714731786f2e878",
    "destination_sui_address": "0xa5e6dbcf33730ace6ec8b400ff4788c1f150ff7e",
}

_CLAIM_TYPES = {
    "EIP712Domain": [
        {"name": "name", "type": "string"},
        {"name": "version", "type": "string"},
        {"name": "chainId", "type": "uint256"},
    ],
    "ClaimRequest": [
        {"name": "source_chain", "type": "string"},
        {"name": "source_contract_address", "type": "string"},
        {"name": "source_token_id", "type": "string"},
        {"name": "source_owner_address", "type": "string"},
        {"name": "destination_sui_address", "type": "string"},
    ],
}


def make_typed_data(**overrides) -> dict:
    """EIP-712 typed data carrying a claim, as a wallet would sign it."""
    message = dict(CLAIM_DEFAULTS)
    message.update(overrides)
    return {
        "domain": {"chainId": 1, "name": "SuiDrop", "version": "1"},
        "message": message,
        "primaryType": "ClaimRequest",
        "types": _CLAIM_TYPES,
    }


def make_request(signature: str = "abc", **overrides) -> AirdropClaimRequest:
    return AirdropClaimRequest(
        wallet_message=json.dumps(make_typed_data(**overrides)),
        signature=signature,
    )


def make_signed_request(private_key: str = CLAIMER_KEY, **overrides) -> AirdropClaimRequest:
    """A request whose signature recovers to the claimed source owner."""
    account = Account.from_key(private_key)
    overrides.setdefault("source_owner_address", account.address)
    typed_data = make_typed_data(**overrides)
    signed = Account.sign_message(encode_typed_data(full_message=typed_data), private_key)
    return AirdropClaimRequest(
        wallet_message=json.dumps(typed_data),
        signature="0x" + bytes(signed.signature).hex(),
    )


def make_owned_objects(
    gas_ids: tuple[str, ...] = (GAS_OBJECT_ID,),
    oracle_ids: tuple[str, ...] = (ORACLE_OBJECT_ID,),
    oracle_type: str = ORACLE_TYPE,
    extra: tuple[OwnedObject, ...] = (),
) -> list[OwnedObject]:
    """Objects owned by the oracle account: unrelated ones first."""
    objects = list(extra)
    objects += [OwnedObject(object_id=i, object_type=GAS_COIN_TYPE) for i in gas_ids]
    objects += [OwnedObject(object_id=i, object_type=oracle_type) for i in oracle_ids]
    return objects
