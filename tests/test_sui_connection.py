"""Sui gateway connection against a mocked JSON-RPC endpoint."""

from __future__ import annotations

import base64
import json

import httpx
import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from airdrop_oracle.airdrop.resolver import GAS_COIN_TYPE
from airdrop_oracle.errors import ChainRequestError, TransientError
from airdrop_oracle.jsonrpc import JsonRpcError
from airdrop_oracle.models.chain import MintInvocation
from airdrop_oracle.sui.connection import SuiGatewayConnection
from airdrop_oracle.sui.keys import load_ed25519_key, public_key_bytes

from tests.factories import (
    CREATED_OBJECT_ID,
    GAS_OBJECT_ID,
    ORACLE_ADDRESS,
    ORACLE_OBJECT_ID,
    ORACLE_TYPE,
)

ENDPOINT = "http://127.0.0.1:5001"
TX_BYTES = b"TransactionData::mock-move-call"
SEED = bytes(range(32))

INVOCATION = MintInvocation(
    package_object_id="0x2",
    module="CrossChainAirdrop",
    function="claim",
    arguments=(
        f"0x{ORACLE_OBJECT_ID}",
        "0xa5e6dbcf33730ace6ec8b400ff4788c1f150ff7e",
        "0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D",
        8937,
        "BoredApeYachtClub",
        "ipfs://abc",
    ),
    gas_object_id=f"0x{GAS_OBJECT_ID}",
    gas_budget=2000,
    sender=ORACLE_ADDRESS,
)


class GatewayStub:
    """Answers the gateway methods used by SuiGatewayConnection."""

    def __init__(self, created=(CREATED_OBJECT_ID,), errors: dict | None = None) -> None:
        self.created = created
        self.errors = errors or {}
        self.requests: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        method = body["method"]
        if method in self.errors:
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "error": self.errors[method]})
        result = getattr(self, method)(body["params"])
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    def sui_getObjectsOwnedByAddress(self, params):
        return [
            {"objectId": GAS_OBJECT_ID, "version": 1, "digest": "d1", "type": GAS_COIN_TYPE},
            {"objectId": ORACLE_OBJECT_ID, "version": 3, "digest": "d2", "type": ORACLE_TYPE},
        ]

    def sui_moveCall(self, params):
        return {"txBytes": base64.b64encode(TX_BYTES).decode()}

    def sui_executeTransaction(self, params):
        tx_bytes, scheme, signature, pub_key = params
        Ed25519PublicKey.from_public_bytes(base64.b64decode(pub_key)).verify(
            base64.b64decode(signature), base64.b64decode(tx_bytes),
        )
        assert scheme == "ED25519"
        return {
            "EffectResponse": {
                "certificate": {"transactionDigest": "txDigest123"},
                "effects": {
                    "status": {"status": "success"},
                    "created": [
                        {"owner": {"AddressOwner": "0xa5e6"}, "reference": {"objectId": oid, "version": 1}}
                        for oid in self.created
                    ],
                },
            }
        }


def _connection(stub, keypair=None) -> SuiGatewayConnection:
    keypair = keypair or Ed25519PrivateKey.from_private_bytes(SEED)
    return SuiGatewayConnection(
        ENDPOINT, keypair, timeout=1.0, transport=httpx.MockTransport(stub),
    )


async def test_lists_owned_objects():
    stub = GatewayStub()
    objects = await _connection(stub).get_objects_owned_by(ORACLE_ADDRESS)

    assert [(o.object_id, o.object_type) for o in objects] == [
        (GAS_OBJECT_ID, GAS_COIN_TYPE),
        (ORACLE_OBJECT_ID, ORACLE_TYPE),
    ]
    assert stub.requests[0]["params"] == [ORACLE_ADDRESS]


async def test_move_call_is_signed_and_executed():
    stub = GatewayStub()

    result = await _connection(stub).call_move_function(INVOCATION)

    assert result.created == (CREATED_OBJECT_ID,)
    assert result.digest == "txDigest123"
    assert [r["method"] for r in stub.requests] == ["sui_moveCall", "sui_executeTransaction"]
    assert stub.requests[0]["params"] == [
        ORACLE_ADDRESS,
        "0x2",
        "CrossChainAirdrop",
        "claim",
        [],
        list(INVOCATION.arguments),
        f"0x{GAS_OBJECT_ID}",
        2000,
    ]


async def test_multiple_created_objects_are_all_reported():
    stub = GatewayStub(created=("a1", "a2"))
    result = await _connection(stub).call_move_function(INVOCATION)
    assert result.created == ("a1", "a2")


class MalformedEffectsStub(GatewayStub):
    def __init__(self, effects) -> None:
        super().__init__()
        self.effects = effects

    def sui_executeTransaction(self, params):
        return {"EffectResponse": {"effects": self.effects}}


@pytest.mark.parametrize(
    "effects",
    [{"created": ["0xabc"]}, {"created": "0xabc"}, {"created": [{"reference": "0xabc"}]}, ["0xabc"]],
    ids=["string-entries", "string-list", "string-reference", "list-effects"],
)
async def test_malformed_effects_raise_chain_error(effects):
    stub = MalformedEffectsStub(effects)

    with pytest.raises(ChainRequestError):
        await _connection(stub).call_move_function(INVOCATION)


async def test_rpc_error_raises_chain_error():
    stub = GatewayStub(errors={"sui_moveCall": {"code": -32000, "message": "gas budget too low"}})

    with pytest.raises(JsonRpcError) as exc_info:
        await _connection(stub).call_move_function(INVOCATION)

    assert exc_info.value.code == -32000
    assert isinstance(exc_info.value, ChainRequestError)
    assert exc_info.value.public_message == "Internal server error"


async def test_move_call_without_key_is_refused():
    stub = GatewayStub()
    connection = SuiGatewayConnection(ENDPOINT, None, transport=httpx.MockTransport(stub))

    with pytest.raises(ChainRequestError):
        await connection.call_move_function(INVOCATION)
    assert stub.requests == []


async def test_unreachable_gateway_is_transient():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransientError):
        await _connection(handler).get_objects_owned_by(ORACLE_ADDRESS)


# ── Key loading ───────────────────────────────────────────────────


@pytest.mark.parametrize(
    "raw",
    [SEED, bytes([0]) + SEED, SEED + bytes(32)],
    ids=["seed", "flagged", "keypair"],
)
def test_load_ed25519_key_formats(raw):
    key = load_ed25519_key(base64.b64encode(raw).decode())
    expected = Ed25519PrivateKey.from_private_bytes(SEED)
    assert public_key_bytes(key) == public_key_bytes(expected)


@pytest.mark.parametrize("encoded", ["not base64!", base64.b64encode(b"short").decode()])
def test_load_ed25519_key_rejects_bad_input(encoded):
    with pytest.raises(ValueError):
        load_ed25519_key(encoded)
