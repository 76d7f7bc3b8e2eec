"""Sui gateway connection - object queries and move call execution over JSON-RPC."""

from __future__ import annotations

import base64
import logging

import httpx
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from airdrop_oracle.errors import ChainRequestError
from airdrop_oracle.jsonrpc import JsonRpcClient
from airdrop_oracle.models.chain import MintInvocation, MoveCallResult, OwnedObject
from airdrop_oracle.sui.keys import public_key_bytes

log = logging.getLogger(__name__)

SIGNATURE_SCHEME = "ED25519"


def _parse_owned_object(raw: dict) -> OwnedObject:
    return OwnedObject(
        object_id=str(raw.get("objectId") or raw.get("id") or ""),
        object_type=str(raw.get("type") or raw.get("objType") or ""),
    )


def _parse_effects(result: dict) -> MoveCallResult:
    """Extract created object ids and the digest from an execution response."""
    response = result.get("EffectResponse", result)
    effects = (response.get("effects") or {}) if isinstance(response, dict) else None
    if not isinstance(effects, dict):
        raise ChainRequestError(f"Malformed effects in execution response: {effects!r}")
    entries = effects.get("created") or []
    if not isinstance(entries, list):
        raise ChainRequestError(f"Malformed created list in effects: {entries!r}")

    created = []
    for entry in entries:
        ref = entry.get("reference", entry) if isinstance(entry, dict) else None
        if not isinstance(ref, dict):
            raise ChainRequestError(f"Malformed created entry in effects: {entry!r}")
        object_id = ref.get("objectId") or ref.get("id")
        if object_id:
            created.append(str(object_id))

    certificate = response.get("certificate")
    if not isinstance(certificate, dict):
        certificate = {}
    digest = certificate.get("transactionDigest") or effects.get("transactionDigest") or ""
    return MoveCallResult(created=tuple(created), digest=str(digest))


class SuiGatewayConnection:
    """Talks to a Sui gateway on behalf of the oracle account.

    Move calls go through the gateway's two-step flow: ``sui_moveCall``
    returns unsigned transaction bytes, which are signed locally with the
    oracle key and handed back to ``sui_executeTransaction``.
    """

    def __init__(
        self,
        endpoint: str,
        keypair: Ed25519PrivateKey | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._rpc = JsonRpcClient(endpoint, timeout=timeout, transport=transport)
        self._keypair = keypair

    @property
    def endpoint(self) -> str:
        return self._rpc.url

    async def close(self) -> None:
        """Nothing to release; each request uses its own httpx client."""

    async def get_objects_owned_by(self, address: str) -> list[OwnedObject]:
        result = await self._rpc.call("sui_getObjectsOwnedByAddress", [address])
        if not isinstance(result, list):
            raise ChainRequestError(
                f"sui_getObjectsOwnedByAddress returned {type(result).__name__}, expected list"
            )
        return [_parse_owned_object(o) for o in result if isinstance(o, dict)]

    async def call_move_function(self, invocation: MintInvocation) -> MoveCallResult:
        if self._keypair is None:
            raise ChainRequestError("No oracle key configured, cannot sign move calls")

        req = invocation.to_request()
        unsigned = await self._rpc.call(
            "sui_moveCall",
            [
                req["signer"],
                req["packageObjectId"],
                req["module"],
                req["function"],
                req["typeArguments"],
                req["arguments"],
                req["gas"],
                req["gasBudget"],
            ],
        )
        if not isinstance(unsigned, dict) or "txBytes" not in unsigned:
            raise ChainRequestError("sui_moveCall response has no txBytes")

        tx_bytes = unsigned["txBytes"]
        signature = self._keypair.sign(base64.b64decode(tx_bytes))
        log.debug(
            "Executing %s::%s::%s as %s",
            invocation.package_object_id, invocation.module, invocation.function,
            invocation.sender,
        )

        result = await self._rpc.call(
            "sui_executeTransaction",
            [
                tx_bytes,
                SIGNATURE_SCHEME,
                base64.b64encode(signature).decode("ascii"),
                base64.b64encode(public_key_bytes(self._keypair)).decode("ascii"),
            ],
        )
        if not isinstance(result, dict):
            raise ChainRequestError("sui_executeTransaction returned no effects")
        return _parse_effects(result)
