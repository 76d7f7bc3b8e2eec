"""Read-only ERC-721 queries over Ethereum JSON-RPC ``eth_call``."""

from __future__ import annotations

import logging

import httpx
from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError

from airdrop_oracle.errors import ChainRequestError, ValidationError
from airdrop_oracle.jsonrpc import JsonRpcClient, JsonRpcError

log = logging.getLogger(__name__)

# 4-byte function selectors
SELECTOR_OWNER_OF = "6352211e"  # ownerOf(uint256)
SELECTOR_NAME = "06fdde03"  # name()
SELECTOR_TOKEN_URI = "c87b56dd"  # tokenURI(uint256)

# Geth and most providers report reverts with code 3 or -32000
_REVERT_CODES = {3, -32000, -32015}


class ContractCallReverted(ChainRequestError):
    """The call reverted, or the target has no contract code."""
    pass


class Erc721Contract:
    """Queries a single ERC-721 contract at ``address``."""

    def __init__(
        self,
        rpc_url: str,
        address: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._rpc = JsonRpcClient(rpc_url, timeout=timeout, transport=transport)
        self._address = address

    @property
    def address(self) -> str:
        return self._address

    async def owner_of(self, token_id: int) -> str:
        """Current owner of ``token_id`` as a checksummed address."""
        (owner,) = await self._call(SELECTOR_OWNER_OF, ["address"], ["uint256"], [token_id])
        return owner

    async def name(self) -> str:
        (value,) = await self._call(SELECTOR_NAME, ["string"])
        return value

    async def token_uri(self, token_id: int) -> str:
        (value,) = await self._call(SELECTOR_TOKEN_URI, ["string"], ["uint256"], [token_id])
        return value

    async def _call(
        self,
        selector: str,
        output_types: list[str],
        input_types: list[str] | None = None,
        args: list | None = None,
    ) -> tuple:
        data = "0x" + selector
        if input_types:
            try:
                data += encode(input_types, args or []).hex()
            except EncodingError as exc:
                raise ValidationError(
                    f"Cannot encode arguments for eth_call 0x{selector}: {exc}",
                    field="args",
                    value=args,
                ) from exc

        try:
            result = await self._rpc.call(
                "eth_call", [{"to": self._address, "data": data}, "latest"],
            )
        except JsonRpcError as exc:
            if exc.code in _REVERT_CODES or "revert" in str(exc).lower():
                raise ContractCallReverted(
                    f"eth_call 0x{selector} on {self._address} reverted"
                ) from exc
            raise

        if not isinstance(result, str) or result in ("0x", ""):
            raise ContractCallReverted(
                f"eth_call 0x{selector} on {self._address} returned no data"
            )
        try:
            return decode(output_types, bytes.fromhex(result.removeprefix("0x")))
        except (DecodingError, ValueError) as exc:
            raise ChainRequestError(
                f"Could not decode eth_call 0x{selector} result from {self._address}"
            ) from exc
