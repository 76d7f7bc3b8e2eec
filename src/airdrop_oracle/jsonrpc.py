"""Minimal JSON-RPC 2.0 client over httpx, shared by the Sui and Ethereum adapters."""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

from airdrop_oracle.errors import ChainRequestError, TransientError

log = logging.getLogger(__name__)


class JsonRpcError(ChainRequestError):
    """The node answered with a JSON-RPC ``error`` object."""

    def __init__(self, method: str, code: int | None, message: str, data: Any = None):
        self.method = method
        self.data = data
        super().__init__(f"{method} failed ({code}): {message}", code=code)


class JsonRpcClient:
    """Posts JSON-RPC requests to a single endpoint.

    Timeouts and transport failures become TransientError; non-2xx
    responses and JSON-RPC errors become ChainRequestError.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport
        self._ids = itertools.count(1)

    @property
    def url(self) -> str:
        return self._url

    async def call(self, method: str, params: list) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        log.debug("%s -> %s", method, self._url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport,
            ) as client:
                resp = await client.post(self._url, json=payload)
                resp.raise_for_status()
                body = resp.json()
        except httpx.TimeoutException as exc:
            raise TransientError(f"{method} timed out after {self._timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status >= 500:
                raise TransientError(f"{method} failed: HTTP {status}") from exc
            raise ChainRequestError(f"{method} failed: HTTP {status}") from exc
        except httpx.TransportError as exc:
            raise TransientError(f"{method} transport error: {exc}") from exc
        except ValueError as exc:
            raise ChainRequestError(f"{method} returned a non-JSON body") from exc

        if not isinstance(body, dict):
            raise ChainRequestError(f"{method} returned an unexpected body: {body!r}")

        error = body.get("error")
        if error is not None:
            if not isinstance(error, dict):
                error = {"message": str(error)}
            raise JsonRpcError(
                method, error.get("code"), error.get("message", ""), error.get("data"),
            )
        return body.get("result")
