"""Connection protocol - the Sui node operations the claim flow needs."""

from __future__ import annotations

from typing import Protocol

from airdrop_oracle.models.chain import MintInvocation, MoveCallResult, OwnedObject


class Connection(Protocol):
    """A connection to the destination chain."""

    async def get_objects_owned_by(self, address: str) -> list[OwnedObject]:
        """List every object owned by ``address``."""
        ...

    async def call_move_function(self, invocation: MintInvocation) -> MoveCallResult:
        """Build, sign and execute a move call. One round trip, no retries."""
        ...

    async def close(self) -> None:
        ...
