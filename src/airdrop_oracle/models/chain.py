"""Sui-side value types: owned objects, resolved authority, move calls."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OwnedObject:
    """An object owned by an address, as listed by the gateway."""

    object_id: str
    object_type: str


@dataclass(frozen=True)
class ResolvedAuthority:
    """Gas coin and oracle capability of the oracle account for one claim."""

    gas_object_id: str
    oracle_object_id: str


@dataclass(frozen=True)
class MintInvocation:
    """A fully bound move call minting one airdrop NFT."""

    package_object_id: str
    module: str
    function: str
    arguments: tuple
    gas_object_id: str
    gas_budget: int
    sender: str
    type_arguments: tuple = ()

    def to_request(self) -> dict:
        return {
            "signer": self.sender,
            "packageObjectId": self.package_object_id,
            "module": self.module,
            "function": self.function,
            "typeArguments": list(self.type_arguments),
            "arguments": list(self.arguments),
            "gas": self.gas_object_id,
            "gasBudget": self.gas_budget,
        }


@dataclass(frozen=True)
class MoveCallResult:
    """Effects summary of an executed move call."""

    created: tuple[str, ...] = field(default_factory=tuple)
    digest: str = ""
