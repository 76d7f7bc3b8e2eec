"""Claim request/response DTOs and the parsed claim payload."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from airdrop_oracle.errors import ValidationError


@dataclass(frozen=True)
class ClaimInfo:
    """The claim fields embedded in an EIP-712 wallet message."""

    source_chain: str  # "ethereum"
    source_contract_address: str  # NFT contract on the source chain
    source_token_id: str  # decimal string
    source_owner_address: str  # claimer's wallet on the source chain
    destination_sui_address: str  # recipient of the minted NFT

    @property
    def token_id(self) -> int:
        return int(self.source_token_id)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AirdropClaimRequest:
    """The params for an airdrop claim request.

    ``wallet_message`` is the JSON-encoded EIP-712 typed data; ``signature``
    is its signature by the private key of ``source_owner_address``.
    """

    wallet_message: str
    signature: str

    @classmethod
    def from_dict(cls, payload: object) -> AirdropClaimRequest:
        if not isinstance(payload, dict):
            raise ValidationError(
                "Claim request must be a JSON object", field="body", value=payload,
            )
        for key in ("wallet_message", "signature"):
            value = payload.get(key)
            if not isinstance(value, str) or not value:
                raise ValidationError(
                    f"Missing or invalid '{key}'", field=key, value=value,
                )
        return cls(
            wallet_message=payload["wallet_message"],
            signature=payload["signature"],
        )


@dataclass(frozen=True)
class AirdropClaimResponse:
    """The response for an airdrop claim request."""

    source_chain: str
    source_contract_address: str
    source_token_id: str
    sui_explorer_link: str  # link to the newly minted NFT

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TokenMetadata:
    """Display fields passed to the mint entry function."""

    name: str
    token_uri: str
