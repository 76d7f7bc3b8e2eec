"""Wallet message parser - extracts the claim from EIP-712 typed data."""

from __future__ import annotations

import json
import re
from collections.abc import Collection

from airdrop_oracle.errors import ValidationError
from airdrop_oracle.models.claims import ClaimInfo

CLAIM_FIELDS = (
    "source_chain",
    "source_contract_address",
    "source_token_id",
    "source_owner_address",
    "destination_sui_address",
)

_TOKEN_ID_RE = re.compile(r"[0-9]+")
_SUI_ADDRESS_RE = re.compile(r"(0x)?[0-9a-fA-F]{1,64}")

# The mint entry function takes the token id as a u64
MAX_TOKEN_ID = 2**64 - 1


def load_wallet_message(wallet_message: str) -> dict:
    """Deserialize the wallet message into the typed-data document."""
    try:
        data = json.loads(wallet_message)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            "Wallet message is not valid JSON", field="wallet_message", value=wallet_message,
        ) from exc
    if not isinstance(data, dict):
        raise ValidationError(
            "Wrong format for wallet message", field="wallet_message", value=data,
        )
    return data


def parse_claim_info(
    wallet_message: str,
    supported_chains: Collection[str] | None = None,
) -> ClaimInfo:
    """Parse and structurally validate the claim carried in ``wallet_message``.

    The claim lives under the ``message`` key of the typed data. All five
    fields must be non-empty strings and ``source_token_id`` must be a
    plain decimal number no larger than ``MAX_TOKEN_ID``.
    """
    data = load_wallet_message(wallet_message)
    message = data.get("message")
    if not isinstance(message, dict):
        raise ValidationError("Wrong format for wallet message", field="message", value=message)

    for name in CLAIM_FIELDS:
        value = message.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Missing or empty claim field", field=name, value=value)

    claim = ClaimInfo(**{name: message[name] for name in CLAIM_FIELDS})

    if supported_chains is not None and claim.source_chain not in supported_chains:
        raise ValidationError(
            "Unsupported source chain", field="source_chain", value=claim.source_chain,
        )
    if not _TOKEN_ID_RE.fullmatch(claim.source_token_id):
        raise ValidationError(
            "Token id must be a non-negative decimal integer",
            field="source_token_id",
            value=claim.source_token_id,
        )
    if claim.token_id > MAX_TOKEN_ID:
        raise ValidationError(
            "Token id does not fit in a u64",
            field="source_token_id",
            value=claim.source_token_id,
        )
    if not _SUI_ADDRESS_RE.fullmatch(claim.destination_sui_address):
        raise ValidationError(
            "Destination is not a Sui address",
            field="destination_sui_address",
            value=claim.destination_sui_address,
        )
    return claim
