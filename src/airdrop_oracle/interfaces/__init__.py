"""Protocol interfaces for the pluggable airdrop_oracle components."""

from airdrop_oracle.interfaces.connection import Connection
from airdrop_oracle.interfaces.metadata import MetadataResolver
from airdrop_oracle.interfaces.verifier import ClaimVerifier

__all__ = [
    "Connection",
    "MetadataResolver",
    "ClaimVerifier",
]
