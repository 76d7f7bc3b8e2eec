"""
Exceptions raised while processing an airdrop claim.

Every error carries the HTTP status a boundary layer should answer with and
a ``public_message`` that is safe to show to the claimant. Server-side
faults keep their detail in the exception message for the logs only.
"""
from typing import Any, Optional

_GENERIC_FAULT = "Internal server error"


class ClaimError(Exception):
    """Base exception for claim processing errors."""

    status_code = 500

    @property
    def public_message(self) -> str:
        return _GENERIC_FAULT


class ValidationError(ClaimError):
    """Raised when the claim payload is malformed or incomplete."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message)

    @property
    def public_message(self) -> str:
        if self.field is None:
            return str(self)
        return f"{self}: {self.field}={self.value!r}"


class AuthenticationError(ClaimError):
    """Raised when the signature or the source-chain ownership check fails."""

    status_code = 401

    @property
    def public_message(self) -> str:
        return str(self)


class NotFoundError(ClaimError):
    """Raised when a required on-chain object is missing."""
    pass


class IntegrityError(ClaimError):
    """Raised when on-chain state breaks an invariant the oracle relies on."""
    pass


class ChainRequestError(ClaimError):
    """Raised when a chain node rejects a JSON-RPC request."""

    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        super().__init__(message)


class TransientError(ClaimError):
    """Raised on timeouts or transport failures talking to a chain node."""

    status_code = 503

    @property
    def public_message(self) -> str:
        return "Service temporarily unavailable"
