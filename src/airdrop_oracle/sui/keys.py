"""Oracle signing key loading."""

from __future__ import annotations

import base64
import binascii

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

ED25519_FLAG = 0x00


def load_ed25519_key(encoded: str) -> Ed25519PrivateKey:
    """Load an Ed25519 key from a base64 keystore entry.

    Accepts a 32-byte seed, a 33-byte flag-prefixed seed, or a 64-byte
    seed+public key pair as written by older Sui keystores.
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Oracle private key is not valid base64") from exc

    if len(raw) == 33 and raw[0] == ED25519_FLAG:
        raw = raw[1:]
    elif len(raw) == 64:
        raw = raw[:32]
    if len(raw) != 32:
        raise ValueError(f"Unsupported oracle key length: {len(raw)} bytes")
    return Ed25519PrivateKey.from_private_bytes(raw)


def public_key_bytes(key: Ed25519PrivateKey) -> bytes:
    return key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
