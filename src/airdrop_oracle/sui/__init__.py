"""Sui (destination chain) integration components."""

from airdrop_oracle.sui.connection import SuiGatewayConnection
from airdrop_oracle.sui.keys import load_ed25519_key

__all__ = ["SuiGatewayConnection", "load_ed25519_key"]
