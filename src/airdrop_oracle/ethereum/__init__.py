"""Ethereum (source chain) integration components."""

from airdrop_oracle.ethereum.erc721 import ContractCallReverted, Erc721Contract

__all__ = ["ContractCallReverted", "Erc721Contract"]
