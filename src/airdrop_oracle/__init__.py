"""airdrop_oracle - mints Sui NFTs for verified cross-chain airdrop claims."""

__version__ = "0.1.0"
