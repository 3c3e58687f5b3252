"""Compare per-wallet and batched Solana balance lookups."""

__version__ = "0.1.0"
