"""Constants for wallet-balances."""

# Config
CONFIG_PATH = "config.yaml"  # Resolved against the working directory

# Units
LAMPORTS_PER_SOL = 1_000_000_000  # Lamports in one SOL
MAX_LAMPORTS = 2**64 - 1  # Balances are u64 on chain

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
