"""
Configuration for wallet-balances: the wallet list loader and logging setup.
"""
from .settings import WalletConfig, load_config
from .logging import configure_logging, log_error

__all__ = [
    'WalletConfig',
    'load_config',
    'configure_logging',
    'log_error',
]
