"""
Wallet address validation.

Config entries are plain strings; everything past this module works with
``solders`` public keys only.
"""
from typing import List, Sequence

import structlog
from solders.pubkey import Pubkey

from .exceptions import InvalidAddressError

logger = structlog.get_logger()


def parse_wallet(value: str) -> Pubkey:
    """
    Convert a base58 address string into a public key.

    Raises:
        InvalidAddressError: If the string is not a 32-byte base58 key
    """
    if not isinstance(value, str):
        raise InvalidAddressError(value, "not a string")
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidAddressError(value, str(e)) from e


def parse_wallets(values: Sequence[str]) -> List[Pubkey]:
    """
    Validate wallet strings in order, stopping at the first bad one.

    Args:
        values: Address strings as listed in the config

    Returns:
        Public keys in the same order as ``values``
    """
    wallets = []
    for value in values:
        wallets.append(parse_wallet(value))
    logger.info("wallets_validated", count=len(wallets))
    return wallets
