"""
Balance lookups against a Solana RPC node.

Two strategies are provided so their latency can be compared:

- ``get_all_balances`` sends one ``getBalance`` request per wallet and awaits
  them together.
- ``get_all_balances_batched`` sends a single ``getMultipleAccounts`` request.

Both return results in the order the wallets were given.
"""
import asyncio
from typing import List, Sequence

import structlog
from pydantic import BaseModel, ConfigDict, Field
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.errors import SerdeJSONError
from solders.pubkey import Pubkey

from .constants import MAX_LAMPORTS
from .exceptions import RpcRequestError

logger = structlog.get_logger()

# SerdeJSONError: reply body the client could not parse
RPC_ERRORS = (SolanaRpcException, RPCException, SerdeJSONError)


class BalanceResult(BaseModel):
    """Balance of one wallet in lamports."""
    model_config = ConfigDict(frozen=True)

    address: str
    lamports: int = Field(ge=0, le=MAX_LAMPORTS)


def _describe(error: Exception) -> str:
    # SolanaRpcException keeps its text in error_msg, not args
    return getattr(error, "error_msg", None) or str(error) or type(error).__name__


async def get_balance(client: AsyncClient, wallet: Pubkey) -> BalanceResult:
    """
    Fetch the balance of a single wallet.

    Raises:
        RpcRequestError: If the request fails
    """
    try:
        response = await client.get_balance(wallet)
    except RPC_ERRORS as e:
        raise RpcRequestError("getBalance", _describe(e)) from e
    return BalanceResult(address=str(wallet), lamports=response.value)


async def get_all_balances(client: AsyncClient, wallets: Sequence[Pubkey]) -> List[BalanceResult]:
    """
    Fetch balances with one concurrent request per wallet.

    The first failed request fails the whole call and the other results are
    dropped.
    """
    results = await asyncio.gather(*(get_balance(client, wallet) for wallet in wallets))
    logger.info("balances_fetched", method="getBalance", requests=len(wallets))
    return list(results)


async def get_all_balances_batched(client: AsyncClient, wallets: Sequence[Pubkey]) -> List[BalanceResult]:
    """
    Fetch balances with a single getMultipleAccounts request.

    Wallets without an account on chain are reported with a zero balance,
    the same as a funded-then-emptied account.

    Raises:
        RpcRequestError: If the request fails
    """
    wallets = list(wallets)
    if not wallets:
        return []

    try:
        response = await client.get_multiple_accounts(wallets)
    except RPC_ERRORS as e:
        raise RpcRequestError("getMultipleAccounts", _describe(e)) from e

    accounts = response.value
    if len(accounts) != len(wallets):
        raise RpcRequestError(
            "getMultipleAccounts",
            f"expected {len(wallets)} accounts, node returned {len(accounts)}"
        )

    results = [
        BalanceResult(address=str(wallet), lamports=account.lamports if account is not None else 0)
        for wallet, account in zip(wallets, accounts)
    ]
    missing = sum(1 for account in accounts if account is None)
    logger.info("balances_fetched", method="getMultipleAccounts", requests=1, missing_accounts=missing)
    return results
