"""Fake RPC client and sample addresses shared by the tests."""
import asyncio
from typing import Dict, List, Optional
from unittest.mock import Mock

from solana.rpc.core import RPCException
from solders.rpc.responses import GetBalanceResp

# Well-known program and mint addresses, used here only as valid public keys
SYSTEM_PROGRAM = "11111111111111111111111111111111"
WRAPPED_SOL_MINT = "So11111111111111111111111111111111111111112"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


class FakeRpcClient:
    """
    Stand-in for ``AsyncClient`` backed by a dict of lamport balances.

    Wallets missing from ``balances`` have no account: ``get_balance`` reports
    0 for them, like a real node, and ``get_multiple_accounts`` returns None.
    """

    def __init__(self, balances: Dict[str, int], delays: Optional[Dict[str, float]] = None,
                 fail_on: Optional[str] = None, garbled_reply_on: Optional[str] = None):
        self.balances = balances
        self.delays = delays or {}
        self.fail_on = fail_on
        self.garbled_reply_on = garbled_reply_on
        self.balance_calls: List[str] = []
        self.multiple_accounts_calls: List[List[str]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    async def get_balance(self, pubkey):
        address = str(pubkey)
        self.balance_calls.append(address)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(address, 0))
        finally:
            self.in_flight -= 1
        if address == self.fail_on:
            raise RPCException(f"node error for {address}")
        if address == self.garbled_reply_on:
            # Same parse step AsyncClient runs on the HTTP body
            return GetBalanceResp.from_json("<html>502 Bad Gateway</html>")
        return Mock(value=self.balances.get(address, 0))

    async def get_multiple_accounts(self, pubkeys):
        addresses = [str(pubkey) for pubkey in pubkeys]
        self.multiple_accounts_calls.append(addresses)
        if self.fail_on in addresses:
            raise RPCException("node error for getMultipleAccounts")
        accounts = [
            Mock(lamports=self.balances[address]) if address in self.balances else None
            for address in addresses
        ]
        return Mock(value=accounts)

    async def close(self):
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
