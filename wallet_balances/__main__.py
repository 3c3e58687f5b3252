import sys
import time
import asyncio
from typing import Awaitable, Tuple, TypeVar

import structlog
from solana.rpc.async_api import AsyncClient

from .config import WalletConfig, configure_logging, load_config, log_error
from .addresses import parse_wallets
from .exceptions import WalletBalanceError
from .fetchers import get_all_balances, get_all_balances_batched
from .report import print_report

logger = structlog.get_logger()

T = TypeVar("T")


async def timed(label: str, operation: Awaitable[T]) -> Tuple[T, float]:
    """Await ``operation`` and return its result with the elapsed seconds."""
    start = time.perf_counter()
    result = await operation
    elapsed = time.perf_counter() - start
    logger.info("strategy_finished", strategy=label, seconds=elapsed)
    return result, elapsed


async def run(config: WalletConfig) -> int:
    """Validate the wallets, run both lookup methods one after the other and print the report."""
    # No client exists until every wallet is valid
    wallets = parse_wallets(config.wallets)

    async with AsyncClient(config.rpc_url) as client:
        balances_1, duration_1 = await timed("per_wallet", get_all_balances(client, wallets))
        balances_2, duration_2 = await timed("batched", get_all_balances_batched(client, wallets))

    print_report(duration_1, duration_2, balances_1, balances_2)
    return 0


def main():
    """Main entry point for wallet-balances."""
    configure_logging()

    try:
        config = load_config()
        return asyncio.run(run(config))
    except WalletBalanceError as e:
        log_error(logger, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
