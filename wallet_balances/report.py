"""Plain-text report of both lookup methods."""
from typing import Sequence

from .constants import LAMPORTS_PER_SOL
from .fetchers import BalanceResult


def lamports_to_sol(lamports: int) -> float:
    return lamports / LAMPORTS_PER_SOL


def format_duration(seconds: float) -> str:
    return f"{seconds:.6f}s"


def print_results(method: int, balances: Sequence[BalanceResult]) -> None:
    print(f"\nResults from method {method}:")
    for balance in balances:
        print(f"Wallet: {balance.address}, Balance: {lamports_to_sol(balance.lamports)} SOL")


def print_report(
    duration_1: float,
    duration_2: float,
    balances_1: Sequence[BalanceResult],
    balances_2: Sequence[BalanceResult],
) -> None:
    """
    Print timings first, then the balances from each method in SOL.

    Args:
        duration_1: Seconds taken by the per-wallet requests
        duration_2: Seconds taken by the batched request
        balances_1: Results of the per-wallet requests
        balances_2: Results of the batched request
    """
    print(f"Method 1 took: {format_duration(duration_1)}")
    print(f"Method 2 took: {format_duration(duration_2)}")
    print_results(1, balances_1)
    print_results(2, balances_2)
