"""Current versus target breakdown of the benchmark, individual and cash buckets."""

from __future__ import annotations

from typing import Sequence

from rebalance_engine.config import PortfolioSettings

from .models import Balance, BenchmarkBalance, BucketBalance, Holding
from .valuation import (
    affordable_shares,
    find_benchmark,
    holding_value,
    invested_value,
    is_benchmark,
    round_shares,
    valid_holdings,
)


def _pct(value: float, total: float) -> float:
    return value / total * 100 if total != 0 else 0.0


def compute_balance(
    holdings: Sequence[Holding],
    settings: PortfolioSettings,
    cash_position: float = 0.0,
) -> Balance:
    """Return a fresh :class:`Balance` for the given holdings and cash.

    Invalid holdings (no ticker or non-positive price) are ignored. The
    benchmark ``share_change`` is the whole-share move toward target; a
    purchase is capped by what the full cash position can afford, a sale is
    left as is.
    """

    valid = valid_holdings(holdings)
    benchmark = find_benchmark(valid, settings.benchmark_symbol)
    benchmark_value = holding_value(benchmark) if benchmark else 0.0
    individual_value = sum(holding_value(h) for h in valid if not is_benchmark(h, settings.benchmark_symbol))

    # Summed in input order so the total matches the valid holdings exactly.
    total_value = invested_value(valid) + cash_position

    target_benchmark_value = total_value * settings.target_benchmark_pct / 100
    target_individual_value = total_value * settings.target_individual_pct / 100
    target_cash_value = total_value * settings.target_cash_pct / 100

    share_change = 0
    if benchmark is not None and benchmark.price > 0:
        share_change = round_shares((target_benchmark_value - benchmark_value) / benchmark.price)
        if share_change > 0:
            share_change = min(share_change, affordable_shares(cash_position, benchmark.price))

    return Balance(
        benchmark=BenchmarkBalance(
            current_value=benchmark_value,
            target_value=target_benchmark_value,
            percentage_of_portfolio=_pct(benchmark_value, total_value),
            share_change=share_change,
        ),
        individual=BucketBalance(
            current_value=individual_value,
            target_value=target_individual_value,
            percentage_of_portfolio=_pct(individual_value, total_value),
        ),
        cash=BucketBalance(
            current_value=cash_position,
            target_value=target_cash_value,
            percentage_of_portfolio=_pct(cash_position, total_value),
        ),
        total_value=total_value,
        cash_position=cash_position,
    )
