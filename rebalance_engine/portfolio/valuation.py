"""Holding validity, value and share rounding helpers."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from .models import Holding

NO_TICKER = "(No ticker)"


def is_valid(holding: Holding) -> bool:
    return holding.ticker != "" and holding.price > 0


def holding_value(holding: Holding) -> float:
    return holding.shares * holding.price


def valid_holdings(holdings: Iterable[Holding]) -> List[Holding]:
    return [h for h in holdings if is_valid(h)]


def invested_value(holdings: Iterable[Holding]) -> float:
    return sum(holding_value(h) for h in valid_holdings(holdings))


def is_benchmark(holding: Holding, benchmark_symbol: str) -> bool:
    return holding.ticker.upper() == benchmark_symbol.upper()


def find_benchmark(holdings: Iterable[Holding], benchmark_symbol: str) -> Optional[Holding]:
    """First valid holding whose ticker matches the benchmark symbol."""
    return next((h for h in valid_holdings(holdings) if is_benchmark(h, benchmark_symbol)), None)


def round_shares(quantity: float) -> int:
    # Halves round up (2.5 -> 3, -2.5 -> -2), not to even.
    return math.floor(quantity + 0.5)


def affordable_shares(cash: float, price: float) -> int:
    if price <= 0 or cash <= 0:
        return 0
    return math.floor(cash / price)
