"""Portfolio state representation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from rebalance_engine.config import PortfolioSettings

from .models import Holding, RebalancePlan, Transaction


@dataclass(frozen=True)
class PortfolioState:
    """Everything a caller keeps between engine calls."""

    cash: float = 0.0
    holdings: Tuple[Holding, ...] = field(default_factory=tuple)
    settings: PortfolioSettings = field(default_factory=PortfolioSettings)
    active_plan: Optional[RebalancePlan] = None
    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)

    def holding(self, ticker: str) -> Optional[Holding]:
        return next((h for h in self.holdings if h.ticker == ticker), None)

    def with_holding(self, updated: Holding) -> "PortfolioState":
        holdings = tuple(updated if h.ticker == updated.ticker else h for h in self.holdings)
        return replace(self, holdings=holdings)
