"""Portfolio valuation and rebalance planning."""

from .balance import compute_balance
from .models import (
    Balance,
    BenchmarkBalance,
    BucketBalance,
    Direction,
    Holding,
    RebalanceAction,
    RebalancePlan,
    TradeStatus,
    Transaction,
)
from .rebalance import RebalancePlanner, compute_actions

__all__ = [
    "Balance",
    "BenchmarkBalance",
    "BucketBalance",
    "Direction",
    "Holding",
    "RebalanceAction",
    "RebalancePlan",
    "RebalancePlanner",
    "TradeStatus",
    "Transaction",
    "compute_actions",
    "compute_balance",
]
