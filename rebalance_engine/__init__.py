"""Portfolio rebalancing engine: balance, plan, execute."""

from rebalance_engine.errors import InvalidActionDirection, RebalanceError
from rebalance_engine.exec.plan import create_plan, mark_completed
from rebalance_engine.exec.trader import TradeResult, execute
from rebalance_engine.portfolio import (
    Balance,
    Direction,
    Holding,
    RebalanceAction,
    RebalancePlan,
    TradeStatus,
    Transaction,
    compute_actions,
    compute_balance,
)

__all__ = [
    "Balance",
    "Direction",
    "Holding",
    "InvalidActionDirection",
    "RebalanceAction",
    "RebalanceError",
    "RebalancePlan",
    "TradeResult",
    "TradeStatus",
    "Transaction",
    "compute_actions",
    "compute_balance",
    "create_plan",
    "execute",
    "mark_completed",
]
