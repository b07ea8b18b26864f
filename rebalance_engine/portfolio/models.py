"""Value types shared by the calculator, planner and executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class Direction(str, Enum):
    BUY = "buy"
    SELL = "sell"
    NONE = "none"


class TradeStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Holding:
    """A position as supplied by the caller.

    ``value`` is filled in from ``shares * price`` when omitted. The engine
    never reads it for money math; it always recomputes.
    """

    ticker: str
    shares: float = 0.0
    price: float = 0.0
    value: Optional[float] = None
    target_weight: Optional[float] = None

    def __post_init__(self) -> None:
        if self.value is None:
            object.__setattr__(self, "value", self.shares * self.price)


@dataclass(frozen=True)
class BucketBalance:
    current_value: float
    target_value: float
    percentage_of_portfolio: float


@dataclass(frozen=True)
class BenchmarkBalance(BucketBalance):
    share_change: int = 0


@dataclass(frozen=True)
class Balance:
    benchmark: BenchmarkBalance
    individual: BucketBalance
    cash: BucketBalance
    total_value: float
    cash_position: float


@dataclass(frozen=True)
class RebalanceAction:
    id: str
    ticker: str
    current_shares: float
    target_shares: float
    shares_to_trade: float
    direction: Direction
    status: TradeStatus = TradeStatus.PENDING

    @property
    def is_trade(self) -> bool:
        return self.direction is not Direction.NONE


@dataclass(frozen=True)
class RebalancePlan:
    id: str
    created_at: datetime
    actions: Tuple[RebalanceAction, ...] = field(default_factory=tuple)
    is_active: bool = False
    completed_trades: int = 0
    total_trades: int = 0

    @property
    def progress_pct(self) -> int:
        if self.total_trades == 0:
            return 0
        return int(self.completed_trades * 100 / self.total_trades + 0.5)

    def find_action(self, action_id: str) -> Optional[RebalanceAction]:
        return next((a for a in self.actions if a.id == action_id), None)


@dataclass(frozen=True)
class Transaction:
    id: str
    timestamp: datetime
    ticker: str
    direction: Direction
    shares: float
    price: float
    rebalance_plan_id: str

    @property
    def total(self) -> float:
        return self.shares * self.price


__all__ = [
    "Balance",
    "BenchmarkBalance",
    "BucketBalance",
    "Direction",
    "Holding",
    "RebalanceAction",
    "RebalancePlan",
    "TradeStatus",
    "Transaction",
]
