"""Rebalance plan creation and completion tracking."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from rebalance_engine.ids import Clock, IdGenerator, random_id, utc_now
from rebalance_engine.portfolio.models import RebalanceAction, RebalancePlan, TradeStatus


def create_plan(
    actions: Iterable[RebalanceAction],
    ids: IdGenerator = random_id,
    clock: Clock = utc_now,
) -> RebalancePlan:
    """Snapshot the tradeable actions into a new plan.

    A plan with no trades starts out inactive.
    """

    trades = tuple(a for a in actions if a.is_trade)
    completed = sum(1 for a in trades if a.status is TradeStatus.COMPLETED)
    return RebalancePlan(
        id=ids(),
        created_at=clock(),
        actions=trades,
        is_active=completed < len(trades),
        completed_trades=completed,
        total_trades=len(trades),
    )


def mark_completed(plan: RebalancePlan, action_id: str) -> RebalancePlan:
    """Return ``plan`` with ``action_id`` completed.

    Unknown and already completed ids leave the plan unchanged.
    """

    actions = tuple(
        replace(a, status=TradeStatus.COMPLETED) if a.id == action_id else a for a in plan.actions
    )
    completed = sum(1 for a in actions if a.status is TradeStatus.COMPLETED)
    return replace(
        plan,
        actions=actions,
        completed_trades=completed,
        is_active=completed < plan.total_trades,
    )
