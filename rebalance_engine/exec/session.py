"""Caller-side workflow: plan a rebalance and execute its trades one by one."""

from __future__ import annotations

import logging
from dataclasses import replace

from rebalance_engine.errors import (
    ActionAlreadyCompleted,
    InsufficientCash,
    InvalidAmount,
    NoActivePlan,
    UnknownAction,
    UnknownHolding,
)
from rebalance_engine.exec.plan import create_plan, mark_completed
from rebalance_engine.exec.trader import TradeResult, execute
from rebalance_engine.ids import Clock, IdGenerator, random_id, utc_now
from rebalance_engine.portfolio import compute_actions, compute_balance
from rebalance_engine.portfolio.models import TradeStatus
from rebalance_engine.portfolio.state import PortfolioState

logger = logging.getLogger(__name__)


def plan_rebalance(
    state: PortfolioState,
    ids: IdGenerator = random_id,
    clock: Clock = utc_now,
) -> PortfolioState:
    """Replace the active plan with a fresh one built from the current state."""

    balance = compute_balance(state.holdings, state.settings, state.cash)
    actions = compute_actions(state.holdings, balance, state.settings, ids=ids)
    if state.active_plan is not None and state.active_plan.is_active:
        logger.warning("discarding active plan %s", state.active_plan.id)
    plan = create_plan(actions, ids=ids, clock=clock)
    logger.info("created plan %s with %d trades", plan.id, plan.total_trades)
    return replace(state, active_plan=plan)


def execute_plan_action(
    state: PortfolioState,
    action_id: str,
    ids: IdGenerator = random_id,
    clock: Clock = utc_now,
) -> tuple[PortfolioState, TradeResult]:
    """Execute one pending action of the active plan against ``state``.

    Cash never goes below zero, the transaction is appended to the ledger and
    the action is marked completed on the plan.
    """

    plan = state.active_plan
    if plan is None:
        raise NoActivePlan("no rebalance plan has been created")
    action = plan.find_action(action_id)
    if action is None:
        raise UnknownAction(action_id)
    if action.status is TradeStatus.COMPLETED:
        raise ActionAlreadyCompleted(action_id)
    holding = state.holding(action.ticker)
    if holding is None:
        raise UnknownHolding(action.ticker)

    result = execute(action, holding, plan.id, ids=ids, clock=clock)
    updated = state.with_holding(result.updated_holding)
    updated = replace(
        updated,
        cash=max(0.0, state.cash + result.cash_delta),
        active_plan=mark_completed(plan, action_id),
        transactions=state.transactions + (result.transaction,),
    )
    return updated, result


def deposit(state: PortfolioState, amount: float) -> PortfolioState:
    if amount <= 0:
        raise InvalidAmount(amount)
    logger.info("depositing %.2f", amount)
    return replace(state, cash=state.cash + amount)


def withdraw(state: PortfolioState, amount: float) -> PortfolioState:
    """Take ``amount`` out of cash; never more than the cash on hand."""

    if amount <= 0:
        raise InvalidAmount(amount)
    if amount > state.cash:
        raise InsufficientCash(amount, state.cash)
    logger.info("withdrawing %.2f", amount)
    return replace(state, cash=state.cash - amount)
