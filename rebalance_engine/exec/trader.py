"""Applies a single rebalance action to its holding."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from rebalance_engine.errors import InvalidActionDirection
from rebalance_engine.ids import Clock, IdGenerator, random_id, utc_now
from rebalance_engine.portfolio.models import Direction, Holding, RebalanceAction, TradeStatus, Transaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TradeResult:
    updated_holding: Holding
    transaction: Transaction
    updated_action: RebalanceAction
    cash_delta: float


def execute(
    action: RebalanceAction,
    holding: Holding,
    plan_id: str,
    ids: IdGenerator = random_id,
    clock: Clock = utc_now,
) -> TradeResult:
    """Trade ``action.shares_to_trade`` shares of ``holding`` at its price.

    ``cash_delta`` is negative for a buy and positive for a sell. Neither the
    plan nor any cash balance is updated here.
    """

    if action.direction is Direction.BUY:
        new_shares = holding.shares + action.shares_to_trade
        cash_delta = -(action.shares_to_trade * holding.price)
    elif action.direction is Direction.SELL:
        new_shares = holding.shares - action.shares_to_trade
        cash_delta = action.shares_to_trade * holding.price
    else:
        raise InvalidActionDirection(action.id, action.ticker)

    transaction = Transaction(
        id=ids(),
        timestamp=clock(),
        ticker=action.ticker,
        direction=action.direction,
        shares=action.shares_to_trade,
        price=holding.price,
        rebalance_plan_id=plan_id,
    )
    logger.info(
        "%s %s %s @ %.2f (cash %+.2f)",
        action.direction.value,
        action.shares_to_trade,
        action.ticker,
        holding.price,
        cash_delta,
    )
    return TradeResult(
        updated_holding=replace(holding, shares=new_shares, value=new_shares * holding.price),
        transaction=transaction,
        updated_action=replace(action, status=TradeStatus.COMPLETED),
        cash_delta=cash_delta,
    )
