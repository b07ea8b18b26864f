from datetime import datetime, timezone

import pytest

from rebalance_engine import InvalidActionDirection, execute
from rebalance_engine.ids import SequentialIds
from rebalance_engine.portfolio import Direction, Holding, RebalanceAction, TradeStatus

NOW = datetime(2024, 5, 6, 9, 45, tzinfo=timezone.utc)


def action(direction, shares, current):
    delta = shares if direction is Direction.BUY else -shares
    return RebalanceAction(
        id="act-1",
        ticker="XYZ",
        current_shares=current,
        target_shares=current + delta,
        shares_to_trade=shares,
        direction=direction,
    )


def test_sell_releases_cash():
    holding = Holding("XYZ", shares=25, price=20.0)
    result = execute(action(Direction.SELL, 10, 25), holding, "plan-9", ids=SequentialIds("tx"), clock=lambda: NOW)

    assert result.cash_delta == 200.0
    assert result.updated_holding.shares == 15
    assert result.updated_holding.value == 300.0
    assert result.updated_action.status is TradeStatus.COMPLETED
    assert result.transaction.id == "tx-1"
    assert result.transaction.timestamp == NOW
    assert result.transaction.direction is Direction.SELL
    assert result.transaction.shares == 10
    assert result.transaction.price == 20.0
    assert result.transaction.rebalance_plan_id == "plan-9"
    assert result.transaction.total == 200.0


def test_buy_consumes_cash():
    holding = Holding("XYZ", shares=2, price=12.5, target_weight=10)
    result = execute(action(Direction.BUY, 4, 2), holding, "plan-1")

    assert result.cash_delta == -50.0
    assert result.updated_holding.shares == 6
    assert result.updated_holding.value == 75.0
    assert result.updated_holding.target_weight == 10
    assert holding.shares == 2


def test_none_direction_is_rejected():
    no_op = RebalanceAction(
        id="act-2",
        ticker="XYZ",
        current_shares=1,
        target_shares=1,
        shares_to_trade=0,
        direction=Direction.NONE,
    )
    with pytest.raises(InvalidActionDirection) as excinfo:
        execute(no_op, Holding("XYZ", shares=1, price=5.0), "plan-1")
    assert excinfo.value.action_id == "act-2"
