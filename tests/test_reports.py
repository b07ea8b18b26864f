from datetime import datetime, timedelta, timezone

import pytest

from rebalance_engine.config import PortfolioSettings
from rebalance_engine.portfolio import Direction, Holding, Transaction, compute_balance
from rebalance_engine.reports import TRANSACTION_COLUMNS, build_balance_report, build_transaction_report


def test_balance_report_has_a_row_per_bucket():
    holdings = [Holding("QQQ", shares=4, price=100.0), Holding("A", shares=2, price=100.0)]
    balance = compute_balance(holdings, PortfolioSettings(target_benchmark_pct=50, target_cash_pct=10), 400)

    df = build_balance_report(balance)

    assert list(df["bucket"]) == ["benchmark", "individual", "cash"]
    cash = df.set_index("bucket").loc["cash"]
    assert cash["current_pct"] == pytest.approx(40.0)
    assert cash["target_pct"] == pytest.approx(10.0)
    assert cash["difference"] == pytest.approx(-300.0)


def test_transaction_report_newest_first():
    start = datetime(2024, 2, 1, tzinfo=timezone.utc)
    ledger = [
        Transaction("t1", start, "QQQ", Direction.BUY, 2, 400.0, "p1"),
        Transaction("t2", start + timedelta(minutes=5), "A", Direction.SELL, 3, 100.0, "p1"),
    ]

    df = build_transaction_report(ledger)

    assert list(df["id"]) == ["t2", "t1"]
    assert list(df["total"]) == [300.0, 800.0]
    assert list(df["direction"]) == ["sell", "buy"]


def test_empty_ledger_report():
    df = build_transaction_report([])
    assert df.empty
    assert list(df.columns) == TRANSACTION_COLUMNS
