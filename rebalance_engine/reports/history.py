"""Transaction ledger report."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from rebalance_engine.portfolio.models import Transaction

TRANSACTION_COLUMNS = ["timestamp", "ticker", "direction", "shares", "price", "total", "rebalance_plan_id", "id"]


def build_transaction_report(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Newest first, with the cash value of each trade in ``total``."""

    if not transactions:
        return pd.DataFrame(columns=TRANSACTION_COLUMNS)
    rows = [
        {
            "timestamp": tx.timestamp.isoformat(),
            "ticker": tx.ticker,
            "direction": tx.direction.value,
            "shares": tx.shares,
            "price": tx.price,
            "total": tx.total,
            "rebalance_plan_id": tx.rebalance_plan_id,
            "id": tx.id,
        }
        for tx in sorted(transactions, key=lambda t: t.timestamp, reverse=True)
    ]
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)
