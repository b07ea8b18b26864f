"""Bucket summary report builder."""

from __future__ import annotations

from typing import List

import pandas as pd

from rebalance_engine.portfolio.models import Balance, BucketBalance


def _target_pct(bucket: BucketBalance, total_value: float) -> float:
    return bucket.target_value / total_value * 100 if total_value else 0.0


def build_balance_report(balance: Balance) -> pd.DataFrame:
    """Return a DataFrame with one row per bucket: current, target and the gap."""

    rows: List[dict] = []
    for name, bucket in (
        ("benchmark", balance.benchmark),
        ("individual", balance.individual),
        ("cash", balance.cash),
    ):
        rows.append(
            {
                "bucket": name,
                "current_value": bucket.current_value,
                "target_value": bucket.target_value,
                "current_pct": bucket.percentage_of_portfolio,
                "target_pct": _target_pct(bucket, balance.total_value),
                "difference": bucket.target_value - bucket.current_value,
            }
        )
    return pd.DataFrame(rows)
