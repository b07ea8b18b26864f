"""Reporting helpers."""

from .history import TRANSACTION_COLUMNS, build_transaction_report
from .summary import build_balance_report

__all__ = ["TRANSACTION_COLUMNS", "build_balance_report", "build_transaction_report"]
