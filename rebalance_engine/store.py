"""YAML persistence for the caller-owned portfolio state.

The engine itself never reads or writes this file; the CLI loads the state,
hands it to the engine and saves whatever comes back.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, StrictStr

from rebalance_engine.config import PortfolioSettings
from rebalance_engine.portfolio.models import (
    Direction,
    Holding,
    RebalanceAction,
    RebalancePlan,
    TradeStatus,
    Transaction,
)
from rebalance_engine.portfolio.state import PortfolioState


def _holding_to_dict(holding: Holding) -> Dict[str, Any]:
    payload = asdict(holding)
    if payload["target_weight"] is None:
        del payload["target_weight"]
    return payload


class HoldingRecord(BaseModel):
    """A holding as written in the state file.

    Tickers must be YAML strings; an unquoted ``ON`` or ``NO`` loads as a
    boolean and is rejected rather than coerced.
    """

    ticker: Optional[StrictStr] = None
    shares: float = 0.0
    price: float = 0.0
    target_weight: Optional[float] = Field(None, ge=0.0)


def _holding_from_dict(payload: Dict[str, Any]) -> Holding:
    record = HoldingRecord.model_validate(payload)
    return Holding(
        ticker=record.ticker or "",
        shares=record.shares,
        price=record.price,
        value=record.shares * record.price,
        target_weight=record.target_weight,
    )


def _action_to_dict(action: RebalanceAction) -> Dict[str, Any]:
    payload = asdict(action)
    payload["direction"] = action.direction.value
    payload["status"] = action.status.value
    return payload


def _action_from_dict(payload: Dict[str, Any]) -> RebalanceAction:
    return RebalanceAction(
        id=payload["id"],
        ticker=payload["ticker"],
        current_shares=payload["current_shares"],
        target_shares=payload["target_shares"],
        shares_to_trade=payload["shares_to_trade"],
        direction=Direction(payload["direction"]),
        status=TradeStatus(payload.get("status", TradeStatus.PENDING.value)),
    )


def _plan_to_dict(plan: RebalancePlan) -> Dict[str, Any]:
    return {
        "id": plan.id,
        "created_at": plan.created_at.isoformat(),
        "actions": [_action_to_dict(a) for a in plan.actions],
        "is_active": plan.is_active,
        "completed_trades": plan.completed_trades,
        "total_trades": plan.total_trades,
    }


def _plan_from_dict(payload: Dict[str, Any]) -> RebalancePlan:
    return RebalancePlan(
        id=payload["id"],
        created_at=datetime.fromisoformat(payload["created_at"]),
        actions=tuple(_action_from_dict(a) for a in payload.get("actions", [])),
        is_active=bool(payload["is_active"]),
        completed_trades=int(payload["completed_trades"]),
        total_trades=int(payload["total_trades"]),
    )


def _transaction_to_dict(tx: Transaction) -> Dict[str, Any]:
    payload = asdict(tx)
    payload["timestamp"] = tx.timestamp.isoformat()
    payload["direction"] = tx.direction.value
    return payload


def _transaction_from_dict(payload: Dict[str, Any]) -> Transaction:
    return Transaction(
        id=payload["id"],
        timestamp=datetime.fromisoformat(payload["timestamp"]),
        ticker=payload["ticker"],
        direction=Direction(payload["direction"]),
        shares=payload["shares"],
        price=payload["price"],
        rebalance_plan_id=payload["rebalance_plan_id"],
    )


def state_to_dict(state: PortfolioState) -> Dict[str, Any]:
    return {
        "cash": state.cash,
        "settings": state.settings.model_dump(),
        "holdings": [_holding_to_dict(h) for h in state.holdings],
        "active_plan": _plan_to_dict(state.active_plan) if state.active_plan else None,
        "transactions": [_transaction_to_dict(t) for t in state.transactions],
    }


def state_from_dict(payload: Dict[str, Any], settings: Optional[PortfolioSettings] = None) -> PortfolioState:
    """Rebuild a state mapping; ``settings``, when given, replaces the stored ones."""

    raw_settings = payload.get("settings")
    if settings is None and raw_settings is not None:
        settings = PortfolioSettings.model_validate(raw_settings)
    plan = payload.get("active_plan")
    return PortfolioState(
        cash=float(payload.get("cash", 0.0)),
        holdings=tuple(_holding_from_dict(h) for h in payload.get("holdings") or []),
        settings=settings or PortfolioSettings(),
        active_plan=_plan_from_dict(plan) if plan else None,
        transactions=tuple(_transaction_from_dict(t) for t in payload.get("transactions") or []),
    )


class YamlPortfolioStore:
    def __init__(self, path: Path, settings: Optional[PortfolioSettings] = None):
        self.path = Path(path)
        self.settings = settings

    def load(self) -> PortfolioState:
        if not self.path.exists():
            return PortfolioState(settings=self.settings or PortfolioSettings())
        payload = yaml.safe_load(self.path.read_text()) or {}
        return state_from_dict(payload, self.settings)

    def save(self, state: PortfolioState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(yaml.safe_dump(state_to_dict(state), sort_keys=False))


__all__ = ["HoldingRecord", "YamlPortfolioStore", "state_from_dict", "state_to_dict"]
