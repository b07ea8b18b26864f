"""Exceptions raised by the engine and its callers."""

from __future__ import annotations


class RebalanceError(Exception):
    """Base class for rebalancing errors."""


class InvalidActionDirection(RebalanceError):
    """A trade was requested for an action that has nothing to trade."""

    def __init__(self, action_id: str, ticker: str):
        super().__init__(f"action {action_id} ({ticker or 'no ticker'}) has direction 'none' and cannot be executed")
        self.action_id = action_id
        self.ticker = ticker


class UnknownHolding(RebalanceError):
    def __init__(self, ticker: str):
        super().__init__(f"no holding with ticker {ticker!r}")
        self.ticker = ticker


class NoActivePlan(RebalanceError):
    pass


class UnknownAction(RebalanceError):
    def __init__(self, action_id: str):
        super().__init__(f"no action with id {action_id!r} in the active plan")
        self.action_id = action_id


class ActionAlreadyCompleted(RebalanceError):
    def __init__(self, action_id: str):
        super().__init__(f"action {action_id!r} has already been executed")
        self.action_id = action_id


class InvalidAmount(RebalanceError):
    def __init__(self, amount: float):
        super().__init__(f"amount must be positive, got {amount}")
        self.amount = amount


class InsufficientCash(RebalanceError):
    def __init__(self, amount: float, available: float):
        super().__init__(f"cannot withdraw {amount:.2f}, only {available:.2f} available")
        self.amount = amount
        self.available = available
