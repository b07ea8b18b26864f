"""Rebalance logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from rebalance_engine.config import PortfolioSettings
from rebalance_engine.ids import IdGenerator, random_id

from .models import Balance, Direction, Holding, RebalanceAction
from .valuation import (
    NO_TICKER,
    affordable_shares,
    find_benchmark,
    holding_value,
    is_benchmark,
    is_valid,
    round_shares,
)

logger = logging.getLogger(__name__)


def _direction(delta: float) -> Direction:
    if delta > 0:
        return Direction.BUY
    if delta < 0:
        return Direction.SELL
    return Direction.NONE


@dataclass
class RebalancePlanner:
    """Turns a :class:`Balance` into one trade action per holding.

    Cash is a single budget spent in a fixed order: the benchmark holding
    first, then the individual holdings in the order they were given. When
    cash is short, holdings later in the list get less or nothing, whatever
    their target weight. Sales are never limited and their proceeds become
    available to the holdings processed after them.

    The benchmark trade is taken as is from ``balance.benchmark.share_change``,
    which is capped by the whole cash position rather than the cash above
    target. With a positive cash target the benchmark buy can therefore spend
    more than the deployable budget and leave it negative; individual buys are
    only held to the budget that remains.
    """

    ids: IdGenerator = random_id

    def compute_actions(
        self,
        holdings: Sequence[Holding],
        balance: Balance,
        settings: PortfolioSettings,
    ) -> List[RebalanceAction]:
        target_cash_value = balance.total_value * settings.target_cash_pct / 100
        cash_delta = target_cash_value - balance.cash_position
        if cash_delta > 0:
            # Cash is below target: nothing to deploy until sales raise it.
            available = 0.0
        else:
            available = balance.cash_position - target_cash_value
        logger.debug("cash to raise %.2f, deployable %.2f", max(cash_delta, 0.0), available)

        valid = [h for h in holdings if is_valid(h)]
        actions: List[RebalanceAction] = []

        benchmark = find_benchmark(valid, settings.benchmark_symbol)
        if benchmark is not None:
            change = balance.benchmark.share_change
            available -= change * benchmark.price
            actions.append(self._action(benchmark, benchmark.shares + change))

        individual = [h for h in valid if not is_benchmark(h, settings.benchmark_symbol)]
        weight_sum = sum(h.target_weight or 0.0 for h in individual)
        for holding in individual:
            if weight_sum > 0:
                weight = (holding.target_weight or 0.0) / weight_sum
            elif balance.individual.current_value > 0:
                weight = holding_value(holding) / balance.individual.current_value
            else:
                weight = 0.0
            target_value = weight * balance.individual.target_value
            wanted = round_shares(target_value / holding.price) if holding.price > 0 else holding.shares

            target_shares = holding.shares
            if wanted > holding.shares and available > 0:
                target_shares = holding.shares + min(wanted - holding.shares, affordable_shares(available, holding.price))
            elif wanted < holding.shares:
                target_shares = wanted
            available -= (target_shares - holding.shares) * holding.price
            actions.append(self._action(holding, target_shares))

        for holding in holdings:
            if not is_valid(holding):
                actions.append(self._action(holding, holding.shares, ticker=holding.ticker or NO_TICKER))

        logger.debug("planned %d actions, %.2f cash left undeployed", len(actions), available)
        return actions

    def _action(self, holding: Holding, target_shares: float, ticker: str = "") -> RebalanceAction:
        delta = target_shares - holding.shares
        return RebalanceAction(
            id=self.ids(),
            ticker=ticker or holding.ticker,
            current_shares=holding.shares,
            target_shares=target_shares,
            shares_to_trade=abs(delta),
            direction=_direction(delta),
        )


def compute_actions(
    holdings: Sequence[Holding],
    balance: Balance,
    settings: PortfolioSettings,
    ids: IdGenerator = random_id,
) -> List[RebalanceAction]:
    """Plan trades toward target; see :class:`RebalancePlanner` for the cash order."""
    return RebalancePlanner(ids=ids).compute_actions(holdings, balance, settings)
