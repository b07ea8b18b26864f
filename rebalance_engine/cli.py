"""Command line entry points."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from rebalance_engine.config import AppConfig, load_config
from rebalance_engine.exec.session import deposit, execute_plan_action, plan_rebalance, withdraw
from rebalance_engine.log import configure_logging
from rebalance_engine.portfolio import compute_actions, compute_balance
from rebalance_engine.reports import build_balance_report, build_transaction_report
from rebalance_engine.store import YamlPortfolioStore


def _store(config: AppConfig) -> YamlPortfolioStore:
    return YamlPortfolioStore(config.storage.path, settings=config.settings)


def _print(payload) -> None:
    print(json.dumps(payload, default=str))


def _balance(config: AppConfig, table: bool) -> None:
    state = _store(config).load()
    balance = compute_balance(state.holdings, state.settings, state.cash)
    if table:
        print(build_balance_report(balance).to_string(index=False))
    else:
        _print(asdict(balance))


def _actions(config: AppConfig) -> None:
    state = _store(config).load()
    balance = compute_balance(state.holdings, state.settings, state.cash)
    actions = compute_actions(state.holdings, balance, state.settings)
    _print([asdict(a) for a in actions])


def _plan(config: AppConfig) -> None:
    store = _store(config)
    state = plan_rebalance(store.load())
    store.save(state)
    plan = state.active_plan
    _print(
        {
            "plan_id": plan.id,
            "total_trades": plan.total_trades,
            "is_active": plan.is_active,
            "actions": [asdict(a) for a in plan.actions],
        }
    )


def _execute(config: AppConfig, action_id: str) -> None:
    store = _store(config)
    state, result = execute_plan_action(store.load(), action_id)
    store.save(state)
    _print(
        {
            "transaction": asdict(result.transaction),
            "cash_delta": result.cash_delta,
            "cash": state.cash,
            "completed_trades": state.active_plan.completed_trades,
            "total_trades": state.active_plan.total_trades,
            "progress_pct": state.active_plan.progress_pct,
            "is_active": state.active_plan.is_active,
        }
    )


def _move_cash(config: AppConfig, command: str, amount: float) -> None:
    store = _store(config)
    state = store.load()
    updated = deposit(state, amount) if command == "deposit" else withdraw(state, amount)
    store.save(updated)
    _print({"previous_cash": state.cash, "cash": updated.cash})


def main() -> None:
    parser = argparse.ArgumentParser(description="Portfolio rebalancing CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    balance_parser = subparsers.add_parser("balance", help="Show current versus target allocation")
    balance_parser.add_argument("--config", required=True, type=Path)
    balance_parser.add_argument("--table", action="store_true", help="Print a table instead of JSON")

    actions_parser = subparsers.add_parser("actions", help="List the trades needed to rebalance")
    actions_parser.add_argument("--config", required=True, type=Path)

    plan_parser = subparsers.add_parser("plan", help="Create and save a rebalance plan")
    plan_parser.add_argument("--config", required=True, type=Path)

    execute_parser = subparsers.add_parser("execute", help="Execute one action of the active plan")
    execute_parser.add_argument("--config", required=True, type=Path)
    execute_parser.add_argument("--action-id", required=True)

    for name, help_text in (("deposit", "Add cash to the portfolio"), ("withdraw", "Take cash out of the portfolio")):
        cash_parser = subparsers.add_parser(name, help=help_text)
        cash_parser.add_argument("--config", required=True, type=Path)
        cash_parser.add_argument("--amount", required=True, type=float)

    history_parser = subparsers.add_parser("history", help="Show the transaction ledger")
    history_parser.add_argument("--config", required=True, type=Path)
    history_parser.add_argument("--output", type=Path, help="Optional CSV output path")

    args = parser.parse_args()
    config = load_config(args.config)
    configure_logging(config.logging)

    if args.command == "balance":
        _balance(config, args.table)
    elif args.command == "actions":
        _actions(config)
    elif args.command == "plan":
        _plan(config)
    elif args.command == "execute":
        _execute(config, args.action_id)
    elif args.command in ("deposit", "withdraw"):
        _move_cash(config, args.command, args.amount)
    elif args.command == "history":
        df = build_transaction_report(_store(config).load().transactions)
        if args.output:
            df.to_csv(args.output, index=False)
            print(f"Saved report to {args.output}")
        else:
            print(df.to_string(index=False))


if __name__ == "__main__":  # pragma: no cover
    main()
