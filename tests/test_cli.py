import json
import subprocess
import sys
from pathlib import Path

import pandas as pd


def run_cli(*args):
    result = subprocess.run(
        [sys.executable, "-m", "rebalance_engine.cli", *args],
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def write_fixture(tmp_path: Path) -> Path:
    state = tmp_path / "portfolio.yml"
    state.write_text(
        """
        cash: 1000
        holdings:
          - {ticker: BENCH, shares: 0, price: 400}
          - {ticker: A, shares: 0, price: 100, target_weight: 50}
          - {ticker: B, shares: 0, price: 50, target_weight: 50}
          - {ticker: '', shares: 0, price: 0}
        """.replace("\n        ", "\n")
    )
    config = tmp_path / "config.yml"
    config.write_text(
        f"""
        settings:
          target_benchmark_pct: 50
          target_cash_pct: 0
          benchmark_symbol: BENCH
        storage:
          path: {state}
        logging:
          level: WARNING
        """
    )
    return config


def test_cli_balance_and_actions(tmp_path):
    config = write_fixture(tmp_path)

    balance = json.loads(run_cli("balance", "--config", str(config)))
    assert balance["total_value"] == 1000
    assert balance["benchmark"]["share_change"] == 1

    actions = json.loads(run_cli("actions", "--config", str(config)))
    assert [a["ticker"] for a in actions] == ["BENCH", "A", "B", "(No ticker)"]
    assert [a["direction"] for a in actions] == ["buy", "buy", "buy", "none"]


def test_cli_plan_execute_history(tmp_path):
    config = write_fixture(tmp_path)

    plan = json.loads(run_cli("plan", "--config", str(config)))
    assert plan["total_trades"] == 3
    assert plan["is_active"] is True

    first = plan["actions"][0]["id"]
    executed = json.loads(run_cli("execute", "--config", str(config), "--action-id", first))
    assert executed["cash_delta"] == -400.0
    assert executed["cash"] == 600.0
    assert executed["completed_trades"] == 1
    assert executed["progress_pct"] == 33

    output = tmp_path / "history.csv"
    run_cli("history", "--config", str(config), "--output", str(output))
    df = pd.read_csv(output)
    assert list(df["ticker"]) == ["BENCH"]
    assert list(df["total"]) == [400.0]


def test_cli_uses_settings_saved_in_state_file(tmp_path):
    state = tmp_path / "portfolio.yml"
    state.write_text(
        "cash: 1000\n"
        "settings: {target_benchmark_pct: 0, target_cash_pct: 100, benchmark_symbol: QQQ}\n"
        "holdings:\n"
        "  - {ticker: A, shares: 0, price: 100}\n"
    )
    config = tmp_path / "config.yml"
    config.write_text(f"storage:\n  path: {state}\n")

    balance = json.loads(run_cli("balance", "--config", str(config)))

    assert balance["cash"]["target_value"] == 1000
    assert balance["benchmark"]["target_value"] == 0


def test_cli_deposit_and_withdraw(tmp_path):
    config = write_fixture(tmp_path)

    deposited = json.loads(run_cli("deposit", "--config", str(config), "--amount", "500"))
    assert deposited == {"previous_cash": 1000.0, "cash": 1500.0}

    withdrawn = json.loads(run_cli("withdraw", "--config", str(config), "--amount", "200"))
    assert withdrawn["cash"] == 1300.0

    balance = json.loads(run_cli("balance", "--config", str(config)))
    assert balance["cash_position"] == 1300.0


def test_cli_withdraw_more_than_cash_fails(tmp_path):
    config = write_fixture(tmp_path)
    result = subprocess.run(
        [sys.executable, "-m", "rebalance_engine.cli", "withdraw", "--config", str(config), "--amount", "5000"],
        capture_output=True,
        text=True,
    )
    assert result.returncode != 0
    assert "InsufficientCash" in result.stderr

    balance = json.loads(run_cli("balance", "--config", str(config)))
    assert balance["cash_position"] == 1000.0
