from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from rebalance_engine.config import load_config


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "test_config.yml"
    path.write_text(dedent(text))
    return path


def test_load_config_applies_defaults(tmp_path):
    config_path = write_config(
        tmp_path,
        """
        settings:
          target_cash_pct: 5
        storage:
          path: state/portfolio.yml
        """,
    )

    config = load_config(config_path)

    assert config.settings.target_benchmark_pct == pytest.approx(50.0)
    assert config.settings.target_cash_pct == pytest.approx(5.0)
    assert config.settings.benchmark_symbol == "QQQ"
    assert config.settings.target_individual_pct == pytest.approx(45.0)
    assert config.storage.path == Path("state/portfolio.yml")
    assert config.logging.level == "INFO"


def test_empty_file_leaves_settings_unset(tmp_path):
    config = load_config(write_config(tmp_path, ""))
    assert config.settings is None
    assert config.storage.path == Path("portfolio.yml")


def test_percentages_are_range_checked():
    with pytest.raises(ValidationError):
        load_config({"settings": {"target_benchmark_pct": 120}})
    with pytest.raises(ValidationError):
        load_config({"settings": {"target_cash_pct": -1}})


def test_percentages_may_exceed_one_hundred_together():
    config = load_config({"settings": {"target_benchmark_pct": 80, "target_cash_pct": 40}})
    assert config.settings.target_individual_pct == pytest.approx(-20.0)


def test_rejects_unsupported_source():
    with pytest.raises(TypeError):
        load_config(42)
