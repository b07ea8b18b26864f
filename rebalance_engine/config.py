"""Configuration models and loader for the rebalancing engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field


class PortfolioSettings(BaseModel):
    """Target allocation for the benchmark and cash buckets.

    Individual holdings receive whatever is left over. The two percentages are
    not required to sum to at most 100; a larger sum yields a negative target
    for the individual bucket.
    """

    target_benchmark_pct: float = Field(50.0, ge=0.0, le=100.0)
    target_cash_pct: float = Field(0.0, ge=0.0, le=100.0)
    benchmark_symbol: str = "QQQ"

    @property
    def target_individual_pct(self) -> float:
        return 100.0 - self.target_benchmark_pct - self.target_cash_pct


class StorageConfig(BaseModel):
    path: Path = Path("portfolio.yml")


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    # None leaves the settings saved in the state file in charge.
    settings: Optional[PortfolioSettings] = None
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(source: Union[str, Path, Dict[str, Any]]) -> AppConfig:
    """Load and validate the application config from a path or raw mapping."""

    if isinstance(source, (str, Path)):
        path = Path(source)
        payload = yaml.safe_load(path.read_text()) or {}
    elif isinstance(source, dict):
        payload = source
    else:
        raise TypeError("config source must be a path or mapping")

    return AppConfig.model_validate(payload)


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "PortfolioSettings",
    "StorageConfig",
    "load_config",
]
