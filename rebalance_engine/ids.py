"""Identifier and clock sources injected into the plan and trade helpers."""

from __future__ import annotations

import itertools
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterator, Protocol


class IdGenerator(Protocol):
    def __call__(self) -> str:  # pragma: no cover - interface
        ...


Clock = Callable[[], datetime]


def random_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SequentialIds:
    """Deterministic ids (``act-1``, ``act-2``...) for tests and replays."""

    prefix: str = "id"
    start: int = 1
    _counter: Iterator[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._counter = itertools.count(self.start)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


__all__ = ["Clock", "IdGenerator", "SequentialIds", "random_id", "utc_now"]
