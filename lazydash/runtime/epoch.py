"""Generation counter for discarding stale asynchronous results.

Work issued from the UI loop is stamped with the epoch current at issue
time. The epoch advances whenever the displayed context changes (e.g. the
dashboard root switches), and receivers drop results whose stamp no longer
matches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Stamped(Generic[T]):
    epoch: int
    value: T


class EpochCounter:
    """Monotonically increasing epoch owned by the UI loop."""

    def __init__(self, start: int = 0) -> None:
        self._epoch = start

    @property
    def current(self) -> int:
        return self._epoch

    def advance(self) -> int:
        self._epoch += 1
        return self._epoch

    def stamp(self, value: T) -> Stamped[T]:
        return Stamped(self._epoch, value)

    def is_current(self, epoch: int) -> bool:
        return epoch == self._epoch


__all__ = ["EpochCounter", "Stamped"]
