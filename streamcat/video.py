"""Base type shared by every playable item in the catalogue."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _format_number(value: float) -> str:
    """Render a number with six significant digits, trailing zeros dropped."""
    return format(value, "g")


@dataclass(kw_only=True)
class Video(ABC):
    """A rateable item with a running time."""

    id: str
    title: str
    duration: float
    genre: str
    rating_count: int = 0
    rating_sum: int = 0
    rating: int = 0

    def __post_init__(self) -> None:
        self.rating_sum = int(self.rating_sum)
        self.rating = int(self.rating)

    def total_duration(self) -> float:
        """Return the running time in minutes."""
        return self.duration

    def rate(self, score: int) -> int:
        """Record a score and return the new whole-number average."""
        self.rating_count += 1
        self.rating_sum += int(score)
        self.rating = int(self.rating_sum / self.rating_count)
        return self.rating

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable summary."""