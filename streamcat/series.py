"""Series: a named collection of episodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .episode import Episode
from .video import _format_number


@dataclass(kw_only=True)
class Series:
    """A rateable series holding its episodes in order."""

    id: str
    name: str
    country: str
    genre: str
    classification: str
    rating: float = 0.0
    rating_count: int = 0
    rating_sum: int = 0
    episodes: list[Episode] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rating = float(self.rating)
        self.rating_sum = int(self.rating_sum)
        self.episodes = list(self.episodes)

    def describe(self) -> str:
        return "\n".join(
            [
                "",
                "",
                "",
                "-----------SERIE-----------",
                f"id: {self.id}",
                f"nombre: {self.name}",
                f"calificacion: {_format_number(self.rating)}",
                f"pais de origen: {self.country}",
                f"genero: {self.genre}",
                f"clasificacion: {self.classification}",
            ]
        )

    def add_episode(self, episode: Episode) -> None:
        """Append an episode at the end of the series."""
        self.episodes.append(episode)

    def first_in_season(self, season: int) -> Episode | None:
        """Return the first episode of the given season, or None."""
        return next((ep for ep in self.episodes if ep.season == season), None)

    def first_with_rating(self, rating: int) -> Episode | None:
        """Return the first episode rated exactly ``rating`` (1-5), or None."""
        if not 1 <= rating <= 5:
            raise ValueError("rating must be between 1 and 5")
        return next((ep for ep in self.episodes if ep.rating == rating), None)

    def rate(self, score: int) -> float:
        """Record a score and return the new truncated average."""
        self.rating_count += 1
        self.rating_sum += int(score)
        self.rating = float(int(self.rating_sum / self.rating_count))
        return self.rating

    def marathon_duration(self) -> float:
        """Return the combined running time of every episode."""
        return sum(self.episodes, 0.0)