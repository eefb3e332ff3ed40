"""Episodes belonging to a series."""

from __future__ import annotations

from dataclasses import dataclass

from .video import Video, _format_number


@dataclass(kw_only=True)
class Episode(Video):
    """A single episode, tagged with its season number."""

    season: int

    def describe(self) -> str:
        return "\n".join(
            [
                "-----------episodio-----------",
                f"titulo: {self.title}",
                f"id: {self.id}, duracion: {_format_number(self.duration)}, "
                f"genero: {self.genre}, temporada: {self.season}",
            ]
        )

    def __add__(self, other):
        """Add running times: episode + episode or episode + minutes."""
        if isinstance(other, Episode):
            return self.duration + other.duration
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return other + self.duration
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)