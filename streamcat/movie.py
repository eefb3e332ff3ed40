"""Feature films."""

from __future__ import annotations

from dataclasses import dataclass

from .video import Video, _format_number


@dataclass(kw_only=True)
class Movie(Video):
    """A film with an age classification, origin and credits length."""

    classification: str
    country: str
    credits_duration: float = 0.0

    def describe(self) -> str:
        return "\n".join(
            [
                "",
                "---------------PELICULA------------: ",
                f"titulo: {self.title}",
                f"id: {self.id} ,duracion: {_format_number(self.duration)} "
                f",genero: {self.genre} ,clasificacion: {self.classification} "
                f",pais de origen: {self.country} "
                f",duracion de creditos: {_format_number(self.credits_duration)}",
            ]
        )

    def total_duration(self) -> float:
        """Return running time including the credits."""
        return self.duration + self.credits_duration