"""The streaming catalogue: every series and movie, loaded from JSON."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from os import PathLike
from typing import Any

from .episode import Episode
from .movie import Movie
from .series import Series
from .video import Video


def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string")
    return value


def _number(raw: Mapping[str, Any], key: str, default: Any = None) -> float:
    value = raw[key] if default is None else raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number")
    return value


def _episode_from(raw: Mapping[str, Any]) -> Episode:
    return Episode(
        id=_text(raw, "id"),
        title=_text(raw, "titulo"),
        duration=float(_number(raw, "duracion")),
        rating_count=int(_number(raw, "numeroDeCalificaciones", 0)),
        rating_sum=int(_number(raw, "sumCalificaciones", 0)),
        rating=int(_number(raw, "calificacion", 0.0)),
        genre=_text(raw, "genero"),
        season=int(_number(raw, "temporada")),
    )


def _series_from(raw: Mapping[str, Any]) -> Series:
    return Series(
        id=_text(raw, "id"),
        name=_text(raw, "nombre"),
        rating=float(_number(raw, "calificacion", 0.0)),
        rating_count=int(_number(raw, "numeroDeCalificaciones", 0)),
        rating_sum=int(_number(raw, "sumCalificaciones", 0)),
        country=_text(raw, "paisDeOrigen"),
        genre=_text(raw, "genero"),
        classification=_text(raw, "clasificacion"),
        episodes=[_episode_from(ep) for ep in raw.get("episodios") or []],
    )


def _movie_from(raw: Mapping[str, Any]) -> Movie:
    return Movie(
        id=_text(raw, "id"),
        title=_text(raw, "titulo"),
        duration=float(_number(raw, "duracion")),
        rating_count=int(_number(raw, "numeroDeCalificaciones", 0)),
        rating_sum=int(_number(raw, "sumCalificaciones", 0)),
        rating=int(_number(raw, "calificacion", 0.0)),
        genre=_text(raw, "genero"),
        classification=_text(raw, "clasificacion"),
        country=_text(raw, "paisDeOrigen"),
        credits_duration=float(_number(raw, "duracionCreditos", 0.0)),
    )


@dataclass
class Catalog:
    """All series and movies offered by the service."""

    series: list[Series] = field(default_factory=list)
    movies: list[Movie] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Catalog:
        """Build a catalogue from decoded JSON; missing sections are empty."""
        try:
            series = [_series_from(s) for s in data.get("series") or []]
            movies = [_movie_from(p) for p in data.get("peliculas") or []]
        except KeyError as exc:
            raise ValueError(f"invalid catalogue: missing key {exc}") from exc
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"invalid catalogue: {exc}") from exc
        return cls(series=series, movies=movies)

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Catalog:
        """Read a catalogue from a JSON file."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, Mapping):
            raise ValueError("invalid catalogue: top level must be an object")
        return cls.from_dict(data)

    def find_series(self, query: str) -> Series | None:
        """Return the first series whose id or name equals ``query``."""
        return next(
            (s for s in self.series if query in (s.id, s.name)), None
        )

    def find_movie(self, query: str) -> Movie | None:
        """Return the first movie whose id or title equals ``query``."""
        return next(
            (m for m in self.movies if query in (m.id, m.title)), None
        )

    def find_episode(self, series: Series, query: str) -> Episode | None:
        """Return the first episode of ``series`` whose id or title equals ``query``."""
        return next(
            (ep for ep in series.episodes if query in (ep.id, ep.title)), None
        )

    def movies_with_rating(self, rating: int) -> list[Movie]:
        """Return every movie whose whole-number rating equals ``rating``."""
        return [m for m in self.movies if m.rating == rating]

    def all_videos(self) -> Iterator[Video]:
        """Yield every movie, then every episode of every series."""
        yield from self.movies
        for series in self.series:
            yield from series.episodes