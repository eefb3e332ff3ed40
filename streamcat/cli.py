"""Interactive text menus for browsing and rating the catalogue."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .catalog import Catalog
from .episode import Episode
from .series import Series
from .video import _format_number

_MAIN_MENU = (
    "=========== MENÚ PRINCIPAL ===========\n"
    "1 - Menú de Series\n"
    "2 - Mostrar Catálogo de Películas\n"
    "3 - Mostrar Películas por Calificación\n"
    "4 - Calificar una Película\n"
    "5 - Mostrar todos los videos\n"
    "6 - Calcular duración total de una película\n"
    "7 - Salir\n"
    "Selecciona una opción: "
)

_SERIES_MENU = (
    "============== MENU DE SERIES ==============\n"
    "1- Mostrar Catálogo\n"
    "2- Información de una serie\n"
    "3- Mostrar capítulos\n"
    "4- Buscar capítulos por temporada\n"
    "5- Buscar capítulos por calificación\n"
    "6- Calificar serie\n"
    "7- Calcular maratón\n"
    "8- Acceder al menú de un capítulo\n"
    "9- Salir\n"
)

_EPISODE_MENU = (
    "==== MENU DEL CAPÍTULO ====\n"
    "1- Mostrar info\n"
    "2- Calificar capítulo\n"
    "3- Salir\n"
)

_INVALID = "Opción no válida.\n"
_SERIES_PROMPT = "Introduce el ID o nombre de la serie: "
_MOVIE_PROMPT = "Introduce el ID o nombre de la película: "


class Console:
    """Menu-driven session over a catalogue, reading and writing text streams."""

    def __init__(
        self,
        catalog: Catalog,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.catalog = catalog
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    # -- input / output helpers -------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_token(self) -> str:
        while True:
            parts = self._read_line().split()
            if parts:
                return parts[0]

    def _read_int(self) -> int | None:
        try:
            return int(self._read_token())
        except ValueError:
            return None

    def _ask_series(self) -> Series | None:
        self._write(_SERIES_PROMPT)
        series = self.catalog.find_series(self._read_line())
        if series is None:
            self._write("Serie no encontrada.\n")
        return series

    def _ask_movie(self):
        self._write(_MOVIE_PROMPT)
        movie = self.catalog.find_movie(self._read_line())
        if movie is None:
            self._write("Película no encontrada.\n")
        return movie

    # -- main menu --------------------------------------------------------

    def run(self) -> None:
        """Run the main menu until the user leaves or input ends."""
        try:
            while True:
                self._write(_MAIN_MENU)
                choice = self._read_int()
                if choice == 1:
                    self.series_menu()
                elif choice == 2:
                    self._show_movies()
                elif choice == 3:
                    self._show_movies_by_rating()
                elif choice == 4:
                    self._rate_movie()
                elif choice == 5:
                    self._show_all_videos()
                elif choice == 6:
                    self._movie_duration()
                elif choice == 7:
                    self._write("¡Hasta luego!\n\n")
                    return
                else:
                    self._write(_INVALID)
                self._write("\n")
        except EOFError:
            return

    def _show_movies(self) -> None:
        for movie in self.catalog.movies:
            self._write(movie.describe() + "\n")

    def _show_movies_by_rating(self) -> None:
        self._write("Mostrar películas por calificación (1-5): ")
        rating = self._read_int()
        if rating is None:
            return
        for movie in self.catalog.movies_with_rating(rating):
            self._write(movie.describe() + "\n")

    def _rate_movie(self) -> None:
        movie = self._ask_movie()
        if movie is None:
            return
        self._write("introduce la calificacion: \n")
        score = self._read_int()
        if score is None:
            self._write(_INVALID)
            return
        movie.rate(score)

    def _movie_duration(self) -> None:
        movie = self._ask_movie()
        if movie is not None:
            self._write(
                f"duracion total en minutos: {_format_number(movie.total_duration())}\n"
            )

    def _show_all_videos(self) -> None:
        for video in self.catalog.all_videos():
            self._write(video.describe() + "\n")

    # -- series menu ------------------------------------------------------

    def series_menu(self) -> None:
        """Run the series menu until the user returns to the main menu."""
        while True:
            self._write(_SERIES_MENU)
            choice = self._read_int()
            if choice == 1:
                for series in self.catalog.series:
                    self._write(series.describe() + "\n")
            elif choice == 2:
                series = self._ask_series()
                if series is not None:
                    self._write(series.describe() + "\n")
            elif choice == 3:
                series = self._ask_series()
                if series is not None:
                    for episode in series.episodes:
                        self._write(episode.describe() + "\n\n")
            elif choice == 4:
                series = self._ask_series()
                if series is not None:
                    self._episodes_by_season(series)
            elif choice == 5:
                series = self._ask_series()
                if series is not None:
                    self._episodes_by_rating(series)
            elif choice == 6:
                series = self._ask_series()
                if series is not None:
                    self._rate_series(series)
            elif choice == 7:
                series = self._ask_series()
                if series is not None:
                    total = _format_number(series.marathon_duration())
                    self._write(f"la serie durá {total} en total")
            elif choice == 8:
                series = self._ask_series()
                if series is not None:
                    self._choose_episode(series)
            elif choice == 9:
                self._write("Regresando al menú principal...\n\n")
                return
            else:
                self._write(_INVALID)
            self._write("\n")

    def _episodes_by_season(self, series: Series) -> None:
        while True:
            self._write("introduce la temporada: \n")
            season = self._read_int()
            episode = series.first_in_season(season) if season is not None else None
            if episode is not None:
                self._write(episode.describe() + "\n\n")
                return
            self._write("no se encontro esa temporada\n")
            self._write("salir? [S/N]\n")
            if self._read_token() == "s":
                return

    def _episodes_by_rating(self, series: Series) -> None:
        while True:
            self._write("introduce la calificacion (1-5): \n")
            rating = self._read_int()
            try:
                if rating is None:
                    raise ValueError("not a number")
                episode = series.first_with_rating(rating)
            except ValueError:
                self._write("introduce una calificacion valida\n")
                return
            if episode is not None:
                self._write(episode.describe() + "\n\n")
                return
            self._write("no se encontraron espisodios con ese score\n")
            self._write("salir? [S/N]\n")
            if self._read_token() == "s":
                return

    def _rate_series(self, series: Series) -> None:
        self._write("inserta la calificacion: \n")
        score = self._read_int()
        if score is None:
            self._write(_INVALID)
            return
        series.rate(score)

    def _choose_episode(self, series: Series) -> None:
        self._write("Introduce el ID del capítulo: ")
        episode = self.catalog.find_episode(series, self._read_line())
        if episode is None:
            self._write("Capítulo no encontrado.\n")
            return
        self.episode_menu(episode)

    def episode_menu(self, episode: Episode) -> None:
        """Show or rate one episode until the user leaves."""
        while True:
            self._write(_EPISODE_MENU)
            choice = self._read_int()
            if choice == 1:
                self._write(episode.describe() + "\n")
            elif choice == 2:
                self._write("introduce la calificacion: \n")
                score = self._read_int()
                if score is None:
                    self._write(_INVALID)
                else:
                    episode.rate(score)
            elif choice == 3:
                return
            else:
                self._write(_INVALID)


def main(argv: list[str] | None = None) -> int:
    """Load the catalogue file and start the interactive menus."""
    parser = argparse.ArgumentParser(
        prog="streamcat", description="Browse and rate a streaming catalogue."
    )
    parser.add_argument(
        "path", nargs="?", default="bucket.json", help="catalogue JSON file"
    )
    args = parser.parse_args(argv)

    try:
        catalog = Catalog.load(args.path)
    except OSError:
        print(f"Error al abrir {args.path}", file=sys.stderr)
        catalog = Catalog()
    except ValueError as exc:
        print(f"Error de JSON: {exc}", file=sys.stderr)
        catalog = Catalog()

    Console(catalog).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())