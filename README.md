# streamcat

A small interactive catalogue of series and movies for the terminal. It loads
a JSON file of series (with their episodes) and movies, and lets you browse
it, look things up by id or title, rate titles and work out running times.
The menus and messages are in Spanish.

## Installing

```
pip install .
```

## Running

```
streamcat [path]
```

`path` is the catalogue file and defaults to `bucket.json` in the current
directory. If the file cannot be opened, or its contents are not a valid
catalogue, an error is printed to standard error and the session starts with
an empty catalogue.

The main menu offers:

1. Series menu: the catalogue, details of one series, its episodes,
   the first episode of a season, the first episode with a given rating
   (1-5), rating a series, the total marathon time, and a menu for a single
   episode where you can show or rate it.
2. The movie catalogue.
3. Movies with a given rating.
4. Rating a movie.
5. Every video: all movies followed by every episode.
6. The full running time of a movie, credits included.
7. Quit.

Series and movies are looked up by id or by name/title; episodes by id or
title. The session also ends when input runs out.

## The catalogue file

The file is a JSON object with two lists, `series` and `peliculas`; either
may be left out.

```json
{
  "series": [
    {
      "id": "S1",
      "nombre": "Example Show",
      "paisDeOrigen": "MX",
      "genero": "drama",
      "clasificacion": "B",
      "episodios": [
        {"id": "E1", "titulo": "Pilot", "duracion": 42.5,
         "genero": "drama", "temporada": 1}
      ]
    }
  ],
  "peliculas": [
    {"id": "P1", "titulo": "Example Film", "duracion": 110,
     "genero": "comedy", "clasificacion": "A", "paisDeOrigen": "AR",
     "duracionCreditos": 6}
  ]
}
```

`calificacion`, `numeroDeCalificaciones` and `sumCalificaciones` can be set
on any entry and default to zero. `duracionCreditos` and `episodios` are
optional too.

## Ratings

Each rating adds a score to a running sum and count; the stored rating is
the average truncated to a whole number.

## Using it from Python

```python
from streamcat.catalog import Catalog

catalog = Catalog.load("bucket.json")
show = catalog.find_series("Example Show")
print(show.marathon_duration())
print(show.first_in_season(1))

film = catalog.find_movie("P1")
film.rate(4)
print(film.total_duration())
```

`Catalog.from_dict` builds a catalogue from data already in memory and raises
`ValueError` when a required field is missing or has the wrong type.
`Catalog.movies_with_rating` lists movies with a given rating,
`Catalog.find_episode` looks up an episode within a series, and
`Catalog.all_videos` yields every movie and then every episode. Every
`Movie`, `Episode` and `Series` has a `describe()` method returning the text
the menus print, and adding episodes (`episode + episode`, or
`sum(episodes, 0.0)`) gives their combined running time.

`streamcat.cli.Console` runs the menus over any pair of text streams.

## What it does not do

Ratings given during a session are kept in memory only; nothing is written
back to the catalogue file. There is no way to add, edit or remove series,
episodes or movies from the menus.

## Tests

```
pip install .[test]
pytest
```