import pytest

from streamcat.movie import Movie


def make_movie(**overrides):
    values = {
        "id": "m1",
        "title": "Origen",
        "duration": 120.0,
        "genre": "accion",
        "classification": "B",
        "country": "Mexico",
        "credits_duration": 8.0,
    }
    values.update(overrides)
    return Movie(**values)


def test_total_duration_includes_credits():
    movie = make_movie(duration=120.0, credits_duration=8.0)
    assert movie.total_duration() == movie.duration + movie.credits_duration
    assert movie.total_duration() > movie.duration


def test_credits_default_to_zero():
    movie = Movie(
        id="m2", title="T", duration=90.0, genre="g", classification="A", country="X"
    )
    assert movie.credits_duration == 0.0
    assert movie.total_duration() == 90.0


def test_describe_layout():
    lines = make_movie().describe().splitlines()
    assert lines[0] == ""
    assert lines[1] == "---------------PELICULA------------: "
    assert lines[2] == "titulo: Origen"
    assert lines[3] == (
        "id: m1 ,duracion: 120 ,genero: accion ,clasificacion: B "
        ",pais de origen: Mexico ,duracion de creditos: 8"
    )


def test_rating_is_whole_number():
    movie = make_movie(rating=4.6)
    assert movie.rating == 4


def test_rate_updates_movie():
    movie = make_movie()
    movie.rate(3)
    assert movie.rating == 3
    assert movie.rating_sum == 3


def test_classification_required():
    with pytest.raises(TypeError):
        Movie(id="m", title="t", duration=1.0, genre="g", country="X")