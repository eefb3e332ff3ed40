import pytest

from streamcat.episode import Episode
from streamcat.series import Series


def make_episode(ep_id, season, duration=40.0, rating=0):
    return Episode(
        id=ep_id,
        title=f"Episode {ep_id}",
        duration=duration,
        genre="drama",
        season=season,
        rating=rating,
    )


@pytest.fixture
def series():
    return Series(
        id="s1",
        name="Dark",
        country="Alemania",
        genre="thriller",
        classification="C",
        episodes=[
            make_episode("a", 1, 50.0, rating=3),
            make_episode("b", 1, 45.0, rating=5),
            make_episode("c", 2, 55.0, rating=5),
        ],
    )


def test_describe_layout(series):
    lines = series.describe().splitlines()
    assert lines[:3] == ["", "", ""]
    assert lines[3] == "-----------SERIE-----------"
    assert lines[4:] == [
        "id: s1",
        "nombre: Dark",
        "calificacion: 0",
        "pais de origen: Alemania",
        "genero: thriller",
        "clasificacion: C",
    ]


def test_add_episode_appends(series):
    extra = make_episode("d", 3)
    series.add_episode(extra)
    assert series.episodes[-1] is extra
    assert len(series.episodes) == 4


def test_episodes_list_is_copied():
    source = [make_episode("a", 1)]
    s = Series(id="x", name="n", country="c", genre="g", classification="A", episodes=source)
    s.add_episode(make_episode("b", 1))
    assert len(source) == 1


def test_first_in_season(series):
    assert series.first_in_season(1).id == "a"
    assert series.first_in_season(2).id == "c"


def test_first_in_missing_season(series):
    assert series.first_in_season(9) is None


def test_first_with_rating(series):
    assert series.first_with_rating(5).id == "b"
    assert series.first_with_rating(3).id == "a"
    assert series.first_with_rating(1) is None


@pytest.mark.parametrize("bad", [0, 6, -1])
def test_first_with_rating_out_of_range(series, bad):
    with pytest.raises(ValueError):
        series.first_with_rating(bad)


def test_rate_truncates(series):
    series.rate(4)
    series.rate(5)
    assert series.rating == 4.0
    assert series.rating_count == 2
    assert series.rating_sum == 9


def test_rate_shows_in_describe(series):
    series.rate(5)
    assert "calificacion: 5" in series.describe()


def test_marathon_duration(series):
    expected = sum(ep.duration for ep in series.episodes)
    assert series.marathon_duration() == expected


def test_marathon_of_empty_series():
    s = Series(id="e", name="Empty", country="c", genre="g", classification="A")
    assert s.marathon_duration() == 0.0