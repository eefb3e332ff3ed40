from dataclasses import dataclass

import pytest

from streamcat.video import Video


@dataclass(kw_only=True)
class Clip(Video):
    def describe(self) -> str:
        return f"clip {self.title}"


def make_clip(**overrides):
    values = {"id": "c1", "title": "Intro", "duration": 12.5, "genre": "drama"}
    values.update(overrides)
    return Clip(**values)


def test_video_is_abstract():
    with pytest.raises(TypeError):
        Video(id="v", title="t", duration=1.0, genre="g")


def test_total_duration_is_duration():
    clip = make_clip(duration=33.0)
    assert Video.total_duration(clip) == 33.0


def test_defaults_for_ratings():
    clip = make_clip()
    assert (clip.rating_count, clip.rating_sum, clip.rating) == (0, 0, 0)
    assert Video.rate(clip, 4) == 4
    assert (clip.rating_count, clip.rating_sum, clip.rating) == (1, 4, 4)


def test_fractional_rating_fields_truncated():
    clip = make_clip(rating_sum=7.9, rating=3.7)
    assert clip.rating_sum == 7
    assert clip.rating == 3
    assert Video.rate(clip, 1) == 8
    assert clip.rating_sum == 8


def test_first_rating_becomes_average():
    clip = make_clip()
    assert Video.rate(clip, 5) == 5
    assert clip.rating == 5
    assert clip.rating_count == 1
    assert clip.rating_sum == 5


def test_average_is_truncated():
    clip = make_clip()
    Video.rate(clip, 4)
    assert Video.rate(clip, 5) == 4
    assert clip.rating == 4
    assert clip.rating_count == 2


def test_rating_builds_on_existing_totals():
    clip = make_clip(rating_count=2, rating_sum=6, rating=3)
    assert Video.rate(clip, 3) == 3
    assert clip.rating_count == 3
    assert clip.rating_sum == 9
    assert clip.rating == 3


def test_rate_rejects_non_numeric():
    clip = make_clip()
    with pytest.raises(ValueError):
        Video.rate(clip, "bad")