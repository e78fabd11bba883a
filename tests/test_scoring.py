import pytest

from core.route import Route, COMFORT
from services.scoring import ComfortScorer, MAX_SCORE, MIN_SCORE


def test_scores_route_objects(config):
    route = Route(distance=2400.0, duration=1800.0, geometry={"type": "LineString", "coordinates": []}, kind=COMFORT)
    score = ComfortScorer(config).score(route)
    assert score == pytest.approx(8.0)
    assert MIN_SCORE <= score <= MAX_SCORE


def test_scores_plain_route_records(config):
    record = {"distance": 1200.0, "duration": 900.0, "geometry": None}
    assert ComfortScorer(config).score(record) == pytest.approx(8.0)


@pytest.mark.parametrize("placeholder, expected", [(12.0, 10.0), (-3.0, 0.0), (6.5, 6.5)])
def test_score_is_clamped_to_range(config, placeholder, expected):
    class Configured(config):
        COMFORT_SCORE_PLACEHOLDER = placeholder

    assert ComfortScorer(Configured).score({"distance": 0.0, "duration": 0.0, "geometry": None}) == expected
