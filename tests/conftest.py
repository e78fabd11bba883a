import pytest

from config import Config
from core.venue import Venue


class TestConfig(Config):
    FOURSQUARE_API_KEY = "fsq-test-key"
    MAPBOX_ACCESS_TOKEN = "mapbox-test-token"
    CACHE_ENABLED = False
    RANDOM_SEED = None
    NUM_CLUSTERS = 2


@pytest.fixture
def config():
    return TestConfig


@pytest.fixture
def make_venue():
    counter = {"n": 0}

    def _make(lng, lat, name=None, category="Cafe"):
        counter["n"] += 1
        n = counter["n"]
        return Venue(id=f"v{n}", name=name or f"Venue {n}", lng=lng, lat=lat, category=category)

    return _make
