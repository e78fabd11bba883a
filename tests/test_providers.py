import json

import pytest
import requests

from core.route import COMFORT
from core.venue import Venue
from routing_engines.cache import APICache
from routing_engines.errors import DirectionsError, PlacesError
from routing_engines.foursquare import FoursquareClient
from routing_engines.mapbox import MapboxRouter


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


@pytest.fixture
def fake_get(monkeypatch):
    calls = []
    responses = []

    def _get(url, params=None, headers=None, timeout=None):
        calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        return responses.pop(0)

    monkeypatch.setattr(requests, "get", _get)
    _get.calls = calls
    _get.responses = responses
    return _get


MAPBOX_OK = {
    "code": "Ok",
    "routes": [
        {"distance": 2400.0, "duration": 1800.0, "geometry": {"type": "LineString", "coordinates": [[-73.99, 40.73], [-73.97, 40.75]]}},
        {"distance": 2600.0, "duration": 1950.0, "geometry": {"type": "LineString", "coordinates": []}},
    ],
}

START = (-73.99, 40.73)
END = (-73.97, 40.75)


# -------------------------
# Mapbox
# -------------------------

def test_mapbox_builds_request_and_parses_routes(fake_get):
    fake_get.responses.append(FakeResponse(MAPBOX_OK))
    router = MapboxRouter("token", base_url="https://api.mapbox.test/", timeout=7)

    routes = router.get_routes(START, END, [(-73.98, 40.74)], kind=COMFORT)

    call = fake_get.calls[0]
    assert call["url"] == "https://api.mapbox.test/directions/v5/mapbox/walking/-73.99,40.73;-73.98,40.74;-73.97,40.75"
    assert call["params"]["alternatives"] == "true"
    assert call["params"]["geometries"] == "geojson"
    assert call["params"]["access_token"] == "token"
    assert call["timeout"] == 7

    assert len(routes) == 2
    assert routes[0].distance == 2400.0
    assert routes[0].duration_min == pytest.approx(30.0)
    assert routes[0].kind == COMFORT
    assert routes[0].waypoints == [(-73.98, 40.74)]


def test_mapbox_error_code_raises(fake_get):
    fake_get.responses.append(FakeResponse({"code": "NoRoute", "message": "No route found"}))
    with pytest.raises(DirectionsError, match="No route found"):
        MapboxRouter("token").get_routes(START, END)


def test_mapbox_empty_routes_raises(fake_get):
    fake_get.responses.append(FakeResponse({"code": "Ok", "routes": []}))
    with pytest.raises(DirectionsError):
        MapboxRouter("token").get_routes(START, END)


def test_mapbox_malformed_route_raises(fake_get):
    fake_get.responses.append(FakeResponse({"code": "Ok", "routes": [{"geometry": None}]}))
    with pytest.raises(DirectionsError):
        MapboxRouter("token").get_routes(START, END)


def test_mapbox_non_object_response_raises(fake_get):
    fake_get.responses.append(FakeResponse(["Ok"]))
    with pytest.raises(DirectionsError):
        MapboxRouter("token").get_routes(START, END)


def test_mapbox_http_error_propagates(fake_get):
    fake_get.responses.append(FakeResponse({"message": "Not Authorized"}, status_code=401))
    with pytest.raises(requests.exceptions.HTTPError):
        MapboxRouter("token").get_routes(START, END)


def test_mapbox_requires_token():
    with pytest.raises(ValueError):
        MapboxRouter("")


def test_mapbox_uses_cache(fake_get, tmp_path):
    fake_get.responses.append(FakeResponse(MAPBOX_OK))
    cache = APICache(cache_file=str(tmp_path / "cache.json"))
    router = MapboxRouter("token", cache=cache)

    first = router.get_routes(START, END)
    second = router.get_routes(START, END)

    assert len(fake_get.calls) == 1
    assert [r.distance for r in first] == [r.distance for r in second]


def test_mapbox_does_not_cache_errors(fake_get, tmp_path):
    fake_get.responses.append(FakeResponse({"code": "NoRoute"}))
    fake_get.responses.append(FakeResponse(MAPBOX_OK))
    router = MapboxRouter("token", cache=APICache(cache_file=str(tmp_path / "cache.json")))

    with pytest.raises(DirectionsError):
        router.get_routes(START, END)
    assert router.get_routes(START, END)[0].distance == 2400.0
    assert len(fake_get.calls) == 2


def test_mapbox_from_config(config):
    router = MapboxRouter.from_config(config)
    assert router.access_token == config.MAPBOX_ACCESS_TOKEN
    assert router.cache is None


# -------------------------
# Foursquare
# -------------------------

FOURSQUARE_OK = {
    "results": [
        {
            "fsq_id": "abc",
            "name": "Corner Cafe",
            "categories": [{"id": 13032, "name": "Cafe"}],
            "geocodes": {"main": {"latitude": 40.741, "longitude": -73.981}},
        },
        {"fsq_id": "def", "name": "Old Bookshop", "latitude": 40.745, "longitude": -73.975},
        {"fsq_id": "ghi", "name": "Nowhere"},
    ]
}


def test_foursquare_builds_request_and_parses_venues(fake_get):
    fake_get.responses.append(FakeResponse(FOURSQUARE_OK))
    client = FoursquareClient("fsq-key", base_url="https://places.test/v3", radius=4000, padding=0.01)

    venues = client.search_venues(START, END)

    call = fake_get.calls[0]
    assert call["url"] == "https://places.test/v3/places/search"
    assert call["headers"]["Authorization"] == "fsq-key"
    assert call["params"]["radius"] == 4000
    assert call["params"]["open_now"] == "true"
    lat, lng = map(float, call["params"]["ll"].split(","))
    assert (lat, lng) == (pytest.approx(40.74), pytest.approx(-73.98))

    assert [v.name for v in venues] == ["Corner Cafe", "Old Bookshop"]
    assert venues[0] == Venue(id="abc", name="Corner Cafe", lng=-73.981, lat=40.741, category="Cafe")
    assert venues[1].category is None


def test_foursquare_can_skip_open_now(fake_get):
    fake_get.responses.append(FakeResponse({"results": []}))
    FoursquareClient("fsq-key", open_now=False).search_venues(START, END)
    assert "open_now" not in fake_get.calls[0]["params"]


def test_foursquare_without_results_raises(fake_get):
    fake_get.responses.append(FakeResponse({"message": "Invalid request"}))
    with pytest.raises(PlacesError, match="Invalid request"):
        FoursquareClient("fsq-key").search_venues(START, END)


def test_foursquare_non_object_response_raises(fake_get):
    fake_get.responses.append(FakeResponse([{"fsq_id": "abc"}]))
    with pytest.raises(PlacesError):
        FoursquareClient("fsq-key").search_venues(START, END)


def test_foursquare_requires_key():
    with pytest.raises(ValueError):
        FoursquareClient(None)


def test_foursquare_uses_cache(fake_get, tmp_path):
    fake_get.responses.append(FakeResponse(FOURSQUARE_OK))
    client = FoursquareClient("fsq-key", cache=APICache(cache_file=str(tmp_path / "cache.json")))

    client.search_venues(START, END)
    venues = client.search_venues(START, END)

    assert len(fake_get.calls) == 1
    assert len(venues) == 2


# -------------------------
# Cache
# -------------------------

def test_cache_persists_to_disk(tmp_path):
    path = tmp_path / "nested" / "cache.json"
    cache = APICache(cache_file=str(path))
    cache.set("directions", [START, END], {"code": "Ok"}, profile="walking")

    reloaded = APICache(cache_file=str(path))
    assert reloaded.get("directions", [START, END], profile="walking") == {"code": "Ok"}
    assert reloaded.get("directions", [START, END], profile="cycling") is None
    assert reloaded.get("places", [START, END], profile="walking") is None


def test_cache_ignores_corrupt_file(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding="utf-8")
    assert APICache(cache_file=str(path)).cache == {}


def test_cache_clear(tmp_path):
    path = tmp_path / "cache.json"
    cache = APICache(cache_file=str(path))
    cache.set("places", [START], {"results": []})
    cache.clear()
    assert json.loads(path.read_text(encoding="utf-8")) == {}
