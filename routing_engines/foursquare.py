"""Foursquare Client - Foursquare Places search integration."""
import logging

import requests

from core.venue import Venue
from routing_engines.cache import APICache
from routing_engines.errors import PlacesError
from utils.geo import bounding_box, box_center

logger = logging.getLogger(__name__)


class FoursquareClient:
    """Client for the Foursquare Places API."""

    def __init__(self, api_key, base_url="https://api.foursquare.com/v3", timeout=15,
                 radius=5000, padding=0.01, open_now=True, cache=None):
        if not api_key:
            raise ValueError("Foursquare API key not set. Please set FOURSQUARE_API_KEY in the .env file.")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.radius = radius
        self.padding = padding
        self.open_now = open_now
        self.cache = cache

    @classmethod
    def from_config(cls, config):
        cache = APICache(cache_file=config.CACHE_FILE) if config.CACHE_ENABLED else None
        return cls(
            api_key=config.FOURSQUARE_API_KEY,
            base_url=config.FOURSQUARE_URL,
            timeout=config.REQUEST_TIMEOUT,
            radius=config.VENUE_SEARCH_RADIUS,
            padding=config.VENUE_SEARCH_PADDING,
            open_now=config.VENUE_OPEN_NOW,
            cache=cache,
        )

    def search_venues(self, start, end):
        """
        Search venues around the walk from start to end.

        The query is centred on the padded bounding box of the two points and
        limited by ``radius`` meters.

        Args:
            start: (lng, lat) tuple
            end: (lng, lat) tuple

        Returns:
            List of Venue objects; results without coordinates are skipped
        """
        center = box_center(bounding_box(start, end, padding=self.padding))
        params = {
            'll': f"{center[1]},{center[0]}",
            'radius': self.radius,
        }
        if self.open_now:
            params['open_now'] = 'true'

        cached = self.cache.get('places', [center], **params) if self.cache else None
        data = cached if cached is not None else self._request(params)

        if not isinstance(data, dict):
            raise PlacesError("Foursquare error: response is not a JSON object")
        results = data.get('results')
        if not isinstance(results, list):
            raise PlacesError(f"Foursquare error: {data.get('message', 'response has no results')}")

        venues = []
        for result in results:
            try:
                venues.append(Venue.from_foursquare(result))
            except (AttributeError, TypeError, ValueError) as e:
                logger.debug("Skipping venue: %s", e)

        if self.cache and cached is None:
            self.cache.set('places', [center], data, **params)
        return venues

    def _request(self, params):
        headers = {
            'Accept': 'application/json',
            'Authorization': self.api_key,
        }

        try:
            response = requests.get(
                f"{self.base_url}/places/search",
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.error("Foursquare API error: %s", e)
            raise
