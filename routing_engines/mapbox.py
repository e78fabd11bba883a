"""Mapbox Router - Mapbox Directions API integration."""
import logging

import requests

from core.route import Route, FASTEST
from routing_engines.cache import APICache
from routing_engines.errors import DirectionsError

logger = logging.getLogger(__name__)


class MapboxRouter:
    """Client for the Mapbox Directions API."""

    def __init__(self, access_token, base_url="https://api.mapbox.com", timeout=15, cache=None):
        if not access_token:
            raise ValueError("Mapbox access token not set. Please set MAPBOX_ACCESS_TOKEN in the .env file.")
        self.access_token = access_token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.cache = cache

    @classmethod
    def from_config(cls, config):
        cache = APICache(cache_file=config.CACHE_FILE) if config.CACHE_ENABLED else None
        return cls(
            access_token=config.MAPBOX_ACCESS_TOKEN,
            base_url=config.MAPBOX_URL,
            timeout=config.REQUEST_TIMEOUT,
            cache=cache,
        )

    @staticmethod
    def format_coordinates(points):
        """Convert list of (lng, lat) to Mapbox format 'lng,lat;lng,lat;...'"""
        return ';'.join([f"{lng},{lat}" for lng, lat in points])

    def get_routes(self, start, end, waypoints=(), profile='walking', kind=FASTEST):
        """
        Get route alternatives from start to end through the given waypoints.

        Args:
            start: (lng, lat) tuple
            end: (lng, lat) tuple
            waypoints: Ordered list of (lng, lat) tuples to pass through
            profile: Routing profile ('walking', 'cycling', 'driving')
            kind: Label attached to the returned routes

        Returns:
            List of Route objects, best first
        """
        waypoints = list(waypoints)
        points = [start] + waypoints + [end]

        cached = self.cache.get('directions', points, profile=profile) if self.cache else None
        data = cached if cached is not None else self._request(points, profile)

        if not isinstance(data, dict):
            raise DirectionsError("Mapbox error: response is not a JSON object")
        if data.get('code') != 'Ok':
            raise DirectionsError(f"Mapbox error: {data.get('message', data.get('code', 'Unknown error'))}")
        if not data.get('routes'):
            raise DirectionsError("No route found")

        try:
            routes = [Route.from_mapbox(r, waypoints=waypoints, kind=kind) for r in data['routes']]
        except (KeyError, TypeError, ValueError) as e:
            raise DirectionsError(f"Unexpected Mapbox response format: {e}") from e

        if self.cache and cached is None:
            self.cache.set('directions', points, data, profile=profile)
        return routes

    def _request(self, points, profile):
        url = f"{self.base_url}/directions/v5/mapbox/{profile}/{self.format_coordinates(points)}"
        params = {
            'alternatives': 'true',
            'geometries': 'geojson',
            'steps': 'true',
            'access_token': self.access_token,
        }

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.error("Mapbox API error: %s", e)
            raise
