"""
Configuration settings for the Comfort Route Planner.

This module centralizes all configuration parameters for venue search,
clustering, waypoint selection, routing, and the web API.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Central configuration for the comfort route planner."""

    # =========================================================================
    # Provider Credentials
    # =========================================================================
    FOURSQUARE_API_KEY: str = os.getenv("FOURSQUARE_API_KEY", "")
    MAPBOX_ACCESS_TOKEN: str = os.getenv("MAPBOX_ACCESS_TOKEN", "")

    # =========================================================================
    # Places Search (Foursquare)
    # =========================================================================
    FOURSQUARE_URL: str = os.getenv("FOURSQUARE_URL", "https://api.foursquare.com/v3")
    VENUE_SEARCH_RADIUS: int = 5000  # meters around the route midpoint
    VENUE_SEARCH_PADDING: float = 0.01  # degrees added around start/end, roughly 1km
    VENUE_OPEN_NOW: bool = os.getenv("VENUE_OPEN_NOW", "true").lower() == "true"

    # =========================================================================
    # Directions (Mapbox)
    # =========================================================================
    MAPBOX_URL: str = os.getenv("MAPBOX_URL", "https://api.mapbox.com")
    ROUTING_PROFILE: str = "walking"
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "15"))  # seconds

    # =========================================================================
    # Clustering
    # =========================================================================
    NUM_CLUSTERS: int = int(os.getenv("NUM_CLUSTERS", "3"))
    MAX_CLUSTERS: int = 23  # Mapbox accepts 25 coordinates, start and end included
    MAX_ITERATIONS: int = 100  # hard cap on k-means iterations
    RANDOM_SEED: int | None = int(os.environ["RANDOM_SEED"]) if os.getenv("RANDOM_SEED") else None

    # =========================================================================
    # Waypoints & Scoring
    # =========================================================================
    MIN_WAYPOINT_DISTANCE: float = 0.01  # degrees from start/end, roughly 1km
    COMFORT_SCORE_PLACEHOLDER: float = 8.0  # out of 10

    # =========================================================================
    # API Cache
    # =========================================================================
    CACHE_ENABLED: bool = os.getenv("CACHE_ENABLED", "false").lower() == "true"
    CACHE_FILE: str = os.getenv("CACHE_FILE", "data/api_cache.json")

    # =========================================================================
    # Web & Logging
    # =========================================================================
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
