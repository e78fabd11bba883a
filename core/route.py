"""Route model - one walking route returned by the directions provider."""
from __future__ import annotations

FASTEST = "fastest"
COMFORT = "comfort"


class Route:
    """A walking route with distance/duration info and the waypoints that shaped it."""

    def __init__(
        self,
        distance: float,
        duration: float,
        geometry: dict | None = None,
        waypoints: list[tuple[float, float]] | None = None,
        kind: str = FASTEST,
    ) -> None:
        self.distance = distance  # meters
        self.duration = duration  # seconds
        self.geometry = geometry
        self.waypoints: list[tuple[float, float]] = list(waypoints or [])
        self.kind = kind
        self.comfort_score: float | None = None

    @classmethod
    def from_mapbox(cls, data: dict, waypoints: list | None = None, kind: str = FASTEST) -> Route:
        """Build a Route from one entry of a Mapbox Directions ``routes`` array."""
        return cls(
            distance=float(data['distance']),
            duration=float(data['duration']),
            geometry=data.get('geometry'),
            waypoints=waypoints,
            kind=kind,
        )

    @property
    def distance_km(self) -> float:
        return self.distance / 1000

    @property
    def duration_min(self) -> float:
        return self.duration / 60

    def set_comfort_score(self, score: float) -> None:
        self.comfort_score = score

    def get_stats(self) -> dict:
        return {
            'kind': self.kind,
            'waypoints': len(self.waypoints),
            'distance_km': round(self.distance_km, 2),
            'duration_min': round(self.duration_min, 1),
            'comfort_score': self.comfort_score,
        }

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'distance': self.distance,
            'duration': self.duration,
            'geometry': self.geometry,
            'waypoints': [{'lng': lng, 'lat': lat} for lng, lat in self.waypoints],
            'comfort_score': self.comfort_score,
        }

    def __repr__(self) -> str:
        return f"Route(kind={self.kind}, distance_km={self.distance_km:.2f})"
