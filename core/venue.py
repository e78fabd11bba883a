"""Venue model - a point of interest returned by the places provider."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Venue:
    """A point of interest with a (lng, lat) location and display metadata."""
    id: str
    name: str
    lng: float
    lat: float
    category: str | None = None

    @property
    def location(self) -> tuple[float, float]:
        return (self.lng, self.lat)

    @classmethod
    def from_foursquare(cls, result: dict) -> Venue:
        """
        Build a Venue from a Foursquare place search result.

        Coordinates are read from ``geocodes.main`` and fall back to the
        top-level ``latitude``/``longitude`` keys.

        Raises:
            ValueError: if the result carries no usable coordinates
        """
        main = (result.get('geocodes') or {}).get('main') or {}
        lat = main.get('latitude', result.get('latitude'))
        lng = main.get('longitude', result.get('longitude'))
        if lat is None or lng is None:
            raise ValueError(f"Venue {result.get('fsq_id')!r} has no coordinates")

        categories = result.get('categories') or []
        category = categories[0].get('name') if categories else None

        return cls(
            id=str(result.get('fsq_id', '')),
            name=result.get('name', ''),
            lng=float(lng),
            lat=float(lat),
            category=category,
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id, 'name': self.name, 'category': self.category,
            'lat': self.lat, 'lng': self.lng,
        }
