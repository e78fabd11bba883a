"""Geo utilities - flat coordinate math on (lng, lat) points.

Distances here are Euclidean on raw decimal degrees. That is only a
reasonable approximation at city scale, which is all the planner needs.
"""
from __future__ import annotations

import math
from typing import Iterable, Sequence

Point = tuple[float, float]  # (lng, lat)


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Straight-line distance between two (lng, lat) points, in degrees."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def mean_point(points: Iterable[Sequence[float]]) -> Point:
    """Coordinate-wise mean of a non-empty collection of points."""
    points = list(points)
    if not points:
        raise ValueError("Cannot compute the mean of an empty point set")
    n = len(points)
    return (
        sum(p[0] for p in points) / n,
        sum(p[1] for p in points) / n,
    )


def bounding_box(start: Sequence[float], end: Sequence[float], padding: float = 0.0) -> tuple[float, float, float, float]:
    """
    Padded bounding box around two points.

    Returns:
        (min_lng, min_lat, max_lng, max_lat)
    """
    return (
        min(start[0], end[0]) - padding,
        min(start[1], end[1]) - padding,
        max(start[0], end[0]) + padding,
        max(start[1], end[1]) + padding,
    )


def box_center(box: tuple[float, float, float, float]) -> Point:
    min_lng, min_lat, max_lng, max_lat = box
    return ((min_lng + max_lng) / 2, (min_lat + max_lat) / 2)


def to_point(value) -> Point:
    """
    Coerce a point-like value to a (lng, lat) tuple.

    Accepts dicts with 'lng'/'lat' (or 'lon'/'longitude'/'latitude') keys,
    or a two-item list or tuple already in (lng, lat) order. Strings are
    rejected even when they happen to have two characters.
    """
    if isinstance(value, dict):
        lng = value.get('lng', value.get('lon', value.get('longitude')))
        lat = value.get('lat', value.get('latitude'))
        if lng is None or lat is None:
            raise ValueError(f"Point is missing coordinates: {value!r}")
        return (float(lng), float(lat))
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"Point must be a (lng, lat) pair: {value!r}")
    lng, lat = value
    return (float(lng), float(lat))
