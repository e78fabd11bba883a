"""Waypoint Service - turns venue clusters into an ordered list of detour waypoints."""
from abc import ABC, abstractmethod

from services.clustering import venue_location
from utils.geo import euclidean_distance, mean_point


def cluster_centroids(clusters, key=venue_location):
    """
    Centroid of every non-empty cluster, in cluster order.

    Args:
        clusters: Iterable of Cluster objects or plain lists of items
        key: Coordinate accessor for cluster members

    Returns:
        List of (lng, lat) tuples; empty clusters contribute nothing
    """
    centroids = []
    for cluster in clusters:
        members = list(cluster)
        if not members:
            continue
        centroids.append(mean_point(key(member) for member in members))
    return centroids


def filter_centroids(centroids, start, end, min_distance=0.01):
    """Keep centroids farther than min_distance from both start and end."""
    return [
        c for c in centroids
        if euclidean_distance(c, start) > min_distance and euclidean_distance(c, end) > min_distance
    ]


class WaypointSequencer(ABC):
    """Orders detour candidates into the sequence passed to the directions provider."""

    @abstractmethod
    def order(self, candidates, start):
        """Return a permutation of candidates, visited starting from start."""
        pass


class GreedySequencer(WaypointSequencer):
    """Nearest-neighbor ordering from the start point. Not globally optimal."""

    def order(self, candidates, start):
        if len(candidates) <= 1:
            return list(candidates)

        ordered = []
        current = start
        remaining = list(candidates)

        while remaining:
            min_dist = float('inf')
            min_index = -1
            for i, candidate in enumerate(remaining):
                dist = euclidean_distance(current, candidate)
                if dist < min_dist:
                    min_dist = dist
                    min_index = i

            if min_index == -1:
                break

            current = remaining.pop(min_index)
            ordered.append(current)

        return ordered


class WaypointService:
    """Service for deriving comfort-route waypoints from venue clusters."""

    def __init__(self, config, sequencer=None):
        self.config = config
        self.sequencer = sequencer or GreedySequencer()

    def determine_waypoints(self, clusters, start, end, min_distance=None):
        """
        Determine waypoints for the comfort route.

        Args:
            clusters: List of Cluster objects
            start: (lng, lat) start of the walk
            end: (lng, lat) destination
            min_distance: Override for the start/end exclusion radius

        Returns:
            Ordered list of (lng, lat) waypoints
        """
        if min_distance is None:
            min_distance = self.config.MIN_WAYPOINT_DISTANCE

        centroids = cluster_centroids(clusters)
        significant = filter_centroids(centroids, start, end, min_distance)
        return self.sequencer.order(significant, start)
