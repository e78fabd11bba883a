"""Clustering Service - partitions venues into detour clusters."""
import logging
from dataclasses import dataclass, field

from core.cluster import Cluster
from utils.kmeans import KMeansClusterer, RoundRobinClusterer

logger = logging.getLogger(__name__)


def venue_location(item):
    """Coordinate accessor for Venue objects and raw (lng, lat) pairs."""
    location = getattr(item, 'location', None)
    if location is not None:
        return location
    return (item[0], item[1])


@dataclass
class ClusteringResult:
    """Groups produced by one partition call and how they were produced."""
    groups: list = field(default_factory=list)
    used_fallback: bool = False
    clusterer: object = None


class ClusteringService:
    """Service for clustering venues into groups."""

    def __init__(self, config, primary=KMeansClusterer, fallback=RoundRobinClusterer):
        self.config = config
        self.primary = primary
        self.fallback = fallback

    def partition(self, items, num_clusters, key=venue_location, max_iterations=None, random_state=None):
        """
        Partition items into exactly num_clusters groups.

        Runs k-means on the coordinates returned by ``key``. Any failure in
        the primary clusterer (malformed point, non-finite coordinate,
        numerical error) is logged and replaced by a round-robin partition,
        so this method never raises for well-typed arguments. Nothing about
        the call is kept on the service, so one instance can serve
        concurrent requests.

        Args:
            items: Sequence of venues or (lng, lat) pairs
            num_clusters: Number of clusters (k)
            key: Callable returning (lng, lat) for an item
            max_iterations: k-means iteration cap (defaults to config)
            random_state: None, int seed, or numpy Generator

        Returns:
            ClusteringResult whose groups are num_clusters lists of the
            original items (no groups if k <= 0)
        """
        items = list(items)
        if num_clusters <= 0:
            return ClusteringResult()
        if not items:
            return ClusteringResult(groups=[[] for _ in range(num_clusters)])

        if max_iterations is None:
            max_iterations = self.config.MAX_ITERATIONS

        used_fallback = False
        try:
            coordinates = [key(item) for item in items]
            clusterer = self.primary(
                n_clusters=num_clusters,
                max_iter=max_iterations,
                random_state=random_state,
            )
            labels = clusterer.fit(coordinates).labels_
        except Exception as e:
            logger.warning("k-means failed (%s), falling back to round-robin clustering", e)
            used_fallback = True
            clusterer = self.fallback(n_clusters=num_clusters)
            labels = clusterer.fit(items).labels_

        groups = [[] for _ in range(num_clusters)]
        for item, label in zip(items, labels):
            groups[int(label)].append(item)
        return ClusteringResult(groups=groups, used_fallback=used_fallback, clusterer=clusterer)

    def cluster_venues(self, venues, num_clusters=None, random_state=None):
        """
        Cluster venues into groups.

        Args:
            venues: List of Venue objects
            num_clusters: Number of clusters to create (defaults to config)
            random_state: Random seed or numpy Generator for reproducibility

        Returns:
            Tuple of (list of Cluster objects, whether round robin was used)
        """
        if num_clusters is None:
            num_clusters = self.config.NUM_CLUSTERS
        result = self.partition(venues, num_clusters, random_state=random_state)
        clusters = [Cluster(id=i, venues=group) for i, group in enumerate(result.groups)]
        return clusters, result.used_fallback
