"""Comfort Route Planner - main orchestrator for fastest vs. comfort routes."""
import logging
from dataclasses import dataclass, field

from core.route import Route, FASTEST, COMFORT
from routing_engines.foursquare import FoursquareClient
from routing_engines.mapbox import MapboxRouter
from services.clustering import ClusteringService
from services.scoring import ComfortScorer
from services.waypoints import WaypointService

logger = logging.getLogger(__name__)


@dataclass
class RoutePlan:
    """Result of one planning request."""
    start: tuple
    end: tuple
    fastest: Route
    comfort: Route
    waypoints: list = field(default_factory=list)
    clusters: list = field(default_factory=list)
    venue_count: int = 0
    used_fallback: bool = False

    def to_dict(self):
        return {
            'start': {'lng': self.start[0], 'lat': self.start[1]},
            'end': {'lng': self.end[0], 'lat': self.end[1]},
            'fastest': self.fastest.to_dict(),
            'comfort': self.comfort.to_dict(),
            'waypoints': [{'lng': lng, 'lat': lat} for lng, lat in self.waypoints],
            'clusters': [cluster.get_stats() for cluster in self.clusters],
            'venue_count': self.venue_count,
            'used_fallback': self.used_fallback,
        }


class ComfortRoutePlanner:
    """Coordinates venue search, clustering, waypoint selection, routing and scoring."""

    def __init__(self, config, places_client=None, router=None, verbose=False):
        self.config = config
        self.verbose = verbose

        self._places_client = places_client
        self._router = router

        self.clustering_service = ClusteringService(config)
        self.waypoint_service = WaypointService(config)
        self.scorer = ComfortScorer(config)

    @property
    def places_client(self):
        if self._places_client is None:
            self._places_client = FoursquareClient.from_config(self.config)
        return self._places_client

    @property
    def router(self):
        if self._router is None:
            self._router = MapboxRouter.from_config(self.config)
        return self._router

    def _step(self, message):
        if self.verbose:
            print(message)
        else:
            logger.info(message.strip())

    def fetch_venues(self, start, end):
        """Fetch venues around the walk."""
        self._step("[1] Searching venues around the route...")
        venues = self.places_client.search_venues(start, end)
        self._step(f"    OK: {len(venues)} venues found")
        return venues

    def create_clusters(self, venues, num_clusters=None, random_state=None):
        """Cluster venues into groups. Returns (clusters, used_fallback)."""
        if num_clusters is None:
            num_clusters = self.config.NUM_CLUSTERS
        self._step(f"[2] Creating {num_clusters} venue clusters...")

        clusters, used_fallback = self.clustering_service.cluster_venues(
            venues, num_clusters, random_state=random_state
        )

        if used_fallback:
            self._step("    WARNING: k-means failed, used round-robin clusters")
        non_empty = sum(1 for c in clusters if not c.is_empty())
        self._step(f"    OK: {len(clusters)} clusters created ({non_empty} non-empty)")
        return clusters, used_fallback

    def determine_waypoints(self, clusters, start, end):
        """Pick and order detour waypoints."""
        self._step("[3] Selecting detour waypoints...")
        waypoints = self.waypoint_service.determine_waypoints(clusters, start, end)
        self._step(f"    OK: {len(waypoints)} waypoints selected")
        return waypoints

    def fetch_routes(self, start, end, waypoints):
        """
        Fetch the fastest and comfort routes.

        Returns:
            Tuple of (fastest, comfort) Route objects. Without waypoints the
            comfort route is the fastest route relabelled.
        """
        profile = self.config.ROUTING_PROFILE
        self._step("[4] Fetching routes...")

        fastest = self.router.get_routes(start, end, profile=profile, kind=FASTEST)[0]
        self._step(f"    OK: fastest route: {fastest.distance_km:.1f}km, {fastest.duration_min:.0f}min")

        if waypoints:
            comfort = self.router.get_routes(start, end, waypoints, profile=profile, kind=COMFORT)[0]
        else:
            comfort = Route(fastest.distance, fastest.duration, fastest.geometry, kind=COMFORT)
            self._step("    No usable waypoints, comfort route follows the fastest route")
        self._step(f"    OK: comfort route: {comfort.distance_km:.1f}km, {comfort.duration_min:.0f}min")

        return fastest, comfort

    def plan(self, start, end, num_clusters=None, random_state=None):
        """
        Execute the full comfort route pipeline.

        Args:
            start: (lng, lat) start of the walk
            end: (lng, lat) destination
            num_clusters: Number of venue clusters (defaults to config)
            random_state: Seed or numpy Generator for the clustering step

        Returns:
            RoutePlan
        """
        if random_state is None:
            random_state = self.config.RANDOM_SEED

        venues = self.fetch_venues(start, end)
        clusters, used_fallback = self.create_clusters(venues, num_clusters, random_state)
        waypoints = self.determine_waypoints(clusters, start, end)
        fastest, comfort = self.fetch_routes(start, end, waypoints)

        self._step("[5] Scoring comfort route...")
        comfort.set_comfort_score(self.scorer.score(comfort))
        self._step(f"    OK: comfort score {comfort.comfort_score:.1f}/10")

        return RoutePlan(
            start=start,
            end=end,
            fastest=fastest,
            comfort=comfort,
            waypoints=waypoints,
            clusters=clusters,
            venue_count=len(venues),
            used_fallback=used_fallback,
        )

    def print_summary(self, plan):
        """Print execution summary."""
        print("\n" + "=" * 50)
        print("                    SUMMARY")
        print("=" * 50)
        print(f"✓ Venues: {plan.venue_count}")
        print(f"✓ Clusters: {len(plan.clusters)}")
        print(f"✓ Waypoints: {len(plan.waypoints)}")
        print(f"✓ Fastest: {plan.fastest.distance_km:.2f} km, {plan.fastest.duration_min:.0f} minutes")
        print(f"✓ Comfort: {plan.comfort.distance_km:.2f} km, {plan.comfort.duration_min:.0f} minutes")
        print(f"✓ Comfort Score: {plan.comfort.comfort_score:.1f}/10")
        print("=" * 50 + "\n")
