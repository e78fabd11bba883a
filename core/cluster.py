"""Cluster model - a group of venues sharing one detour centroid."""
from utils.geo import mean_point


class Cluster:
    """A cluster of venues produced by one clustering run."""

    def __init__(self, id, venues=None):
        self.id = id
        self.venues = list(venues or [])

    def add_venue(self, venue):
        """Add a venue to this cluster."""
        self.venues.append(venue)

    def is_empty(self):
        return len(self.venues) == 0

    def get_venue_count(self):
        return len(self.venues)

    def get_locations(self):
        """Return list of (lng, lat) tuples for member venues."""
        return [venue.location for venue in self.venues]

    @property
    def center(self):
        """Mean of member locations, or None for an empty cluster."""
        if self.is_empty():
            return None
        return mean_point(self.get_locations())

    def get_stats(self):
        """Return statistics about this cluster."""
        return {
            'id': self.id,
            'center': self.center,
            'n_venues': self.get_venue_count(),
            'venues': [venue.name for venue in self.venues],
        }

    def __len__(self):
        return len(self.venues)

    def __iter__(self):
        return iter(self.venues)

    def __repr__(self):
        return f"Cluster(id={self.id}, venues={len(self.venues)})"

    def __str__(self):
        return f"Cluster {self.id}: {len(self.venues)} venues"
