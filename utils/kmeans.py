"""Clusterers - k-means over raw coordinates and a round-robin fallback."""
import numpy as np


class KMeansClusterer:
    """
    Lloyd-style k-means on (lng, lat) coordinates.

    Seeds from distinct input coordinates, breaks assignment ties towards the
    lowest centroid index and reinitializes empty centroids to a random input
    point. Reinitialization forces another pass, so ``max_iter`` is the only
    termination guarantee.
    """

    def __init__(self, n_clusters=5, max_iter=100, random_state=None):
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.random_state = random_state
        self.cluster_centers_ = None
        self.labels_ = None
        self.inertia_ = None
        self.n_iter_ = 0
        self.n_reinit_ = 0

    def fit(self, coordinates):
        """
        Fit k-means to coordinates.

        Args:
            coordinates: Array-like of shape (n_samples, 2) with [lng, lat]

        Returns:
            self
        """
        if self.n_clusters < 1:
            raise ValueError(f"n_clusters must be at least 1, got {self.n_clusters}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")

        X = np.asarray(coordinates, dtype=float)
        if X.ndim != 2 or X.shape[1] != 2:
            raise ValueError(f"Expected coordinates of shape (n, 2), got {X.shape}")
        if len(X) == 0:
            raise ValueError("Cannot fit k-means on an empty coordinate set")
        if not np.isfinite(X).all():
            raise ValueError("Coordinates contain NaN or infinite values")

        rng = np.random.default_rng(self.random_state)
        centroids = self._seed(X, rng)
        labels = None
        self.n_reinit_ = 0

        for iteration in range(1, self.max_iter + 1):
            new_labels = self._assign(X, centroids)
            changed = labels is None or bool((new_labels != labels).any())
            labels = new_labels

            reinitialized = False
            for j in range(self.n_clusters):
                members = X[labels == j]
                if len(members) > 0:
                    centroids[j] = members.mean(axis=0)
                else:
                    centroids[j] = X[rng.integers(len(X))]
                    reinitialized = True
                    self.n_reinit_ += 1

            self.n_iter_ = iteration
            if not changed and not reinitialized:
                break

        self.labels_ = labels
        self.cluster_centers_ = centroids
        self.inertia_ = float(((X - centroids[labels]) ** 2).sum())
        return self

    def _seed(self, X, rng):
        """Pick up to k distinct coordinates, cycling through them if short."""
        distinct = np.unique(X, axis=0)
        n_seeds = min(self.n_clusters, len(distinct))
        chosen = distinct[rng.choice(len(distinct), size=n_seeds, replace=False)]

        centroids = np.empty((self.n_clusters, 2), dtype=float)
        centroids[:n_seeds] = chosen
        for j in range(n_seeds, self.n_clusters):
            centroids[j] = chosen[j % n_seeds]
        return centroids

    @staticmethod
    def _assign(X, centroids):
        # argmin returns the first index on ties
        distances = np.linalg.norm(X[:, np.newaxis, :] - centroids[np.newaxis, :, :], axis=2)
        return distances.argmin(axis=1)


class RoundRobinClusterer:
    """Deterministic fallback: sample i goes to cluster i mod k."""

    def __init__(self, n_clusters=5):
        self.n_clusters = n_clusters
        self.labels_ = None

    def fit(self, coordinates):
        if self.n_clusters < 1:
            raise ValueError(f"n_clusters must be at least 1, got {self.n_clusters}")
        self.labels_ = np.arange(len(coordinates)) % self.n_clusters
        return self
