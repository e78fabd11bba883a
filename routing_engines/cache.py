"""API Cache - caches external API responses to reduce API calls."""
import json
import logging
import os
import hashlib

logger = logging.getLogger(__name__)


class APICache:
    """File-based cache for API responses."""

    def __init__(self, cache_file='data/api_cache.json'):
        self.cache_file = cache_file
        self.cache = self._load_cache()

    def _load_cache(self):
        """Load cache from file."""
        if os.path.exists(self.cache_file):
            try:
                with open(self.cache_file, 'r', encoding='utf-8') as f:
                    return json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("Cache %s could not be loaded: %s", self.cache_file, e)
                return {}
        return {}

    def _save_cache(self):
        """Save cache to file."""
        directory = os.path.dirname(self.cache_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.cache_file, 'w', encoding='utf-8') as f:
            json.dump(self.cache, f, indent=2, ensure_ascii=False)

    def _generate_key(self, namespace, points, **params):
        """Generate a unique cache key from a request namespace, points and params."""
        coords_str = '_'.join([f"{lng:.6f},{lat:.6f}" for lng, lat in points])
        params_str = '_'.join(f"{k}={params[k]}" for k in sorted(params))
        key_str = f"{namespace}_{coords_str}_{params_str}"
        return hashlib.md5(key_str.encode()).hexdigest()

    def get(self, namespace, points, **params):
        """Get cached result for a request, or None."""
        key = self._generate_key(namespace, points, **params)
        return self.cache.get(key)

    def set(self, namespace, points, data, **params):
        """Cache result for a request."""
        key = self._generate_key(namespace, points, **params)
        self.cache[key] = data
        self._save_cache()

    def clear(self):
        self.cache = {}
        self._save_cache()
