"""Comfort Scorer - rates how pleasant a walking route is, on a 0-10 scale."""

MIN_SCORE = 0.0
MAX_SCORE = 10.0


class ComfortScorer:
    """
    Placeholder comfort scorer.

    Real signals (open businesses nearby, lighting, foot traffic, safety) are
    not available yet, so every route gets the configured placeholder. The
    ``score`` signature is what callers depend on.
    """

    def __init__(self, config):
        self.config = config

    def score(self, route):
        """
        Score a route.

        Args:
            route: Route object, or a mapping with 'distance' (m),
                'duration' (s) and 'geometry'

        Returns:
            Float in [0, 10]
        """
        return self._clamp(float(self.config.COMFORT_SCORE_PLACEHOLDER))

    @staticmethod
    def _clamp(value):
        return max(MIN_SCORE, min(MAX_SCORE, value))
