"""Provider errors raised by the places and directions clients."""


class ProviderError(Exception):
    """Base error for an external provider returning an unusable response."""
    pass


class PlacesError(ProviderError):
    """The places-search provider rejected the request or returned garbage."""
    pass


class DirectionsError(ProviderError):
    """The directions provider returned no usable route."""
    pass
