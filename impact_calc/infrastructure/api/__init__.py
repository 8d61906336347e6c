from .cache import TTLCache
from .clients import AsyncGeocodingApiClient, AsyncNeoFeedApiClient

__all__ = ["TTLCache", "AsyncGeocodingApiClient", "AsyncNeoFeedApiClient"]
