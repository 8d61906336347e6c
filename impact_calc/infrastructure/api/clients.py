import json
from datetime import date, timedelta
from typing import Any

from httpx import AsyncBaseTransport, AsyncClient, Response, Timeout

from impact_calc.domain.constants import NASA_NEO_FEED_URL, NOMINATIM_SEARCH_URL
from impact_calc.domain.exceptions import (
    APIException,
    AuthenticationException,
    InvalidResponseException,
    RateLimitException,
    TransientAPIException,
)
from impact_calc.domain.interfaces import BaseGeocodingApiClient, BaseNeoApiClient
from impact_calc.domain.models.coordinates import Coordinates
from impact_calc.domain.models.location import ImpactLocation
from impact_calc.domain.models.neo import NearEarthObject
from impact_calc.domain.models.units import Kilometers, KilometersPerSecond, Meters
from impact_calc.domain.terrain import terrain_from_feature

from .cache import TTLCache
from .decorators import async_retry
from impact_calc.logging_config import get_logger

logger = get_logger(__name__)

# NeoWs rejects feed windows longer than a week
MAX_FEED_DAYS = 7


def _raise_for_status(response: Response) -> None:
    """Map HTTP failures onto the API exception hierarchy."""
    if response.is_success:
        return

    try:
        error_data = response.json()
    except json.JSONDecodeError:
        error_data = {"message": response.text}

    if isinstance(error_data, dict):
        detail = error_data.get("error", error_data)
        message = json.dumps(detail) if not isinstance(detail, str) else detail
    else:
        message = str(error_data)

    status = response.status_code
    if status in (401, 403):
        raise AuthenticationException(f"{status} - {message}")
    if status == 429:
        raise RateLimitException(f"{status} - {message}")
    if status >= 500:
        raise TransientAPIException(f"{status} - {message}")
    raise APIException(f"{status} - {message}")


def _decode_json(response: Response) -> Any:
    try:
        return response.json()
    except json.JSONDecodeError as e:
        raise InvalidResponseException(f"Response is not valid JSON: {e}") from e


class AsyncNeoFeedApiClient(BaseNeoApiClient):
    """
    Client for the NASA NeoWs close-approach feed.

    Responses are cached in the ``cache`` passed in, if any.
    """

    def __init__(
        self,
        api_url: str = NASA_NEO_FEED_URL,
        api_key: str = "DEMO_KEY",
        cache: TTLCache | None = None,
        transport: AsyncBaseTransport | None = None,
    ):
        super().__init__(api_url, api_key)
        self.cache = cache
        self._transport = transport

    @async_retry()
    async def neo_api_request(self, params: dict[str, str], **kwargs) -> Any:
        """Asynchronous API request with httpx"""
        timeout = kwargs.get("timeout", 10.0)
        timeout_config = Timeout(timeout, connect=5.0)

        async with AsyncClient(
            timeout=timeout_config, follow_redirects=True, transport=self._transport
        ) as client:
            request = client.build_request(
                "GET", self.api_url, params={**params, "api_key": self.api_key}
            )
            # The request URL carries the API key
            logger.info(f"HTTP Request: {request.method} {self.api_url} {params}")
            response = await client.send(request)
            logger.info(f"HTTP Response: {response.status_code}")

            _raise_for_status(response)
            return _decode_json(response)

    async def fetch_feed(self, start_date: date, end_date: date) -> dict[str, Any]:
        if end_date < start_date:
            raise ValueError(f"end_date {end_date} is before start_date {start_date}")
        if (end_date - start_date).days > MAX_FEED_DAYS:
            raise ValueError(
                f"Feed window of {(end_date - start_date).days} days exceeds "
                f"the {MAX_FEED_DAYS}-day limit"
            )

        cache_key = ("feed", start_date.isoformat(), end_date.isoformat())
        if self.cache is not None:
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Feed cache hit for {start_date}..{end_date}")
                return cached

        feed = await self.neo_api_request(
            {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()}
        )
        if not isinstance(feed, dict) or not isinstance(
            feed.get("near_earth_objects"), dict
        ):
            raise InvalidResponseException("Feed has no 'near_earth_objects' mapping")

        if self.cache is not None:
            self.cache.set(cache_key, feed)
        return feed

    @staticmethod
    def parse_neo(raw: dict[str, Any]) -> NearEarthObject:
        """
        Convert one NeoWs object into a NearEarthObject.

        Raises:
            InvalidResponseException: If required fields are missing or malformed
        """
        if not isinstance(raw, dict):
            raise InvalidResponseException(
                f"Expected a near-Earth object mapping, got {type(raw).__name__}"
            )

        try:
            approach = raw["close_approach_data"][0]
            diameter = raw["estimated_diameter"]["meters"]
            return NearEarthObject(
                neo_id=str(raw["id"]),
                name=raw["name"],
                designation=str(raw.get("designation") or raw["id"]),
                diameter_min_m=Meters(float(diameter["estimated_diameter_min"])),
                diameter_max_m=Meters(float(diameter["estimated_diameter_max"])),
                velocity_km_s=KilometersPerSecond(
                    float(approach["relative_velocity"]["kilometers_per_second"])
                ),
                approach_date=date.fromisoformat(approach["close_approach_date"]),
                miss_distance_km=Kilometers(
                    float(approach["miss_distance"]["kilometers"])
                ),
                is_hazardous=bool(raw["is_potentially_hazardous_asteroid"]),
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            neo_id = raw.get("id", "?")
            raise InvalidResponseException(
                f"Malformed near-Earth object {neo_id}: {e!r}"
            ) from e

    @classmethod
    def select_asteroid(cls, feed: dict[str, Any]) -> NearEarthObject | None:
        """
        First potentially hazardous object in date order, else the first
        object of the earliest non-empty date, else None.
        """
        by_date = feed.get("near_earth_objects", {}) if isinstance(feed, dict) else None
        if not isinstance(by_date, dict):
            raise InvalidResponseException("Feed has no 'near_earth_objects' mapping")
        for day, objects in by_date.items():
            if not isinstance(objects, list):
                raise InvalidResponseException(
                    f"Feed entry for {day} is {type(objects).__name__}, expected a list"
                )
        dates = sorted(by_date)

        for day in dates:
            for raw in by_date[day]:
                if isinstance(raw, dict) and raw.get("is_potentially_hazardous_asteroid"):
                    return cls.parse_neo(raw)

        for day in dates:
            if by_date[day]:
                return cls.parse_neo(by_date[day][0])
        return None

    async def fetch_featured_asteroid(
        self, start_date: date | None = None, days: int = MAX_FEED_DAYS
    ) -> NearEarthObject | None:
        start = start_date or date.today()
        feed = await self.fetch_feed(start, start + timedelta(days=days))
        neo = self.select_asteroid(feed)
        if neo is None:
            logger.warning(f"No near-Earth objects in feed starting {start}")
        else:
            logger.info(
                f"Selected {neo.name}: {neo.mean_diameter_m:.0f} m at "
                f"{neo.velocity_km_s:.2f} km/s (hazardous={neo.is_hazardous})"
            )
        return neo


class AsyncGeocodingApiClient(BaseGeocodingApiClient):
    """
    Free-text place search against an OpenStreetMap Nominatim endpoint.
    """

    def __init__(
        self,
        api_url: str = NOMINATIM_SEARCH_URL,
        user_agent: str = "impact-calc",
        cache: TTLCache | None = None,
        transport: AsyncBaseTransport | None = None,
    ):
        super().__init__(api_url)
        self.user_agent = user_agent
        self.cache = cache
        self._transport = transport

    @async_retry()
    async def search_request(self, query: str, **kwargs) -> Any:
        timeout = kwargs.get("timeout", 10.0)
        headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        params = {"format": "json", "q": query, "limit": "1"}

        async with AsyncClient(
            timeout=Timeout(timeout, connect=5.0),
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            request = client.build_request("GET", self.api_url, params=params, headers=headers)
            logger.info(f"HTTP Request: {request.method} {request.url}")
            response = await client.send(request)
            logger.info(f"HTTP Response: {response.status_code}")

            _raise_for_status(response)
            return _decode_json(response)

    async def geocode(self, query: str) -> ImpactLocation | None:
        query = query.strip()
        if not query:
            raise ValueError("Search query must not be empty")

        cache_key = ("geocode", query.casefold())
        if self.cache is not None:
            cached = self.cache.get(cache_key)
            if cached is not None:
                return cached

        hits = await self.search_request(query)
        if not isinstance(hits, list):
            raise InvalidResponseException(f"Expected a list of places, got {type(hits)}")
        if not hits:
            logger.info(f"No places found for {query!r}")
            return None

        best = hits[0]
        try:
            location = ImpactLocation(
                name=best.get("display_name") or query,
                coordinates=Coordinates(float(best["lat"]), float(best["lon"])),
                terrain=terrain_from_feature(best.get("class"), best.get("type")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidResponseException(f"Malformed place record: {e!r}") from e

        if self.cache is not None:
            self.cache.set(cache_key, location)
        return location
