from datetime import date
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from impact_calc.domain.exceptions import (
    AuthenticationException,
    InvalidResponseException,
    RateLimitException,
    TransientAPIException,
)
from impact_calc.domain.models.impact import TargetType
from impact_calc.infrastructure.api.cache import TTLCache
from impact_calc.infrastructure.api.clients import (
    AsyncGeocodingApiClient,
    AsyncNeoFeedApiClient,
)


def make_neo(neo_id, name, hazardous=False, diameter=(100.0, 200.0), speed="12.5"):
    return {
        "id": neo_id,
        "name": name,
        "is_potentially_hazardous_asteroid": hazardous,
        "estimated_diameter": {
            "meters": {
                "estimated_diameter_min": diameter[0],
                "estimated_diameter_max": diameter[1],
            }
        },
        "close_approach_data": [
            {
                "close_approach_date": "2025-01-03",
                "relative_velocity": {"kilometers_per_second": speed},
                "miss_distance": {"kilometers": "7000000.5"},
            }
        ],
    }


@pytest.fixture
def feed():
    return {
        "element_count": 3,
        "near_earth_objects": {
            "2025-01-03": [make_neo("3", "(2025 CC)", hazardous=True, speed="21.0")],
            "2025-01-01": [
                make_neo("1", "(2025 AA)"),
                make_neo("2", "(2025 BB)"),
            ],
        },
    }


def transport_for(responses, calls):
    """MockTransport replaying ``responses`` in order and recording requests."""
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return queue.pop(0)

    return httpx.MockTransport(handler)


class TestSelectAsteroid:
    def test_prefers_first_hazardous(self, feed):
        neo = AsyncNeoFeedApiClient.select_asteroid(feed)
        assert neo.name == "(2025 CC)"
        assert neo.is_hazardous is True
        assert neo.velocity_km_s == pytest.approx(21.0)

    def test_falls_back_to_earliest_date(self, feed):
        feed["near_earth_objects"]["2025-01-03"][0]["is_potentially_hazardous_asteroid"] = False
        neo = AsyncNeoFeedApiClient.select_asteroid(feed)
        assert neo.neo_id == "1"
        assert neo.mean_diameter_m == pytest.approx(150.0)
        assert neo.approach_date == date(2025, 1, 3)

    def test_empty_feed(self):
        assert AsyncNeoFeedApiClient.select_asteroid({"near_earth_objects": {}}) is None
        assert AsyncNeoFeedApiClient.select_asteroid(
            {"near_earth_objects": {"2025-01-01": []}}
        ) is None

    def test_malformed_object(self):
        raw = make_neo("9", "(broken)")
        del raw["close_approach_data"]
        with pytest.raises(InvalidResponseException, match="Malformed near-Earth object 9"):
            AsyncNeoFeedApiClient.parse_neo(raw)

    @pytest.mark.parametrize(
        "feed",
        [
            {"near_earth_objects": {"2025-01-01": ["bad"]}},
            {"near_earth_objects": {"2025-01-01": [None, 42]}},
            {"near_earth_objects": {"2025-01-01": "bad"}},
            {"near_earth_objects": {"2025-01-01": {"id": "1"}}},
            {"near_earth_objects": ["2025-01-01"]},
        ],
    )
    def test_malformed_feed_entries(self, feed):
        with pytest.raises(InvalidResponseException):
            AsyncNeoFeedApiClient.select_asteroid(feed)

    def test_malformed_approach_record(self):
        raw = make_neo("7", "(broken)")
        raw["close_approach_data"] = ["not a record"]
        with pytest.raises(InvalidResponseException, match="Malformed near-Earth object 7"):
            AsyncNeoFeedApiClient.parse_neo(raw)


class TestNeoFeedClient:
    @pytest.mark.asyncio
    async def test_fetch_featured_asteroid(self, feed):
        calls = []
        client = AsyncNeoFeedApiClient(
            "https://api.example.com/feed",
            "secret",
            transport=transport_for([httpx.Response(200, json=feed)], calls),
        )

        neo = await client.fetch_featured_asteroid(date(2025, 1, 1))

        assert neo.name == "(2025 CC)"
        assert len(calls) == 1
        params = calls[0].url.params
        assert params["start_date"] == "2025-01-01"
        assert params["end_date"] == "2025-01-08"
        assert params["api_key"] == "secret"

    @pytest.mark.asyncio
    async def test_feed_is_cached(self, feed):
        calls = []
        client = AsyncNeoFeedApiClient(
            cache=TTLCache(60),
            transport=transport_for([httpx.Response(200, json=feed)], calls),
        )

        first = await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 7))
        second = await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 7))

        assert first == second == feed
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_feed_window_is_limited(self):
        client = AsyncNeoFeedApiClient()
        with pytest.raises(ValueError, match="exceeds"):
            await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 20))
        with pytest.raises(ValueError, match="before"):
            await client.fetch_feed(date(2025, 1, 5), date(2025, 1, 1))

    @pytest.mark.asyncio
    async def test_authentication_error_is_not_retried(self):
        calls = []
        client = AsyncNeoFeedApiClient(
            transport=transport_for(
                [httpx.Response(403, json={"error": {"code": "API_KEY_INVALID"}})], calls
            )
        )
        with pytest.raises(AuthenticationException, match="403"):
            await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 2))
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_transient_error_is_retried(self, feed):
        calls = []
        client = AsyncNeoFeedApiClient(
            transport=transport_for(
                [
                    httpx.Response(503, text="Service Unavailable"),
                    httpx.Response(429, json={"error": "slow down"}),
                    httpx.Response(200, json=feed),
                ],
                calls,
            )
        )
        with patch(
            "impact_calc.infrastructure.api.decorators.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            result = await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 2))

        assert result == feed
        assert len(calls) == 3
        assert [c.args[0] for c in mock_sleep.await_args_list] == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_retries_exhausted(self):
        calls = []
        client = AsyncNeoFeedApiClient(
            transport=transport_for([httpx.Response(500, text="boom") for _ in range(3)], calls)
        )
        with patch(
            "impact_calc.infrastructure.api.decorators.asyncio.sleep", new_callable=AsyncMock
        ):
            with pytest.raises(TransientAPIException, match="500"):
                await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 2))
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_rate_limit_maps_to_exception(self):
        client = AsyncNeoFeedApiClient(
            transport=transport_for([httpx.Response(429, text="") for _ in range(3)], [])
        )
        with patch(
            "impact_calc.infrastructure.api.decorators.asyncio.sleep", new_callable=AsyncMock
        ):
            with pytest.raises(RateLimitException):
                await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 2))

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        client = AsyncNeoFeedApiClient(
            transport=transport_for([httpx.Response(200, text="<html>")], [])
        )
        with pytest.raises(InvalidResponseException, match="not valid JSON"):
            await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 2))

    @pytest.mark.asyncio
    async def test_missing_objects_mapping(self):
        client = AsyncNeoFeedApiClient(
            transport=transport_for([httpx.Response(200, json={"links": {}})], [])
        )
        with pytest.raises(InvalidResponseException, match="near_earth_objects"):
            await client.fetch_feed(date(2025, 1, 1), date(2025, 1, 2))


class TestGeocodingClient:
    @pytest.mark.asyncio
    async def test_geocode_ocean(self):
        calls = []
        hit = {
            "display_name": "Pacific Ocean",
            "lat": "0.0",
            "lon": "-160.5",
            "class": "place",
            "type": "ocean",
        }
        client = AsyncGeocodingApiClient(
            "https://geo.example.com/search",
            user_agent="impact-tests",
            transport=transport_for([httpx.Response(200, json=[hit])], calls),
        )

        location = await client.geocode("  pacific ")

        assert location.name == "Pacific Ocean"
        assert location.coordinates.lon == pytest.approx(-160.5)
        assert location.terrain is TargetType.OCEAN
        assert calls[0].url.params["q"] == "pacific"
        assert calls[0].headers["User-Agent"] == "impact-tests"

    @pytest.mark.asyncio
    async def test_geocode_no_hits(self):
        client = AsyncGeocodingApiClient(
            transport=transport_for([httpx.Response(200, json=[])], [])
        )
        assert await client.geocode("Atlantis") is None

    @pytest.mark.asyncio
    async def test_geocode_is_cached_case_insensitively(self):
        calls = []
        hit = {"display_name": "Mount Fuji", "lat": "35.36", "lon": "138.73",
               "class": "natural", "type": "volcano"}
        client = AsyncGeocodingApiClient(
            cache=TTLCache(60),
            transport=transport_for([httpx.Response(200, json=[hit])], calls),
        )

        first = await client.geocode("Mount Fuji")
        second = await client.geocode("mount fuji")

        assert first is second
        assert first.terrain is TargetType.MOUNTAIN
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_geocode_malformed(self):
        client = AsyncGeocodingApiClient(
            transport=transport_for([httpx.Response(200, json={"error": "nope"})], [])
        )
        with pytest.raises(InvalidResponseException):
            await client.geocode("somewhere")

    @pytest.mark.asyncio
    async def test_geocode_empty_query(self):
        with pytest.raises(ValueError):
            await AsyncGeocodingApiClient().geocode("   ")
