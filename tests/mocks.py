from datetime import date
from typing import Any

from impact_calc.domain.interfaces import BaseGeocodingApiClient, BaseNeoApiClient
from impact_calc.domain.models.coordinates import Coordinates
from impact_calc.domain.models.impact import TargetType
from impact_calc.domain.models.location import ImpactLocation
from impact_calc.domain.models.neo import NearEarthObject
from impact_calc.domain.models.units import Kilometers, KilometersPerSecond, Meters


SAMPLE_NEO = NearEarthObject(
    neo_id="3542519",
    name="(2010 PK9)",
    designation="2010 PK9",
    diameter_min_m=Meters(100.0),
    diameter_max_m=Meters(220.0),
    velocity_km_s=KilometersPerSecond(18.5),
    approach_date=date(2025, 1, 2),
    miss_distance_km=Kilometers(4_500_000.0),
    is_hazardous=True,
)


class MockNeoApiClient(BaseNeoApiClient):
    def __init__(self, neo: NearEarthObject | None = SAMPLE_NEO):
        super().__init__("https://api.example.com/neo", "test_key")
        self.neo = neo

    async def fetch_feed(self, start_date: date, end_date: date) -> dict[str, Any]:
        return {"near_earth_objects": {}}

    async def fetch_featured_asteroid(
        self, start_date: date | None = None, days: int = 7
    ) -> NearEarthObject | None:
        return self.neo


class MockGeocodingApiClient(BaseGeocodingApiClient):
    def __init__(self):
        super().__init__("https://api.example.com/search")
        self.queries: list[str] = []

    async def geocode(self, query: str) -> ImpactLocation | None:
        self.queries.append(query)
        if query == "nowhere":
            return None
        return ImpactLocation(query, Coordinates(35.0, 139.0), TargetType.LAND)
