from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from impact_calc.domain.models.location import ImpactLocation
from impact_calc.domain.models.neo import NearEarthObject


class BaseApiClient(ABC):
    def __init__(self, api_url: str, api_key: str = ""):
        self.api_url = api_url
        self.api_key = api_key


class BaseNeoApiClient(BaseApiClient):
    @abstractmethod
    async def fetch_feed(self, start_date: date, end_date: date) -> dict[str, Any]:
        """
        Fetch the raw close-approach feed between two dates.
        This method must be implemented by subclasses.
        """
        pass

    @abstractmethod
    async def fetch_featured_asteroid(
        self, start_date: date | None = None, days: int = 7
    ) -> NearEarthObject | None:
        """
        Pick one object worth simulating from the feed window.
        """
        pass


class BaseGeocodingApiClient(BaseApiClient):
    @abstractmethod
    async def geocode(self, query: str) -> ImpactLocation | None:
        """
        Resolve a free-text place name to an impact location, or None.
        """
        pass
