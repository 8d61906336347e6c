"""Facade adapter for simplified API integration."""

from environs import Env

from impact_calc.application.services.locations import LocationCatalog
from impact_calc.application.services.timeline import build_timeline
from impact_calc.application.simulation import estimate_quick_impact, simulate_impact
from impact_calc.domain.constants import (
    DEFAULT_ANGLE_DEG,
    DEFAULT_DENSITY,
    NASA_NEO_FEED_URL,
    NOMINATIM_SEARCH_URL,
)
from impact_calc.domain.exceptions import LocationNotFound
from impact_calc.domain.interfaces import BaseGeocodingApiClient, BaseNeoApiClient
from impact_calc.domain.models.impact import (
    ImpactSimulationInput,
    ImpactSimulationResult,
    QuickImpactEstimate,
    TargetType,
)
from impact_calc.domain.models.location import ImpactLocation
from impact_calc.domain.models.neo import NearEarthObject
from impact_calc.domain.models.timeline import TrajectoryTimeline
from impact_calc.infrastructure.api.cache import TTLCache
from impact_calc.infrastructure.api.clients import (
    AsyncGeocodingApiClient,
    AsyncNeoFeedApiClient,
)


class ImpactCalculatorAPI:
    """
    Simplified facade for external integration with a streamlined API.

    Hides client construction and terrain lookup, offering plain
    function-call semantics over the engine and its data collaborators.
    """

    def __init__(
        self,
        neo_api_client: BaseNeoApiClient,
        geocoding_api_client: BaseGeocodingApiClient,
        catalog: LocationCatalog | None = None,
    ):
        """
        Initialize facade with required dependencies.

        Args:
            neo_api_client: Client for the near-Earth object feed
            geocoding_api_client: Client for free-text place search
            catalog: Preset locations; defaults to the built-in catalogue
        """
        self._neo_api_client = neo_api_client
        self._geocoding_api_client = geocoding_api_client
        self._catalog = catalog or LocationCatalog()

    @classmethod
    def create_from_env(cls, env: Env) -> "ImpactCalculatorAPI":
        """
        Factory method: one-line initialization from environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> facade = ImpactCalculatorAPI.create_from_env(env)
        """
        cache = TTLCache(ttl_seconds=env.float("NEO_CACHE_TTL", 3600.0))

        neo_client = AsyncNeoFeedApiClient(
            env.str("NASA_API_URL", NASA_NEO_FEED_URL),
            env.str("NASA_API_KEY", "DEMO_KEY"),
            cache=cache,
        )
        geocoding_client = AsyncGeocodingApiClient(
            env.str("GEOCODING_API_URL", NOMINATIM_SEARCH_URL),
            cache=cache,
        )
        return cls(neo_client, geocoding_client)

    def _resolve_target(self, target: TargetType | str | None) -> TargetType:
        if isinstance(target, TargetType):
            return target
        return self._catalog.terrain_for(target)

    @property
    def catalog(self) -> LocationCatalog:
        return self._catalog

    def simulate(
        self,
        diameter_m: float,
        speed_km_s: float,
        angle_deg: float = DEFAULT_ANGLE_DEG,
        target: TargetType | str | None = None,
        density: float = DEFAULT_DENSITY,
    ) -> ImpactSimulationResult:
        """
        Run the full estimate from slider units.

        ``target`` may be a terrain name or a preset location name; anything
        unrecognised is treated as land.
        """
        params = ImpactSimulationInput.from_slider(
            diameter_m, speed_km_s, angle_deg, self._resolve_target(target), density
        )
        return simulate_impact(params)

    def quick_estimate(
        self, diameter_m: float, speed_km_s: float, angle_deg: float = DEFAULT_ANGLE_DEG
    ) -> QuickImpactEstimate:
        return estimate_quick_impact(diameter_m, speed_km_s, angle_deg)

    def timeline(self, speed_km_s: float, distance_ld: float) -> TrajectoryTimeline:
        return build_timeline(speed_km_s, distance_ld)

    async def locate(self, query: str) -> ImpactLocation | None:
        """
        Resolve a place: preset names first, then the geocoding service.
        """
        try:
            return self._catalog.get_preset(query)
        except LocationNotFound:
            return await self._geocoding_api_client.geocode(query)

    async def featured_asteroid(self) -> NearEarthObject | None:
        return await self._neo_api_client.fetch_featured_asteroid()

    async def simulate_featured_asteroid(
        self, angle_deg: float = DEFAULT_ANGLE_DEG, target: TargetType | str | None = None
    ) -> tuple[NearEarthObject, ImpactSimulationResult] | None:
        """Fetch this week's featured object and simulate it hitting ``target``."""
        neo = await self.featured_asteroid()
        if neo is None:
            return None
        params = neo.to_simulation_input(angle_deg, self._resolve_target(target))
        return neo, simulate_impact(params)
