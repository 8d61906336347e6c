from collections.abc import Iterable

from impact_calc.domain.exceptions import LocationNotFound
from impact_calc.domain.geometry import haversine_km
from impact_calc.domain.models.coordinates import Coordinates
from impact_calc.domain.models.impact import TargetType
from impact_calc.domain.models.location import ImpactLocation
from impact_calc.domain.validators import validate_coordinates
from impact_calc.logging_config import get_logger

logger = get_logger(__name__)


PRESET_LOCATIONS: tuple[ImpactLocation, ...] = (
    ImpactLocation("Pacific Ocean", Coordinates(0.0, -140.0), TargetType.OCEAN),
    ImpactLocation("Atlantic Ocean", Coordinates(30.0, -40.0), TargetType.OCEAN),
    ImpactLocation("Sahara Desert", Coordinates(23.0, 10.0), TargetType.LAND),
    ImpactLocation("Amazon Rainforest", Coordinates(-3.0, -60.0), TargetType.LAND),
    ImpactLocation("Himalayas", Coordinates(28.0, 84.0), TargetType.MOUNTAIN),
    ImpactLocation("Great Plains, USA", Coordinates(40.0, -100.0), TargetType.LAND),
)


class LocationCatalog:
    """
    Preset impact sites and the terrain lookup the location picker relies on.
    """

    def __init__(self, locations: Iterable[ImpactLocation] = PRESET_LOCATIONS):
        self._locations = tuple(locations)
        self._by_name = {loc.name.casefold(): loc for loc in self._locations}

    @property
    def locations(self) -> tuple[ImpactLocation, ...]:
        return self._locations

    def get_preset(self, name: str) -> ImpactLocation:
        """
        Look up a preset by name, ignoring case and surrounding whitespace.

        Raises:
            LocationNotFound: If no preset carries that name
        """
        try:
            return self._by_name[name.strip().casefold()]
        except KeyError:
            known = ", ".join(loc.name for loc in self._locations)
            raise LocationNotFound(
                f"Unknown impact location {name!r}. Known presets: {known}"
            ) from None

    def terrain_for(self, label: str | None) -> TargetType:
        """
        Terrain for a preset name or terrain label; anything unknown is land.
        """
        if not label:
            return TargetType.LAND

        key = label.strip().casefold()
        if key in self._by_name:
            return self._by_name[key].terrain
        for terrain in TargetType:
            if key == terrain.value:
                return terrain

        logger.debug(f"No terrain known for {label!r}, assuming land")
        return TargetType.LAND

    def nearest_preset(self, coordinates: Coordinates) -> ImpactLocation:
        """Preset closest to the given point by great-circle distance."""
        validate_coordinates(coordinates)
        return min(
            self._locations,
            key=lambda loc: haversine_km(coordinates, loc.coordinates),
        )

