"""Terrain classification of geocoded places."""

from impact_calc.domain.models.impact import TargetType

# OpenStreetMap feature (class, type) pairs that are not plain land
OSM_WATER_CLASSES = {"natural", "place", "water"}
OSM_WATER_TYPES = {"ocean", "sea", "bay", "strait", "water", "lagoon"}
OSM_MOUNTAIN_TYPES = {"peak", "volcano", "mountain_range", "ridge", "saddle"}


def terrain_from_feature(category: str | None, kind: str | None) -> TargetType:
    """
    Classify an OpenStreetMap search hit (``class``/``type``) as terrain.

    Anything not recognisably water or mountain is treated as land.
    """
    kind = (kind or "").casefold()
    category = (category or "").casefold()
    if category in OSM_WATER_CLASSES and kind in OSM_WATER_TYPES:
        return TargetType.OCEAN
    if category == "natural" and kind in OSM_MOUNTAIN_TYPES:
        return TargetType.MOUNTAIN
    return TargetType.LAND
