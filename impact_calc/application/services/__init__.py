from .locations import PRESET_LOCATIONS, LocationCatalog
from .sweep import sweep_parameter
from .timeline import build_timeline, days_to_impact

__all__ = [
    "PRESET_LOCATIONS",
    "LocationCatalog",
    "sweep_parameter",
    "build_timeline",
    "days_to_impact",
]
