# impact_calc/domain/models/__init__.py
from .units import Meters, Kilometers, Degrees, MetersPerSecond, Joules
from .impact import (
    DangerLevel,
    ImpactSimulationInput,
    ImpactSimulationResult,
    QuickImpactEstimate,
    SeismicSeverity,
    TargetType,
    TsunamiRisk,
)
from .coordinates import Coordinates
from .location import ImpactLocation
from .timeline import MilestoneStatus, TimelineMilestone, TrajectoryTimeline
from .neo import NearEarthObject

__all__ = [
    "Meters",
    "Kilometers",
    "Degrees",
    "MetersPerSecond",
    "Joules",
    "DangerLevel",
    "ImpactSimulationInput",
    "ImpactSimulationResult",
    "QuickImpactEstimate",
    "SeismicSeverity",
    "TargetType",
    "TsunamiRisk",
    "Coordinates",
    "ImpactLocation",
    "MilestoneStatus",
    "TimelineMilestone",
    "TrajectoryTimeline",
    "NearEarthObject",
]
