import math

from impact_calc.domain.constants import LUNAR_DISTANCE_KM
from impact_calc.domain.models.timeline import (
    MilestoneStatus,
    TimelineMilestone,
    TrajectoryTimeline,
)
from impact_calc.domain.models.units import KilometersPerSecond, LunarDistance
from impact_calc.domain.validators import validate_non_negative, validate_positive

# (phase, share of the remaining time, status, description)
MILESTONE_PLAN: tuple[tuple[str, float, MilestoneStatus, str], ...] = (
    (
        "Detection",
        1.0,
        MilestoneStatus.COMPLETED,
        "Asteroid first detected by NEO surveillance",
    ),
    (
        "Tracking Confirmation",
        0.9,
        MilestoneStatus.COMPLETED,
        "Trajectory confirmed, impact probability calculated",
    ),
    (
        "Global Alert",
        0.7,
        MilestoneStatus.ACTIVE,
        "International agencies notified, deflection window open",
    ),
    (
        "Last Deflection Window",
        0.3,
        MilestoneStatus.PENDING,
        "Final opportunity for kinetic impactor mission",
    ),
    (
        "Impact Event",
        0.0,
        MilestoneStatus.CRITICAL,
        "Projected impact time",
    ),
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def days_to_impact(speed_km_s: KilometersPerSecond, distance_ld: LunarDistance) -> float:
    """Straight-line travel time in days at constant speed."""
    validate_positive(speed_km_s, "Speed", "km/s")
    validate_non_negative(distance_ld, "Distance", "LD")

    distance_km = distance_ld * LUNAR_DISTANCE_KM
    hours = distance_km / (speed_km_s * 3600)
    return hours / 24


def build_timeline(
    speed_km_s: KilometersPerSecond, distance_ld: LunarDistance
) -> TrajectoryTimeline:
    """
    Detection-to-impact narrative for an object ``distance_ld`` lunar
    distances away closing at ``speed_km_s``.
    """
    days = days_to_impact(speed_km_s, distance_ld)
    milestones = tuple(
        TimelineMilestone(
            phase=phase,
            days_before_impact=_round_half_up(days * share),
            status=status,
            description=description,
        )
        for phase, share, status, description in MILESTONE_PLAN
    )
    return TrajectoryTimeline(days_to_impact=_round_half_up(days), milestones=milestones)
