"""Domain models for impact simulation inputs and results"""

from dataclasses import dataclass, field
from enum import Enum

from impact_calc.domain import validators
from impact_calc.domain.constants import DEFAULT_ANGLE_DEG, DEFAULT_DENSITY
from impact_calc.domain.exceptions import InvalidParameter

from .base import BaseModel
from .units import (
    Degrees,
    Fraction,
    Joules,
    KgPerCubicMeter,
    KilometersPerSecond,
    Meters,
    MegatonsTNT,
    MetersPerSecond,
    TonsTNT,
)


class TargetType(str, Enum):
    """Terrain at the impact point."""

    OCEAN = "ocean"
    LAND = "land"
    MOUNTAIN = "mountain"

    @classmethod
    def coerce(cls, value: "TargetType | str") -> "TargetType":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(t.value for t in cls)
        raise InvalidParameter(f"Unknown target type {value!r}. Expected one of: {allowed}")


class SeismicSeverity(str, Enum):
    """Severity bucket of retained energy in tons of TNT."""

    LOW = "low"
    MODERATE = "moderate"
    SEVERE = "severe"
    EXTREME = "extreme"


class DangerLevel(str, Enum):
    """Danger bucket of kinetic energy in megatons of TNT (quick estimate)."""

    MINIMAL = "MINIMAL"
    MODERATE = "MODERATE"
    SEVERE = "SEVERE"
    CATASTROPHIC = "CATASTROPHIC"


class TsunamiRisk(str, Enum):
    """Diameter-based tsunami risk (quick estimate)."""

    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


@dataclass(frozen=True, slots=True)
class ImpactSimulationInput(BaseModel):
    """
    Parameters of a single impact simulation.

    Instances are validated on construction, so anything that reaches the
    physics engine is physically sensible.
    """

    diameter_m: Meters
    velocity: MetersPerSecond
    density: KgPerCubicMeter = KgPerCubicMeter(DEFAULT_DENSITY)
    angle_deg: Degrees = Degrees(DEFAULT_ANGLE_DEG)
    target_type: TargetType = TargetType.LAND

    def __post_init__(self):
        validators.validate_diameter(self.diameter_m)
        validators.validate_velocity(self.velocity)
        validators.validate_density(self.density)
        validators.validate_entry_angle(self.angle_deg)
        object.__setattr__(self, "target_type", TargetType.coerce(self.target_type))

    @classmethod
    def from_slider(
        cls,
        diameter_m: float,
        speed_km_s: float,
        angle_deg: float = DEFAULT_ANGLE_DEG,
        target_type: TargetType | str = TargetType.LAND,
        density: float = DEFAULT_DENSITY,
    ) -> "ImpactSimulationInput":
        """Build an input from UI slider units (speed in km/s)."""
        validators.validate_positive(speed_km_s, "Speed", "km/s")
        return cls(
            diameter_m=Meters(diameter_m),
            velocity=MetersPerSecond(speed_km_s * 1000),
            density=KgPerCubicMeter(density),
            angle_deg=Degrees(angle_deg),
            target_type=target_type,
        )


@dataclass(frozen=True, slots=True)
class ImpactSimulationResult(BaseModel):
    """
    Result of one impact simulation (immutable).

    ``energy_tons_tnt`` is the TNT equivalent of the energy retained after
    atmospheric passage, not of the pre-entry kinetic energy.
    """

    impact_energy_j: Joules
    energy_tons_tnt: TonsTNT
    retained_energy_j: Joules
    crater_diameter_m: Meters
    tsunami_potential: bool
    seismic_severity: SeismicSeverity
    attenuation_factor: Fraction
    notes: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class QuickImpactEstimate(BaseModel):
    """Simplified calculator output: no attenuation, no terrain."""

    diameter_m: Meters
    speed_km_s: KilometersPerSecond
    mass_tons: float
    kinetic_energy_j: Joules
    megatons_tnt: MegatonsTNT
    crater_diameter_m: Meters
    richter_magnitude: float
    angle_efficiency: Fraction
    tsunami_risk: TsunamiRisk
    danger_level: DangerLevel
