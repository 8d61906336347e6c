"""Closed-form impact physics: mass, kinetic energy, entry losses, crater size.

These are simplified models for educational visualization, tuned for
illustrative plausibility rather than scientific precision.
"""

import math

from impact_calc.domain.constants import (
    ATTENUATION_FLOOR,
    ATTENUATION_SCALE,
    ATTENUATION_SIZE_SATURATION_M,
    ATTENUATION_SIZE_WEIGHT,
    ATTENUATION_VELOCITY_SATURATION_MPS,
    ATTENUATION_VELOCITY_WEIGHT,
    CRATER_DENSITY_EXPONENT,
    CRATER_GRAVITY_EXPONENT,
    CRATER_MEGATON_EXPONENT,
    CRATER_SCALING_CONSTANT,
    DEFAULT_ANGLE_DEG,
    DEFAULT_DENSITY,
    DEFAULT_TARGET_DENSITY,
    EARTH_GRAVITY,
    OCEAN_CRATER_MULTIPLIER,
)
from impact_calc.domain.geometry import degrees_to_radians, sphere_volume
from impact_calc.domain.models.impact import TargetType
from impact_calc.domain.models.units import (
    Degrees,
    Fraction,
    Joules,
    KgPerCubicMeter,
    Kilograms,
    MegatonsTNT,
    Meters,
    MetersPerSecond,
)
from impact_calc.domain.validators import (
    validate_density,
    validate_non_negative,
    validate_positive,
    validate_velocity,
)


def asteroid_mass_kg(
    diameter_m: Meters, density: KgPerCubicMeter = KgPerCubicMeter(DEFAULT_DENSITY)
) -> Kilograms:
    """Mass of a spherical body of uniform density."""
    validate_non_negative(density, "Density", "kg/m³")
    return Kilograms(sphere_volume(diameter_m) * density)


def kinetic_energy_joules(
    diameter_m: Meters,
    velocity: MetersPerSecond,
    density: KgPerCubicMeter = KgPerCubicMeter(DEFAULT_DENSITY),
) -> Joules:
    """Kinetic energy 0.5 * m * v^2 of a spherical impactor.

    Zero diameter or zero velocity is a degenerate but valid input and
    yields zero energy.

    Raises:
        InvalidParameter: If any argument is negative or not finite.
    """
    validate_non_negative(velocity, "Velocity", "m/s")
    mass = asteroid_mass_kg(diameter_m, density)
    return Joules(0.5 * mass * velocity**2)


def attenuation_factor(
    diameter_m: Meters,
    velocity: MetersPerSecond,
    angle_deg: Degrees = Degrees(DEFAULT_ANGLE_DEG),
) -> Fraction:
    """Fraction of kinetic energy retained after atmospheric passage.

    Larger and faster objects lose a smaller fraction; shallow angles lose
    more. Size saturates at 500 m and velocity at 30 km/s. The result never
    drops below 0.3 for physically sensible input and reaches 1.0 only for a
    large, fast, vertical impactor.
    """
    angle_factor = math.sin(degrees_to_radians(angle_deg))
    size_factor = min(1.0, diameter_m / ATTENUATION_SIZE_SATURATION_M)
    velocity_factor = min(1.0, velocity / ATTENUATION_VELOCITY_SATURATION_MPS)

    retained = ATTENUATION_FLOOR + ATTENUATION_SCALE * (
        ATTENUATION_SIZE_WEIGHT * size_factor
        + ATTENUATION_VELOCITY_WEIGHT * velocity_factor
    ) * angle_factor
    return Fraction(min(1.0, max(0.0, retained)))


def crater_diameter_meters(
    diameter_m: Meters,
    velocity: MetersPerSecond,
    density: KgPerCubicMeter = KgPerCubicMeter(DEFAULT_DENSITY),
    target_density: KgPerCubicMeter = KgPerCubicMeter(DEFAULT_TARGET_DENSITY),
    gravity: float = EARTH_GRAVITY,
) -> Meters:
    """Transient crater diameter from a simplified pi-group scaling law.

    D = k * (g * d / v^2)^-0.22 * d * (rho_i / rho_t)^0.3, k = 1.8

    Raises:
        InvalidParameter: If velocity, densities or gravity are not positive,
                          or the diameter is negative.
    """
    validate_velocity(velocity)
    validate_non_negative(diameter_m, "Diameter", "m")
    validate_density(density)
    validate_density(target_density)
    validate_positive(gravity, "Gravity", "m/s²")

    if diameter_m == 0:
        return Meters(0.0)

    term = gravity * diameter_m / velocity**2
    return Meters(
        CRATER_SCALING_CONSTANT
        * term**CRATER_GRAVITY_EXPONENT
        * diameter_m
        * (density / target_density) ** CRATER_DENSITY_EXPONENT
    )


def terrain_crater_multiplier(target_type: TargetType) -> float:
    """Crater scale factor for the target terrain.

    Water reduces the effective crater; mountains use the land formula
    (the difference is only reported as an advisory note).
    """
    if target_type is TargetType.OCEAN:
        return OCEAN_CRATER_MULTIPLIER
    return 1.0


def crater_diameter_from_megatons(megatons: MegatonsTNT) -> Meters:
    """Final crater diameter D = 1.8 * E^0.29 km for E in megatons."""
    validate_non_negative(megatons, "Energy", "Mt")
    return Meters(CRATER_SCALING_CONSTANT * megatons**CRATER_MEGATON_EXPONENT * 1000)
