import math

from impact_calc.domain.classification import (
    build_notes,
    danger_level_by_megatons,
    energy_to_megatons_tnt,
    energy_to_tons_tnt,
    richter_magnitude,
    seismic_severity_by_tons,
    tsunami_potential_by_diameter,
    tsunami_potential_by_terrain,
)
from impact_calc.domain.constants import DEFAULT_ANGLE_DEG, DEFAULT_DENSITY
from impact_calc.domain.geometry import degrees_to_radians
from impact_calc.domain.models.impact import (
    ImpactSimulationInput,
    ImpactSimulationResult,
    QuickImpactEstimate,
)
from impact_calc.domain.models.units import (
    Degrees,
    Fraction,
    Joules,
    KilometersPerSecond,
    Meters,
)
from impact_calc.domain.physics import (
    asteroid_mass_kg,
    attenuation_factor,
    crater_diameter_from_megatons,
    crater_diameter_meters,
    kinetic_energy_joules,
    terrain_crater_multiplier,
)
from impact_calc.domain.validators import (
    validate_density,
    validate_diameter,
    validate_entry_angle,
    validate_positive,
)
from impact_calc.logging_config import get_logger

logger = get_logger(__name__)


def simulate_impact(params: ImpactSimulationInput) -> ImpactSimulationResult:
    """
    Run the full impact estimate for one parameter set.

    Args:
        params: Validated simulation input

    Returns:
        ImpactSimulationResult with energy, crater, seismic and note outputs

    Raises:
        TypeError: If ``params`` is not an ImpactSimulationInput
    """
    if not isinstance(params, ImpactSimulationInput):
        raise TypeError(f"Expected ImpactSimulationInput, got {type(params)}")

    energy = kinetic_energy_joules(params.diameter_m, params.velocity, params.density)
    attenuation = attenuation_factor(params.diameter_m, params.velocity, params.angle_deg)
    retained = Joules(energy * attenuation)

    crater = crater_diameter_meters(
        params.diameter_m, params.velocity, params.density
    ) * terrain_crater_multiplier(params.target_type)

    tons = energy_to_tons_tnt(retained)
    severity = seismic_severity_by_tons(tons)

    logger.debug(
        f"Impact d={params.diameter_m:.1f} m v={params.velocity:.0f} m/s "
        f"angle={params.angle_deg:.1f}° target={params.target_type.value}: "
        f"E={energy:.3e} J, retained={attenuation:.3f}, {tons:.3e} t TNT"
    )

    return ImpactSimulationResult(
        impact_energy_j=energy,
        energy_tons_tnt=tons,
        retained_energy_j=retained,
        crater_diameter_m=Meters(crater),
        tsunami_potential=tsunami_potential_by_terrain(params.target_type),
        seismic_severity=severity,
        attenuation_factor=attenuation,
        notes=build_notes(params.target_type, attenuation, tons),
    )


def estimate_quick_impact(
    diameter_m: float,
    speed_km_s: float,
    angle_deg: float = DEFAULT_ANGLE_DEG,
    density: float = DEFAULT_DENSITY,
) -> QuickImpactEstimate:
    """
    Simplified calculator: raw kinetic energy in megatons, no entry losses.

    Args:
        diameter_m: Asteroid diameter in meters
        speed_km_s: Impact speed in km/s (slider units)
        angle_deg: Entry angle, only reported as an efficiency figure
        density: Bulk density in kg/m³

    Returns:
        QuickImpactEstimate
    """
    validate_diameter(diameter_m)
    validate_positive(speed_km_s, "Speed", "km/s")
    validate_entry_angle(angle_deg)
    validate_density(density)

    velocity = speed_km_s * 1000
    mass = asteroid_mass_kg(Meters(diameter_m), density)
    energy = kinetic_energy_joules(Meters(diameter_m), velocity, density)
    megatons = energy_to_megatons_tnt(energy)

    return QuickImpactEstimate(
        diameter_m=Meters(diameter_m),
        speed_km_s=KilometersPerSecond(speed_km_s),
        mass_tons=mass / 1000,
        kinetic_energy_j=energy,
        megatons_tnt=megatons,
        crater_diameter_m=crater_diameter_from_megatons(megatons),
        richter_magnitude=richter_magnitude(energy),
        angle_efficiency=Fraction(math.sin(degrees_to_radians(Degrees(angle_deg)))),
        tsunami_risk=tsunami_potential_by_diameter(Meters(diameter_m)),
        danger_level=danger_level_by_megatons(megatons),
    )
