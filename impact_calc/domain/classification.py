"""TNT conversion and risk classification scales.

Two independent scales coexist and are not required to agree:
seismic severity buckets retained energy in tons of TNT, while the danger
level of the quick estimate buckets raw kinetic energy in megatons. The same
holds for tsunami signals, one keyed on terrain and one on diameter.
"""

import math

from impact_calc.domain.constants import (
    DANGER_MINIMAL_MT,
    DANGER_MODERATE_MT,
    DANGER_SEVERE_MT,
    GLOBAL_EFFECTS_TONS,
    JOULES_PER_MEGATON_TNT,
    JOULES_PER_TON_TNT,
    RICHTER_OFFSET,
    RICHTER_SLOPE,
    SEISMIC_EXTREME_TONS,
    SEISMIC_MODERATE_TONS,
    SEISMIC_SEVERE_TONS,
    SIGNIFICANT_LOSS_THRESHOLD,
    TSUNAMI_HIGH_DIAMETER_M,
    TSUNAMI_MODERATE_DIAMETER_M,
)
from impact_calc.domain.models.impact import (
    DangerLevel,
    SeismicSeverity,
    TargetType,
    TsunamiRisk,
)
from impact_calc.domain.models.units import (
    Fraction,
    Joules,
    MegatonsTNT,
    Meters,
    TonsTNT,
)
from impact_calc.domain.validators import validate_positive

NOTE_TSUNAMI = "Potential large tsunami generation"
NOTE_MOUNTAIN = "Mountain terrain reduces crater size and increases ejecta confinement"
NOTE_ATMOSPHERIC_LOSS = "Significant atmospheric energy loss"
NOTE_GLOBAL_EFFECTS = "Global climatic effects possible"


def energy_to_tons_tnt(joules: Joules) -> TonsTNT:
    """Metric tons of TNT; 1 t TNT = 4.184e9 J."""
    return TonsTNT(joules / JOULES_PER_TON_TNT)


def energy_to_megatons_tnt(joules: Joules) -> MegatonsTNT:
    return MegatonsTNT(joules / JOULES_PER_MEGATON_TNT)


def seismic_severity_by_tons(tons_tnt: TonsTNT) -> SeismicSeverity:
    """Bucket retained energy; thresholds are exclusive lower bounds."""
    if tons_tnt > SEISMIC_EXTREME_TONS:
        return SeismicSeverity.EXTREME
    if tons_tnt > SEISMIC_SEVERE_TONS:
        return SeismicSeverity.SEVERE
    if tons_tnt > SEISMIC_MODERATE_TONS:
        return SeismicSeverity.MODERATE
    return SeismicSeverity.LOW


def danger_level_by_megatons(megatons_tnt: MegatonsTNT) -> DangerLevel:
    if megatons_tnt < DANGER_MINIMAL_MT:
        return DangerLevel.MINIMAL
    if megatons_tnt < DANGER_MODERATE_MT:
        return DangerLevel.MODERATE
    if megatons_tnt < DANGER_SEVERE_MT:
        return DangerLevel.SEVERE
    return DangerLevel.CATASTROPHIC


def tsunami_potential_by_diameter(diameter_m: Meters) -> TsunamiRisk:
    """Diameter-only tsunami risk used by the quick estimate panel."""
    if diameter_m > TSUNAMI_HIGH_DIAMETER_M:
        return TsunamiRisk.HIGH
    if diameter_m > TSUNAMI_MODERATE_DIAMETER_M:
        return TsunamiRisk.MODERATE
    return TsunamiRisk.LOW


def tsunami_potential_by_terrain(target_type: TargetType) -> bool:
    return target_type is TargetType.OCEAN


def richter_magnitude(joules: Joules) -> float:
    """Approximate Richter-equivalent magnitude, M = 0.67 * log10(E) - 5.87."""
    validate_positive(joules, "Energy", "J")
    return RICHTER_SLOPE * math.log10(joules) - RICHTER_OFFSET


def build_notes(
    target_type: TargetType, attenuation: Fraction, tons_tnt: TonsTNT
) -> tuple[str, ...]:
    """Advisory notes in fixed evaluation order; conditions are not exclusive."""
    notes: list[str] = []
    if tsunami_potential_by_terrain(target_type):
        notes.append(NOTE_TSUNAMI)
    if target_type is TargetType.MOUNTAIN:
        notes.append(NOTE_MOUNTAIN)
    if attenuation < SIGNIFICANT_LOSS_THRESHOLD:
        notes.append(NOTE_ATMOSPHERIC_LOSS)
    if tons_tnt > GLOBAL_EFFECTS_TONS:
        notes.append(NOTE_GLOBAL_EFFECTS)
    return tuple(notes)
