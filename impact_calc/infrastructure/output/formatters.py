"""Output formatting services for console display."""

import json
from typing import Protocol

from impact_calc.domain.models.impact import (
    ImpactSimulationInput,
    ImpactSimulationResult,
    QuickImpactEstimate,
)
from impact_calc.domain.models.location import ImpactLocation
from impact_calc.domain.models.timeline import TrajectoryTimeline


def format_number(n: float, digits: int = 2) -> str:
    """
    Compact human-readable number: 1.50B, 2.00M, 3.25k, 1.00e-03, 12.34.
    """
    if n == 0:
        return "0"
    magnitude = abs(n)
    if magnitude >= 1e9:
        return f"{n / 1e9:.{digits}f}B"
    if magnitude >= 1e6:
        return f"{n / 1e6:.{digits}f}M"
    if magnitude >= 1e3:
        return f"{n / 1e3:.{digits}f}k"
    if magnitude < 0.01:
        return f"{n:.2e}"
    return f"{n:.{digits}f}"


def _format_dict_floats(d, precision):
    for k, v in d.items():
        if isinstance(v, float):
            d[k] = round(v, precision)
        elif isinstance(v, dict):
            _format_dict_floats(v, precision)
        elif isinstance(v, list):
            d[k] = [
                _format_dict_floats(i, precision)
                if isinstance(i, dict)
                else (round(i, precision) if isinstance(i, float) else i)
                for i in v
            ]
    return d


def _build_output_dict(
    result: ImpactSimulationResult,
    params: ImpactSimulationInput | None = None,
    quick: QuickImpactEstimate | None = None,
    location: ImpactLocation | None = None,
    timeline: TrajectoryTimeline | None = None,
) -> dict:
    output_dict: dict = {"simulation_result": _format_dict_floats(result.to_dict(), 4)}

    if params:
        output_dict["input"] = params.to_dict()

    if location:
        output_dict["location"] = {
            "name": location.name,
            "lat": location.coordinates.lat,
            "lon": location.coordinates.lon,
            "terrain": location.terrain.value,
        }

    if quick:
        output_dict["quick_estimate"] = _format_dict_floats(quick.to_dict(), 4)

    if timeline:
        output_dict["timeline"] = {
            "days_to_impact": timeline.days_to_impact,
            "milestones": [
                {
                    "phase": m.phase,
                    "time": m.label,
                    "status": m.status.value,
                    "description": m.description,
                }
                for m in timeline.milestones
            ],
        }

    return output_dict


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(
        self,
        result: ImpactSimulationResult,
        params: ImpactSimulationInput | None = None,
        quick: QuickImpactEstimate | None = None,
        location: ImpactLocation | None = None,
        timeline: TrajectoryTimeline | None = None,
    ) -> str | None:
        """Format and display a simulation result with optional context"""
        ...


class ConsoleOutputFormatter:
    """Format simulation results for console output"""

    def format_result(
        self,
        result: ImpactSimulationResult,
        params: ImpactSimulationInput | None = None,
        quick: QuickImpactEstimate | None = None,
        location: ImpactLocation | None = None,
        timeline: TrajectoryTimeline | None = None,
    ) -> None:
        print(f"\n{'=' * 60}")
        print("Asteroid Impact Estimate")
        print(f"{'=' * 60}")

        if params:
            print("\n☄️  Impactor:")
            print(f"  Diameter:                {params.diameter_m:.0f} m")
            print(f"  Velocity:                {params.velocity / 1000:.1f} km/s")
            print(f"  Density:                 {params.density:.0f} kg/m³")
            print(f"  Entry Angle:             {params.angle_deg:.0f}°")
            print(f"  Target:                  {params.target_type.value}")

        if location:
            print("\n📍 Impact Location:")
            print(
                f"  {location.name}: {location.coordinates.lat:.4f}°, "
                f"{location.coordinates.lon:.4f}°"
            )

        print("\n💥 Energy:")
        print(f"  Kinetic Energy:          {result.impact_energy_j:.2e} J")
        print(f"  Retained Fraction:       {result.attenuation_factor * 100:.0f}%")
        print(f"  Retained Energy:         {result.retained_energy_j:.2e} J")
        print(f"  TNT Equivalent:          {format_number(result.energy_tons_tnt)} t")

        print("\n🌍 Effects:")
        print(f"  Crater Diameter:         {format_number(result.crater_diameter_m)} m")
        print(f"  Seismic Severity:        {result.seismic_severity.value}")
        print(f"  Tsunami Potential:       {'yes' if result.tsunami_potential else 'no'}")

        if result.notes:
            print("\n📝 Notes:")
            for note in result.notes:
                print(f"  - {note}")

        if quick:
            print("\n🧮 Quick Estimate:")
            print(f"  Mass:                    {format_number(quick.mass_tons)} t")
            print(f"  Energy:                  {quick.megatons_tnt:.2f} Mt TNT")
            print(f"  Crater Diameter:         {quick.crater_diameter_m:.0f} m")
            print(f"  Richter Equivalent:      {quick.richter_magnitude:.1f}")
            print(f"  Angle Efficiency:        {quick.angle_efficiency * 100:.0f}%")
            print(f"  Tsunami Risk:            {quick.tsunami_risk.value}")
            print(f"  Danger Level:            {quick.danger_level.value}")

        if timeline:
            print(f"\n⏱️  Timeline ({timeline.days_to_impact} days to impact):")
            for milestone in timeline.milestones:
                print(
                    f"  {milestone.label:<14} {milestone.phase:<24} "
                    f"[{milestone.status.value}]"
                )

        print(f"{'=' * 60}\n")


class JSONOutputFormatter:
    """Format simulation results as JSON (for API/automation)"""

    def format_result(
        self,
        result: ImpactSimulationResult,
        params: ImpactSimulationInput | None = None,
        quick: QuickImpactEstimate | None = None,
        location: ImpactLocation | None = None,
        timeline: TrajectoryTimeline | None = None,
    ) -> str:
        output_dict = _build_output_dict(result, params, quick, location, timeline)
        return json.dumps(output_dict, indent=2, ensure_ascii=False)
