"""Asteroid impact physics estimation package."""

from impact_calc.adapter import ImpactCalculatorAPI
from impact_calc.application.simulation import estimate_quick_impact, simulate_impact
from impact_calc.domain.exceptions import InvalidParameter
from impact_calc.domain.models.impact import ImpactSimulationInput, ImpactSimulationResult

__all__ = [
    "ImpactCalculatorAPI",
    "estimate_quick_impact",
    "simulate_impact",
    "InvalidParameter",
    "ImpactSimulationInput",
    "ImpactSimulationResult",
]
