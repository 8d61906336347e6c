from collections.abc import Sequence
from dataclasses import replace

import numpy as np

from impact_calc.application.simulation import simulate_impact
from impact_calc.domain.constants import (
    ANGLE_RANGE_DEG,
    DIAMETER_RANGE_M,
    SPEED_RANGE_KM_S,
)
from impact_calc.domain.exceptions import InvalidParameter
from impact_calc.domain.models.impact import ImpactSimulationInput, ImpactSimulationResult
from impact_calc.logging_config import get_logger

logger = get_logger(__name__)

# Default sweep ranges follow the front-end sliders (velocity in m/s)
SWEEP_RANGES: dict[str, tuple[float, float]] = {
    "diameter_m": DIAMETER_RANGE_M,
    "velocity": (SPEED_RANGE_KM_S[0] * 1000, SPEED_RANGE_KM_S[1] * 1000),
    "angle_deg": ANGLE_RANGE_DEG,
}
SWEEPABLE = (*SWEEP_RANGES, "density")


def sweep_parameter(
    base: ImpactSimulationInput,
    parameter: str,
    values: Sequence[float] | None = None,
    steps: int = 25,
) -> list[tuple[float, ImpactSimulationResult]]:
    """
    Re-run the simulation while varying one input field.

    Args:
        base: Input whose other fields stay fixed
        parameter: Field to vary (diameter_m, velocity, angle_deg or density)
        values: Explicit values; defaults to ``steps`` evenly spaced points
                over the slider range of ``parameter``
        steps: Number of points when ``values`` is omitted

    Returns:
        List of (value, result) pairs in the order of ``values``

    Raises:
        InvalidParameter: For unknown parameters, a missing range, or any
                          swept value the input model rejects
    """
    if parameter not in SWEEPABLE:
        raise InvalidParameter(
            f"Cannot sweep {parameter!r}. Expected one of: {', '.join(SWEEPABLE)}"
        )

    if values is None:
        if parameter not in SWEEP_RANGES:
            raise InvalidParameter(f"No default range for {parameter!r}; pass values")
        if steps < 2:
            raise InvalidParameter(f"Sweep needs at least 2 steps, got {steps}")
        low, high = SWEEP_RANGES[parameter]
        values = np.linspace(low, high, steps).tolist()

    logger.debug(f"Sweeping {parameter} over {len(values)} values")
    return [
        (float(value), simulate_impact(replace(base, **{parameter: float(value)})))
        for value in values
    ]
