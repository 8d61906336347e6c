"""Input validation utilities for impact calculations."""

import math
import numbers

from impact_calc.domain.exceptions import InvalidParameter
from impact_calc.domain.models.coordinates import Coordinates
from impact_calc.domain.models.units import Degrees, KgPerCubicMeter, Meters, MetersPerSecond


def _validate_finite_number(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be numeric, got {type(value)}")

    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")


def validate_positive(value: float, name: str, unit: str = "") -> None:
    """Validate that a parameter is a finite number strictly greater than zero.

    Args:
        value: Parameter value
        name: Name for error messages
        unit: Optional unit suffix for error messages

    Raises:
        InvalidParameter: If value is not numeric, not finite, or <= 0
    """
    _validate_finite_number(value, name)

    if value <= 0:
        suffix = f" {unit}" if unit else ""
        raise InvalidParameter(f"{name} must be positive, got {value}{suffix}")


def validate_non_negative(value: float, name: str, unit: str = "") -> None:
    """Validate that a parameter is a finite number >= 0."""
    _validate_finite_number(value, name)

    if value < 0:
        suffix = f" {unit}" if unit else ""
        raise InvalidParameter(f"{name} must be non-negative, got {value}{suffix}")


def validate_diameter(diameter_m: Meters) -> None:
    """Validate asteroid diameter.

    Raises:
        InvalidParameter: If diameter is not a positive finite number
    """
    validate_positive(diameter_m, "Diameter", "m")


def validate_velocity(velocity: MetersPerSecond) -> None:
    """Validate impact velocity.

    Raises:
        InvalidParameter: If velocity is not a positive finite number
    """
    validate_positive(velocity, "Velocity", "m/s")


def validate_density(density: KgPerCubicMeter) -> None:
    """Validate bulk density of the impactor or target."""
    validate_positive(density, "Density", "kg/m³")


def validate_entry_angle(angle_deg: Degrees) -> None:
    """Validate entry angle measured from the horizontal.

    Args:
        angle_deg: Entry angle in degrees

    Raises:
        InvalidParameter: If angle is outside (0, 90]
    """
    _validate_finite_number(angle_deg, "Entry angle")

    if not 0 < angle_deg <= 90:
        raise InvalidParameter(
            f"Invalid entry angle {angle_deg}°. Must be in range (0, 90]"
        )


def validate_coordinates(coord: Coordinates) -> None:
    """Validate geographic coordinates.

    Raises:
        InvalidParameter: If coordinates are out of valid range
    """
    if not isinstance(coord, Coordinates):
        raise InvalidParameter(f"Expected Coordinates, got {type(coord)}")

    if not -90 <= coord.lat <= 90:
        raise InvalidParameter(
            f"Invalid latitude {coord.lat}°. Must be in range [-90, 90]"
        )

    if not -180 <= coord.lon <= 180:
        raise InvalidParameter(
            f"Invalid longitude {coord.lon}°. Must be in range [-180, 180]"
        )
