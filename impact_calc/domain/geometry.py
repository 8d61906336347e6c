import math

import numpy as np
from numpy.typing import NDArray

from impact_calc.domain.constants import EARTH_RADIUS_KM
from impact_calc.domain.models.coordinates import Coordinates
from impact_calc.domain.models.units import Degrees, Kilometers, Meters, Radians
from impact_calc.domain.validators import validate_non_negative


def degrees_to_radians(degrees: Degrees) -> Radians:
    return Radians(degrees * math.pi / 180)


def radians_to_degrees(radians: Radians) -> Degrees:
    return Degrees(radians * 180 / math.pi)


def sphere_volume(diameter_m: Meters) -> float:
    """
    Volume of a sphere of the given diameter in cubic meters.

    Raises:
        InvalidParameter: If the diameter is negative or not finite.
    """
    validate_non_negative(diameter_m, "Diameter", "m")
    radius = diameter_m / 2
    return (4 / 3) * math.pi * radius**3


def haversine_km(point_a: Coordinates, point_b: Coordinates) -> Kilometers:
    """
    Great-circle distance between two points in kilometers.

    Args:
        point_a: (lat, lon) of the first point in decimal degrees.
        point_b: (lat, lon) of the second point in decimal degrees.

    Returns:
        The distance along the Earth's surface, mean radius 6371 km.
    """
    d_lat = degrees_to_radians(point_b.lat - point_a.lat)
    d_lon = degrees_to_radians(point_b.lon - point_a.lon)
    lat_1 = degrees_to_radians(point_a.lat)
    lat_2 = degrees_to_radians(point_b.lat)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat_1) * math.cos(lat_2) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push h marginally above 1 for antipodal points
    return Kilometers(2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h))))


def lat_lon_to_vector(lat: Degrees, lon: Degrees) -> NDArray[np.float64]:
    """
    Convert latitude/longitude to a point on the unit sphere.

    Uses the globe's texture convention: y is the polar axis and longitude
    is shifted by 180° so that lon=0 faces the -x direction.

    Returns:
        A numpy array [x, y, z].
    """
    phi = np.deg2rad(90 - lat)  # polar angle
    theta = np.deg2rad(lon + 180)
    return np.array(
        [
            np.sin(phi) * np.cos(theta),
            np.cos(phi),
            np.sin(phi) * np.sin(theta),
        ]
    )
