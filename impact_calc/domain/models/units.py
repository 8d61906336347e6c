# impact_calc/domain/models/units.py
"""
Type-safe unit definitions for impact calculations.

This module uses NewType to create distinct types for different units,
helping catch unit conversion errors at type-checking time.

Usage:
    from impact_calc.domain.models.units import Meters, MetersPerSecond

    def crater(diameter: Meters, velocity: MetersPerSecond) -> Meters:
        ...
"""

from typing import NewType

# Base physical units
Meters = NewType("Meters", float)  # Length in meters
Kilometers = NewType("Kilometers", float)  # Length in kilometers
Degrees = NewType("Degrees", float)  # Angle in degrees
Radians = NewType("Radians", float)  # Angle in radians
MetersPerSecond = NewType("MetersPerSecond", float)  # Speed in m/s
KilometersPerSecond = NewType("KilometersPerSecond", float)  # Speed in km/s
KgPerCubicMeter = NewType("KgPerCubicMeter", float)  # Bulk density
Kilograms = NewType("Kilograms", float)  # Mass

# Energy units
Joules = NewType("Joules", float)
TonsTNT = NewType("TonsTNT", float)  # Metric tons of TNT equivalent
MegatonsTNT = NewType("MegatonsTNT", float)

# Semantic types (domain-specific meanings)
LunarDistance = NewType("LunarDistance", float)  # Multiples of 384 400 km
Fraction = NewType("Fraction", float)  # Dimensionless value in [0, 1]
