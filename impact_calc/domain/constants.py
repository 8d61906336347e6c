"""Constants used across the application."""

import os
from pathlib import Path

# Default directory for JSON reports; main() lets OUTPUT_DATA_DIR from .env override it
OUTPUT_DATA_DIR = os.getenv("OUTPUT_DATA_DIR", str(Path.cwd() / "output_data"))

# Physical constants
EARTH_RADIUS_KM = 6371.0  # Earth's mean radius in kilometers
EARTH_GRAVITY = 9.81  # m/s^2
LUNAR_DISTANCE_KM = 384400.0

# Defaults for impactor and target
DEFAULT_DENSITY = 3000.0  # kg/m^3, typical rocky asteroid
DEFAULT_ANGLE_DEG = 45.0
DEFAULT_TARGET_DENSITY = 2500.0  # kg/m^3, sedimentary rock

# TNT equivalents
JOULES_PER_TON_TNT = 4.184e9
JOULES_PER_MEGATON_TNT = 4.184e15

# Atmospheric attenuation heuristic
ATTENUATION_FLOOR = 0.3
ATTENUATION_SCALE = 0.7
ATTENUATION_SIZE_WEIGHT = 0.4
ATTENUATION_VELOCITY_WEIGHT = 0.6
ATTENUATION_SIZE_SATURATION_M = 500.0
ATTENUATION_VELOCITY_SATURATION_MPS = 30000.0
SIGNIFICANT_LOSS_THRESHOLD = 0.6

# Crater scaling
CRATER_SCALING_CONSTANT = 1.8  # tuned for visual plausibility
CRATER_GRAVITY_EXPONENT = -0.22
CRATER_DENSITY_EXPONENT = 0.3
CRATER_MEGATON_EXPONENT = 0.29
OCEAN_CRATER_MULTIPLIER = 0.7

# Seismic severity breakpoints (tons TNT, exclusive lower bounds)
SEISMIC_EXTREME_TONS = 1e7
SEISMIC_SEVERE_TONS = 1e5
SEISMIC_MODERATE_TONS = 1e3
GLOBAL_EFFECTS_TONS = 1e6

# Danger level breakpoints (megatons TNT, exclusive upper bounds)
DANGER_MINIMAL_MT = 1.0
DANGER_MODERATE_MT = 100.0
DANGER_SEVERE_MT = 1000.0

# Diameter-based tsunami risk breakpoints (meters)
TSUNAMI_HIGH_DIAMETER_M = 100.0
TSUNAMI_MODERATE_DIAMETER_M = 50.0

# Richter-equivalent fit: M = a * log10(E) - b
RICHTER_SLOPE = 0.67
RICHTER_OFFSET = 5.87

# Slider ranges of the visualization front end
DIAMETER_RANGE_M = (10.0, 1000.0)
SPEED_RANGE_KM_S = (5.0, 50.0)
ANGLE_RANGE_DEG = (15.0, 90.0)

# Remote services
NASA_NEO_FEED_URL = "https://api.nasa.gov/neo/rest/v1/feed"
NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
