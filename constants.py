# constants.py

"""
Physical and Application Constants

This module defines static configuration values for the heat exchange core.
These are not expected to change between simulation runs; anything tunable
per run lives in config.json and falls back to the defaults below.

Data Contract:
- All values are immutable constants.
- Units are SI (kelvin, metre, second, joule, kilogram) unless noted.
"""

import math

# Name of the dedicated application logger
LOGGER_NAME = "heat_sim"

# Absolute zero of the thermodynamic scale
ABSOLUTE_ZERO_KELVIN = 0.0  # K
CELSIUS_OFFSET = 273.15     # K

# Per-event conduction step. Approximates one frame of a 144 Hz simulation and
# is applied to every collision regardless of the real time between contacts.
DEFAULT_FRAME_DT = 1.0 / 144.0  # s

# Nominal contact between two colliding particles, modelled as a conductive disk.
DEFAULT_CONTACT_AREA = 1e-6       # m^2 (1 mm^2)
DEFAULT_CONTACT_THICKNESS = 1e-3  # m (1 mm)

# How the conductivity of a contact is chosen from the two materials.
# "first" uses the conductivity of the first body of the pair only.
CONDUCTIVITY_MODES = ("first", "harmonic")
DEFAULT_CONDUCTIVITY_MODE = "first"

# Material presets.
# Each entry: (thermal_conductivity W/(m K), specific_heat_capacity J/(kg K),
#              density kg/m^3, base_color RGB in 0..1)
MATERIAL_PRESETS = {
    "aluminium": (237.0, 0.9, 2.7, (0.8, 0.8, 0.9)),
    "copper":    (385.0, 0.385, 8.96, (0.9, 0.6, 0.2)),
    "iron":      (80.0, 0.45, 7.87, (0.8, 0.8, 0.8)),
}
DEFAULT_MATERIAL = "copper"

# Color Mapping for Visualization
# Brightness is log_BRIGHTNESS_LOG_BASE(T), compressing 0..100000 K into a usable range.
BRIGHTNESS_LOG_BASE = 4.0
BRIGHTNESS_FALLBACK = 1.0
CHANNEL_MAX = 255.0

# Black-body approximation coefficients (Tanner Helland fit, T in hundreds of kelvin)
BLACKBODY_PIVOT = 66.0
BLACKBODY_BUCKET_EPSILON = 1e-9
BLACKBODY_BLUE_CUTOFF = 19.0
BLACKBODY_GREEN_LOW = (99.4708025861, -161.1195681661)
BLACKBODY_BLUE_LOW = (138.5177312231, -305.0447927307)
BLACKBODY_RED_HIGH = (329.698727446, -0.1332047592)
BLACKBODY_GREEN_HIGH = (288.1221695283, -0.0755148492)

# Spawn brushes of the sandbox
COLD_TEMP_RANGE = (0.0, 6000.0)       # K
HOT_TEMP_RANGE = (10000.0, 100000.0)  # K
MIN_DIAMETER_MM = 1
MAX_DIAMETER_MM = 16

MM_TO_M = 1e-3
SPHERE_VOLUME_FACTOR = math.pi / 6.0  # V = pi d^3 / 6
