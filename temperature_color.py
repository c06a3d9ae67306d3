# temperature_color.py

"""
Temperature to display color.

A particle's color is the black-body color of its temperature (Tanner
Helland's curve fit, good from roughly 1000 K to 40000 K) scaled by a
brightness of log_4(T). The logarithm keeps particles between near absolute
zero and >100000 K distinguishable without saturating everything. Channels
above 1.0 are intentional: the renderer is expected to tone-map HDR colors.
"""

import math

import numba
import numpy as np

import constants
from units import ThermodynamicTemperature

# --- JIT-Compiled Color Functions ---
# Scalar kernels operate on plain floats so the vectorized loop below can
# call them in nopython mode.

_PIVOT = constants.BLACKBODY_PIVOT
_BLUE_CUTOFF = constants.BLACKBODY_BLUE_CUTOFF
_GREEN_LOW_A, _GREEN_LOW_B = constants.BLACKBODY_GREEN_LOW
_BLUE_LOW_A, _BLUE_LOW_B = constants.BLACKBODY_BLUE_LOW
_RED_HIGH_A, _RED_HIGH_EXP = constants.BLACKBODY_RED_HIGH
_GREEN_HIGH_A, _GREEN_HIGH_EXP = constants.BLACKBODY_GREEN_HIGH
_CHANNEL_MAX = constants.CHANNEL_MAX
_LOG_BASE = constants.BRIGHTNESS_LOG_BASE
_FALLBACK = constants.BRIGHTNESS_FALLBACK
_BUCKET_EPSILON = constants.BLACKBODY_BUCKET_EPSILON


@numba.jit(nopython=True)
def _clamp_channel_jit(value):
    """Clamp to 0..255. NaN maps to 0."""
    if not math.isfinite(value):
        return _CHANNEL_MAX if value > 0 else 0.0
    return min(max(value, 0.0), _CHANNEL_MAX)


@numba.jit(nopython=True)
def _blackbody_rgb_jit(kelvin):
    """Approximate black-body RGB (0..255) for an absolute temperature."""
    if not math.isfinite(kelvin):
        kelvin = 0.0
    # Round-trip error through stored energy must not drop a reading into the bucket below.
    temp = np.floor(kelvin / 100.0 + _BUCKET_EPSILON)

    if temp <= _PIVOT:
        red = _CHANNEL_MAX
        # log is undefined at and below zero; below 100 K green stays at 0.
        green = _GREEN_LOW_A * math.log(temp) + _GREEN_LOW_B if temp > 0 else 0.0
        if temp <= _BLUE_CUTOFF:
            blue = 0.0
        else:
            blue = _BLUE_LOW_A * math.log(temp - 10.0) + _BLUE_LOW_B
    else:
        red = _RED_HIGH_A * (temp - 60.0) ** _RED_HIGH_EXP
        green = _GREEN_HIGH_A * (temp - 60.0) ** _GREEN_HIGH_EXP
        blue = _CHANNEL_MAX

    return _clamp_channel_jit(red), _clamp_channel_jit(green), _clamp_channel_jit(blue)


@numba.jit(nopython=True)
def _brightness_multiplier_jit(kelvin):
    if not math.isfinite(kelvin) or kelvin <= 1.0:
        return _FALLBACK
    multiplier = math.log(kelvin) / math.log(_LOG_BASE)
    if not math.isfinite(multiplier):
        return _FALLBACK
    return multiplier


@numba.jit(nopython=True)
def _color_for_kelvin_jit(kelvin):
    red, green, blue = _blackbody_rgb_jit(kelvin)
    scale = _brightness_multiplier_jit(kelvin) / _CHANNEL_MAX
    return red * scale, green * scale, blue * scale


@numba.jit(nopython=True)
def _colors_for_kelvins_jit(kelvins, colors):
    for i in range(kelvins.shape[0]):
        red, green, blue = _color_for_kelvin_jit(kelvins[i])
        colors[i, 0] = red
        colors[i, 1] = green
        colors[i, 2] = blue


def _as_kelvin(temperature) -> float:
    if isinstance(temperature, ThermodynamicTemperature):
        return float(temperature.kelvin)
    return float(temperature)


def blackbody_rgb(temperature) -> tuple:
    """Black-body color of `temperature` as (r, g, b) in 0..255."""
    return _blackbody_rgb_jit(_as_kelvin(temperature))


def brightness_multiplier(temperature) -> float:
    """log_4(T), or 1.0 for T <= 1 K and for anything non-finite."""
    return _brightness_multiplier_jit(_as_kelvin(temperature))


def color_for(temperature) -> tuple:
    """
    Display color of a body at `temperature`.

    - Inputs: temperature (ThermodynamicTemperature or float kelvin).
    - Outputs: (r, g, b) floats, normalized to 1.0 at full channel and
      brightness 1. Never raises.
    """
    return _color_for_kelvin_jit(_as_kelvin(temperature))


def colors_for(kelvins) -> np.ndarray:
    """Vectorized color_for over an array of kelvin values. Returns shape (N, 3)."""
    kelvins = np.ascontiguousarray(kelvins, dtype=np.float64).reshape(-1)
    colors = np.empty((kelvins.shape[0], 3), dtype=np.float64)
    if kelvins.shape[0] > 0:
        _colors_for_kelvins_jit(kelvins, colors)
    return colors
