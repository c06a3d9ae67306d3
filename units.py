# units.py

"""
Temperature kinds.

An absolute reading and a difference between two readings are different
quantities. Keeping them as two types makes the conversions explicit:

    absolute - absolute   -> interval
    absolute +/- interval -> absolute
    interval * scalar     -> interval
    interval . to_energy  -> joules

Anything else (adding two absolute temperatures, mixing with bare numbers)
raises TypeError.
"""

import math
from dataclasses import dataclass

import constants


@dataclass(frozen=True, order=True)
class TemperatureInterval:
    """A signed temperature difference in kelvin."""
    kelvin: float

    def __add__(self, other):
        if isinstance(other, TemperatureInterval):
            return TemperatureInterval(self.kelvin + other.kelvin)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, TemperatureInterval):
            return TemperatureInterval(self.kelvin - other.kelvin)
        return NotImplemented

    def __neg__(self):
        return TemperatureInterval(-self.kelvin)

    def __abs__(self):
        return TemperatureInterval(abs(self.kelvin))

    def __mul__(self, scalar):
        if isinstance(scalar, (TemperatureInterval, ThermodynamicTemperature)):
            return NotImplemented
        return TemperatureInterval(self.kelvin * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (TemperatureInterval, ThermodynamicTemperature)):
            return NotImplemented
        return TemperatureInterval(self.kelvin / scalar)

    def to_energy(self, heat_capacity: float) -> float:
        """Energy (J) that moves a body of `heat_capacity` (J/K) by this interval."""
        return self.kelvin * heat_capacity


@dataclass(frozen=True, order=True)
class ThermodynamicTemperature:
    """A point on the absolute temperature scale, in kelvin."""
    kelvin: float

    @classmethod
    def from_celsius(cls, celsius: float) -> "ThermodynamicTemperature":
        return cls(celsius + constants.CELSIUS_OFFSET)

    @property
    def celsius(self) -> float:
        return self.kelvin - constants.CELSIUS_OFFSET

    def is_physical(self) -> bool:
        """True for finite readings at or above absolute zero."""
        return math.isfinite(self.kelvin) and self.kelvin >= constants.ABSOLUTE_ZERO_KELVIN

    def as_interval(self) -> TemperatureInterval:
        """The interval separating this reading from absolute zero."""
        return TemperatureInterval(self.kelvin - constants.ABSOLUTE_ZERO_KELVIN)

    def __add__(self, other):
        if isinstance(other, TemperatureInterval):
            return ThermodynamicTemperature(self.kelvin + other.kelvin)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, ThermodynamicTemperature):
            return TemperatureInterval(self.kelvin - other.kelvin)
        if isinstance(other, TemperatureInterval):
            return ThermodynamicTemperature(self.kelvin - other.kelvin)
        return NotImplemented


ABSOLUTE_ZERO = ThermodynamicTemperature(constants.ABSOLUTE_ZERO_KELVIN)


def kelvin(value: float) -> ThermodynamicTemperature:
    """Shorthand for an absolute reading in kelvin."""
    return ThermodynamicTemperature(float(value))
