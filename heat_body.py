# heat_body.py

import math

import constants
from material import Material
from units import ABSOLUTE_ZERO, TemperatureInterval, ThermodynamicTemperature


def sphere_volume(diameter: float) -> float:
    """Volume (m^3) of a spherical particle of the given diameter (m)."""
    return constants.SPHERE_VOLUME_FACTOR * diameter ** 3


class HeatBody:
    """
    The thermal state of a single particle.

    Only the stored energy is kept; mass, heat capacity and temperature are
    derived on demand from the fixed volume and the owned material.

    Data Contract:
    - Inputs:
        - stored_energy (float): Heat content above absolute zero, in joules.
        - volume (float): Particle volume in m^3. Fixed for the body's lifetime.
        - material (Material): Physical constants of the particle.
    - Outputs: None. Mutated only through add_heat/add_temperature.
    - Invariants: heat_capacity() > 0, so temperature() is always defined.
    """
    __slots__ = ("stored_energy", "_volume", "_material")

    def __init__(self, stored_energy: float, volume: float, material: Material):
        if not (math.isfinite(volume) and volume > 0):
            raise ValueError(f"HeatBody volume must be finite and positive, got {volume!r}")
        self.stored_energy = float(stored_energy)
        self._volume = float(volume)
        self._material = material

    @classmethod
    def from_temperature(cls, temperature: ThermodynamicTemperature, volume: float, material: Material) -> "HeatBody":
        """
        Creates a body holding exactly the energy that puts it at `temperature`.
        E = T * c * V * rho
        """
        if not isinstance(temperature, ThermodynamicTemperature):
            raise TypeError(f"Initial temperature must be a ThermodynamicTemperature, got {type(temperature).__name__}")
        if not temperature.is_physical():
            raise ValueError(f"Initial temperature must be finite and >= absolute zero, got {temperature.kelvin!r} K")
        if not (math.isfinite(volume) and volume > 0):
            raise ValueError(f"HeatBody volume must be finite and positive, got {volume!r}")
        stored_energy = temperature.as_interval().kelvin * material.specific_heat_capacity * volume * material.density
        return cls(stored_energy, volume, material)

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def material(self) -> Material:
        return self._material

    def mass(self) -> float:
        return self._volume * self._material.density

    def heat_capacity(self) -> float:
        """J/K needed to raise the whole body by one kelvin."""
        return self._material.specific_heat_capacity * self.mass()

    def temperature(self) -> ThermodynamicTemperature:
        return ABSOLUTE_ZERO + TemperatureInterval(self.stored_energy / self.heat_capacity())

    def add_heat(self, energy: float):
        # Unbounded. Keeping transfers physical is the conduction model's job.
        self.stored_energy += energy

    def add_temperature(self, interval: TemperatureInterval):
        self.add_heat(interval.to_energy(self.heat_capacity()))

    def __repr__(self):
        return (f"HeatBody(T={self.temperature().kelvin:.2f} K, E={self.stored_energy:.6g} J, "
                f"V={self._volume:.3g} m^3)")
