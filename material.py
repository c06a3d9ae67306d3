# material.py

import math
from dataclasses import dataclass
from enum import Enum

import constants


class MaterialType(Enum):
    """Material presets available to the spawn layer."""
    ALUMINIUM = "aluminium"
    COPPER = "copper"
    IRON = "iron"


@dataclass(frozen=True)
class Material:
    """
    Physical constants of a particle material.

    Data Contract:
    - thermal_conductivity (float): W/(m K).
    - specific_heat_capacity (float): J/(kg K).
    - density (float): kg/m^3.
    - base_color (tuple): RGB in 0..1. Display hint only, not used by conduction.
    - Invariants: the three physical quantities are finite and strictly positive.
      Instances are immutable and may be shared between any number of bodies.
    """
    thermal_conductivity: float
    specific_heat_capacity: float
    density: float
    base_color: tuple = (1.0, 1.0, 1.0)

    def __post_init__(self):
        for name in ("thermal_conductivity", "specific_heat_capacity", "density"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ValueError(f"Material {name} must be finite and positive, got {value!r}")

    @classmethod
    def from_type(cls, kind) -> "Material":
        """
        Builds a preset material.

        `kind` is a MaterialType or the preset's lower-case name ("copper"),
        so run configuration can pick a material by name.
        """
        if isinstance(kind, str):
            try:
                kind = MaterialType(kind.lower())
            except ValueError:
                raise KeyError(f"Unknown material '{kind}'. Available: {sorted(constants.MATERIAL_PRESETS)}") from None
        conductivity, specific_heat, density, base_color = constants.MATERIAL_PRESETS[kind.value]
        return cls(conductivity, specific_heat, density, base_color)
