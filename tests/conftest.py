import pytest

from heat_body import HeatBody
from material import Material, MaterialType
from units import kelvin


@pytest.fixture
def copper():
    return Material.from_type(MaterialType.COPPER)


@pytest.fixture
def make_body(copper):
    """Factory for bodies: make_body(temperature_k, volume=1.0, material=copper)."""
    def _make(temperature_k, volume=1.0, material=None):
        return HeatBody.from_temperature(kelvin(temperature_k), volume, material or copper)
    return _make
