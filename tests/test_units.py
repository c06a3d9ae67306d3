import pytest

from units import ABSOLUTE_ZERO, TemperatureInterval, ThermodynamicTemperature, kelvin


class TestTemperatureArithmetic:
    def test_absolute_minus_absolute_is_interval(self):
        result = kelvin(1000.0) - kelvin(250.0)
        assert isinstance(result, TemperatureInterval)
        assert result.kelvin == 750.0

    def test_absolute_plus_interval_is_absolute(self):
        result = kelvin(300.0) + TemperatureInterval(-20.0)
        assert isinstance(result, ThermodynamicTemperature)
        assert result.kelvin == 280.0

    def test_interval_plus_absolute_is_absolute(self):
        result = TemperatureInterval(5.0) + kelvin(10.0)
        assert result == kelvin(15.0)

    def test_absolute_minus_interval_is_absolute(self):
        assert kelvin(300.0) - TemperatureInterval(100.0) == kelvin(200.0)

    def test_interval_scaling(self):
        interval = TemperatureInterval(10.0)
        assert interval / 2 == TemperatureInterval(5.0)
        assert interval * 3 == TemperatureInterval(30.0)
        assert 3 * interval == TemperatureInterval(30.0)
        assert -interval == TemperatureInterval(-10.0)
        assert abs(TemperatureInterval(-4.0)) == TemperatureInterval(4.0)

    def test_interval_to_energy(self):
        assert TemperatureInterval(2.0).to_energy(3.5) == 7.0

    def test_adding_two_absolutes_is_rejected(self):
        with pytest.raises(TypeError):
            kelvin(1.0) + kelvin(2.0)

    def test_mixing_with_bare_numbers_is_rejected(self):
        with pytest.raises(TypeError):
            kelvin(1.0) + 2.0
        with pytest.raises(TypeError):
            TemperatureInterval(1.0) + 2.0
        with pytest.raises(TypeError):
            kelvin(1.0) * 2

    def test_kinds_never_compare_equal(self):
        assert kelvin(5.0) != TemperatureInterval(5.0)


class TestScales:
    def test_celsius_round_trip(self):
        boiling = ThermodynamicTemperature.from_celsius(100.0)
        assert boiling.kelvin == pytest.approx(373.15)
        assert boiling.celsius == pytest.approx(100.0)

    def test_as_interval_measures_from_absolute_zero(self):
        assert kelvin(42.0).as_interval() == TemperatureInterval(42.0)
        assert ABSOLUTE_ZERO + kelvin(42.0).as_interval() == kelvin(42.0)

    def test_is_physical(self):
        assert kelvin(0.0).is_physical()
        assert not kelvin(-1.0).is_physical()
        assert not kelvin(float('nan')).is_physical()
        assert not kelvin(float('inf')).is_physical()
