import math
from decimal import Decimal

import pytest

from pymud.catalog.scales import CELSIUS, FAHRENHEIT
from pymud.catalog.units import KILOWATT, WATT
from pymud.errors import FieldArithmeticError, IncommensurableDimensionError
from pymud.fields.bigdecimal import DECIMAL128
from pymud.fields.double import DOUBLE
from pymud.measure import Measure
from pymud.scale import Level, bel, decibel, neper
from pymud.units.universe import KELVIN

DBW = decibel(WATT)


def _watts(value: int | str, unit=WATT) -> Measure:
    return Measure(DOUBLE.of(value), unit)


def test_log_scale_names_and_symbols() -> None:
    assert DBW.name == "DECIBEL-WATT"
    assert DBW.symbol == "dBW"
    assert bel(WATT).symbol == "BW"
    assert neper(WATT).name == "NEPER-WATT"
    assert decibel(WATT, name="DBW", symbol="dB(W)").symbol == "dB(W)"
    assert str(CELSIUS) == "Scale: CELSIUS (C)"


def test_decibel_levels() -> None:
    assert DBW.level(_watts(1)).value.value == pytest.approx(0.0)
    assert DBW.level(_watts(100)).value.value == pytest.approx(20.0)
    assert DBW.level(_watts(1, KILOWATT)).value.value == pytest.approx(30.0)


def test_level_keeps_rebased_measure() -> None:
    level = DBW.level(_watts(1, KILOWATT))

    assert level.scale is DBW
    assert level.measure.unit is WATT
    assert level.measure.field.value == pytest.approx(1000.0)


def test_decibel_inverse() -> None:
    level = DBW.of(DOUBLE.of(20))

    assert isinstance(level, Level)
    assert level.measure.unit is WATT
    assert level.measure.field.value == pytest.approx(100.0)


def test_bel_and_neper_round_trip() -> None:
    assert bel(WATT).level(_watts(1000)).value.value == pytest.approx(3.0)
    assert bel(WATT).of(DOUBLE.of(2)).measure.field.value == pytest.approx(100.0)
    assert neper(WATT).level(_watts(1)).value.value == pytest.approx(0.0)
    assert neper(WATT).of(DOUBLE.of(2)).measure.field.value == pytest.approx(math.e**2)


def test_decimal_decibel_is_exact() -> None:
    level = DBW.level(Measure(DECIMAL128.of(1000), WATT))

    assert level.value.value == Decimal(30)


def test_celsius_conversions() -> None:
    warm = CELSIUS.of(DOUBLE.of(25))

    assert warm.measure.unit is KELVIN
    assert warm.measure.field.value == pytest.approx(298.15)
    assert CELSIUS.level(Measure(DOUBLE.of(0), KELVIN)).value.value == pytest.approx(-273.15)
    assert str(warm) == "25.0 C"


def test_fahrenheit_from_kelvin() -> None:
    boiling = FAHRENHEIT.level(Measure(DOUBLE.of("373.15"), KELVIN))

    assert boiling.value.value == pytest.approx(212.0)


def test_levels_compare_across_commensurable_scales() -> None:
    hot = CELSIUS.of(DOUBLE.of(100))
    warm = FAHRENHEIT.of(DOUBLE.of(200))

    assert hot > warm
    assert warm.is_less_than(hot)
    assert CELSIUS.of(DOUBLE.of(10)) < CELSIUS.of(DOUBLE.of(20))


def test_levels_on_incommensurable_scales_do_not_compare() -> None:
    with pytest.raises(IncommensurableDimensionError):
        DBW.of(DOUBLE.of(10)).compare(CELSIUS.of(DOUBLE.of(10)))


def test_level_equality_needs_same_scale() -> None:
    assert CELSIUS.of(DOUBLE.of(25)) == CELSIUS.of(DOUBLE.of("25"))
    assert CELSIUS.of(DOUBLE.of(25)) != FAHRENHEIT.of(DOUBLE.of(25))
    assert CELSIUS.of(DOUBLE.of(25)) != CELSIUS.of(DECIMAL128.of(25))


def test_decibel_of_zero_power_is_undefined() -> None:
    with pytest.raises(FieldArithmeticError):
        DBW.level(Measure(DECIMAL128.of(0), WATT))
    with pytest.raises(FieldArithmeticError):
        DBW.level(_watts(0))
