import pytest

from pymud.catalog import dimensions
from pymud.catalog.units import CENTIMETER, kilo
from pymud.errors import IncommensurableDimensionError
from pymud.expr.expression import take
from pymud.fields.bigdecimal import DECIMAL128
from pymud.fields.double import DOUBLE
from pymud.measure import Measure
from pymud.units.unit import UNITLESS
from pymud.units.universe import METER, SECOND

KILOMETER = kilo(METER)


def _m(value: int | str, unit=METER) -> Measure:
    return Measure(DOUBLE.of(value), unit)


def test_as_rebases_value() -> None:
    distance = _m(1500)

    in_km = distance.as_(KILOMETER)

    assert in_km.unit is KILOMETER
    assert in_km.field.value == pytest.approx(1.5)
    assert in_km.as_(METER).field.value == pytest.approx(1500.0)


def test_as_same_unit_is_identity() -> None:
    distance = _m(3)

    assert distance.as_(METER) is distance


def test_as_incommensurable_raises() -> None:
    with pytest.raises(IncommensurableDimensionError):
        _m(1).as_(SECOND)


def test_ordering_across_commensurable_units() -> None:
    one_km = _m(1, KILOMETER)

    assert one_km > _m(999)
    assert _m(1001) > one_km
    assert one_km.compare(_m(1000)) == 0
    assert one_km.is_equal_to(_m(1000))
    assert one_km != _m(1000)


def test_ordering_incommensurable_raises() -> None:
    with pytest.raises(IncommensurableDimensionError):
        _m(1).compare(Measure(DOUBLE.of(1), SECOND))


def test_equality_needs_same_unit_and_value() -> None:
    assert _m(2) == _m("2.0")
    assert hash(_m(2)) == hash(_m(2))
    assert _m(2) != _m(3)
    assert _m(2) != Measure(DECIMAL128.of(2), METER)


def test_add_rebases_right_operand() -> None:
    total = _m(1, KILOMETER).add(500, METER)

    assert total.unit is KILOMETER
    assert total.field.value == pytest.approx(1.5)
    assert (_m(1) + _m(50, CENTIMETER)).field.value == pytest.approx(1.5)


def test_add_incommensurable_raises() -> None:
    with pytest.raises(IncommensurableDimensionError):
        _m(1).add(1, SECOND)


def test_add_expression_operand_uses_same_factory() -> None:
    total = _m(2).subtract(take(50, CENTIMETER))

    assert total.field.value == pytest.approx(1.5)


def test_scalar_multiply_keeps_unit() -> None:
    doubled = _m(3) * 2

    assert doubled.unit is METER
    assert doubled.field.value == 6.0
    assert (2 * _m(3)).field.value == 6.0
    assert _m(3).divide("1.5").field.value == pytest.approx(2.0)


def test_measure_product_builds_compound_unit() -> None:
    area = _m(2).multiply(_m(3))
    speed = _m(10).divide(Measure(DOUBLE.of(2), SECOND))

    assert area.field.value == 6.0
    assert area.unit.symbol == "[m^2]"
    assert area.unit.dimension.is_commensurable(dimensions.AREA)
    assert speed.field.value == 5.0
    assert speed.unit.dimension.is_commensurable(dimensions.VELOCITY)


def test_multiply_with_explicit_unit() -> None:
    work = _m(4).multiply(3, UNITLESS)

    assert work.field.value == 12.0
    assert work.unit.dimension.is_commensurable(dimensions.LENGTH)


def test_power_and_negate() -> None:
    square = _m(3).power(2)

    assert square.field.value == 9.0
    assert square.unit.dimension.is_commensurable(dimensions.AREA)
    assert (-_m(3)).field.value == -3.0


def test_str() -> None:
    assert str(_m(1500)) == "1500.0 m"


def test_reflected_add_and_subtract() -> None:
    ratio = Measure(DOUBLE.of(3), UNITLESS)

    assert (1 + ratio).field.value == 4.0
    assert (10 - ratio).field.value == 7.0
    assert (DOUBLE.of(2) + ratio).unit is UNITLESS
    with pytest.raises(IncommensurableDimensionError):
        1 + _m(1)
