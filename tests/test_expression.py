from decimal import Decimal

import pytest

from pymud.algebra.exponent import SQUARE_ROOT
from pymud.catalog import dimensions
from pymud.catalog.units import CENTIMETER, METER_PER_SECOND, PERCENT, SQUARE_METER, kilo
from pymud.errors import E_INCOMMENSURABLE_DIMENSION, IncommensurableDimensionError
from pymud.expr.expression import Expression, take, take_computed
from pymud.expr.scalar import PI, Scalar
from pymud.fields.bigdecimal import DECIMAL128
from pymud.fields.double import DOUBLE
from pymud.measure import Measure
from pymud.units.unit import UNITLESS
from pymud.units.universe import METER, SECOND


def test_take_dispatches_on_arguments() -> None:
    assert isinstance(take(3), Scalar)
    assert isinstance(take(3, METER), Expression)
    assert isinstance(take(DOUBLE.of(3), METER), Measure)

    with pytest.raises(TypeError):
        take(DOUBLE.of(3))


def test_incommensurable_add_fails_at_build_time() -> None:
    with pytest.raises(IncommensurableDimensionError) as excinfo:
        take(1, METER).add(1, SECOND)

    assert excinfo.value.code == E_INCOMMENSURABLE_DIMENSION


def test_incommensurable_subtract_of_expressions_fails_early() -> None:
    with pytest.raises(IncommensurableDimensionError):
        take(1, METER).subtract(take(1, SECOND))


def test_add_mixed_units() -> None:
    total = take(1, METER).add(take(2, CENTIMETER))

    assert total.using(DOUBLE).field.value == pytest.approx(1.02)


def test_velocity_dimension_is_derived_eagerly() -> None:
    speed = take(10, METER).divide(take(2, SECOND))

    assert speed.dimension.is_commensurable(dimensions.VELOCITY)
    assert speed.using(DOUBLE).as_(METER_PER_SECOND).field.value == pytest.approx(5.0)


def test_scalar_factor_keeps_dimension() -> None:
    length = take(3, METER)

    assert length.multiply(2).dimension is length.dimension
    assert (2 * length).using(DOUBLE).field.value == 6.0
    assert length.divide(4).using(DOUBLE).field.value == 0.75
    assert (-length).using(DOUBLE).field.value == -3.0


def test_reciprocal_of_expression() -> None:
    frequency = 1 / take(2, SECOND)

    assert frequency.dimension.is_commensurable(dimensions.FREQUENCY)
    assert frequency.using(DOUBLE).field.value == 0.5


def test_scalar_lifts_to_unitless_expression() -> None:
    total = take(1).add(take(50, PERCENT))

    assert total.dimension.is_dimensionless()
    assert total.using(DOUBLE).as_(UNITLESS).field.value == pytest.approx(1.5)

    with pytest.raises(IncommensurableDimensionError):
        take(1).add(2, METER)


def test_scalar_times_expression_keeps_unit() -> None:
    scaled = take(4).multiply(PI).multiply(take(1, METER))

    assert scaled.dimension is METER.dimension
    assert scaled.using(DOUBLE).field.value == pytest.approx(12.566370614359172)


def test_expression_with_measure_operand_evaluates_now() -> None:
    total = take(1, METER).add(Measure(DOUBLE.of(50), CENTIMETER))

    assert isinstance(total, Measure)
    assert total.field.value == pytest.approx(1.5)


def test_as_converts_lazily() -> None:
    in_km = take(1500, METER).as_(kilo(METER))

    assert in_km.using(DOUBLE).field.value == pytest.approx(1.5)
    with pytest.raises(IncommensurableDimensionError):
        take(1, METER).as_(SECOND)


def test_fractional_power() -> None:
    side = take(4, SQUARE_METER).power(SQUARE_ROOT)

    assert side.dimension.is_commensurable(dimensions.LENGTH)
    assert side.using(DOUBLE).as_(METER).field.value == pytest.approx(2.0)


def test_same_expression_in_two_fields() -> None:
    third = take(1, METER).divide(3)

    assert third.using(DECIMAL128).field.value == DECIMAL128.context.divide(Decimal(1), Decimal(3))
    assert third.using(DOUBLE).field.value == pytest.approx(1 / 3)


def test_take_computed_checks_dimension() -> None:
    good = take_computed(lambda f: Measure(f.of(2), METER), dimensions.LENGTH, label="two meters")
    bad = take_computed(lambda f: Measure(f.of(2), SECOND), dimensions.LENGTH)

    assert good.add(take(1, METER)).using(DOUBLE).field.value == 3.0
    assert str(good) == "<two meters>"
    with pytest.raises(IncommensurableDimensionError):
        bad.using(DOUBLE)


def test_str_describes_tree() -> None:
    assert str(take(3, METER)) == "3 m"
    assert str(take(3).add(4)) == "(3 + 4)"


def test_long_scalar_sum_evaluates() -> None:
    total = take(0)
    for _ in range(10_000):
        total = total.add(1)

    assert total.using(DOUBLE).value == 10000.0
    assert total.using(DECIMAL128).value == Decimal(10000)


def test_long_expression_sum_evaluates() -> None:
    length = take(0, METER)
    for _ in range(10_000):
        length = length.add(1, METER)

    assert length.using(DOUBLE).field.value == 10000.0
    assert length.using(DOUBLE).unit is METER


def test_deep_tree_describes() -> None:
    total = take(0)
    for _ in range(2_000):
        total = total.add(1)

    text = str(total)

    assert text.startswith("(" * 2_000 + "0 + 1)")
    assert text.endswith(" + 1)")


def test_reflected_add_and_subtract() -> None:
    ratio = take(1, UNITLESS)

    assert (1 + ratio).using(DOUBLE).field.value == 2.0
    assert (1 - take(3, PERCENT)).using(DOUBLE).as_(UNITLESS).field.value == pytest.approx(0.97)
    assert (DOUBLE.of(2) + ratio).field.value == 3.0
    with pytest.raises(IncommensurableDimensionError):
        1 + take(1, METER)
