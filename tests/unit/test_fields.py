from decimal import Decimal

import pytest

from pymud.algebra.exponent import SQUARE_ROOT, reduce
from pymud.errors import (
    E_FIELD_ARITHMETIC,
    E_NUMBER_FORMAT,
    E_UNSUPPORTED_OPERATION,
    FieldArithmeticError,
    NumberFormatError,
    UnsupportedOperationError,
)
from pymud.expr.scalar import as_scalar
from pymud.fields.bigdecimal import (
    DECIMAL128,
    DECIMAL_SCALE_2,
    DecimalFieldConfig,
    DecimalFieldFactory,
)
from pymud.fields.double import DOUBLE, DoubleField
from pymud.fields.uncertain import UNCERTAIN, UncertainField


def test_double_arithmetic_accepts_ints_and_strings() -> None:
    x = DOUBLE.of("2.5")

    assert x.add(1).value == 3.5
    assert x.multiply("4").value == 10.0
    assert x.subtract("0.5").value == 2.0
    assert (x * 2).value == 5.0
    assert (1 + x).value == 3.5


def test_double_of_string_rejects_garbage() -> None:
    with pytest.raises(NumberFormatError) as excinfo:
        DOUBLE.of("ten")
    assert excinfo.value.code == E_NUMBER_FORMAT

    with pytest.raises(NumberFormatError):
        DOUBLE.of("nan")


def test_double_division_by_zero() -> None:
    with pytest.raises(ZeroDivisionError):
        DOUBLE.of(1).divide(0)
    with pytest.raises(ZeroDivisionError):
        DOUBLE.zero().reciprocal()


def test_double_rational_powers() -> None:
    assert DOUBLE.of(9).power(SQUARE_ROOT).value == pytest.approx(3.0)
    assert DOUBLE.of(-8).power(reduce(1, 3)).value == pytest.approx(-2.0)
    assert DOUBLE.of(4).power(reduce(-1, 2)).value == pytest.approx(0.5)

    with pytest.raises(UnsupportedOperationError) as excinfo:
        DOUBLE.of(-4).power(SQUARE_ROOT)
    assert excinfo.value.code == E_UNSUPPORTED_OPERATION


def test_double_logarithm() -> None:
    assert DOUBLE.of(1000).logarithm(10).value == pytest.approx(3.0)
    assert DOUBLE.of(8).logarithm(2).value == pytest.approx(3.0)

    with pytest.raises(FieldArithmeticError):
        DOUBLE.of(-1).logarithm(10)


def test_double_comparisons() -> None:
    small, big = DOUBLE.of(1), DOUBLE.of(2)

    assert small.compare(big) == -1
    assert small.is_less_than(big)
    assert big.is_greater_than(small)
    assert small < big <= 2
    assert DOUBLE.of("1.0").is_equal_to(small)
    assert DOUBLE.zero().is_zero()


def test_mixing_backends_is_rejected() -> None:
    with pytest.raises(TypeError):
        DOUBLE.of(1).add(UNCERTAIN.of(1))


def test_field_accepts_deferred_scalar() -> None:
    assert DOUBLE.of(2).multiply(as_scalar("1.5")).value == 3.0


def test_decimal_keeps_exact_decimal_digits() -> None:
    total = DECIMAL128.of("0.1").add("0.2")

    assert total.value == Decimal("0.3")
    assert str(total) == "0.3"


def test_decimal_precision_is_configurable() -> None:
    factory = DecimalFieldFactory(DecimalFieldConfig(precision=5))

    third = factory.of(1).divide(3)

    assert third.value == Decimal("0.33333")
    assert factory.name == "decimal5"


def test_decimal_fixed_scale_quantizes() -> None:
    price = DECIMAL_SCALE_2.of("10.005")

    assert price.value == Decimal("10.00")
    assert price.multiply(3).value == Decimal("30.00")


def test_decimal_square_root_and_odd_root() -> None:
    assert DECIMAL128.of(2).power(SQUARE_ROOT).value == Decimal(2).sqrt(DECIMAL128.context)
    assert float(DECIMAL128.of(-27).power(reduce(1, 3))) == pytest.approx(-3.0)


def test_decimal_unsupported_and_zero_division() -> None:
    with pytest.raises(UnsupportedOperationError):
        DECIMAL128.of(-2).power(SQUARE_ROOT)
    with pytest.raises(ZeroDivisionError):
        DECIMAL128.of(1).divide(0)
    with pytest.raises(NumberFormatError):
        DECIMAL128.of("1.2.3")


def test_decimal_log10_is_exact_for_powers_of_ten() -> None:
    assert DECIMAL128.of(1000).logarithm(10).value == Decimal(3)


def test_decimal_logarithm_outside_domain_raises() -> None:
    with pytest.raises(FieldArithmeticError) as excinfo:
        DECIMAL128.of(0).logarithm(10)
    assert excinfo.value.code == E_FIELD_ARITHMETIC

    with pytest.raises(FieldArithmeticError):
        DECIMAL128.of(-5).logarithm(2)
    with pytest.raises(FieldArithmeticError):
        DECIMAL128.of(5).logarithm(1)
    with pytest.raises(FieldArithmeticError):
        DECIMAL128.of(5).logarithm(0)


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        DecimalFieldConfig(precision=0)
    with pytest.raises(ValueError):
        DecimalFieldConfig(scale=-1)


def test_uncertain_parses_plus_minus_forms() -> None:
    for text in ("1.5+/-0.1", "1.5 +- 0.1", "1.5±0.1", "1.5,0.1", "1.5(0.1)"):
        value = UNCERTAIN.of(text)
        assert value.value == 1.5
        assert value.uncertainty == pytest.approx(0.1)

    assert UNCERTAIN.of("2").uncertainty == 0.0
    with pytest.raises(NumberFormatError):
        UNCERTAIN.of("1.5+/-")


def test_uncertain_propagation() -> None:
    a = UNCERTAIN.measured(10.0, 0.3)
    b = UNCERTAIN.measured(5.0, 0.4)

    total = a.add(b)
    product = a.multiply(b)

    assert total.value == 15.0
    assert total.uncertainty == pytest.approx(0.5)
    assert product.value == 50.0
    assert product.relative_uncertainty == pytest.approx((0.03**2 + 0.08**2) ** 0.5)


def test_uncertain_rational_power_scales_relative_uncertainty() -> None:
    area = UncertainField(4.0, 0.4)

    side = area.power(SQUARE_ROOT)

    assert side.value == pytest.approx(2.0)
    assert side.relative_uncertainty == pytest.approx(0.05)


def test_double_field_value_equality() -> None:
    assert DoubleField(1.0) == DOUBLE.one()
