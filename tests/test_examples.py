"""Worked engineering problems evaluated end to end."""

import math

import pytest

from pymud.algebra.exponent import SQUARE_ROOT, SQUARED
from pymud.catalog import constants
from pymud.catalog.units import (
    CENTIMETER,
    COULOMB,
    DEGREE,
    KILOWATT,
    MILLIMETER,
    NEWTON,
    OHM,
    RADIAN,
    WATT,
    micro,
)
from pymud.expr.expression import Expression, take
from pymud.fields.bigdecimal import DECIMAL128
from pymud.fields.double import DOUBLE, DoubleField
from pymud.fields.uncertain import UNCERTAIN
from pymud.measure import Measure
from pymud.units.unit import UNITLESS, new_unit
from pymud.units.universe import KELVIN, METER


def _charge_from_force(force: Expression, distance: Expression) -> Expression:
    one_over_k_e = take(4).multiply(constants.pi).multiply(constants.eps_0)
    return force.multiply(distance).multiply(distance).multiply(one_over_k_e).power(SQUARE_ROOT)


def test_coulombs_law() -> None:
    charge = _charge_from_force(take(90, NEWTON), take(1, CENTIMETER))
    micro_coulomb = micro(COULOMB)

    as_double = charge.using(DOUBLE).as_(micro_coulomb)
    as_decimal = charge.using(DECIMAL128).as_(micro_coulomb)

    assert repr(as_double.field.value) == "1.0006922853220581"
    assert float(as_decimal.field) == pytest.approx(as_double.field.value, rel=1e-12)


def _impedance(x_l: Expression, x_c: Expression, r: Expression) -> Expression:
    return r.power(SQUARED).add(x_l.subtract(x_c).power(SQUARED)).power(SQUARE_ROOT)


def test_rlc_circuit() -> None:
    x_l = take(184, OHM)
    x_c = take(144, OHM)
    r = take(30, OHM)

    z = _impedance(x_l, x_c, r).using(DOUBLE).as_(OHM)
    ratio = x_l.subtract(x_c).divide(r).using(DOUBLE).as_(UNITLESS).field.value
    phase = Measure(DoubleField(math.atan(ratio)), RADIAN).as_(DEGREE)

    assert z.field.value == pytest.approx(50.0)
    assert round(phase.field.value, 1) == 53.1


def test_heat_transfer_rate() -> None:
    degree_celsius = new_unit().as_exactly(1).of_a(KELVIN).with_symbol("°C").create()
    conductivity_unit = new_unit().as_(WATT).divide(METER).divide(degree_celsius).create()

    area = take("1.2", METER).multiply(take("1.8", METER))
    delta_t = take(21, degree_celsius).subtract(take(-4, degree_celsius))
    rate = (
        take("0.27", conductivity_unit)
        .multiply(area)
        .multiply(delta_t)
        .divide(take("6.2", MILLIMETER))
    )

    assert rate.using(DOUBLE).as_(KILOWATT).field.value == pytest.approx(2.351612903225807)


def test_uncertainty_propagates_through_measures() -> None:
    length = Measure(UNCERTAIN.measured(2.0, 0.1), METER)
    width = Measure(UNCERTAIN.measured(3.0, 0.2), METER)

    area = length.multiply(width)

    assert area.field.value == pytest.approx(6.0)
    assert area.field.uncertainty == pytest.approx(0.5)
