import pytest

from pymud.algebra.dimension import DIMENSIONLESS, Composition, new_dimension
from pymud.algebra.exponent import ONE, SQUARE_ROOT, ZERO, reduce
from pymud.errors import E_INCOMMENSURABLE_DIMENSION, IncommensurableDimensionError
from pymud.algebra.dimension import assert_commensurable
from pymud.units.universe import LENGTH, MASS, TIME


def test_fundamental_dimension_composition_is_itself() -> None:
    assert LENGTH.composition.get_exponent(LENGTH) == ONE
    assert LENGTH.composition.get_exponent(TIME) == ZERO
    assert not LENGTH.is_dimensionless()


def test_empty_builder_is_dimensionless() -> None:
    dimension = new_dimension().create()

    assert dimension.is_dimensionless()
    assert dimension.composition.get_exponent(DIMENSIONLESS) == ONE
    assert dimension.is_commensurable(DIMENSIONLESS)


def test_cancelling_terms_yield_dimensionless() -> None:
    dimension = new_dimension().append(LENGTH).append(LENGTH, -1).create()

    assert dimension.is_dimensionless()


def test_generated_name_and_symbol() -> None:
    velocity = new_dimension().append(LENGTH).append(TIME, -1).create()

    assert velocity.name == "LENGTH: 1; TIME: -1"
    assert velocity.symbol == "L T^-1"


def test_equal_compositions_are_commensurable_but_distinct() -> None:
    a = new_dimension().append(LENGTH).append(TIME, -1).with_name("VELOCITY").create()
    b = new_dimension().append(TIME, -1).append(LENGTH).with_name("SPEED").create()

    assert a.composition == b.composition
    assert hash(a.composition) == hash(b.composition)
    assert a.is_commensurable(b)
    assert a != b


def test_append_raises_nested_dimension_to_power() -> None:
    area = new_dimension().append(LENGTH, 2).create()
    side = new_dimension().append(area, SQUARE_ROOT).create()

    assert side.composition == LENGTH.composition


def test_composition_ignores_zero_and_dimensionless_entries() -> None:
    explicit = Composition({LENGTH: ONE, MASS: ZERO})
    with_dimensionless = Composition({LENGTH: ONE, DIMENSIONLESS: ONE})

    assert explicit == LENGTH.composition
    assert with_dimensionless == LENGTH.composition
    assert MASS not in explicit


def test_builder_is_reusable_template() -> None:
    base = new_dimension().append(MASS)
    force = base.append(LENGTH).append(TIME, -2).create()
    density = base.append(LENGTH, -3).create()

    assert force.composition.get_exponent(MASS) == ONE
    assert density.composition.get_exponent(LENGTH) == reduce(-3)
    assert base.create().composition == MASS.composition


def test_assert_commensurable_raises_with_compositions() -> None:
    with pytest.raises(IncommensurableDimensionError) as excinfo:
        assert_commensurable(LENGTH, TIME)

    assert excinfo.value.code == E_INCOMMENSURABLE_DIMENSION
    assert excinfo.value.left == LENGTH.composition
    assert excinfo.value.right == TIME.composition


def test_commensurability_is_symmetric() -> None:
    velocity = new_dimension().append(LENGTH).append(TIME, -1).create()
    speed = new_dimension().append(TIME, -1).append(LENGTH).with_name("SPEED").create()
    dims = [LENGTH, TIME, MASS, DIMENSIONLESS, velocity, speed]

    for d1 in dims:
        for d2 in dims:
            assert d1.is_commensurable(d2) == d2.is_commensurable(d1)
    assert velocity.is_commensurable(speed)
    assert not velocity.is_commensurable(LENGTH)
