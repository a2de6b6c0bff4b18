import pytest

from pymud.algebra.exponent import SQUARE_ROOT, SQUARED
from pymud.catalog import dimensions, units
from pymud.errors import (
    E_ILLEGAL_BUILDER_STATE,
    E_INCOMMENSURABLE_DIMENSION,
    IllegalBuilderStateError,
    IncommensurableDimensionError,
)
from pymud.fields.double import DOUBLE
from pymud.units.unit import UNITLESS, UnitDraft, create_unit, new_unit
from pymud.units.universe import KILOGRAM, LENGTH, METER, SECOND


def test_repeated_term_merges_exponents() -> None:
    merged = new_unit().as_(METER).multiply(METER).create()
    squared = new_unit().as_(METER, SQUARED).create()

    assert merged.dimension.composition == squared.dimension.composition
    assert merged.name == squared.name == "[METER^2]"
    assert merged.symbol == "[m^2]"


def test_compound_divide_builds_negative_exponent() -> None:
    speed = new_unit().as_(METER).divide(SECOND).create()

    assert speed.symbol == "[m] [s^-1]"
    assert speed.dimension.composition == dimensions.VELOCITY.composition
    assert speed.scale.using(DOUBLE).value == 1.0


def test_as_exactly_scales_reference_unit() -> None:
    kilometer = new_unit().as_exactly(1000).of_a(METER).with_name("KILOMETER").create()

    assert kilometer.name == "KILOMETER"
    assert kilometer.dimension is LENGTH
    assert kilometer.scale.using(DOUBLE).value == 1000.0


def test_ratio_over_chains_to_reference() -> None:
    third = new_unit().as_the_ratio(1).over(3).of_a(METER).create()

    assert third.scale.using(DOUBLE).value == pytest.approx(1 / 3)
    assert third.name == "{(1 / (3)) METER}"


def test_compound_scale_multiplies_term_scales() -> None:
    square_cm = new_unit().as_(units.CENTIMETER, SQUARED).create()
    per_gram = new_unit().as_(units.GRAM, -1).create()

    assert square_cm.scale.using(DOUBLE).value == pytest.approx(1e-4)
    assert per_gram.scale.using(DOUBLE).value == pytest.approx(1000.0)


def test_fractional_exponent_scale() -> None:
    root_cm = new_unit().as_(units.CENTIMETER, SQUARE_ROOT).create()

    assert root_cm.scale.using(DOUBLE).value == pytest.approx(0.1)


def test_declared_dimension_is_kept_when_commensurable() -> None:
    newton = units.NEWTON

    assert newton.dimension is dimensions.FORCE
    assert newton.symbol == "N"


def test_declared_dimension_mismatch_raises() -> None:
    builder = new_unit().of_dimension(dimensions.VELOCITY).as_(METER).multiply(SECOND)

    with pytest.raises(IncommensurableDimensionError) as excinfo:
        builder.create()

    assert excinfo.value.code == E_INCOMMENSURABLE_DIMENSION


def test_unitless_terms_are_elided() -> None:
    radian = new_unit().of_dimension(dimensions.ANGLE).as_(UNITLESS).create()
    plain = new_unit().as_(KILOGRAM).multiply(UNITLESS).create()

    assert radian.dimension is dimensions.ANGLE
    assert radian.scale.using(DOUBLE).value == 1.0
    assert plain.name == "[KILOGRAM]"


def test_builders_fork_without_interference() -> None:
    base = new_unit().as_(METER)
    area = base.multiply(METER).create()
    speed = base.divide(SECOND).create()

    assert area.dimension.composition == dimensions.AREA.composition
    assert speed.dimension.composition == dimensions.VELOCITY.composition
    assert base.create().dimension.composition == LENGTH.composition


def test_every_create_yields_a_new_identity() -> None:
    a = new_unit().as_(METER).divide(SECOND).create()
    b = new_unit().as_(METER).divide(SECOND).create()

    assert a != b
    assert a.is_commensurable(b)
    assert len({a, b}) == 2


def test_illegal_drafts_raise() -> None:
    with pytest.raises(IllegalBuilderStateError) as excinfo:
        create_unit(UnitDraft())
    assert excinfo.value.code == E_ILLEGAL_BUILDER_STATE

    with pytest.raises(IllegalBuilderStateError):
        create_unit(UnitDraft(factor=units.DEGREE.scale))

    draft = new_unit().as_(METER).draft
    with pytest.raises(IllegalBuilderStateError):
        create_unit(UnitDraft(compound=draft.compound, factor=units.DEGREE.scale, reference=METER))
