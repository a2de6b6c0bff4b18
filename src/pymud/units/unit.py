"""Units and the staged builder that derives new units from existing ones.

Builder stages::

    new_unit()                       UnitBuilder
      .of_dimension(d)               UnitBuilder (optional declared dimension)
      .as_(u, e)                     CompoundUnitBuilder  .multiply/.divide/.create
      .as_the_ratio(n).over(d)       TransformationUnitBuilder
      .as_exactly(s)                 TransformationUnitBuilder
        .of_a(u)                     ReferencedUnitBuilder .create

Every stage is an immutable value; calling a method never changes the
builder it was called on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from pymud.algebra.dimension import (
    DIMENSIONLESS,
    HANDLES,
    Dimension,
    FundamentalDimension,
    bind_fundamental_unit,
    new_dimension,
)
from pymud.algebra.exponent import (
    INVERSE,
    Exponent,
    ExponentLike,
    as_exponent,
    power,
    product,
)
from pymud.algebra.exponent import ONE as EXPONENT_ONE
from pymud.algebra.exponent import ZERO as EXPONENT_ZERO
from pymud.errors import IllegalBuilderStateError, IncommensurableDimensionError
from pymud.expr.scalar import ONE, Scalar, ScalarLike, as_scalar

logger = logging.getLogger(__name__)


class Unit:
    """Named, identity-unique pairing of a dimension with a scale.

    ``scale`` is the number of base units in one of this unit, kept as a
    deferred :class:`Scalar` so it can be evaluated in any field.
    """

    __slots__ = ("_name", "_symbol", "_dimension", "_scale", "_handle")

    def __init__(self, name: str, symbol: str, dimension: Dimension, scale: Scalar) -> None:
        self._handle = HANDLES.allocate()
        self._name = name
        self._symbol = symbol
        self._dimension = dimension
        self._scale = scale

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def scale(self) -> Scalar:
        return self._scale

    @property
    def handle(self) -> int:
        return self._handle

    def is_commensurable(self, other: Unit) -> bool:
        return self._dimension.is_commensurable(other._dimension)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self._handle == other._handle

    def __hash__(self) -> int:
        return hash(self._handle)

    def __str__(self) -> str:
        return f"{self._name} ({self._symbol})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, symbol={self._symbol!r}, dimension={self._dimension.name!r})"


class FundamentalUnit(Unit):
    __slots__ = ()

    def __init__(self, name: str, symbol: str, dimension: FundamentalDimension) -> None:
        super().__init__(name, symbol, dimension, ONE)

    @property
    def fundamental_dimension(self) -> FundamentalDimension:
        return self._dimension


@dataclass(frozen=True)
class FundamentalPair:
    fundamental_dimension: FundamentalDimension
    fundamental_unit: FundamentalUnit


def new_fundamental_pair(
    dimension_name: str, dimension_symbol: str, unit_name: str, unit_symbol: str
) -> FundamentalPair:
    dimension = FundamentalDimension(dimension_name, dimension_symbol)
    unit = FundamentalUnit(unit_name, unit_symbol, dimension)
    bind_fundamental_unit(dimension, unit)
    logger.debug("fundamental pair %s <-> %s", dimension, unit)
    return FundamentalPair(dimension, unit)


UNITLESS = FundamentalUnit("UNITLESS", "-", DIMENSIONLESS)
bind_fundamental_unit(DIMENSIONLESS, UNITLESS)


@dataclass(frozen=True)
class UnitDraft:
    """Everything collected by a builder chain before ``create()``."""

    dimension: Dimension | None = None
    compound: tuple[tuple[Unit, Exponent], ...] = ()
    factor: Scalar | None = None
    reference: Unit | None = None
    name: str | None = None
    symbol: str | None = None

    def with_term(self, unit: Unit, exponent: Exponent) -> UnitDraft:
        terms = dict(self.compound)
        terms[unit] = product(terms.get(unit, EXPONENT_ZERO), exponent)
        return replace(self, compound=tuple(terms.items()))


class _Stage:
    __slots__ = ("_draft",)

    def __init__(self, draft: UnitDraft | None = None) -> None:
        self._draft = draft or UnitDraft()

    @property
    def draft(self) -> UnitDraft:
        return self._draft

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._draft!r})"


class _CreatableStage(_Stage):
    __slots__ = ()

    def with_name(self, name: str):
        return type(self)(replace(self._draft, name=name))

    def with_symbol(self, symbol: str):
        return type(self)(replace(self._draft, symbol=symbol))

    def create(self) -> Unit:
        return create_unit(self._draft)


class UnitBuilder(_Stage):
    __slots__ = ()

    def of_dimension(self, dimension: Dimension) -> UnitBuilder:
        return UnitBuilder(replace(self._draft, dimension=dimension))

    def as_(self, unit: Unit, exponent: ExponentLike = EXPONENT_ONE) -> CompoundUnitBuilder:
        return CompoundUnitBuilder(self._draft.with_term(unit, as_exponent(exponent)))

    def as_the_ratio(self, numerator: ScalarLike) -> RatioUnitBuilder:
        return RatioUnitBuilder(replace(self._draft, factor=as_scalar(numerator)))

    def as_exactly(self, scale: ScalarLike) -> TransformationUnitBuilder:
        return TransformationUnitBuilder(replace(self._draft, factor=as_scalar(scale)))


class CompoundUnitBuilder(_CreatableStage):
    __slots__ = ()

    def multiply(self, unit: Unit, exponent: ExponentLike = EXPONENT_ONE) -> CompoundUnitBuilder:
        return CompoundUnitBuilder(self._draft.with_term(unit, as_exponent(exponent)))

    def divide(self, unit: Unit, exponent: ExponentLike = EXPONENT_ONE) -> CompoundUnitBuilder:
        inverse = power(as_exponent(exponent), INVERSE)
        return CompoundUnitBuilder(self._draft.with_term(unit, inverse))


class RatioUnitBuilder(_Stage):
    __slots__ = ()

    def over(self, denominator: ScalarLike) -> TransformationUnitBuilder:
        factor = self._draft.factor.divide(as_scalar(denominator))
        return TransformationUnitBuilder(replace(self._draft, factor=factor))


class TransformationUnitBuilder(_Stage):
    __slots__ = ()

    def of_a(self, unit: Unit) -> ReferencedUnitBuilder:
        return ReferencedUnitBuilder(replace(self._draft, reference=unit))


class ReferencedUnitBuilder(_CreatableStage):
    __slots__ = ()


def new_unit() -> UnitBuilder:
    return UnitBuilder()


def create_unit(draft: UnitDraft) -> Unit:
    if draft.compound and (draft.factor is not None or draft.reference is not None):
        raise IllegalBuilderStateError("a unit cannot be both compound and exactly scaled")
    if draft.compound:
        unit = _create_compound(draft)
    elif draft.factor is not None and draft.reference is not None:
        unit = _create_referenced(draft)
    elif draft.factor is not None:
        raise IllegalBuilderStateError("a scaled unit needs a reference unit")
    else:
        raise IllegalBuilderStateError("nothing to create")
    logger.debug("created unit %r", unit)
    return unit


def _checked_dimension(declared: Dimension | None, computed: Dimension) -> Dimension:
    if declared is None:
        return computed
    if not declared.is_commensurable(computed):
        raise IncommensurableDimensionError(declared.composition, computed.composition)
    return declared


def _times(accumulated: Scalar, scale: Scalar) -> Scalar:
    if accumulated is ONE:
        return scale
    if scale is ONE:
        return accumulated
    return accumulated.multiply(scale)


def _create_compound(draft: UnitDraft) -> Unit:
    terms = [(u, e) for u, e in draft.compound if not e.is_zero() and u != UNITLESS]
    if not terms:
        terms = [(UNITLESS, EXPONENT_ONE)]
    builder = new_dimension()
    numerator: Scalar = ONE
    denominator: Scalar = ONE
    for unit, exponent in terms:
        builder = builder.append(unit.dimension, exponent)
        magnitude = abs(exponent)
        scale = unit.scale
        if scale is not ONE and not magnitude.is_one():
            scale = scale.power(magnitude)
        if exponent > EXPONENT_ZERO:
            numerator = _times(numerator, scale)
        else:
            denominator = _times(denominator, scale)
    scale = numerator if denominator is ONE else numerator.divide(denominator)
    dimension = _checked_dimension(draft.dimension, builder.create())
    name = draft.name or " ".join(_term(u.name, e) for u, e in terms)
    symbol = draft.symbol or " ".join(_term(u.symbol, e) for u, e in terms)
    return Unit(name, symbol, dimension, scale)


def _term(label: str, exponent: Exponent) -> str:
    if exponent.is_one():
        return f"[{label}]"
    return f"[{label}^{exponent}]"


def _create_referenced(draft: UnitDraft) -> Unit:
    reference = draft.reference
    scale = _times(draft.factor, reference.scale)
    dimension = _checked_dimension(draft.dimension, reference.dimension)
    name = draft.name or f"{{({draft.factor}) {reference.name}}}"
    symbol = draft.symbol or f"{{({draft.factor}) {reference.symbol}}}"
    return Unit(name, symbol, dimension, scale)


__all__ = [
    "CompoundUnitBuilder",
    "FundamentalPair",
    "FundamentalUnit",
    "RatioUnitBuilder",
    "ReferencedUnitBuilder",
    "TransformationUnitBuilder",
    "UNITLESS",
    "Unit",
    "UnitBuilder",
    "UnitDraft",
    "create_unit",
    "new_fundamental_pair",
    "new_unit",
]
