from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pymud.algebra.dimension import Dimension, assert_commensurable, new_dimension
from pymud.algebra.exponent import INVERSE, ExponentLike, as_exponent
from pymud.expr.evaluate import describe, evaluate_expression, particularize
from pymud.expr.memo import ParticularizationCache
from pymud.expr.nodes import (
    Computed,
    ExpressionNode,
    MeasureAdd,
    MeasureAs,
    MeasureDivide,
    MeasureDivideScalar,
    MeasureMultiply,
    MeasurePower,
    MeasureScale,
    MeasureSubtract,
    Take,
)
from pymud.expr.scalar import ScalarLike, as_scalar, is_scalar_like
from pymud.fields.base import Field, FieldFactory
from pymud.measure import Measure
from pymud.units.unit import UNITLESS, Unit


class Expression:
    """A dimensioned value described symbolically.

    The dimension is computed as soon as the expression is built, so
    combining incommensurable quantities fails immediately; the value is
    only computed by :meth:`using` and cached per factory.
    """

    __slots__ = ("_node", "_dimension", "_cache")

    def __init__(self, node: ExpressionNode, dimension: Dimension) -> None:
        self._node = node
        self._dimension = dimension
        self._cache: ParticularizationCache[Measure] = ParticularizationCache()

    @property
    def node(self) -> ExpressionNode:
        return self._node

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    def using(self, factory: FieldFactory) -> Measure:
        return particularize(self, factory)

    def is_particularized(self, factory: FieldFactory) -> bool:
        return self._cache.is_cached(factory)

    def particularize_node(self, factory: FieldFactory) -> Measure:
        return self._cache.get_or_compute(
            factory, lambda: evaluate_expression(self._node, factory)
        )

    def _operand(self, other: Any, unit: Unit | None) -> Expression | Measure:
        if isinstance(other, (Expression, Measure)):
            if unit is not None:
                raise TypeError(f"a unit cannot be given together with {type(other).__name__}")
            return other
        return take(other, UNITLESS if unit is None else unit)

    def add(self, other: Any, unit: Unit | None = None) -> Any:
        operand = self._operand(other, unit)
        if isinstance(operand, Measure):
            assert_commensurable(self._dimension, operand.unit.dimension)
            return self.using(operand.factory).add(operand)
        assert_commensurable(self._dimension, operand.dimension)
        return Expression(MeasureAdd(self, operand), self._dimension)

    def subtract(self, other: Any, unit: Unit | None = None) -> Any:
        operand = self._operand(other, unit)
        if isinstance(operand, Measure):
            assert_commensurable(self._dimension, operand.unit.dimension)
            return self.using(operand.factory).subtract(operand)
        assert_commensurable(self._dimension, operand.dimension)
        return Expression(MeasureSubtract(self, operand), self._dimension)

    def multiply(self, other: Any, unit: Unit | None = None) -> Any:
        if unit is None:
            if isinstance(other, Field):
                return self.using(other.factory).multiply(other)
            if is_scalar_like(other):
                return Expression(MeasureScale(self, as_scalar(other)), self._dimension)
        operand = self._operand(other, unit)
        if isinstance(operand, Measure):
            return self.using(operand.factory).multiply(operand)
        dimension = new_dimension().append(self._dimension).append(operand.dimension).create()
        return Expression(MeasureMultiply(self, operand), dimension)

    def divide(self, other: Any, unit: Unit | None = None) -> Any:
        if unit is None:
            if isinstance(other, Field):
                return self.using(other.factory).divide(other)
            if is_scalar_like(other):
                return Expression(MeasureDivideScalar(self, as_scalar(other)), self._dimension)
        operand = self._operand(other, unit)
        if isinstance(operand, Measure):
            return self.using(operand.factory).divide(operand)
        dimension = (
            new_dimension().append(self._dimension).append(operand.dimension, INVERSE).create()
        )
        return Expression(MeasureDivide(self, operand), dimension)

    def power(self, exponent: ExponentLike) -> Expression:
        e = as_exponent(exponent)
        dimension = new_dimension().append(self._dimension, e).create()
        return Expression(MeasurePower(self, e), dimension)

    def as_(self, unit: Unit) -> Expression:
        assert_commensurable(self._dimension, unit.dimension)
        return Expression(MeasureAs(self, unit), unit.dimension)

    def negate(self) -> Expression:
        return Expression(MeasureScale(self, as_scalar(-1)), self._dimension)

    def __neg__(self) -> Expression:
        return self.negate()

    def __add__(self, other: Any) -> Any:
        return self.add(other)

    def __sub__(self, other: Any) -> Any:
        return self.subtract(other)

    def __radd__(self, other: Any) -> Any:
        if is_scalar_like(other) or isinstance(other, Field):
            return take(other, UNITLESS).add(self)
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if is_scalar_like(other) or isinstance(other, Field):
            return take(other, UNITLESS).subtract(self)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Any:
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Any:
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> Any:
        if is_scalar_like(other):
            return take(other, UNITLESS).divide(self)
        return NotImplemented

    def __pow__(self, exponent: ExponentLike) -> Expression:
        return self.power(exponent)

    def __str__(self) -> str:
        return describe(self)

    def __repr__(self) -> str:
        return f"Expression({describe(self)!r}, dimension={self._dimension.symbol!r})"


def take(value: ScalarLike | Field, unit: Unit | None = None) -> Any:
    """Start a deferred computation.

    ``take(3)`` is a :class:`Scalar`; ``take(3, METER)`` an
    :class:`Expression`; ``take(field_value, METER)`` is already a
    :class:`Measure`.
    """
    if unit is None:
        if isinstance(value, Field):
            raise TypeError("a field value needs a unit; use take(value, UNITLESS)")
        return as_scalar(value)
    if isinstance(value, Field):
        return Measure(value, unit)
    return Expression(Take(as_scalar(value), unit), unit.dimension)


def take_computed(
    function: Callable[[FieldFactory], Measure], dimension: Dimension, label: str = "computed"
) -> Expression:
    """Wrap a function of the factory as an expression of known dimension.

    The function must return a Measure whose unit is commensurable with
    ``dimension``.
    """

    def checked(factory: FieldFactory) -> Measure:
        measure = function(factory)
        if not isinstance(measure, Measure):
            raise TypeError(f"{label} returned {type(measure).__name__}, expected Measure")
        assert_commensurable(dimension, measure.unit.dimension)
        return measure

    return Expression(Computed(checked, label), dimension)


__all__ = ["Expression", "take", "take_computed"]
