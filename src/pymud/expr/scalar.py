from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from pymud.algebra.exponent import Exponent
from pymud.expr.evaluate import describe, evaluate_scalar, particularize
from pymud.expr.memo import ParticularizationCache
from pymud.expr.nodes import (
    Add,
    Divide,
    Literal,
    Logarithm,
    Multiply,
    Negate,
    Power,
    RationalPower,
    Reciprocal,
    ScalarNode,
    Subtract,
)
from pymud.fields.base import Field, FieldFactory

if TYPE_CHECKING:
    from pymud.expr.expression import Expression
    from pymud.units.unit import Unit

ScalarLike = Union[int, str, "Scalar"]


class Scalar:
    """A dimensionless number described symbolically.

    Nothing is computed until :meth:`using` is called with a field factory;
    the result is then cached per factory for the lifetime of the node.
    """

    __slots__ = ("_node", "_cache")

    def __init__(self, node: ScalarNode) -> None:
        self._node = node
        self._cache: ParticularizationCache[Field] = ParticularizationCache()

    @property
    def node(self) -> ScalarNode:
        return self._node

    def using(self, factory: FieldFactory) -> Field:
        return particularize(self, factory)

    def is_particularized(self, factory: FieldFactory) -> bool:
        return self._cache.is_cached(factory)

    def particularize_node(self, factory: FieldFactory) -> Field:
        return self._cache.get_or_compute(factory, lambda: evaluate_scalar(self._node, factory))

    def negate(self) -> Scalar:
        return Scalar(Negate(self))

    def reciprocal(self) -> Scalar:
        return Scalar(Reciprocal(self))

    def add(self, other: Any, unit: Unit | None = None) -> Any:
        if unit is None and is_scalar_like(other):
            return Scalar(Add(self, as_scalar(other)))
        if unit is None and isinstance(other, Field):
            return self.using(other.factory).add(other)
        return self._lift().add(other, unit)

    def subtract(self, other: Any, unit: Unit | None = None) -> Any:
        if unit is None and is_scalar_like(other):
            return Scalar(Subtract(self, as_scalar(other)))
        if unit is None and isinstance(other, Field):
            return self.using(other.factory).subtract(other)
        return self._lift().subtract(other, unit)

    def multiply(self, other: Any, unit: Unit | None = None) -> Any:
        if unit is None and is_scalar_like(other):
            return Scalar(Multiply(self, as_scalar(other)))
        if unit is None and isinstance(other, Field):
            return self.using(other.factory).multiply(other)
        if unit is None:
            # scaling a dimensioned value keeps its unit
            return other.multiply(self)
        return self._lift().multiply(other, unit)

    def divide(self, other: Any, unit: Unit | None = None) -> Any:
        if unit is None and is_scalar_like(other):
            return Scalar(Divide(self, as_scalar(other)))
        if unit is None and isinstance(other, Field):
            return self.using(other.factory).divide(other)
        return self._lift().divide(other, unit)

    def power(self, exponent: ScalarLike | Exponent | Field) -> Any:
        if isinstance(exponent, Exponent):
            return Scalar(RationalPower(self, exponent))
        if isinstance(exponent, Field):
            return self.using(exponent.factory).power(exponent)
        return Scalar(Power(self, as_scalar(exponent)))

    def logarithm(self, base: ScalarLike | Field) -> Any:
        if isinstance(base, Field):
            return self.using(base.factory).logarithm(base)
        return Scalar(Logarithm(self, as_scalar(base)))

    def _lift(self) -> Expression:
        from pymud.expr.expression import take
        from pymud.units.unit import UNITLESS

        return take(self, UNITLESS)

    def __neg__(self) -> Scalar:
        return self.negate()

    def __add__(self, other: Any) -> Any:
        return self.add(other) if _is_operand(other) else NotImplemented

    def __radd__(self, other: Any) -> Any:
        return as_scalar(other).add(self) if is_scalar_like(other) else NotImplemented

    def __sub__(self, other: Any) -> Any:
        return self.subtract(other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other: Any) -> Any:
        return as_scalar(other).subtract(self) if is_scalar_like(other) else NotImplemented

    def __mul__(self, other: Any) -> Any:
        return self.multiply(other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return as_scalar(other).multiply(self) if is_scalar_like(other) else NotImplemented

    def __truediv__(self, other: Any) -> Any:
        return self.divide(other) if _is_operand(other) else NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        return as_scalar(other).divide(self) if is_scalar_like(other) else NotImplemented

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, Exponent) or _is_operand(exponent):
            return self.power(exponent)
        return NotImplemented

    def __str__(self) -> str:
        return describe(self)

    def __repr__(self) -> str:
        return f"Scalar({describe(self)!r})"


def is_scalar_like(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, str, Scalar))


def _is_operand(value: object) -> bool:
    if is_scalar_like(value) or isinstance(value, Field):
        return True
    from pymud.expr.expression import Expression
    from pymud.measure import Measure

    return isinstance(value, (Expression, Measure))


def as_scalar(value: ScalarLike) -> Scalar:
    if isinstance(value, Scalar):
        return value
    if not is_scalar_like(value):
        raise TypeError(f"expected int, str or Scalar, got {type(value).__name__}")
    if value == 0:
        return ZERO
    if value == 1:
        return ONE
    return Scalar(Literal(value))


ZERO = Scalar(Literal(0))
ONE = Scalar(Literal(1))
TEN = Scalar(Literal(10))
PI = Scalar(Literal("3.141592653589793238462643383279"))
EULER = Scalar(Literal("2.718281828459045235360287471352"))


__all__ = [
    "EULER",
    "ONE",
    "PI",
    "Scalar",
    "ScalarLike",
    "TEN",
    "ZERO",
    "as_scalar",
    "is_scalar_like",
]
