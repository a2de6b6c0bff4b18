from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymud.algebra.dimension import assert_commensurable
from pymud.algebra.exponent import ExponentLike, as_exponent
from pymud.expr.scalar import is_scalar_like
from pymud.fields.base import Field, FieldFactory
from pymud.units.unit import UNITLESS, Unit, new_unit


@dataclass(frozen=True, eq=False)
class Measure:
    """A field value committed to a unit.

    Ordering needs only commensurable units and compares values rebased to
    base units. Equality is stricter: same unit and field-equal value, so
    ``1 km`` and ``1000 m`` compare equal in order but are not ``==``.
    """

    field: Field
    unit: Unit

    @property
    def factory(self) -> FieldFactory:
        return self.field.factory

    def _measure_of(self, other: Any, unit: Unit | None) -> Measure:
        if isinstance(other, Measure):
            if unit is not None:
                raise TypeError("a unit cannot be given together with a Measure")
            return other
        from pymud.expr.expression import Expression

        if isinstance(other, Expression):
            if unit is not None:
                raise TypeError("a unit cannot be given together with an Expression")
            return other.using(self.factory)
        return Measure(self.field.coerce(other), UNITLESS if unit is None else unit)

    def add(self, other: Any, unit: Unit | None = None) -> Measure:
        rebased = self._measure_of(other, unit).as_(self.unit)
        return Measure(self.field.add(rebased.field), self.unit)

    def subtract(self, other: Any, unit: Unit | None = None) -> Measure:
        rebased = self._measure_of(other, unit).as_(self.unit)
        return Measure(self.field.subtract(rebased.field), self.unit)

    def multiply(self, other: Any, unit: Unit | None = None) -> Measure:
        if unit is None and (is_scalar_like(other) or isinstance(other, Field)):
            return Measure(self.field.multiply(other), self.unit)
        operand = self._measure_of(other, unit)
        product_unit = new_unit().as_(self.unit).multiply(operand.unit).create()
        return Measure(self.field.multiply(operand.field), product_unit)

    def divide(self, other: Any, unit: Unit | None = None) -> Measure:
        if unit is None and (is_scalar_like(other) or isinstance(other, Field)):
            return Measure(self.field.divide(other), self.unit)
        operand = self._measure_of(other, unit)
        quotient_unit = new_unit().as_(self.unit).divide(operand.unit).create()
        return Measure(self.field.divide(operand.field), quotient_unit)

    def power(self, exponent: ExponentLike) -> Measure:
        e = as_exponent(exponent)
        return Measure(self.field.power(e), new_unit().as_(self.unit, e).create())

    def negate(self) -> Measure:
        return Measure(self.field.negate(), self.unit)

    def as_(self, unit: Unit) -> Measure:
        if unit == self.unit:
            return self
        assert_commensurable(self.unit.dimension, unit.dimension)
        factory = self.factory
        ratio = self.unit.scale.using(factory).divide(unit.scale.using(factory))
        return Measure(self.field.multiply(ratio), unit)

    def base_value(self) -> Field:
        """The value expressed in base units."""
        return self.field.multiply(self.unit.scale.using(self.factory))

    def compare(self, other: Measure) -> int:
        assert_commensurable(self.unit.dimension, other.unit.dimension)
        return self.base_value().compare(other.base_value())

    def is_equal_to(self, other: Measure) -> bool:
        return self.compare(other) == 0

    def is_less_than(self, other: Measure) -> bool:
        return self.compare(other) < 0

    def is_greater_than(self, other: Measure) -> bool:
        return self.compare(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        if self.unit != other.unit or type(self.field) is not type(other.field):
            return False
        return self.field.is_equal_to(other.field)

    def __hash__(self) -> int:
        return hash(self.unit)

    def __lt__(self, other: Measure) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Measure) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Measure) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Measure) -> bool:
        return self.compare(other) >= 0

    def __neg__(self) -> Measure:
        return self.negate()

    def __add__(self, other: Any) -> Measure:
        return self.add(other)

    def __sub__(self, other: Any) -> Measure:
        return self.subtract(other)

    def __radd__(self, other: Any) -> Measure:
        if is_scalar_like(other) or isinstance(other, Field):
            return Measure(self.field.coerce(other), UNITLESS).add(self)
        return NotImplemented

    def __rsub__(self, other: Any) -> Measure:
        if is_scalar_like(other) or isinstance(other, Field):
            return Measure(self.field.coerce(other), UNITLESS).subtract(self)
        return NotImplemented

    def __mul__(self, other: Any) -> Measure:
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Measure:
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Measure:
        return self.divide(other)

    def __pow__(self, exponent: ExponentLike) -> Measure:
        return self.power(exponent)

    def __str__(self) -> str:
        return f"{self.field} {self.unit.symbol}"


__all__ = ["Measure"]
