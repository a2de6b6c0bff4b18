"""Numeric backend contract.

A ``Field`` is a concrete numeric value (float, decimal, value with
uncertainty, ...) closed under the arithmetic needed to evaluate measures.
A ``FieldFactory`` turns integers and numeric strings into values of one
backend and is the identity used to memoize deferred evaluation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

from pymud.algebra.exponent import Exponent

if TYPE_CHECKING:
    from pymud.expr.scalar import Scalar

FieldLike = Union["Field", int, str, "Scalar"]


class FieldFactory(ABC):
    name: str = "field"

    @abstractmethod
    def of_int(self, value: int) -> Field:
        raise NotImplementedError

    @abstractmethod
    def of_string(self, value: str) -> Field:
        """Parse ``value``; raise :class:`NumberFormatError` when it is not a number."""
        raise NotImplementedError

    def of(self, value: int | str | Field) -> Field:
        if isinstance(value, Field):
            if value.factory is not self:
                raise TypeError(f"{value!r} does not belong to factory {self.name}")
            return value
        if isinstance(value, bool):
            raise TypeError("bool is not a field value")
        if isinstance(value, int):
            return self.of_int(value)
        if isinstance(value, str):
            return self.of_string(value)
        raise TypeError(f"cannot convert {type(value).__name__} to a field value")

    def zero(self) -> Field:
        return self.of_int(0)

    def one(self) -> Field:
        return self.of_int(1)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Field(ABC):
    """Base class for numeric backend values.

    Subclasses implement the underscore hooks with operands already
    converted to the same backend; the public methods accept ints, numeric
    strings and deferred ``Scalar`` values as well.
    """

    @property
    @abstractmethod
    def factory(self) -> FieldFactory:
        raise NotImplementedError

    @abstractmethod
    def negate(self) -> Field:
        raise NotImplementedError

    @abstractmethod
    def reciprocal(self) -> Field:
        """Multiplicative inverse; raise ``ZeroDivisionError`` for zero."""
        raise NotImplementedError

    @abstractmethod
    def _add(self, other: Field) -> Field:
        raise NotImplementedError

    @abstractmethod
    def _multiply(self, other: Field) -> Field:
        raise NotImplementedError

    @abstractmethod
    def _power(self, exponent: Field) -> Field:
        raise NotImplementedError

    @abstractmethod
    def _logarithm(self, base: Field) -> Field:
        raise NotImplementedError

    @abstractmethod
    def _compare(self, other: Field) -> int:
        raise NotImplementedError

    def _subtract(self, other: Field) -> Field:
        return self._add(other.negate())

    def _divide(self, other: Field) -> Field:
        return self._multiply(other.reciprocal())

    def _rational_power(self, exponent: Exponent) -> Field:
        factory = self.factory
        if exponent.is_integer():
            return self._power(factory.of_int(exponent.numerator))
        return self._power(
            factory.of_int(exponent.numerator)._divide(factory.of_int(exponent.denominator))
        )

    def coerce(self, other: FieldLike) -> Field:
        if isinstance(other, Field):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot combine {type(self).__name__} with {type(other).__name__}"
                )
            return other
        from pymud.expr.scalar import Scalar

        if isinstance(other, Scalar):
            return other.using(self.factory)
        return self.factory.of(other)

    def add(self, other: FieldLike) -> Field:
        return self._add(self.coerce(other))

    def subtract(self, other: FieldLike) -> Field:
        return self._subtract(self.coerce(other))

    def multiply(self, other: FieldLike) -> Field:
        return self._multiply(self.coerce(other))

    def divide(self, other: FieldLike) -> Field:
        return self._divide(self.coerce(other))

    def power(self, exponent: FieldLike | Exponent) -> Field:
        if isinstance(exponent, Exponent):
            if exponent.is_zero():
                return self.factory.one()
            if exponent.is_one():
                return self
            return self._rational_power(exponent)
        return self._power(self.coerce(exponent))

    def logarithm(self, base: FieldLike) -> Field:
        return self._logarithm(self.coerce(base))

    def compare(self, other: FieldLike) -> int:
        return self._compare(self.coerce(other))

    def is_zero(self) -> bool:
        return self._compare(self.factory.zero()) == 0

    def is_equal_to(self, other: FieldLike) -> bool:
        return self.compare(other) == 0

    def is_less_than(self, other: FieldLike) -> bool:
        return self.compare(other) < 0

    def is_greater_than(self, other: FieldLike) -> bool:
        return self.compare(other) > 0

    def _operand(self, other: object) -> Field | None:
        if isinstance(other, (Field, int, str)) and not isinstance(other, bool):
            return self.coerce(other)
        from pymud.expr.scalar import Scalar

        if isinstance(other, Scalar):
            return self.coerce(other)
        return None

    def __neg__(self) -> Field:
        return self.negate()

    def __add__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._add(operand)

    def __radd__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand._add(self)

    def __sub__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._subtract(operand)

    def __rsub__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand._subtract(self)

    def __mul__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._multiply(operand)

    def __rmul__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand._multiply(self)

    def __truediv__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._divide(operand)

    def __rtruediv__(self, other: object) -> Field:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand._divide(self)

    def __pow__(self, exponent: object) -> Field:
        if isinstance(exponent, Exponent):
            return self.power(exponent)
        operand = self._operand(exponent)
        return NotImplemented if operand is None else self._power(operand)

    def __lt__(self, other: object) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._compare(operand) < 0

    def __le__(self, other: object) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._compare(operand) <= 0

    def __gt__(self, other: object) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._compare(operand) > 0

    def __ge__(self, other: object) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is None else self._compare(operand) >= 0


__all__ = ["Field", "FieldFactory", "FieldLike"]
