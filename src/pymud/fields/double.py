from __future__ import annotations

import math
from dataclasses import dataclass

from pymud.algebra.exponent import Exponent
from pymud.errors import FieldArithmeticError, NumberFormatError, UnsupportedOperationError
from pymud.fields.base import Field, FieldFactory


def _checked(value: float, operation: str) -> float:
    if math.isnan(value) or math.isinf(value):
        raise FieldArithmeticError(f"{operation} produced {value}")
    return value


@dataclass(frozen=True)
class DoubleField(Field):
    """IEEE 754 binary64 value."""

    value: float

    @property
    def factory(self) -> DoubleFieldFactory:
        return DOUBLE

    def negate(self) -> DoubleField:
        return DoubleField(-self.value)

    def reciprocal(self) -> DoubleField:
        if self.value == 0.0:
            raise ZeroDivisionError("reciprocal of zero")
        return DoubleField(_checked(1.0 / self.value, "reciprocal"))

    def _add(self, other: Field) -> DoubleField:
        return DoubleField(_checked(self.value + other.value, "add"))

    def _subtract(self, other: Field) -> DoubleField:
        return DoubleField(_checked(self.value - other.value, "subtract"))

    def _multiply(self, other: Field) -> DoubleField:
        return DoubleField(_checked(self.value * other.value, "multiply"))

    def _divide(self, other: Field) -> DoubleField:
        if other.value == 0.0:
            raise ZeroDivisionError(f"{self.value} / 0")
        return DoubleField(_checked(self.value / other.value, "divide"))

    def _power(self, exponent: Field) -> DoubleField:
        return DoubleField(self._raise(exponent.value))

    def _rational_power(self, exponent: Exponent) -> DoubleField:
        if exponent.is_integer():
            return DoubleField(self._raise(exponent.numerator))
        if exponent.denominator % 2 == 1 and self.value < 0.0:
            # odd roots of negative numbers stay real
            root = -((-self.value) ** (1.0 / exponent.denominator))
            return DoubleField(_checked(root**exponent.numerator, "power"))
        return DoubleField(self._raise(exponent.numerator / exponent.denominator))

    def _raise(self, exponent: float) -> float:
        result = self.value**exponent
        if isinstance(result, complex):
            raise UnsupportedOperationError(f"{self.value} ** {exponent} is not real")
        return _checked(result, "power")

    def _logarithm(self, base: Field) -> DoubleField:
        if self.value <= 0.0:
            raise FieldArithmeticError(f"logarithm of non-positive value {self.value}")
        if base.value <= 0.0 or base.value == 1.0:
            raise FieldArithmeticError(f"invalid logarithm base {base.value}")
        if base.value == math.e:
            return DoubleField(math.log(self.value))
        if base.value == 10.0:
            return DoubleField(math.log10(self.value))
        return DoubleField(math.log10(self.value) / math.log10(base.value))

    def _compare(self, other: Field) -> int:
        return (self.value > other.value) - (self.value < other.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return repr(self.value)


class DoubleFieldFactory(FieldFactory):
    """Parses with :func:`float`, i.e. round-to-nearest binary64."""

    name = "double"

    def of_int(self, value: int) -> DoubleField:
        return DoubleField(float(value))

    def of_string(self, value: str) -> DoubleField:
        try:
            parsed = float(value)
        except ValueError as exc:
            raise NumberFormatError(value) from exc
        if math.isnan(parsed) or math.isinf(parsed):
            raise NumberFormatError(value, f"{value!r} is not a finite number")
        return DoubleField(parsed)

    def of_float(self, value: float) -> DoubleField:
        return DoubleField(_checked(float(value), "of_float"))


DOUBLE = DoubleFieldFactory()


__all__ = ["DOUBLE", "DoubleField", "DoubleFieldFactory"]
