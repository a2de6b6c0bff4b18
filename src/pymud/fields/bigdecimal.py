from __future__ import annotations

import decimal
from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal

from pymud.algebra.exponent import Exponent
from pymud.errors import FieldArithmeticError, NumberFormatError, UnsupportedOperationError
from pymud.fields.base import Field, FieldFactory


@dataclass(frozen=True)
class DecimalFieldConfig:
    precision: int = 34
    rounding: str = ROUND_HALF_EVEN
    scale: int | None = None

    def __post_init__(self) -> None:
        if self.precision <= 0:
            raise ValueError("precision must be positive")
        if self.scale is not None and self.scale < 0:
            raise ValueError("scale must be >= 0")


class DecimalFieldFactory(FieldFactory):
    """Arbitrary precision decimal values under a private context.

    ``of_string`` accepts anything :class:`decimal.Decimal` parses except
    NaN and infinities; the result is rounded to the configured precision
    (and quantized when a fixed scale is configured).
    """

    def __init__(self, config: DecimalFieldConfig | None = None, name: str | None = None) -> None:
        self.config = config or DecimalFieldConfig()
        self.name = name or f"decimal{self.config.precision}"
        self.context = decimal.Context(
            prec=self.config.precision,
            rounding=self.config.rounding,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )
        self._quantum = None if self.config.scale is None else Decimal(1).scaleb(-self.config.scale)

    def wrap(self, value: Decimal) -> DecimalField:
        value = self.context.plus(value)
        if self._quantum is not None:
            value = value.quantize(self._quantum, context=self.context)
        return DecimalField(value, self)

    def of_int(self, value: int) -> DecimalField:
        return self.wrap(Decimal(value))

    def of_string(self, value: str) -> DecimalField:
        try:
            parsed = Decimal(value.strip())
        except decimal.InvalidOperation as exc:
            raise NumberFormatError(value) from exc
        if not parsed.is_finite():
            raise NumberFormatError(value, f"{value!r} is not a finite number")
        return self.wrap(parsed)


@dataclass(frozen=True)
class DecimalField(Field):
    value: Decimal
    decimal_factory: DecimalFieldFactory = field(compare=False, repr=False)

    @property
    def factory(self) -> DecimalFieldFactory:
        return self.decimal_factory

    def _apply(self, operation: str, *operands: Decimal) -> DecimalField:
        context = self.decimal_factory.context
        try:
            result = getattr(context, operation)(*operands)
        except decimal.InvalidOperation as exc:
            raise UnsupportedOperationError(
                f"{operation}{tuple(str(o) for o in operands)} is undefined"
            ) from exc
        except decimal.Overflow as exc:
            raise FieldArithmeticError(f"{operation} overflowed") from exc
        return self.decimal_factory.wrap(result)

    def negate(self) -> DecimalField:
        return self._apply("minus", self.value)

    def reciprocal(self) -> DecimalField:
        if self.value.is_zero():
            raise ZeroDivisionError("reciprocal of zero")
        return self._apply("divide", Decimal(1), self.value)

    def _add(self, other: Field) -> DecimalField:
        return self._apply("add", self.value, other.value)

    def _subtract(self, other: Field) -> DecimalField:
        return self._apply("subtract", self.value, other.value)

    def _multiply(self, other: Field) -> DecimalField:
        return self._apply("multiply", self.value, other.value)

    def _divide(self, other: Field) -> DecimalField:
        if other.value.is_zero():
            raise ZeroDivisionError(f"{self.value} / 0")
        return self._apply("divide", self.value, other.value)

    def _power(self, exponent: Field) -> DecimalField:
        return self._apply("power", self.value, exponent.value)

    def _rational_power(self, exponent: Exponent) -> DecimalField:
        if exponent.is_integer():
            return self._apply("power", self.value, Decimal(exponent.numerator))
        if exponent.denominator == 2:
            root = self._apply("sqrt", self.value)
        elif self.value.is_signed() and exponent.denominator % 2 == 1:
            magnitude = self.negate()._rational_power(Exponent.of(1, exponent.denominator))
            root = magnitude.negate()
        else:
            context = self.decimal_factory.context
            root = self._apply("power", self.value, context.divide(1, exponent.denominator))
        if exponent.numerator == 1:
            return root
        return root._apply("power", root.value, Decimal(exponent.numerator))

    def _logarithm(self, base: Field) -> DecimalField:
        if not self.value > 0 or not base.value > 0 or base.value == 1:
            raise FieldArithmeticError(f"log({self.value}) in base {base.value} is undefined")
        if base.value == 10:
            return self._apply("log10", self.value)
        numerator = self._apply("ln", self.value)
        denominator = self._apply("ln", base.value)
        return numerator._divide(denominator)

    def _compare(self, other: Field) -> int:
        return int(self.value.compare(other.value))

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)


DECIMAL128 = DecimalFieldFactory(DecimalFieldConfig(), name="decimal128")
DECIMAL_SCALE_2 = DecimalFieldFactory(DecimalFieldConfig(scale=2), name="decimal-scale-2")


__all__ = [
    "DECIMAL128",
    "DECIMAL_SCALE_2",
    "DecimalField",
    "DecimalFieldConfig",
    "DecimalFieldFactory",
]
