"""Values carrying a standard uncertainty.

Uncertainty is propagated to first order assuming uncorrelated operands.
Accepted string forms: ``"1.5"``, ``"1.5+/-0.1"``, ``"1.5+-0.1"``,
``"1.5±0.1"``, ``"1.5,0.1"`` and ``"1.5(0.1)"``; blanks are ignored.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from pymud.algebra.exponent import Exponent
from pymud.errors import FieldArithmeticError, NumberFormatError, UnsupportedOperationError
from pymud.fields.base import Field, FieldFactory

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_PATTERN = re.compile(
    rf"^(?P<value>[+-]?{_NUMBER})"
    rf"(?:(?:\+/-|\+-|±|,)(?P<sigma1>{_NUMBER})|\((?P<sigma2>{_NUMBER})\))?$"
)


def _checked(value: float, operation: str) -> float:
    if math.isnan(value) or math.isinf(value):
        raise FieldArithmeticError(f"{operation} produced {value}")
    return value


@dataclass(frozen=True)
class UncertainField(Field):
    value: float
    uncertainty: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "uncertainty", abs(self.uncertainty))

    @property
    def factory(self) -> UncertainFieldFactory:
        return UNCERTAIN

    @property
    def relative_uncertainty(self) -> float:
        if self.value == 0.0:
            raise ZeroDivisionError("relative uncertainty of zero")
        return self.uncertainty / abs(self.value)

    def negate(self) -> UncertainField:
        return UncertainField(-self.value, self.uncertainty)

    def reciprocal(self) -> UncertainField:
        if self.value == 0.0:
            raise ZeroDivisionError("reciprocal of zero")
        return UncertainField(
            _checked(1.0 / self.value, "reciprocal"),
            self.uncertainty / (self.value * self.value),
        )

    def _add(self, other: Field) -> UncertainField:
        return UncertainField(
            _checked(self.value + other.value, "add"),
            math.hypot(self.uncertainty, other.uncertainty),
        )

    def _subtract(self, other: Field) -> UncertainField:
        return UncertainField(
            _checked(self.value - other.value, "subtract"),
            math.hypot(self.uncertainty, other.uncertainty),
        )

    def _multiply(self, other: Field) -> UncertainField:
        return UncertainField(
            _checked(self.value * other.value, "multiply"),
            math.hypot(other.value * self.uncertainty, self.value * other.uncertainty),
        )

    def _divide(self, other: Field) -> UncertainField:
        if other.value == 0.0:
            raise ZeroDivisionError(f"{self.value} / 0")
        quotient = _checked(self.value / other.value, "divide")
        return UncertainField(
            quotient,
            math.hypot(self.uncertainty / other.value, quotient * other.uncertainty / other.value),
        )

    def _power(self, exponent: Field) -> UncertainField:
        if exponent.uncertainty == 0.0:
            return self._power_exact(exponent.value)
        if self.value <= 0.0:
            raise UnsupportedOperationError(
                f"uncertain exponent requires a positive base, got {self.value}"
            )
        result = _checked(self.value**exponent.value, "power")
        return UncertainField(
            result,
            abs(result)
            * math.hypot(
                exponent.value * self.uncertainty / self.value,
                math.log(self.value) * exponent.uncertainty,
            ),
        )

    def _rational_power(self, exponent: Exponent) -> UncertainField:
        if exponent.denominator % 2 == 1 and self.value < 0.0:
            magnitude = self.negate()._power_exact(1.0 / exponent.denominator)
            return magnitude.negate()._power_exact(float(exponent.numerator))
        return self._power_exact(exponent.numerator / exponent.denominator)

    def _power_exact(self, exponent: float) -> UncertainField:
        if exponent == 0.0:
            return UncertainField(1.0)
        if exponent == 1.0:
            return self
        result = self.value**exponent
        if isinstance(result, complex):
            raise UnsupportedOperationError(f"{self.value} ** {exponent} is not real")
        result = _checked(result, "power")
        if self.value == 0.0:
            return UncertainField(result)
        return UncertainField(result, abs(result * exponent * self.uncertainty / self.value))

    def _logarithm(self, base: Field) -> UncertainField:
        if self.value <= 0.0 or base.value <= 0.0 or base.value == 1.0:
            raise FieldArithmeticError(f"log({self.value}) in base {base.value} is undefined")
        ln_value = math.log(self.value)
        ln_base = math.log(base.value)
        return UncertainField(
            ln_value / ln_base,
            math.hypot(
                self.uncertainty / (self.value * ln_base),
                ln_value * base.uncertainty / (base.value * ln_base * ln_base),
            ),
        )

    def _compare(self, other: Field) -> int:
        return (self.value > other.value) - (self.value < other.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value!r}±{self.uncertainty!r}"


class UncertainFieldFactory(FieldFactory):
    name = "uncertain"

    def of_int(self, value: int) -> UncertainField:
        return UncertainField(float(value))

    def of_string(self, value: str) -> UncertainField:
        match = _PATTERN.match(value.replace(" ", ""))
        if not match:
            raise NumberFormatError(value)
        sigma = match.group("sigma1") or match.group("sigma2")
        return UncertainField(float(match.group("value")), float(sigma) if sigma else 0.0)

    def measured(self, value: float, uncertainty: float) -> UncertainField:
        return UncertainField(_checked(float(value), "measured"), float(uncertainty))


UNCERTAIN = UncertainFieldFactory()


__all__ = ["UNCERTAIN", "UncertainField", "UncertainFieldFactory"]
