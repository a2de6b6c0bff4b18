"""Rational exponents used to raise dimensions and units to a power."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache, total_ordering
from typing import Union

from pymud.errors import InvalidExponentError


@total_ordering
@dataclass(frozen=True)
class Exponent:
    """A rational number kept in lowest terms with a positive denominator.

    Construct through :func:`reduce` or :meth:`Exponent.of` to get interned
    instances; the plain constructor normalizes too but does not intern.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        numerator, denominator = _normalize(self.numerator, self.denominator)
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    @staticmethod
    def of(numerator: int, denominator: int = 1) -> Exponent:
        return _interned(*_normalize(numerator, denominator))

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    def is_integer(self) -> bool:
        return self.denominator == 1

    def compare(self, other: Exponent) -> int:
        lhs = self.numerator * other.denominator
        rhs = other.numerator * self.denominator
        return (lhs > rhs) - (lhs < rhs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Exponent):
            return NotImplemented
        return self.compare(other) < 0

    def __neg__(self) -> Exponent:
        return negate(self)

    def __abs__(self) -> Exponent:
        return negate(self) if self.numerator < 0 else self

    def __add__(self, other: ExponentLike) -> Exponent:
        return product(self, as_exponent(other))

    def __mul__(self, other: ExponentLike) -> Exponent:
        return power(self, as_exponent(other))

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


ExponentLike = Union[Exponent, int, tuple[int, int]]


def _ensure_int(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidExponentError(f"{label} must be int, got {type(value).__name__}")
    return value


def _normalize(numerator: int, denominator: int) -> tuple[int, int]:
    numerator = _ensure_int(numerator, "numerator")
    denominator = _ensure_int(denominator, "denominator")
    if denominator == 0:
        raise InvalidExponentError(f"zero denominator in {numerator}/0")
    divisor = math.gcd(numerator, denominator)
    if denominator < 0:
        divisor = -divisor
    return numerator // divisor, denominator // divisor


@lru_cache(maxsize=1024)
def _interned(numerator: int, denominator: int) -> Exponent:
    return Exponent(numerator, denominator)


def reduce(numerator: int, denominator: int = 1) -> Exponent:
    return Exponent.of(numerator, denominator)


def as_exponent(value: ExponentLike) -> Exponent:
    if isinstance(value, Exponent):
        return value
    if isinstance(value, tuple):
        if len(value) != 2:
            raise InvalidExponentError("exponent pair must be (numerator, denominator)")
        return Exponent.of(value[0], value[1])
    return Exponent.of(value)


def product(a: Exponent, b: Exponent) -> Exponent:
    """Sum of two exponents, i.e. the exponent of ``x^a * x^b``."""
    if a.is_zero():
        return b
    if b.is_zero():
        return a
    if a.denominator == b.denominator:
        return Exponent.of(a.numerator + b.numerator, a.denominator)
    return Exponent.of(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def power(a: Exponent, b: Exponent) -> Exponent:
    """Product of two exponents, i.e. the exponent of ``(x^a)^b``."""
    if a.is_zero() or b.is_zero():
        return ZERO
    if a.is_one():
        return b
    if b.is_one():
        return a
    return Exponent.of(a.numerator * b.numerator, a.denominator * b.denominator)


def negate(a: Exponent) -> Exponent:
    if a.is_zero():
        return a
    return Exponent.of(-a.numerator, a.denominator)


ZERO = Exponent.of(0)
ONE = Exponent.of(1)
SQUARED = Exponent.of(2)
CUBED = Exponent.of(3)
SQUARE_ROOT = Exponent.of(1, 2)
CUBE_ROOT = Exponent.of(1, 3)
INVERSE = Exponent.of(-1)


__all__ = [
    "CUBED",
    "CUBE_ROOT",
    "Exponent",
    "ExponentLike",
    "INVERSE",
    "ONE",
    "SQUARED",
    "SQUARE_ROOT",
    "ZERO",
    "as_exponent",
    "negate",
    "power",
    "product",
    "reduce",
]
