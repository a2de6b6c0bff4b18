"""Nonlinear scales over a reference unit.

A :class:`Scale` maps a measure in its reference unit to a level value
(``forward``) and back (``inverse``). Logarithmic scales (bel, decibel,
neper) and affine temperature scales are provided as factories.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pymud.algebra.dimension import HANDLES
from pymud.errors import IncommensurableDimensionError
from pymud.expr.scalar import EULER, TEN, ScalarLike, as_scalar
from pymud.fields.base import Field
from pymud.measure import Measure
from pymud.units.unit import Unit

FieldTransform = Callable[[Field], Field]


class Scale:
    __slots__ = ("_name", "_symbol", "_reference_unit", "_forward", "_inverse", "_handle")

    def __init__(
        self,
        name: str,
        symbol: str,
        reference_unit: Unit,
        forward: FieldTransform,
        inverse: FieldTransform,
    ) -> None:
        self._handle = HANDLES.allocate()
        self._name = name
        self._symbol = symbol
        self._reference_unit = reference_unit
        self._forward = forward
        self._inverse = inverse

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def reference_unit(self) -> Unit:
        return self._reference_unit

    def forward(self, value: Field) -> Field:
        return self._forward(value)

    def inverse(self, value: Field) -> Field:
        return self._inverse(value)

    def level(self, measure: Measure) -> Level:
        """Place ``measure`` on this scale."""
        rebased = measure.as_(self._reference_unit)
        return Level(self._forward(rebased.field), self, rebased)

    def of(self, value: Field) -> Level:
        """The level whose scale value is ``value``."""
        return Level(value, self, Measure(self._inverse(value), self._reference_unit))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self._handle == other._handle

    def __hash__(self) -> int:
        return hash(self._handle)

    def __str__(self) -> str:
        return f"Scale: {self._name} ({self._symbol})"

    def __repr__(self) -> str:
        return f"Scale(name={self._name!r}, symbol={self._symbol!r}, reference={self._reference_unit.name!r})"


@dataclass(frozen=True, eq=False)
class Level:
    """A value on a scale together with the measure it stands for.

    Levels on the same scale order by value; levels on different scales
    order by their backing measures when the reference units are
    commensurable. Equality needs the identical scale.
    """

    value: Field
    scale: Scale
    measure: Measure

    def compare(self, other: Level) -> int:
        if self.scale == other.scale:
            return self.value.compare(other.value)
        if self.measure.unit.is_commensurable(other.measure.unit):
            return self.measure.compare(other.measure)
        raise IncommensurableDimensionError(
            self.measure.unit.dimension.composition,
            other.measure.unit.dimension.composition,
        )

    def is_equal_to(self, other: Level) -> bool:
        return self.compare(other) == 0

    def is_less_than(self, other: Level) -> bool:
        return self.compare(other) < 0

    def is_greater_than(self, other: Level) -> bool:
        return self.compare(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        if self.scale != other.scale or type(self.value) is not type(other.value):
            return False
        return self.value.is_equal_to(other.value)

    def __hash__(self) -> int:
        return hash(self.scale)

    def __lt__(self, other: Level) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Level) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Level) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Level) -> bool:
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return f"{self.value} {self.scale.symbol}"


def bel(reference_unit: Unit, name: str | None = None, symbol: str | None = None) -> Scale:
    """log10 of the ratio to one reference unit."""
    return Scale(
        name or f"BEL-{reference_unit.name}",
        symbol or f"B{reference_unit.symbol}",
        reference_unit,
        lambda x: x.logarithm(TEN),
        lambda y: y.factory.of_int(10).power(y),
    )


def decibel(reference_unit: Unit, name: str | None = None, symbol: str | None = None) -> Scale:
    """Ten times log10 of the ratio to one reference unit."""
    return Scale(
        name or f"DECIBEL-{reference_unit.name}",
        symbol or f"dB{reference_unit.symbol}",
        reference_unit,
        lambda x: x.logarithm(TEN).multiply(TEN),
        lambda y: y.factory.of_int(10).power(y.divide(TEN)),
    )


def neper(reference_unit: Unit, name: str | None = None, symbol: str | None = None) -> Scale:
    """Natural logarithm of the ratio to one reference unit."""
    return Scale(
        name or f"NEPER-{reference_unit.name}",
        symbol or f"Np{reference_unit.symbol}",
        reference_unit,
        lambda x: x.logarithm(EULER),
        lambda y: EULER.using(y.factory).power(y),
    )


def affine(name: str, symbol: str, reference_unit: Unit, offset: ScalarLike) -> Scale:
    """``level = value - offset`` in the reference unit."""
    shift = as_scalar(offset)
    return Scale(
        name,
        symbol,
        reference_unit,
        lambda x: x.subtract(shift),
        lambda y: y.add(shift),
    )


__all__ = ["FieldTransform", "Level", "Scale", "affine", "bel", "decibel", "neper"]
