"""Dimensions as vectors of rational exponents over fundamental dimensions."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from pymud.algebra.exponent import ONE, ZERO, Exponent, ExponentLike, as_exponent, power, product
from pymud.errors import IncommensurableDimensionError

if TYPE_CHECKING:
    from pymud.units.unit import FundamentalUnit


class HandleArena:
    """Allocates process-wide integer handles for identity-unique values."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counter = itertools.count()

    def allocate(self) -> int:
        with self._lock:
            return next(self._counter)


HANDLES = HandleArena()

_FUNDAMENTAL_UNITS: dict[int, FundamentalUnit] = {}


@dataclass(frozen=True)
class CompositionComponent:
    fundamental_dimension: FundamentalDimension
    exponent: Exponent


class Composition(Mapping["FundamentalDimension", Exponent]):
    """Immutable mapping of fundamental dimension to its non-zero exponent.

    Absent and zero exponents are the same thing. A composition with no
    significant entry is the dimensionless composition.
    """

    __slots__ = ("_components",)

    def __init__(self, components: Mapping[FundamentalDimension, Exponent] | None = None) -> None:
        entries = {fd: e for fd, e in (components or {}).items() if not e.is_zero()}
        if not entries:
            entries = {DIMENSIONLESS: ONE}
        self._components = entries

    def get_exponent(self, fundamental_dimension: FundamentalDimension) -> Exponent:
        return self._components.get(fundamental_dimension, ZERO)

    def components(self) -> tuple[CompositionComponent, ...]:
        return tuple(CompositionComponent(fd, e) for fd, e in self._components.items())

    def is_dimensionless(self) -> bool:
        return not self._significant()

    def _significant(self) -> dict[FundamentalDimension, Exponent]:
        return {fd: e for fd, e in self._components.items() if fd is not DIMENSIONLESS}

    def __getitem__(self, key: FundamentalDimension) -> Exponent:
        return self._components[key]

    def __iter__(self) -> Iterator[FundamentalDimension]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Composition):
            return NotImplemented
        mine = self._significant()
        theirs = other._significant()
        if len(mine) != len(theirs):
            return False
        return all(theirs.get(fd, ZERO) == e for fd, e in mine.items())

    def __hash__(self) -> int:
        return hash(frozenset(self._significant().items()))

    def __str__(self) -> str:
        parts = []
        for fd, e in self._components.items():
            parts.append(fd.symbol if e.is_one() else f"{fd.symbol}^{e}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"Composition({str(self)!r})"


class Dimension:
    """Named, identity-unique handle around a :class:`Composition`."""

    __slots__ = ("_name", "_symbol", "_composition", "_handle")

    def __init__(self, name: str, symbol: str, composition: Composition | None) -> None:
        self._handle = HANDLES.allocate()
        self._name = name
        self._symbol = symbol
        self._composition = composition

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def composition(self) -> Composition:
        return self._composition

    @property
    def handle(self) -> int:
        return self._handle

    def is_commensurable(self, other: Dimension) -> bool:
        return self._handle == other._handle or self.composition == other.composition

    def is_dimensionless(self) -> bool:
        return self.composition.is_dimensionless()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self._handle == other._handle

    def __hash__(self) -> int:
        return hash(self._handle)

    def __str__(self) -> str:
        return f"{self._name} ({self._symbol})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, symbol={self._symbol!r}, composition={str(self._composition)!r})"


class FundamentalDimension(Dimension):
    """A basis axis; its composition is itself raised to the power one.

    Only :func:`pymud.units.unit.new_fundamental_pair` should mint these so
    that every fundamental dimension has a paired fundamental unit.
    """

    __slots__ = ()

    def __init__(self, name: str, symbol: str) -> None:
        super().__init__(name, symbol, None)
        self._composition = Composition({self: ONE})

    @property
    def fundamental_unit(self) -> FundamentalUnit:
        return _FUNDAMENTAL_UNITS[self._handle]


def bind_fundamental_unit(dimension: FundamentalDimension, unit: FundamentalUnit) -> None:
    if dimension.handle in _FUNDAMENTAL_UNITS:
        raise ValueError(f"{dimension.name} is already paired with a fundamental unit")
    _FUNDAMENTAL_UNITS[dimension.handle] = unit


DIMENSIONLESS = FundamentalDimension("DIMENSIONLESS", "-")


def assert_commensurable(left: Dimension, right: Dimension) -> None:
    if not left.is_commensurable(right):
        raise IncommensurableDimensionError(left.composition, right.composition)


@dataclass(frozen=True)
class DimensionBuilder:
    """Immutable accumulator of ``dimension ** exponent`` terms.

    Every method returns a new builder, so a partially built value can be
    reused as a template for several dimensions.
    """

    components: tuple[tuple[FundamentalDimension, Exponent], ...] = ()
    name: str | None = None
    symbol: str | None = None

    def append(self, dimension: Dimension, exponent: ExponentLike = ONE) -> DimensionBuilder:
        e = as_exponent(exponent)
        accumulated = dict(self.components)
        for fd, de in dimension.composition.items():
            if fd is DIMENSIONLESS:
                continue
            accumulated[fd] = product(accumulated.get(fd, ZERO), power(de, e))
        return replace(self, components=tuple(accumulated.items()))

    def with_name(self, name: str) -> DimensionBuilder:
        return replace(self, name=name)

    def with_symbol(self, symbol: str) -> DimensionBuilder:
        return replace(self, symbol=symbol)

    def composition(self) -> Composition:
        return Composition(dict(self.components))

    def create(self) -> Dimension:
        composition = self.composition()
        name = self.name
        if name is None:
            name = "; ".join(f"{fd.name}: {e}" for fd, e in composition.items())
        symbol = self.symbol
        if symbol is None:
            symbol = str(composition)
        return Dimension(name, symbol, composition)


def new_dimension() -> DimensionBuilder:
    return DimensionBuilder()


__all__ = [
    "Composition",
    "CompositionComponent",
    "DIMENSIONLESS",
    "Dimension",
    "DimensionBuilder",
    "FundamentalDimension",
    "HANDLES",
    "HandleArena",
    "assert_commensurable",
    "bind_fundamental_unit",
    "new_dimension",
]
