"""Deferred computation nodes.

Each node is a frozen record of one operation whose operands are the
``Scalar``/``Expression`` values it was built from, so evaluating a node
reuses the operands' own particularization caches.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pymud.algebra.exponent import Exponent

if TYPE_CHECKING:
    from pymud.expr.expression import Expression
    from pymud.expr.scalar import Scalar
    from pymud.fields.base import FieldFactory
    from pymud.measure import Measure
    from pymud.units.unit import Unit


class ScalarNode:
    """Base class for dimensionless deferred operations."""


@dataclass(frozen=True)
class Literal(ScalarNode):
    value: int | str


@dataclass(frozen=True)
class Negate(ScalarNode):
    operand: Scalar


@dataclass(frozen=True)
class Reciprocal(ScalarNode):
    operand: Scalar


@dataclass(frozen=True)
class Add(ScalarNode):
    lhs: Scalar
    rhs: Scalar


@dataclass(frozen=True)
class Subtract(ScalarNode):
    lhs: Scalar
    rhs: Scalar


@dataclass(frozen=True)
class Multiply(ScalarNode):
    lhs: Scalar
    rhs: Scalar


@dataclass(frozen=True)
class Divide(ScalarNode):
    lhs: Scalar
    rhs: Scalar


@dataclass(frozen=True)
class Power(ScalarNode):
    base: Scalar
    exponent: Scalar


@dataclass(frozen=True)
class RationalPower(ScalarNode):
    base: Scalar
    exponent: Exponent


@dataclass(frozen=True)
class Logarithm(ScalarNode):
    arg: Scalar
    base: Scalar


class ExpressionNode:
    """Base class for dimensioned deferred operations."""


@dataclass(frozen=True)
class Take(ExpressionNode):
    value: Scalar
    unit: Unit


@dataclass(frozen=True)
class MeasureAdd(ExpressionNode):
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True)
class MeasureSubtract(ExpressionNode):
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True)
class MeasureMultiply(ExpressionNode):
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True)
class MeasureDivide(ExpressionNode):
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True)
class MeasureScale(ExpressionNode):
    operand: Expression
    factor: Scalar


@dataclass(frozen=True)
class MeasureDivideScalar(ExpressionNode):
    operand: Expression
    divisor: Scalar


@dataclass(frozen=True)
class MeasurePower(ExpressionNode):
    base: Expression
    exponent: Exponent


@dataclass(frozen=True)
class MeasureAs(ExpressionNode):
    operand: Expression
    unit: Unit


@dataclass(frozen=True)
class Computed(ExpressionNode):
    function: Callable[[FieldFactory], Measure]
    label: str = "computed"


__all__ = [
    "Add",
    "Computed",
    "Divide",
    "ExpressionNode",
    "Literal",
    "Logarithm",
    "MeasureAdd",
    "MeasureAs",
    "MeasureDivide",
    "MeasureDivideScalar",
    "MeasureMultiply",
    "MeasurePower",
    "MeasureScale",
    "MeasureSubtract",
    "Multiply",
    "Negate",
    "Power",
    "RationalPower",
    "Reciprocal",
    "ScalarNode",
    "Subtract",
    "Take",
]
