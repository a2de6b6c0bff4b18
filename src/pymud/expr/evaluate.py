from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from pymud.expr.nodes import (
    Add,
    Computed,
    Divide,
    ExpressionNode,
    Literal,
    Logarithm,
    MeasureAdd,
    MeasureAs,
    MeasureDivide,
    MeasureDivideScalar,
    MeasureMultiply,
    MeasurePower,
    MeasureScale,
    MeasureSubtract,
    Multiply,
    Negate,
    Power,
    RationalPower,
    Reciprocal,
    ScalarNode,
    Subtract,
    Take,
)

if TYPE_CHECKING:
    from pymud.fields.base import Field, FieldFactory
    from pymud.measure import Measure


class Deferred(Protocol):
    """What the tree walkers need from a Scalar or an Expression."""

    @property
    def node(self) -> ScalarNode | ExpressionNode: ...

    def is_particularized(self, factory: FieldFactory) -> bool: ...

    def particularize_node(self, factory: FieldFactory) -> Any: ...


def children(node: ScalarNode | ExpressionNode) -> tuple[Deferred, ...]:
    """The deferred operands of ``node``, left to right."""
    if isinstance(node, (Negate, Reciprocal)):
        return (node.operand,)
    if isinstance(node, (Add, Subtract, Multiply, Divide)):
        return (node.lhs, node.rhs)
    if isinstance(node, (MeasureAdd, MeasureSubtract, MeasureMultiply, MeasureDivide)):
        return (node.lhs, node.rhs)
    if isinstance(node, Power):
        return (node.base, node.exponent)
    if isinstance(node, (RationalPower, MeasurePower)):
        return (node.base,)
    if isinstance(node, Logarithm):
        return (node.arg, node.base)
    if isinstance(node, Take):
        return (node.value,)
    if isinstance(node, MeasureScale):
        return (node.operand, node.factor)
    if isinstance(node, MeasureDivideScalar):
        return (node.operand, node.divisor)
    if isinstance(node, MeasureAs):
        return (node.operand,)
    return ()


def particularize(root: Deferred, factory: FieldFactory) -> Any:
    """Evaluate ``root`` against ``factory`` without recursing.

    Operands are particularized bottom-up from an explicit stack, each into
    its own cache, so a node is only ever evaluated once its operands are
    cached and the call depth stays constant whatever the tree depth.
    """
    pending: list[tuple[Deferred, bool]] = [(root, False)]
    while pending:
        item, expanded = pending.pop()
        if expanded:
            item.particularize_node(factory)
            continue
        if item.is_particularized(factory):
            continue
        pending.append((item, True))
        for child in reversed(children(item.node)):
            if not child.is_particularized(factory):
                pending.append((child, False))
    return root.particularize_node(factory)


def describe(root: Deferred) -> str:
    """Readable rendering of ``root``, built bottom-up like :func:`particularize`."""
    texts: dict[int, str] = {}
    pending: list[tuple[Deferred, bool]] = [(root, False)]
    while pending:
        item, expanded = pending.pop()
        if expanded:
            operands = [texts[id(child)] for child in children(item.node)]
            texts[id(item)] = _render(item.node, operands)
            continue
        if id(item) in texts:
            continue
        pending.append((item, True))
        for child in reversed(children(item.node)):
            pending.append((child, False))
    return texts[id(root)]


def evaluate_scalar(node: ScalarNode, factory: FieldFactory) -> Field:
    if isinstance(node, Literal):
        return factory.of(node.value)
    if isinstance(node, Negate):
        return node.operand.using(factory).negate()
    if isinstance(node, Reciprocal):
        return node.operand.using(factory).reciprocal()
    if isinstance(node, Add):
        return node.lhs.using(factory).add(node.rhs.using(factory))
    if isinstance(node, Subtract):
        return node.lhs.using(factory).subtract(node.rhs.using(factory))
    if isinstance(node, Multiply):
        return node.lhs.using(factory).multiply(node.rhs.using(factory))
    if isinstance(node, Divide):
        return node.lhs.using(factory).divide(node.rhs.using(factory))
    if isinstance(node, Power):
        return node.base.using(factory).power(node.exponent.using(factory))
    if isinstance(node, RationalPower):
        return node.base.using(factory).power(node.exponent)
    if isinstance(node, Logarithm):
        return node.arg.using(factory).logarithm(node.base.using(factory))
    raise ValueError(f"Unknown scalar node '{type(node).__name__}'.")


def evaluate_expression(node: ExpressionNode, factory: FieldFactory) -> Measure:
    from pymud.measure import Measure

    if isinstance(node, Take):
        return Measure(node.value.using(factory), node.unit)
    if isinstance(node, MeasureAdd):
        return node.lhs.using(factory).add(node.rhs.using(factory))
    if isinstance(node, MeasureSubtract):
        return node.lhs.using(factory).subtract(node.rhs.using(factory))
    if isinstance(node, MeasureMultiply):
        return node.lhs.using(factory).multiply(node.rhs.using(factory))
    if isinstance(node, MeasureDivide):
        return node.lhs.using(factory).divide(node.rhs.using(factory))
    if isinstance(node, MeasureScale):
        return node.operand.using(factory).multiply(node.factor.using(factory))
    if isinstance(node, MeasureDivideScalar):
        return node.operand.using(factory).divide(node.divisor.using(factory))
    if isinstance(node, MeasurePower):
        return node.base.using(factory).power(node.exponent)
    if isinstance(node, MeasureAs):
        return node.operand.using(factory).as_(node.unit)
    if isinstance(node, Computed):
        return node.function(factory)
    raise ValueError(f"Unknown expression node '{type(node).__name__}'.")


def _render(node: ScalarNode | ExpressionNode, operands: list[str]) -> str:
    if isinstance(node, Literal):
        return str(node.value)
    if isinstance(node, Negate):
        return f"-({operands[0]})"
    if isinstance(node, Reciprocal):
        return f"1/({operands[0]})"
    if isinstance(node, (Add, MeasureAdd)):
        return f"({operands[0]} + {operands[1]})"
    if isinstance(node, (Subtract, MeasureSubtract)):
        return f"({operands[0]} - {operands[1]})"
    if isinstance(node, Multiply):
        return f"{operands[0]} * {operands[1]}"
    if isinstance(node, Divide):
        return f"{operands[0]} / ({operands[1]})"
    if isinstance(node, Power):
        return f"({operands[0]})^({operands[1]})"
    if isinstance(node, (RationalPower, MeasurePower)):
        return f"({operands[0]})^{node.exponent}"
    if isinstance(node, Logarithm):
        return f"log[{operands[1]}]({operands[0]})"
    if isinstance(node, Take):
        return f"{operands[0]} {node.unit.symbol}"
    if isinstance(node, MeasureMultiply):
        return f"({operands[0]}) * ({operands[1]})"
    if isinstance(node, MeasureDivide):
        return f"({operands[0]}) / ({operands[1]})"
    if isinstance(node, MeasureScale):
        return f"{operands[1]} * ({operands[0]})"
    if isinstance(node, MeasureDivideScalar):
        return f"({operands[0]}) / ({operands[1]})"
    if isinstance(node, MeasureAs):
        return f"({operands[0]}) as {node.unit.symbol}"
    if isinstance(node, Computed):
        return f"<{node.label}>"
    raise ValueError(f"Unknown node '{type(node).__name__}'.")


__all__ = [
    "Deferred",
    "children",
    "describe",
    "evaluate_expression",
    "evaluate_scalar",
    "particularize",
]
