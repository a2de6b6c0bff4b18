from pymud.expr.scalar import EULER, PI, Scalar, ScalarLike, as_scalar
from pymud.expr.expression import Expression, take, take_computed
from pymud.expr.memo import ParticularizationCache

__all__ = [
    "EULER",
    "Expression",
    "PI",
    "ParticularizationCache",
    "Scalar",
    "ScalarLike",
    "as_scalar",
    "take",
    "take_computed",
]
