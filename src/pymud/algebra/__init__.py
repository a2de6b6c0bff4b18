from pymud.algebra.dimension import (
    DIMENSIONLESS,
    Composition,
    CompositionComponent,
    Dimension,
    DimensionBuilder,
    FundamentalDimension,
    assert_commensurable,
    new_dimension,
)
from pymud.algebra.exponent import (
    CUBE_ROOT,
    CUBED,
    INVERSE,
    SQUARE_ROOT,
    SQUARED,
    Exponent,
    ExponentLike,
    as_exponent,
    negate,
    power,
    product,
    reduce,
)

__all__ = [
    "CUBED",
    "CUBE_ROOT",
    "Composition",
    "CompositionComponent",
    "DIMENSIONLESS",
    "Dimension",
    "DimensionBuilder",
    "Exponent",
    "ExponentLike",
    "FundamentalDimension",
    "INVERSE",
    "SQUARED",
    "SQUARE_ROOT",
    "as_exponent",
    "assert_commensurable",
    "negate",
    "new_dimension",
    "power",
    "product",
    "reduce",
]
