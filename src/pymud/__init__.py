"""Measures, units and dimensions.

Quantities are described symbolically (dimension and unit) and evaluated
late, in whichever numeric field the caller chooses.
"""

from pymud.errors import (
    CatalogError,
    FieldArithmeticError,
    IllegalBuilderStateError,
    IncommensurableDimensionError,
    InvalidExponentError,
    NumberFormatError,
    UnsupportedOperationError,
)
from pymud.algebra import (
    DIMENSIONLESS,
    Composition,
    Dimension,
    Exponent,
    FundamentalDimension,
    new_dimension,
)
from pymud.fields import DECIMAL128, DOUBLE, UNCERTAIN, Field, FieldFactory
from pymud.expr import EULER, PI, Expression, Scalar, take, take_computed
from pymud.units import UNITLESS, FundamentalUnit, Unit, new_fundamental_pair, new_unit
from pymud.measure import Measure
from pymud.scale import Level, Scale, affine, bel, decibel, neper

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "Composition",
    "DECIMAL128",
    "DIMENSIONLESS",
    "DOUBLE",
    "Dimension",
    "EULER",
    "Exponent",
    "Expression",
    "Field",
    "FieldArithmeticError",
    "FieldFactory",
    "FundamentalDimension",
    "FundamentalUnit",
    "IllegalBuilderStateError",
    "IncommensurableDimensionError",
    "InvalidExponentError",
    "Level",
    "Measure",
    "NumberFormatError",
    "PI",
    "Scalar",
    "Scale",
    "UNCERTAIN",
    "UNITLESS",
    "Unit",
    "UnsupportedOperationError",
    "affine",
    "bel",
    "decibel",
    "neper",
    "new_dimension",
    "new_fundamental_pair",
    "new_unit",
    "take",
    "take_computed",
]
