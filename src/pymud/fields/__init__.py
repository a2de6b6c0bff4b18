"""Numeric backends a deferred value can be evaluated in."""

from pymud.fields.base import Field, FieldFactory, FieldLike
from pymud.fields.bigdecimal import (
    DECIMAL128,
    DECIMAL_SCALE_2,
    DecimalField,
    DecimalFieldConfig,
    DecimalFieldFactory,
)
from pymud.fields.double import DOUBLE, DoubleField, DoubleFieldFactory
from pymud.fields.uncertain import UNCERTAIN, UncertainField, UncertainFieldFactory

__all__ = [
    "DECIMAL128",
    "DECIMAL_SCALE_2",
    "DOUBLE",
    "DecimalField",
    "DecimalFieldConfig",
    "DecimalFieldFactory",
    "DoubleField",
    "DoubleFieldFactory",
    "Field",
    "FieldFactory",
    "FieldLike",
    "UNCERTAIN",
    "UncertainField",
    "UncertainFieldFactory",
]
