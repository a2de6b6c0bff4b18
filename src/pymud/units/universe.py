"""The seven SI base dimensions and their base units."""

from __future__ import annotations

from pymud.algebra.dimension import DIMENSIONLESS, FundamentalDimension
from pymud.units.unit import UNITLESS, FundamentalUnit, new_fundamental_pair

_MASS = new_fundamental_pair("MASS", "M", "KILOGRAM", "kg")
_LENGTH = new_fundamental_pair("LENGTH", "L", "METER", "m")
_TIME = new_fundamental_pair("TIME", "T", "SECOND", "s")
_CURRENT = new_fundamental_pair("ELECTRIC CURRENT", "I", "AMPERE", "A")
_TEMPERATURE = new_fundamental_pair("THERMODYNAMIC TEMPERATURE", "θ", "KELVIN", "K")
_AMOUNT = new_fundamental_pair("AMOUNT OF SUBSTANCE", "N", "MOLE", "mol")
_LUMINOUS = new_fundamental_pair("LUMINOUS INTENSITY", "J", "CANDELA", "cd")

MASS = _MASS.fundamental_dimension
LENGTH = _LENGTH.fundamental_dimension
TIME = _TIME.fundamental_dimension
ELECTRIC_CURRENT = _CURRENT.fundamental_dimension
THERMODYNAMIC_TEMPERATURE = _TEMPERATURE.fundamental_dimension
AMOUNT_OF_SUBSTANCE = _AMOUNT.fundamental_dimension
LUMINOUS_INTENSITY = _LUMINOUS.fundamental_dimension

KILOGRAM = _MASS.fundamental_unit
METER = _LENGTH.fundamental_unit
SECOND = _TIME.fundamental_unit
AMPERE = _CURRENT.fundamental_unit
KELVIN = _TEMPERATURE.fundamental_unit
MOLE = _AMOUNT.fundamental_unit
CANDELA = _LUMINOUS.fundamental_unit

SI_BASES: tuple[FundamentalDimension, ...] = (
    MASS,
    LENGTH,
    TIME,
    ELECTRIC_CURRENT,
    THERMODYNAMIC_TEMPERATURE,
    AMOUNT_OF_SUBSTANCE,
    LUMINOUS_INTENSITY,
)

SI_BASE_UNITS: tuple[FundamentalUnit, ...] = tuple(d.fundamental_unit for d in SI_BASES)


__all__ = [
    "AMOUNT_OF_SUBSTANCE",
    "AMPERE",
    "CANDELA",
    "DIMENSIONLESS",
    "ELECTRIC_CURRENT",
    "KELVIN",
    "KILOGRAM",
    "LENGTH",
    "LUMINOUS_INTENSITY",
    "MASS",
    "METER",
    "MOLE",
    "SECOND",
    "SI_BASES",
    "SI_BASE_UNITS",
    "THERMODYNAMIC_TEMPERATURE",
    "TIME",
    "UNITLESS",
]
