from pymud.units.unit import (
    UNITLESS,
    CompoundUnitBuilder,
    FundamentalPair,
    FundamentalUnit,
    ReferencedUnitBuilder,
    Unit,
    UnitBuilder,
    new_fundamental_pair,
    new_unit,
)
from pymud.units.universe import (
    AMOUNT_OF_SUBSTANCE,
    AMPERE,
    CANDELA,
    ELECTRIC_CURRENT,
    KELVIN,
    KILOGRAM,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    METER,
    MOLE,
    SECOND,
    SI_BASE_UNITS,
    SI_BASES,
    THERMODYNAMIC_TEMPERATURE,
    TIME,
)

__all__ = [
    "AMOUNT_OF_SUBSTANCE",
    "AMPERE",
    "CANDELA",
    "CompoundUnitBuilder",
    "ELECTRIC_CURRENT",
    "FundamentalPair",
    "FundamentalUnit",
    "KELVIN",
    "KILOGRAM",
    "LENGTH",
    "LUMINOUS_INTENSITY",
    "MASS",
    "METER",
    "MOLE",
    "ReferencedUnitBuilder",
    "SECOND",
    "SI_BASES",
    "SI_BASE_UNITS",
    "THERMODYNAMIC_TEMPERATURE",
    "TIME",
    "UNITLESS",
    "Unit",
    "UnitBuilder",
    "new_fundamental_pair",
    "new_unit",
]
