"""SI base dimensions and the common derived dimensions."""

from __future__ import annotations

from pymud.algebra.dimension import Dimension, new_dimension
from pymud.algebra.exponent import ExponentLike
from pymud.units.universe import (
    AMOUNT_OF_SUBSTANCE,
    DIMENSIONLESS,
    ELECTRIC_CURRENT,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    THERMODYNAMIC_TEMPERATURE,
    TIME,
)


def _derived(name: str, symbol: str, *terms: tuple[Dimension, ExponentLike]) -> Dimension:
    builder = new_dimension()
    for dimension, exponent in terms:
        builder = builder.append(dimension, exponent)
    return builder.with_name(name).with_symbol(symbol).create()


ACCELERATION = _derived("ACCELERATION", "a", (LENGTH, 1), (TIME, -2))
ANGULAR_ACCELERATION = _derived("ANGULAR ACCELERATION", "α", (TIME, -2))
AREA = _derived("AREA", "A", (LENGTH, 2))
CATALYTIC_ACTIVITY = _derived("CATALYTIC ACTIVITY", "z", (AMOUNT_OF_SUBSTANCE, 1), (TIME, -1))
ELECTRIC_CHARGE = _derived("ELECTRIC CHARGE", "Q", (ELECTRIC_CURRENT, 1), (TIME, 1))
FREQUENCY = _derived("FREQUENCY", "f", (TIME, -1))
LINEAR_MASS_DENSITY = _derived("LINEAR MASS DENSITY", "q", (MASS, 1), (LENGTH, -1))
ANGLE = _derived("ANGLE", "ϕ", (DIMENSIONLESS, 1))
SOLID_ANGLE = _derived("SOLID ANGLE", "Ω", (DIMENSIONLESS, 1))
STRAIN = _derived("STRAIN", "ε", (DIMENSIONLESS, 1))
VELOCITY = _derived("VELOCITY", "v", (LENGTH, 1), (TIME, -1))
VOLUME = _derived("VOLUME", "V", (LENGTH, 3))

ANGULAR_VELOCITY = _derived("ANGULAR VELOCITY", "ω", (FREQUENCY, 1))
AREA_MASS_DENSITY = _derived("AREA MASS DENSITY", "ρ_A", (MASS, 1), (AREA, -1))
FORCE = _derived("FORCE", "F", (MASS, 1), (ACCELERATION, 1))
LUMINOUS_FLUX = _derived("LUMINOUS FLUX", "ϕ_V", (LUMINOUS_INTENSITY, 1), (SOLID_ANGLE, 1))
MASS_DENSITY = _derived("MASS DENSITY", "ρ", (MASS, 1), (VOLUME, -1))
RADIOACTIVITY = _derived("RADIOACTIVITY", "A", (FREQUENCY, 1))

ILLUMINANCE = _derived("ILLUMINANCE", "E_V", (LUMINOUS_FLUX, 1), (AREA, -1))
LINEAR_WEIGHT_DENSITY = _derived("LINEAR WEIGHT DENSITY", "q", (FORCE, 1), (LENGTH, -1))
MOMENT = _derived("MOMENT", "M", (FORCE, 1), (LENGTH, 1))
PRESSURE = _derived("PRESSURE", "p", (FORCE, 1), (AREA, -1))
WEIGHT = _derived("WEIGHT", "W", (FORCE, 1))
WEIGHT_DENSITY = _derived("WEIGHT DENSITY", "γ", (FORCE, 1), (VOLUME, -1))

AREA_WEIGHT_DENSITY = _derived("AREA WEIGHT DENSITY", "w", (PRESSURE, 1))
ENERGY = _derived("ENERGY", "E", (MOMENT, 1))
STRESS = _derived("STRESS", "σ", (PRESSURE, 1))

ABSORBED_DOSE = _derived("ABSORBED DOSE", "D", (ENERGY, 1), (MASS, -1))
POWER = _derived("POWER", "P", (ENERGY, 1), (TIME, -1))

ELECTRIC_POTENTIAL = _derived("ELECTRIC POTENTIAL", "φ", (POWER, 1), (ELECTRIC_CURRENT, -1))

ELECTRIC_CAPACITANCE = _derived(
    "ELECTRIC CAPACITANCE", "C", (ELECTRIC_CHARGE, 1), (ELECTRIC_POTENTIAL, -1)
)
ELECTRIC_RESISTANCE = _derived(
    "ELECTRIC RESISTANCE", "R", (ELECTRIC_POTENTIAL, 1), (ELECTRIC_CURRENT, -1)
)
ELECTRIC_CONDUCTANCE = _derived(
    "ELECTRIC CONDUCTANCE", "S", (ELECTRIC_CURRENT, 1), (ELECTRIC_POTENTIAL, -1)
)
MAGNETIC_FLUX = _derived("MAGNETIC FLUX", "Φ", (ELECTRIC_POTENTIAL, 1), (TIME, 1))

AREA_MAGNETIC_FLUX_DENSITY = _derived(
    "AREA MAGNETIC FLUX DENSITY", "B", (MAGNETIC_FLUX, 1), (AREA, -1)
)
INDUCTANCE = _derived("INDUCTANCE", "L", (MAGNETIC_FLUX, 1), (ELECTRIC_CURRENT, -1))


__all__ = [
    "ABSORBED_DOSE",
    "ACCELERATION",
    "AMOUNT_OF_SUBSTANCE",
    "ANGLE",
    "ANGULAR_ACCELERATION",
    "ANGULAR_VELOCITY",
    "AREA",
    "AREA_MAGNETIC_FLUX_DENSITY",
    "AREA_MASS_DENSITY",
    "AREA_WEIGHT_DENSITY",
    "CATALYTIC_ACTIVITY",
    "DIMENSIONLESS",
    "ELECTRIC_CAPACITANCE",
    "ELECTRIC_CHARGE",
    "ELECTRIC_CONDUCTANCE",
    "ELECTRIC_CURRENT",
    "ELECTRIC_POTENTIAL",
    "ELECTRIC_RESISTANCE",
    "ENERGY",
    "FORCE",
    "FREQUENCY",
    "ILLUMINANCE",
    "INDUCTANCE",
    "LENGTH",
    "LINEAR_MASS_DENSITY",
    "LINEAR_WEIGHT_DENSITY",
    "LUMINOUS_FLUX",
    "LUMINOUS_INTENSITY",
    "MAGNETIC_FLUX",
    "MASS",
    "MASS_DENSITY",
    "MOMENT",
    "POWER",
    "PRESSURE",
    "RADIOACTIVITY",
    "SOLID_ANGLE",
    "STRAIN",
    "STRESS",
    "THERMODYNAMIC_TEMPERATURE",
    "TIME",
    "VELOCITY",
    "VOLUME",
    "WEIGHT",
    "WEIGHT_DENSITY",
]
