"""Affine temperature scales."""

from __future__ import annotations

from pymud.catalog.units import KELVIN, RANKINE
from pymud.scale import affine

CELSIUS = affine("CELSIUS", "C", KELVIN, "273.15")
FAHRENHEIT = affine("FAHRENHEIT", "F", RANKINE, "459.67")


__all__ = ["CELSIUS", "FAHRENHEIT"]
