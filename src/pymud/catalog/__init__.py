"""Ready-made dimensions, units, constants and scales."""

from pymud.catalog import constants, dimensions, scales, units
from pymud.catalog.loader import UnitCatalog, UnitCatalogLoader

__all__ = [
    "UnitCatalog",
    "UnitCatalogLoader",
    "constants",
    "dimensions",
    "scales",
    "units",
]
