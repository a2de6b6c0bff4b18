"""Build units from a JSON catalog document.

A catalog declares units by key. Each entry is one of::

    {"key": "KM_PER_H", "kind": "compound",
     "terms": [{"unit": "KM"}, {"unit": "HOUR", "exponent": -1}]}
    {"key": "THIRD_METER", "kind": "ratio", "numerator": 1, "denominator": 3, "of": "METER"}
    {"key": "KM", "kind": "exact", "factor": "1000", "of": "METER",
     "name": "KILOMETER", "symbol": "km", "dimension": "LENGTH"}

References resolve against the built-in catalog units and against keys
declared earlier in the same document.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

from pymud.algebra.dimension import Dimension
from pymud.algebra.exponent import Exponent
from pymud.catalog import dimensions as catalog_dimensions
from pymud.catalog import units as catalog_units
from pymud.errors import E_CATALOG_INVALID, E_CATALOG_UNKNOWN_REFERENCE, CatalogError
from pymud.units.unit import Unit, UnitBuilder, new_unit

logger = logging.getLogger(__name__)


def _builtin_units() -> dict[str, Unit]:
    return {
        name: value
        for name in catalog_units.__all__
        if isinstance(value := getattr(catalog_units, name), Unit)
    }


def _builtin_dimensions() -> dict[str, Dimension]:
    return {name: getattr(catalog_dimensions, name) for name in catalog_dimensions.__all__}


@dataclass(frozen=True, eq=False)
class UnitCatalog(Mapping[str, Unit]):
    name: str
    units: Mapping[str, Unit] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Unit:
        return self.units[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)


class UnitCatalogLoader:
    def __init__(
        self,
        schema_path: Path | None = None,
        known_units: Mapping[str, Unit] | None = None,
        known_dimensions: Mapping[str, Dimension] | None = None,
    ) -> None:
        self._schema_path = schema_path or _default_schema_path()
        self._known_units = dict(_builtin_units() if known_units is None else known_units)
        self._known_dimensions = dict(
            _builtin_dimensions() if known_dimensions is None else known_dimensions
        )

    def load(self, instance: Mapping[str, Any]) -> UnitCatalog:
        try:
            _validator(self._schema_path).validate(instance)
        except jsonschema.ValidationError as exc:
            location = "/".join(str(part) for part in exc.absolute_path) or None
            raise CatalogError(E_CATALOG_INVALID, exc.message, path=location) from exc

        scope = dict(self._known_units)
        declared: dict[str, Unit] = {}
        for index, entry in enumerate(instance["units"]):
            key = entry["key"]
            path = f"units/{index}"
            if key in declared:
                raise CatalogError(E_CATALOG_INVALID, f"duplicate unit key '{key}'", path=path)
            unit = self._build(entry, scope, path)
            declared[key] = unit
            scope[key] = unit

        name = str(instance.get("name", "catalog"))
        logger.debug("loaded unit catalog %s with %d units", name, len(declared))
        return UnitCatalog(name=name, units=declared)

    def load_path(self, path: Path) -> UnitCatalog:
        with open(path, "r", encoding="utf-8") as f:
            return self.load(json.load(f))

    def _build(self, entry: Mapping[str, Any], scope: Mapping[str, Unit], path: str) -> Unit:
        builder: UnitBuilder = new_unit()
        if "dimension" in entry:
            builder = builder.of_dimension(self._dimension(entry["dimension"], f"{path}/dimension"))

        kind = entry["kind"]
        if kind == "compound":
            terms = entry["terms"]
            first, *rest = terms
            stage = builder.as_(
                _lookup(scope, first["unit"], f"{path}/terms/0/unit"), _exponent(first)
            )
            for offset, term in enumerate(rest, start=1):
                stage = stage.multiply(
                    _lookup(scope, term["unit"], f"{path}/terms/{offset}/unit"), _exponent(term)
                )
        elif kind == "ratio":
            stage = (
                builder.as_the_ratio(entry["numerator"])
                .over(entry["denominator"])
                .of_a(_lookup(scope, entry["of"], f"{path}/of"))
            )
        else:
            stage = builder.as_exactly(entry["factor"]).of_a(
                _lookup(scope, entry["of"], f"{path}/of")
            )

        if "name" in entry:
            stage = stage.with_name(entry["name"])
        if "symbol" in entry:
            stage = stage.with_symbol(entry["symbol"])
        return stage.create()

    def _dimension(self, key: str, path: str) -> Dimension:
        try:
            return self._known_dimensions[key]
        except KeyError:
            raise CatalogError(
                E_CATALOG_UNKNOWN_REFERENCE, f"unknown dimension '{key}'", path=path
            ) from None


def _lookup(scope: Mapping[str, Unit], key: str, path: str) -> Unit:
    try:
        return scope[key]
    except KeyError:
        raise CatalogError(E_CATALOG_UNKNOWN_REFERENCE, f"unknown unit '{key}'", path=path) from None


def _exponent(term: Mapping[str, Any]) -> Exponent:
    return Exponent.of(term.get("exponent", 1), term.get("denominator", 1))


@lru_cache(maxsize=None)
def _validator(schema_path: Path) -> jsonschema.Draft202012Validator:
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def _default_schema_path() -> Path:
    return Path(__file__).resolve().parent / "schemas" / "unit_catalog.schema.json"


__all__ = ["UnitCatalog", "UnitCatalogLoader"]
