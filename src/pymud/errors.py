from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pymud.algebra.dimension import Composition

E_INCOMMENSURABLE_DIMENSION = "E_INCOMMENSURABLE_DIMENSION"
E_INVALID_EXPONENT = "E_INVALID_EXPONENT"
E_FIELD_ARITHMETIC = "E_FIELD_ARITHMETIC"
E_UNSUPPORTED_OPERATION = "E_UNSUPPORTED_OPERATION"
E_NUMBER_FORMAT = "E_NUMBER_FORMAT"
E_ILLEGAL_BUILDER_STATE = "E_ILLEGAL_BUILDER_STATE"
E_CATALOG_INVALID = "E_CATALOG_INVALID"
E_CATALOG_UNKNOWN_REFERENCE = "E_CATALOG_UNKNOWN_REFERENCE"


class IncommensurableDimensionError(ValueError):
    def __init__(
        self,
        left: Composition | None = None,
        right: Composition | None = None,
        message: str | None = None,
    ) -> None:
        self.code = E_INCOMMENSURABLE_DIMENSION
        self.left = left
        self.right = right
        if message is None:
            message = f"cannot combine [{left}] with [{right}]"
        super().__init__(f"{self.code}: {message}")


class InvalidExponentError(ValueError):
    def __init__(self, message: str) -> None:
        self.code = E_INVALID_EXPONENT
        super().__init__(f"{self.code}: {message}")


class FieldArithmeticError(ArithmeticError):
    def __init__(self, message: str, code: str = E_FIELD_ARITHMETIC) -> None:
        self.code = code
        super().__init__(f"{code}: {message}")


class UnsupportedOperationError(FieldArithmeticError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code=E_UNSUPPORTED_OPERATION)


class NumberFormatError(ValueError):
    def __init__(self, text: object, message: str | None = None) -> None:
        self.code = E_NUMBER_FORMAT
        self.text = text
        super().__init__(f"{self.code}: {message or f'cannot parse {text!r} as a number'}")


class IllegalBuilderStateError(RuntimeError):
    def __init__(self, message: str) -> None:
        self.code = E_ILLEGAL_BUILDER_STATE
        super().__init__(f"{self.code}: {message}")


class CatalogError(ValueError):
    def __init__(self, code: str, message: str, path: str | None = None) -> None:
        self.code = code
        self.message = message
        self.path = path
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.path:
            return f"{self.code}: {self.message} ({self.path})"
        return f"{self.code}: {self.message}"


__all__ = [
    "CatalogError",
    "E_CATALOG_INVALID",
    "E_CATALOG_UNKNOWN_REFERENCE",
    "E_FIELD_ARITHMETIC",
    "E_ILLEGAL_BUILDER_STATE",
    "E_INCOMMENSURABLE_DIMENSION",
    "E_INVALID_EXPONENT",
    "E_NUMBER_FORMAT",
    "E_UNSUPPORTED_OPERATION",
    "FieldArithmeticError",
    "IllegalBuilderStateError",
    "IncommensurableDimensionError",
    "InvalidExponentError",
    "NumberFormatError",
    "UnsupportedOperationError",
]
