"""Exception hierarchy for the CRediT role taxonomy.

Every exception carries a machine-readable ``error_code`` and an arbitrary
``context`` dict for structured logging.  Ordinary "not found" lookups are
*not* exceptional: the registry returns ``None`` for those and only
:func:`~credit_taxonomy.registry.taxonomy_registry.require_role_definition`
raises :class:`RoleNotFoundError`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from credit_taxonomy.registry.integrity import IntegrityViolation


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class TaxonomyError(Exception):
    """Root exception for every taxonomy failure.

    Attributes:
        message:    Human-readable description.
        error_code: Machine-readable code (e.g. ``"CREDIT_ROLE_NOT_FOUND"``).
        context:    Arbitrary key-value context for structured logging.
    """

    def __init__(
        self,
        message: str = "Taxonomy error",
        error_code: str = "CREDIT_TAXONOMY_ERROR",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.context: dict[str, Any] = context or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code!r}, "
            f"message={self.message!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the exception for tooling output."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# ---------------------------------------------------------------------------
# Lookup / argument exceptions
# ---------------------------------------------------------------------------

class InvalidArgumentError(TaxonomyError, ValueError):
    """Raised when a string outside a closed enumeration is supplied."""

    def __init__(self, message: str = "Invalid argument", **kwargs: Any) -> None:
        super().__init__(
            message,
            error_code=kwargs.pop("error_code", "CREDIT_INVALID_ARGUMENT"),
            **kwargs,
        )


class RoleNotFoundError(TaxonomyError, LookupError):
    """Raised when a caller requires a role that the catalog does not hold."""

    def __init__(self, message: str = "Role not found", **kwargs: Any) -> None:
        super().__init__(
            message,
            error_code=kwargs.pop("error_code", "CREDIT_ROLE_NOT_FOUND"),
            **kwargs,
        )


# ---------------------------------------------------------------------------
# Catalog / export exceptions
# ---------------------------------------------------------------------------

class CatalogIntegrityError(TaxonomyError):
    """Raised by a strict registry when the catalog breaks an integrity rule."""

    def __init__(
        self,
        message: str = "Catalog integrity check failed",
        violations: list[IntegrityViolation] | None = None,
        **kwargs: Any,
    ) -> None:
        self.violations: list[IntegrityViolation] = list(violations or [])
        context = kwargs.pop("context", None) or {}
        context.setdefault("violations", [v.to_dict() for v in self.violations])
        super().__init__(
            message,
            error_code=kwargs.pop("error_code", "CREDIT_CATALOG_INTEGRITY"),
            context=context,
            **kwargs,
        )


class ExportFormatError(TaxonomyError, ValueError):
    """Raised when a serialized export cannot be parsed back."""

    def __init__(self, message: str = "Malformed taxonomy export", **kwargs: Any) -> None:
        super().__init__(
            message,
            error_code=kwargs.pop("error_code", "CREDIT_EXPORT_FORMAT"),
            **kwargs,
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "TaxonomyError",
    "InvalidArgumentError",
    "RoleNotFoundError",
    "CatalogIntegrityError",
    "ExportFormatError",
]
