"""Export schemas for the CRediT role taxonomy.

Pydantic v2 models declaring the two single-line JSON blobs consumed by
non-programmatic tooling:

* :class:`GovernanceMappingExport` -- ``{"creditToGovernance": {...}}`` for
  ``.governance`` configuration files.
* :class:`CompactCatalogExport` -- ``[{"id", "cat", "gov", "ord", "dep"}, ...]``.

``model_dump_json`` renders without whitespace and preserves field and key
insertion order, which keeps the output byte-stable across calls.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, field_validator

from credit_taxonomy.domain.value_objects.credit_role import CreditRoleId, GovernanceRoleId
from credit_taxonomy.shared.exceptions import ExportFormatError


def _known(value: str, enum_cls: type[CreditRoleId] | type[GovernanceRoleId]) -> str:
    try:
        return enum_cls(value).value
    except ValueError:
        raise ValueError(f"unknown {enum_cls.__name__} '{value}'") from None


# ============================================================================
# Credit -> governance mapping
# ============================================================================

class GovernanceMappingExport(BaseModel):
    """Credit-role to governance-role mapping document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    credit_to_governance: dict[str, str] = Field(
        ...,
        alias="creditToGovernance",
        description="Credit role id -> governance role id, one-to-one.",
    )

    @field_validator("credit_to_governance")
    @classmethod
    def _validate_ids(cls, value: dict[str, str]) -> dict[str, str]:
        checked = {
            _known(credit, CreditRoleId): _known(governance, GovernanceRoleId)
            for credit, governance in value.items()
        }
        if len(set(checked.values())) != len(checked):
            raise ValueError("governance roles must not be shared between credit roles")
        return checked

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


# ============================================================================
# Compact catalog
# ============================================================================

class CompactRoleEntry(BaseModel):
    """Minimal per-role record: id, category code, governance role, order, deps."""

    model_config = ConfigDict(frozen=True)

    id: str
    cat: Literal["s", "o", "v"]
    gov: str
    ord: int = Field(..., ge=1)
    dep: list[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        return _known(value, CreditRoleId)

    @field_validator("gov")
    @classmethod
    def _validate_gov(cls, value: str) -> str:
        return _known(value, GovernanceRoleId)

    @field_validator("dep")
    @classmethod
    def _validate_dep(cls, value: list[str]) -> list[str]:
        return [_known(dep, CreditRoleId) for dep in value]


class CompactCatalogExport(RootModel[list[CompactRoleEntry]]):
    """Ordered list of compact role entries."""

    def to_json(self) -> str:
        return self.model_dump_json()


# ============================================================================
# Parsing helpers
# ============================================================================

def parse_compact_mapping(text: str | bytes) -> GovernanceMappingExport:
    """Parse a serialized governance mapping.

    Raises :class:`ExportFormatError` when *text* is not valid JSON or does not
    match the schema.
    """
    try:
        return GovernanceMappingExport.model_validate_json(text)
    except ValidationError as exc:
        raise ExportFormatError(
            "Invalid governance mapping export",
            context={"errors": exc.errors(include_url=False)},
        ) from exc


def parse_compact_catalog(text: str | bytes) -> CompactCatalogExport:
    """Parse a serialized compact catalog; see :func:`parse_compact_mapping`."""
    try:
        return CompactCatalogExport.model_validate_json(text)
    except ValidationError as exc:
        raise ExportFormatError(
            "Invalid compact catalog export",
            context={"errors": exc.errors(include_url=False)},
        ) from exc


__all__ = [
    "GovernanceMappingExport",
    "CompactRoleEntry",
    "CompactCatalogExport",
    "parse_compact_mapping",
    "parse_compact_catalog",
]
