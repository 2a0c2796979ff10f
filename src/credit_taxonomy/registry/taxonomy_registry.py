"""Role Taxonomy Registry -- read-only queries over the CRediT catalog.

The registry holds the role definitions and the credit -> governance map,
indexes them once at construction and answers lookups without ever mutating
its storage.  A process-wide default instance backs the module-level helper
functions; it is safe to share between threads because nothing is written
after construction.

Lookups that accept raw strings return ``None`` for unknown ids instead of
raising.  :func:`get_governance_role` is the exception: it is total over the
known ids and raises :class:`InvalidArgumentError` for anything else.
"""
from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

import structlog

from credit_taxonomy.config import get_settings
from credit_taxonomy.domain.entities.role_definition import CreditRoleDefinition
from credit_taxonomy.domain.value_objects.credit_role import (
    CreditRoleCategory,
    CreditRoleId,
    GovernanceRoleId,
    GovernanceTier,
)
from credit_taxonomy.registry.catalog import CREDIT_ROLE_DEFINITIONS, CREDIT_TO_GOVERNANCE_MAP
from credit_taxonomy.registry.integrity import check_catalog_integrity
from credit_taxonomy.shared.exceptions import (
    CatalogIntegrityError,
    RoleNotFoundError,
)
from credit_taxonomy.shared.schemas import (
    CompactCatalogExport,
    CompactRoleEntry,
    GovernanceMappingExport,
)

logger = structlog.get_logger(__name__)


def _coerce_credit_role(raw: object) -> CreditRoleId | None:
    if isinstance(raw, CreditRoleId):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return CreditRoleId(raw)
    except ValueError:
        return None


def _coerce_governance_role(raw: object) -> GovernanceRoleId | None:
    if isinstance(raw, GovernanceRoleId):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return GovernanceRoleId(raw)
    except ValueError:
        return None


class RoleTaxonomyRegistry:
    """Immutable catalog of credit role definitions plus lookup helpers.

    Args:
        definitions: Role definitions in declaration order.
        governance_map: Credit role -> governance role mapping.  Its key
            order is the key order of :meth:`serialize_compact_mapping`.
        strict: Run :func:`check_catalog_integrity` and raise
            :class:`CatalogIntegrityError` if the catalog is unsound.
    """

    def __init__(
        self,
        definitions: Iterable[CreditRoleDefinition],
        governance_map: Mapping[CreditRoleId, GovernanceRoleId],
        *,
        strict: bool = False,
    ) -> None:
        self._definitions: tuple[CreditRoleDefinition, ...] = tuple(definitions)
        self._governance_map: Mapping[CreditRoleId, GovernanceRoleId] = MappingProxyType({
            CreditRoleId.from_string(credit, strict=True):
                GovernanceRoleId.from_string(governance, strict=True)
            for credit, governance in governance_map.items()
        })

        if strict:
            violations = check_catalog_integrity(self._definitions, self._governance_map)
            if violations:
                raise CatalogIntegrityError(
                    f"Catalog has {len(violations)} integrity violation(s)",
                    violations=violations,
                )

        # First declaration wins for duplicated ids.
        by_id: dict[CreditRoleId, CreditRoleDefinition] = {}
        for definition in self._definitions:
            by_id.setdefault(definition.id, definition)
        self._by_id = MappingProxyType(by_id)

        by_governance: dict[GovernanceRoleId, CreditRoleId] = {}
        for credit, governance in self._governance_map.items():
            by_governance.setdefault(governance, credit)
        self._by_governance = MappingProxyType(by_governance)

        logger.debug(
            "registry_initialised",
            roles=len(self._definitions),
            governance_roles=len(self._by_governance),
            strict=strict,
        )

    # -- read-only views ----------------------------------------------------

    @property
    def definitions(self) -> tuple[CreditRoleDefinition, ...]:
        """All definitions in declaration order."""
        return self._definitions

    @property
    def governance_map(self) -> Mapping[CreditRoleId, GovernanceRoleId]:
        """Read-only credit -> governance mapping."""
        return self._governance_map

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, role_id: object) -> bool:
        coerced = _coerce_credit_role(role_id)
        return coerced is not None and coerced in self._by_id

    # -- lookups ------------------------------------------------------------

    def get_role_definition(self, role_id: CreditRoleId | str) -> CreditRoleDefinition | None:
        """Return the definition for *role_id*, or ``None`` if unknown."""
        coerced = _coerce_credit_role(role_id)
        definition = self._by_id.get(coerced) if coerced is not None else None
        if definition is None:
            logger.debug("role_lookup_miss", role_id=str(role_id))
        return definition

    def require_role_definition(self, role_id: CreditRoleId | str) -> CreditRoleDefinition:
        """Like :meth:`get_role_definition` but raise :class:`RoleNotFoundError`."""
        definition = self.get_role_definition(role_id)
        if definition is None:
            raise RoleNotFoundError(
                f"Unknown credit role '{role_id}'",
                context={"role_id": str(role_id)},
            )
        return definition

    def get_roles_by_category(
        self, category: CreditRoleCategory | str
    ) -> list[CreditRoleDefinition]:
        """Return roles in *category*, in declaration order.

        Raises :class:`InvalidArgumentError` if *category* is not a known value.
        """
        wanted = CreditRoleCategory.from_string(category, strict=True)
        return [d for d in self._definitions if d.category == wanted]

    def get_roles_by_governance_tier(
        self, tier: GovernanceTier | str
    ) -> list[CreditRoleDefinition]:
        """Return roles whose governance role sits in *tier*."""
        wanted = GovernanceTier.from_string(tier, strict=True)
        return [d for d in self._definitions if d.governance_role.tier == wanted]

    def get_governance_role(self, credit_role: CreditRoleId | str) -> GovernanceRoleId:
        """Return the governance role mapped to *credit_role*.

        Raises :class:`InvalidArgumentError` for ids outside the enumeration
        and :class:`RoleNotFoundError` if this registry does not map the role.
        """
        role_id = CreditRoleId.from_string(credit_role, strict=True)
        governance = self._governance_map.get(role_id)
        if governance is None:
            raise RoleNotFoundError(
                f"Credit role '{role_id.value}' has no governance mapping",
                context={"role_id": role_id.value},
            )
        return governance

    def get_credit_role(self, governance_role: GovernanceRoleId | str) -> CreditRoleId | None:
        """Reverse lookup; ``None`` when no credit role maps to *governance_role*."""
        coerced = _coerce_governance_role(governance_role)
        credit = self._by_governance.get(coerced) if coerced is not None else None
        if credit is None:
            logger.debug("governance_lookup_miss", governance_role=str(governance_role))
        return credit

    def get_roles_in_workflow_order(self) -> list[CreditRoleDefinition]:
        """Return a fresh list of all roles sorted by ``workflow_order``.

        ``sorted`` is stable, so roles sharing an order keep declaration order.
        """
        return sorted(self._definitions, key=lambda d: d.workflow_order)

    def get_dependents(self, role_id: CreditRoleId | str) -> list[CreditRoleDefinition]:
        """Return roles that declare *role_id* as a prerequisite.

        Unknown ids yield an empty list.
        """
        coerced = _coerce_credit_role(role_id)
        if coerced is None:
            return []
        return [d for d in self._definitions if coerced in d.depends_on]

    # -- serialisation ------------------------------------------------------

    def mapping_export(self) -> GovernanceMappingExport:
        """Return the governance map as a validated export model.

        Key order follows the registry's governance map.  Use this instead of
        :meth:`serialize_compact_mapping` to post-process before rendering.
        """
        return GovernanceMappingExport(
            credit_to_governance={
                credit.value: governance.value
                for credit, governance in self._governance_map.items()
            }
        )

    def catalog_export(self) -> CompactCatalogExport:
        """Return every definition as a compact entry, in declaration order."""
        return CompactCatalogExport(
            [CompactRoleEntry(**d.to_compact_dict()) for d in self._definitions]
        )

    def serialize_compact_mapping(self) -> str:
        """Single-line JSON ``{"creditToGovernance": {...}}``."""
        return self.mapping_export().to_json()

    def serialize_compact_catalog(self) -> str:
        """Single-line JSON array of ``{id, cat, gov, ord, dep}`` records."""
        return self.catalog_export().to_json()


# ---------------------------------------------------------------------------
# Process-wide default registry
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def get_registry() -> RoleTaxonomyRegistry:
    """Return the default registry over the built-in CRediT catalog."""
    return RoleTaxonomyRegistry(
        CREDIT_ROLE_DEFINITIONS,
        CREDIT_TO_GOVERNANCE_MAP,
        strict=get_settings().strict_catalog,
    )


def get_role_definition(role_id: CreditRoleId | str) -> CreditRoleDefinition | None:
    return get_registry().get_role_definition(role_id)


def require_role_definition(role_id: CreditRoleId | str) -> CreditRoleDefinition:
    return get_registry().require_role_definition(role_id)


def get_roles_by_category(category: CreditRoleCategory | str) -> list[CreditRoleDefinition]:
    return get_registry().get_roles_by_category(category)


def get_roles_by_governance_tier(tier: GovernanceTier | str) -> list[CreditRoleDefinition]:
    return get_registry().get_roles_by_governance_tier(tier)


def get_governance_role(credit_role: CreditRoleId | str) -> GovernanceRoleId:
    return get_registry().get_governance_role(credit_role)


def get_credit_role(governance_role: GovernanceRoleId | str) -> CreditRoleId | None:
    return get_registry().get_credit_role(governance_role)


def get_roles_in_workflow_order() -> list[CreditRoleDefinition]:
    return get_registry().get_roles_in_workflow_order()


def get_dependents(role_id: CreditRoleId | str) -> list[CreditRoleDefinition]:
    return get_registry().get_dependents(role_id)


def serialize_compact_mapping() -> str:
    return get_registry().serialize_compact_mapping()


def serialize_compact_catalog() -> str:
    return get_registry().serialize_compact_catalog()
