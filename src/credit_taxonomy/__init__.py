"""CRediT contributor roles taxonomy (ANSI/NISO Z39.104-2022).

Encodes the 14 contributor roles, their mapping onto governance roles and
their declared workflow order, and exposes read-only lookups plus two
single-line JSON exports for tooling::

    from credit_taxonomy import get_governance_role, serialize_compact_mapping

    get_governance_role("software")   # GovernanceRoleId.SOFTWARE_ENGINEERING
    serialize_compact_mapping()       # '{"creditToGovernance":{...}}'
"""
from __future__ import annotations

from credit_taxonomy.domain.entities.role_definition import CreditRoleDefinition
from credit_taxonomy.domain.value_objects.credit_role import (
    CreditRoleCategory,
    CreditRoleId,
    GovernanceRoleId,
    GovernanceTier,
)
from credit_taxonomy.registry.catalog import CREDIT_ROLE_DEFINITIONS, CREDIT_TO_GOVERNANCE_MAP
from credit_taxonomy.registry.integrity import (
    IntegrityRule,
    IntegrityViolation,
    check_catalog_integrity,
)
from credit_taxonomy.registry.taxonomy_registry import (
    RoleTaxonomyRegistry,
    get_credit_role,
    get_dependents,
    get_governance_role,
    get_registry,
    get_role_definition,
    get_roles_by_category,
    get_roles_by_governance_tier,
    get_roles_in_workflow_order,
    require_role_definition,
    serialize_compact_catalog,
    serialize_compact_mapping,
)
from credit_taxonomy.shared.exceptions import (
    CatalogIntegrityError,
    ExportFormatError,
    InvalidArgumentError,
    RoleNotFoundError,
    TaxonomyError,
)
from credit_taxonomy.shared.schemas import parse_compact_catalog, parse_compact_mapping

__version__ = "1.0.0"

# Serialized once at import for tooling that reads constants directly.
CREDIT_TO_GOVERNANCE_JSON: str = serialize_compact_mapping()
CREDIT_ROLES_MINIFIED: str = serialize_compact_catalog()

__all__ = [
    "CREDIT_ROLES_MINIFIED",
    "CREDIT_ROLE_DEFINITIONS",
    "CREDIT_TO_GOVERNANCE_JSON",
    "CREDIT_TO_GOVERNANCE_MAP",
    "CatalogIntegrityError",
    "CreditRoleCategory",
    "CreditRoleDefinition",
    "CreditRoleId",
    "ExportFormatError",
    "GovernanceRoleId",
    "GovernanceTier",
    "IntegrityRule",
    "IntegrityViolation",
    "InvalidArgumentError",
    "RoleNotFoundError",
    "RoleTaxonomyRegistry",
    "TaxonomyError",
    "check_catalog_integrity",
    "get_credit_role",
    "get_dependents",
    "get_governance_role",
    "get_registry",
    "get_role_definition",
    "get_roles_by_category",
    "get_roles_by_governance_tier",
    "get_roles_in_workflow_order",
    "parse_compact_catalog",
    "parse_compact_mapping",
    "require_role_definition",
    "serialize_compact_catalog",
    "serialize_compact_mapping",
]
