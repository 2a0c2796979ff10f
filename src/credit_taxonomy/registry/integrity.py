"""Catalog integrity checks for the role taxonomy.

The declared prerequisites are advisory metadata and the registry does not
enforce them by default.  :func:`check_catalog_integrity` evaluates a catalog
once against the structural rules the data is expected to satisfy and
returns every violation found; a strict registry turns a non-empty result
into :class:`~credit_taxonomy.shared.exceptions.CatalogIntegrityError`.
"""
from __future__ import annotations

import enum
from collections import Counter, deque
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import structlog

from credit_taxonomy.domain.entities.role_definition import CreditRoleDefinition
from credit_taxonomy.domain.value_objects.credit_role import CreditRoleId, GovernanceRoleId

logger = structlog.get_logger(__name__)


class IntegrityRule(str, enum.Enum):
    """Rules a catalog is checked against."""

    DUPLICATE_ID = "duplicate_id"
    UNKNOWN_PREREQUISITE = "unknown_prerequisite"
    ORDER_INVERSION = "order_inversion"
    ORDER_NOT_CONTIGUOUS = "order_not_contiguous"
    GOVERNANCE_NOT_INJECTIVE = "governance_not_injective"
    MAPPING_MISMATCH = "mapping_mismatch"
    CYCLE = "cycle"


@dataclass(frozen=True, slots=True)
class IntegrityViolation:
    """A single broken rule.

    Attributes:
        rule: The rule that was violated.
        role_id: Credit role the violation is reported against, if any.
        detail: Human-readable explanation.
    """

    rule: IntegrityRule
    role_id: str | None
    detail: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule.value,
            "role_id": self.role_id,
            "detail": self.detail,
        }


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def _check_duplicate_ids(definitions: list[CreditRoleDefinition]) -> list[IntegrityViolation]:
    counts = Counter(d.id for d in definitions)
    return [
        IntegrityViolation(
            IntegrityRule.DUPLICATE_ID,
            role_id.value,
            f"declared {count} times",
        )
        for role_id, count in counts.items()
        if count > 1
    ]


def _check_prerequisites(definitions: list[CreditRoleDefinition]) -> list[IntegrityViolation]:
    by_id = {d.id: d for d in definitions}
    violations: list[IntegrityViolation] = []
    for definition in definitions:
        for dep in definition.depends_on:
            prerequisite = by_id.get(dep)
            if prerequisite is None:
                violations.append(IntegrityViolation(
                    IntegrityRule.UNKNOWN_PREREQUISITE,
                    definition.id.value,
                    f"prerequisite '{dep.value}' is not in the catalog",
                ))
            elif prerequisite.workflow_order >= definition.workflow_order:
                violations.append(IntegrityViolation(
                    IntegrityRule.ORDER_INVERSION,
                    definition.id.value,
                    f"prerequisite '{dep.value}' has order "
                    f"{prerequisite.workflow_order} >= {definition.workflow_order}",
                ))
    return violations


def _check_order_contiguous(definitions: list[CreditRoleDefinition]) -> list[IntegrityViolation]:
    orders = sorted(d.workflow_order for d in definitions)
    expected = list(range(1, len(definitions) + 1))
    if orders == expected:
        return []
    return [IntegrityViolation(
        IntegrityRule.ORDER_NOT_CONTIGUOUS,
        None,
        f"workflow orders {orders} are not exactly 1..{len(definitions)}",
    )]


def _check_mapping(
    definitions: list[CreditRoleDefinition],
    governance_map: Mapping[CreditRoleId, GovernanceRoleId],
) -> list[IntegrityViolation]:
    violations: list[IntegrityViolation] = []
    for definition in definitions:
        mapped = governance_map.get(definition.id)
        if mapped is None:
            violations.append(IntegrityViolation(
                IntegrityRule.MAPPING_MISMATCH,
                definition.id.value,
                "role is missing from the governance map",
            ))
        elif mapped != definition.governance_role:
            violations.append(IntegrityViolation(
                IntegrityRule.MAPPING_MISMATCH,
                definition.id.value,
                f"definition says '{definition.governance_role.value}', "
                f"map says '{mapped.value}'",
            ))

    owners: dict[GovernanceRoleId, list[CreditRoleId]] = {}
    for credit, governance in governance_map.items():
        owners.setdefault(governance, []).append(credit)
    for governance, credits in owners.items():
        if len(credits) > 1:
            violations.append(IntegrityViolation(
                IntegrityRule.GOVERNANCE_NOT_INJECTIVE,
                credits[1].value,
                f"'{governance.value}' is shared by "
                + ", ".join(c.value for c in credits),
            ))
    return violations


def _check_acyclic(definitions: list[CreditRoleDefinition]) -> list[IntegrityViolation]:
    """Kahn's algorithm over the declared prerequisite edges."""
    known = {d.id for d in definitions}
    indegree: dict[CreditRoleId, int] = {role_id: 0 for role_id in known}
    dependents: dict[CreditRoleId, list[CreditRoleId]] = {role_id: [] for role_id in known}
    for definition in definitions:
        for dep in set(definition.depends_on):
            if dep in known:
                indegree[definition.id] += 1
                dependents[dep].append(definition.id)

    queue = deque(role_id for role_id, degree in indegree.items() if degree == 0)
    visited = 0
    while queue:
        current = queue.popleft()
        visited += 1
        for dependent in dependents[current]:
            indegree[dependent] -= 1
            if indegree[dependent] == 0:
                queue.append(dependent)

    if visited == len(known):
        return []
    stuck = sorted(role_id.value for role_id, degree in indegree.items() if degree > 0)
    return [IntegrityViolation(
        IntegrityRule.CYCLE,
        stuck[0],
        "prerequisite cycle through " + ", ".join(stuck),
    )]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def check_catalog_integrity(
    definitions: Iterable[CreditRoleDefinition],
    governance_map: Mapping[CreditRoleId, GovernanceRoleId],
) -> list[IntegrityViolation]:
    """Return every integrity violation in the catalog (empty when sound)."""
    items = list(definitions)
    violations = [
        *_check_duplicate_ids(items),
        *_check_prerequisites(items),
        *_check_order_contiguous(items),
        *_check_mapping(items, governance_map),
        *_check_acyclic(items),
    ]
    for violation in violations:
        logger.warning(
            "catalog_integrity_violation",
            rule=violation.rule.value,
            role_id=violation.role_id,
            detail=violation.detail,
        )
    logger.debug(
        "catalog_integrity_checked",
        roles=len(items),
        violations=len(violations),
    )
    return violations
