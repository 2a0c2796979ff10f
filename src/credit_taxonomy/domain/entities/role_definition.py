"""CreditRoleDefinition entity -- one record of the role taxonomy.

Each definition bundles a credit role's identity, its bilingual names and
descriptions, its category, the governance role it maps onto, the roles it
declares as prerequisites and its position in a typical research workflow.
Definitions are frozen: the catalog is built once and never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from credit_taxonomy.domain.value_objects.credit_role import (
    CreditRoleCategory,
    CreditRoleId,
    GovernanceRoleId,
)
from credit_taxonomy.shared.exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class CreditRoleDefinition:
    """Complete definition of a single CRediT role.

    Attributes:
        id: Role identifier.
        name: Display name (English, Title Case).
        name_zh: Display name (Traditional Chinese).
        description: Definition text from ANSI/NISO Z39.104-2022.
        description_zh: Chinese definition text.
        category: Structural / operational / validation grouping.
        governance_role: Governance role this credit role maps onto.
        depends_on: Roles that typically precede this one.  Advisory only;
            nothing enforces them at runtime.
        workflow_order: Position in a typical research workflow (1-based).
    """

    id: CreditRoleId
    name: str
    name_zh: str
    description: str
    description_zh: str
    category: CreditRoleCategory
    governance_role: GovernanceRoleId
    depends_on: tuple[CreditRoleId, ...] = field(default_factory=tuple)
    workflow_order: int = 1

    def __post_init__(self) -> None:
        # Raw strings must match an enum value exactly; lists become tuples.
        object.__setattr__(self, "id", CreditRoleId.from_string(self.id, strict=True))
        object.__setattr__(
            self, "category", CreditRoleCategory.from_string(self.category, strict=True)
        )
        object.__setattr__(
            self,
            "governance_role",
            GovernanceRoleId.from_string(self.governance_role, strict=True),
        )
        object.__setattr__(
            self,
            "depends_on",
            tuple(CreditRoleId.from_string(dep, strict=True) for dep in self.depends_on),
        )
        if self.workflow_order < 1:
            raise InvalidArgumentError(
                f"workflow_order must be >= 1, got {self.workflow_order}",
                context={"role_id": str(self.id)},
            )
        if self.id in self.depends_on:
            raise InvalidArgumentError(
                f"Role '{self.id.value}' cannot depend on itself",
                context={"role_id": self.id.value},
            )

    # -- convenience --------------------------------------------------------

    @property
    def is_root(self) -> bool:
        """Return True when the role declares no prerequisites."""
        return not self.depends_on

    def depends_on_role(self, role_id: CreditRoleId) -> bool:
        """Return True if *role_id* is a declared prerequisite."""
        return role_id in self.depends_on

    # -- serialisation ------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary with every field."""
        return {
            "id": self.id.value,
            "name": self.name,
            "name_zh": self.name_zh,
            "description": self.description,
            "description_zh": self.description_zh,
            "category": self.category.value,
            "governance_role": self.governance_role.value,
            "depends_on": [dep.value for dep in self.depends_on],
            "workflow_order": self.workflow_order,
        }

    def to_compact_dict(self) -> dict[str, Any]:
        """Serialize to the minimal ``{id, cat, gov, ord, dep}`` field set."""
        return {
            "id": self.id.value,
            "cat": self.category.code,
            "gov": self.governance_role.value,
            "ord": self.workflow_order,
            "dep": [dep.value for dep in self.depends_on],
        }
