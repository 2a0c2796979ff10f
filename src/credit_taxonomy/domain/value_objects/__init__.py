"""Value objects for the CRediT taxonomy domain layer.

Re-exports all public value objects so consumers can write::

    from credit_taxonomy.domain.value_objects import CreditRoleId, GovernanceRoleId
"""
from __future__ import annotations

from credit_taxonomy.domain.value_objects.credit_role import (
    CreditRoleCategory,
    CreditRoleId,
    GovernanceRoleId,
    GovernanceTier,
)

__all__: list[str] = [
    "CreditRoleCategory",
    "CreditRoleId",
    "GovernanceRoleId",
    "GovernanceTier",
]
