"""Domain entities for the CRediT taxonomy."""
from __future__ import annotations

from credit_taxonomy.domain.entities.role_definition import CreditRoleDefinition

__all__: list[str] = ["CreditRoleDefinition"]
