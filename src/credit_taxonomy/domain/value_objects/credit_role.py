"""Identifier value objects for the CRediT role taxonomy.

Defines the closed enumerations that restrict the identifier domain:

* :class:`CreditRoleId` -- the 14 contributor roles of ANSI/NISO Z39.104-2022.
* :class:`CreditRoleCategory` -- structural / operational / validation grouping.
* :class:`GovernanceRoleId` -- the governance-role identifiers each credit role
  maps onto, grouped by :class:`GovernanceTier` prefix.

All enums subclass ``str`` so members compare equal to their raw values and
serialise to JSON without conversion.
"""
from __future__ import annotations

import enum
from typing import TypeVar

from credit_taxonomy.shared.exceptions import InvalidArgumentError

_E = TypeVar("_E", bound=enum.Enum)


def _parse_member(cls: type[_E], raw: str, strict: bool = False) -> _E:
    """Parse a string into a member of *cls*.

    Matching is case-insensitive and ignores surrounding whitespace unless
    *strict*, in which case *raw* must equal a member value exactly.
    """
    if isinstance(raw, cls):
        return raw
    if not isinstance(raw, str):
        raise InvalidArgumentError(
            f"{cls.__name__} expects a string, got {type(raw).__name__}",
            context={"enum": cls.__name__, "value": repr(raw)},
        )
    normalised = raw if strict else raw.strip().lower()
    try:
        return cls(normalised)
    except ValueError:
        valid = ", ".join(m.value for m in cls)
        raise InvalidArgumentError(
            f"Unknown {cls.__name__} '{raw}'. Valid values: {valid}",
            context={"enum": cls.__name__, "value": raw},
        ) from None


# ---------------------------------------------------------------------------
# Credit roles
# ---------------------------------------------------------------------------

class CreditRoleId(str, enum.Enum):
    """The 14 CRediT contributor roles (ANSI/NISO Z39.104-2022)."""

    # Ideas; formulation or evolution of overarching research goals and aims
    CONCEPTUALIZATION = "conceptualization"
    # Annotate, scrub and maintain research data
    DATA_CURATION = "data_curation"
    # Statistical, mathematical or computational techniques
    FORMAL_ANALYSIS = "formal_analysis"
    FUNDING_ACQUISITION = "funding_acquisition"
    # Performing experiments, data/evidence collection
    INVESTIGATION = "investigation"
    METHODOLOGY = "methodology"
    PROJECT_ADMINISTRATION = "project_administration"
    # Study materials, samples, instrumentation, computing resources
    RESOURCES = "resources"
    SOFTWARE = "software"
    SUPERVISION = "supervision"
    # Replication / reproducibility of results
    VALIDATION = "validation"
    VISUALIZATION = "visualization"
    WRITING_ORIGINAL_DRAFT = "writing_original_draft"
    WRITING_REVIEW_EDITING = "writing_review_editing"

    @classmethod
    def from_string(cls, raw: str, *, strict: bool = False) -> CreditRoleId:
        """Parse *raw* into a member.

        Raises :class:`InvalidArgumentError` if *raw* is not one of the 14 ids.
        """
        return _parse_member(cls, raw, strict)


class CreditRoleCategory(str, enum.Enum):
    """Informal grouping of credit roles for display and policy purposes.

    Values:
        STRUCTURAL: Conceptual and structural governance of the work.
        OPERATIONAL: Execution of the research and its outputs.
        VALIDATION: Verification and oversight.
    """

    STRUCTURAL = "structural"
    OPERATIONAL = "operational"
    VALIDATION = "validation"

    @property
    def code(self) -> str:
        """Single-character code used by the compact catalog (``s``/``o``/``v``)."""
        return self.value[0]

    @classmethod
    def from_string(cls, raw: str, *, strict: bool = False) -> CreditRoleCategory:
        return _parse_member(cls, raw, strict)


# ---------------------------------------------------------------------------
# Governance roles
# ---------------------------------------------------------------------------

class GovernanceTier(str, enum.Enum):
    """Prefix-derived tier of a governance role identifier."""

    GOVERNANCE = "governance"
    OPS = "ops"
    QA = "qa"

    @classmethod
    def from_string(cls, raw: str, *, strict: bool = False) -> GovernanceTier:
        return _parse_member(cls, raw, strict)


class GovernanceRoleId(str, enum.Enum):
    """Governance-role identifiers in the external attribution system."""

    # -- governance.*: structural / conceptual ------------------------------
    ARCHITECTURE = "governance.architecture"
    METHOD_DESIGN = "governance.method-design"
    EXECUTION_ORCHESTRATION = "governance.execution-orchestration"
    RESOURCE_ALLOCATION = "governance.resource-allocation"

    # -- ops.*: operational / execution -------------------------------------
    DATA_COLLECTION = "ops.data-collection"
    DATA_GOVERNANCE = "ops.data-governance"
    ANALYSIS = "ops.analysis"
    SOFTWARE_ENGINEERING = "ops.software-engineering"
    RESOURCE_PROVIDER = "ops.resource-provider"
    VISUALIZATION = "ops.visualization"
    AUTHORING_DRAFT = "ops.authoring-draft"
    AUTHORING_REVIEW = "ops.authoring-review"

    # -- qa.*: validation / oversight ---------------------------------------
    VALIDATION = "qa.validation"
    SUPERVISION = "qa.supervision"

    @property
    def tier(self) -> GovernanceTier:
        """Return the tier named by the identifier prefix."""
        return GovernanceTier(self.value.split(".", 1)[0])

    @classmethod
    def from_string(cls, raw: str, *, strict: bool = False) -> GovernanceRoleId:
        """Parse *raw* into a member.

        Raises :class:`InvalidArgumentError` for identifiers outside the
        enumeration.
        """
        return _parse_member(cls, raw, strict)
