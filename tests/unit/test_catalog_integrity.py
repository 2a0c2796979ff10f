"""Test catalog integrity checks and strict registry construction."""

import dataclasses

import pytest

from credit_taxonomy import (
    CREDIT_ROLE_DEFINITIONS,
    CREDIT_TO_GOVERNANCE_MAP,
    CatalogIntegrityError,
    CreditRoleId,
    GovernanceRoleId,
    IntegrityRule,
    RoleTaxonomyRegistry,
    check_catalog_integrity,
)


def _replace(role_id, **changes):
    """Return the built-in catalog with one definition altered."""
    return [
        dataclasses.replace(d, **changes) if d.id is role_id else d
        for d in CREDIT_ROLE_DEFINITIONS
    ]


def _rules(violations):
    return {v.rule for v in violations}


def test_builtin_catalog_is_sound():
    assert check_catalog_integrity(CREDIT_ROLE_DEFINITIONS, CREDIT_TO_GOVERNANCE_MAP) == []


def test_strict_registry_accepts_builtin_catalog():
    registry = RoleTaxonomyRegistry(CREDIT_ROLE_DEFINITIONS, CREDIT_TO_GOVERNANCE_MAP, strict=True)
    assert len(registry) == 14


def test_unknown_prerequisite():
    definitions = [d for d in CREDIT_ROLE_DEFINITIONS if d.id is not CreditRoleId.RESOURCES]
    violations = check_catalog_integrity(definitions, CREDIT_TO_GOVERNANCE_MAP)
    assert IntegrityRule.UNKNOWN_PREREQUISITE in _rules(violations)
    unknown = [v for v in violations if v.rule is IntegrityRule.UNKNOWN_PREREQUISITE]
    assert unknown[0].role_id == "investigation"


def test_order_inversion():
    definitions = _replace(CreditRoleId.SOFTWARE, depends_on=(CreditRoleId.VISUALIZATION,))
    violations = check_catalog_integrity(definitions, CREDIT_TO_GOVERNANCE_MAP)
    assert _rules(violations) == {IntegrityRule.ORDER_INVERSION}
    assert violations[0].role_id == "software"


def test_order_not_contiguous():
    definitions = _replace(CreditRoleId.SUPERVISION, workflow_order=20)
    violations = check_catalog_integrity(definitions, CREDIT_TO_GOVERNANCE_MAP)
    assert IntegrityRule.ORDER_NOT_CONTIGUOUS in _rules(violations)


def test_duplicate_id():
    definitions = [*CREDIT_ROLE_DEFINITIONS, CREDIT_ROLE_DEFINITIONS[0]]
    violations = check_catalog_integrity(definitions, CREDIT_TO_GOVERNANCE_MAP)
    assert IntegrityRule.DUPLICATE_ID in _rules(violations)


def test_governance_not_injective():
    mapping = dict(CREDIT_TO_GOVERNANCE_MAP)
    mapping[CreditRoleId.SOFTWARE] = GovernanceRoleId.ANALYSIS
    violations = check_catalog_integrity(CREDIT_ROLE_DEFINITIONS, mapping)
    rules = _rules(violations)
    assert IntegrityRule.GOVERNANCE_NOT_INJECTIVE in rules
    assert IntegrityRule.MAPPING_MISMATCH in rules


def test_missing_mapping():
    mapping = dict(CREDIT_TO_GOVERNANCE_MAP)
    del mapping[CreditRoleId.SUPERVISION]
    violations = check_catalog_integrity(CREDIT_ROLE_DEFINITIONS, mapping)
    assert [v.detail for v in violations] == ["role is missing from the governance map"]


def test_cycle_detected():
    definitions = _replace(
        CreditRoleId.CONCEPTUALIZATION,
        depends_on=(CreditRoleId.SUPERVISION,),
    )
    violations = check_catalog_integrity(definitions, CREDIT_TO_GOVERNANCE_MAP)
    rules = _rules(violations)
    assert IntegrityRule.CYCLE in rules
    assert IntegrityRule.ORDER_INVERSION in rules


def test_non_strict_registry_keeps_inert_cycle():
    definitions = _replace(
        CreditRoleId.CONCEPTUALIZATION,
        depends_on=(CreditRoleId.SUPERVISION,),
    )
    registry = RoleTaxonomyRegistry(definitions, CREDIT_TO_GOVERNANCE_MAP)
    assert registry.get_role_definition("conceptualization").depends_on == (CreditRoleId.SUPERVISION,)


def test_strict_registry_rejects_broken_catalog():
    definitions = _replace(CreditRoleId.SOFTWARE, depends_on=(CreditRoleId.VISUALIZATION,))
    with pytest.raises(CatalogIntegrityError, match="1 integrity violation") as exc_info:
        RoleTaxonomyRegistry(definitions, CREDIT_TO_GOVERNANCE_MAP, strict=True)
    error = exc_info.value
    assert error.error_code == "CREDIT_CATALOG_INTEGRITY"
    assert error.violations[0].rule is IntegrityRule.ORDER_INVERSION
    assert error.to_dict()["context"]["violations"][0]["rule"] == "order_inversion"
