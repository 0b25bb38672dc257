"""Capability tier assignment for single requirements."""
from __future__ import annotations

import pytest

from engines.capability import CapabilityAssessor
from engines.models import CapabilityTier, RequirementCatalog


@pytest.mark.parametrize(
    "staff_skills, expected",
    [
        ([], CapabilityTier.DEVELOPING),
        ([["Java"]], CapabilityTier.DEVELOPING),
        ([["Azure DevOps"]], CapabilityTier.MODERATE),
        ([["Azure DevOps"], ["Java"]], CapabilityTier.MODERATE),
        ([["Azure DevOps"], ["Cloud Migration"]], CapabilityTier.STRONG),
        ([["Azure DevOps"], ["Cloud Migration"], ["Azure DevOps", "Cloud Migration"]],
         CapabilityTier.STRONG),
    ],
)
def test_tier_follows_qualified_staff_count(make_employee, requirement, staff_skills, expected):
    employees = [make_employee(skills) for skills in staff_skills]
    assert CapabilityAssessor().assess(requirement, employees) is expected


def test_employee_with_several_matching_skills_counts_once(make_employee, requirement):
    employees = [make_employee(["Azure DevOps", "Cloud Migration"])]
    assert CapabilityAssessor().assess(requirement, employees) is CapabilityTier.MODERATE


def test_matching_is_exact_and_case_sensitive(make_employee, requirement):
    employees = [
        make_employee(["azure devops"]),
        make_employee(["Azure DevOps Expert"]),
        make_employee(["Cloud  Migration"]),
    ]
    assert CapabilityAssessor().assess(requirement, employees) is CapabilityTier.DEVELOPING


def test_custom_matcher_can_widen_matching(make_employee, requirement):
    def case_insensitive(skill_name, required):
        return skill_name.lower() in {r.lower() for r in required}

    employees = [make_employee(["azure devops"]), make_employee(["CLOUD MIGRATION"])]
    assessor = CapabilityAssessor(matcher=case_insensitive)
    assert assessor.assess(requirement, employees) is CapabilityTier.STRONG


def test_qualified_staff_preserves_input_order(make_employee, requirement):
    first = make_employee(["Cloud Migration"], employee_id="EMP-B")
    other = make_employee(["Java"], employee_id="EMP-X")
    second = make_employee(["Azure DevOps"], employee_id="EMP-A")

    qualified = CapabilityAssessor().qualified_staff(requirement, [first, other, second])
    assert [e.employee_id for e in qualified] == ["EMP-B", "EMP-A"]


def test_tier_labels_match_narrative_wording():
    assert CapabilityTier.STRONG.label == "Strong - Multiple qualified staff"
    assert CapabilityTier.MODERATE.label == "Moderate - Single qualified staff"
    assert CapabilityTier.DEVELOPING.label == "Developing - Training planned"


def test_assess_catalog_keys_mandatory_requirements_in_order(sample_request):
    catalog: RequirementCatalog = sample_request.rfp_data.extracted_requirements
    tiers = CapabilityAssessor().assess_catalog(catalog, sample_request.profile.employees)

    assert list(tiers) == ["MR-001", "MR-002"]
    # only "Cloud Migration" matches MR-001 exactly; "Azure Solutions Architecture" does not
    assert tiers["MR-001"] is CapabilityTier.MODERATE
    assert tiers["MR-002"] is CapabilityTier.MODERATE
