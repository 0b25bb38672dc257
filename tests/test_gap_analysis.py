"""Skills gap aggregation and inventory-based gap derivation."""
from __future__ import annotations

from engines.gap_analysis import GapAnalyzer, max_qualification, total_training_cost
from engines.models import (
    CapabilityProfile,
    Certification,
    Requirement,
    RequirementCatalog,
    SkillsGapAnalysis,
    TrainingRecommendation,
)


def _catalog(*requirements: Requirement) -> RequirementCatalog:
    return RequirementCatalog(mandatory_requirements=requirements)


def test_declared_percentage_and_supplied_lists_pass_through(make_employee, missing_skill, scenario):
    profile = CapabilityProfile(employees=[make_employee(["Azure DevOps"])])
    gaps = [missing_skill("CISSP", 10), missing_skill("AZ-400", 3)]
    training = [TrainingRecommendation("EMP-001", "AZ-400", 2500.0, 8, 8)]
    scenarios = [scenario("Quick Win", 5500.0, 80)]

    analysis = GapAnalyzer().analyze(
        profile, _catalog(), 63,
        missing_skills=gaps,
        training_recommendations=training,
        what_if_scenarios=scenarios,
        rfp_id="RFP-1",
    )

    assert analysis.current_qualification_percentage == 63
    assert list(analysis.missing_skills) == gaps
    assert list(analysis.training_recommendations) == training
    assert list(analysis.what_if_scenarios) == scenarios
    assert analysis.rfp_id == "RFP-1"


def test_supplied_empty_gap_list_is_not_rederived(make_employee, requirement):
    profile = CapabilityProfile(employees=[make_employee([])])
    analysis = GapAnalyzer().analyze(profile, _catalog(requirement), 50, missing_skills=[])
    assert analysis.missing_skills == ()


def test_derives_gaps_when_none_supplied(make_employee, requirement):
    profile = CapabilityProfile(employees=[
        make_employee(["Azure DevOps", "Cloud Migration"]),
        make_employee(["Cloud Migration"]),
    ])

    analysis = GapAnalyzer().analyze(profile, _catalog(requirement), 70)
    by_name = {gap.skill: gap for gap in analysis.missing_skills}

    assert [gap.skill for gap in analysis.missing_skills] == ["Azure DevOps", "AZ-400"]
    assert by_name["Azure DevOps"].current_count == 1
    assert by_name["AZ-400"].current_count == 0
    assert all(gap.required_count == 2 for gap in analysis.missing_skills)
    assert all(gap.impact_on_score == 5 for gap in analysis.missing_skills)


def test_derived_gap_impact_uses_requirement_weight(make_employee):
    weighted = Requirement(req_id="MR-9", category="security", description="Zero trust",
                           required_certifications=("CISSP",), weight=10)
    profile = CapabilityProfile(employees=[make_employee([])])

    gaps = GapAnalyzer().derive_missing_skills(profile, _catalog(weighted))
    assert [(g.skill, g.impact_on_score) for g in gaps] == [("CISSP", 10)]


def test_certifications_count_by_id_or_name(make_employee):
    requirement = Requirement(req_id="MR-3", category="technical", description="Architecture",
                              required_certifications=("AZ-305",))
    holder = make_employee([], current_certifications=[
        Certification(cert_name="Azure Solutions Architect Expert", cert_id="AZ-305"),
    ])
    named = make_employee([], current_certifications=[
        Certification(cert_name="AZ-305", cert_id="MS-AZ-305"),
    ])
    profile = CapabilityProfile(employees=[holder, named])

    assert GapAnalyzer().derive_missing_skills(profile, _catalog(requirement)) == []


def test_duplicate_requirement_entries_are_reported_once(make_employee):
    first = Requirement(req_id="MR-1", category="a", description="x", required_skills=("Terraform",))
    second = Requirement(req_id="MR-2", category="b", description="y",
                         required_skills=("Terraform",), weight=9)
    profile = CapabilityProfile(employees=[])

    gaps = GapAnalyzer().derive_missing_skills(profile, _catalog(first, second))
    assert [(g.skill, g.impact_on_score) for g in gaps] == [("Terraform", 5)]


def test_preferred_requirements_do_not_create_gaps(make_employee):
    preferred = Requirement(req_id="PR-1", category="nice", description="Kubernetes",
                            required_skills=("Kubernetes",))
    catalog = RequirementCatalog(preferred_requirements=[preferred])
    profile = CapabilityProfile(employees=[make_employee([])])

    assert GapAnalyzer().derive_missing_skills(profile, catalog) == []


def test_summary_helpers(sample_request):
    analysis = sample_request.skills_gap_analysis
    assert total_training_cost(analysis) == 2500.0
    assert max_qualification(analysis) == 95


def test_max_qualification_falls_back_to_current_without_scenarios():
    assert max_qualification(SkillsGapAnalysis(current_qualification_percentage=64)) == 64
    assert total_training_cost(SkillsGapAnalysis(current_qualification_percentage=64)) == 0
