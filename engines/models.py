#!/usr/bin/env python3
"""
Data model for the RFP qualification engine
Immutable value objects for RFP requirements, staffing records, company history
and the skills gap analysis, each with a ``from_dict`` constructor that validates
the JSON shape served by the proposal API
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from engines.errors import InvalidInput, InvalidScenario


class ProficiencyLevel(Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @property
    def rank(self) -> int:
        return list(ProficiencyLevel).index(self)

    @property
    def is_high(self) -> bool:
        """Advanced and Expert skills are the ones worth featuring in bios"""
        return self.rank >= ProficiencyLevel.ADVANCED.rank


class CapabilityTier(Enum):
    STRONG = "Strong"
    MODERATE = "Moderate"
    DEVELOPING = "Developing"

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]


_TIER_LABELS = {
    CapabilityTier.STRONG: "Strong - Multiple qualified staff",
    CapabilityTier.MODERATE: "Moderate - Single qualified staff",
    CapabilityTier.DEVELOPING: "Developing - Training planned",
}


# === VALIDATION HELPERS ===

def _expect_mapping(data: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidInput(path, "expected an object")
    return data


def _require(data: Mapping[str, Any], key: str, path: str) -> Any:
    value = data.get(key)
    if value is None:
        raise InvalidInput(f"{path}.{key}", "is required")
    return value


def _as_list(value: Any, path: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise InvalidInput(path, "expected a list")
    return list(value)


def _string_list(value: Any, path: str) -> Tuple[str, ...]:
    items = _as_list(value, path)
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise InvalidInput(f"{path}[{index}]", "expected a string")
    return tuple(items)


def _count_mapping(value: Any, path: str) -> Dict[str, int]:
    mapping = _expect_mapping(value, path)
    return {str(key): _check_count(f"{path}.{key}", count) for key, count in mapping.items()}


def _parse_date(value: Any, path: str) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise InvalidInput(path, f"invalid ISO date {value!r}") from exc
    raise InvalidInput(path, "expected an ISO date string")


def _check_text(field_name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInput(field_name, "must be a non-empty string")
    return value


def _check_count(field_name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(field_name, "must be an integer")
    if value < 0:
        raise InvalidInput(field_name, f"must be non-negative, got {value}")
    return value


def _check_percentage(field_name: str, value: Any) -> int:
    _check_count(field_name, value)
    if value > 100:
        raise InvalidInput(field_name, f"must be between 0 and 100, got {value}")
    return value


def _check_amount(field_name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(field_name, "must be a number")
    if not math.isfinite(value):
        raise InvalidInput(field_name, f"must be a finite number, got {value}")
    if value < 0:
        raise InvalidInput(field_name, f"must be non-negative, got {value}")
    return float(value)


def _set(instance: Any, name: str, value: Any) -> None:
    object.__setattr__(instance, name, value)


def _construct(cls, path: str, **kwargs: Any):
    """Build ``cls`` and re-raise validation errors with the full field path"""
    try:
        return cls(**kwargs)
    except InvalidInput as exc:
        raise type(exc)(f"{path}.{exc.field}", exc.message) from exc


def _items(data: Mapping[str, Any], key: str, path: str, parser, required: bool = False) -> tuple:
    raw = _require(data, key, path) if required else data.get(key) or []
    return tuple(
        parser(item, f"{path}.{key}[{index}]")
        for index, item in enumerate(_as_list(raw, f"{path}.{key}"))
    )


# === RFP REQUIREMENTS ===

@dataclass(frozen=True)
class Requirement:
    """A single mandatory or preferred requirement extracted from an RFP"""
    req_id: str
    category: str
    description: str
    required_skills: Tuple[str, ...] = ()
    required_certifications: Tuple[str, ...] = ()
    min_years_experience: int = 0
    weight: Optional[int] = None

    def __post_init__(self):
        _check_text("req_id", self.req_id)
        _set(self, "required_skills", tuple(self.required_skills))
        _set(self, "required_certifications", tuple(self.required_certifications))
        _check_count("min_years_experience", self.min_years_experience)
        if self.weight is not None:
            _check_count("weight", self.weight)

    @classmethod
    def from_dict(cls, data: Any, path: str = "requirement") -> "Requirement":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            req_id=_require(data, "req_id", path),
            category=data.get("category", ""),
            description=data.get("description", ""),
            required_skills=_string_list(data.get("required_skills", []), f"{path}.required_skills"),
            required_certifications=_string_list(
                data.get("required_certifications", []), f"{path}.required_certifications"
            ),
            min_years_experience=data.get("min_years_experience", 0),
            weight=data.get("weight"),
        )


@dataclass(frozen=True)
class RequirementCatalog:
    mandatory_requirements: Tuple[Requirement, ...] = ()
    preferred_requirements: Tuple[Requirement, ...] = ()
    team_composition_requirements: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        _set(self, "mandatory_requirements", tuple(self.mandatory_requirements))
        _set(self, "preferred_requirements", tuple(self.preferred_requirements))
        _set(self, "team_composition_requirements",
             _count_mapping(self.team_composition_requirements, "team_composition_requirements"))

    @property
    def all_requirements(self) -> Tuple[Requirement, ...]:
        return self.mandatory_requirements + self.preferred_requirements

    @classmethod
    def from_dict(cls, data: Any, path: str = "extracted_requirements") -> "RequirementCatalog":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            mandatory_requirements=_items(data, "mandatory_requirements", path,
                                          Requirement.from_dict, required=True),
            preferred_requirements=_items(data, "preferred_requirements", path, Requirement.from_dict),
            team_composition_requirements=data.get("team_composition_requirements") or {},
        )


@dataclass(frozen=True)
class RfpData:
    rfp_id: str
    title: str
    issuing_organization: str
    extracted_requirements: RequirementCatalog
    due_date: Optional[date] = None
    contract_value: str = ""
    contract_duration: str = ""
    evaluation_criteria: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        _check_text("rfp_id", self.rfp_id)
        _set(self, "evaluation_criteria",
             _count_mapping(self.evaluation_criteria, "evaluation_criteria"))

    @classmethod
    def from_dict(cls, data: Any, path: str = "rfp_data") -> "RfpData":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            rfp_id=_require(data, "rfp_id", path),
            title=data.get("title", ""),
            issuing_organization=data.get("issuing_organization", ""),
            extracted_requirements=RequirementCatalog.from_dict(
                _require(data, "extracted_requirements", path), f"{path}.extracted_requirements"
            ),
            due_date=_parse_date(data.get("due_date"), f"{path}.due_date"),
            contract_value=data.get("contract_value", ""),
            contract_duration=data.get("contract_duration", ""),
            evaluation_criteria=data.get("evaluation_criteria") or {},
        )


# === STAFFING RECORDS ===

@dataclass(frozen=True)
class Skill:
    skill_name: str
    proficiency_level: ProficiencyLevel
    years_experience: int = 0

    def __post_init__(self):
        _check_text("skill_name", self.skill_name)
        if not isinstance(self.proficiency_level, ProficiencyLevel):
            try:
                _set(self, "proficiency_level", ProficiencyLevel(self.proficiency_level))
            except ValueError as exc:
                allowed = ", ".join(level.value for level in ProficiencyLevel)
                raise InvalidInput(
                    "proficiency_level",
                    f"unknown level {self.proficiency_level!r} (expected one of {allowed})",
                ) from exc
        _check_count("years_experience", self.years_experience)

    @classmethod
    def from_dict(cls, data: Any, path: str = "skill") -> "Skill":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            skill_name=_require(data, "skill_name", path),
            proficiency_level=_require(data, "proficiency_level", path),
            years_experience=data.get("years_experience", 0),
        )


@dataclass(frozen=True)
class Certification:
    cert_name: str
    cert_id: str
    date_obtained: Optional[date] = None
    expiry_date: Optional[date] = None
    status: str = "Active"

    def __post_init__(self):
        _check_text("cert_id", self.cert_id)

    @classmethod
    def from_dict(cls, data: Any, path: str = "certification") -> "Certification":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            cert_name=data.get("cert_name") or _require(data, "cert_id", path),
            cert_id=_require(data, "cert_id", path),
            date_obtained=_parse_date(data.get("date_obtained"), f"{path}.date_obtained"),
            expiry_date=_parse_date(data.get("expiry_date"), f"{path}.expiry_date"),
            status=data.get("status", "Active"),
        )


@dataclass(frozen=True)
class PlannedCertification:
    cert_name: str
    cert_id: str
    planned_completion: Optional[date] = None
    training_status: str = "Not Started"
    completion_percentage: int = 0
    training_cost: float = 0.0

    def __post_init__(self):
        _check_text("cert_id", self.cert_id)
        _check_percentage("completion_percentage", self.completion_percentage)
        _set(self, "training_cost", _check_amount("training_cost", self.training_cost))

    @classmethod
    def from_dict(cls, data: Any, path: str = "planned_certification") -> "PlannedCertification":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            cert_name=data.get("cert_name") or _require(data, "cert_id", path),
            cert_id=_require(data, "cert_id", path),
            planned_completion=_parse_date(data.get("planned_completion"), f"{path}.planned_completion"),
            training_status=data.get("training_status", "Not Started"),
            completion_percentage=data.get("completion_percentage", 0),
            training_cost=data.get("training_cost", 0.0),
        )


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str
    title: str
    years_experience: int
    availability_percentage: int
    hourly_rate: float
    current_skills: Tuple[Skill, ...] = ()
    current_certifications: Tuple[Certification, ...] = ()
    planned_certifications: Tuple[PlannedCertification, ...] = ()
    resume_highlights: Tuple[str, ...] = ()
    clearance_level: str = "None"

    def __post_init__(self):
        _check_text("employee_id", self.employee_id)
        _check_count("years_experience", self.years_experience)
        _check_percentage("availability_percentage", self.availability_percentage)
        _set(self, "hourly_rate", _check_amount("hourly_rate", self.hourly_rate))
        for name in ("current_skills", "current_certifications",
                     "planned_certifications", "resume_highlights"):
            _set(self, name, tuple(getattr(self, name)))

    @property
    def skill_names(self) -> Tuple[str, ...]:
        return tuple(skill.skill_name for skill in self.current_skills)

    @property
    def high_proficiency_skills(self) -> Tuple[Skill, ...]:
        return tuple(skill for skill in self.current_skills if skill.proficiency_level.is_high)

    @classmethod
    def from_dict(cls, data: Any, path: str = "employee") -> "Employee":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            employee_id=_require(data, "employee_id", path),
            name=data.get("name", ""),
            title=data.get("title", ""),
            years_experience=_require(data, "years_experience", path),
            availability_percentage=_require(data, "availability_percentage", path),
            hourly_rate=_require(data, "hourly_rate", path),
            current_skills=_items(data, "current_skills", path, Skill.from_dict, required=True),
            current_certifications=_items(data, "current_certifications", path,
                                          Certification.from_dict),
            planned_certifications=_items(data, "planned_certifications", path,
                                          PlannedCertification.from_dict),
            resume_highlights=_string_list(data.get("resume_highlights") or [],
                                           f"{path}.resume_highlights"),
            clearance_level=data.get("clearance_level") or "None",
        )


# === COMPANY HISTORY ===

@dataclass(frozen=True)
class CoreCompetency:
    capability: str
    maturity_level: str
    years_experience: int
    successful_projects: int
    certified_staff: int = 0

    def __post_init__(self):
        for name in ("years_experience", "successful_projects", "certified_staff"):
            _check_count(name, getattr(self, name))

    @classmethod
    def from_dict(cls, data: Any, path: str = "core_competency") -> "CoreCompetency":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            capability=_require(data, "capability", path),
            maturity_level=data.get("maturity_level", ""),
            years_experience=data.get("years_experience", 0),
            successful_projects=data.get("successful_projects", 0),
            certified_staff=data.get("certified_staff", 0),
        )


@dataclass(frozen=True)
class IndustryExperience:
    industry: str
    years: int
    projects: int
    certifications: Tuple[str, ...] = ()

    def __post_init__(self):
        _check_count("years", self.years)
        _check_count("projects", self.projects)
        _set(self, "certifications", tuple(self.certifications))

    @classmethod
    def from_dict(cls, data: Any, path: str = "industry_experience") -> "IndustryExperience":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            industry=_require(data, "industry", path),
            years=data.get("years", 0),
            projects=data.get("projects", 0),
            certifications=_string_list(data.get("certifications") or [], f"{path}.certifications"),
        )


@dataclass(frozen=True)
class PartnerCertification:
    partner: str
    level: str
    competencies: Tuple[str, ...] = ()

    def __post_init__(self):
        _set(self, "competencies", tuple(self.competencies))

    @classmethod
    def from_dict(cls, data: Any, path: str = "partner_certification") -> "PartnerCertification":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            partner=_require(data, "partner", path),
            level=data.get("level", ""),
            competencies=_string_list(data.get("competencies") or [], f"{path}.competencies"),
        )


@dataclass(frozen=True)
class CompanyCapabilities:
    core_competencies: Tuple[CoreCompetency, ...] = ()
    industry_experience: Tuple[IndustryExperience, ...] = ()
    partner_certifications: Tuple[PartnerCertification, ...] = ()

    def __post_init__(self):
        for name in ("core_competencies", "industry_experience", "partner_certifications"):
            _set(self, name, tuple(getattr(self, name)))

    @property
    def strongest_competency(self) -> Optional[CoreCompetency]:
        """Competency with the most successful projects (first wins on ties)"""
        if not self.core_competencies:
            return None
        return max(self.core_competencies, key=lambda c: c.successful_projects)

    @classmethod
    def from_dict(cls, data: Any, path: str = "company_capabilities") -> "CompanyCapabilities":
        data = _expect_mapping(data, path)
        return cls(
            core_competencies=_items(data, "core_competencies", path, CoreCompetency.from_dict),
            industry_experience=_items(data, "industry_experience", path, IndustryExperience.from_dict),
            partner_certifications=_items(data, "partner_certifications", path,
                                          PartnerCertification.from_dict),
        )


@dataclass(frozen=True)
class SuccessMetrics:
    on_time: bool
    on_budget: bool
    client_satisfaction: Optional[float] = None
    budget_variance: Optional[str] = None
    cost_savings_achieved: Optional[str] = None
    security_incidents_reduced: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "success_metrics") -> "SuccessMetrics":
        data = _expect_mapping(data, path)
        satisfaction = data.get("client_satisfaction")
        if satisfaction is not None:
            satisfaction = _check_amount(f"{path}.client_satisfaction", satisfaction)
        return cls(
            on_time=bool(data.get("on_time", False)),
            on_budget=bool(data.get("on_budget", False)),
            client_satisfaction=satisfaction,
            budget_variance=data.get("budget_variance"),
            cost_savings_achieved=data.get("cost_savings_achieved"),
            security_incidents_reduced=data.get("security_incidents_reduced"),
        )


@dataclass(frozen=True)
class ProjectExperience:
    project_id: str
    project_name: str
    client: str
    industry: str
    contract_value: str
    duration: str
    completion_date: Optional[date] = None
    success_metrics: Optional[SuccessMetrics] = None
    team_members: Tuple[str, ...] = ()
    technologies_used: Tuple[str, ...] = ()
    key_achievements: Tuple[str, ...] = ()
    lessons_learned: Tuple[str, ...] = ()
    referenceable: bool = False

    def __post_init__(self):
        _check_text("project_id", self.project_id)
        for name in ("team_members", "technologies_used", "key_achievements", "lessons_learned"):
            _set(self, name, tuple(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Any, path: str = "project") -> "ProjectExperience":
        data = _expect_mapping(data, path)
        metrics = data.get("success_metrics")
        return _construct(
            cls, path,
            project_id=_require(data, "project_id", path),
            project_name=data.get("project_name", ""),
            client=data.get("client", ""),
            industry=data.get("industry", ""),
            contract_value=data.get("contract_value", ""),
            duration=data.get("duration", ""),
            completion_date=_parse_date(data.get("completion_date"), f"{path}.completion_date"),
            success_metrics=(SuccessMetrics.from_dict(metrics, f"{path}.success_metrics")
                             if metrics is not None else None),
            team_members=_string_list(data.get("team_members") or [], f"{path}.team_members"),
            technologies_used=_string_list(data.get("technologies_used") or [],
                                           f"{path}.technologies_used"),
            key_achievements=_string_list(data.get("key_achievements") or [],
                                          f"{path}.key_achievements"),
            lessons_learned=_string_list(data.get("lessons_learned") or [],
                                         f"{path}.lessons_learned"),
            referenceable=bool(data.get("referenceable", False)),
        )


@dataclass(frozen=True)
class CapabilityProfile:
    """Everything the firm brings to a bid: staff, delivery history, competencies"""
    employees: Tuple[Employee, ...]
    project_experience: Tuple[ProjectExperience, ...] = ()
    company_capabilities: CompanyCapabilities = field(default_factory=CompanyCapabilities)

    def __post_init__(self):
        _set(self, "employees", tuple(self.employees))
        _set(self, "project_experience", tuple(self.project_experience))


# === SKILLS GAP ANALYSIS ===

@dataclass(frozen=True)
class MissingSkill:
    skill: str
    required_count: int
    current_count: int
    impact_on_score: int

    def __post_init__(self):
        _check_text("skill", self.skill)
        _check_count("required_count", self.required_count)
        _check_count("current_count", self.current_count)
        _check_count("impact_on_score", self.impact_on_score)

    @classmethod
    def from_dict(cls, data: Any, path: str = "missing_skill") -> "MissingSkill":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            skill=_require(data, "skill", path),
            required_count=_require(data, "required_count", path),
            current_count=_require(data, "current_count", path),
            impact_on_score=_require(data, "impact_on_score", path),
        )


@dataclass(frozen=True)
class TrainingRecommendation:
    employee_id: str
    recommended_cert: str
    cost: float
    timeline_weeks: int
    roi_improvement: int

    def __post_init__(self):
        _check_text("employee_id", self.employee_id)
        _check_text("recommended_cert", self.recommended_cert)
        _set(self, "cost", _check_amount("cost", self.cost))
        _check_count("timeline_weeks", self.timeline_weeks)
        _check_count("roi_improvement", self.roi_improvement)

    @classmethod
    def from_dict(cls, data: Any, path: str = "training_recommendation") -> "TrainingRecommendation":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            employee_id=_require(data, "employee_id", path),
            recommended_cert=_require(data, "recommended_cert", path),
            cost=_require(data, "cost", path),
            timeline_weeks=_require(data, "timeline_weeks", path),
            roi_improvement=data.get("roi_improvement", 0),
        )


@dataclass(frozen=True)
class WhatIfScenario:
    scenario_name: str
    investment: float
    new_qualification_percentage: int
    timeline_weeks: int = 0
    description: str = ""
    additional_rfps_qualified: int = 0
    potential_revenue: str = ""

    def __post_init__(self):
        _check_text("scenario_name", self.scenario_name)
        if isinstance(self.investment, bool) or not isinstance(self.investment, (int, float)):
            raise InvalidScenario("investment", "must be a number")
        # NaN compares false against zero, so finiteness is checked explicitly
        if not math.isfinite(self.investment) or self.investment <= 0:
            raise InvalidScenario(
                "investment", f"must be a finite number greater than zero, got {self.investment}"
            )
        _set(self, "investment", float(self.investment))
        _check_percentage("new_qualification_percentage", self.new_qualification_percentage)
        _check_count("timeline_weeks", self.timeline_weeks)
        _check_count("additional_rfps_qualified", self.additional_rfps_qualified)

    @classmethod
    def from_dict(cls, data: Any, path: str = "what_if_scenario") -> "WhatIfScenario":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            scenario_name=_require(data, "scenario_name", path),
            investment=_require(data, "investment", path),
            new_qualification_percentage=_require(data, "new_qualification_percentage", path),
            timeline_weeks=data.get("timeline_weeks", 0),
            description=data.get("description", ""),
            additional_rfps_qualified=data.get("additional_rfps_qualified", 0),
            potential_revenue=data.get("potential_revenue", ""),
        )


@dataclass(frozen=True)
class SkillsGapAnalysis:
    current_qualification_percentage: int
    missing_skills: Tuple[MissingSkill, ...] = ()
    training_recommendations: Tuple[TrainingRecommendation, ...] = ()
    what_if_scenarios: Tuple[WhatIfScenario, ...] = ()
    rfp_id: Optional[str] = None

    def __post_init__(self):
        _check_percentage("current_qualification_percentage", self.current_qualification_percentage)
        for name in ("missing_skills", "training_recommendations", "what_if_scenarios"):
            _set(self, name, tuple(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Any, path: str = "skills_gap_analysis") -> "SkillsGapAnalysis":
        data = _expect_mapping(data, path)
        return _construct(
            cls, path,
            current_qualification_percentage=_require(data, "current_qualification_percentage", path),
            missing_skills=_items(data, "missing_skills", path, MissingSkill.from_dict, required=True),
            training_recommendations=_items(data, "training_recommendations", path,
                                            TrainingRecommendation.from_dict, required=True),
            what_if_scenarios=_items(data, "what_if_scenarios", path,
                                     WhatIfScenario.from_dict, required=True),
            rfp_id=data.get("rfp_id"),
        )


@dataclass(frozen=True)
class QualificationScore:
    current_score: int
    scenario_scores: Dict[str, int] = field(default_factory=dict)
    critical_gaps: Tuple[str, ...] = ()

    def __post_init__(self):
        _set(self, "scenario_scores", dict(self.scenario_scores))
        _set(self, "critical_gaps", tuple(self.critical_gaps))


@dataclass(frozen=True)
class ProposalRequest:
    """One complete input snapshot for a proposal generation run"""
    rfp_data: RfpData
    profile: CapabilityProfile
    skills_gap_analysis: SkillsGapAnalysis

    @classmethod
    def from_dict(cls, data: Any, path: str = "request") -> "ProposalRequest":
        data = _expect_mapping(data, path)
        capabilities = data.get("company_capabilities")
        profile = CapabilityProfile(
            employees=_items(data, "employee_data", path, Employee.from_dict, required=True),
            project_experience=_items(data, "project_experience", path, ProjectExperience.from_dict),
            company_capabilities=(
                CompanyCapabilities.from_dict(capabilities, f"{path}.company_capabilities")
                if capabilities is not None else CompanyCapabilities()
            ),
        )
        return cls(
            rfp_data=RfpData.from_dict(_require(data, "rfp_data", path), f"{path}.rfp_data"),
            profile=profile,
            skills_gap_analysis=SkillsGapAnalysis.from_dict(
                _require(data, "skills_gap_analysis", path), f"{path}.skills_gap_analysis"
            ),
        )
