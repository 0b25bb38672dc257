#!/usr/bin/env python3
"""
Gap Analysis Engine for RFP qualification
Aggregates the declared qualification percentage with the missing-skill,
training and what-if scenario lists, and derives missing skills from the
staff inventory when the caller does not supply them
"""

from collections import Counter
from typing import Iterable, List, Optional

from api.core.logging import get_logger
from engines.models import (
    CapabilityProfile,
    MissingSkill,
    RequirementCatalog,
    SkillsGapAnalysis,
    TrainingRecommendation,
    WhatIfScenario,
)

logger = get_logger(__name__)

# Headcount that must hold a required skill before it stops counting as a gap
DEFAULT_REQUIRED_COUNT = 2
# Score impact for derived gaps whose requirement carries no weight
DEFAULT_IMPACT_ON_SCORE = 5


class GapAnalyzer:
    """
    Builds the SkillsGapAnalysis the recommendation engine consumes.

    The declared qualification percentage is trusted as-is; it is never
    recomputed from skill counts. Caller-supplied lists are passed through in
    the order given.
    """

    def __init__(self, required_count: int = DEFAULT_REQUIRED_COUNT,
                 default_impact: int = DEFAULT_IMPACT_ON_SCORE):
        self.required_count = required_count
        self.default_impact = default_impact

    def analyze(self, profile: CapabilityProfile, catalog: RequirementCatalog,
                declared_qualification_pct: int,
                missing_skills: Optional[Iterable[MissingSkill]] = None,
                training_recommendations: Optional[Iterable[TrainingRecommendation]] = None,
                what_if_scenarios: Optional[Iterable[WhatIfScenario]] = None,
                rfp_id: Optional[str] = None) -> SkillsGapAnalysis:
        """Assemble the gap analysis for one RFP"""
        if missing_skills is None:
            missing_skills = self.derive_missing_skills(profile, catalog)
            logger.debug("derived_missing_skills", rfp_id=rfp_id, gap_count=len(missing_skills))

        return SkillsGapAnalysis(
            current_qualification_percentage=declared_qualification_pct,
            missing_skills=tuple(missing_skills),
            training_recommendations=tuple(training_recommendations or ()),
            what_if_scenarios=tuple(what_if_scenarios or ()),
            rfp_id=rfp_id,
        )

    def inventory_counts(self, profile: CapabilityProfile) -> Counter:
        """
        Headcount per skill name and per certification id/name.
        Each employee counts once per entry, however many ways they match it.
        """
        counts: Counter = Counter()
        for employee in profile.employees:
            held = set(employee.skill_names)
            for cert in employee.current_certifications:
                held.update((cert.cert_id, cert.cert_name))
            counts.update(held)
        return counts

    def derive_missing_skills(self, profile: CapabilityProfile,
                              catalog: RequirementCatalog) -> List[MissingSkill]:
        """
        Compare mandatory requirement skills and certifications against staff
        inventory; anything held by fewer than ``required_count`` people is a gap
        """
        counts = self.inventory_counts(profile)
        seen = set()
        gaps = []

        for requirement in catalog.mandatory_requirements:
            impact = requirement.weight if requirement.weight is not None else self.default_impact
            for name in requirement.required_skills + requirement.required_certifications:
                if name in seen:
                    continue
                seen.add(name)

                current = counts.get(name, 0)
                if current < self.required_count:
                    gaps.append(MissingSkill(
                        skill=name,
                        required_count=self.required_count,
                        current_count=current,
                        impact_on_score=impact,
                    ))

        return gaps


def total_training_cost(analysis: SkillsGapAnalysis) -> float:
    """Sum of all training recommendation costs"""
    return sum(rec.cost for rec in analysis.training_recommendations)


def max_qualification(analysis: SkillsGapAnalysis) -> int:
    """Best reachable qualification across scenarios, or the current one if none"""
    return max(
        (scenario.new_qualification_percentage for scenario in analysis.what_if_scenarios),
        default=analysis.current_qualification_percentage,
    )
