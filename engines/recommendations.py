#!/usr/bin/env python3
"""
Recommendation Engine for RFP qualification
Turns the skills gap analysis and ranked what-if scenarios into an ordered
list of action recommendations and a qualification score
"""

import sys
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from api.core.logging import get_logger
from engines.models import (
    CapabilityProfile,
    Employee,
    MissingSkill,
    QualificationScore,
    SkillsGapAnalysis,
    WhatIfScenario,
)
from engines.scenarios import RankedScenario, ScenarioEvaluator

logger = get_logger(__name__)

MINIMUM_QUALIFICATION_PCT = 80
CRITICAL_IMPACT_THRESHOLD = 8
AVAILABLE_STAFF_THRESHOLD_PCT = 75
MINIMUM_AVAILABLE_STAFF = 3


class RecommendationType(Enum):
    PRIORITY = "priority"
    CRITICAL = "critical"
    RECOMMENDED = "recommended"
    WARNING = "warning"


@dataclass(frozen=True)
class Recommendation:
    """Individual action recommendation"""
    type: RecommendationType
    message: str
    subject: Optional[str] = None


@dataclass(frozen=True)
class RecommendationResult:
    recommendations: Tuple[Recommendation, ...]
    qualification_score: QualificationScore

    @property
    def messages(self) -> List[str]:
        return [rec.message for rec in self.recommendations]


def critical_gaps(missing_skills: Sequence[MissingSkill]) -> List[MissingSkill]:
    """Missing skills at or above the critical impact threshold, in source order"""
    return [skill for skill in missing_skills if skill.impact_on_score >= CRITICAL_IMPACT_THRESHOLD]


def available_staff(employees: Sequence[Employee]) -> List[Employee]:
    return [e for e in employees if e.availability_percentage >= AVAILABLE_STAFF_THRESHOLD_PCT]


def build_qualification_score(gap_analysis: SkillsGapAnalysis) -> QualificationScore:
    scenario_scores: Dict[str, int] = {}
    for scenario in gap_analysis.what_if_scenarios:
        # duplicate names: the later scenario wins
        scenario_scores[scenario.scenario_name] = scenario.new_qualification_percentage

    return QualificationScore(
        current_score=gap_analysis.current_qualification_percentage,
        scenario_scores=scenario_scores,
        critical_gaps=tuple(skill.skill for skill in critical_gaps(gap_analysis.missing_skills)),
    )


class RecommendationEngine:
    """
    Composes gap analysis and scenario ranking into recommendations.

    Output order is fixed: qualification priority, critical gaps (source
    order), the recommended scenario, then the staffing warning.
    """

    def __init__(self, evaluator: Optional[ScenarioEvaluator] = None):
        self.evaluator = evaluator or ScenarioEvaluator()

        self.RECOMMENDATION_TEMPLATES = {
            RecommendationType.PRIORITY: (
                "PRIORITY: Implement training plan to reach minimum "
                "{minimum}% qualification"
            ),
            RecommendationType.CRITICAL: (
                "CRITICAL: Acquire {skill} certification (Impact: {impact} points)"
            ),
            RecommendationType.RECOMMENDED: (
                "RECOMMENDED: Pursue '{scenario}' strategy for best ROI"
            ),
            RecommendationType.WARNING: (
                "WARNING: Limited staff availability may impact delivery"
            ),
        }

    def recommend(self, profile: CapabilityProfile, gap_analysis: SkillsGapAnalysis,
                  ranked_scenarios: Optional[Sequence[RankedScenario]] = None) -> RecommendationResult:
        """Generate the ordered recommendation list and qualification score"""
        if ranked_scenarios is None:
            ranked_scenarios = self.evaluator.rank(gap_analysis.what_if_scenarios)

        recommendations: List[Recommendation] = []

        if gap_analysis.current_qualification_percentage < MINIMUM_QUALIFICATION_PCT:
            recommendations.append(self._priority_recommendation())

        for skill in critical_gaps(gap_analysis.missing_skills):
            recommendations.append(self._critical_gap_recommendation(skill))

        if ranked_scenarios:
            recommendations.append(self._scenario_recommendation(ranked_scenarios[0].scenario))

        available = available_staff(profile.employees)
        if len(available) < MINIMUM_AVAILABLE_STAFF:
            recommendations.append(self._availability_warning())

        score = build_qualification_score(gap_analysis)

        logger.info(
            "recommendations_generated",
            rfp_id=gap_analysis.rfp_id,
            current_score=score.current_score,
            critical_gaps=len(score.critical_gaps),
            available_staff=len(available),
            recommendation_count=len(recommendations),
        )

        return RecommendationResult(recommendations=tuple(recommendations),
                                    qualification_score=score)

    def _priority_recommendation(self) -> Recommendation:
        template = self.RECOMMENDATION_TEMPLATES[RecommendationType.PRIORITY]
        return Recommendation(
            type=RecommendationType.PRIORITY,
            message=template.format(minimum=MINIMUM_QUALIFICATION_PCT),
        )

    def _critical_gap_recommendation(self, skill: MissingSkill) -> Recommendation:
        template = self.RECOMMENDATION_TEMPLATES[RecommendationType.CRITICAL]
        return Recommendation(
            type=RecommendationType.CRITICAL,
            message=template.format(skill=skill.skill, impact=skill.impact_on_score),
            subject=skill.skill,
        )

    def _scenario_recommendation(self, scenario: WhatIfScenario) -> Recommendation:
        template = self.RECOMMENDATION_TEMPLATES[RecommendationType.RECOMMENDED]
        return Recommendation(
            type=RecommendationType.RECOMMENDED,
            message=template.format(scenario=scenario.scenario_name),
            subject=scenario.scenario_name,
        )

    def _availability_warning(self) -> Recommendation:
        return Recommendation(
            type=RecommendationType.WARNING,
            message=self.RECOMMENDATION_TEMPLATES[RecommendationType.WARNING],
        )


if __name__ == "__main__":
    from data.sample_proposal import build_sample_request

    request = build_sample_request()
    engine = RecommendationEngine()

    print("Testing Recommendation Engine...")
    result = engine.recommend(request.profile, request.skills_gap_analysis)

    print(f"\nCurrent qualification: {result.qualification_score.current_score}%")
    for name, score in result.qualification_score.scenario_scores.items():
        print(f"  {name}: {score}%")
    print(f"Critical gaps: {', '.join(result.qualification_score.critical_gaps) or 'none'}")

    print("\nRecommendations:")
    for i, message in enumerate(result.messages, 1):
        print(f"  {i}. {message}")
