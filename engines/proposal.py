#!/usr/bin/env python3
"""
Proposal Generator
Runs one full qualification and narrative pass for a proposal request
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from api.core.logging import get_logger
from engines.capability import CapabilityAssessor
from engines.gap_analysis import GapAnalyzer
from engines.models import CapabilityTier, ProposalRequest, QualificationScore
from engines.narrative import NarrativeAssembler, ProposalSections
from engines.recommendations import Recommendation, RecommendationEngine
from engines.scenarios import RankedScenario, ScenarioEvaluator

logger = get_logger(__name__)


@dataclass(frozen=True)
class QualificationResult:
    qualification_score: QualificationScore
    recommendations: Tuple[Recommendation, ...]
    capability_tiers: Dict[str, CapabilityTier]
    ranked_scenarios: Tuple[RankedScenario, ...]

    @property
    def messages(self) -> List[str]:
        return [rec.message for rec in self.recommendations]


@dataclass(frozen=True)
class ProposalGenerationResult:
    sections: ProposalSections
    qualification: QualificationResult


class ProposalGenerator:
    """
    Facade over the gap analyzer, assessor, evaluator, recommendation engine and narrative
    assembler. Holds no per-request state.
    """

    def __init__(self, assessor: Optional[CapabilityAssessor] = None,
                 evaluator: Optional[ScenarioEvaluator] = None,
                 analyzer: Optional[GapAnalyzer] = None):
        self.assessor = assessor or CapabilityAssessor()
        self.evaluator = evaluator or ScenarioEvaluator()
        self.analyzer = analyzer or GapAnalyzer()
        self.recommendation_engine = RecommendationEngine(self.evaluator)
        self.narrative = NarrativeAssembler(self.assessor)

    def qualify(self, request: ProposalRequest) -> QualificationResult:
        """Engine output only: score, recommendations, tiers and ranked scenarios"""
        declared = request.skills_gap_analysis
        gap = self.analyzer.analyze(
            request.profile,
            request.rfp_data.extracted_requirements,
            declared.current_qualification_percentage,
            missing_skills=declared.missing_skills,
            training_recommendations=declared.training_recommendations,
            what_if_scenarios=declared.what_if_scenarios,
            rfp_id=declared.rfp_id or request.rfp_data.rfp_id,
        )
        ranked = self.evaluator.rank(gap.what_if_scenarios)
        result = self.recommendation_engine.recommend(request.profile, gap, ranked)
        tiers = self.assessor.assess_catalog(request.rfp_data.extracted_requirements,
                                             request.profile.employees)

        return QualificationResult(
            qualification_score=result.qualification_score,
            recommendations=result.recommendations,
            capability_tiers=tiers,
            ranked_scenarios=tuple(ranked),
        )

    def generate(self, request: ProposalRequest) -> ProposalGenerationResult:
        qualification = self.qualify(request)
        sections = self.narrative.assemble(request)

        logger.info(
            "proposal_generated",
            rfp_id=request.rfp_data.rfp_id,
            employees=len(request.profile.employees),
            current_score=qualification.qualification_score.current_score,
            recommendation_count=len(qualification.recommendations),
        )

        return ProposalGenerationResult(sections=sections, qualification=qualification)
