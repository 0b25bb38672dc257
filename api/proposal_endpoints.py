#!/usr/bin/env python3
"""
Proposal API Endpoints
Qualification scoring, recommendations and section prompt generation for RFP responses
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel

from api.core.config import get_config
from data.sample_proposal import PROPOSAL_OUTPUT_TEMPLATE, SAMPLE_RFP_DOCUMENT, build_sample_payload
from engines.models import ProposalRequest, QualificationScore
from engines.proposal import ProposalGenerator, QualificationResult

# Create routers for proposal endpoints
prompt_router = APIRouter(prefix="/api/prompt", tags=["Proposal Prompts"])
proposal_router = APIRouter(prefix="/api/proposal", tags=["Proposal Data"])

# Initialize engines
generator = ProposalGenerator()


# Pydantic models for responses
class QualificationScoreModel(BaseModel):
    current_score: int
    scenario_scores: Dict[str, int]
    critical_gaps: List[str]


class RecommendationModel(BaseModel):
    type: str
    message: str
    subject: Optional[str] = None


class RankedScenarioModel(BaseModel):
    scenario_name: str
    investment: float
    new_qualification_percentage: int
    efficiency: float


class QualificationResponse(BaseModel):
    qualification_score: QualificationScoreModel
    recommendations: List[str]
    recommendation_details: List[RecommendationModel]
    capability_tiers: Dict[str, str]
    ranked_scenarios: List[RankedScenarioModel]


class ProposalGenerationResponse(BaseModel):
    executive_summary_prompt: str
    technical_approach_prompt: str
    team_qualifications_prompt: str
    past_performance_prompt: str
    skills_development_prompt: str
    cost_proposal_prompt: str
    complete_proposal: str
    qualification_score: QualificationScoreModel
    recommendations: List[str]


def _score_model(score: QualificationScore) -> QualificationScoreModel:
    return QualificationScoreModel(
        current_score=score.current_score,
        scenario_scores=score.scenario_scores,
        critical_gaps=list(score.critical_gaps),
    )


def _qualification_response(result: QualificationResult) -> QualificationResponse:
    return QualificationResponse(
        qualification_score=_score_model(result.qualification_score),
        recommendations=result.messages,
        recommendation_details=[
            RecommendationModel(type=rec.type.value, message=rec.message, subject=rec.subject)
            for rec in result.recommendations
        ],
        capability_tiers={req_id: tier.value for req_id, tier in result.capability_tiers.items()},
        ranked_scenarios=[
            RankedScenarioModel(
                scenario_name=ranked.scenario.scenario_name,
                investment=ranked.scenario.investment,
                new_qualification_percentage=ranked.scenario.new_qualification_percentage,
                efficiency=ranked.efficiency,
            )
            for ranked in result.ranked_scenarios
        ],
    )


@prompt_router.post("/generate-proposal", response_model=ProposalGenerationResponse)
def generate_proposal(payload: Dict[str, Any] = Body(...)):
    """Generate every section prompt plus the qualification score and recommendations"""
    request = ProposalRequest.from_dict(payload)
    result = generator.generate(request)
    sections = result.sections

    return ProposalGenerationResponse(
        executive_summary_prompt=sections.executive_summary,
        technical_approach_prompt=sections.technical_approach,
        team_qualifications_prompt=sections.team_qualifications,
        past_performance_prompt=sections.past_performance,
        skills_development_prompt=sections.skills_development,
        cost_proposal_prompt=sections.cost_proposal,
        complete_proposal=sections.complete_proposal,
        qualification_score=_score_model(result.qualification.qualification_score),
        recommendations=result.qualification.messages,
    )


@prompt_router.post("/qualification", response_model=QualificationResponse)
def evaluate_qualification(payload: Dict[str, Any] = Body(...)):
    """Score, recommendations, capability tiers and ranked scenarios without narrative text"""
    request = ProposalRequest.from_dict(payload)
    return _qualification_response(generator.qualify(request))


@prompt_router.get("/sample-rfp")
def get_sample_rfp():
    """Sample RFP document as issued by the client"""
    return SAMPLE_RFP_DOCUMENT


@proposal_router.get("/sample-data")
def get_sample_proposal_data():
    """Sample proposal inputs; the body is accepted as-is by /api/prompt/generate-proposal"""
    if not get_config().feature_flags.enable_sample_data:
        raise HTTPException(status_code=404, detail="Sample data is disabled")

    return {**build_sample_payload(), "proposal_output_template": PROPOSAL_OUTPUT_TEMPLATE}
