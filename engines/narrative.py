#!/usr/bin/env python3
"""
Narrative Assembler
Formats RFP requirements, staffing data and engine output into the prompt
text for each proposal section. No decisions are made here; capability tiers,
scores and recommendations all come from the engines.
"""

from dataclasses import dataclass
from typing import List, Optional

from engines.capability import CapabilityAssessor
from engines.gap_analysis import max_qualification, total_training_cost
from engines.models import CapabilityProfile, ProposalRequest, SkillsGapAnalysis

FALLBACK_COMPANY_STRENGTH = "extensive experience in cloud solutions"

TECHNICAL_APPROACH_OUTLINE = [
    "Assessment & Planning Phase",
    "Migration Strategy",
    "Implementation Methodology",
    "Security & Compliance Framework",
    "Quality Assurance & Testing",
    "Knowledge Transfer & Support",
]

COST_BREAKDOWN_OUTLINE = [
    "Labor costs by phase",
    "Training and certification costs",
    "Tools and infrastructure",
    "Travel and expenses",
    "Management and overhead",
]


@dataclass(frozen=True)
class ProposalSections:
    executive_summary: str
    technical_approach: str
    team_qualifications: str
    past_performance: str
    skills_development: str
    cost_proposal: str
    complete_proposal: str


def _money(amount: float) -> str:
    return f"${amount:,.2f}"


def _bullets(items) -> List[str]:
    return [f"- {item}" for item in items]


def _numbered(items) -> List[str]:
    return [f"{i}. {item}" for i, item in enumerate(items, 1)]


def company_strength(profile: CapabilityProfile) -> str:
    strongest = profile.company_capabilities.strongest_competency
    if strongest is None:
        return FALLBACK_COMPANY_STRENGTH
    return (f"{strongest.years_experience} years of experience in {strongest.capability} "
            f"with {strongest.successful_projects} successful projects")


class NarrativeAssembler:
    """Builds section prompts; one instance can serve any number of requests"""

    def __init__(self, assessor: Optional[CapabilityAssessor] = None):
        self.assessor = assessor or CapabilityAssessor()

    def executive_summary(self, request: ProposalRequest) -> str:
        gap = request.skills_gap_analysis
        lines = [
            f"Generate an executive summary for a proposal responding to RFP: {request.rfp_data.title}",
            "",
            "Key Points to Include:",
            f"- Company: Our company has {company_strength(request.profile)}",
            f"- Current Qualification: We are currently {gap.current_qualification_percentage}% "
            "qualified for this opportunity",
        ]
        if gap.current_qualification_percentage < 100:
            lines.append(f"- With planned training, we can achieve {max_qualification(gap)}% qualification")
        lines += [
            f"- Team Size: {len(request.profile.employees)} qualified professionals",
            f"- Relevant Experience: {len(request.profile.project_experience)} similar projects "
            "completed successfully",
            "",
            "Emphasize our strengths, acknowledge areas for growth, and demonstrate commitment "
            "to meeting all requirements through training.",
            "Keep the summary confident, professional, and client-focused.",
        ]
        return "\n".join(lines)

    def technical_approach(self, request: ProposalRequest) -> str:
        employees = request.profile.employees
        lines = ["Create a detailed technical approach for the following requirements:", "",
                 "MANDATORY REQUIREMENTS:"]

        for requirement in request.rfp_data.extracted_requirements.mandatory_requirements:
            tier = self.assessor.assess(requirement, employees)
            lines += [
                f"- {requirement.description}",
                f"  Required Skills: {', '.join(requirement.required_skills)}",
                f"  Our Capability: {tier.label}",
                "",
            ]

        lines += ["", "PROPOSED SOLUTION APPROACH:", "Based on our experience with projects like:"]
        lines += [f"- {p.project_name} ({p.contract_value})" for p in request.profile.project_experience]
        lines += ["", "Structure the technical approach with:"]
        lines += _numbered(TECHNICAL_APPROACH_OUTLINE)
        return "\n".join(lines)

    def team_qualifications(self, request: ProposalRequest) -> str:
        lines = ["Generate a team qualifications section featuring these professionals:", ""]

        for emp in request.profile.employees:
            lines += [
                f"TEAM MEMBER: {emp.name}",
                f"Role: {emp.title}",
                f"Experience: {emp.years_experience} years",
                "Key Skills: " + ", ".join(s.skill_name for s in emp.high_proficiency_skills),
                "Certifications: " + ", ".join(c.cert_name for c in emp.current_certifications),
            ]
            if emp.planned_certifications:
                planned = ", ".join(
                    f"{pc.cert_name} (by {pc.planned_completion.isoformat() if pc.planned_completion else 'TBD'})"
                    for pc in emp.planned_certifications
                )
                lines.append(f"Planned Certifications: {planned}")
            lines.append("Highlights:")
            lines += _bullets(emp.resume_highlights)
            lines.append("")

        lines += [
            "",
            "Create professional bios that emphasize relevant experience and demonstrate how "
            "this team meets or will meet all requirements.",
        ]
        return "\n".join(lines)

    def past_performance(self, request: ProposalRequest) -> str:
        lines = ["Create a past performance section based on these relevant projects:", ""]

        for project in request.profile.project_experience:
            lines += [
                f"PROJECT: {project.project_name}",
                f"Client: {project.client}",
                f"Industry: {project.industry}",
                f"Value: {project.contract_value}",
                f"Duration: {project.duration}",
            ]
            metrics = project.success_metrics
            if metrics is not None:
                satisfaction = "n/a" if metrics.client_satisfaction is None else metrics.client_satisfaction
                lines.append(f"Performance: On-Time: {metrics.on_time}, On-Budget: {metrics.on_budget}, "
                             f"Client Satisfaction: {satisfaction}")
            lines.append("Key Achievements:")
            lines += _bullets(project.key_achievements)
            lines.append("")

        lines.append("Format each project as a case study that demonstrates relevance to the current "
                     "RFP requirements. Emphasize quantifiable results and client satisfaction.")
        return "\n".join(lines)

    def skills_development(self, request: ProposalRequest) -> str:
        gap: SkillsGapAnalysis = request.skills_gap_analysis
        lines = [
            "Generate a Skills Development Plan addressing these gaps:",
            "",
            "CURRENT STATE:",
            f"- Qualification Level: {gap.current_qualification_percentage}%",
            "",
            "IDENTIFIED GAPS:",
        ]
        lines += [f"- {s.skill} (Need {s.required_count}, Have {s.current_count})"
                  for s in gap.missing_skills]

        lines += ["", "TRAINING PLAN:"]
        lines += [f"- Employee {rec.employee_id}: {rec.recommended_cert} "
                  f"({rec.timeline_weeks} weeks, {_money(rec.cost)})"
                  for rec in gap.training_recommendations]

        lines += ["", "IMPROVEMENT SCENARIOS:"]
        for scenario in gap.what_if_scenarios:
            lines += [
                "",
                f"{scenario.scenario_name}:",
                f"- Investment: {_money(scenario.investment)}",
                f"- Timeline: {scenario.timeline_weeks} weeks",
                f"- New Qualification: {scenario.new_qualification_percentage}%",
                f"- ROI: {scenario.potential_revenue} in additional opportunities",
            ]

        lines += ["", "Create a professional development plan that shows commitment to meeting "
                  "all requirements and continuous improvement."]
        return "\n".join(lines)

    def cost_proposal(self, request: ProposalRequest) -> str:
        lines = ["Generate a cost proposal structure based on:", "", "TEAM COMPOSITION:"]
        lines += [f"- {emp.title} ({emp.name}): {_money(emp.hourly_rate)}/hour, "
                  f"{emp.availability_percentage}% available"
                  for emp in request.profile.employees]
        lines += [
            "",
            "TRAINING INVESTMENTS:",
            f"Total Training Investment: {_money(total_training_cost(request.skills_gap_analysis))}",
            "",
            "Create a cost breakdown including:",
        ]
        lines += _numbered(COST_BREAKDOWN_OUTLINE)
        lines.append("Demonstrate value and ROI to the client.")
        return "\n".join(lines)

    def assemble(self, request: ProposalRequest) -> ProposalSections:
        """Build every section plus the complete proposal prompt"""
        sections = [
            ("EXECUTIVE SUMMARY", self.executive_summary(request)),
            ("TECHNICAL APPROACH", self.technical_approach(request)),
            ("TEAM QUALIFICATIONS", self.team_qualifications(request)),
            ("PAST PERFORMANCE", self.past_performance(request)),
            ("SKILLS DEVELOPMENT PLAN", self.skills_development(request)),
            ("COST PROPOSAL", self.cost_proposal(request)),
        ]

        parts = ["=== COMPLETE PROPOSAL GENERATION ===", "",
                 f"Create a comprehensive proposal for: {request.rfp_data.title}", ""]
        for number, (heading, body) in enumerate(sections, 1):
            parts += [f"SECTION {number}: {heading}", body, ""]
        parts.append("Format as a professional, persuasive proposal document that addresses all "
                     "RFP requirements and evaluation criteria.")

        return ProposalSections(
            executive_summary=sections[0][1],
            technical_approach=sections[1][1],
            team_qualifications=sections[2][1],
            past_performance=sections[3][1],
            skills_development=sections[4][1],
            cost_proposal=sections[5][1],
            complete_proposal="\n".join(parts),
        )
