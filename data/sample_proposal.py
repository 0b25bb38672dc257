#!/usr/bin/env python3
"""
Sample proposal data for the RFP Qualification Engine
A cloud-migration RFP, two staff members, one past project, company
capabilities and a hand-authored skills gap analysis. Stands in for the RFP
extraction pipeline and staffing records until those are wired up.
"""

import copy
import sys
import os
from typing import Any, Dict

# Add parent directory to path to import engine modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from engines.models import ProposalRequest

RFP_ID = "RFP-2025-CLOUD-001"

RFP_DATA = {
    "rfp_id": RFP_ID,
    "title": "Enterprise Cloud Migration and Modernization Services",
    "issuing_organization": "Global Financial Corp",
    "due_date": "2025-10-15",
    "contract_value": "$3,500,000",
    "contract_duration": "24 months",
    "extracted_requirements": {
        "mandatory_requirements": [
            {
                "req_id": "MR-001",
                "category": "technical",
                "description": "Migrate 500+ applications to Azure cloud",
                "required_skills": ["Azure Solutions Architect", "Azure DevOps", "Cloud Migration"],
                "required_certifications": ["AZ-305", "AZ-400"],
                "min_years_experience": 5,
            },
            {
                "req_id": "MR-002",
                "category": "security",
                "description": "Implement zero-trust security architecture",
                "required_skills": ["Cloud Security", "Zero Trust Architecture", "Azure Security"],
                "required_certifications": ["CISSP", "Azure Security Engineer AZ-500"],
                "min_years_experience": 3,
            },
        ],
        "preferred_requirements": [],
        "team_composition_requirements": {
            "project_manager": 1,
            "solution_architects": 2,
            "cloud_engineers": 5,
            "security_engineers": 2,
            "data_engineers": 3,
        },
    },
    "evaluation_criteria": {
        "technical_approach": 30,
        "team_qualifications": 25,
        "past_performance": 20,
        "price": 15,
        "innovation": 10,
    },
}

EMPLOYEE_DATA = [
    {
        "employee_id": "EMP-001",
        "name": "Sarah Johnson",
        "title": "Senior Cloud Architect",
        "years_experience": 8,
        "clearance_level": "Secret",
        "availability_percentage": 100,
        "hourly_rate": 185.0,
        "current_skills": [
            {"skill_name": "Azure Solutions Architecture", "proficiency_level": "Expert", "years_experience": 6},
            {"skill_name": "AWS Architecture", "proficiency_level": "Intermediate", "years_experience": 3},
            {"skill_name": "Cloud Migration", "proficiency_level": "Expert", "years_experience": 7},
            {"skill_name": "DevOps", "proficiency_level": "Advanced", "years_experience": 5},
        ],
        "current_certifications": [
            {
                "cert_name": "Azure Solutions Architect Expert",
                "cert_id": "AZ-305",
                "date_obtained": "2023-03-15",
                "expiry_date": "2026-03-15",
                "status": "Active",
            },
        ],
        "planned_certifications": [
            {
                "cert_name": "Azure DevOps Engineer Expert",
                "cert_id": "AZ-400",
                "planned_completion": "2025-11-30",
                "training_status": "In Progress",
                "completion_percentage": 60,
                "training_cost": 2500.0,
            },
        ],
        "resume_highlights": [
            "Led cloud migration for Fortune 500 financial services firm (300+ applications)",
            "Designed multi-region disaster recovery architecture for global retail chain",
            "Reduced infrastructure costs by 40% through cloud optimization",
        ],
    },
    {
        "employee_id": "EMP-002",
        "name": "Michael Chen",
        "title": "Security Engineer",
        "years_experience": 5,
        "clearance_level": "None",
        "availability_percentage": 75,
        "hourly_rate": 165.0,
        "current_skills": [
            {"skill_name": "Cloud Security", "proficiency_level": "Advanced", "years_experience": 4},
            {"skill_name": "Zero Trust Architecture", "proficiency_level": "Intermediate", "years_experience": 2},
            {"skill_name": "Network Security", "proficiency_level": "Expert", "years_experience": 5},
        ],
        "current_certifications": [],
        "planned_certifications": [
            {
                "cert_name": "CISSP",
                "cert_id": "CISSP",
                "planned_completion": "2025-12-15",
                "training_status": "Not Started",
                "completion_percentage": 0,
                "training_cost": 5000.0,
            },
        ],
        "resume_highlights": [],
    },
]

PROJECT_EXPERIENCE = [
    {
        "project_id": "PROJ-001",
        "project_name": "National Bank Cloud Transformation",
        "client": "National Bank Corp",
        "industry": "Financial Services",
        "contract_value": "$5,200,000",
        "duration": "18 months",
        "completion_date": "2024-06-30",
        "success_metrics": {
            "on_time": True,
            "on_budget": True,
            "client_satisfaction": 4.8,
            "cost_savings_achieved": "$3.2M annually",
        },
        "team_members": ["EMP-001", "EMP-002", "EMP-003"],
        "technologies_used": ["Azure", "DevOps", "Kubernetes", "Terraform"],
        "key_achievements": [
            "Migrated 400+ applications to Azure with zero downtime",
            "Reduced infrastructure costs by 45%",
            "Improved application performance by 60%",
            "Achieved PCI-DSS compliance",
        ],
        "referenceable": True,
    },
]

COMPANY_CAPABILITIES = {
    "core_competencies": [
        {
            "capability": "Cloud Migration & Modernization",
            "maturity_level": "Expert",
            "years_experience": 12,
            "successful_projects": 45,
            "certified_staff": 28,
        },
        {
            "capability": "DevOps & Automation",
            "maturity_level": "Advanced",
            "years_experience": 8,
            "successful_projects": 32,
            "certified_staff": 18,
        },
    ],
    "industry_experience": [
        {
            "industry": "Financial Services",
            "years": 10,
            "projects": 22,
            "certifications": ["PCI-DSS", "SOX Compliance"],
        },
    ],
    "partner_certifications": [],
}

SKILLS_GAP_ANALYSIS = {
    "rfp_id": RFP_ID,
    "current_qualification_percentage": 72,
    "missing_skills": [
        {"skill": "Azure DevOps Expert", "required_count": 2, "current_count": 0, "impact_on_score": 8},
        {"skill": "CISSP Certification", "required_count": 2, "current_count": 0, "impact_on_score": 10},
    ],
    "training_recommendations": [
        {
            "employee_id": "EMP-001",
            "recommended_cert": "AZ-400",
            "cost": 2500.0,
            "timeline_weeks": 8,
            "roi_improvement": 8,
        },
    ],
    "what_if_scenarios": [
        {
            "scenario_name": "Quick Win",
            "description": "Complete in-progress training only",
            "investment": 5500.0,
            "timeline_weeks": 8,
            "new_qualification_percentage": 80,
            "additional_rfps_qualified": 3,
            "potential_revenue": "$2,100,000",
        },
        {
            "scenario_name": "Strategic Investment",
            "description": "All recommended training",
            "investment": 13500.0,
            "timeline_weeks": 12,
            "new_qualification_percentage": 95,
            "additional_rfps_qualified": 8,
            "potential_revenue": "$6,500,000",
        },
    ],
}

PROPOSAL_OUTPUT_TEMPLATE = {
    "sections": [
        {"section": "Executive Summary", "auto_generate": True, "include_qualification_percentage": True},
        {"section": "Technical Approach", "auto_generate": True, "map_to_requirements": True},
        {"section": "Team Qualifications", "include_resumes": True, "include_certs": True,
         "include_training_plan": True},
        {"section": "Skills Development Plan", "include_timeline": True, "include_investment": True,
         "show_improved_qualification": True},
    ],
}

SAMPLE_RFP_DOCUMENT = {
    "rfp_number": RFP_ID,
    "title": "Enterprise Cloud Migration and Modernization Services",
    "issuing_organization": "Global Financial Corp",
    "submission_deadline": "October 15, 2025, 5:00 PM EST",
    "background": (
        "Global Financial Corp is seeking a qualified vendor to provide comprehensive "
        "cloud migration and modernization services for our enterprise applications. "
        "We currently operate 500+ applications across multiple data centers and need "
        "to migrate to Microsoft Azure while modernizing our technology stack."
    ),
    "scope_of_work": [
        "Assessment of current application portfolio and infrastructure",
        "Development of cloud migration strategy and roadmap",
        "Migration of 500+ applications to Azure cloud platform",
        "Implementation of DevOps practices and CI/CD pipelines",
        "Establishment of cloud governance and security frameworks",
        "Implementation of zero-trust security architecture",
        "Training and knowledge transfer to internal teams",
        "24x7 support during transition period",
    ],
    "technical_requirements": [
        "Minimum 5 years experience in large-scale cloud migrations",
        "Demonstrated expertise in Microsoft Azure services",
        "Experience with containerization (Docker, Kubernetes)",
        "Strong DevOps and automation capabilities",
        "Security certifications (CISSP, Azure Security Engineer)",
        "Experience with financial services regulations and compliance",
        "Ability to maintain 99.99% uptime during migration",
    ],
    "staffing_requirements": {
        "Project Manager": "PMP certified with 10+ years experience",
        "Solution Architects": "2 positions - Azure certified (AZ-305)",
        "Cloud Engineers": "5 positions - Azure DevOps certified",
        "Security Engineers": "2 positions - CISSP or equivalent",
        "Data Engineers": "3 positions - Experience with data migration",
    },
    "evaluation_criteria": {
        "Technical Approach": 30,
        "Team Qualifications": 25,
        "Past Performance": 20,
        "Cost Proposal": 15,
        "Innovation & Value Add": 10,
    },
    "submission_requirements": [
        "Executive Summary (2 pages maximum)",
        "Technical Approach (15 pages maximum)",
        "Team Qualifications and Resumes",
        "Past Performance (3 similar projects)",
        "Cost Proposal (separate sealed envelope)",
        "Skills Development Plan (if applicable)",
    ],
}


def build_sample_payload() -> Dict[str, Any]:
    """Fresh copy of the sample request body the generate-proposal endpoint accepts"""
    return copy.deepcopy({
        "rfp_data": RFP_DATA,
        "employee_data": EMPLOYEE_DATA,
        "project_experience": PROJECT_EXPERIENCE,
        "company_capabilities": COMPANY_CAPABILITIES,
        "skills_gap_analysis": SKILLS_GAP_ANALYSIS,
    })


def build_sample_request() -> ProposalRequest:
    return ProposalRequest.from_dict(build_sample_payload())


if __name__ == "__main__":
    request = build_sample_request()
    print(f"{request.rfp_data.title} ({request.rfp_data.rfp_id})")
    print(f"   Employees: {len(request.profile.employees)}")
    print(f"   Past projects: {len(request.profile.project_experience)}")
    print(f"   Declared qualification: {request.skills_gap_analysis.current_qualification_percentage}%")
    print(f"   Scenarios: {', '.join(s.scenario_name for s in request.skills_gap_analysis.what_if_scenarios)}")
