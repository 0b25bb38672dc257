#!/usr/bin/env python3
"""
Capability Assessor
Rates organizational readiness for a single RFP requirement by counting staff
whose current skills match the requirement's required skills
"""

from typing import Callable, Dict, Iterable, Optional, Sequence

from engines.models import CapabilityTier, Employee, Requirement, RequirementCatalog

SkillMatcher = Callable[[str, Sequence[str]], bool]

# Staff counts at which a requirement moves up a tier
STRONG_STAFF_COUNT = 2
MODERATE_STAFF_COUNT = 1


def exact_skill_match(skill_name: str, required_skills: Sequence[str]) -> bool:
    """Case-sensitive, exact name comparison. No credit for near matches."""
    return skill_name in required_skills


class CapabilityAssessor:
    """
    Maps a requirement to Strong / Moderate / Developing based on how many
    employees hold at least one of its required skills.

    The matcher is the extension point for fuzzy or synonym-aware matching;
    the default only accepts identical skill names.
    """

    def __init__(self, matcher: Optional[SkillMatcher] = None):
        self.matcher = matcher or exact_skill_match

    def qualified_staff(self, requirement: Requirement,
                        employees: Iterable[Employee]) -> list:
        """Employees with at least one matching current skill, in input order"""
        return [
            employee for employee in employees
            if any(self.matcher(skill.skill_name, requirement.required_skills)
                   for skill in employee.current_skills)
        ]

    def assess(self, requirement: Requirement,
               employees: Iterable[Employee]) -> CapabilityTier:
        qualified_count = len(self.qualified_staff(requirement, employees))

        if qualified_count >= STRONG_STAFF_COUNT:
            return CapabilityTier.STRONG
        if qualified_count == MODERATE_STAFF_COUNT:
            return CapabilityTier.MODERATE
        return CapabilityTier.DEVELOPING

    def assess_catalog(self, catalog: RequirementCatalog,
                       employees: Sequence[Employee]) -> Dict[str, CapabilityTier]:
        """Tier for every mandatory requirement, keyed by requirement id in catalog order"""
        return {
            requirement.req_id: self.assess(requirement, employees)
            for requirement in catalog.mandatory_requirements
        }
