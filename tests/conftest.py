"""Shared pytest fixtures for engine and API tests."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Dict, Generator, Sequence

import pytest
from fastapi.testclient import TestClient

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from api.core.config import get_config
from data.sample_proposal import build_sample_payload, build_sample_request
from engines.models import (
    Employee,
    MissingSkill,
    ProposalRequest,
    Requirement,
    Skill,
    WhatIfScenario,
)


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """Build an employee holding the given skill names (all Advanced)."""

    counter = {"next": 1}

    def _make(skills: Sequence[str] = (), availability: int = 100, **overrides) -> Employee:
        employee_id = overrides.pop("employee_id", f"EMP-{counter['next']:03d}")
        counter["next"] += 1
        fields = {
            "employee_id": employee_id,
            "name": f"Staff {employee_id}",
            "title": "Consultant",
            "years_experience": 5,
            "availability_percentage": availability,
            "hourly_rate": 150.0,
            "current_skills": [Skill(name, "Advanced", 3) for name in skills],
        }
        fields.update(overrides)
        return Employee(**fields)

    return _make


@pytest.fixture
def requirement() -> Requirement:
    return Requirement(
        req_id="MR-001",
        category="technical",
        description="Migrate applications to Azure",
        required_skills=("Azure DevOps", "Cloud Migration"),
        required_certifications=("AZ-400",),
        min_years_experience=5,
    )


@pytest.fixture
def scenario() -> Callable[..., WhatIfScenario]:
    def _make(name: str, investment: float, new_pct: int) -> WhatIfScenario:
        return WhatIfScenario(scenario_name=name, investment=investment,
                              new_qualification_percentage=new_pct)

    return _make


@pytest.fixture
def missing_skill() -> Callable[..., MissingSkill]:
    def _make(name: str, impact: int) -> MissingSkill:
        return MissingSkill(skill=name, required_count=2, current_count=0, impact_on_score=impact)

    return _make


@pytest.fixture
def sample_request() -> ProposalRequest:
    return build_sample_request()


@pytest.fixture
def sample_payload() -> Dict:
    return build_sample_payload()


@pytest.fixture(scope="session")
def api_client() -> Generator[TestClient, None, None]:
    """Provide a TestClient against a freshly configured application."""

    tracked_env_vars: Dict[str, str | None] = {
        "APP_ENV": os.environ.get("APP_ENV"),
        "CORS_ALLOWED_ORIGINS": os.environ.get("CORS_ALLOWED_ORIGINS"),
        "FEATURE_ENABLE_SAMPLE_DATA": os.environ.get("FEATURE_ENABLE_SAMPLE_DATA"),
    }

    os.environ["APP_ENV"] = "test"
    os.environ.setdefault("CORS_ALLOWED_ORIGINS", "http://testserver")
    os.environ.pop("FEATURE_ENABLE_SAMPLE_DATA", None)

    get_config.cache_clear()

    import importlib

    main_module = importlib.reload(importlib.import_module("api.main"))
    client = TestClient(main_module.app)

    yield client

    client.close()
    get_config.cache_clear()

    for key, original in tracked_env_vars.items():
        if original is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original
