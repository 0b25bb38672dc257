"""High-level API tests covering the proposal endpoints and error handling."""
from __future__ import annotations

import copy
import json

import pytest

from api.core.config import get_config


def test_health(api_client) -> None:
    response = api_client.get("/health")
    payload = response.json()

    assert response.status_code == 200
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert "timestamp" in payload


def test_request_id_is_echoed_or_generated(api_client) -> None:
    echoed = api_client.get("/health", headers={"X-Request-ID": "req-42"})
    assert echoed.headers["X-Request-ID"] == "req-42"

    generated = api_client.get("/health")
    assert generated.headers["X-Request-ID"]
    assert generated.headers["X-Content-Type-Options"] == "nosniff"


def test_generate_proposal_for_sample_payload(api_client, sample_payload) -> None:
    response = api_client.post("/api/prompt/generate-proposal", json=sample_payload)
    assert response.status_code == 200
    payload = response.json()

    assert payload["qualification_score"] == {
        "current_score": 72,
        "scenario_scores": {"Quick Win": 80, "Strategic Investment": 95},
        "critical_gaps": ["Azure DevOps Expert", "CISSP Certification"],
    }
    assert payload["recommendations"] == [
        "PRIORITY: Implement training plan to reach minimum 80% qualification",
        "CRITICAL: Acquire Azure DevOps Expert certification (Impact: 8 points)",
        "CRITICAL: Acquire CISSP Certification certification (Impact: 10 points)",
        "RECOMMENDED: Pursue 'Quick Win' strategy for best ROI",
        "WARNING: Limited staff availability may impact delivery",
    ]
    for key in ("executive_summary_prompt", "technical_approach_prompt", "team_qualifications_prompt",
                "past_performance_prompt", "skills_development_prompt", "cost_proposal_prompt"):
        assert payload[key]
        assert payload[key] in payload["complete_proposal"]


def test_qualification_endpoint(api_client, sample_payload) -> None:
    response = api_client.post("/api/prompt/qualification", json=sample_payload)
    assert response.status_code == 200
    payload = response.json()

    assert payload["capability_tiers"] == {"MR-001": "Moderate", "MR-002": "Moderate"}
    assert [s["scenario_name"] for s in payload["ranked_scenarios"]] == ["Quick Win", "Strategic Investment"]
    assert payload["ranked_scenarios"][0]["efficiency"] == pytest.approx(80 / 5500)
    assert [r["type"] for r in payload["recommendation_details"]] == [
        "priority", "critical", "critical", "recommended", "warning",
    ]
    assert payload["recommendation_details"][1]["subject"] == "Azure DevOps Expert"


def test_zero_investment_is_rejected(api_client, sample_payload) -> None:
    payload = copy.deepcopy(sample_payload)
    payload["skills_gap_analysis"]["what_if_scenarios"][0]["investment"] = 0

    response = api_client.post("/api/prompt/generate-proposal", json=payload)
    body = response.json()

    assert response.status_code == 422
    assert body["error"] == "invalid_scenario"
    assert body["field"] == "request.skills_gap_analysis.what_if_scenarios[0].investment"


def test_missing_collection_is_rejected(api_client, sample_payload) -> None:
    payload = copy.deepcopy(sample_payload)
    del payload["skills_gap_analysis"]["missing_skills"]

    response = api_client.post("/api/prompt/qualification", json=payload)

    assert response.status_code == 422
    assert response.json()["error"] == "invalid_input"
    assert response.json()["field"] == "request.skills_gap_analysis.missing_skills"


def test_sample_rfp(api_client) -> None:
    payload = api_client.get("/api/prompt/sample-rfp").json()
    assert payload["rfp_number"] == "RFP-2025-CLOUD-001"
    assert len(payload["scope_of_work"]) == 8


def test_sample_data_round_trips_through_generation(api_client) -> None:
    sample = api_client.get("/api/proposal/sample-data").json()
    assert sample["proposal_output_template"]["sections"]

    response = api_client.post("/api/prompt/generate-proposal", json=sample)
    assert response.status_code == 200


def test_sample_data_can_be_disabled(api_client, monkeypatch) -> None:
    monkeypatch.setenv("FEATURE_ENABLE_SAMPLE_DATA", "false")
    get_config.cache_clear()
    try:
        response = api_client.get("/api/proposal/sample-data")
    finally:
        monkeypatch.delenv("FEATURE_ENABLE_SAMPLE_DATA")
        get_config.cache_clear()

    assert response.status_code == 404
    assert response.json()["detail"] == "Sample data is disabled"


def test_nan_investment_in_raw_json_is_rejected(api_client, sample_payload) -> None:
    sample_payload["skills_gap_analysis"]["what_if_scenarios"][0]["investment"] = float("nan")
    # json.dumps writes the bare NaN literal, which the request parser accepts
    body = json.dumps(sample_payload)
    assert "NaN" in body

    response = api_client.post("/api/prompt/qualification", content=body,
                               headers={"Content-Type": "application/json"})

    assert response.status_code == 422
    assert response.json()["error"] == "invalid_scenario"
    assert response.json()["field"] == "request.skills_gap_analysis.what_if_scenarios[0].investment"
