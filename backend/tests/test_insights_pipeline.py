"""Tests for the single-pass user insight pipeline."""

from __future__ import annotations

import pytest

from coach_insights.insights_pipeline import analyze_user_sessions
from coach_insights.journey_models import AdjustmentAction, JourneyNodeMetadata, TrainingJourneyNode
from coach_insights.report_models import RiskLevel
from coach_insights.session_models import PatternType, SessionScore, SessionSnapshot

GENERATED_AT = "2026-10-19T00:00:00+00:00"


def _sessions() -> list[SessionSnapshot]:
    history = [
        {"confidence": 60, "clarity": 90, "listening": 70},
        {"confidence": 70, "clarity": 80, "listening": 70},
        {"confidence": 80, "clarity": 70, "listening": 70},
    ]
    return [
        SessionSnapshot(
            session_id=f"session-{index}",
            timestamp=f"2026-10-1{index}T09:30:00Z",
            scores=[SessionScore(dimension=key, score=value) for key, value in scores.items()],
        )
        for index, scores in enumerate(history, start=1)
    ]


def _nodes() -> list[TrainingJourneyNode]:
    return [
        TrainingJourneyNode(
            id="clarity-drill",
            type="skill",
            status="available",
            difficulty="beginner",
            metadata=JourneyNodeMetadata(dimension="clarity"),
        ),
        TrainingJourneyNode(
            id="confidence-stretch",
            type="persona",
            status="available",
            difficulty="intermediate",
            metadata=JourneyNodeMetadata(dimension="confidence"),
        ),
        TrainingJourneyNode(id="final-check", type="assessment", status="locked"),
    ]


def test_pipeline_chains_every_stage() -> None:
    insights = analyze_user_sessions(
        "rep-3",
        _sessions(),
        _nodes(),
        generated_at=GENERATED_AT,
    )

    assert [pattern.type for pattern in insights.patterns] == [
        PatternType.IMPROVING,
        PatternType.DECLINING,
        PatternType.PLATEAU,
    ]
    assert insights.recommendation is not None
    assert insights.recommendation.node_id == "clarity-drill"
    assert [(item.node_id, item.action) for item in insights.adjustments] == [
        ("confidence-stretch", AdjustmentAction.UPGRADE),
        ("clarity-drill", AdjustmentAction.PRIORITIZE),
    ]
    assert insights.drilldown.risk_level == RiskLevel.MEDIUM
    assert insights.summary.metadata.session_id == "session-3"
    assert insights.summary.metadata.generated_at == GENERATED_AT
    assert insights.summary.recommended_next_action == "Follow the updated training path recommendations"


def test_pipeline_with_short_history() -> None:
    insights = analyze_user_sessions(
        "rep-4", _sessions()[:2], _nodes(), session_id="explicit", generated_at=GENERATED_AT
    )

    assert insights.patterns == []
    assert insights.adjustments == []
    assert insights.recommendation is not None
    assert insights.recommendation.node_id == "clarity-drill"
    assert insights.drilldown.risk_level == RiskLevel.LOW
    assert insights.summary.metadata.session_id == "explicit"
    assert insights.summary.metadata.generated_at == GENERATED_AT


def test_pipeline_without_sessions() -> None:
    insights = analyze_user_sessions("rep-5", [], [], generated_at=GENERATED_AT)

    assert insights.recommendation is None
    assert insights.summary.metadata.session_id == ""
    assert insights.summary.recommended_next_action == "Continue with the current training journey"


def test_pipeline_is_deterministic_for_identical_inputs() -> None:
    first = analyze_user_sessions("rep-6", _sessions(), _nodes(), generated_at=GENERATED_AT)
    second = analyze_user_sessions("rep-6", _sessions(), _nodes(), generated_at=GENERATED_AT)

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_pipeline_requires_generation_timestamp() -> None:
    with pytest.raises(TypeError):
        analyze_user_sessions("rep-7", _sessions(), _nodes())  # type: ignore[call-arg]
