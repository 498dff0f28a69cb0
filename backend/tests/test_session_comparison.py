"""Tests for pairwise session comparison."""

from __future__ import annotations

from typing import Dict

from coach_insights.session_comparison import compare_sessions
from coach_insights.session_models import SessionScore, SessionSnapshot, SkillDimension


def _snapshot(session_id: str, scores: Dict[str, float]) -> SessionSnapshot:
    return SessionSnapshot(
        session_id=session_id,
        timestamp="2026-10-18T10:00:00Z",
        scores=[SessionScore(dimension=key, score=value) for key, value in scores.items()],
    )


def test_deltas_follow_current_session_order() -> None:
    previous = _snapshot("prev", {"clarity": 70, "confidence": 60})
    current = _snapshot("curr", {"confidence": 65, "clarity": 60})

    deltas = compare_sessions(previous, current)

    assert [(item.dimension, item.previous, item.current, item.delta) for item in deltas] == [
        (SkillDimension.CONFIDENCE, 60, 65, 5),
        (SkillDimension.CLARITY, 70, 60, -10),
    ]


def test_dimension_new_in_current_compares_against_zero() -> None:
    deltas = compare_sessions(_snapshot("prev", {}), _snapshot("curr", {"listening": 42}))

    assert len(deltas) == 1
    assert deltas[0].previous == 0
    assert deltas[0].delta == 42


def test_dimension_only_in_previous_is_dropped() -> None:
    previous = _snapshot("prev", {"structure": 80, "clarity": 50})
    current = _snapshot("curr", {"clarity": 55})

    deltas = compare_sessions(previous, current)

    assert [item.dimension for item in deltas] == [SkillDimension.CLARITY]
