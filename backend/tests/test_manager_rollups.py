"""Tests for cross-user manager rollups."""

from __future__ import annotations

from typing import List, Tuple

from coach_insights.manager_rollups import build_manager_rollups
from coach_insights.report_models import UserPatternSummary
from coach_insights.session_models import DetectedPattern, SkillDimension


def _user(user_id: str, patterns: List[Tuple[str, str]]) -> UserPatternSummary:
    return UserPatternSummary(
        user_id=user_id,
        patterns=[
            DetectedPattern(
                dimension=dimension,
                type=pattern_type,
                sessions_analyzed=3,
                summary="",
                recommendation="",
            )
            for dimension, pattern_type in patterns
        ],
    )


def _team() -> List[UserPatternSummary]:
    return [
        _user("ana", [("confidence", "improving"), ("clarity", "declining")]),
        _user("ben", [("clarity", "plateau"), ("listening", "improving")]),
        _user("cy", [("confidence", "declining"), ("clarity", "declining")]),
        _user("dee", []),
    ]


def test_counts_per_dimension_in_first_seen_order() -> None:
    result = build_manager_rollups(_team())

    assert result.total_users == 4
    assert [
        (rollup.dimension, rollup.improving_count, rollup.declining_count, rollup.plateau_count)
        for rollup in result.dimension_rollups
    ] == [
        (SkillDimension.CONFIDENCE, 1, 1, 0),
        (SkillDimension.CLARITY, 0, 2, 1),
        (SkillDimension.LISTENING, 1, 0, 0),
    ]


def test_single_decline_flags_user_once() -> None:
    result = build_manager_rollups(_team())

    assert result.users_needing_attention == ["ana", "cy"]


def test_empty_input() -> None:
    result = build_manager_rollups([])

    assert result.total_users == 0
    assert result.dimension_rollups == []
    assert result.users_needing_attention == []


def test_repeated_calls_do_not_share_state() -> None:
    first = build_manager_rollups(_team())
    second = build_manager_rollups(_team())

    assert first.dimension_rollups == second.dimension_rollups
    assert first == second
