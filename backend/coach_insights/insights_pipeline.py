"""End-to-end insight pass for one user: history in, coaching products out."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .coaching_summary import build_coaching_summary
from .journey_models import JourneyAdjustment, NodeRecommendation, TrainingJourneyNode
from .journey_reassignment import calculate_journey_adjustments
from .journey_recommendation import recommend_next_journey_node
from .pattern_detection import DEFAULT_MIN_SESSIONS, detect_patterns
from .report_models import CoachingSummary, CoachingSummaryMetadata, UserDrilldownSummary
from .session_models import DetectedPattern, SessionSnapshot
from .user_drilldown import DEFAULT_RECENT_SESSION_LIMIT, build_user_drilldown

logger = logging.getLogger(__name__)


class CoachingInsights(BaseModel):
    """Everything derived from one user's history in a single pass."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    patterns: List[DetectedPattern] = Field(default_factory=list)
    recommendation: Optional[NodeRecommendation] = None
    adjustments: List[JourneyAdjustment] = Field(default_factory=list)
    drilldown: UserDrilldownSummary
    summary: CoachingSummary


def analyze_user_sessions(
    user_id: str,
    sessions: Sequence[SessionSnapshot],
    nodes: Sequence[TrainingJourneyNode],
    *,
    session_id: Optional[str] = None,
    min_sessions: Optional[int] = None,
    recent_limit: Optional[int] = None,
    generated_at: str,
) -> CoachingInsights:
    patterns = detect_patterns(
        sessions,
        DEFAULT_MIN_SESSIONS if min_sessions is None else min_sessions,
    )
    recommendation = recommend_next_journey_node(nodes, patterns)
    adjustments = calculate_journey_adjustments(nodes, patterns)
    drilldown = build_user_drilldown(
        user_id,
        sessions,
        patterns,
        DEFAULT_RECENT_SESSION_LIMIT if recent_limit is None else recent_limit,
    )

    if session_id is None:
        session_id = sessions[-1].session_id if sessions else ""
    metadata = CoachingSummaryMetadata(
        user_id=user_id,
        session_id=session_id,
        generated_at=generated_at,
    )
    summary = build_coaching_summary(metadata, patterns, adjustments)

    logger.debug(
        "Analyzed %d session(s) for %s: %d pattern(s), %d adjustment(s)",
        len(sessions),
        user_id,
        len(patterns),
        len(adjustments),
    )
    return CoachingInsights(
        user_id=user_id,
        patterns=patterns,
        recommendation=recommendation,
        adjustments=adjustments,
        drilldown=drilldown,
        summary=summary,
    )


__all__ = ["CoachingInsights", "analyze_user_sessions"]
