"""Manager-facing drilldown for a single user."""

from __future__ import annotations

import logging
from typing import Sequence

from .report_models import RiskLevel, UserDrilldownSummary
from .session_models import DetectedPattern, PatternType, SessionSnapshot, format_dimension

logger = logging.getLogger(__name__)

DEFAULT_RECENT_SESSION_LIMIT = 5


def classify_risk(patterns: Sequence[DetectedPattern]) -> RiskLevel:
    declining = sum(1 for pattern in patterns if pattern.type == PatternType.DECLINING)
    plateau = sum(1 for pattern in patterns if pattern.type == PatternType.PLATEAU)

    if declining >= 2:
        return RiskLevel.HIGH
    if declining == 1 or plateau >= 2:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def build_user_drilldown(
    user_id: str,
    sessions: Sequence[SessionSnapshot],
    patterns: Sequence[DetectedPattern],
    recent_limit: int = DEFAULT_RECENT_SESSION_LIMIT,
) -> UserDrilldownSummary:
    recent = list(sessions[-recent_limit:]) if recent_limit > 0 else []
    risk = classify_risk(patterns)
    logger.debug("Drilldown for %s: risk=%s patterns=%d", user_id, risk.value, len(patterns))
    return UserDrilldownSummary(
        user_id=user_id,
        recent_sessions=recent,
        patterns=list(patterns),
        risk_level=risk,
        coaching_focus=[format_dimension(pattern.dimension) for pattern in patterns],
    )


__all__ = ["DEFAULT_RECENT_SESSION_LIMIT", "build_user_drilldown", "classify_risk"]
