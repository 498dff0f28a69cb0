"""Per-dimension trend detection over a user's session history."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .session_models import (
    DetectedPattern,
    PatternType,
    SessionSnapshot,
    SkillDimension,
    require_exhaustive,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_SESSIONS = 3

# (summary, recommendation) per pattern type.
PATTERN_GUIDANCE: Dict[PatternType, Tuple[str, str]] = {
    PatternType.IMPROVING: (
        "Scores have increased consistently across sessions.",
        "Continue practicing at higher difficulty to reinforce gains.",
    ),
    PatternType.DECLINING: (
        "Scores have decreased consistently across sessions.",
        "Review recent feedback and slow down responses to regain control.",
    ),
    PatternType.PLATEAU: (
        "Scores have remained unchanged across sessions.",
        "Focus on one specific improvement area during the next session.",
    ),
}

require_exhaustive(PATTERN_GUIDANCE, PatternType, "PATTERN_GUIDANCE")


def _dimension_series(sessions: Sequence[SessionSnapshot]) -> Dict[SkillDimension, List[float]]:
    # dicts keep first-seen order, which fixes the output order of patterns.
    series: Dict[SkillDimension, List[float]] = {}
    for session in sessions:
        for entry in session.scores:
            series.setdefault(entry.dimension, []).append(entry.score)
    return series


def classify_trend(scores: Sequence[float]) -> Optional[PatternType]:
    """Classify a score series by the sign of its consecutive deltas.

    Returns ``None`` when the deltas are mixed. A single-point series has no
    deltas and classifies as improving, matching the vacuous "every delta is
    positive" check; only reachable with ``min_sessions`` below 2.
    """
    deltas = [current - previous for previous, current in zip(scores, scores[1:])]
    if all(delta > 0 for delta in deltas):
        return PatternType.IMPROVING
    if all(delta < 0 for delta in deltas):
        return PatternType.DECLINING
    if all(delta == 0 for delta in deltas):
        return PatternType.PLATEAU
    return None


def detect_patterns(
    sessions: Sequence[SessionSnapshot],
    min_sessions: int = DEFAULT_MIN_SESSIONS,
) -> List[DetectedPattern]:
    """Detect strictly monotonic or flat trends for every scored dimension.

    ``sessions`` must already be in chronological order. Sessions that do not
    score a dimension are skipped for that dimension's series.
    """
    if len(sessions) < min_sessions:
        return []

    patterns: List[DetectedPattern] = []
    for dimension, scores in _dimension_series(sessions).items():
        if len(scores) < min_sessions:
            continue
        trend = classify_trend(scores)
        if trend is None:
            continue
        summary, recommendation = PATTERN_GUIDANCE[trend]
        patterns.append(
            DetectedPattern(
                dimension=dimension,
                type=trend,
                sessions_analyzed=len(scores),
                summary=summary,
                recommendation=recommendation,
            )
        )

    logger.debug(
        "Detected %d pattern(s) across %d session(s) (min_sessions=%d)",
        len(patterns),
        len(sessions),
        min_sessions,
    )
    return patterns


__all__ = ["DEFAULT_MIN_SESSIONS", "PATTERN_GUIDANCE", "classify_trend", "detect_patterns"]
