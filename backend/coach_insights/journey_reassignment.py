"""Curriculum adjustments derived from cross-session skill patterns."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .journey_models import (
    AdjustmentAction,
    Difficulty,
    JourneyAdjustment,
    JourneyStatus,
    TrainingJourneyNode,
)
from .session_models import DetectedPattern, PatternType

logger = logging.getLogger(__name__)

DOWNGRADE_REASON = (
    "Recent sessions show declining performance. Reinforcing fundamentals is recommended."
)
DECLINE_PRIORITIZE_REASON = (
    "Declining performance detected. Additional focused practice is recommended."
)
PLATEAU_PRIORITIZE_REASON = (
    "Performance has plateaued. Targeted repetition may unlock improvement."
)
UPGRADE_REASON = "Consistent improvement detected. Increasing difficulty is recommended."


def _adjustment_for(pattern: DetectedPattern, node: TrainingJourneyNode) -> Optional[JourneyAdjustment]:
    if pattern.type == PatternType.DECLINING:
        if node.difficulty == Difficulty.ADVANCED:
            return JourneyAdjustment(
                node_id=node.id, action=AdjustmentAction.DOWNGRADE, reason=DOWNGRADE_REASON
            )
        return JourneyAdjustment(
            node_id=node.id, action=AdjustmentAction.PRIORITIZE, reason=DECLINE_PRIORITIZE_REASON
        )
    if pattern.type == PatternType.PLATEAU:
        return JourneyAdjustment(
            node_id=node.id, action=AdjustmentAction.PRIORITIZE, reason=PLATEAU_PRIORITIZE_REASON
        )
    if pattern.type == PatternType.IMPROVING:
        if node.difficulty == Difficulty.INTERMEDIATE:
            return JourneyAdjustment(
                node_id=node.id, action=AdjustmentAction.UPGRADE, reason=UPGRADE_REASON
            )
        return None
    raise ValueError(f"Unhandled pattern type: {pattern.type!r}")


def calculate_journey_adjustments(
    nodes: Sequence[TrainingJourneyNode],
    patterns: Sequence[DetectedPattern],
) -> List[JourneyAdjustment]:
    """Determine how a user's journey should adapt to their detected patterns.

    Every (pattern, node) pair is evaluated independently, so a node matching
    several patterns receives several adjustments. Output follows pattern
    order, then node order.
    """
    adjustments: List[JourneyAdjustment] = []
    for pattern in patterns:
        related = [
            node
            for node in nodes
            if node.dimension == pattern.dimension and node.status != JourneyStatus.COMPLETED
        ]
        for node in related:
            adjustment = _adjustment_for(pattern, node)
            if adjustment is not None:
                adjustments.append(adjustment)

    logger.debug(
        "Calculated %d journey adjustment(s) from %d pattern(s) over %d node(s)",
        len(adjustments),
        len(patterns),
        len(nodes),
    )
    return adjustments


__all__ = [
    "DECLINE_PRIORITIZE_REASON",
    "DOWNGRADE_REASON",
    "PLATEAU_PRIORITIZE_REASON",
    "UPGRADE_REASON",
    "calculate_journey_adjustments",
]
