"""Next-node recommendation driven by detected learning patterns."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .journey_models import (
    Difficulty,
    JourneyStatus,
    NodeRecommendation,
    TrainingJourneyNode,
)
from .session_models import DetectedPattern, PatternType, require_exhaustive

logger = logging.getLogger(__name__)

FALLBACK_REASON = "Continuing with the next available session will help maintain progress."

RECOMMENDATION_REASONS: Dict[PatternType, str] = {
    PatternType.DECLINING: (
        "Recent sessions show declining performance. Reinforcing fundamentals is recommended."
    ),
    PatternType.PLATEAU: (
        "Performance has plateaued. Repeating targeted practice may unlock improvement."
    ),
    PatternType.IMPROVING: (
        "Consistent improvement detected. Advancing to a higher difficulty is recommended."
    ),
}

require_exhaustive(RECOMMENDATION_REASONS, PatternType, "RECOMMENDATION_REASONS")

NodeFilter = Callable[[TrainingJourneyNode], bool]

# Evaluated in order; each tier scans every pattern of its type before the next tier runs.
PRIORITY_TIERS: Tuple[Tuple[PatternType, NodeFilter], ...] = (
    # Declining skill: easier related node.
    (PatternType.DECLINING, lambda node: node.difficulty != Difficulty.ADVANCED),
    # Plateau: repeat similar work at any difficulty.
    (PatternType.PLATEAU, lambda node: True),
    # Improving: stretch into a harder related node.
    (PatternType.IMPROVING, lambda node: node.difficulty == Difficulty.ADVANCED),
)


def recommend_next_journey_node(
    nodes: Sequence[TrainingJourneyNode],
    patterns: Sequence[DetectedPattern],
) -> Optional[NodeRecommendation]:
    """Pick the single node the learner should tackle next.

    Priority order:
    1. Declining skill -> non-advanced node for that dimension
    2. Plateauing skill -> any node for that dimension
    3. Improving skill -> advanced node for that dimension
    4. Otherwise -> first available node

    Returns ``None`` when no node is available.
    """
    available: List[TrainingJourneyNode] = [
        node for node in nodes if node.status == JourneyStatus.AVAILABLE
    ]
    if not available:
        return None

    for pattern_type, accepts in PRIORITY_TIERS:
        for pattern in patterns:
            if pattern.type != pattern_type:
                continue
            match = next(
                (
                    node
                    for node in available
                    if node.dimension == pattern.dimension and accepts(node)
                ),
                None,
            )
            if match is not None:
                logger.debug(
                    "Recommending node %s for %s %s pattern",
                    match.id,
                    pattern.type.value,
                    pattern.dimension.value,
                )
                return NodeRecommendation(node_id=match.id, reason=RECOMMENDATION_REASONS[pattern_type])

    return NodeRecommendation(node_id=available[0].id, reason=FALLBACK_REASON)


__all__ = [
    "FALLBACK_REASON",
    "PRIORITY_TIERS",
    "RECOMMENDATION_REASONS",
    "recommend_next_journey_node",
]
