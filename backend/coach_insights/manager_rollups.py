"""Aggregate detected patterns across a manager's users."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Sequence

from .report_models import DimensionRollup, ManagerRollupResult, UserPatternSummary
from .session_models import PatternType, SkillDimension

logger = logging.getLogger(__name__)


def build_manager_rollups(user_summaries: Sequence[UserPatternSummary]) -> ManagerRollupResult:
    """Tally pattern types per dimension and flag users with any declining pattern.

    Dimensions appear in the order they are first seen across users.
    """
    tallies: Dict[SkillDimension, Counter] = {}
    users_needing_attention: List[str] = []

    for user in user_summaries:
        has_decline = False
        for pattern in user.patterns:
            tallies.setdefault(pattern.dimension, Counter())[pattern.type] += 1
            if pattern.type == PatternType.DECLINING:
                has_decline = True
        if has_decline:
            users_needing_attention.append(user.user_id)

    rollups = [
        DimensionRollup(
            dimension=dimension,
            improving_count=counts[PatternType.IMPROVING],
            declining_count=counts[PatternType.DECLINING],
            plateau_count=counts[PatternType.PLATEAU],
        )
        for dimension, counts in tallies.items()
    ]

    logger.debug(
        "Built manager rollup for %d user(s); %d flagged for attention",
        len(user_summaries),
        len(users_needing_attention),
    )
    return ManagerRollupResult(
        total_users=len(user_summaries),
        dimension_rollups=rollups,
        users_needing_attention=users_needing_attention,
    )


__all__ = ["build_manager_rollups"]
