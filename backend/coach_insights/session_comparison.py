"""Pairwise score comparison between two session snapshots."""

from __future__ import annotations

import logging
from typing import Dict, List

from .session_models import ScoreDelta, SessionSnapshot, SkillDimension

logger = logging.getLogger(__name__)


def compare_sessions(previous: SessionSnapshot, current: SessionSnapshot) -> List[ScoreDelta]:
    """Return one delta per dimension scored in ``current``.

    Dimensions missing from ``previous`` compare against 0. Dimensions only
    present in ``previous`` are not reported.
    """
    previous_scores: Dict[SkillDimension, float] = {
        entry.dimension: entry.score for entry in previous.scores
    }

    deltas: List[ScoreDelta] = []
    for entry in current.scores:
        prior = previous_scores.get(entry.dimension, 0)
        deltas.append(
            ScoreDelta(
                dimension=entry.dimension,
                previous=prior,
                current=entry.score,
                delta=entry.score - prior,
            )
        )

    dropped = set(previous_scores) - {entry.dimension for entry in current.scores}
    if dropped:
        logger.debug(
            "Session %s scores %d dimension(s) absent from %s; omitted from comparison",
            previous.session_id,
            len(dropped),
            current.session_id,
        )
    return deltas


__all__ = ["compare_sessions"]
