"""Score scale conversion applied at the system boundary.

The insight engine works on the 0-100 scale. Callers holding 0-10 scores
convert them here before handing snapshots to the engine. Conversion never
clamps: out-of-range inputs stay out of range.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence

from .session_models import SessionSnapshot, require_exhaustive


class ScoreScale(str, Enum):
    PERCENT = "percent"
    TEN_POINT = "ten_point"


CANONICAL_SCALE = ScoreScale.PERCENT

_TO_PERCENT: Dict[ScoreScale, float] = {
    ScoreScale.PERCENT: 1.0,
    ScoreScale.TEN_POINT: 10.0,
}

require_exhaustive(_TO_PERCENT, ScoreScale, "_TO_PERCENT")


def to_canonical_score(score: float, scale: ScoreScale) -> float:
    return score * _TO_PERCENT[ScoreScale(scale)]


def snapshot_to_canonical(snapshot: SessionSnapshot, scale: ScoreScale) -> SessionSnapshot:
    if ScoreScale(scale) == CANONICAL_SCALE:
        return snapshot
    scores = [
        entry.model_copy(update={"score": to_canonical_score(entry.score, scale)})
        for entry in snapshot.scores
    ]
    return snapshot.model_copy(update={"scores": scores})


def snapshots_to_canonical(snapshots: Sequence[SessionSnapshot], scale: ScoreScale) -> List[SessionSnapshot]:
    return [snapshot_to_canonical(snapshot, scale) for snapshot in snapshots]


__all__ = [
    "CANONICAL_SCALE",
    "ScoreScale",
    "snapshot_to_canonical",
    "snapshots_to_canonical",
    "to_canonical_score",
]
