"""Session score and detected pattern models shared by the insight engine."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class SkillDimension(str, Enum):
    """Closed set of coaching feedback dimensions."""

    CONFIDENCE = "confidence"
    CLARITY = "clarity"
    LISTENING = "listening"
    OBJECTION_HANDLING = "objection_handling"
    STRUCTURE = "structure"


class PatternType(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    PLATEAU = "plateau"


DIMENSION_LABELS: Dict[SkillDimension, str] = {
    SkillDimension.CONFIDENCE: "Confidence",
    SkillDimension.CLARITY: "Clarity",
    SkillDimension.LISTENING: "Active Listening",
    SkillDimension.OBJECTION_HANDLING: "Objection Handling",
    SkillDimension.STRUCTURE: "Response Structure",
}


def require_exhaustive(mapping: Dict, enum_cls: type[Enum], name: str) -> None:
    """Fail fast when a lookup table keyed by an enumeration misses a member."""
    missing = [member.value for member in enum_cls if member not in mapping]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")


require_exhaustive(DIMENSION_LABELS, SkillDimension, "DIMENSION_LABELS")


def format_dimension(dimension: SkillDimension | str) -> str:
    value = dimension.value if isinstance(dimension, SkillDimension) else str(dimension)
    return value.replace("_", " ")


class SessionScore(BaseModel):
    """Score recorded for a single dimension in one session."""

    model_config = ConfigDict(frozen=True)

    dimension: SkillDimension
    score: float


class SessionSnapshot(BaseModel):
    """Per-dimension scores captured for one completed coaching session."""

    model_config = ConfigDict(frozen=True)

    session_id: str
    timestamp: str
    scores: List[SessionScore] = Field(default_factory=list)


class DetectedPattern(BaseModel):
    """Multi-session trend observed for a single dimension."""

    model_config = ConfigDict(frozen=True)

    dimension: SkillDimension
    type: PatternType
    sessions_analyzed: int = Field(ge=0)
    summary: str
    recommendation: str


class ScoreDelta(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: SkillDimension
    previous: float
    current: float
    delta: float


__all__ = [
    "DIMENSION_LABELS",
    "DetectedPattern",
    "PatternType",
    "ScoreDelta",
    "SessionScore",
    "SessionSnapshot",
    "SkillDimension",
    "format_dimension",
    "require_exhaustive",
]
