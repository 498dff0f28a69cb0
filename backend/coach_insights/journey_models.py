"""Training journey (curriculum) models read by the recommender and reassigner."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .session_models import SkillDimension


class JourneyStatus(str, Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class JourneyNodeType(str, Enum):
    ONBOARDING = "onboarding"
    PERSONA = "persona"
    OBJECTION = "objection"
    SKILL = "skill"
    ASSESSMENT = "assessment"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class AdjustmentAction(str, Enum):
    PRIORITIZE = "prioritize"
    DOWNGRADE = "downgrade"
    UPGRADE = "upgrade"


class JourneyNodeMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: Optional[SkillDimension] = None
    persona_id: Optional[str] = None
    objection_id: Optional[str] = None


class TrainingJourneyNode(BaseModel):
    """One unit of the curriculum graph.

    The graph owner resolves unlock rules; the insight engine only reads
    ``status``, ``difficulty`` and ``metadata.dimension``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type: JourneyNodeType
    status: JourneyStatus
    difficulty: Optional[Difficulty] = None
    metadata: Optional[JourneyNodeMetadata] = None
    title: Optional[str] = None
    description: Optional[str] = None
    required_to_unlock: List[str] = Field(default_factory=list)
    estimated_minutes: Optional[int] = Field(default=None, ge=0)
    recommended: bool = False

    @property
    def dimension(self) -> Optional[SkillDimension]:
        return self.metadata.dimension if self.metadata else None


class JourneyAdjustment(BaseModel):
    """Advisory directive for a curriculum node. Applying it is the graph owner's job."""

    model_config = ConfigDict(frozen=True)

    node_id: str
    action: AdjustmentAction
    reason: str


class NodeRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_id: str
    reason: str


__all__ = [
    "AdjustmentAction",
    "Difficulty",
    "JourneyAdjustment",
    "JourneyNodeMetadata",
    "JourneyNodeType",
    "JourneyStatus",
    "NodeRecommendation",
    "TrainingJourneyNode",
]
