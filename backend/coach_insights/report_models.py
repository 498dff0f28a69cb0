"""Read-only aggregation models: manager rollups, drilldowns, summaries and audit reports."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .journey_models import JourneyAdjustment
from .session_models import DetectedPattern, SessionSnapshot, SkillDimension


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TranscriptSpeaker(str, Enum):
    USER = "user"
    PERSONA = "persona"
    COACH = "coach"


class UserPatternSummary(BaseModel):
    """Detected patterns for one user, as fed into the manager rollup."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    patterns: List[DetectedPattern] = Field(default_factory=list)


class DimensionRollup(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: SkillDimension
    improving_count: int = Field(default=0, ge=0)
    declining_count: int = Field(default=0, ge=0)
    plateau_count: int = Field(default=0, ge=0)


class ManagerRollupResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_users: int = Field(ge=0)
    dimension_rollups: List[DimensionRollup] = Field(default_factory=list)
    users_needing_attention: List[str] = Field(default_factory=list)


class UserDrilldownSummary(BaseModel):
    """Manager-facing view of a single user's recent trend."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    recent_sessions: List[SessionSnapshot] = Field(default_factory=list)
    patterns: List[DetectedPattern] = Field(default_factory=list)
    risk_level: RiskLevel
    coaching_focus: List[str] = Field(default_factory=list)


class CoachingSummaryMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    session_id: str
    generated_at: str


class CoachingSummary(BaseModel):
    """Exportable, human-readable coaching summary."""

    model_config = ConfigDict(frozen=True)

    metadata: CoachingSummaryMetadata
    highlights: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    adjustments: List[str] = Field(default_factory=list)
    recommended_next_action: str


class CRMWebhookPayload(BaseModel):
    """Plain-data body posted to CRM webhooks by the delivery collaborator."""

    model_config = ConfigDict(frozen=True)

    version: Literal["1.0"] = "1.0"
    user_id: str
    session_id: str
    generated_at: str
    highlights: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)
    adjustments: List[str] = Field(default_factory=list)
    recommended_next_action: str
    pdf_base64: Optional[str] = None


class TranscriptLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    speaker: TranscriptSpeaker
    text: str


class LinkedEvidence(BaseModel):
    model_config = ConfigDict(frozen=True)

    transcript_line_id: str
    note: str


class LinkedFeedback(BaseModel):
    """Dimension feedback tied back to the transcript lines that justify it."""

    model_config = ConfigDict(frozen=True)

    id: str
    dimension: SkillDimension
    score: float
    reason: str
    evidence: List[LinkedEvidence] = Field(default_factory=list)
    next_step: str


class AuditMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    session_id: str
    generated_at: str
    reviewer: Optional[str] = None


class AuditReport(BaseModel):
    """Compliance-ready record of a session and the decisions derived from it."""

    model_config = ConfigDict(frozen=True)

    metadata: AuditMetadata
    transcript: List[TranscriptLine] = Field(default_factory=list)
    feedback: List[LinkedFeedback] = Field(default_factory=list)
    detected_patterns: List[DetectedPattern] = Field(default_factory=list)
    journey_adjustments: List[JourneyAdjustment] = Field(default_factory=list)


__all__ = [
    "AuditMetadata",
    "AuditReport",
    "CRMWebhookPayload",
    "CoachingSummary",
    "CoachingSummaryMetadata",
    "DimensionRollup",
    "LinkedEvidence",
    "LinkedFeedback",
    "ManagerRollupResult",
    "RiskLevel",
    "TranscriptLine",
    "TranscriptSpeaker",
    "UserDrilldownSummary",
    "UserPatternSummary",
]
