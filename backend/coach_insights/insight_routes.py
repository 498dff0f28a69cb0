"""REST endpoints exposing the insight engine to dashboards and export jobs."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from .audit_report import build_audit_report
from .coaching_summary import build_coaching_summary, build_crm_payload
from .config import Settings, get_settings
from .insights_pipeline import CoachingInsights, analyze_user_sessions
from .journey_models import JourneyAdjustment, NodeRecommendation, TrainingJourneyNode
from .journey_reassignment import calculate_journey_adjustments
from .journey_recommendation import recommend_next_journey_node
from .manager_rollups import build_manager_rollups
from .pattern_detection import detect_patterns
from .report_models import (
    AuditMetadata,
    AuditReport,
    CRMWebhookPayload,
    CoachingSummary,
    CoachingSummaryMetadata,
    LinkedFeedback,
    ManagerRollupResult,
    TranscriptLine,
    UserDrilldownSummary,
    UserPatternSummary,
)
from .scales import ScoreScale, snapshot_to_canonical, snapshots_to_canonical
from .session_comparison import compare_sessions
from .session_models import DetectedPattern, ScoreDelta, SessionSnapshot
from .telemetry import timed_event
from .user_drilldown import build_user_drilldown


router = APIRouter(prefix="/api/insights", tags=["insights"])
logger = logging.getLogger(__name__)


class PatternDetectionRequest(BaseModel):
    sessions: List[SessionSnapshot] = Field(default_factory=list)
    min_sessions: Optional[int] = Field(default=None, ge=1)
    score_scale: Optional[ScoreScale] = None


class JourneyRequest(BaseModel):
    nodes: List[TrainingJourneyNode] = Field(default_factory=list)
    patterns: List[DetectedPattern] = Field(default_factory=list)


class RecommendationResponse(BaseModel):
    recommendation: Optional[NodeRecommendation] = None


class ComparisonRequest(BaseModel):
    previous: SessionSnapshot
    current: SessionSnapshot
    score_scale: Optional[ScoreScale] = None


class RollupRequest(BaseModel):
    users: List[UserPatternSummary] = Field(default_factory=list)


class DrilldownRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    sessions: List[SessionSnapshot] = Field(default_factory=list)
    patterns: List[DetectedPattern] = Field(default_factory=list)
    score_scale: Optional[ScoreScale] = None


class CoachingSummaryRequest(BaseModel):
    metadata: CoachingSummaryMetadata
    patterns: List[DetectedPattern] = Field(default_factory=list)
    adjustments: List[JourneyAdjustment] = Field(default_factory=list)


class CRMPayloadRequest(CoachingSummaryRequest):
    pdf_base64: Optional[str] = None


class AuditReportRequest(BaseModel):
    metadata: AuditMetadata
    transcript: List[TranscriptLine] = Field(default_factory=list)
    feedback: List[LinkedFeedback] = Field(default_factory=list)
    patterns: List[DetectedPattern] = Field(default_factory=list)
    adjustments: List[JourneyAdjustment] = Field(default_factory=list)


class AnalyzeRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    sessions: List[SessionSnapshot] = Field(default_factory=list)
    nodes: List[TrainingJourneyNode] = Field(default_factory=list)
    session_id: Optional[str] = None
    min_sessions: Optional[int] = Field(default=None, ge=1)
    score_scale: Optional[ScoreScale] = None
    generated_at: Optional[str] = None


def _scale(requested: Optional[ScoreScale], settings: Settings) -> ScoreScale:
    return requested or settings.input_score_scale


@router.post("/patterns", response_model=List[DetectedPattern], status_code=status.HTTP_200_OK)
def detect_session_patterns(
    payload: PatternDetectionRequest,
    settings: Settings = Depends(get_settings),
) -> List[DetectedPattern]:
    sessions = snapshots_to_canonical(payload.sessions, _scale(payload.score_scale, settings))
    min_sessions = payload.min_sessions or settings.min_sessions
    with timed_event("patterns_detected", session_count=len(sessions), min_sessions=min_sessions) as details:
        patterns = detect_patterns(sessions, min_sessions)
        details["pattern_types"] = [pattern.type for pattern in patterns]
    return patterns


@router.post("/recommendation", response_model=RecommendationResponse, status_code=status.HTTP_200_OK)
def recommend_node(payload: JourneyRequest) -> RecommendationResponse:
    with timed_event("journey_recommendation_served", node_count=len(payload.nodes)) as details:
        recommendation = recommend_next_journey_node(payload.nodes, payload.patterns)
        details["node_id"] = recommendation.node_id if recommendation else None
    if recommendation is None:
        logger.info("No available journey node among %d node(s)", len(payload.nodes))
    return RecommendationResponse(recommendation=recommendation)


@router.post("/adjustments", response_model=List[JourneyAdjustment], status_code=status.HTTP_200_OK)
def journey_adjustments(payload: JourneyRequest) -> List[JourneyAdjustment]:
    with timed_event("journey_adjustments_calculated", pattern_count=len(payload.patterns)) as details:
        adjustments = calculate_journey_adjustments(payload.nodes, payload.patterns)
        details["adjustment_count"] = len(adjustments)
    return adjustments


@router.post("/comparison", response_model=List[ScoreDelta], status_code=status.HTTP_200_OK)
def session_comparison(
    payload: ComparisonRequest,
    settings: Settings = Depends(get_settings),
) -> List[ScoreDelta]:
    scale = _scale(payload.score_scale, settings)
    previous = snapshot_to_canonical(payload.previous, scale)
    current = snapshot_to_canonical(payload.current, scale)
    with timed_event(
        "session_comparison_served",
        previous_session_id=previous.session_id,
        current_session_id=current.session_id,
    ) as details:
        deltas = compare_sessions(previous, current)
        details["dimension_count"] = len(deltas)
    return deltas


@router.post("/rollups", response_model=ManagerRollupResult, status_code=status.HTTP_200_OK)
def manager_rollups(payload: RollupRequest) -> ManagerRollupResult:
    with timed_event("manager_rollup_built", user_count=len(payload.users)) as details:
        result = build_manager_rollups(payload.users)
        details["attention_count"] = len(result.users_needing_attention)
    return result


@router.post("/drilldown", response_model=UserDrilldownSummary, status_code=status.HTTP_200_OK)
def user_drilldown(
    payload: DrilldownRequest,
    settings: Settings = Depends(get_settings),
) -> UserDrilldownSummary:
    sessions = snapshots_to_canonical(payload.sessions, _scale(payload.score_scale, settings))
    with timed_event("user_drilldown_built", user_id=payload.user_id) as details:
        drilldown = build_user_drilldown(
            payload.user_id,
            sessions,
            payload.patterns,
            settings.recent_session_limit,
        )
        details["risk_level"] = drilldown.risk_level
    return drilldown


@router.post("/coaching-summary", response_model=CoachingSummary, status_code=status.HTTP_200_OK)
def coaching_summary(payload: CoachingSummaryRequest) -> CoachingSummary:
    with timed_event(
        "coaching_summary_built",
        user_id=payload.metadata.user_id,
        session_id=payload.metadata.session_id,
    ) as details:
        summary = build_coaching_summary(payload.metadata, payload.patterns, payload.adjustments)
        details["adjustment_count"] = len(summary.adjustments)
    return summary


@router.post("/coaching-summary/crm", response_model=CRMWebhookPayload, status_code=status.HTTP_200_OK)
def coaching_summary_crm_payload(payload: CRMPayloadRequest) -> CRMWebhookPayload:
    summary = build_coaching_summary(payload.metadata, payload.patterns, payload.adjustments)
    return build_crm_payload(summary, payload.pdf_base64)


@router.post("/audit-report", response_model=AuditReport, status_code=status.HTTP_200_OK)
def audit_report(payload: AuditReportRequest) -> AuditReport:
    with timed_event(
        "audit_report_built",
        user_id=payload.metadata.user_id,
        session_id=payload.metadata.session_id,
        reviewer=payload.metadata.reviewer,
    ) as details:
        report = build_audit_report(
            payload.metadata,
            payload.transcript,
            payload.feedback,
            payload.patterns,
            payload.adjustments,
        )
        details["transcript_lines"] = len(report.transcript)
    return report


@router.post("/analyze", response_model=CoachingInsights, status_code=status.HTTP_200_OK)
def analyze(
    payload: AnalyzeRequest,
    settings: Settings = Depends(get_settings),
) -> CoachingInsights:
    sessions = snapshots_to_canonical(payload.sessions, _scale(payload.score_scale, settings))
    generated_at = payload.generated_at or datetime.now(timezone.utc).isoformat()
    with timed_event("user_insights_analyzed", user_id=payload.user_id, session_count=len(sessions)) as details:
        insights = analyze_user_sessions(
            payload.user_id,
            sessions,
            payload.nodes,
            session_id=payload.session_id,
            min_sessions=payload.min_sessions or settings.min_sessions,
            recent_limit=settings.recent_session_limit,
            generated_at=generated_at,
        )
        details["risk_level"] = insights.drilldown.risk_level
        details["pattern_count"] = len(insights.patterns)
    return insights


__all__ = ["router"]
