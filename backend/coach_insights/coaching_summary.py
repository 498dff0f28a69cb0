"""Concise, exportable coaching summaries and the CRM payload built from them."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .journey_models import AdjustmentAction, JourneyAdjustment
from .report_models import CRMWebhookPayload, CoachingSummary, CoachingSummaryMetadata
from .session_models import DetectedPattern, PatternType, format_dimension, require_exhaustive

FOLLOW_UPDATED_PATH = "Follow the updated training path recommendations"
CONTINUE_CURRENT_PATH = "Continue with the current training journey"

ACTION_PHRASES: Dict[AdjustmentAction, str] = {
    AdjustmentAction.UPGRADE: "increase difficulty",
    AdjustmentAction.DOWNGRADE: "reinforce fundamentals",
    AdjustmentAction.PRIORITIZE: "prioritize for upcoming sessions",
}

require_exhaustive(ACTION_PHRASES, AdjustmentAction, "ACTION_PHRASES")


def build_coaching_summary(
    metadata: CoachingSummaryMetadata,
    patterns: Sequence[DetectedPattern],
    journey_adjustments: Sequence[JourneyAdjustment],
) -> CoachingSummary:
    highlights: List[str] = []
    concerns: List[str] = []

    for pattern in patterns:
        label = format_dimension(pattern.dimension)
        if pattern.type == PatternType.IMPROVING:
            highlights.append(f"{label} is improving consistently")
        elif pattern.type == PatternType.DECLINING:
            concerns.append(f"{label} shows declining performance")
        elif pattern.type == PatternType.PLATEAU:
            concerns.append(f"{label} has plateaued")

    adjustments = [
        f"Node {adjustment.node_id}: {ACTION_PHRASES[adjustment.action]}"
        for adjustment in journey_adjustments
    ]

    return CoachingSummary(
        metadata=metadata,
        highlights=highlights,
        concerns=concerns,
        adjustments=adjustments,
        recommended_next_action=FOLLOW_UPDATED_PATH if adjustments else CONTINUE_CURRENT_PATH,
    )


def build_crm_payload(summary: CoachingSummary, pdf_base64: Optional[str] = None) -> CRMWebhookPayload:
    """Flatten a coaching summary into the versioned CRM webhook body."""
    return CRMWebhookPayload(
        user_id=summary.metadata.user_id,
        session_id=summary.metadata.session_id,
        generated_at=summary.metadata.generated_at,
        highlights=list(summary.highlights),
        concerns=list(summary.concerns),
        adjustments=list(summary.adjustments),
        recommended_next_action=summary.recommended_next_action,
        pdf_base64=pdf_base64,
    )


__all__ = [
    "ACTION_PHRASES",
    "CONTINUE_CURRENT_PATH",
    "FOLLOW_UPDATED_PATH",
    "build_coaching_summary",
    "build_crm_payload",
]
