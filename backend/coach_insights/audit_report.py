"""Compliance audit report assembly."""

from __future__ import annotations

from typing import Sequence

from .journey_models import JourneyAdjustment
from .report_models import AuditMetadata, AuditReport, LinkedFeedback, TranscriptLine
from .session_models import DetectedPattern


def build_audit_report(
    metadata: AuditMetadata,
    transcript: Sequence[TranscriptLine],
    feedback: Sequence[LinkedFeedback],
    detected_patterns: Sequence[DetectedPattern],
    journey_adjustments: Sequence[JourneyAdjustment],
) -> AuditReport:
    """Group the session record with the decisions derived from it; nothing is rewritten."""
    return AuditReport(
        metadata=metadata,
        transcript=list(transcript),
        feedback=list(feedback),
        detected_patterns=list(detected_patterns),
        journey_adjustments=list(journey_adjustments),
    )


__all__ = ["build_audit_report"]
