"""Tests for coaching summary, CRM payload and audit report assembly."""

from __future__ import annotations

from coach_insights.audit_report import build_audit_report
from coach_insights.coaching_summary import (
    CONTINUE_CURRENT_PATH,
    FOLLOW_UPDATED_PATH,
    build_coaching_summary,
    build_crm_payload,
)
from coach_insights.journey_models import AdjustmentAction, JourneyAdjustment
from coach_insights.report_models import (
    AuditMetadata,
    CoachingSummaryMetadata,
    LinkedEvidence,
    LinkedFeedback,
    TranscriptLine,
)
from coach_insights.session_models import DetectedPattern


def _metadata() -> CoachingSummaryMetadata:
    return CoachingSummaryMetadata(
        user_id="rep-7",
        session_id="session-42",
        generated_at="2026-10-19T12:00:00+00:00",
    )


def _pattern(dimension: str, pattern_type: str) -> DetectedPattern:
    return DetectedPattern(
        dimension=dimension,
        type=pattern_type,
        sessions_analyzed=3,
        summary="",
        recommendation="",
    )


def test_summary_splits_highlights_and_concerns() -> None:
    patterns = [
        _pattern("confidence", "improving"),
        _pattern("objection_handling", "declining"),
        _pattern("listening", "plateau"),
    ]

    summary = build_coaching_summary(_metadata(), patterns, [])

    assert summary.highlights == ["confidence is improving consistently"]
    assert summary.concerns == [
        "objection handling shows declining performance",
        "listening has plateaued",
    ]
    assert summary.adjustments == []
    assert summary.recommended_next_action == CONTINUE_CURRENT_PATH
    assert summary.metadata == _metadata()


def test_summary_lists_adjustments_in_order() -> None:
    adjustments = [
        JourneyAdjustment(node_id="n1", action=AdjustmentAction.UPGRADE, reason="r"),
        JourneyAdjustment(node_id="n2", action=AdjustmentAction.DOWNGRADE, reason="r"),
        JourneyAdjustment(node_id="n3", action=AdjustmentAction.PRIORITIZE, reason="r"),
    ]

    summary = build_coaching_summary(_metadata(), [], adjustments)

    assert summary.adjustments == [
        "Node n1: increase difficulty",
        "Node n2: reinforce fundamentals",
        "Node n3: prioritize for upcoming sessions",
    ]
    assert summary.recommended_next_action == FOLLOW_UPDATED_PATH


def test_crm_payload_flattens_summary() -> None:
    summary = build_coaching_summary(_metadata(), [_pattern("clarity", "improving")], [])

    payload = build_crm_payload(summary, pdf_base64="JVBERi0=")

    body = payload.model_dump()
    assert body["version"] == "1.0"
    assert body["user_id"] == "rep-7"
    assert body["session_id"] == "session-42"
    assert body["highlights"] == ["clarity is improving consistently"]
    assert body["pdf_base64"] == "JVBERi0="


def test_crm_payload_without_pdf() -> None:
    summary = build_coaching_summary(_metadata(), [], [])

    assert build_crm_payload(summary).pdf_base64 is None


def test_audit_report_copies_inputs_verbatim() -> None:
    metadata = AuditMetadata(
        user_id="rep-7",
        session_id="session-42",
        generated_at="2026-10-19T12:00:00+00:00",
        reviewer="compliance-01",
    )
    transcript = [
        TranscriptLine(id="t1", speaker="persona", text="I only have two minutes."),
        TranscriptLine(id="t2", speaker="user", text="Then I'll keep this brief."),
    ]
    feedback = [
        LinkedFeedback(
            id="f1",
            dimension="confidence",
            score=78,
            reason="Acknowledged the time constraint calmly.",
            evidence=[LinkedEvidence(transcript_line_id="t2", note="Direct opener")],
            next_step="Lead with the strongest data point.",
        )
    ]
    patterns = [_pattern("clarity", "declining")]
    adjustments = [JourneyAdjustment(node_id="n1", action="prioritize", reason="r")]

    report = build_audit_report(metadata, transcript, feedback, patterns, adjustments)

    assert report.metadata == metadata
    assert report.transcript == transcript
    assert report.feedback == feedback
    assert report.detected_patterns == patterns
    assert report.journey_adjustments == adjustments
