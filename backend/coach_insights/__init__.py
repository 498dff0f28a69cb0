"""Trend detection and coaching recommendations over session skill scores."""

from .audit_report import build_audit_report
from .coaching_summary import build_coaching_summary, build_crm_payload
from .insights_pipeline import CoachingInsights, analyze_user_sessions
from .journey_reassignment import calculate_journey_adjustments
from .journey_recommendation import recommend_next_journey_node
from .manager_rollups import build_manager_rollups
from .pattern_detection import detect_patterns
from .session_comparison import compare_sessions
from .user_drilldown import build_user_drilldown, classify_risk

__all__ = [
    "CoachingInsights",
    "analyze_user_sessions",
    "build_audit_report",
    "build_coaching_summary",
    "build_crm_payload",
    "build_manager_rollups",
    "build_user_drilldown",
    "calculate_journey_adjustments",
    "classify_risk",
    "compare_sessions",
    "detect_patterns",
    "recommend_next_journey_node",
]
