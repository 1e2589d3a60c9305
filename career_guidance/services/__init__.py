"""Services package - in-process assessment and wellness flows."""
from .assessment_service import AssessmentService, get_assessment_service
from .wellness_service import (
    CheckinResult,
    Dashboard,
    WellnessService,
    get_wellness_service,
)

__all__ = [
    "AssessmentService",
    "get_assessment_service",
    "CheckinResult",
    "Dashboard",
    "WellnessService",
    "get_wellness_service",
]
