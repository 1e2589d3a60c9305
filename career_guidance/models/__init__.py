"""Pydantic models for the career guidance engine."""

# Common Models
from career_guidance.models.common import CamelModel

# Enums
from career_guidance.models.enums import (
    AssessmentType,
    InsightType,
    InsightPriority,
    WellnessCategory,
    PRIORITY_RANK,
)

# Narrative Models
from career_guidance.models.narrative import (
    CareerSuggestion,
    QuestionFeedback,
    DetailedFeedback,
    Narrative,
)

# Assessment Models
from career_guidance.models.assessment import (
    Question,
    AssessmentResponse,
    AssessmentRecord,
    AssessmentResult,
    AssessmentSummary,
)

# Wellness Models
from career_guidance.models.wellness import (
    WellnessCheckin,
    Insight,
    WellnessGoal,
)

__all__ = [
    # Common
    "CamelModel",
    # Enums
    "AssessmentType",
    "InsightType",
    "InsightPriority",
    "WellnessCategory",
    "PRIORITY_RANK",
    # Narrative
    "CareerSuggestion",
    "QuestionFeedback",
    "DetailedFeedback",
    "Narrative",
    # Assessment
    "Question",
    "AssessmentResponse",
    "AssessmentRecord",
    "AssessmentResult",
    "AssessmentSummary",
    # Wellness
    "WellnessCheckin",
    "Insight",
    "WellnessGoal",
]
