"""Assessment Pydantic models."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Tuple
from uuid import uuid4

from pydantic import AliasChoices, ConfigDict, Field

from .common import CamelModel
from .enums import AssessmentType
from .narrative import CareerSuggestion, DetailedFeedback, QuestionFeedback


class Question(CamelModel):
    """A single templated question; immutable once the assessment exists."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str = Field(
        default="",
        validation_alias=AliasChoices("text", "question"),
        description="Prompt shown to the user",
    )
    options: Tuple[str, ...] = ()
    category: str = Field(..., min_length=1, description="Free-text category label")
    weight: float = Field(default=1.0, gt=0)
    order: Optional[int] = Field(default=None, ge=1)


class AssessmentResponse(CamelModel):
    """The user's answer to one question."""
    model_config = ConfigDict(frozen=True)

    question: Question
    answer: str

    @property
    def question_id(self) -> str:
        return self.question.id


class AssessmentRecord(CamelModel):
    """Summary view of a stored assessment, used for assessment analytics."""
    id: str
    type: AssessmentType
    title: str = ""
    is_completed: bool = True
    percentage: Optional[float] = None
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


class AssessmentResult(CamelModel):
    """Scores plus narrative for one submitted assessment."""
    assessment_type: str
    overall_score: float
    percentage: float
    category_scores: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    dominant_style: Optional[str] = None
    traits: Optional[Dict[str, Dict[str, Any]]] = None

    insights: str
    question_analysis: List[QuestionFeedback] = Field(default_factory=list)
    strengths: List[str]
    improvement_areas: List[str] = Field(default_factory=list)
    career_suggestions: List[CareerSuggestion]
    recommendations: List[str]
    next_steps: List[str] = Field(default_factory=list)
    detailed_feedback: Optional[DetailedFeedback] = None
    narrative_source: Literal["generated", "fallback"] = "fallback"


class AssessmentSummary(CamelModel):
    """Aggregate statistics over a user's completed assessments."""
    total_completed: int
    average_score: float
    completed_by_type: Dict[str, int] = Field(default_factory=dict)
    recent_assessments: List[AssessmentRecord] = Field(default_factory=list)
