"""Narrative (analysis commentary) models.

The same shape is produced by the external generative service and by the
local fallback generator, so callers never need to know which one ran.
"""
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class CareerSuggestion(CamelModel):
    """A suggested career field with a match percentage."""
    field: str
    match: float = Field(..., ge=0)
    reasoning: str = ""
    requirements: str = ""
    growth: str = ""


class QuestionFeedback(CamelModel):
    """Commentary on a single answer."""
    question: str
    user_answer: str
    is_optimal: bool = True
    feedback: str = ""
    better_choice: Optional[str] = None
    reasoning: str = ""


class DetailedFeedback(CamelModel):
    """Free-text feedback grouped by theme."""
    personality: str = ""
    work_style: str = ""
    learning_style: str = ""
    motivation: str = ""
    challenges: str = ""


class Narrative(CamelModel):
    """Complete narrative analysis for an assessment."""
    analysis: str = Field(..., min_length=1)
    question_analysis: List[QuestionFeedback] = Field(default_factory=list)
    strengths: List[str] = Field(..., min_length=1)
    improvement_areas: List[str] = Field(default_factory=list)
    career_suggestions: List[CareerSuggestion] = Field(..., min_length=1)
    recommendations: List[str] = Field(..., min_length=1)
    next_steps: List[str] = Field(default_factory=list)
    detailed_feedback: DetailedFeedback = Field(default_factory=DetailedFeedback)
