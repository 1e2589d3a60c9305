"""Wellness check-in, insight and goal Pydantic models."""
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional, Tuple

from pydantic import ConfigDict, Field, computed_field

from career_guidance.wellness.score import WellnessScoreCalculator

from .common import CamelModel
from .enums import InsightPriority, InsightType, WellnessCategory

_score_calculator = WellnessScoreCalculator()


def _metric(required: bool = True, description: str = "") -> Any:
    """1–10 self-reported metric."""
    if required:
        return Field(..., ge=1, le=10, description=description)
    return Field(default=None, ge=1, le=10, description=description)


class WellnessCheckin(CamelModel):
    """One daily wellness check-in.

    ``overall_score`` is derived from the metrics on every read, so it always
    agrees with :class:`WellnessScoreCalculator` even after a field is edited.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Core metrics
    mood_score: int = _metric(description="Higher is better")
    stress_level: int = _metric(description="Higher is worse")
    energy_level: int = _metric()
    sleep_quality: int = _metric()
    focus_level: int = _metric()

    # Optional metrics
    productivity_score: Optional[int] = _metric(required=False)
    motivation_level: Optional[int] = _metric(required=False)
    anxiety_level: Optional[int] = _metric(required=False, description="Higher is worse")
    confidence_level: Optional[int] = _metric(required=False)

    # Lifestyle metrics
    hours_slept: Optional[float] = Field(default=None, ge=0, le=24)
    exercise_minutes: Optional[int] = Field(default=None, ge=0)
    screen_time: Optional[int] = Field(default=None, ge=0)
    social_time: Optional[int] = Field(default=None, ge=0)
    study_hours: Optional[float] = Field(default=None, ge=0, le=24)

    activities: List[str] = Field(default_factory=list)
    gratitude: List[str] = Field(default_factory=list)
    challenges: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @computed_field(alias="overallScore")  # type: ignore[prop-decorator]
    @property
    def overall_score(self) -> float:
        return _score_calculator.score(self)


class Insight(CamelModel):
    """A generated wellness insight; only ``is_read`` changes after creation."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    user_id: Optional[str] = None
    type: InsightType
    title: str
    description: str
    category: WellnessCategory
    recommendations: Tuple[str, ...] = Field(..., min_length=1, max_length=4)
    priority: InsightPriority
    is_read: bool = False
    trigger_data: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def mark_read(self) -> "Insight":
        """Return a copy flagged as read."""
        return self.model_copy(update={"is_read": True})


class WellnessGoal(CamelModel):
    """A user-defined wellness target with an optional reminder schedule."""
    id: Optional[str] = None
    user_id: Optional[str] = None
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: WellnessCategory
    target_value: Optional[float] = None
    unit: Optional[str] = None
    reminder_time: Optional[str] = Field(
        default=None,
        pattern=r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$",
        description="Local time as HH:MM",
    )
    reminder_days: List[Annotated[int, Field(ge=0, le=6)]] = Field(
        default_factory=list,
        description="Weekdays, 0 = Sunday … 6 = Saturday",
    )
    is_active: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

