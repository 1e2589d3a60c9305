"""Enumeration types for the career guidance engine."""
from enum import Enum


class AssessmentType(str, Enum):
    """Built-in assessment families; each has its own scoring algorithm."""
    APTITUDE = "APTITUDE"
    INTEREST = "INTEREST"
    PERSONALITY = "PERSONALITY"
    SKILL = "SKILL"
    CAREER_VALUES = "CAREER_VALUES"
    LEARNING_STYLE = "LEARNING_STYLE"


class InsightType(str, Enum):
    """Kinds of wellness insight."""
    TREND = "TREND"
    WARNING = "WARNING"
    ACHIEVEMENT = "ACHIEVEMENT"


class InsightPriority(str, Enum):
    """Insight urgency."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class WellnessCategory(str, Enum):
    """Category tags shared by wellness goals and insights."""
    PHYSICAL = "PHYSICAL"
    MENTAL = "MENTAL"
    EMOTIONAL = "EMOTIONAL"
    SOCIAL = "SOCIAL"
    ACADEMIC = "ACADEMIC"
    SLEEP = "SLEEP"
    NUTRITION = "NUTRITION"
    EXERCISE = "EXERCISE"
    MINDFULNESS = "MINDFULNESS"
    PRODUCTIVITY = "PRODUCTIVITY"


# Sort rank used when listing insights (higher first)
PRIORITY_RANK: dict[InsightPriority, int] = {
    InsightPriority.LOW: 0,
    InsightPriority.MEDIUM: 1,
    InsightPriority.HIGH: 2,
}
