"""Rule-based wellness insights.

Each rule is an independent predicate over the current check-in (and, for
the mood trend, the recent history). Every triggered rule contributes one
insight; nothing is deduplicated against insights stored earlier.

| Rule              | Fires when                                               |
|-------------------|----------------------------------------------------------|
| mood trend        | ≥3 history entries and mean(last 3) − Σ(prior 3)/3 > 1   |
| sleep concern     | sleep_quality ≤ 4 and hours_slept < 7                    |
| stress + anxiety  | stress_level ≥ 7 and anxiety_level ≥ 7                   |
| high productivity | productivity_score ≥ 8 and focus_level ≥ 8               |
"""
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import structlog

from career_guidance.models.enums import (
    PRIORITY_RANK,
    InsightPriority,
    InsightType,
    WellnessCategory,
)
from career_guidance.models.wellness import Insight, WellnessCheckin
from career_guidance.scoring.utils import mean

logger = structlog.get_logger(__name__)

TREND_WINDOW: int = 3
MOOD_TREND_THRESHOLD: float = 1.0
POOR_SLEEP_QUALITY: int = 4
MIN_HEALTHY_SLEEP_HOURS: float = 7.0
HIGH_STRESS: int = 7
HIGH_ANXIETY: int = 7
HIGH_PRODUCTIVITY: int = 8
HIGH_FOCUS: int = 8


def mood_trend_delta(history: Sequence[WellnessCheckin]) -> Optional[float]:
    """mean(mood, last 3) − Σ(mood, the 3 before) / 3, or None below 3 entries.

    ``history`` is chronological (oldest first). Both windows are divided by
    3, so a short or empty earlier window counts its missing entries as 0.
    """
    if len(history) < TREND_WINDOW:
        return None
    recent = mean(c.mood_score for c in history[-TREND_WINDOW:])
    previous = sum(c.mood_score for c in history[-2 * TREND_WINDOW:-TREND_WINDOW]) / TREND_WINDOW
    return recent - previous


def _mood_trend(checkin: WellnessCheckin, history: Sequence[WellnessCheckin]) -> Optional[Insight]:
    delta = mood_trend_delta(history)
    if delta is None or delta <= MOOD_TREND_THRESHOLD:
        return None
    return Insight(
        type=InsightType.TREND,
        title="Mood Improvement Detected",
        description=f"Your mood has improved by {delta:.1f} points over the last 3 days!",
        category=WellnessCategory.MENTAL,
        recommendations=(
            "Keep up the great work!",
            "Consider what positive changes you've made recently",
        ),
        priority=InsightPriority.MEDIUM,
    )


def _sleep_concern(checkin: WellnessCheckin, history: Sequence[WellnessCheckin]) -> Optional[Insight]:
    if not (
        checkin.sleep_quality <= POOR_SLEEP_QUALITY
        and checkin.hours_slept is not None
        and checkin.hours_slept < MIN_HEALTHY_SLEEP_HOURS
    ):
        return None
    return Insight(
        type=InsightType.WARNING,
        title="Sleep Quality Concern",
        description="Poor sleep quality combined with insufficient sleep hours detected.",
        category=WellnessCategory.SLEEP,
        recommendations=(
            "Aim for 7-9 hours of sleep",
            "Create a consistent bedtime routine",
            "Limit screen time before bed",
        ),
        priority=InsightPriority.HIGH,
    )


def _stress_anxiety(checkin: WellnessCheckin, history: Sequence[WellnessCheckin]) -> Optional[Insight]:
    if not (
        checkin.stress_level >= HIGH_STRESS
        and checkin.anxiety_level is not None
        and checkin.anxiety_level >= HIGH_ANXIETY
    ):
        return None
    return Insight(
        type=InsightType.WARNING,
        title="High Stress and Anxiety",
        description=(
            "Both stress and anxiety levels are elevated. "
            "Consider stress management techniques."
        ),
        category=WellnessCategory.MENTAL,
        recommendations=(
            "Try deep breathing exercises",
            "Take short breaks during study/work",
            "Consider talking to someone you trust",
            "Practice mindfulness or meditation",
        ),
        priority=InsightPriority.HIGH,
    )


def _high_productivity(checkin: WellnessCheckin, history: Sequence[WellnessCheckin]) -> Optional[Insight]:
    if not (
        checkin.productivity_score is not None
        and checkin.productivity_score >= HIGH_PRODUCTIVITY
        and checkin.focus_level >= HIGH_FOCUS
    ):
        return None
    return Insight(
        type=InsightType.ACHIEVEMENT,
        title="High Productivity Day",
        description="Excellent focus and productivity today! You're in the zone.",
        category=WellnessCategory.PRODUCTIVITY,
        recommendations=(
            "Note what made today successful",
            "Try to replicate these conditions tomorrow",
        ),
        priority=InsightPriority.MEDIUM,
    )


InsightRule = Callable[[WellnessCheckin, Sequence[WellnessCheckin]], Optional[Insight]]


@dataclass(frozen=True)
class NamedRule:
    name: str
    evaluate: InsightRule


DEFAULT_RULES: Tuple[NamedRule, ...] = (
    NamedRule("mood_trend", _mood_trend),
    NamedRule("sleep_concern", _sleep_concern),
    NamedRule("stress_anxiety", _stress_anxiety),
    NamedRule("high_productivity", _high_productivity),
)


class InsightEngine:
    """Evaluate the ordered rule set against a check-in.

    Parameters
    ----------
    rules:
        Override the default rule set (evaluated in the given order).
    """

    def __init__(self, rules: Optional[Iterable[NamedRule]] = None) -> None:
        self.rules: Tuple[NamedRule, ...] = tuple(rules) if rules is not None else DEFAULT_RULES
        logger.info("insight_engine_initialized", rules=[r.name for r in self.rules])

    def generate(
        self,
        checkin: WellnessCheckin,
        history: Sequence[WellnessCheckin] = (),
    ) -> List[Insight]:
        """Return the insights triggered by ``checkin``.

        Args:
            checkin: The check-in being evaluated.
            history: Recent check-ins, oldest first (as supplied by the caller).

        Returns:
            Insights in rule order; empty if no rule fires.
        """
        insights: List[Insight] = []
        for rule in self.rules:
            insight = rule.evaluate(checkin, history)
            if insight is None:
                continue
            trigger = {"checkinId": checkin.id} if checkin.id else {}
            insights.append(
                insight.model_copy(update={"user_id": checkin.user_id, "trigger_data": trigger})
            )

        logger.info(
            "wellness_insights_generated",
            checkin_id=checkin.id,
            history=len(history),
            triggered=[i.title for i in insights],
        )
        return insights


def rank_insights(
    insights: Iterable[Insight],
    limit: Optional[int] = None,
    unread_only: bool = False,
) -> List[Insight]:
    """Order insights for display: highest priority first, then newest first."""
    pool = [i for i in insights if not (unread_only and i.is_read)]
    # two stable sorts: newest first, then priority
    pool.sort(key=lambda i: i.created_at, reverse=True)
    pool.sort(key=lambda i: PRIORITY_RANK[i.priority], reverse=True)
    return pool if limit is None else pool[:limit]
