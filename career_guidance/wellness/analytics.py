"""Time-windowed wellness statistics.

Averages
--------
  mean of mood, stress, energy, sleep quality, focus and overall score over
  every check-in in the window; None when the window is empty.

Weekly trends
-------------
  the chronologically sorted window is cut into consecutive groups of 7
  (the last group may be shorter); each group is averaged like the window.

Correlation (Pearson)
---------------------
                 nΣxy − ΣxΣy
  r = ─────────────────────────────────
      √((nΣx² − (Σx)²)(nΣy² − (Σy)²))

  r is 0 whenever the denominator is 0 (constant series, empty series).

Streak
------
  consecutive UTC calendar days with a check-in, walking back from ``today``
  and stopping at the first day without one.
"""
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Sequence

import structlog

from career_guidance.models.wellness import WellnessCheckin
from career_guidance.scoring.utils import clamp, mean

logger = structlog.get_logger(__name__)

WEEK_SIZE: int = 7
MIN_EXERCISE_SAMPLES: int = 5  # exerciseMood needs strictly more than this

# wire key → check-in attribute
METRICS: Dict[str, str] = {
    "mood": "mood_score",
    "stress": "stress_level",
    "energy": "energy_level",
    "sleep": "sleep_quality",
    "focus": "focus_level",
    "overall": "overall_score",
}


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so windows compare cleanly."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson's r for two equal-length series; 0 when undefined.

    Raises:
        ValueError: If the series differ in length.
    """
    if len(x) != len(y):
        raise ValueError(f"Series length mismatch: {len(x)} != {len(y)}")
    n = len(x)
    if n == 0:
        return 0.0

    sum_x = sum(x)
    sum_y = sum(y)
    sum_xy = sum(a * b for a, b in zip(x, y))
    sum_xx = sum(a * a for a in x)
    sum_yy = sum(b * b for b in y)

    var_x = n * sum_xx - sum_x * sum_x
    var_y = n * sum_yy - sum_y * sum_y
    # float round-off can leave a tiny negative instead of an exact 0
    if var_x <= 0 or var_y <= 0:
        return 0.0

    r = (n * sum_xy - sum_x * sum_y) / math.sqrt(var_x * var_y)
    # clip |r| to 1 against round-off
    return clamp(r, -1.0, 1.0)


def metric_averages(checkins: Sequence[WellnessCheckin]) -> Optional[Dict[str, float]]:
    """Per-metric means, or None for an empty list."""
    if not checkins:
        return None
    return {
        key: mean(getattr(c, attr) for c in checkins)
        for key, attr in METRICS.items()
    }


def daily_point(checkin: WellnessCheckin) -> dict:
    """One check-in as a chart point keyed by metric."""
    point = {"date": checkin.created_at.isoformat()}
    point.update({key: getattr(checkin, attr) for key, attr in METRICS.items()})
    return point


def current_streak(checkins: Iterable[WellnessCheckin], today: Optional[date] = None) -> int:
    """Count consecutive days with a check-in, ending at ``today``."""
    today = today or date.today()
    days = {as_utc(c.created_at).date() for c in checkins}
    streak = 0
    expected = today
    while expected in days:
        streak += 1
        expected -= timedelta(days=1)
    return streak


def filter_window(
    checkins: Iterable[WellnessCheckin],
    days: int,
    now: Optional[datetime] = None,
) -> List[WellnessCheckin]:
    """Check-ins created within the last ``days`` days, oldest first."""
    now = as_utc(now or datetime.now(timezone.utc))
    since = now - timedelta(days=days)
    window = [c for c in checkins if since <= as_utc(c.created_at) <= now]
    window.sort(key=lambda c: as_utc(c.created_at))
    return window


@dataclass
class WeeklyTrend:
    """Averages for one 7-check-in bucket."""

    week: int  # 1-based, oldest first
    averages: Dict[str, float]

    def to_dict(self) -> dict:
        return {"week": self.week, **self.averages}


@dataclass
class AnalyticsReport:
    """Aggregated wellness statistics for one window."""

    period: int
    total_checkins: int
    averages: Optional[Dict[str, float]]
    trends: List[WeeklyTrend] = field(default_factory=list)
    correlations: Optional[Dict[str, Optional[float]]] = None
    daily_data: List[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialise to the camelCase wire shape."""
        return {
            "period": self.period,
            "totalCheckins": self.total_checkins,
            "averages": self.averages,
            "trends": [t.to_dict() for t in self.trends],
            "correlations": self.correlations,
            "dailyData": self.daily_data,
        }


class AnalyticsAggregator:
    """Compute averages, weekly trends and metric correlations.

    Parameters
    ----------
    week_size:
        Number of check-ins per trend bucket (default 7).
    min_exercise_samples:
        ``exerciseMood`` is reported only when more check-ins than this
        carry ``exercise_minutes``.
    """

    def __init__(
        self,
        week_size: int = WEEK_SIZE,
        min_exercise_samples: int = MIN_EXERCISE_SAMPLES,
    ) -> None:
        if week_size < 1:
            raise ValueError(f"week_size must be positive, got {week_size}")
        self.week_size = week_size
        self.min_exercise_samples = min_exercise_samples
        logger.info(
            "analytics_aggregator_initialized",
            week_size=week_size,
            min_exercise_samples=min_exercise_samples,
        )

    # ── public API ────────────────────────────────────────────────────────────

    def weekly_trends(self, checkins: Sequence[WellnessCheckin]) -> List[WeeklyTrend]:
        ordered = sorted(checkins, key=lambda c: as_utc(c.created_at))
        return [
            WeeklyTrend(
                week=index + 1,
                averages=metric_averages(ordered[start:start + self.week_size]),
            )
            for index, start in enumerate(range(0, len(ordered), self.week_size))
        ]

    def correlations(self, checkins: Sequence[WellnessCheckin]) -> Dict[str, Optional[float]]:
        exercised = [c for c in checkins if c.exercise_minutes is not None]
        exercise_mood = None
        if len(exercised) > self.min_exercise_samples:
            exercise_mood = pearson_correlation(
                [c.exercise_minutes for c in exercised],
                [c.mood_score for c in exercised],
            )
        result = {
            "sleepMood": pearson_correlation(
                [c.sleep_quality for c in checkins],
                [c.mood_score for c in checkins],
            ),
            "stressEnergy": pearson_correlation(
                [c.stress_level for c in checkins],
                [c.energy_level for c in checkins],
            ),
            "exerciseMood": exercise_mood,
        }
        logger.debug("wellness_correlations_calculated", samples=len(checkins), **result)
        return result

    def aggregate(self, checkins: Sequence[WellnessCheckin], period: int) -> AnalyticsReport:
        """Build the report for check-ins already filtered to the window.

        Args:
            checkins: Check-ins inside the window, any order.
            period: Window length in days, echoed in the report.

        Returns:
            AnalyticsReport; an empty window has no averages, trends or
            correlations.
        """
        ordered = sorted(checkins, key=lambda c: as_utc(c.created_at))
        if not ordered:
            report = AnalyticsReport(period=period, total_checkins=0, averages=None)
        else:
            report = AnalyticsReport(
                period=period,
                total_checkins=len(ordered),
                averages=metric_averages(ordered),
                trends=self.weekly_trends(ordered),
                correlations=self.correlations(ordered),
                daily_data=[daily_point(c) for c in ordered],
            )

        logger.info(
            "wellness_analytics_aggregated",
            period=period,
            total_checkins=report.total_checkins,
            weeks=len(report.trends),
        )
        return report
