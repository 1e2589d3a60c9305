"""Wellness check-in, dashboard and analytics flows.

Callers pass in the user's stored check-ins and insights; nothing here
reads or writes storage. Window sizes come from settings.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence

import structlog

from career_guidance.config import Settings, get_settings
from career_guidance.models.wellness import Insight, WellnessCheckin
from career_guidance.wellness.analytics import (
    AnalyticsAggregator,
    AnalyticsReport,
    as_utc,
    current_streak,
    daily_point,
    filter_window,
    metric_averages,
)
from career_guidance.wellness.insights import InsightEngine

logger = structlog.get_logger(__name__)


@dataclass
class CheckinResult:
    """A scored check-in and the insights it triggered."""

    checkin: WellnessCheckin
    insights: List[Insight] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "checkin": self.checkin.to_dict(),
            "insights": [i.to_dict() for i in self.insights],
        }


@dataclass
class Dashboard:
    """Snapshot shown on the wellness home screen."""

    today_checkin: Optional[WellnessCheckin]
    recent_checkins: List[WellnessCheckin]
    recent_insights: List[Insight]
    current_streak: int
    total_checkins: int
    averages: Optional[dict]
    trends: List[dict]

    def to_dict(self) -> dict:
        """Serialise to the camelCase wire shape."""
        return {
            "todayCheckin": self.today_checkin.to_dict() if self.today_checkin else None,
            "recentCheckins": [c.to_dict() for c in self.recent_checkins],
            "recentInsights": [i.to_dict() for i in self.recent_insights],
            "stats": {
                "currentStreak": self.current_streak,
                "totalCheckins": self.total_checkins,
                "averages": self.averages,
            },
            "trends": self.trends,
        }


class WellnessService:
    """Run the wellness calculators for one user's data."""

    def __init__(
        self,
        engine: Optional[InsightEngine] = None,
        aggregator: Optional[AnalyticsAggregator] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.engine = engine or InsightEngine()
        self.aggregator = aggregator or AnalyticsAggregator()
        self.settings = settings or get_settings()

    def check_in(
        self,
        checkin: WellnessCheckin,
        history: Sequence[WellnessCheckin] = (),
    ) -> CheckinResult:
        """Score a new check-in and generate its insights.

        ``history`` holds the user's previous check-ins, oldest first; only
        the most recent ``insight_history_size`` are used.
        """
        recent = list(history)[-self.settings.insight_history_size:]
        insights = self.engine.generate(checkin, recent)
        logger.info(
            "wellness_checkin_processed",
            user_id=checkin.user_id,
            overall_score=checkin.overall_score,
            insights=len(insights),
        )
        return CheckinResult(checkin=checkin, insights=insights)

    def dashboard(
        self,
        checkins: Iterable[WellnessCheckin],
        insights: Iterable[Insight] = (),
        today: Optional[date] = None,
    ) -> Dashboard:
        """Assemble the dashboard for ``today`` (defaults to the current date)."""
        today = today or date.today()
        all_checkins = sorted(checkins, key=lambda c: as_utc(c.created_at))
        recent_since = today - timedelta(days=self.settings.dashboard_recent_days)
        trend_since = today - timedelta(days=self.settings.dashboard_trend_days)

        newest_first = list(reversed(all_checkins))
        today_checkin = next(
            (c for c in newest_first if as_utc(c.created_at).date() == today), None
        )
        recent_checkins = [
            c for c in newest_first if recent_since <= as_utc(c.created_at).date() <= today
        ][: self.settings.dashboard_recent_days]
        monthly = [
            c for c in all_checkins if trend_since <= as_utc(c.created_at).date() <= today
        ]
        recent_insights = sorted(
            (i for i in insights if recent_since <= as_utc(i.created_at).date() <= today),
            key=lambda i: as_utc(i.created_at),
            reverse=True,
        )[: self.settings.recent_insight_limit]

        return Dashboard(
            today_checkin=today_checkin,
            recent_checkins=recent_checkins,
            recent_insights=recent_insights,
            current_streak=current_streak(all_checkins, today),
            total_checkins=len(all_checkins),
            averages=metric_averages(monthly),
            trends=[daily_point(c) for c in monthly],
        )

    def analytics(
        self,
        checkins: Iterable[WellnessCheckin],
        period: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> AnalyticsReport:
        """Aggregate the check-ins of the last ``period`` days."""
        if period is None:
            period = self.settings.analytics_period_days
        if period < 1:
            raise ValueError(f"period must be at least 1 day, got {period}")
        window = filter_window(checkins, period, now or datetime.now(timezone.utc))
        return self.aggregator.aggregate(window, period)


@lru_cache
def get_wellness_service() -> WellnessService:
    """Get the shared service instance."""
    return WellnessService()
