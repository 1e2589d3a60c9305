"""Tests for wellness averages, weekly trends, correlations and streaks."""
from datetime import date, datetime, timedelta, timezone

import pytest

from career_guidance.wellness.analytics import (
    AnalyticsAggregator,
    as_utc,
    current_streak,
    filter_window,
    metric_averages,
    pearson_correlation,
)
from conftest import make_checkin


class TestPearsonCorrelation:
    """Correlation with the zero-denominator policy."""

    def test_self_correlation(self):
        assert pearson_correlation([1, 2, 3, 4], [1, 2, 3, 4]) == pytest.approx(1.0)

    def test_perfect_negative(self):
        assert pearson_correlation([1, 2, 3], [6, 4, 2]) == pytest.approx(-1.0)

    def test_known_value(self):
        # textbook example: r ≈ 0.7746
        x = [1, 2, 3, 4, 5]
        y = [2, 4, 5, 4, 5]
        assert pearson_correlation(x, y) == pytest.approx(0.7746, abs=1e-4)

    def test_constant_series_is_zero(self):
        assert pearson_correlation([5, 5, 5], [1, 2, 3]) == 0.0
        assert pearson_correlation([1, 2, 3], [7, 7, 7]) == 0.0

    def test_empty_is_zero(self):
        assert pearson_correlation([], []) == 0.0

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="length mismatch"):
            pearson_correlation([1, 2], [1])


class TestStreak:
    """Consecutive calendar days ending today."""

    def test_breaks_at_gap(self, today):
        checkins = [make_checkin(days_ago=d) for d in (0, 1, 2, 4)]
        assert current_streak(checkins, today) == 3

    def test_no_checkin_today(self, today):
        checkins = [make_checkin(days_ago=d) for d in (1, 2, 3)]
        assert current_streak(checkins, today) == 0

    def test_duplicate_days_count_once(self, today):
        checkins = [make_checkin(days_ago=0), make_checkin(days_ago=0), make_checkin(days_ago=1)]
        assert current_streak(checkins, today) == 2

    def test_unordered_input(self, today):
        checkins = [make_checkin(days_ago=d) for d in (2, 0, 1)]
        assert current_streak(checkins, today) == 3

    def test_empty(self, today):
        assert current_streak([], today) == 0

    def test_days_taken_in_utc(self, today):
        pacific = timezone(timedelta(hours=-8))
        late_evening = make_checkin().model_copy(
            update={"created_at": datetime(2026, 3, 15, 20, tzinfo=pacific)}
        )
        # 20:00 at UTC-8 is already 03-16 in UTC
        assert current_streak([late_evening], date(2026, 3, 16)) == 1
        assert current_streak([late_evening, make_checkin()], date(2026, 3, 16)) == 2
        assert current_streak([late_evening], today) == 0


class TestAverages:
    """Per-metric means."""

    def test_empty_is_none(self):
        assert metric_averages([]) is None

    def test_means(self, sample_checkin):
        other = make_checkin(mood_score=4, stress_level=6, energy_level=3, sleep_quality=5, focus_level=8)
        averages = metric_averages([sample_checkin, other])
        assert averages["mood"] == pytest.approx(6.0)
        assert averages["stress"] == pytest.approx(4.0)
        assert averages["energy"] == pytest.approx(5.0)
        assert averages["sleep"] == pytest.approx(7.0)
        assert averages["focus"] == pytest.approx(7.0)
        assert averages["overall"] == pytest.approx((sample_checkin.overall_score + other.overall_score) / 2)


class TestWindow:
    """Period filtering."""

    def test_keeps_recent_oldest_first(self, now):
        checkins = [make_checkin(days_ago=d) for d in (1, 40, 10, 29)]
        window = filter_window(checkins, 30, now)
        assert [(now.date() - c.created_at.date()).days for c in window] == [29, 10, 1]

    def test_naive_datetimes_are_utc(self, now):
        naive = make_checkin().model_copy(
            update={"created_at": datetime(2026, 3, 15, 8)}
        )
        assert filter_window([naive], 1, now) == [naive]
        assert as_utc(naive.created_at).tzinfo == timezone.utc


class TestAnalyticsAggregator:
    """Full window report."""

    aggregator = AnalyticsAggregator()

    def test_ten_checkins_make_two_weeks(self):
        checkins = [make_checkin(days_ago=9 - i, mood_score=(i % 5) + 1) for i in range(10)]
        trends = self.aggregator.weekly_trends(checkins)
        assert [t.week for t in trends] == [1, 2]
        # week 2 holds entries 7, 8, 9 → moods 3, 4, 5
        assert trends[1].averages["mood"] == pytest.approx(4.0)
        assert trends[0].averages["mood"] == pytest.approx((1 + 2 + 3 + 4 + 5 + 1 + 2) / 7)

    def test_weekly_trends_sort_input(self):
        checkins = [make_checkin(days_ago=d, mood_score=10 - d) for d in range(8)]
        trends = self.aggregator.weekly_trends(list(reversed(checkins)))
        # oldest first: week 2 is only today's check-in
        assert trends[1].averages["mood"] == pytest.approx(10.0)

    def test_exercise_correlation_needs_six_samples(self):
        few = [make_checkin(days_ago=d, exercise_minutes=10 * d, mood_score=d + 1) for d in range(5)]
        assert self.aggregator.correlations(few)["exerciseMood"] is None

        enough = [make_checkin(days_ago=d, exercise_minutes=10 * d, mood_score=d + 1) for d in range(6)]
        assert self.aggregator.correlations(enough)["exerciseMood"] == pytest.approx(1.0)

    def test_exercise_zero_minutes_counts(self):
        checkins = [make_checkin(days_ago=d, exercise_minutes=0, mood_score=d + 1) for d in range(6)]
        # constant exercise series
        assert self.aggregator.correlations(checkins)["exerciseMood"] == 0.0

    def test_core_correlations(self):
        checkins = [
            make_checkin(days_ago=d, sleep_quality=s, mood_score=s, stress_level=s, energy_level=11 - s)
            for d, s in enumerate([2, 4, 6, 8])
        ]
        correlations = self.aggregator.correlations(checkins)
        assert correlations["sleepMood"] == pytest.approx(1.0)
        assert correlations["stressEnergy"] == pytest.approx(-1.0)

    def test_report_shape(self):
        checkins = [make_checkin(days_ago=d) for d in range(3)]
        report = self.aggregator.aggregate(checkins, period=30).to_dict()
        assert report["period"] == 30
        assert report["totalCheckins"] == 3
        assert set(report["averages"]) == {"mood", "stress", "energy", "sleep", "focus", "overall"}
        assert report["trends"][0]["week"] == 1
        assert set(report["correlations"]) == {"sleepMood", "stressEnergy", "exerciseMood"}
        assert len(report["dailyData"]) == 3
        assert report["dailyData"][0]["date"] < report["dailyData"][-1]["date"]

    def test_empty_report(self):
        report = self.aggregator.aggregate([], period=14).to_dict()
        assert report == {
            "period": 14,
            "totalCheckins": 0,
            "averages": None,
            "trends": [],
            "correlations": None,
            "dailyData": [],
        }

    def test_invalid_week_size(self):
        with pytest.raises(ValueError):
            AnalyticsAggregator(week_size=0)

    def test_custom_week_size(self):
        checkins = [make_checkin(days_ago=d) for d in range(10)]
        assert len(AnalyticsAggregator(week_size=5).weekly_trends(checkins)) == 2

    def test_window_boundary(self):
        now = datetime(2026, 3, 15, 12, tzinfo=timezone.utc)
        edge = make_checkin(days_ago=7)  # exactly 7 days before ``now``
        assert filter_window([edge], 7, now) == [edge]
        assert filter_window([edge], 7, now + timedelta(seconds=1)) == []
