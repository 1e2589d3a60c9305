"""Pytest fixtures and configuration."""
from datetime import date, datetime, time, timedelta, timezone
from typing import Sequence

import pytest
from hypothesis import HealthCheck, settings as h_settings

from career_guidance.config import Settings
from career_guidance.models.assessment import AssessmentResponse, Question
from career_guidance.models.wellness import WellnessCheckin
from career_guidance.scoring.lexicon import AGREEMENT_SCALE

# ── Hypothesis configuration ──────────────────────────────────────────────────
h_settings.register_profile(
    "ci",
    max_examples=500,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
h_settings.load_profile("ci")

TODAY = date(2026, 3, 15)
AGREEMENT_OPTIONS: Sequence[str] = tuple(AGREEMENT_SCALE)


def make_response(
    category: str,
    answer: str,
    weight: float = 1.0,
    options: Sequence[str] = AGREEMENT_OPTIONS,
    text: str = "",
) -> AssessmentResponse:
    """Build a response to a one-off question."""
    question = Question(
        text=text or f"{category} question",
        options=tuple(options),
        category=category,
        weight=weight,
    )
    return AssessmentResponse(question=question, answer=answer)


def make_checkin(days_ago: int = 0, today: date = TODAY, **metrics) -> WellnessCheckin:
    """Build a check-in at noon UTC ``days_ago`` days before ``today``."""
    values = {
        "mood_score": 5,
        "stress_level": 5,
        "energy_level": 5,
        "sleep_quality": 5,
        "focus_level": 5,
    }
    values.update(metrics)
    created = datetime.combine(today - timedelta(days=days_ago), time(12), tzinfo=timezone.utc)
    return WellnessCheckin(created_at=created, **values)


@pytest.fixture
def today():
    """Fixed reference date for calendar-based tests."""
    return TODAY


@pytest.fixture
def now():
    """End of the reference date, UTC."""
    return datetime.combine(TODAY, time(23, 59), tzinfo=timezone.utc)


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def aptitude_responses():
    """Two APTITUDE answers: 5/5 and 2/5."""
    return [
        make_response("Logical-Mathematical", "Strongly Agree"),
        make_response("Creative", "Disagree"),
    ]


@pytest.fixture
def sample_checkin():
    """Check-in with core metrics only (overall 7.8)."""
    return make_checkin(
        mood_score=8,
        stress_level=2,
        energy_level=7,
        sleep_quality=9,
        focus_level=6,
    )
