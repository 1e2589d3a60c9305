"""Overall wellness score for a single check-in.

Formula
-------
  terms   = [mood, 11 − stress, energy, sleep_quality, focus]
          + [productivity, motivation, confidence]   (each only if present)
          + [11 − anxiety]                           (only if present)
  score   = round(Σ terms / len(terms), 1)            ROUND_HALF_UP

The denominator grows with the optional metrics actually reported, so the
calculator tracks ``count`` alongside ``total``.
"""
from typing import TYPE_CHECKING, Tuple

import structlog

from career_guidance.scoring.utils import to_decimal

if TYPE_CHECKING:
    from career_guidance.models.wellness import WellnessCheckin

logger = structlog.get_logger(__name__)

INVERSION_BASE: int = 11  # maps a 1–10 "lower is better" metric onto 10–1

# Optional metrics that count as-is vs. inverted
_DIRECT_OPTIONAL: Tuple[str, ...] = ("productivity_score", "motivation_level", "confidence_level")
_INVERTED_OPTIONAL: Tuple[str, ...] = ("anxiety_level",)


class WellnessScoreCalculator:
    """Combine a check-in's metrics into one 1–10 score."""

    def score(self, checkin: "WellnessCheckin") -> float:
        """Calculate the overall score, one decimal place."""
        terms = [
            checkin.mood_score,
            INVERSION_BASE - checkin.stress_level,
            checkin.energy_level,
            checkin.sleep_quality,
            checkin.focus_level,
        ]
        total = sum(terms)
        count = len(terms)

        for name in _DIRECT_OPTIONAL:
            value = getattr(checkin, name, None)
            if value is not None:
                total += value
                count += 1
        for name in _INVERTED_OPTIONAL:
            value = getattr(checkin, name, None)
            if value is not None:
                total += INVERSION_BASE - value
                count += 1

        result = float(to_decimal(total / count, places=1))
        logger.debug("wellness_score_calculated", total=total, count=count, score=result)
        return result
