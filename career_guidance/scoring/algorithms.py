"""Scoring algorithms, one per assessment type.

Ordinal types (APTITUDE, SKILL, CAREER_VALUES)
----------------------------------------------
  item_score   = ordinal(answer) × weight          ordinal ∈ 1..5
  category     = Σ item_score / Σ (5 × weight)     over the category's items
  percentage   = Σ item_score / Σ (5 × weight) × 100

PERSONALITY
-----------
  ordinal = 1-based position of the answer in the question's own options

INTEREST
--------
  weight is tallied per distinct answer; the top three answers become the
  categories, each with its share of the total weight.
  overall percentage = Σ weight / (n × 1.2) × 100, where 1.2 is the largest
  template weight, so this exceeds 100 when real weights run above 1.2.

LEARNING_STYLE
--------------
  unweighted answer frequencies; dominant style = most frequent answer
  (ties keep first-seen order); percentage is 100 once anything is answered.

All functions are pure and never raise on an empty response list.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from career_guidance.models.assessment import AssessmentResponse
from career_guidance.scoring.lexicon import (
    MAX_ORDINAL,
    MIDDLE_ORDINAL,
    ORDINAL_LEXICON,
    ordinal_for,
)
from career_guidance.scoring.utils import percentage

INTEREST_MAX_WEIGHT: float = 1.2
INTEREST_TOP_N: int = 3
GENERIC_POINTS: int = 3  # unknown types count every answer as 3 of 5

# Skill level thresholds on the mean ordinal (checked in order)
_SKILL_LEVELS = (
    (4.0, "Advanced"),
    (3.0, "Intermediate"),
    (2.0, "Beginner"),
)
_SKILL_LEVEL_FLOOR = "No experience"

# dataclass attribute → wire key; attributes left as None are omitted
_WIRE_KEYS = (
    ("score", "score"),
    ("max_score", "maxScore"),
    ("percentage", "percentage"),
    ("count", "count"),
    ("average_score", "averageScore"),
    ("level", "level"),
    ("importance", "importance"),
    ("dominant_response", "dominantResponse"),
)


@dataclass
class CategoryScore:
    """Aggregate for one category; optional fields depend on the algorithm."""

    score: float
    percentage: float
    max_score: Optional[float] = None
    count: Optional[int] = None
    average_score: Optional[float] = None
    level: Optional[str] = None
    importance: Optional[str] = None
    dominant_response: Optional[str] = None
    answers: List[str] = field(default_factory=list)  # contributing answers, in order

    def to_dict(self) -> dict:
        return {
            key: getattr(self, attr)
            for attr, key in _WIRE_KEYS
            if getattr(self, attr) is not None
        }


@dataclass
class ScoringResult:
    """Overall and per-category scores for one assessment submission."""

    assessment_type: str
    overall_score: float
    percentage: float
    category_scores: Dict[str, CategoryScore] = field(default_factory=dict)
    dominant_style: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialise to the camelCase wire shape."""
        out = {
            "overallScore": self.overall_score,
            "percentage": self.percentage,
            "categoryScores": {
                name: cs.to_dict() for name, cs in self.category_scores.items()
            },
        }
        if self.dominant_style is not None:
            out["dominantStyle"] = self.dominant_style
        return out


ScoringAlgorithm = Callable[[Sequence[AssessmentResponse]], ScoringResult]


# ── shared aggregation ────────────────────────────────────────────────────────

def _aggregate(
    assessment_type: str,
    responses: Sequence[AssessmentResponse],
    ordinal: Callable[[AssessmentResponse], int],
) -> ScoringResult:
    """Weighted ordinal aggregation per category, in first-seen category order."""
    categories: Dict[str, CategoryScore] = {}
    total = 0.0
    max_possible = 0.0

    for response in responses:
        question = response.question
        item_score = ordinal(response) * question.weight
        item_max = MAX_ORDINAL * question.weight
        total += item_score
        max_possible += item_max

        cs = categories.get(question.category)
        if cs is None:
            cs = categories[question.category] = CategoryScore(
                score=0.0, percentage=0.0, max_score=0.0, count=0
            )
        cs.score += item_score
        cs.max_score += item_max
        cs.count += 1
        cs.answers.append(response.answer)

    for cs in categories.values():
        cs.percentage = percentage(cs.score, cs.max_score)

    return ScoringResult(
        assessment_type=assessment_type,
        overall_score=total,
        percentage=percentage(total, max_possible),
        category_scores=categories,
    )


def _lexicon_ordinal(lexicon: Mapping[str, int]) -> Callable[[AssessmentResponse], int]:
    return lambda response: ordinal_for(response.answer, lexicon)


def _option_ordinal(response: AssessmentResponse) -> int:
    options = response.question.options
    if response.answer not in options:
        return MIDDLE_ORDINAL
    return min(options.index(response.answer) + 1, MAX_ORDINAL)


def _skill_level(average: float) -> str:
    for threshold, label in _SKILL_LEVELS:
        if average >= threshold:
            return label
    return _SKILL_LEVEL_FLOOR


# ── per-type algorithms ───────────────────────────────────────────────────────

def score_aptitude(
    responses: Sequence[AssessmentResponse],
    lexicon: Mapping[str, int] = ORDINAL_LEXICON,
) -> ScoringResult:
    return _aggregate("APTITUDE", responses, _lexicon_ordinal(lexicon))


def score_skill(
    responses: Sequence[AssessmentResponse],
    lexicon: Mapping[str, int] = ORDINAL_LEXICON,
) -> ScoringResult:
    """Ordinal aggregation plus the mean proficiency and its level label."""
    result = _aggregate("SKILL", responses, _lexicon_ordinal(lexicon))
    for cs in result.category_scores.values():
        # mean ordinal, weight-adjusted: score / maxScore rescaled to 1–5
        cs.average_score = cs.score / cs.max_score * MAX_ORDINAL if cs.max_score else 0.0
        cs.level = _skill_level(cs.average_score)
    return result


def score_career_values(
    responses: Sequence[AssessmentResponse],
    lexicon: Mapping[str, int] = ORDINAL_LEXICON,
) -> ScoringResult:
    """Ordinal aggregation; ``importance`` echoes the latest answer per category."""
    result = _aggregate("CAREER_VALUES", responses, _lexicon_ordinal(lexicon))
    for cs in result.category_scores.values():
        cs.importance = cs.answers[-1]
    return result


def score_personality(responses: Sequence[AssessmentResponse]) -> ScoringResult:
    """Position-based ordinals.

    ``dominantResponse`` is the first answer given in the category, not the
    most frequent one; existing stored results depend on that.
    """
    result = _aggregate("PERSONALITY", responses, _option_ordinal)
    for cs in result.category_scores.values():
        cs.dominant_response = cs.answers[0]
        cs.max_score = None
        cs.count = None
    return result


def score_interest(responses: Sequence[AssessmentResponse]) -> ScoringResult:
    tallies: Dict[str, float] = {}
    for response in responses:
        tallies[response.answer] = tallies.get(response.answer, 0.0) + response.question.weight

    total = sum(tallies.values())
    # sorted() is stable: equal weights keep first-seen order
    ranked = sorted(tallies.items(), key=lambda item: item[1], reverse=True)[:INTEREST_TOP_N]

    return ScoringResult(
        assessment_type="INTEREST",
        overall_score=total,
        percentage=percentage(total, len(responses) * INTEREST_MAX_WEIGHT),
        category_scores={
            answer: CategoryScore(score=weight, percentage=percentage(weight, total))
            for answer, weight in ranked
        },
    )


def score_learning_style(responses: Sequence[AssessmentResponse]) -> ScoringResult:
    counts: Dict[str, int] = {}
    for response in responses:
        counts[response.answer] = counts.get(response.answer, 0) + 1

    dominant = None
    if counts:
        dominant = sorted(counts.items(), key=lambda item: item[1], reverse=True)[0][0]

    n = len(responses)
    return ScoringResult(
        assessment_type="LEARNING_STYLE",
        overall_score=n,
        percentage=100.0 if n else 0.0,
        category_scores={
            style: CategoryScore(score=c, count=c, percentage=percentage(c, n))
            for style, c in counts.items()
        },
        dominant_style=dominant,
    )


def score_generic(
    responses: Sequence[AssessmentResponse],
    assessment_type: str = "UNKNOWN",
) -> ScoringResult:
    """Fallback for types without a dedicated algorithm."""
    n = len(responses)
    return ScoringResult(
        assessment_type=assessment_type,
        overall_score=n * GENERIC_POINTS,
        percentage=percentage(n * GENERIC_POINTS, n * MAX_ORDINAL),
    )
