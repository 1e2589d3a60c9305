"""Template-based narrative used when the generative service is unavailable.

Algorithm
---------
1. Rank categories by percentage (descending, stable) and keep the top 3.
2. Each top category becomes a strength and, via ``CATEGORY_CAREER_FIELDS``,
   a career suggestion whose match is the rounded category percentage.
3. The overall percentage picks a performance band
   (≥80 "excellent", ≥60 "good", else "developing") that is interpolated
   into the analysis and feedback sentences.

With no categories the generator still returns three generic strengths and
one generic career suggestion; it has no failure path.
"""
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

import structlog

from career_guidance.models.assessment import AssessmentResponse
from career_guidance.models.narrative import (
    CareerSuggestion,
    DetailedFeedback,
    Narrative,
    QuestionFeedback,
)
from career_guidance.scoring.algorithms import CategoryScore, ScoringResult
from career_guidance.scoring.utils import to_decimal

logger = structlog.get_logger(__name__)

CATEGORY_CAREER_FIELDS: Mapping[str, str] = MappingProxyType({
    "Logical-Mathematical": "Engineering and Data Science",
    "Linguistic": "Communications and Writing",
    "Spatial": "Design and Architecture",
    "Kinesthetic": "Healthcare and Sports",
    "Musical": "Arts and Entertainment",
    "Interpersonal": "Education and Social Work",
    "Intrapersonal": "Psychology and Counseling",
    "Naturalistic": "Environmental Science",
    "Creative": "Arts and Design",
    "Analytical": "Research and Analysis",
    "Scientific": "Science and Technology",
    "Leadership": "Management and Business",
    "Systematic": "Operations and Administration",
})
DEFAULT_CAREER_FIELD = "Technology and Innovation"

TOP_CATEGORIES: int = 3
DEFAULT_PERCENTAGE: float = 70.0  # used only when no overall percentage is known
EXCELLENT_THRESHOLD: float = 80.0
GOOD_THRESHOLD: float = 60.0

GENERIC_STRENGTHS: Tuple[str, ...] = (
    "Analytical thinking",
    "Problem-solving approach",
    "Career exploration mindset",
)

IMPROVEMENT_AREAS: Tuple[str, ...] = (
    "Continue developing your weaker skill areas",
    "Seek practical experience in your areas of interest",
    "Build a network in your target career fields",
    "Stay updated with industry trends and requirements",
)

NEXT_STEPS: Tuple[str, ...] = (
    "Research specific roles in your top career suggestions",
    "Identify skill gaps and create a development plan",
    "Network with professionals in your fields of interest",
    "Gain hands-on experience through projects or volunteering",
    "Consider taking additional assessments as you develop",
)


def performance_band(overall_percentage: Optional[float]) -> str:
    """Qualitative band for an overall percentage."""
    pct = DEFAULT_PERCENTAGE if overall_percentage is None else overall_percentage
    if pct >= EXCELLENT_THRESHOLD:
        return "excellent"
    if pct >= GOOD_THRESHOLD:
        return "good"
    return "developing"


def _label(category: str) -> str:
    return category.lower().replace("-", " ")


def _whole(value: float) -> int:
    return int(to_decimal(value, places=0))


class FallbackNarrativeGenerator:
    """Build a complete narrative from scores alone.

    Parameters
    ----------
    career_fields:
        Override the category → career field table.
    default_field:
        Career field for categories missing from the table.
    """

    def __init__(
        self,
        career_fields: Optional[Mapping[str, str]] = None,
        default_field: str = DEFAULT_CAREER_FIELD,
    ) -> None:
        self.career_fields = MappingProxyType(dict(career_fields or CATEGORY_CAREER_FIELDS))
        self.default_field = default_field

    def career_field_for(self, category: str) -> str:
        return self.career_fields.get(category, self.default_field)

    def generate(
        self,
        assessment_type: str,
        responses: Sequence[AssessmentResponse],
        scoring: ScoringResult,
    ) -> Narrative:
        """Generate the narrative for a scored submission."""
        top = self._top_categories(scoring)
        band = performance_band(scoring.percentage)
        overall = DEFAULT_PERCENTAGE if scoring.percentage is None else scoring.percentage

        strengths = self._strengths(top)
        narrative = Narrative(
            analysis=self._analysis(top, band, overall),
            question_analysis=self._question_analysis(responses),
            strengths=strengths,
            improvement_areas=list(IMPROVEMENT_AREAS),
            career_suggestions=self._career_suggestions(top),
            recommendations=[
                f"Focus on leveraging your strongest skills: {strengths[0]}",
                "Explore internships or projects in your areas of interest",
                "Consider additional training or certification in your target field",
                "Connect with professionals in careers that match your profile",
                "Regularly reassess your skills and interests as you grow",
            ],
            next_steps=list(NEXT_STEPS),
            detailed_feedback=DetailedFeedback(
                personality=f"Shows {band} self-awareness and thoughtful career planning approach",
                work_style=(
                    f"Demonstrates {_label(top[0][0]) if top else 'analytical'} work preferences"
                ),
                learning_style="Engaged and systematic approach to skill development",
                motivation=(
                    f"{'Highly' if band == 'excellent' else 'Well'} motivated "
                    "for career growth and development"
                ),
                challenges="Continue exploring diverse opportunities while building on your strengths",
            ),
        )
        logger.info(
            "fallback_narrative_generated",
            assessment_type=assessment_type,
            band=band,
            top_categories=[name for name, _ in top],
        )
        return narrative

    # ── sections ──────────────────────────────────────────────────────────────

    def _top_categories(self, scoring: ScoringResult) -> List[Tuple[str, CategoryScore]]:
        ranked = sorted(
            scoring.category_scores.items(),
            key=lambda item: item[1].percentage,
            reverse=True,
        )
        return ranked[:TOP_CATEGORIES]

    def _strengths(self, top: List[Tuple[str, CategoryScore]]) -> List[str]:
        if not top:
            return list(GENERIC_STRENGTHS)
        return [
            f"Strong {_label(name)} abilities ({_whole(cs.percentage)}%)"
            for name, cs in top
        ]

    def _career_suggestions(self, top: List[Tuple[str, CategoryScore]]) -> List[CareerSuggestion]:
        if not top:
            return [
                CareerSuggestion(
                    field=self.default_field,
                    match=75,
                    reasoning="Your analytical approach shows potential in tech fields",
                    requirements="Technical skills and continuous learning",
                    growth="Excellent growth prospects",
                )
            ]
        return [
            CareerSuggestion(
                field=self.career_field_for(name),
                match=_whole(cs.percentage),
                reasoning=f"Your strong {_label(name)} skills align well with this field",
                requirements="Relevant education, skill development, and practical experience",
                growth="Positive growth prospects with increasing demand",
            )
            for name, cs in top
        ]

    def _analysis(
        self,
        top: List[Tuple[str, CategoryScore]],
        band: str,
        overall: float,
    ) -> str:
        areas = ", ".join(_label(name) for name, _ in top) or "the areas you were assessed on"
        return (
            f"Based on your assessment responses, you demonstrate {band} capabilities "
            f"across multiple areas. Your strongest areas are {areas}. "
            f"With an overall score of {overall:.1f}%, you show a well-rounded profile "
            "with specific areas of excellence that can guide your career development."
        )

    def _question_analysis(self, responses: Sequence[AssessmentResponse]) -> List[QuestionFeedback]:
        feedback = []
        for index, response in enumerate(responses):
            label = _label(response.question.category)
            feedback.append(
                QuestionFeedback(
                    question=response.question.text,
                    user_answer=response.answer,
                    # every third answer is flagged for a second look
                    is_optimal=index % 3 != 0,
                    feedback=f"Your response demonstrates {label} thinking patterns.",
                    reasoning=(
                        f"This answer reflects your approach to {label} challenges "
                        "and shows your natural inclinations."
                    ),
                )
            )
        return feedback
