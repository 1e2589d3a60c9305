"""Assessment submission and analytics flows.

The service wires the scoring registry and narrative resolution together.
It performs no persistence: callers store the returned result.
"""
from functools import lru_cache
from typing import Dict, Iterable, Optional, Sequence, Union

import structlog

from career_guidance.config import Settings, get_settings
from career_guidance.models.assessment import (
    AssessmentRecord,
    AssessmentResponse,
    AssessmentResult,
    AssessmentSummary,
)
from career_guidance.models.enums import AssessmentType
from career_guidance.narrative.fallback import FallbackNarrativeGenerator
from career_guidance.narrative.outcome import NarrativeOutcome, resolve_narrative
from career_guidance.scoring.registry import ScoringRegistry
from career_guidance.scoring.utils import mean

logger = structlog.get_logger(__name__)


class AssessmentService:
    """Score submissions and summarise completed assessments."""

    def __init__(
        self,
        registry: Optional[ScoringRegistry] = None,
        fallback: Optional[FallbackNarrativeGenerator] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.registry = registry or ScoringRegistry()
        self.fallback = fallback or FallbackNarrativeGenerator()
        self.settings = settings or get_settings()

    def submit(
        self,
        assessment_type: Union[AssessmentType, str],
        responses: Sequence[AssessmentResponse],
        narrative_outcome: Optional[NarrativeOutcome] = None,
    ) -> AssessmentResult:
        """Score ``responses`` and attach a narrative.

        Args:
            assessment_type: Type whose algorithm scores the submission.
            responses: Answered questions, in submission order.
            narrative_outcome: What the generative service returned, if it
                was called. Anything but a success uses the fallback.

        Returns:
            A complete AssessmentResult.
        """
        scoring = self.registry.score(assessment_type, responses)
        narrative, source = resolve_narrative(
            narrative_outcome,
            scoring.assessment_type,
            responses,
            scoring,
            generator=self.fallback,
        )

        category_scores = {
            name: cs.to_dict() for name, cs in scoring.category_scores.items()
        }
        is_personality = scoring.assessment_type == AssessmentType.PERSONALITY.value

        result = AssessmentResult(
            assessment_type=scoring.assessment_type,
            overall_score=scoring.overall_score,
            percentage=scoring.percentage,
            category_scores=category_scores,
            dominant_style=scoring.dominant_style,
            traits=category_scores if is_personality else None,
            insights=narrative.analysis,
            question_analysis=narrative.question_analysis,
            strengths=narrative.strengths,
            improvement_areas=narrative.improvement_areas,
            career_suggestions=narrative.career_suggestions,
            recommendations=narrative.recommendations,
            next_steps=narrative.next_steps,
            detailed_feedback=narrative.detailed_feedback,
            narrative_source=source,
        )
        logger.info(
            "assessment_submitted",
            assessment_type=scoring.assessment_type,
            percentage=scoring.percentage,
            narrative_source=source,
        )
        return result

    def summarize(self, records: Iterable[AssessmentRecord]) -> AssessmentSummary:
        """Aggregate statistics over the user's completed assessments."""
        completed = [r for r in records if r.is_completed]

        by_type: Dict[str, int] = {}
        for record in completed:
            by_type[record.type.value] = by_type.get(record.type.value, 0) + 1

        recent = sorted(completed, key=lambda r: r.completed_at, reverse=True)
        recent = recent[: self.settings.recent_assessment_limit]

        return AssessmentSummary(
            total_completed=len(completed),
            average_score=mean(r.percentage or 0.0 for r in completed) or 0.0,
            completed_by_type=by_type,
            recent_assessments=[
                r.model_copy(update={"percentage": r.percentage or 0.0}) for r in recent
            ],
        )


@lru_cache
def get_assessment_service() -> AssessmentService:
    """Get the shared service instance."""
    return AssessmentService()
