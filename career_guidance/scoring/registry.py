"""Scoring algorithm registry.

Dispatches a submission to the algorithm registered for its assessment type.
Unknown types fall through to the generic 3-of-5 scorer instead of failing.
"""
from functools import partial
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Union

import structlog

from career_guidance.models.assessment import AssessmentResponse
from career_guidance.models.enums import AssessmentType
from career_guidance.scoring.algorithms import (
    ScoringAlgorithm,
    ScoringResult,
    score_aptitude,
    score_career_values,
    score_generic,
    score_interest,
    score_learning_style,
    score_personality,
    score_skill,
)
from career_guidance.scoring.lexicon import ORDINAL_LEXICON

logger = structlog.get_logger(__name__)


def build_algorithms(
    lexicon: Mapping[str, int] = ORDINAL_LEXICON,
) -> Mapping[str, ScoringAlgorithm]:
    """Build the read-only type → algorithm table, binding ``lexicon``."""
    return MappingProxyType({
        AssessmentType.APTITUDE.value: partial(score_aptitude, lexicon=lexicon),
        AssessmentType.SKILL.value: partial(score_skill, lexicon=lexicon),
        AssessmentType.CAREER_VALUES.value: partial(score_career_values, lexicon=lexicon),
        AssessmentType.PERSONALITY.value: score_personality,
        AssessmentType.INTEREST.value: score_interest,
        AssessmentType.LEARNING_STYLE.value: score_learning_style,
    })


class ScoringRegistry:
    """Select and run the scoring algorithm for an assessment type.

    Parameters
    ----------
    algorithms:
        Override the type → algorithm table (keys are type names).
    lexicon:
        Override the ordinal lexicon used by the default ordinal algorithms.
        Ignored when ``algorithms`` is given.
    """

    def __init__(
        self,
        algorithms: Optional[Mapping[str, ScoringAlgorithm]] = None,
        lexicon: Optional[Mapping[str, int]] = None,
    ) -> None:
        if algorithms is not None:
            self.algorithms = MappingProxyType(dict(algorithms))
        else:
            self.algorithms = build_algorithms(lexicon or ORDINAL_LEXICON)
        logger.info("scoring_registry_initialized", types=sorted(self.algorithms))

    def supports(self, assessment_type: Union[AssessmentType, str]) -> bool:
        return _type_key(assessment_type) in self.algorithms

    def score(
        self,
        assessment_type: Union[AssessmentType, str],
        responses: Sequence[AssessmentResponse],
    ) -> ScoringResult:
        """Score ``responses`` with the algorithm for ``assessment_type``.

        Args:
            assessment_type: An ``AssessmentType`` or its name.
            responses: Answered questions, in submission order.

        Returns:
            ScoringResult; percentage is 0 when there are no responses.
        """
        key = _type_key(assessment_type)
        algorithm = self.algorithms.get(key)
        if algorithm is None:
            logger.warning("scoring_algorithm_missing", assessment_type=key)
            result = score_generic(responses, assessment_type=key)
        else:
            result = algorithm(responses)

        logger.info(
            "assessment_scored",
            assessment_type=key,
            responses=len(responses),
            overall_score=result.overall_score,
            percentage=result.percentage,
            categories=len(result.category_scores),
        )
        return result


def _type_key(assessment_type: Union[AssessmentType, str]) -> str:
    if isinstance(assessment_type, AssessmentType):
        return assessment_type.value
    return str(assessment_type).upper()
