"""Outcome of the external narrative call, modelled as a Result.

The generative collaborator hands back either a parsed ``Narrative``
(``NarrativeSuccess``) or a ``NarrativeFailure`` describing why none is
available (timeout, service error, unparseable output). Whenever the outcome
is a failure, ``resolve_narrative`` substitutes the fallback generator.
"""
import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

import structlog
from pydantic import ValidationError

from career_guidance.models.assessment import AssessmentResponse
from career_guidance.models.narrative import Narrative
from career_guidance.narrative.fallback import FallbackNarrativeGenerator
from career_guidance.scoring.algorithms import ScoringResult

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NarrativeSuccess:
    narrative: Narrative


@dataclass(frozen=True)
class NarrativeFailure:
    reason: str  # e.g. "timeout", "service_error", "parse_error"
    detail: Optional[str] = None


NarrativeOutcome = Union[NarrativeSuccess, NarrativeFailure]


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence (```json … ```), if any."""
    stripped = text.strip()
    if not stripped.startswith("```"):
        return stripped
    lines = stripped.splitlines()[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines).strip()


def parse_narrative(raw: Any) -> NarrativeOutcome:
    """Turn raw service output (text, bytes or decoded JSON) into an outcome."""
    if raw is None:
        return NarrativeFailure(reason="empty_response")

    payload = raw
    if isinstance(raw, bytes):
        payload = raw.decode("utf-8", errors="replace")
    if isinstance(payload, str):
        try:
            payload = json.loads(_strip_code_fence(payload))
        except json.JSONDecodeError as exc:
            logger.warning("narrative_parse_failed", error=str(exc))
            return NarrativeFailure(reason="parse_error", detail=str(exc))

    try:
        return NarrativeSuccess(narrative=Narrative.model_validate(payload))
    except ValidationError as exc:
        logger.warning("narrative_validation_failed", errors=exc.error_count())
        return NarrativeFailure(reason="invalid_shape", detail=str(exc))


def resolve_narrative(
    outcome: Optional[NarrativeOutcome],
    assessment_type: str,
    responses: Sequence[AssessmentResponse],
    scoring: ScoringResult,
    generator: Optional[FallbackNarrativeGenerator] = None,
) -> Tuple[Narrative, str]:
    """Pick the narrative to show.

    Returns:
        ``(narrative, source)`` where source is ``"generated"`` for the
        service's narrative and ``"fallback"`` otherwise.
    """
    if isinstance(outcome, NarrativeSuccess):
        return outcome.narrative, "generated"

    logger.info(
        "narrative_fallback_used",
        assessment_type=assessment_type,
        reason=outcome.reason if outcome is not None else "not_requested",
    )
    generator = generator or FallbackNarrativeGenerator()
    return generator.generate(assessment_type, responses, scoring), "fallback"
