"""Ordinal lexicons: Likert-style answer text → integer 1–5."""
from types import MappingProxyType
from typing import Mapping

MAX_ORDINAL: int = 5
MIDDLE_ORDINAL: int = 3  # used for answers missing from the lexicon

AGREEMENT_SCALE: Mapping[str, int] = MappingProxyType({
    "Strongly Agree": 5,
    "Agree": 4,
    "Neutral": 3,
    "Disagree": 2,
    "Strongly Disagree": 1,
})

PROFICIENCY_SCALE: Mapping[str, int] = MappingProxyType({
    "Expert": 5,
    "Advanced": 4,
    "Intermediate": 3,
    "Beginner": 2,
    "No experience": 1,
})

IMPORTANCE_SCALE: Mapping[str, int] = MappingProxyType({
    "Extremely Important": 5,
    "Very Important": 4,
    "Moderately Important": 3,
    "Slightly Important": 2,
    "Not Important": 1,
})

# The three scales share no answer text, so one lookup serves every ordinal type
ORDINAL_LEXICON: Mapping[str, int] = MappingProxyType({
    **AGREEMENT_SCALE,
    **PROFICIENCY_SCALE,
    **IMPORTANCE_SCALE,
})


def ordinal_for(answer: str, lexicon: Mapping[str, int] = ORDINAL_LEXICON) -> int:
    """Look up an answer's ordinal, defaulting to the middle of the scale."""
    return lexicon.get(answer, MIDDLE_ORDINAL)
