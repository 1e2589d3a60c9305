"""Assessment scoring.

Converts answered questionnaires into per-category and overall scores:
  responses → ScoringRegistry (one algorithm per AssessmentType)
  → ScoringResult (overall score, percentage, category scores)
"""
