"""Scoring and filtering strategies."""
from .scoring import HybridKeywordStrategy, ScoreFloorStrategy, ScoringStrategy

__all__ = [
    "ScoringStrategy",
    "ScoreFloorStrategy",
    "HybridKeywordStrategy",
]
