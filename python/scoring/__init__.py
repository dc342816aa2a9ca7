"""
Token scoring and ranking modules
"""

from .models import InvalidTokenRecord, Metrics, ScoredToken, Token
from .token_ranker import TokenRanker
from .token_scorer import SCORING_WEIGHTS, ScoringWeights, TokenScorer

__all__ = [
    'InvalidTokenRecord',
    'Metrics',
    'ScoredToken',
    'Token',
    'TokenRanker',
    'TokenScorer',
    'ScoringWeights',
    'SCORING_WEIGHTS'
]
