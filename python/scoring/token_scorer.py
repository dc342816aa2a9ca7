""" Token Scoring Engine
Heuristic metrics and weighted final score for a single token """

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .models import Metrics, ScoredToken, Token

logger = logging.getLogger(__name__)

# Lowercases A-Z only, leaving every other code point untouched
_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')


def _contains(text: Optional[str], keyword: str) -> bool:
    """Case-insensitive (ASCII) substring check, False for missing text"""
    if not text:
        return False
    return keyword.translate(_ASCII_LOWER) in text.translate(_ASCII_LOWER)


def _length(text: Optional[str]) -> int:
    return len(text) if text else 0


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of each metric in the final score (sum to 1.0)"""
    trending: float = 0.25
    market: float = 0.35
    social: float = 0.20
    virality: float = 0.20


SCORING_WEIGHTS = ScoringWeights()


class TokenScorer:
    """Heuristic token scoring system"""

    # Keyword bonuses
    MEME_TREND_BONUS = 10
    CRYPTO_SOCIAL_BONUS = 5
    MEME_SYMBOL_VIRALITY_BONUS = 20
    MOON_NAME_VIRALITY_BONUS = 15
    SHORT_NAME_VIRALITY_BONUS = 10
    SHORT_NAME_MAX_LENGTH = 9

    def __init__(self):
        self.weights = SCORING_WEIGHTS

    def score(self, token: Token) -> ScoredToken:
        """
        Score a token
        Returns the token with its metrics and weighted final score
        """
        metrics = self.calculate_metrics(token)
        return ScoredToken(
            token=token,
            metrics=metrics,
            final_score=self.calculate_final_score(metrics),
        )

    def calculate_metrics(self, token: Token) -> Metrics:
        return Metrics(
            trending=self._score_trending(token),
            market=self._score_market(token),
            social=self._score_social(token),
            virality=self._score_virality(token),
        )

    def calculate_final_score(self, metrics: Metrics) -> float:
        """Weighted sum of the four metrics"""
        return (
            metrics.trending * self.weights.trending +
            metrics.market * self.weights.market +
            metrics.social * self.weights.social +
            metrics.virality * self.weights.virality
        )

    def _score_trending(self, token: Token) -> float:
        """Symbol and name length, boosted for meme feeds"""
        score = _length(token.symbol) + _length(token.name)
        if _contains(token.feed_name, 'meme'):
            score += self.MEME_TREND_BONUS
        return score

    def _score_market(self, token: Token) -> float:
        """Log-scaled total and circulating supply"""
        score = 0
        for supply in (token.total_supply, token.circulating_supply):
            # NaN fails the comparison and contributes nothing
            if supply is not None and supply > 0:
                score += math.log(supply + 1)
        return score

    def _score_social(self, token: Token) -> float:
        """Symbol weighs double, crypto feeds get a bonus"""
        score = _length(token.symbol) * 2 + _length(token.name)
        if _contains(token.feed_name, 'crypto'):
            score += self.CRYPTO_SOCIAL_BONUS
        return score

    def _score_virality(self, token: Token) -> float:
        score = 0
        if _contains(token.symbol, 'meme'):
            score += self.MEME_SYMBOL_VIRALITY_BONUS
        if _contains(token.feed_name, 'moon'):
            score += self.MOON_NAME_VIRALITY_BONUS
        if token.name and len(token.name) <= self.SHORT_NAME_MAX_LENGTH:
            score += self.SHORT_NAME_VIRALITY_BONUS
        return score
