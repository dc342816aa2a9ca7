"""
Token Ranker
Scores a batch of tokens and orders them by final score
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from .models import ScoredToken, Token
from .token_scorer import TokenScorer

logger = logging.getLogger(__name__)


class TokenRanker:
    """Ranks tokens by descending final score"""

    def __init__(self, scorer: Optional[TokenScorer] = None):
        self.scorer = scorer or TokenScorer()

    def rank(self, tokens: Iterable[Token]) -> List[ScoredToken]:
        """Score tokens one after another and sort them"""
        tokens = list(tokens)
        if not tokens:
            logger.warning("No tokens to rank")
            return []

        return self._order([self.scorer.score(token) for token in tokens])

    async def rank_async(self, tokens: Iterable[Token]) -> List[ScoredToken]:
        """Score every token in its own task and sort the gathered results"""
        tokens = list(tokens)
        if not tokens:
            logger.warning("No tokens to rank")
            return []

        # gather returns results in argument order
        scored = await asyncio.gather(*(self._score_token(token) for token in tokens))
        return self._order(scored)

    async def _score_token(self, token: Token) -> ScoredToken:
        return self.scorer.score(token)

    @staticmethod
    def _order(scored: List[ScoredToken]) -> List[ScoredToken]:
        # sorted() is stable with reverse=True, so ties keep input order
        ranked = sorted(scored, key=lambda item: item.final_score, reverse=True)
        logger.info(f"Ranked {len(ranked)} tokens")
        return ranked
