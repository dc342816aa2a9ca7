"""
Ranking output and console reporting
"""

from .ranking_report import RankingReport

__all__ = [
    'RankingReport'
]
