#!/usr/bin/env python3
"""
Token Sorter
Loads the token feed, ranks every token by heuristic score and writes
sorted-tokens.json
"""

import asyncio
import logging
import sys
from typing import List, Optional

from loaders.token_loader import TokenLoader, default_resolvers
from reports.ranking_report import RankingReport
from scoring.models import ScoredToken
from scoring.token_ranker import TokenRanker
from settings import Settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings):
    """Console logging, plus a log file when LOG_FILE is set"""
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


async def main(settings: Optional[Settings] = None) -> List[ScoredToken]:
    """Run the load, rank and report pipeline once"""
    settings = settings or Settings()

    loader = TokenLoader(default_resolvers(settings))
    ranker = TokenRanker()
    report = RankingReport(preview_limit=settings.preview_limit)

    tokens = await loader.load()
    ranked = await ranker.rank_async(tokens)

    await report.write(ranked, settings.output_path())
    report.log_preview(ranked)

    return ranked


def run():
    """Console entry point"""
    settings = Settings()
    setup_logging(settings)

    try:
        ranked = asyncio.run(main(settings))
        logger.info(f"Successfully sorted {len(ranked)} tokens")
    except KeyboardInterrupt:
        logger.info("Token sorting interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error in token sorting: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
