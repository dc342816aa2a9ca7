"""
Ranking Report
Writes the ranked token list to disk and logs a preview of the top entries
"""

import json
import logging
from pathlib import Path
from typing import List, Sequence

import aiofiles
import pandas as pd

from scoring.models import ScoredToken, loads_strict

logger = logging.getLogger(__name__)

PREVIEW_COLUMNS = ['symbol', 'name', 'finalScore']


class RankingReport:
    """Output sink for ranked tokens"""

    def __init__(self, preview_limit: int = 100):
        self.preview_limit = preview_limit

    async def write(self, ranked: Sequence[ScoredToken], path: Path) -> Path:
        """Write the full ranking as indented JSON"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # allow_nan=False: fail rather than emit NaN / Infinity tokens
        content = json.dumps(
            [item.to_dict() for item in ranked], indent=2, ensure_ascii=False, allow_nan=False
        )
        async with aiofiles.open(path, 'w', encoding='utf-8') as f:
            await f.write(content)

        logger.info(f"Wrote {len(ranked)} ranked tokens to {path}")
        return path

    async def read(self, path: Path) -> List[ScoredToken]:
        """Load a ranking previously written by write()"""
        async with aiofiles.open(path, 'r', encoding='utf-8') as f:
            content = await f.read()
        return [ScoredToken.from_dict(record) for record in loads_strict(content)]

    def preview(self, ranked: Sequence[ScoredToken], limit: int = None) -> pd.DataFrame:
        """Symbol, feed name and score of the top entries"""
        limit = self.preview_limit if limit is None else limit
        rows = [
            {'symbol': item.symbol, 'name': item.feed_name, 'finalScore': item.final_score}
            for item in ranked[:max(limit, 0)]
        ]
        return pd.DataFrame(rows, columns=PREVIEW_COLUMNS)

    def log_preview(self, ranked: Sequence[ScoredToken]):
        logger.info(f"Total sorted tokens: {len(ranked)}")
        if not ranked:
            return

        table = self.preview(ranked)
        logger.info(f"Top {len(table)} Tokens:\n{table.to_string(index=False)}")
