"""
Token File Loader
Finds the token feed file among several candidate locations and parses it
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

import aiofiles

from scoring.models import InvalidTokenRecord, Token, loads_strict
from settings import Settings

logger = logging.getLogger(__name__)

TOKENS_FILENAME = 'tokens.json'

# Repository root (parent of the python/ source directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

Resolver = Callable[[], Optional[Path]]


class TokenLoadError(Exception):
    """Raised when no candidate location holds a usable token list"""


def default_resolvers(settings: Optional[Settings] = None) -> List[Resolver]:
    """Candidate token file locations, highest priority first"""
    settings = settings or Settings()
    resolvers: List[Resolver] = []

    if settings.tokens_file:
        resolvers.append(lambda: settings.tokens_file)

    resolvers.extend([
        lambda: PROJECT_ROOT / 'data' / TOKENS_FILENAME,
        lambda: PROJECT_ROOT / TOKENS_FILENAME,
        lambda: Path.cwd() / TOKENS_FILENAME,
        lambda: Path.cwd() / 'data' / TOKENS_FILENAME,
    ])
    return resolvers


def parse_tokens(payload: Any) -> List[Token]:
    """Convert a decoded JSON document into tokens"""
    if not isinstance(payload, list) or not payload:
        raise InvalidTokenRecord("Expected a non-empty JSON array of tokens")

    tokens = []
    for index, record in enumerate(payload):
        try:
            tokens.append(Token.from_dict(record))
        except InvalidTokenRecord as e:
            raise InvalidTokenRecord(f"Entry {index}: {e}") from e

    duplicates = [feed_id for feed_id, count in Counter(t.feed_id for t in tokens).items() if count > 1]
    if duplicates:
        logger.warning(f"Duplicate feed ids in token list: {', '.join(duplicates[:10])}")

    return tokens


class TokenLoader:
    """Loads the first valid token list from a prioritized list of resolvers"""

    def __init__(self, resolvers: Optional[Sequence[Resolver]] = None):
        self.resolvers = list(resolvers) if resolvers is not None else default_resolvers()

    def candidate_paths(self) -> List[Path]:
        """Resolved candidate paths in priority order, without repeats"""
        paths = []
        for resolver in self.resolvers:
            path = resolver()
            if path is not None and path not in paths:
                paths.append(path)
        return paths

    async def load(self) -> List[Token]:
        """Return tokens from the first usable candidate file"""
        attempted = self.candidate_paths()

        for path in attempted:
            tokens = await self._read_candidate(path)
            if tokens is not None:
                logger.info(f"Successfully loaded {len(tokens)} tokens from {path}")
                return tokens

        tried = ', '.join(str(p) for p in attempted) or 'no candidate paths'
        raise TokenLoadError(
            f"Could not find or parse {TOKENS_FILENAME} file (tried: {tried}). "
            "Please check your file location and format."
        )

    async def _read_candidate(self, path: Path) -> Optional[List[Token]]:
        logger.info(f"Attempting to read tokens from: {path}")

        if not path.is_file():
            logger.info(f"File not found: {path}")
            return None

        try:
            async with aiofiles.open(path, 'r', encoding='utf-8') as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            return None

        if not content.strip():
            logger.info(f"File is empty: {path}")
            return None

        try:
            payload = loads_strict(content)
        except ValueError as e:
            # JSONDecodeError, or a NaN / Infinity literal
            logger.error(f"Error parsing {path}: {e}")
            return None

        try:
            return parse_tokens(payload)
        except InvalidTokenRecord as e:
            logger.warning(f"No valid tokens found in: {path} ({e})")
        return None
