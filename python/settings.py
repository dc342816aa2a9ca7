"""
Runtime settings for the token sorter
Values come from the environment (and a local .env file)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value).expanduser() if value else None


@dataclass
class Settings:
    """File locations, preview size and logging options"""
    tokens_file: Optional[Path] = field(default_factory=lambda: _env_path('TOKENS_FILE'))
    output_file: Path = field(
        default_factory=lambda: Path(os.getenv('SORTED_TOKENS_FILE', 'sorted-tokens.json'))
    )
    preview_limit: int = field(default_factory=lambda: int(os.getenv('PREVIEW_LIMIT', 100)))
    log_level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO').upper())
    log_file: Optional[str] = field(default_factory=lambda: os.getenv('LOG_FILE'))

    def output_path(self) -> Path:
        """Output file, resolved against the working directory when relative"""
        path = self.output_file.expanduser()
        return path if path.is_absolute() else Path.cwd() / path
