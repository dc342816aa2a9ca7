"""
Token data model
Input token records and their scored counterparts, mapped to and from the
JSON field names used by the token feed files
"""

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# attribute name -> external JSON key
TOKEN_FIELDS = {
    'feed_id': 'pythFeedId',
    'feed_name': 'pythName',
    'external_id': 'coinGeckoId',
    'name': 'tokenName',
    'symbol': 'tokenSymbol',
    'image_url': 'tokenImageLogo',
    'total_supply': 'tokenTotalSupply',
    'circulating_supply': 'tokenCirculatingSupply',
}

METRIC_FIELDS = {
    'trending': 'trendingScore',
    'market': 'marketScore',
    'social': 'socialScore',
    'virality': 'viralityScore',
}

SCORED_KEYS = ('metrics', 'finalScore')


class InvalidTokenRecord(ValueError):
    """Raised when a record cannot be interpreted as a token"""


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_strict(content: str) -> Any:
    """json.loads without the NaN / Infinity / -Infinity extensions"""
    return json.loads(content, parse_constant=_reject_constant)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _as_number(value: Any) -> Optional[float]:
    # bool is an int subclass but never a supply figure
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    # overflowing literals such as 1e400 decode to inf
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _finite(value: Any) -> Any:
    """Replace non-finite floats with None so the value stays valid JSON"""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


@dataclass(frozen=True)
class Token:
    """A tradable asset as described by the token feed"""
    feed_id: str
    feed_name: str
    symbol: str = ''
    external_id: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    total_supply: Optional[float] = None
    circulating_supply: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)
    # feed record as read, written back unchanged
    source: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'Token':
        """Build a token from a feed record, keeping unknown keys in `extra`"""
        if not isinstance(record, dict):
            raise InvalidTokenRecord(
                f"Expected a JSON object, got {type(record).__name__}"
            )

        known = set(TOKEN_FIELDS.values()) | set(SCORED_KEYS)
        return cls(
            feed_id=_as_text(record.get('pythFeedId')) or '',
            feed_name=_as_text(record.get('pythName')) or '',
            symbol=_as_text(record.get('tokenSymbol')) or '',
            external_id=_as_text(record.get('coinGeckoId')),
            name=_as_text(record.get('tokenName')),
            image_url=_as_text(record.get('tokenImageLogo')),
            total_supply=_as_number(record.get('tokenTotalSupply')),
            circulating_supply=_as_number(record.get('tokenCirculatingSupply')),
            extra={k: v for k, v in record.items() if k not in known},
            source={k: _finite(v) for k, v in record.items() if k not in SCORED_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.source is not None:
            return dict(self.source)

        data = {key: getattr(self, attr) for attr, key in TOKEN_FIELDS.items()}
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class Metrics:
    """Heuristic scores derived from a single token"""
    trending: float = 0.0
    market: float = 0.0
    social: float = 0.0
    virality: float = 0.0

    def is_finite(self) -> bool:
        return all(math.isfinite(getattr(self, attr)) for attr in METRIC_FIELDS)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Metrics':
        return cls(**{attr: data.get(key, 0.0) for attr, key in METRIC_FIELDS.items()})

    def to_dict(self) -> Dict[str, float]:
        return {key: getattr(self, attr) for attr, key in METRIC_FIELDS.items()}


@dataclass(frozen=True)
class ScoredToken:
    """A token together with its metrics and weighted final score"""
    token: Token
    metrics: Metrics
    final_score: float

    @property
    def feed_id(self) -> str:
        return self.token.feed_id

    @property
    def feed_name(self) -> str:
        return self.token.feed_name

    @property
    def symbol(self) -> str:
        return self.token.symbol

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'ScoredToken':
        """Rebuild a scored token from an entry of the ranked output file"""
        token = Token.from_dict(record)
        metrics = record.get('metrics')
        if not isinstance(metrics, dict) or 'finalScore' not in record:
            raise InvalidTokenRecord(
                f"Record {token.feed_id!r} has no metrics or finalScore"
            )
        return cls(
            token=token,
            metrics=Metrics.from_dict(metrics),
            final_score=record['finalScore'],
        )

    def to_dict(self) -> Dict[str, Any]:
        data = self.token.to_dict()
        data['metrics'] = self.metrics.to_dict()
        data['finalScore'] = self.final_score
        return data
