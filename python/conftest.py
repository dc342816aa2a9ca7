"""
Shared pytest fixtures for the token sorter tests
"""
import json

import pytest

from scoring.models import Token
from scoring.token_ranker import TokenRanker
from scoring.token_scorer import TokenScorer


SAMPLE_RECORDS = [
    {
        "pythFeedId": "0xaaa",
        "pythName": "Crypto.BTC/USD",
        "coinGeckoId": "bitcoin",
        "tokenName": "Bitcoin",
        "tokenSymbol": "BTC",
        "tokenImageLogo": "https://example.com/btc.png",
        "tokenTotalSupply": 21000000,
        "tokenCirculatingSupply": 19500000
    },
    {
        "pythFeedId": "0xbbb",
        "pythName": "SuperMoonMeme",
        "coinGeckoId": None,
        "tokenName": "Moon",
        "tokenSymbol": "MEME",
        "tokenImageLogo": None,
        "tokenTotalSupply": 1000,
        "tokenCirculatingSupply": 500
    },
    {
        "pythFeedId": "0xccc",
        "pythName": "Equity.US.AAPL/USD",
        "coinGeckoId": None,
        "tokenName": None,
        "tokenSymbol": "AAPL",
        "tokenImageLogo": None,
        "tokenTotalSupply": None,
        "tokenCirculatingSupply": None
    },
    {
        "pythFeedId": "0xddd",
        "pythName": "Crypto.DOGE/USD",
        "coinGeckoId": "dogecoin",
        "tokenName": "Dogecoin Classic Edition",
        "tokenSymbol": "DOGE",
        "tokenImageLogo": None,
        "tokenTotalSupply": 0,
        "tokenCirculatingSupply": 146000000000
    }
]


@pytest.fixture
def scorer():
    """Token scorer instance"""
    return TokenScorer()


@pytest.fixture
def ranker():
    """Token ranker instance"""
    return TokenRanker()


@pytest.fixture
def sample_records():
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def sample_tokens(sample_records):
    return [Token.from_dict(record) for record in sample_records]


@pytest.fixture
def moon_meme_token():
    """Token with every keyword bonus except crypto"""
    return Token(
        feed_id="0xbbb",
        feed_name="SuperMoonMeme",
        symbol="MEME",
        name="Moon",
        total_supply=1000,
        circulating_supply=500
    )


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON (or raw text) payload under tmp_path and return its path"""
    def _write(relative, payload):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
