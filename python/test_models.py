"""
Unit tests for the token data model
"""
import json

import pytest

from scoring.models import InvalidTokenRecord, Metrics, ScoredToken, Token, loads_strict


@pytest.mark.unit
class TestToken:
    """Test cases for Token mapping"""

    def test_from_dict_maps_feed_keys(self, sample_records):
        token = Token.from_dict(sample_records[0])

        assert token.feed_id == "0xaaa"
        assert token.feed_name == "Crypto.BTC/USD"
        assert token.external_id == "bitcoin"
        assert token.name == "Bitcoin"
        assert token.symbol == "BTC"
        assert token.image_url == "https://example.com/btc.png"
        assert token.total_supply == 21000000
        assert token.circulating_supply == 19500000
        assert token.extra == {}

    def test_missing_fields_default(self):
        token = Token.from_dict({"pythFeedId": "x", "pythName": "Y", "tokenSymbol": None})

        assert token.symbol == ""
        assert token.name is None
        assert token.total_supply is None

    def test_non_numeric_supply_ignored(self):
        token = Token.from_dict({
            "pythFeedId": "x",
            "pythName": "Y",
            "tokenTotalSupply": "1000",
            "tokenCirculatingSupply": True
        })

        assert token.total_supply is None
        assert token.circulating_supply is None

    def test_extra_keys_round_trip(self, sample_records):
        record = dict(sample_records[1], chain="solana", tags=["meme"])
        token = Token.from_dict(record)

        assert token.extra == {"chain": "solana", "tags": ["meme"]}
        assert token.to_dict() == record

    def test_to_dict_writes_record_as_read(self):
        record = {"pythFeedId": 123, "tokenSymbol": None, "tokenTotalSupply": "1000"}
        token = Token.from_dict(record)

        assert token.feed_id == "123"
        assert token.feed_name == ""
        assert token.symbol == ""
        assert token.to_dict() == record
        assert "pythName" not in token.to_dict()

    def test_non_finite_supply_dropped(self):
        record = {"pythFeedId": "x", "pythName": "Y", "tokenTotalSupply": float("inf"),
                  "tokenCirculatingSupply": float("nan")}
        token = Token.from_dict(record)

        assert token.total_supply is None
        assert token.circulating_supply is None
        assert token.to_dict()["tokenTotalSupply"] is None
        assert token.to_dict()["tokenCirculatingSupply"] is None

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
    def test_loads_strict_rejects_constants(self, text):
        with pytest.raises(ValueError):
            loads_strict(text)

    @pytest.mark.parametrize("record", [None, "0xaaa", 42, ["pythFeedId"]])
    def test_rejects_non_objects(self, record):
        with pytest.raises(InvalidTokenRecord):
            Token.from_dict(record)


@pytest.mark.unit
class TestScoredToken:
    """Test cases for ScoredToken serialization"""

    def test_to_dict_appends_scores(self, scorer, moon_meme_token):
        data = scorer.score(moon_meme_token).to_dict()

        assert list(data)[:2] == ["pythFeedId", "pythName"]
        assert list(data)[-2:] == ["metrics", "finalScore"]
        assert data["metrics"] == {
            "trendingScore": 18.0,
            "marketScore": pytest.approx(13.1254, abs=1e-4),
            "socialScore": 12.0,
            "viralityScore": 45.0
        }

    def test_whole_number_metrics_serialize_as_integers(self, scorer, moon_meme_token):
        text = json.dumps(scorer.score(moon_meme_token).to_dict())

        assert '"trendingScore": 18,' in text
        assert '"socialScore": 12,' in text
        assert '"viralityScore": 45}' in text

    def test_empty_token_metrics_are_integers(self, scorer):
        metrics = scorer.score(Token(feed_id="x", feed_name="Y")).metrics

        assert json.dumps(metrics.to_dict()) == (
            '{"trendingScore": 0, "marketScore": 0, "socialScore": 0, "viralityScore": 0}'
        )

    def test_from_dict_restores_scores(self, scorer, sample_tokens):
        for token in sample_tokens:
            scored = scorer.score(token)
            restored = ScoredToken.from_dict(scored.to_dict())

            assert restored == scored
            assert "metrics" not in restored.token.extra

    def test_from_dict_requires_scores(self, sample_records):
        with pytest.raises(InvalidTokenRecord):
            ScoredToken.from_dict(sample_records[0])

    def test_metrics_is_finite(self):
        assert Metrics(1.0, 2.0, 3.0, 4.0).is_finite()
        assert not Metrics(market=float("inf")).is_finite()
