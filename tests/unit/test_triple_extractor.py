"""
Tests for triple extraction and response validation.
"""

import logging

import pytest

from triplegraph.agents.triple_extractor import (
    TripleExtractor,
    strip_code_fence,
    validate_triple,
)
from triplegraph.schema.triples import ExtractionFailure, Triple
from tests.fakes import triple_json

PARIS = Triple(subject="Paris", object="France", relationship="capital_of")


@pytest.fixture
def extractor() -> TripleExtractor:
    return TripleExtractor(model="test-model")


class TestStripCodeFence:
    """Tests for fence stripping."""

    def test_plain_text_unchanged(self):
        assert strip_code_fence('  {"a": 1}  ') == '{"a": 1}'

    def test_json_fence_removed(self):
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_other_fences_untouched(self):
        """Only a leading ```json marker triggers stripping."""
        assert strip_code_fence('```\n{"a": 1}\n```') == '```\n{"a": 1}\n```'


class TestValidateTriple:
    """Tests for shape validation."""

    def test_valid(self):
        data = {"node": "Paris", "target_node": "France", "relationship": "capital_of"}
        assert validate_triple(data) == PARIS

    @pytest.mark.parametrize("missing", ["node", "target_node", "relationship"])
    def test_missing_key(self, missing):
        data = {"node": "Paris", "target_node": "France", "relationship": "capital_of"}
        del data[missing]

        result = validate_triple(data)

        assert isinstance(result, ExtractionFailure)
        assert result.reason == "invalid_shape"

    @pytest.mark.parametrize("value", [None, 42, ["Paris"], {"name": "Paris"}, "", "   "])
    def test_bad_value(self, value):
        data = {"node": value, "target_node": "France", "relationship": "capital_of"}
        assert isinstance(validate_triple(data), ExtractionFailure)

    @pytest.mark.parametrize("data", [[], "Paris", 3, None])
    def test_not_an_object(self, data):
        assert isinstance(validate_triple(data), ExtractionFailure)

    def test_extra_keys_ignored(self):
        data = {
            "node": "Paris",
            "target_node": "France",
            "relationship": "capital_of",
            "confidence": 0.9,
        }
        assert validate_triple(data) == PARIS


class TestTripleExtractor:
    """Tests for TripleExtractor.parse_output and extract."""

    def test_parse_plain_json(self, extractor):
        response = triple_json("Paris", "France", "capital_of")
        assert extractor.parse_output(response) == PARIS

    def test_fenced_json_parses_identically(self, extractor):
        plain = triple_json("Paris", "France", "capital_of")
        fenced = f"```json\n{plain}\n```"
        assert extractor.parse_output(fenced) == extractor.parse_output(plain)

    def test_invalid_json(self, extractor, caplog):
        with caplog.at_level(logging.WARNING):
            result = extractor.parse_output("Paris is the capital of France.")

        assert isinstance(result, ExtractionFailure)
        assert result.reason == "invalid_json"
        assert result.raw == "Paris is the capital of France."
        assert "Failed to parse triple JSON" in caplog.text

    def test_wrong_shape_logged(self, extractor, caplog):
        with caplog.at_level(logging.WARNING):
            result = extractor.parse_output('{"node": "Paris", "target_node": "France"}')

        assert isinstance(result, ExtractionFailure)
        assert result.raw == {"node": "Paris", "target_node": "France"}
        assert "does not match expected triple format" in caplog.text

    def test_array_response(self, extractor):
        response = f"[{triple_json('Paris', 'France', 'capital_of')}]"
        assert isinstance(extractor.parse_output(response), ExtractionFailure)

    def test_empty_response(self, extractor):
        assert isinstance(extractor.parse_output(""), ExtractionFailure)

    def test_extract_calls_model(self, extractor, fake_llm):
        fake_llm.extract = lambda text: triple_json("Steve Jobs", "Apple", "founded")

        result = extractor.extract("Title: Apple\nSummary: Steve Jobs founded Apple.")

        assert result == Triple(subject="Steve Jobs", object="Apple", relationship="founded")
        assert len(fake_llm.prompts) == 1
        assert "MOST salient relationship" in fake_llm.prompts[0]
        assert "Steve Jobs founded Apple." in fake_llm.prompts[0]

    def test_model_error_propagates(self, extractor, fake_llm):
        def boom(text):
            raise ConnectionError("quota exceeded")

        fake_llm.extract = boom

        with pytest.raises(ConnectionError):
            extractor.extract("anything")
