import pytest
from jsonschema import Draft7Validator
from pydantic import ValidationError

from tensorzero_content.types import ContentPartText, TextContent


def test_wire_json_schema_is_valid() -> None:
    schema = TextContent.wire_json_schema()
    Draft7Validator.check_schema(schema)
    assert schema["title"] == "TextContent"
    assert ContentPartText.wire_json_schema()["title"] == "ContentPartText"


def test_wire_json_schema_accepts_variants() -> None:
    validator = Draft7Validator(TextContent.wire_json_schema())
    assert validator.is_valid({"text": "hello"})
    assert validator.is_valid({"tensorzero::arguments": {"a": 1}})
    assert validator.is_valid({"type": "text", "text": "hello"})


def test_wire_json_schema_rejects_invalid_objects() -> None:
    validator = Draft7Validator(ContentPartText.wire_json_schema())
    assert not validator.is_valid({"text": "hi", "tensorzero::arguments": {}})
    assert not validator.is_valid({})
    assert not validator.is_valid({"text": 123})
    assert not validator.is_valid({"tensorzero::arguments": "oops"})


def test_wire_json_schema_rejects_both_keys_whatever_their_values() -> None:
    validator = Draft7Validator(TextContent.wire_json_schema())
    for data in (
        {"text": "hi", "tensorzero::arguments": "oops"},
        {"text": None, "tensorzero::arguments": {}},
        {"text": "hi", "tensorzero::arguments": None},
    ):
        assert not validator.is_valid(data)
        with pytest.raises(ValidationError, match="Only one of"):
            TextContent.model_validate(data)


def test_wire_json_schema_matches_encoded_values() -> None:
    validator = Draft7Validator(TextContent.wire_json_schema())
    for content in (TextContent(), TextContent.model_validate({"tensorzero::arguments": {}})):
        assert validator.is_valid(content.model_dump(mode="json"))
