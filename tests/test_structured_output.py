"""Tests for the structured-output schema builder."""

import pytest

from openai_tools.common.errors import InvalidArgumentError, SchemaShapeMismatchError
from openai_tools.common.structured_output import Schema, SchemaEnvelope


def test_required_tracks_added_properties_in_order():
    schema = Schema.chat_json_schema("person")
    schema.add_property("name", "string", "Full name")
    schema.add_property("age", "integer", "Age in years")
    schema.add_property("height", "number")

    body = schema.to_dict()["schema"]
    assert body["required"] == ["name", "age", "height"]
    assert list(body["properties"]) == ["name", "age", "height"]
    assert body["additionalProperties"] is False
    assert body["properties"]["age"] == {"type": "integer", "description": "Age in years"}
    assert body["properties"]["height"] == {"type": "number"}


def test_readding_a_property_replaces_it():
    schema = Schema.chat_json_schema("x")
    schema.add_property("a", "string")
    schema.add_property("a", "boolean")
    body = schema.to_dict()["schema"]
    assert body["required"] == ["a"]
    assert body["properties"]["a"]["type"] == "boolean"


def test_chat_response_format():
    schema = Schema.chat_json_schema("weather").add_property("city", "string", "City")
    assert schema.to_chat_response_format() == {
        "type": "json_schema",
        "json_schema": {
            "name": "weather",
            "schema": {
                "type": "object",
                "properties": {"city": {"type": "string", "description": "City"}},
                "required": ["city"],
                "additionalProperties": False,
            },
        },
    }


def test_responses_json_format():
    schema = Schema.responses_json_schema("capital").add_property("capital", "string")
    text = schema.to_responses_text_format()
    assert text["format"]["type"] == "json_schema"
    assert text["format"]["name"] == "capital"
    assert text["format"]["schema"]["required"] == ["capital"]


def test_responses_text_format():
    schema = Schema.responses_text_schema()
    assert schema.envelope is SchemaEnvelope.RESPONSES_TEXT
    assert schema.to_responses_text_format() == {"format": {"type": "text"}}


def test_property_on_text_schema_is_shape_mismatch():
    schema = Schema.responses_text_schema()
    with pytest.raises(SchemaShapeMismatchError):
        schema.add_property("a", "string")
    with pytest.raises(SchemaShapeMismatchError):
        schema.add_array("items", [("name", "Name")])
    # Shape mismatches are invalid arguments
    with pytest.raises(InvalidArgumentError):
        schema.set_additional_properties(True)


def test_unknown_scalar_type_rejected():
    schema = Schema.chat_json_schema("x")
    with pytest.raises(InvalidArgumentError):
        schema.add_property("a", "object")


def test_add_array_of_objects():
    schema = Schema.responses_json_schema("list")
    schema.add_array("people", [("name", "Name"), ("role", "Role")])
    prop = schema.to_dict()["schema"]["properties"]["people"]
    assert prop["type"] == "array"
    assert prop["items"]["required"] == ["name", "role"]
    assert prop["items"]["properties"]["role"] == {"type": "string", "description": "Role"}
    assert prop["items"]["additionalProperties"] is False


def test_enum_property():
    schema = Schema.chat_json_schema("x").add_enum_property("unit", ["c", "f"], "Unit")
    prop = schema.to_dict()["schema"]["properties"]["unit"]
    assert prop == {"type": "string", "description": "Unit", "enum": ["c", "f"]}
    with pytest.raises(InvalidArgumentError):
        schema.add_enum_property("empty", [])


def test_envelopes_are_not_interchangeable():
    with pytest.raises(SchemaShapeMismatchError):
        Schema.responses_json_schema("x").to_chat_response_format()
    with pytest.raises(SchemaShapeMismatchError):
        Schema.chat_json_schema("x").to_responses_text_format()


def test_set_additional_properties():
    schema = Schema.chat_json_schema("x").set_additional_properties(True)
    assert schema.to_dict()["schema"]["additionalProperties"] is True
