"""Tests for using JSONPointer as a Pydantic field type."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from jpointer import JSONPointer

# ---------------------------------------------------------------------------
# Test models
# ---------------------------------------------------------------------------


class Issue(BaseModel):
    message: str
    location: JSONPointer
    related: list[JSONPointer] = []


# ===================================================================
# Validation
# ===================================================================


class TestValidation:
    def test_from_string(self):
        issue = Issue(message="bad", location="/items/0/name")
        assert issue.location == JSONPointer.of("items", "0", "name")

    def test_empty_string_is_root(self):
        issue = Issue(message="bad", location="")
        assert issue.location is JSONPointer.root

    def test_pointer_instance_passes_through(self):
        pointer = JSONPointer("/a")
        issue = Issue(message="bad", location=pointer)
        assert issue.location is pointer

    def test_from_token_list(self):
        issue = Issue(message="bad", location=["a/b", "0"])
        assert str(issue.location) == "/a~1b/0"

    def test_invalid_string_is_validation_error(self):
        with pytest.raises(ValidationError, match='Illegal JSON Pointer - "items"'):
            Issue(message="bad", location="items")

    def test_invalid_escape_is_validation_error(self):
        with pytest.raises(ValidationError, match="Illegal token in JSON Pointer"):
            Issue(message="bad", location="/a~")

    def test_non_string_tokens_rejected(self):
        with pytest.raises(ValidationError, match="tokens must be str"):
            Issue(message="bad", location=["a", 1])

    @pytest.mark.parametrize("value", [1, None, {"a": 1}])
    def test_wrong_type_rejected(self, value):
        with pytest.raises(ValidationError):
            Issue(message="bad", location=value)

    def test_validate_json(self):
        issue = Issue.model_validate_json(
            '{"message": "bad", "location": "/m~0n", "related": ["", "/x"]}'
        )
        assert issue.location.tokens == ("m~n",)
        assert issue.related == [JSONPointer.root, JSONPointer("/x")]


# ===================================================================
# Serialisation and schema
# ===================================================================


class TestSerialization:
    def test_model_dump(self):
        issue = Issue(message="bad", location="/a~1b", related=["/x"])
        assert issue.model_dump() == {
            "message": "bad",
            "location": "/a~1b",
            "related": ["/x"],
        }

    def test_model_dump_json_round_trip(self):
        issue = Issue(message="bad", location=JSONPointer.of("a/b", "~"))
        restored = Issue.model_validate_json(issue.model_dump_json())
        assert restored == issue

    def test_type_adapter(self):
        adapter = TypeAdapter(JSONPointer)
        assert adapter.validate_python("/e^f") == JSONPointer("/e^f")
        assert adapter.dump_python(JSONPointer("/e^f")) == "/e^f"
        assert adapter.dump_json(JSONPointer("/a")) == b'"/a"'

    def test_json_schema(self):
        schema = TypeAdapter(JSONPointer).json_schema()
        assert schema == {"type": "string", "format": "json-pointer"}
