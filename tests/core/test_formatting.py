"""Tests for console argument formatting."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from consolepatch.core.formatting import (
    SerializationError,
    capture_stack,
    format_assertion,
    format_message,
    serialize_table,
    stringify,
)


class User(BaseModel):
    """Test model."""
    name: str
    age: int


@dataclass
class Point:
    x: int
    y: int


def test_format_message_primitives_are_space_joined():
    """Verify primitives are joined with single spaces after the marker."""
    assert format_message(["hello", 42, 1.5, True, None]) == "LOG: hello 42 1.5 True None"


def test_format_message_strips_surrounding_whitespace():
    assert format_message(["  padded  ", "end   "]) == "LOG: padded   end"


def test_format_message_without_arguments_keeps_marker():
    assert format_message([]) == "LOG: "


def test_format_message_serializes_objects_as_json():
    """Verify object arguments appear as JSON, not as their repr."""
    line = format_message(["payload", {"a": 1, "b": [1, 2]}, ("x", "y")])

    assert line == 'LOG: payload {"a":1,"b":[1,2]}["x","y"]'
    assert "{'a': 1" not in line


def test_format_message_no_space_after_objects():
    """Verify only non-object arguments are followed by a space."""
    assert format_message([{"a": 1}, "x"]) == 'LOG: {"a":1}x'
    assert format_message(["x", {"a": 1}, "y"]) == 'LOG: x {"a":1}y'


def test_plain_instance_renders_the_same_at_any_depth():
    """Verify a class instance is JSON both at top level and nested."""
    class Job:
        def __init__(self) -> None:
            self.id = 3
            self.state = "done"

    job = Job()

    assert stringify(job) == '{"id":3,"state":"done"}'
    assert stringify({"job": job}) == '{"job":{"id":3,"state":"done"}}'


def test_non_data_objects_use_str_at_any_depth():
    error = RuntimeError("boom")

    assert stringify(error) == "boom"
    assert stringify([error]) == '["boom"]'
    assert stringify(len) == str(len)


def test_stringify_pydantic_and_dataclass():
    assert stringify(User(name="ada", age=36)) == '{"name":"ada","age":36}'
    assert stringify(Point(1, 2)) == '{"x":1,"y":2}'


def test_stringify_nested_models_inside_containers():
    assert stringify({"user": User(name="ada", age=36)}) == '{"user":{"name":"ada","age":36}}'


def test_custom_prefix():
    assert format_message(["x"], prefix="OUT: ") == "OUT: x"


def test_cyclic_object_raises_serialization_error():
    """Verify cyclic structures fail loudly instead of being swallowed."""
    cyclic: dict = {}
    cyclic["self"] = cyclic

    with pytest.raises(SerializationError) as exc_info:
        format_message(["bad", cyclic])

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.value is cyclic
    assert exc_info.value.__cause__ is not None


def test_format_assertion_substitutes_placeholder():
    message = format_assertion(["value was %o", {"id": 7}, "ignored"])

    assert message == 'Assertion failed: value was {"id":7}'


def test_format_assertion_replaces_only_first_placeholder():
    assert format_assertion(["%o and %o", [1]]) == "Assertion failed: [1] and %o"


def test_format_assertion_placeholder_without_value():
    assert format_assertion(["missing %o"]) == "Assertion failed: missing null"


def test_format_assertion_joins_data():
    message = format_assertion(["expected", 3, {"got": 4}])

    assert message == 'Assertion failed: expected 3 {"got":4}'


def test_format_assertion_without_data():
    assert format_assertion([]) == "Assertion failed: "


def test_serialize_table():
    rows = [{"a": 1}, {"a": 2}]

    assert serialize_table(rows) == '[{"a":1},{"a":2}]'
    assert serialize_table(None) == "null"


def test_capture_stack_contains_caller():
    stack = capture_stack()

    assert stack is not None
    assert stack.startswith("Trace")
    assert "test_capture_stack_contains_caller" in stack
