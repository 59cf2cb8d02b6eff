"""Turning console call arguments into a single line of text.

Objects (mappings, sequences, pydantic models, dataclasses and plain class
instances) are rendered as compact JSON; everything else uses its plain string
form. The same rule applies to values nested inside objects.
"""

import json
import traceback
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from enum import Enum
from types import ModuleType
from typing import Any, Optional, Sequence

from pydantic import BaseModel

DEFAULT_PREFIX = "LOG: "
ASSERTION_PREFIX = "Assertion failed:"
PLACEHOLDER = "%o"


class SerializationError(ValueError):
    """Raised when an object argument cannot be rendered as JSON.

    Attributes:
        value: The argument that failed to serialize.
    """

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        super().__init__(f"Cannot serialize {type(value).__name__} argument: {reason}")


def is_object_argument(arg: Any) -> bool:
    """Check whether an argument is rendered as JSON rather than str()."""
    if isinstance(arg, (str, bytes)):
        return False
    if isinstance(arg, (Mapping, list, tuple, BaseModel)):
        return True
    if is_dataclass(arg) and not isinstance(arg, type):
        return True
    return _is_plain_instance(arg)


def _is_plain_instance(obj: Any) -> bool:
    # Instances serialized through their attribute dict.
    if isinstance(obj, (type, ModuleType, BaseException, Enum)) or callable(obj):
        return False
    return hasattr(obj, "__dict__")


def to_json(value: Any) -> str:
    """Serialize a value as compact JSON.

    Raises:
        SerializationError: If the value contains a reference cycle or cannot
            be encoded.
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_default_json_serializer)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(value, str(exc)) from exc


def stringify(arg: Any) -> str:
    """Render a single argument."""
    if is_object_argument(arg):
        return to_json(arg)
    return str(arg)


def format_message(args: Sequence[Any], prefix: str = DEFAULT_PREFIX) -> str:
    """Join arguments into one log line.

    Objects are rendered as JSON with nothing after them; every other argument
    is followed by a space. The result is stripped and the prefix is prepended.

    Args:
        args: Positional arguments of a console call.
        prefix: Marker placed in front of the message.

    Returns:
        The formatted line, without a trailing newline.

    Example:
        >>> format_message(["count", 3, {"a": 1}, "items"])
        'LOG: count 3 {"a":1}items'
    """
    message = "".join(
        to_json(arg) if is_object_argument(arg) else f"{arg} " for arg in args
    )
    return f"{prefix}{message.strip()}"


def format_assertion(data: Sequence[Any], prefix: str = ASSERTION_PREFIX) -> str:
    """Build the message for a failed assertion.

    If the first item is a string containing "%o", the first placeholder is
    replaced by the JSON form of the second item and the remaining items are
    ignored. Otherwise all items are joined with spaces, objects as JSON.
    """
    if data and isinstance(data[0], str) and PLACEHOLDER in data[0]:
        substitute = data[1] if len(data) > 1 else None
        return f"{prefix} {data[0].replace(PLACEHOLDER, to_json(substitute), 1)}"
    return f"{prefix} " + " ".join(stringify(arg) for arg in data)


def serialize_table(data: Any) -> str:
    """Render tabular data for console.table."""
    return to_json(data)


def capture_stack() -> Optional[str]:
    """Capture the current call stack as text, excluding this frame."""
    frames = traceback.format_stack()[:-1]
    if not frames:
        return None
    return "Trace\n" + "".join(frames).rstrip("\n")


def _default_json_serializer(obj: Any) -> Any:
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if _is_plain_instance(obj):
        return obj.__dict__
    return str(obj)
