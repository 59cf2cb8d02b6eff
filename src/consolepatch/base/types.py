"""Type definitions for console-like logging surfaces.

This module defines the protocols a backing logger must satisfy, the channel
names output is routed to, and the set of method names the patching layer
knows how to intercept.
"""

from typing import Any, Callable, Dict, Literal, Optional, Protocol, Sequence, Union, runtime_checkable

Channel = Literal["stdout", "stderr"]

STDOUT: Channel = "stdout"
STDERR: Channel = "stderr"

Sink = Union[str, Callable[[str], Any], None]

# Methods whose output belongs on the error channel.
ERROR_METHODS = frozenset({"error", "warn"})

SUPPORTED_METHODS: Sequence[str] = (
    "log",
    "info",
    "debug",
    "error",
    "warn",
    "table",
    "assert_",
    "time",
    "time_end",
    "clear",
    "group",
    "group_end",
    "trace",
)


@runtime_checkable
class BasicConsole(Protocol):
    """Minimum interface a logger needs to be patched.

    The log and error methods must exist and may return a string or None.
    """
    def log(self, *args: Any) -> Optional[str]:
        ...

    def error(self, *args: Any) -> Optional[str]:
        ...


class AdvancedConsole(BasicConsole, Protocol):
    """Full console interface supported by the patching layer.

    Everything beyond log and error is optional on a backing logger; the
    surfaces built by this package implement all of it.
    """
    def info(self, *args: Any) -> Optional[str]:
        ...

    def debug(self, *args: Any) -> Optional[str]:
        ...

    def warn(self, *args: Any) -> Optional[str]:
        ...

    def table(self, data: Any = None, *args: Any) -> Optional[str]:
        ...

    def assert_(self, condition: bool = False, *data: Any) -> Optional[str]:
        ...

    def time(self, label: Any = None) -> Optional[str]:
        ...

    def time_end(self, label: Any = None) -> Optional[str]:
        ...

    def clear(self) -> Optional[str]:
        ...

    def group(self, *args: Any) -> Optional[str]:
        ...

    def group_end(self, *args: Any) -> Optional[str]:
        ...

    def trace(self, *args: Any) -> Optional[str]:
        ...


def channel_for(method: str) -> Channel:
    """Return the channel a console method writes to.

    Args:
        method: Console method name (e.g., "log", "warn").

    Returns:
        "stderr" for error and warn, "stdout" for everything else.
    """
    return STDERR if method in ERROR_METHODS else STDOUT


def is_console_instance(obj: Any) -> bool:
    """Check whether an object can act as a backing logger.

    Args:
        obj: Any value.

    Returns:
        True if obj exposes callable log and error attributes.
    """
    if obj is None:
        return False
    return callable(getattr(obj, "log", None)) and callable(getattr(obj, "error", None))


def capture_methods(console: Any) -> Dict[str, Callable[..., Any]]:
    """Snapshot the supported methods an object currently exposes.

    Later reassignment of attributes on console does not affect the snapshot.

    Args:
        console: Backing logger, or None.

    Returns:
        Mapping of supported method name to the bound callable.
    """
    if console is None:
        return {}
    captured: Dict[str, Callable[..., Any]] = {}
    for name in SUPPORTED_METHODS:
        method = getattr(console, name, None)
        if callable(method):
            captured[name] = method
    return captured
