"""Console-like surfaces handed out by ConsolePatch.

PatchedConsole is built from scratch and routes every call through the
engine. WrappedConsole decorates an existing logger and, unless hook mode is
on, hands back the logger's own methods untouched.
"""

import functools
from typing import TYPE_CHECKING, Any, Callable, Optional

from consolepatch.base.types import capture_methods
from consolepatch.core.formatting import serialize_table

if TYPE_CHECKING:
    from consolepatch.core.patch import ConsolePatch


class PatchedConsole:
    """Console implementation whose output goes to the engine's context.

    Args:
        engine: Engine that formats and routes the output.
        hook_mode: If True, the engine's backing logger is also called with
            the original arguments.

    Example:
        >>> patch = ConsolePatch()
        >>> patch.console.warn("disk", {"free": 0})
        >>> patch.context.stderr  # 'LOG: disk {"free":0}\\n'
    """

    def __init__(self, engine: "ConsolePatch", hook_mode: bool = False) -> None:
        self._engine = engine
        self.hook_mode = hook_mode

    def log(self, *args: Any) -> Optional[str]:
        return self._engine.dispatch("log", args, self.hook_mode)

    def info(self, *args: Any) -> Optional[str]:
        return self._engine.dispatch("info", args, self.hook_mode)

    def debug(self, *args: Any) -> Optional[str]:
        return self._engine.dispatch("debug", args, self.hook_mode)

    def error(self, *args: Any) -> Optional[str]:
        return self._engine.dispatch("error", args, self.hook_mode)

    def warn(self, *args: Any) -> Optional[str]:
        return self._engine.dispatch("warn", args, self.hook_mode)

    def table(self, data: Any = None, *args: Any) -> Optional[str]:
        return self._engine.dispatch("table", (serialize_table(data), *args), self.hook_mode)

    def assert_(self, condition: bool = False, *data: Any) -> Optional[str]:
        return self._engine.assert_(condition, data, self.hook_mode)

    def time(self, label: Any = None) -> Optional[str]:
        return self._engine.time(label)

    def time_end(self, label: Any = None) -> Optional[str]:
        return self._engine.time_end(label)

    def clear(self) -> Optional[str]:
        return self._engine.clear()

    def group(self, *args: Any) -> Optional[str]:
        return self._engine.dispatch("group", args, self.hook_mode)

    def group_end(self, *args: Any) -> Optional[str]:
        return self._engine.dispatch("group_end", args, self.hook_mode)

    def trace(self, *args: Any) -> Optional[str]:
        return self._engine.trace(args, self.hook_mode)

    def __repr__(self) -> str:
        return f"<PatchedConsole hook_mode={self.hook_mode}>"


class WrappedConsole:
    """Decorator over an existing logger.

    The supported methods of the target are captured when the wrapper is
    built. With hook mode off they are exposed as-is; with hook mode on each
    one is replaced by a wrapper that calls the original and then calls it
    again with the first call's return value. assert_ always goes through the
    engine's log path. Every other attribute is read from the target.

    Args:
        engine: Engine used for failed assertions.
        target: Logger being wrapped.
        hook_mode: Whether to forward each call's output back into the target.
    """

    def __init__(self, engine: "ConsolePatch", target: Any, hook_mode: bool = False) -> None:
        self._engine = engine
        self._target = target
        self.hook_mode = hook_mode
        for name, method in capture_methods(target).items():
            if name == "assert_":
                continue
            setattr(self, name, _forwarding(method) if hook_mode else method)

    @property
    def target(self) -> Any:
        """The wrapped logger."""
        return self._target

    def assert_(self, condition: bool = False, *data: Any) -> Optional[str]:
        if condition:
            return None
        return self._engine.dispatch(
            "log", (self._engine.config.assertion_prefix, *data), self.hook_mode
        )

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not set in __init__.
        try:
            target = self.__dict__["_target"]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(target, name)

    def __repr__(self) -> str:
        return f"<WrappedConsole target={self._target!r} hook_mode={self.hook_mode}>"


# "assert" is a keyword; expose the method under its console name as well.
setattr(PatchedConsole, "assert", PatchedConsole.assert_)
setattr(WrappedConsole, "assert", WrappedConsole.assert_)


def _forwarding(method: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(method)
    def forward(*args: Any, **kwargs: Any) -> Any:
        output = method(*args, **kwargs)
        method(output)
        return output

    return forward
