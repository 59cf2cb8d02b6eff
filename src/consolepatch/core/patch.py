"""Console interception and dispatch engine.

ConsolePatch owns the active output context, the captured methods of an
optional backing logger and the timer registry, and exposes a console-like
surface through its ``console`` attribute.
"""

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from consolepatch.base.context import (
    Context,
    clear_accumulators,
    default_context,
    detached_context,
    write_line,
)
from consolepatch.base.timers import TimerRegistry
from consolepatch.base.types import AdvancedConsole, capture_methods, channel_for, is_console_instance
from consolepatch.core.config import PatchConfig
from consolepatch.core.console import PatchedConsole, WrappedConsole
from consolepatch.core.formatting import capture_stack, format_assertion, format_message

logger = logging.getLogger(__name__)


class InvalidConsoleError(TypeError):
    """Raised when an object without callable log and error methods is patched.

    Attributes:
        obj: The rejected object.
    """

    def __init__(self, obj: Any) -> None:
        self.obj = obj
        super().__init__(
            f"Expected a console with callable log and error methods, got {type(obj).__name__}"
        )


class ConsolePatch:
    """Intercepts console calls and redirects their output.

    Without a console instance, ``console`` is a PatchedConsole that formats
    every call into one line and writes it to the context's stdout or stderr
    sink. With a console instance, ``console`` is a WrappedConsole over it,
    which leaves the instance's behaviour alone unless hook mode is on.

    Sinks are string accumulators (appended to) or callbacks (called with each
    line). When neither a context nor a console is given, both channels start
    as empty string accumulators. When only a console is given, both channels
    are absent so that output is not captured twice.

    Args:
        context: Output context, a WritableContext or a mutable mapping with
            "stdout" and "stderr" keys.
        console: Optional existing logger to wrap.
        hook_mode: If True, output also reaches the backing logger.
        config: Optional formatting configuration.
        clock: Optional time source (seconds) for time/time_end.
        stack_capture: Optional callable returning stack text for trace.

    Attributes:
        context: Active output context.
        console: The console-like surface to hand to application code.
        timers: Running timers, kept across reconfiguration.
        config: Formatting configuration.

    Example:
        >>> patch = ConsolePatch()
        >>> patch.console.log("hi")
        >>> patch.context.stdout
        'LOG: hi\\n'
        >>> errors = []
        >>> patch = ConsolePatch({"stdout": "", "stderr": errors.append})
        >>> patch.console.error("boom")
        >>> errors
        ['LOG: boom']
    """

    def __init__(
        self,
        context: Optional[Context] = None,
        console: Any = None,
        hook_mode: bool = False,
        *,
        config: Optional[PatchConfig] = None,
        clock: Optional[Callable[[], float]] = None,
        stack_capture: Optional[Callable[[], Optional[str]]] = None,
    ) -> None:
        self.config = config or PatchConfig()
        if context is None:
            context = default_context() if console is None else detached_context()
        self.context: Context = context
        self.timers = TimerRegistry(clock=clock) if clock else TimerRegistry()
        self.stack_capture = stack_capture or capture_stack
        self._backing: Dict[str, Callable[..., Any]] = {}
        self.console: AdvancedConsole
        if console is None:
            self.console = PatchedConsole(self, hook_mode)
        else:
            self._attach(console, hook_mode)

    @property
    def backing_methods(self) -> Dict[str, Callable[..., Any]]:
        """Methods captured from the backing logger (copy)."""
        return dict(self._backing)

    def dispatch(self, method: str, args: Sequence[Any], hook_mode: bool = False) -> Any:
        """Format a call, write it to the method's channel and optionally forward it.

        Args:
            method: Console method name, used for channel routing and to pick
                the backing method.
            args: Call arguments.
            hook_mode: If True, call the backing method with the same arguments.

        Returns:
            The backing method's return value when forwarded, otherwise None.

        Raises:
            SerializationError: If an object argument cannot be serialized.
        """
        line = format_message(args, self.config.prefix)
        write_line(self.context, channel_for(method), line)
        if not hook_mode:
            return None
        original = self._backing.get(method)
        if original is None:
            logger.debug("No backing %s method; skipping hook forwarding", method)
            return None
        return original(*args)

    def assert_(self, condition: Any, data: Sequence[Any], hook_mode: bool = False) -> Any:
        if condition:
            return None
        message = format_assertion(data, self.config.assertion_prefix)
        return self.dispatch("log", (message,), hook_mode)

    def time(self, label: Any = None) -> Any:
        label = self._label(label)
        if not self.timers.start(label):
            return self.console.error(f"Timer '{label}' already exists")
        return None

    def time_end(self, label: Any = None) -> Any:
        label = self._label(label)
        elapsed_ms = self.timers.stop(label)
        if elapsed_ms is None:
            return self.console.error(f"Timer '{label}' does not exist")
        return self.console.log(f"{label}: {round(elapsed_ms)}ms")

    def clear(self) -> Any:
        """Empty string accumulators and call the backing logger's clear, if any."""
        clear_accumulators(self.context)
        original = self._backing.get("clear")
        if original is None:
            return None
        return original()

    def trace(self, args: Sequence[Any], hook_mode: bool = False) -> Any:
        stack = self.stack_capture() or self.config.stack_fallback
        return self.dispatch("trace", (*args, stack), hook_mode)

    def patch(
        self,
        context: Optional[Context] = None,
        console: Any = None,
        hook_mode: bool = False,
    ) -> "ConsolePatch":
        """Reconfigure the engine after creation.

        Omitted arguments leave the current state untouched. Running timers
        are kept.

        Args:
            context: New output context; replaces the current one wholesale.
            console: New logger to wrap; replaces ``console`` with a
                WrappedConsole over it.
            hook_mode: Hook mode for the new wrapper (only used with console).

        Returns:
            This engine, for chaining.

        Raises:
            InvalidConsoleError: If console lacks callable log and error methods.
        """
        if context is not None:
            self.context = context
            logger.debug("Replaced output context")
        if console is not None:
            self._attach(console, hook_mode)
        return self

    @staticmethod
    def is_console_instance(obj: Any) -> bool:
        """Check whether obj exposes the log and error methods of a logger."""
        return is_console_instance(obj)

    def _attach(self, console: Any, hook_mode: bool) -> None:
        if not is_console_instance(console):
            raise InvalidConsoleError(console)
        self._backing = capture_methods(console)
        logger.debug(
            "Wrapping %s (hook_mode=%s, methods=%s)",
            type(console).__name__,
            hook_mode,
            sorted(self._backing),
        )
        self.console = WrappedConsole(self, console, hook_mode)

    def _label(self, label: Any) -> str:
        return self.config.default_timer_label if label is None else str(label)

    def __repr__(self) -> str:
        return f"<ConsolePatch console={self.console!r}>"
