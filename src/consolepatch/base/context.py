"""Output contexts and sink resolution.

A context maps channel names ("stdout", "stderr") to sinks. A sink is either a
string accumulator that lines are appended to, a callback that receives each
line, or None to discard output for that channel.
"""

from typing import Any, Callable, MutableMapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from consolepatch.base.types import STDERR, STDOUT, Channel, Sink


class WritableContext(BaseModel):
    """Destination for console output, one sink per channel.

    Additional named handlers may be attached as extra fields; the patching
    layer only ever reads stdout and stderr.

    Attributes:
        stdout: Sink for the standard channel. None (the default) discards output.
        stderr: Sink for the error channel. None (the default) discards output.

    Example:
        >>> context = WritableContext(stdout="", stderr=lambda line: errors.append(line))
        >>> patch = ConsolePatch(context)
        >>> patch.console.log("hi")
        >>> context.stdout  # "LOG: hi\\n"
    """
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    stdout: Union[str, Callable[[str], Any], None] = None
    stderr: Union[str, Callable[[str], Any], None] = None


# Plain dicts are accepted too and mutated in place.
Context = Union[WritableContext, MutableMapping[str, Any]]


def default_context() -> WritableContext:
    """Create a context with empty string accumulators on both channels."""
    return WritableContext(stdout="", stderr="")


def detached_context() -> WritableContext:
    """Create a context whose channels discard all output."""
    return WritableContext(stdout=None, stderr=None)


def resolve_sink(context: Optional[Context], channel: Channel) -> Sink:
    """Look up the sink for a channel.

    Args:
        context: Active context (model or mapping), or None.
        channel: "stdout" or "stderr".

    Returns:
        The configured sink, or None if the channel has no destination.
    """
    if context is None:
        return None
    if isinstance(context, MutableMapping):
        return context.get(channel)
    return getattr(context, channel, None)


def _assign(context: Context, channel: Channel, value: str) -> None:
    if isinstance(context, MutableMapping):
        context[channel] = value
    else:
        setattr(context, channel, value)


def write_line(context: Optional[Context], channel: Channel, line: str) -> None:
    """Deliver one formatted line to the sink for a channel.

    Callbacks receive the bare line; accumulators get the line plus a newline.
    Absent sinks ignore the write.
    """
    sink = resolve_sink(context, channel)
    if callable(sink):
        sink(line)
    elif isinstance(sink, str):
        _assign(context, channel, f"{sink}{line}\n")


def clear_accumulators(context: Optional[Context]) -> None:
    """Reset string accumulators on both channels to an empty string."""
    for channel in (STDOUT, STDERR):
        if isinstance(resolve_sink(context, channel), str):
            _assign(context, channel, "")
