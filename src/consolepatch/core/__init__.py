from consolepatch.core.patch import ConsolePatch, InvalidConsoleError
from consolepatch.core.console import PatchedConsole, WrappedConsole
from consolepatch.core.config import PatchConfig
from consolepatch.core.formatting import (
    SerializationError,
    capture_stack,
    format_assertion,
    format_message,
    serialize_table,
    stringify,
)
from consolepatch.base.context import WritableContext, default_context
from consolepatch.base.timers import TimerRegistry
from consolepatch.base.types import (
    AdvancedConsole,
    BasicConsole,
    Channel,
    channel_for,
    is_console_instance,
)

__all__ = [
    # Engine
    "ConsolePatch",
    "InvalidConsoleError",
    # Surfaces
    "PatchedConsole",
    "WrappedConsole",
    # Configuration and context
    "PatchConfig",
    "WritableContext",
    "default_context",
    # Formatting
    "SerializationError",
    "capture_stack",
    "format_assertion",
    "format_message",
    "serialize_table",
    "stringify",
    # State
    "TimerRegistry",
    # Types
    "AdvancedConsole",
    "BasicConsole",
    "Channel",
    "channel_for",
    "is_console_instance",
]
