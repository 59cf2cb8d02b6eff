"""Configuration for the patching engine."""

from typing import Any

from pydantic import BaseModel


class PatchConfig(BaseModel):
    """Fixed strings the engine uses when formatting output.

    Attributes:
        prefix: Marker prepended to every formatted line.
        assertion_prefix: Leading text of failed assertion messages.
        default_timer_label: Label used by time/time_end when none is given.
        stack_fallback: Text appended by trace when no stack can be captured.

    Example:
        >>> config = PatchConfig().with_overrides(prefix="OUT: ")
        >>> patch = ConsolePatch(config=config)
    """
    prefix: str = "LOG: "
    assertion_prefix: str = "Assertion failed:"
    default_timer_label: str = "default"
    stack_fallback: str = "No stack trace available"

    def with_overrides(self, **kwargs: Any) -> "PatchConfig":
        """Create a copy with specified overrides.

        Args:
            **kwargs: Fields to override.

        Returns:
            New PatchConfig with overrides applied.
        """
        return self.model_copy(update=kwargs)
