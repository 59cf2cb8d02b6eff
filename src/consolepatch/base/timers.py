"""Named timers for console time/time_end calls."""

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


@dataclass
class TimerRegistry:
    """Tracks start timestamps of running timers by label.

    Attributes:
        clock: Callable returning the current time in seconds.

    Example:
        >>> timers = TimerRegistry()
        >>> timers.start("load")
        True
        >>> elapsed_ms = timers.stop("load")
    """
    clock: Callable[[], float] = time.perf_counter
    _started: Dict[str, float] = field(default_factory=dict)

    def start(self, label: str) -> bool:
        """Record the start time for a label.

        Returns:
            False if the label is already running; its start time is kept.
        """
        if label in self._started:
            return False
        self._started[label] = self.clock()
        return True

    def stop(self, label: str) -> Optional[float]:
        """Remove a running timer.

        Returns:
            Elapsed milliseconds, or None if the label is not running.
        """
        started = self._started.pop(label, None)
        if started is None:
            return None
        return (self.clock() - started) * 1000

    @property
    def labels(self) -> List[str]:
        """Labels of the running timers, in start order."""
        return list(self._started)

    def __contains__(self, label: object) -> bool:
        return label in self._started

    def __len__(self) -> int:
        return len(self._started)
