import logging
from typing import Optional


class LoggerSink:
    """Callback sink that hands each console line to a standard logger.

    Args:
        logger: Target logger. Uses the "consolepatch.sinks" logger if not provided.
        level: Logging level for every line.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger("consolepatch.sinks")
        self.level = level

    def __call__(self, line: str) -> None:
        if line:
            self.logger.log(self.level, line)
