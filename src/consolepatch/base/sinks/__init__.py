from consolepatch.base.sinks.console import LoggerSink

__all__ = ["LoggerSink"]
