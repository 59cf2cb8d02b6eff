"""Tests for the bundled callback sinks."""

import logging

from consolepatch.base.sinks import LoggerSink
from consolepatch.core.patch import ConsolePatch


def test_logger_sink_writes_lines(caplog):
    sink = LoggerSink(level=logging.WARNING)
    patch = ConsolePatch({"stdout": sink, "stderr": None})

    with caplog.at_level(logging.WARNING, logger="consolepatch.sinks"):
        patch.console.log("hello", {"n": 1})

    assert [r.getMessage() for r in caplog.records] == ['LOG: hello {"n":1}']
    assert caplog.records[0].levelno == logging.WARNING


def test_logger_sink_skips_empty_lines(caplog):
    sink = LoggerSink(logger=logging.getLogger("consolepatch.tests"))

    with caplog.at_level(logging.INFO, logger="consolepatch.tests"):
        sink("")
        sink("LOG: kept")

    assert [r.getMessage() for r in caplog.records] == ["LOG: kept"]
