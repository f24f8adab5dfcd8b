"""Tests for logger combinators"""

import os
from datetime import datetime
from functools import partial

import pytest

from pathlogger import (
    DEFAULT,
    PRINTFN,
    LogEntry,
    LogFormatError,
    Logger,
    LogLevel,
    add_consumer,
    append_path,
    decorate,
    ignore,
    indent,
    logf,
    pipe,
    print_entry,
    with_consumer,
    with_path,
)


class CapturingConsumer:
    """Consumer that records every entry it receives."""

    def __init__(self, name="capture", journal=None):
        self.name = name
        self.entries = []
        self.journal = journal

    def __call__(self, entry: LogEntry) -> None:
        self.entries.append(entry)
        if self.journal is not None:
            self.journal.append((self.name, entry))


def make_entry(message="hi", path="svc"):
    return LogEntry(LogLevel.WARN, datetime(2024, 5, 6, 7, 8, 9), path, message)


class TestPredefinedLoggers:
    """Test DEFAULT and PRINTFN."""

    def test_default(self, capsys):
        assert DEFAULT.path == ""
        assert DEFAULT.consumer is ignore
        DEFAULT.info("nothing happens")
        assert capsys.readouterr().out == ""

    def test_printfn(self, capsys):
        assert PRINTFN.path == ""
        assert PRINTFN.consumer is print_entry
        PRINTFN.consumer(make_entry())
        assert capsys.readouterr().out == "[2024-05-06 07:08:09|WARN]svc :hi\n"

    def test_printfn_logging_call(self, capsys):
        PRINTFN.info("started %s", "ok")
        assert capsys.readouterr().out.endswith("|INFO] :started ok\n")


class TestPathCombinators:
    """Test with_path and append_path."""

    def test_with_path(self):
        capture = CapturingConsumer()
        logger = Logger("old", capture)
        derived = with_path("new", logger)
        assert derived.path == "new"
        assert derived.consumer is logger.consumer

    def test_with_consumer(self):
        capture = CapturingConsumer()
        derived = with_consumer(capture, with_path("svc", DEFAULT))
        assert derived.path == "svc"
        assert derived.consumer is capture

    def test_append_path_joins(self):
        logger = append_path("b", with_path("a", DEFAULT))
        assert logger.path == os.path.join("a", "b")
        assert logger.path != "ab"

    def test_append_path_to_root(self):
        assert append_path("svc", DEFAULT).path == "svc"

    def test_append_path_keeps_consumer(self):
        capture = CapturingConsumer()
        logger = append_path("db", Logger("svc", capture))
        assert logger.consumer is capture

    def test_append_path_nested(self):
        logger = pipe(DEFAULT, partial(append_path, "a"), partial(append_path, "b"),
                      partial(append_path, "c"))
        assert logger.path == os.path.join("a", "b", "c")


class TestLogf:
    """Test the logf combinator."""

    def test_logf(self):
        capture = CapturingConsumer()
        result = logf(LogLevel.ERROR, Logger("svc", capture), "%s=%d", "n", 2)
        assert result is None
        entry = capture.entries[0]
        assert (entry.level, entry.path, entry.message) == (LogLevel.ERROR, "svc", "n=2")

    def test_logf_format_error(self):
        capture = CapturingConsumer()
        with pytest.raises(LogFormatError):
            logf(LogLevel.INFO, Logger("", capture), "%d", "three")
        assert capture.entries == []


class TestAddConsumer:
    """Test consumer chaining."""

    def test_original_runs_first(self):
        journal = []
        first = CapturingConsumer("first", journal)
        second = CapturingConsumer("second", journal)
        logger = add_consumer(second, Logger("", first))

        logger.info("x")
        assert [name for name, _ in journal] == ["first", "second"]

    def test_same_entry_instance(self):
        journal = []
        logger = add_consumer(CapturingConsumer("b", journal), Logger("", CapturingConsumer("a", journal)))

        logger.info("x")
        (_, seen_a), (_, seen_b) = journal
        assert seen_a is seen_b

    def test_keeps_path(self):
        assert add_consumer(ignore, with_path("svc", DEFAULT)).path == "svc"

    def test_first_failure_stops_chain(self):
        second = CapturingConsumer()

        def failing(entry):
            raise OSError("disk full")

        logger = add_consumer(second, Logger("", failing))
        with pytest.raises(OSError, match="disk full"):
            logger.info("x")
        assert second.entries == []

    def test_second_failure_propagates(self):
        first = CapturingConsumer()

        def failing(entry):
            raise RuntimeError("network")

        logger = add_consumer(failing, Logger("", first))
        with pytest.raises(RuntimeError):
            logger.info("x")
        assert len(first.entries) == 1


class TestDecorate:
    """Test entry mapping."""

    def test_consumer_sees_mapped_entry(self):
        capture = CapturingConsumer()
        logger = decorate(lambda e: e.with_message(e.message.upper()), Logger("svc", capture))

        entry = make_entry("quiet")
        logger.consumer(entry)
        assert capture.entries == [entry.with_message("QUIET")]
        assert capture.entries[0] is not entry

    def test_decorate_keeps_path(self):
        assert decorate(lambda e: e, with_path("svc", DEFAULT)).path == "svc"

    def test_mapping_error_propagates(self):
        capture = CapturingConsumer()

        def broken(entry):
            raise KeyError("field")

        with pytest.raises(KeyError):
            decorate(broken, Logger("", capture)).info("x")
        assert capture.entries == []


class TestIndent:
    """Test message indentation."""

    def test_indent_message(self):
        capture = CapturingConsumer()
        entry = make_entry("hi")
        indent(Logger("svc", capture)).consumer(entry)

        received = capture.entries[0]
        assert received.message == "    hi"
        assert (received.level, received.time, received.path) == (entry.level, entry.time, entry.path)

    def test_indent_twice(self):
        capture = CapturingConsumer()
        pipe(Logger("", capture), indent, indent).info("deep")
        assert capture.entries[0].message == "        deep"


class TestPurity:
    """Combinators never change their input."""

    def test_original_unchanged(self):
        capture = CapturingConsumer()
        original = Logger("svc", capture)

        derived = pipe(
            original,
            partial(append_path, "db"),
            indent,
            partial(add_consumer, ignore),
            partial(decorate, lambda e: e.with_message("replaced")),
            partial(with_path, "other"),
            partial(with_consumer, ignore),
        )
        derived.info("derived")
        original.info("plain")

        assert original.path == "svc"
        assert original.consumer is capture
        assert [e.message for e in capture.entries] == ["plain"]
        assert capture.entries[0].path == "svc"


class TestComposition:
    """Order of application is order of execution."""

    def test_end_to_end(self):
        capture = CapturingConsumer()
        logger = pipe(
            DEFAULT,
            partial(with_consumer, capture),
            partial(append_path, "svc"),
            indent,
        )

        logf(LogLevel.INFO, logger, "count=%d", 3)

        assert len(capture.entries) == 1
        entry = capture.entries[0]
        assert entry.level == LogLevel.INFO
        assert entry.path == "svc"
        assert entry.message == "    count=3"

    def test_consumer_added_before_indent_sees_indented_entry(self):
        journal = []
        logger = pipe(
            Logger("", CapturingConsumer("original", journal)),
            partial(append_path, "db"),
            partial(add_consumer, CapturingConsumer("extra", journal)),
            indent,
        )

        logger.info("query")
        assert [(name, e.message) for name, e in journal] == [
            ("original", "    query"),
            ("extra", "    query"),
        ]
        assert journal[0][1] is journal[1][1]

    def test_consumer_added_after_indent_sees_raw_entry(self):
        journal = []
        logger = pipe(
            Logger("", CapturingConsumer("original", journal)),
            indent,
            partial(add_consumer, CapturingConsumer("extra", journal)),
        )

        logger.info("query")
        assert [(name, e.message) for name, e in journal] == [
            ("original", "    query"),
            ("extra", "query"),
        ]

    def test_with_consumer_replaces_decorated_consumer(self):
        capture = CapturingConsumer()
        logger = pipe(DEFAULT, indent, partial(with_consumer, capture))

        logger.info("flat")
        assert capture.entries[0].message == "flat"

    def test_pipe_without_steps(self):
        assert pipe(DEFAULT) is DEFAULT
