"""Tests for the logging manager."""

import logging

import pytest

from connectfour.debug import debug, DebugLevel, TRACE_LEVEL
from connectfour.game.players import create_default_players
from connectfour.game.rules import ConnectFourRound


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def records():
    handler = ListHandler()
    debug.logger.addHandler(handler)
    yield handler.records
    debug.logger.removeHandler(handler)
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])


class TestLevels:
    """Test cases for level filtering."""

    def test_default_level_hides_info(self, records):
        debug.info("quiet")
        debug.warning("loud")
        assert [r.getMessage() for r in records] == ["loud"]

    def test_trace_level(self, records):
        debug.configure(level=DebugLevel.TRACE)
        debug.trace("step")
        assert records[0].levelno == TRACE_LEVEL
        assert records[0].levelname == "TRACE"

    def test_none_level_silences_everything(self, records):
        debug.configure(level=DebugLevel.NONE)
        debug.error("gone")
        assert records == []

    def test_disabled(self, records):
        debug.configure(enabled=False)
        debug.error("gone")
        assert records == []

    def test_set_from_string(self, records):
        assert debug.set_from_string("debug")
        assert debug.level == DebugLevel.DEBUG
        assert not debug.set_from_string("verbose")
        assert debug.level == DebugLevel.DEBUG


class TestComponents:
    """Test cases for component tagging and filtering."""

    def test_component_prefix(self, records):
        debug.warning("hello", "cli")
        assert records[0].getMessage() == "[cli] hello"

    def test_component_filter(self, records):
        debug.configure(components=["round"])
        debug.warning("skipped", "cli")
        debug.warning("kept", "round")
        assert [r.getMessage() for r in records] == ["[round] kept"]

    def test_round_logs_winner(self, records):
        debug.configure(level=DebugLevel.INFO)
        round_ = ConnectFourRound(create_default_players())
        for column in (0, 6, 1, 6, 2, 5, 3):
            round_.play_column(column)
        assert any("Player One wins" in r.getMessage() for r in records)


class TestLogFile:
    """Test cases for file output."""

    def test_log_file(self, records, tmp_path):
        path = tmp_path / "connectfour.log"
        debug.configure(level=DebugLevel.INFO, log_file=str(path))
        debug.info("to file", "round")
        debug.configure(log_file="")
        assert "[round] to file" in path.read_text()
