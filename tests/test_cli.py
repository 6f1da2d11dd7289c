"""Tests for the console interface, driven by scripted input."""

import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.players import Player, PlayerType
from connectfour.interfaces.cli import (AI_PAUSE_PROMPT, DRAW_MESSAGE, FULL_COLUMN_MESSAGE,
                                        GAME_OVER_PROMPT, INVALID_COLUMN_MESSAGE,
                                        ConsoleCLI, parse_column)

DRAW_SEQUENCE = [2, 0, 3, 1, 6, 4, 0, 5, 1, 2, 4, 3, 5, 6] * 3


class ScriptedConsole:
    """Feeds canned lines to the CLI and records what it prints."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.outputs = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text=""):
        self.outputs.append(text)


def make_cli(lines, argv=("--no-pause",), players=None):
    console = ScriptedConsole(lines)
    cli = ConsoleCLI(players=players, input_func=console.input, output_func=console.print)
    cli.parse_args(list(argv))
    return cli, console


@pytest.fixture(autouse=True)
def restore_debug_level():
    yield
    debug.configure(level=DebugLevel.WARNING)


class TestParseColumn:
    """Test cases for 1-based column parsing."""

    @pytest.mark.parametrize("raw, expected", [("1", 0), ("7", 6), (" 4 ", 3), ("+3", 2)])
    def test_valid(self, raw, expected):
        assert parse_column(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "8", "-1", "abc", "", "3.5", "-r", "²", "①"])
    def test_invalid(self, raw):
        assert parse_column(raw) is None


class TestSession:
    """Test cases for whole console sessions."""

    def test_instructions_name_markers(self):
        cli, console = make_cli([])
        assert cli.run() == 0
        assert 'Human discs will be marked with "H".' in console.outputs
        assert 'AI discs will be marked with "A".' in console.outputs

    def test_human_wins_then_restarts(self):
        cli, console = make_cli(["x", "9", "4", "4", "4", "4", "-r"])
        assert cli.run() == 0

        assert console.outputs.count(INVALID_COLUMN_MESSAGE) == 2
        assert console.outputs.count("Player Two has placed their disc.") == 3
        assert "Game won by Player One!" in console.outputs
        assert console.outputs.count("New round started! \n") == 2
        assert GAME_OVER_PROMPT in console.prompts
        assert console.prompts[0] == "Player One - Enter a number between 1 and 7: "

    def test_non_decimal_digit_asks_again(self):
        cli, console = make_cli(["²", "①", "2"])
        assert cli.run() == 0
        assert console.outputs.count(INVALID_COLUMN_MESSAGE) == 2
        assert console.prompts[:3] == ["Player One - Enter a number between 1 and 7: "] * 3
        assert "Player Two has placed their disc." in console.outputs

    def test_columns_are_one_based(self):
        cli, console = make_cli(["1"])
        cli.run()
        # First human disc in column 1, then the AI stacks on it
        board = [text for text in console.outputs if text.startswith("\n|")][-1]
        assert board.split("\n")[-3] == "|A------|"
        assert board.split("\n")[-2] == "|H------|"

    def test_no_restart_ends_session(self):
        cli, console = make_cli(["4", "4", "4", "4", ""])
        assert cli.run() == 0
        assert console.outputs.count("New round started! \n") == 1
        assert console.lines == []

    def test_pause_before_ai(self):
        cli, console = make_cli(["1", ""], argv=())
        cli.run()
        assert console.prompts[1] == AI_PAUSE_PROMPT
        assert "Player Two has placed their disc." in console.outputs

    def test_no_pause_flag(self):
        cli, console = make_cli(["1"])
        cli.run()
        assert AI_PAUSE_PROMPT not in console.prompts
        assert not cli.pause_before_ai


class TestTwoHumans:
    """Sessions where neither player is the computer."""

    players = [Player("Red", PlayerType.HUMAN, "R"), Player("Yellow", PlayerType.HUMAN, "Y")]

    def test_full_column_asks_again(self):
        cli, console = make_cli(["1"] * 7, players=self.players)
        cli.run()
        assert console.outputs.count(FULL_COLUMN_MESSAGE) == 1
        assert console.prompts[-1] == "Red - Enter a number between 1 and 7: "

    def test_draw(self):
        moves = [str(column + 1) for column in DRAW_SEQUENCE]
        cli, console = make_cli(moves + [""], players=self.players)
        assert cli.run() == 0
        assert DRAW_MESSAGE in console.outputs
        assert not any(text.startswith("Game won") for text in console.outputs)


class TestArguments:
    """Test cases for command-line options."""

    def test_debug_flag(self):
        make_cli([], argv=["--debug"])
        assert debug.level == DebugLevel.DEBUG

    def test_debug_level(self):
        make_cli([], argv=["--debug-level", "info"])
        assert debug.level == DebugLevel.INFO

    def test_bad_debug_level_rejected(self):
        with pytest.raises(SystemExit):
            make_cli([], argv=["--debug-level", "loud"])
