"""
cli.py - Command-line interface for playing Connect Four

This module runs rounds of Connect Four in the console: a human player
against the computer opponent. Columns are entered 1-based (1-7) and
converted to 0-based before they reach the round. After each round the
player can type '-r' to play again.
"""

import argparse
import sys
from typing import Callable, List, Optional, Sequence

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Grid
from connectfour.game.players import Player, create_default_players
from connectfour.game.rules import ConnectFourRound, RoundResult
from connectfour.utils import COLUMN_COUNT

RESTART_COMMAND = "-r"
BANNER = "*" * 96

INVALID_COLUMN_MESSAGE = "Column supplied is invalid."
FULL_COLUMN_MESSAGE = "Column is full, choose another column."
DRAW_MESSAGE = "The game ends in a draw as the board is full."
AI_PAUSE_PROMPT = "Press Enter to place the AI disc..."
GAME_OVER_PROMPT = ("Game over. Type '-r' to start a new round, "
                    "or press Enter to close this application... ")


def parse_column(raw: str) -> Optional[int]:
    """
    Convert a 1-based column typed by the player to a 0-based index.

    Returns:
        Column index, or None if the input is not a number from 1 to COLUMN_COUNT
    """
    try:
        number = int(raw.strip())
    except ValueError:
        return None
    if not 1 <= number <= COLUMN_COUNT:
        return None
    return number - 1


class ConsoleCLI:
    """Console interface for playing Connect Four against the computer."""

    def __init__(self,
                 players: Optional[Sequence[Player]] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            players: The two players in turn order (defaults to human vs AI)
            input_func: Reads one line of input after showing a prompt
            output_func: Writes one line of output
        """
        self.players: List[Player] = list(players) if players else create_default_players()
        self.input = input_func
        self.output = output_func
        self.pause_before_ai = True
        self.args = None

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(description='Play Connect Four against the computer')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', default=None, help='Also write log records to this file')
        parser.add_argument('--no-pause', action='store_true',
                            help="Don't wait for Enter before the AI moves")

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        elif self.args.debug_level:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        self.pause_before_ai = not self.args.no_pause

    def run(self) -> int:
        """
        Play rounds until the player declines a restart or input ends.

        Returns:
            Process exit status
        """
        if not self.args:
            self.parse_args([])

        try:
            self.write_instructions()
            while True:
                self.play_round()
                if not self.ask_restart():
                    break
        except EOFError:
            self.output("")
            debug.info("Input closed, leaving the game", "cli")

        return 0

    def write_instructions(self) -> None:
        """Write the game instructions to the console."""
        self.output(BANNER)
        self.output("Welcome to Connect Four! \n")
        self.output("You will be facing an AI opponent.")
        for player in self.players:
            kind = "Human" if player.is_human else "AI"
            self.output(f"{kind} discs will be marked with \"{player.marker}\".")
        self.output(f"Drop a disc into a column by entering a number between 1 and {COLUMN_COUNT}, "
                    "then press the return key.")
        self.output(BANNER + " \n")

    def write_grid(self, grid: Grid) -> None:
        """Write the playing grid to the console."""
        self.output(grid.render())

    def play_round(self) -> ConnectFourRound:
        """
        Play a single round to completion.

        Returns:
            The finished round
        """
        round_ = ConnectFourRound(self.players)
        self.output("New round started! \n")
        self.write_grid(round_.grid)

        while not round_.is_over():
            player = round_.current_player

            if player.is_human:
                self.take_human_turn(round_)
            else:
                self.take_ai_turn(round_)

            self.write_grid(round_.grid)

            if round_.result == RoundResult.WON:
                self.output(f"Game won by {round_.winner.name}!")
            elif round_.result == RoundResult.DRAW:
                self.output(DRAW_MESSAGE)
            elif player.is_human and round_.current_player.is_ai and self.pause_before_ai:
                self.input(AI_PAUSE_PROMPT)

        return round_

    def take_human_turn(self, round_: ConnectFourRound) -> int:
        """
        Prompt the current player until they pick a column with room.

        Returns:
            The 0-based column that was played
        """
        player = round_.current_player
        while True:
            raw = self.input(f"{player.name} - Enter a number between 1 and {COLUMN_COUNT}: ")
            column = parse_column(raw)

            if column is None:
                debug.debug(f"Rejected input {raw!r}", "cli")
                self.output(INVALID_COLUMN_MESSAGE)
            elif round_.play_column(column):
                return column
            else:
                self.output(FULL_COLUMN_MESSAGE)

    def take_ai_turn(self, round_: ConnectFourRound) -> int:
        """
        Let the computer play its move.

        Returns:
            The 0-based column that was played
        """
        player = round_.current_player
        column = round_.play_ai_turn()
        self.output(f"{player.name} has placed their disc.")
        return column

    def ask_restart(self) -> bool:
        """Ask whether to play another round."""
        return self.input(GAME_OVER_PROMPT).strip() == RESTART_COMMAND


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = ConsoleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
