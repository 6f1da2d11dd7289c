"""
rules.py - Round management for Connect Four

This module provides the round driver: it alternates turns between two
players, places each move on the Grid, and asks the Grid after every
successful move whether the mover has won or the grid has filled up.
"""

from enum import Enum, auto
from typing import List, Optional, Sequence

from connectfour.debug import debug
from connectfour.errors import PlayerSetupError, RoundOverError
from connectfour.game.board import Grid
from connectfour.game.players import Player, choose_leftmost_column
from connectfour.utils import Coord, is_valid_marker


class RoundResult(Enum):
    """Enumeration representing the round outcome."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_over(self) -> bool:
        """Check if the round is over."""
        return self != RoundResult.IN_PROGRESS


def _check_players(players: Sequence[Player]) -> None:
    if len(players) != 2:
        raise PlayerSetupError(f"A round needs exactly 2 players, got {len(players)}")
    for player in players:
        if not is_valid_marker(player.marker):
            raise PlayerSetupError(f"{player.name} has an invalid marker {player.marker!r}")
    if players[0].marker == players[1].marker:
        raise PlayerSetupError(f"Both players use the marker {players[0].marker!r}")


class ConnectFourRound:
    """
    A single round of Connect Four.

    The first player in the list moves first. The Grid is created fresh
    for the round and discarded with it; start a new round by creating a
    new ConnectFourRound.
    """

    def __init__(self, players: Sequence[Player]):
        """
        Initialize a new round.

        Args:
            players: The two players, in turn order

        Raises:
            PlayerSetupError: not exactly two players, or markers clash
        """
        _check_players(players)
        self.players: List[Player] = list(players)
        self.grid = Grid()
        self.result = RoundResult.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.moves_made: List[int] = []
        self.last_move: Optional[Coord] = None
        self._turn = 0
        debug.debug(f"New round: {self.players[0]} vs {self.players[1]}", "round")

    @property
    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self._turn]

    def is_over(self) -> bool:
        return self.result.is_over()

    def play_column(self, column: int) -> bool:
        """
        Drop the current player's disc into a column.

        A full column does not use up the turn; the same player must
        choose again.

        Args:
            column: The 0-based column to play

        Returns:
            True if the disc was placed, False if the column was full

        Raises:
            RoundOverError: the round has already ended
            InvalidColumnError: column is outside the grid
        """
        if self.is_over():
            raise RoundOverError(f"Round already ended ({self.result.name})")

        player = self.current_player
        if not self.grid.attempt_insert(column, player.marker):
            debug.debug(f"{player.name} tried full column {column}", "round")
            return False

        height = self.grid.column_height(column)
        self.last_move = (Grid.ROW_COUNT - height, int(column))
        self.moves_made.append(int(column))
        debug.debug(f"{player.name} placed {player.marker} at {self.last_move}", "round")

        # Only the mover can have completed a line
        if self.grid.marker_wins(player.marker):
            self.result = RoundResult.WON
            self.winner = player
            debug.info(f"{player.name} wins with {self.grid.winning_line(player.marker)}", "round")
        elif self.grid.is_full():
            self.result = RoundResult.DRAW
            debug.info("Round ends in a draw", "round")
        else:
            self._turn = 1 - self._turn
            debug.trace(f"Turn passes to {self.current_player.name}", "round")

        return True

    def play_ai_turn(self) -> int:
        """
        Play the current player's disc in the leftmost column with room.

        Returns:
            The column that was played

        Raises:
            RoundOverError: the round has already ended
        """
        if self.is_over():
            raise RoundOverError(f"Round already ended ({self.result.name})")

        column = choose_leftmost_column(self.grid)
        # An unfinished round always has an empty top-row cell
        self.play_column(column)
        return column

    def winning_line(self) -> List[Coord]:
        """
        Get the positions of the winning line.

        Returns:
            List of (row, col) positions, or an empty list if nobody has won
        """
        if self.winner is None:
            return []
        return self.grid.winning_line(self.winner.marker)
