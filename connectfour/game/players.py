"""
players.py - Players and the computer opponent's move rule

A round is played between two players, each identified by a name and a
single-character disc marker. The computer opponent is deliberately
simple: it always drops into the leftmost column that still has room.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from connectfour.game.board import Grid

HUMAN_MARKER = "H"
AI_MARKER = "A"


class PlayerType(Enum):
    """Enumeration of the kinds of player."""
    HUMAN = 0
    AI = 1


@dataclass(frozen=True)
class Player:
    """A participant in a round."""
    name: str
    type: PlayerType
    marker: str

    @property
    def is_human(self) -> bool:
        return self.type == PlayerType.HUMAN

    @property
    def is_ai(self) -> bool:
        return self.type == PlayerType.AI

    def __str__(self) -> str:
        return f"{self.name} ({self.marker})"


def create_default_players() -> List[Player]:
    """
    Create the standard roster: one human and one AI player.

    The human is listed first and therefore always opens a round.
    """
    return [
        Player("Player One", PlayerType.HUMAN, HUMAN_MARKER),
        Player("Player Two", PlayerType.AI, AI_MARKER),
    ]


def choose_leftmost_column(grid: Grid) -> Optional[int]:
    """
    Pick the AI's column: the leftmost one with an empty slot.

    Returns:
        Column index, or None if the grid is full
    """
    columns = grid.valid_columns()
    return columns[0] if columns else None
