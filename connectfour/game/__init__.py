"""
connectfour.game - Core game mechanics for Connect Four

This package contains the playing grid, the players, and the round
driver that alternates their turns.
"""

from connectfour.game.board import Grid
from connectfour.game.players import Player, PlayerType, create_default_players
from connectfour.game.rules import ConnectFourRound, RoundResult

__all__ = ['Grid', 'Player', 'PlayerType', 'create_default_players',
           'ConnectFourRound', 'RoundResult']
