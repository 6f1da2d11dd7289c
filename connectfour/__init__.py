"""
connectfour - Connect Four console game against a simple AI opponent

This package provides the 6x7 playing grid with gravity-based placement
and win detection, a round driver that alternates a human and an AI
player, and a console interface for playing rounds back to back.
"""

# Version number
__version__ = '0.1.0'
