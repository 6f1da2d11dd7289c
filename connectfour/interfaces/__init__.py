"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the console interface for playing rounds against
the computer opponent.
"""

# Don't import anything here to avoid circular imports
__all__ = []
