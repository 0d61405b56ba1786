"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the terminal interface for playing and inspecting games.
"""

# Don't import anything here to avoid circular imports
__all__ = []
