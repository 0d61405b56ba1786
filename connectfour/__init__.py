"""
connectfour - Two-player Connect Four game engine

This package provides the board, move processing and win detection for
Connect Four, together with a terminal interface and a Gymnasium
environment for driving games programmatically.
"""

__version__ = '0.1.0'
