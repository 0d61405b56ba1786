"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the game engine that
processes moves, and a Gymnasium environment adapter.
"""

from connectfour.game.board import Board
from connectfour.game.engine import GameEngine, MoveOutcome, PlacementResult

__all__ = ['Board', 'GameEngine', 'MoveOutcome', 'PlacementResult']
