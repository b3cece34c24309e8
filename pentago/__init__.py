"""
Pentago game engine package.

This package contains the rules collaborator used by the agents:
- Board management and terminal detection
- Legal move generation
- The clone-and-apply game engine
"""

from .board import EMPTY, Board, Player
from .engine import PentagoEngine
from .move_generator import LegalMoveGenerator, Move, Rotation

__all__ = [
    'EMPTY', 'Board', 'Player',
    'Move', 'Rotation', 'LegalMoveGenerator',
    'PentagoEngine'
]
