"""
Legal move generator for Pentago.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import List

from .board import Board

logger = logging.getLogger(__name__)


class Rotation(Enum):
    """Direction of the quarter turn applied after placement."""
    CLOCKWISE = "cw"
    COUNTERCLOCKWISE = "ccw"


@dataclass(frozen=True)
class Move:
    """Represents a Pentago move: placement cell, then a quadrant twist."""
    row: int
    col: int
    quadrant: int
    rotation: Rotation

    def __str__(self):
        return f"Move(cell=({self.row}, {self.col}), quadrant={self.quadrant}, rotation={self.rotation.value})"


class LegalMoveGenerator:
    """Generates all legal moves for a given board state."""

    ROTATIONS = (Rotation.CLOCKWISE, Rotation.COUNTERCLOCKWISE)

    def get_legal_moves(self, board: Board) -> List[Move]:
        """
        Get all legal moves for the player to move.

        Moves are enumerated with empty cells in row-major order, then
        quadrants 0-3, then clockwise before counterclockwise. The order is
        stable for a given board.

        Args:
            board: Current board state

        Returns:
            List of legal moves, empty once the game is over
        """
        if board.game_over:
            return []

        start = time.perf_counter()
        legal_moves = [
            Move(row, col, quadrant, rotation)
            for row, col in board.empty_cells()
            for quadrant in range(Board.NUM_QUADRANTS)
            for rotation in self.ROTATIONS
        ]
        total_time = time.perf_counter() - start
        logger.debug(f"Legal move generation: {len(legal_moves)} moves in {total_time:.4f}s for player={board.current_player.name}")
        return legal_moves

    def is_legal(self, board: Board, move) -> bool:
        """Check a move against the board without applying it."""
        if board.game_over or not isinstance(move, Move):
            return False
        if not isinstance(move.rotation, Rotation):
            return False
        if not 0 <= move.quadrant < Board.NUM_QUADRANTS:
            return False
        return board.is_valid_position(move.row, move.col) and board.is_empty(move.row, move.col)

    def has_legal_moves(self, board: Board) -> bool:
        return not board.game_over and not board.is_full()
