"""
Pentago game engine: the rules collaborator consumed by the agents.

Boards are never mutated by the query methods. Successors are produced by
cloning and then applying a move to the clone.
"""

import logging
from typing import List, Optional

import numpy as np

from .board import Board, Player
from .move_generator import LegalMoveGenerator, Move, Rotation

logger = logging.getLogger(__name__)


class PentagoEngine:
    """
    Rules engine for two-player Pentago.

    A turn places one marble for the side to move and then rotates one
    quadrant a quarter turn. Five in a row after the rotation wins; both
    players completing a five on the same turn, or a full board, is a draw.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the engine.

        Args:
            seed: Random seed for get_random_move
        """
        self.rng = np.random.RandomState(seed)
        self.move_generator = LegalMoveGenerator()

    def new_board(self) -> Board:
        return Board()

    def is_legal(self, move: Optional[Move], board: Board) -> bool:
        if move is None:
            return False
        return self.move_generator.is_legal(board, move)

    def get_random_move(self, board: Board) -> Optional[Move]:
        """Uniformly random legal move, or None if there is none."""
        legal_moves = self.get_all_legal_moves(board)
        if not legal_moves:
            return None
        move_idx = self.rng.randint(0, len(legal_moves))
        return legal_moves[move_idx]

    def get_all_legal_moves(self, board: Board) -> List[Move]:
        return self.move_generator.get_legal_moves(board)

    def clone(self, board: Board) -> Board:
        return board.copy()

    def apply_move(self, board: Board, move: Move) -> None:
        """
        Apply a move to the board in place.

        Raises:
            ValueError: If the move is not legal on this board
        """
        if not self.is_legal(move, board):
            raise ValueError(f"Illegal move {move} for player {board.current_player.name}")

        board.place_piece(move.row, move.col, board.current_player)
        board.rotate_quadrant(move.quadrant, clockwise=move.rotation is Rotation.CLOCKWISE)
        board.update_game_state()
        board.advance_turn()

        if board.game_over:
            outcome = board.winner.name if board.winner else "draw"
            logger.debug(f"Game over after turn {board.turn_number}: {outcome}")

    def is_game_over(self, board: Board) -> bool:
        return board.game_over

    def get_winner(self, board: Board) -> Optional[Player]:
        return board.winner

    def get_piece_at(self, board: Board, row: int, col: int) -> int:
        """Cell content: 0 for empty, otherwise the owning Player's value."""
        return int(board.grid[row, col])
