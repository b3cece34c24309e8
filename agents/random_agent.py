"""
Random agent for Pentago that picks uniformly from legal moves.
"""

from typing import Any, Dict, Optional

import numpy as np

from pentago.board import Player

from agents.game_engine_protocol import GameEngineProtocol


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal moves.

    This agent serves as a baseline opponent for the alpha-beta agent.
    """

    def __init__(self, engine: GameEngineProtocol, player: Player, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            engine: Rules engine used to enumerate moves
            player: Color this agent plays
            seed: Random seed for reproducible behavior
        """
        self.engine = engine
        self.player = player
        self.rng = np.random.RandomState(seed)

    def choose_move(self, board) -> Optional[Any]:
        """Return a random legal move, or None if no legal moves are available."""
        legal_moves = self.engine.get_all_legal_moves(board)
        if not legal_moves:
            return None
        move_idx = self.rng.randint(0, len(legal_moves))
        return legal_moves[move_idx]

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "RandomAgent",
            "type": "random",
            "description": "Selects moves uniformly from legal moves",
            "player": self.player.name,
        }
