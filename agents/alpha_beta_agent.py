"""
Time-bounded minimax agent with alpha-beta pruning for Pentago.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from pentago.board import Player

from agents.config import SearchConfig
from agents.evaluator import OpenLineEvaluator
from agents.game_engine_protocol import GameEngineProtocol

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    nodes_visited: int = 0
    leaves_evaluated: int = 0
    cutoffs: int = 0
    timed_out: bool = False


@dataclass
class SearchContext:
    """
    State owned by a single decision.

    best_move is only written at the root, and only when a root move
    strictly raises alpha.
    """
    root_depth: int
    best_move: Optional[Any] = None
    stats: SearchStats = field(default_factory=SearchStats)


class AlphaBetaAgent:
    """
    Depth-limited, time-limited minimax search with alpha-beta pruning.

    Moves are searched in the engine's enumeration order. The wall-clock
    deadline is checked on entry to every call and again before each
    sibling after the first. Once the budget runs out a node is scored
    heuristically, and a partly searched node returns the best value found
    among the children it reached.
    """

    def __init__(self,
                 engine: GameEngineProtocol,
                 player: Player,
                 config: Optional[SearchConfig] = None,
                 evaluator=None):
        """
        Initialize the agent.

        Args:
            engine: Rules engine used to enumerate and apply moves
            player: Color this agent plays; scores are from its point of view
            config: Depth bound and time budget (defaults to 3 plies, 1.8s)
            evaluator: Object with score(position, player); defaults to
                OpenLineEvaluator over the same engine
        """
        self.engine = engine
        self.player = player
        self.config = config or SearchConfig()
        self.evaluator = evaluator or OpenLineEvaluator(engine)

    def choose_move(self, board) -> Optional[Any]:
        """Select a legal move for the agent's player."""
        return self.think(board)["move"]

    def think(self, board) -> Dict[str, Any]:
        """
        Run one decision and report what the search did.

        Returns:
            Dictionary with the chosen "move" and a "stats" dictionary
        """
        start = time.perf_counter()
        deadline = start + self.config.time_budget_s
        context = SearchContext(root_depth=self.config.depth_bound)

        root_value = self.alpha_beta(
            board,
            self.config.depth_bound,
            float('-inf'),
            float('inf'),
            True,
            deadline,
            context,
        )

        move = context.best_move
        fallback_used = False
        if not self.engine.is_legal(move, board):
            logger.warning(
                f"Search produced no legal move for {self.player.name} "
                f"(proposed={move}); falling back to a random legal move"
            )
            move = self.engine.get_random_move(board)
            fallback_used = True

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        stats = asdict(context.stats)
        stats.update({
            "root_value": root_value,
            "elapsed_ms": elapsed_ms,
            "fallback_used": fallback_used,
        })
        logger.debug(
            f"AlphaBeta[{self.player.name}]: depth={self.config.depth_bound}, "
            f"nodes={stats['nodes_visited']}, leaves={stats['leaves_evaluated']}, "
            f"cutoffs={stats['cutoffs']}, timed_out={stats['timed_out']}, "
            f"elapsed_ms={elapsed_ms:.2f}"
        )
        return {"move": move, "stats": stats}

    def alpha_beta(self,
                   board,
                   depth: int,
                   alpha: float,
                   beta: float,
                   maximizing: bool,
                   deadline: float,
                   context: SearchContext) -> float:
        """
        Minimax value of board with alpha-beta pruning.

        Args:
            board: Position to evaluate (never mutated)
            depth: Plies left to search
            alpha: Lower bound the maximizer is already assured of
            beta: Upper bound the minimizer is already assured of
            maximizing: True when the agent's player is to move
            deadline: time.perf_counter() value at which search must stop
            context: Per-decision state holding the root's best move

        Returns:
            The node's value from the agent's point of view
        """
        context.stats.nodes_visited += 1

        if self._out_of_time(deadline, context):
            return self._evaluate(board, context)
        if depth == 0 or self.engine.is_game_over(board):
            return self._evaluate(board, context)

        legal_moves = self.engine.get_all_legal_moves(board)
        at_root = depth == context.root_depth

        if maximizing:
            value = float('-inf')
            for index, move in enumerate(legal_moves):
                if index > 0 and self._out_of_time(deadline, context):
                    break
                child = self.engine.clone(board)
                self.engine.apply_move(child, move)

                value = max(value, self.alpha_beta(child, depth - 1, alpha, beta, False, deadline, context))

                if at_root and value > alpha:
                    context.best_move = move

                alpha = max(alpha, value)
                if alpha >= beta:
                    context.stats.cutoffs += 1
                    break
        else:
            value = float('inf')
            for index, move in enumerate(legal_moves):
                if index > 0 and self._out_of_time(deadline, context):
                    break
                child = self.engine.clone(board)
                self.engine.apply_move(child, move)

                value = min(value, self.alpha_beta(child, depth - 1, alpha, beta, True, deadline, context))

                beta = min(beta, value)
                if beta <= alpha:
                    context.stats.cutoffs += 1
                    break

        return value

    def _out_of_time(self, deadline: float, context: SearchContext) -> bool:
        if time.perf_counter() >= deadline:
            context.stats.timed_out = True
            return True
        return False

    def _evaluate(self, board, context: SearchContext) -> float:
        context.stats.leaves_evaluated += 1
        return self.evaluator.score(board, self.player)

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "AlphaBetaAgent",
            "type": "alphabeta",
            "description": "Time-bounded minimax with alpha-beta pruning over open-line evaluation",
            "player": self.player.name,
            "config": self.config.to_dict(),
        }
