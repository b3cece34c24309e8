"""
Contracts between the decision agents and the rules engine.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol


class GameEngineProtocol(Protocol):
    """
    Read/transform interface the agents consume.

    Positions and moves are opaque to the agents. The only mutation allowed
    is apply_move on a position obtained from clone.
    """

    def is_legal(self, move: Any, position: Any) -> bool:
        ...

    def get_random_move(self, position: Any) -> Optional[Any]:
        ...

    def get_all_legal_moves(self, position: Any) -> List[Any]:
        ...

    def clone(self, position: Any) -> Any:
        ...

    def apply_move(self, position: Any, move: Any) -> None:
        ...

    def is_game_over(self, position: Any) -> bool:
        ...

    def get_winner(self, position: Any) -> Optional[Any]:
        ...

    def get_piece_at(self, position: Any, row: int, col: int) -> Any:
        ...


class GameplayAgentProtocol(Protocol):
    """
    Minimal gameplay contract for agents driven by the arena.
    """

    def choose_move(self, position: Any) -> Optional[Any]:
        ...
