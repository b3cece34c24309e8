"""
Agent registry for Pentago.
"""

from __future__ import annotations

from typing import Optional

from pentago.board import Player

from agents.alpha_beta_agent import AlphaBetaAgent
from agents.config import SearchConfig
from agents.game_engine_protocol import GameEngineProtocol, GameplayAgentProtocol
from agents.random_agent import RandomAgent

AGENT_TYPES = ("alphabeta", "random")


def build_agent(
    agent_type: str,
    engine: GameEngineProtocol,
    player: Player,
    config: Optional[SearchConfig] = None,
) -> GameplayAgentProtocol:
    agent_type = agent_type.lower()
    config = config or SearchConfig()
    if agent_type == "alphabeta":
        return AlphaBetaAgent(engine, player, config=config)
    if agent_type == "random":
        return RandomAgent(engine, player, seed=config.seed)
    raise ValueError(f"Unknown agent type: {agent_type}")
