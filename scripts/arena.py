"""
Arena script for running round-robin matches between Pentago agents.
"""

import os
import sys
import time
import logging
import argparse
from pathlib import Path
from typing import Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pentago.board import Player
from pentago.engine import PentagoEngine
from agents.config import SearchConfig
from agents.registry import AGENT_TYPES, build_agent
from schemas.match import AgentRecord, ArenaSummary, Color, MatchOutcome, MatchResult, MoveRecord
from utils.logging_setup import setup_arena_logging

logger = logging.getLogger(__name__)


class ArenaMatch:
    """
    Represents a single game between two agents.

    An agent that returns no move or an illegal move forfeits the game.
    """

    def __init__(self, white_name: str, black_name: str, white_agent, black_agent, engine: PentagoEngine):
        self.white_name = white_name
        self.black_name = black_name
        self.agents = {Player.WHITE: white_agent, Player.BLACK: black_agent}
        self.names = {Player.WHITE: white_name, Player.BLACK: black_name}
        self.engine = engine

    def play_match(self) -> MatchResult:
        """Play one game to completion and return its record."""
        result = MatchResult(white_agent=self.white_name, black_agent=self.black_name)
        start_time = time.time()
        board = self.engine.new_board()

        while not self.engine.is_game_over(board):
            player = board.current_player
            agent_name = self.names[player]

            move_start = time.perf_counter()
            move = self.agents[player].choose_move(board)
            elapsed_ms = (time.perf_counter() - move_start) * 1000.0

            if not self.engine.is_legal(move, board):
                result.error = f"{agent_name} ({player.name}) returned illegal move {move}"
                result.outcome = MatchOutcome(player.opponent.name)
                logger.warning(f"{result.error}; {player.opponent.name} wins by forfeit")
                break

            result.moves.append(MoveRecord(
                turn=board.turn_number,
                player=Color(player.name),
                row=move.row,
                col=move.col,
                quadrant=move.quadrant,
                rotation=move.rotation.value,
                elapsed_ms=elapsed_ms,
            ))
            self.engine.apply_move(board, move)
            logger.debug(f"Turn {board.turn_number}: {agent_name} played {move} in {elapsed_ms:.1f}ms")

        if result.outcome is None:
            winner = self.engine.get_winner(board)
            result.outcome = MatchOutcome(winner.name) if winner else MatchOutcome.DRAW

        result.duration_s = time.time() - start_time
        logger.info(
            f"Match {self.white_name} (W) vs {self.black_name} (B): "
            f"outcome={result.outcome.value}, moves={len(result.moves)}, duration={result.duration_s:.2f}s"
        )
        logger.info("Final board:\n%s", board)
        return result


class Arena:
    """
    Arena for running round-robin tournaments between agents.
    """

    def __init__(self,
                 agents: Dict[str, str],
                 config: Optional[SearchConfig] = None,
                 output_dir: Optional[Path] = None,
                 seed: Optional[int] = None):
        """
        Initialize arena.

        Args:
            agents: Dictionary of agent names to agent types
            config: Search configuration passed to every agent
            output_dir: Directory to save results (None = don't save)
            seed: Seed for the engine's random fallback moves; defaults to
                the config's seed
        """
        self.agents = agents
        self.config = config or SearchConfig()
        self.output_dir = Path(output_dir) if output_dir else None
        self.engine = PentagoEngine(seed=seed if seed is not None else self.config.seed)
        self.results: List[MatchResult] = []

    def run_round_robin(self, rounds: int = 1) -> ArenaSummary:
        """
        Play every ordered pairing, so each agent takes both colors.

        Args:
            rounds: Number of rounds to play

        Returns:
            Tournament summary
        """
        agent_names = list(self.agents.keys())
        total_matches = len(agent_names) * (len(agent_names) - 1) * rounds
        logger.info(f"Starting round-robin with {len(agent_names)} agents, {total_matches} matches")

        start_time = time.time()
        for round_num in range(rounds):
            logger.info(f"--- Round {round_num + 1} ---")
            for white_name in agent_names:
                for black_name in agent_names:
                    if white_name == black_name:
                        continue
                    white = build_agent(self.agents[white_name], self.engine, Player.WHITE, self.config)
                    black = build_agent(self.agents[black_name], self.engine, Player.BLACK, self.config)
                    match = ArenaMatch(white_name, black_name, white, black, self.engine)
                    self.results.append(match.play_match())

        summary = ArenaSummary(
            agents=agent_names,
            total_matches=len(self.results),
            agent_stats=self._calculate_statistics(agent_names),
            match_results=self.results,
            total_time_s=time.time() - start_time,
        )
        if self.output_dir is not None:
            self._save_results(summary)
        return summary

    def _calculate_statistics(self, agent_names: List[str]) -> Dict[str, AgentRecord]:
        stats = {name: AgentRecord() for name in agent_names}
        for result in self.results:
            white, black = stats[result.white_agent], stats[result.black_agent]
            if result.outcome == MatchOutcome.DRAW:
                white.draws += 1
                black.draws += 1
            elif result.outcome == MatchOutcome.WHITE:
                white.wins += 1
                black.losses += 1
                if result.error:
                    black.errors += 1
            elif result.outcome == MatchOutcome.BLACK:
                black.wins += 1
                white.losses += 1
                if result.error:
                    white.errors += 1
        return stats

    def _save_results(self, summary: ArenaSummary) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        results_file = self.output_dir / "arena_results.json"
        with open(results_file, "w") as f:
            f.write(summary.model_dump_json(indent=2))
        logger.info(f"Results saved to {results_file}")
        return results_file


def print_summary(summary: ArenaSummary) -> None:
    print("\n" + "=" * 60)
    print("TOURNAMENT SUMMARY")
    print("=" * 60)
    print(f"Matches: {summary.total_matches}, total time: {summary.total_time_s:.1f}s")
    ranked = sorted(summary.agent_stats.items(), key=lambda item: item[1].win_rate, reverse=True)
    for name, record in ranked:
        print(f"{name:<20} W {record.wins:>3}  L {record.losses:>3}  D {record.draws:>3}  "
              f"win rate {record.win_rate:.1%}")


def parse_agent_spec(spec: str) -> Dict[str, str]:
    """
    Parse "name=type,name=type" (or bare types) into a name -> type mapping.
    """
    agents = {}
    for item in spec.split(","):
        item = item.strip()
        if not item:
            continue
        name, _, agent_type = item.partition("=")
        agent_type = (agent_type or name).strip().lower()
        if agent_type not in AGENT_TYPES:
            raise ValueError(f"Unknown agent type: {agent_type} (expected one of {', '.join(AGENT_TYPES)})")
        agents[name.strip()] = agent_type
    if len(agents) < 2:
        raise ValueError("At least two distinct agents are required")
    return agents


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a round-robin Pentago tournament",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--agents", type=str, default="alphabeta,random",
                        help="Comma-separated agents as name=type or bare type")
    parser.add_argument("--rounds", type=int, default=1, help="Number of rounds")
    parser.add_argument("--config", type=str, default=None, help="Search config file (YAML or JSON)")
    parser.add_argument("--depth", type=int, default=None, help="Override depth bound")
    parser.add_argument("--time-budget-ms", type=int, default=None, help="Override time budget per move")
    parser.add_argument("--output-dir", type=str, default="arena_results", help="Base directory for results")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)

    run_dir, log_file = setup_arena_logging(Path(args.output_dir), level=getattr(logging, args.log_level))
    logger.info(f"Logging to {log_file}")

    config_dict = SearchConfig.from_file(Path(args.config)).to_dict() if args.config else {}
    if args.depth is not None:
        config_dict["depth_bound"] = args.depth
    if args.time_budget_ms is not None:
        config_dict["time_budget_ms"] = args.time_budget_ms
    if args.seed is not None:
        config_dict["seed"] = args.seed
    config = SearchConfig.from_dict(config_dict)
    config.log_config(logger)

    arena = Arena(parse_agent_spec(args.agents), config=config, output_dir=run_dir, seed=args.seed)
    summary = arena.run_round_robin(rounds=args.rounds)
    print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
