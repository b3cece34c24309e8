"""
Tests for the arena script, agent registry and match schemas.
"""

import json
import logging
import unittest
from unittest.mock import Mock

import pytest

from pentago.board import Player
from pentago.engine import PentagoEngine
from agents.alpha_beta_agent import AlphaBetaAgent
from agents.config import SearchConfig
from agents.random_agent import RandomAgent
from agents.registry import build_agent
from schemas.match import ArenaSummary, MatchOutcome
from scripts.arena import Arena, ArenaMatch, main, parse_agent_spec
from utils.logging_setup import setup_logging


class TestRegistry(unittest.TestCase):

    def test_build_known_agents(self):
        """Registry builds each known agent type with the given config."""
        engine = PentagoEngine()
        config = SearchConfig(depth_bound=2, time_budget_ms=100, seed=3)
        alphabeta = build_agent("AlphaBeta", engine, Player.WHITE, config)
        self.assertIsInstance(alphabeta, AlphaBetaAgent)
        self.assertEqual(alphabeta.config.depth_bound, 2)

        random_agent = build_agent("random", engine, Player.BLACK, config)
        self.assertIsInstance(random_agent, RandomAgent)
        self.assertEqual(random_agent.player, Player.BLACK)

    def test_unknown_agent(self):
        """Unknown agent types are rejected."""
        with self.assertRaises(ValueError):
            build_agent("mcts", PentagoEngine(), Player.WHITE)


class TestArenaMatch(unittest.TestCase):

    def test_random_match_completes(self):
        """Two random agents play a full game with alternating, numbered moves."""
        engine = PentagoEngine(seed=0)
        match = ArenaMatch(
            "r1", "r2",
            RandomAgent(engine, Player.WHITE, seed=1),
            RandomAgent(engine, Player.BLACK, seed=2),
            engine,
        )
        result = match.play_match()

        self.assertIsNotNone(result.outcome)
        self.assertIsNone(result.error)
        self.assertGreaterEqual(len(result.moves), 9)
        self.assertLessEqual(len(result.moves), 36)
        self.assertEqual(result.moves[0].player.value, "WHITE")
        self.assertEqual(result.moves[1].player.value, "BLACK")
        self.assertEqual([m.turn for m in result.moves], list(range(len(result.moves))))

    def test_illegal_move_forfeits(self):
        """An agent that returns no move loses by forfeit."""
        engine = PentagoEngine(seed=0)
        broken = Mock()
        broken.choose_move = Mock(return_value=None)
        match = ArenaMatch("broken", "random", broken, RandomAgent(engine, Player.BLACK, seed=0), engine)

        with self.assertLogs("scripts.arena", level="WARNING"):
            result = match.play_match()

        self.assertEqual(result.outcome, MatchOutcome.BLACK)
        self.assertEqual(result.winner_name, "random")
        self.assertIn("broken", result.error)
        self.assertEqual(result.moves, [])


class TestArena(unittest.TestCase):

    def test_round_robin_writes_summary(self):
        """Each ordered pairing is played and the summary is saved as JSON."""
        import tempfile
        from pathlib import Path

        with tempfile.TemporaryDirectory() as tmp:
            config = SearchConfig(depth_bound=1, time_budget_ms=20, seed=0)
            arena = Arena({"ab": "alphabeta", "rnd": "random"}, config=config, output_dir=Path(tmp), seed=0)
            summary = arena.run_round_robin(rounds=1)

            self.assertEqual(summary.total_matches, 2)
            self.assertEqual({(r.white_agent, r.black_agent) for r in summary.match_results},
                             {("ab", "rnd"), ("rnd", "ab")})
            for name in ("ab", "rnd"):
                self.assertEqual(summary.agent_stats[name].games, 2)

            saved = json.loads((Path(tmp) / "arena_results.json").read_text())
            restored = ArenaSummary.model_validate(saved)
            self.assertEqual(restored.total_matches, 2)

    def test_config_seed_makes_games_reproducible(self):
        """
        Verify that two arenas sharing a config seed, with no explicit arena
        seed, replay identical games including the engine's fallback moves.
        """
        # A zero budget makes the alpha-beta agent play the engine's random move.
        config = SearchConfig(depth_bound=1, time_budget_ms=0, seed=5)
        runs = []
        for _ in range(2):
            arena = Arena({"ab": "alphabeta", "rnd": "random"}, config=config)
            with self.assertLogs("agents.alpha_beta_agent", level="WARNING"):
                summary = arena.run_round_robin(rounds=1)
            runs.append([
                [(m.row, m.col, m.quadrant, m.rotation) for m in result.moves]
                for result in summary.match_results
            ])

        self.assertEqual(runs[0], runs[1])
        self.assertTrue(all(runs[0]))

    def test_explicit_seed_overrides_config_seed(self):
        """An arena seed takes precedence over the config's seed for the engine."""
        config = SearchConfig(seed=5)
        seeded = Arena({"a": "random", "b": "random"}, config=config, seed=11)
        reference = PentagoEngine(seed=11)
        board = reference.new_board()
        self.assertEqual(seeded.engine.get_random_move(board), reference.get_random_move(board))
        self.assertEqual(seeded.engine.get_random_move(board), reference.get_random_move(board))


def test_parse_agent_spec():
    """Agent lists accept name=type pairs or bare types."""
    assert parse_agent_spec("alphabeta,random") == {"alphabeta": "alphabeta", "random": "random"}
    assert parse_agent_spec("deep=alphabeta, shallow=AlphaBeta") == {"deep": "alphabeta", "shallow": "alphabeta"}
    with pytest.raises(ValueError):
        parse_agent_spec("alphabeta")
    with pytest.raises(ValueError):
        parse_agent_spec("a=alphabeta,b=minimax")


def test_main_runs_tournament(tmp_path, capsys):
    """The CLI entry point runs a tournament and writes its log and results."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    try:
        exit_code = main([
            "--agents", "a=random,b=random",
            "--output-dir", str(tmp_path),
            "--seed", "4",
            "--log-level", "WARNING",
        ])
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)

    assert exit_code == 0
    run_dirs = list(tmp_path.iterdir())
    assert len(run_dirs) == 1
    assert (run_dirs[0] / "arena.log").exists()
    assert (run_dirs[0] / "arena_results.json").exists()
    assert "TOURNAMENT SUMMARY" in capsys.readouterr().out


def test_setup_logging_replaces_handlers(tmp_path):
    """Repeated logging setup replaces the previous handlers."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    try:
        setup_logging(tmp_path, "first")
        log_file = setup_logging(tmp_path, "second", level=logging.DEBUG)
        assert log_file == tmp_path / "second.log"
        assert len(root_logger.handlers) == 2
        logging.getLogger("pentago.test").debug("hello from the test")
        for handler in root_logger.handlers:
            handler.flush()
        assert "hello from the test" in log_file.read_text()
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)


if __name__ == '__main__':
    unittest.main()
