"""
Static evaluation of Pentago positions based on open lines.

An open line is a row, column or one of six fixed diagonals that holds no
opposing marble. Each color scores the marbles it has on its open lines,
and the acting player gets a bonus for every line family in which it holds
an open line of three or more.
"""

from dataclasses import dataclass
from typing import Tuple

from pentago.board import Board, Player

from agents.game_engine_protocol import GameEngineProtocol

BOARD_SIZE = Board.SIZE
LONG_RUN_THRESHOLD = 3

# The six diagonals long enough to hold five in a row.
DIAGONALS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    tuple((i, i) for i in range(6)),
    tuple((i, 5 - i) for i in range(6)),
    tuple((i, i - 1) for i in range(1, 6)),
    tuple((i, 4 - i) for i in range(5)),
    tuple((i, i + 1) for i in range(5)),
    tuple((i, 6 - i) for i in range(1, 6)),
)


@dataclass(frozen=True)
class LineStats:
    """Open-line counts and longest open run per line family for one color."""
    count_rows: int
    count_cols: int
    count_diags: int
    max_row_run: int
    max_col_run: int
    max_diag_run: int

    @property
    def total(self) -> int:
        return self.count_rows + self.count_cols + self.count_diags


def _scan_line(engine: GameEngineProtocol, board, cells, own: int, other: int) -> int:
    """Own marbles on a line, or 0 as soon as an opposing marble shows up."""
    run = 0
    for row, col in cells:
        piece = engine.get_piece_at(board, row, col)
        if piece == other:
            return 0
        if piece == own:
            run += 1
    return run


def count_lines(engine: GameEngineProtocol, board, player: Player, by_rows: bool) -> Tuple[int, int]:
    """
    Count the player's marbles on open rows (or columns).

    Returns:
        Tuple of (total count over open lines, longest single open line)
    """
    own, other = player.value, player.opponent.value
    count = 0
    max_run = 0
    for i in range(BOARD_SIZE):
        if by_rows:
            cells = [(i, j) for j in range(BOARD_SIZE)]
        else:
            cells = [(j, i) for j in range(BOARD_SIZE)]
        run = _scan_line(engine, board, cells, own, other)
        max_run = max(max_run, run)
        count += run
    return count, max_run


def count_diagonals(engine: GameEngineProtocol, board, player: Player) -> Tuple[int, int]:
    """Same as count_lines over the six fixed diagonals."""
    own, other = player.value, player.opponent.value
    count = 0
    max_run = 0
    for cells in DIAGONALS:
        run = _scan_line(engine, board, cells, own, other)
        max_run = max(max_run, run)
        count += run
    return count, max_run


def line_stats(engine: GameEngineProtocol, board, player: Player) -> LineStats:
    count_rows, max_row_run = count_lines(engine, board, player, by_rows=True)
    count_cols, max_col_run = count_lines(engine, board, player, by_rows=False)
    count_diags, max_diag_run = count_diagonals(engine, board, player)
    return LineStats(
        count_rows=count_rows,
        count_cols=count_cols,
        count_diags=count_diags,
        max_row_run=max_row_run,
        max_col_run=max_col_run,
        max_diag_run=max_diag_run,
    )


def positional_bonus(stats: LineStats) -> int:
    """One point per line family holding an open run of three or more."""
    runs = (stats.max_row_run, stats.max_col_run, stats.max_diag_run)
    return sum(1 for run in runs if run >= LONG_RUN_THRESHOLD)


class OpenLineEvaluator:
    """
    Scores a position from the acting player's point of view.

    Terminal wins score +inf / -inf. Every other position, including a
    drawn terminal position, gets the open-line heuristic:

        own open marbles - opponent open marbles + positional bonus

    The bonus is computed from the acting player's own line stats.
    """

    def __init__(self, engine: GameEngineProtocol):
        self.engine = engine

    def score(self, board, player: Player) -> float:
        if self.engine.is_game_over(board):
            winner = self.engine.get_winner(board)
            if winner == player:
                return float('inf')
            if winner == player.opponent:
                return float('-inf')

        own = line_stats(self.engine, board, player)
        opponent = line_stats(self.engine, board, player.opponent)
        return float(own.total - opponent.total + positional_bonus(own))
