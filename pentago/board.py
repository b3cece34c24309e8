"""
Pentago board implementation with a 6x6 grid split into four 3x3 quadrants.
"""

import numpy as np
from typing import List, Optional, Sequence, Set, Tuple
from enum import Enum


EMPTY = 0


class Player(Enum):
    """Player enumeration."""
    WHITE = 1
    BLACK = 2

    @property
    def opponent(self) -> 'Player':
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    @property
    def player_id(self) -> int:
        """Zero-based id, WHITE moves first."""
        return self.value - 1


PIECE_SYMBOLS = {EMPTY: ".", Player.WHITE.value: "W", Player.BLACK.value: "B"}


def _build_winning_lines(size: int = 6, length: int = 5) -> np.ndarray:
    """All windows of `length` consecutive cells, as (n_lines, length, 2) coords."""
    lines = []
    for r in range(size):
        for c in range(size):
            for dr, dc in [(0, 1), (1, 0), (1, 1), (1, -1)]:
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if 0 <= end_r < size and 0 <= end_c < size:
                    lines.append([(r + dr * k, c + dc * k) for k in range(length)])
    return np.array(lines, dtype=int)


WINNING_LINES = _build_winning_lines()


def find_five_in_a_row(grid: np.ndarray) -> Set['Player']:
    """Return the set of players owning at least one five-in-a-row."""
    cells = grid[WINNING_LINES[:, :, 0], WINNING_LINES[:, :, 1]]
    owners = set()
    for player in Player:
        if np.any(np.all(cells == player.value, axis=1)):
            owners.add(player)
    return owners


class Board:
    """
    Pentago game board implementation.

    The board is a 6x6 grid where:
    - 0 represents an empty cell
    - 1-2 represent players (WHITE, BLACK)

    Quadrants are numbered 0 (top-left), 1 (top-right),
    2 (bottom-left) and 3 (bottom-right).
    """

    SIZE = 6
    QUADRANT_SIZE = 3
    NUM_QUADRANTS = 4

    def __init__(self):
        self.grid = np.zeros((self.SIZE, self.SIZE), dtype=int)
        self.current_player = Player.WHITE
        self.turn_number = 0
        self.game_over = False
        self.winner: Optional[Player] = None

    @classmethod
    def from_rows(cls, rows: Sequence[str], current_player: Player = Player.WHITE) -> 'Board':
        """
        Build a board from six text rows using 'W', 'B' and '.'.

        Terminal state is recomputed from the grid, so a position that already
        holds a five-in-a-row comes back as a finished game.
        """
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError(f"Expected {cls.SIZE} rows of {cls.SIZE} cells")
        symbol_values = {symbol: value for value, symbol in PIECE_SYMBOLS.items()}
        board = cls()
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row):
                if symbol not in symbol_values:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({r}, {c})")
                board.grid[r, c] = symbol_values[symbol]
        board.current_player = current_player
        board.turn_number = int(np.count_nonzero(board.grid))
        board.update_game_state()
        return board

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def get_cell(self, row: int, col: int) -> int:
        """Get the value at a position."""
        if not self.is_valid_position(row, col):
            return -1  # Invalid position
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.get_cell(row, col) == EMPTY

    def get_player_at(self, row: int, col: int) -> Optional[Player]:
        """Get the player at a position, or None if empty."""
        value = self.get_cell(row, col)
        if value <= 0:
            return None
        return Player(value)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Empty cells in row-major order."""
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self) -> bool:
        return not np.any(self.grid == EMPTY)

    def place_piece(self, row: int, col: int, player: Player) -> bool:
        """
        Place a marble on an empty cell.

        Returns True if placement was successful, False otherwise.
        """
        if not self.is_valid_position(row, col) or self.grid[row, col] != EMPTY:
            return False
        self.grid[row, col] = player.value
        return True

    def quadrant_slice(self, quadrant: int) -> Tuple[slice, slice]:
        """Row and column slices covering a quadrant."""
        if not 0 <= quadrant < self.NUM_QUADRANTS:
            raise ValueError(f"Quadrant must be in 0..{self.NUM_QUADRANTS - 1}, got {quadrant}")
        row_start = (quadrant // 2) * self.QUADRANT_SIZE
        col_start = (quadrant % 2) * self.QUADRANT_SIZE
        return (
            slice(row_start, row_start + self.QUADRANT_SIZE),
            slice(col_start, col_start + self.QUADRANT_SIZE),
        )

    def rotate_quadrant(self, quadrant: int, clockwise: bool) -> None:
        """Rotate one quadrant 90 degrees in place."""
        rows, cols = self.quadrant_slice(quadrant)
        # np.rot90 with k=1 turns counterclockwise
        k = -1 if clockwise else 1
        self.grid[rows, cols] = np.rot90(self.grid[rows, cols], k=k)

    def update_game_state(self) -> None:
        """
        Recompute game_over and winner from the grid.

        Both players holding a five after the same twist is a draw, as is a
        full board with no five.
        """
        owners = find_five_in_a_row(self.grid)
        if len(owners) == 1:
            self.game_over = True
            self.winner = owners.pop()
        elif len(owners) == 2 or self.is_full():
            self.game_over = True
            self.winner = None
        else:
            self.game_over = False
            self.winner = None

    def advance_turn(self) -> None:
        """Hand the move to the other player."""
        self.current_player = self.current_player.opponent
        self.turn_number += 1

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.current_player = self.current_player
        new_board.turn_number = self.turn_number
        new_board.game_over = self.game_over
        new_board.winner = self.winner
        return new_board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.current_player == other.current_player and np.array_equal(self.grid, other.grid)

    def __hash__(self):
        return hash((self.current_player, self.grid.tobytes()))

    def __str__(self) -> str:
        """String representation of the board."""
        return "\n".join(
            "".join(PIECE_SYMBOLS[int(value)] for value in row) for row in self.grid
        )
