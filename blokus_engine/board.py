"""
Blokus Duo board implementation with a square grid of cell ownership.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .config import DEFAULT_BOARD_SIZE, EngineConfig


class Player(Enum):
    """Player enumeration. The value is what the grid stores."""
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


EMPTY = 0

EDGE_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
CORNER_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass(frozen=True)
class Position:
    """Represents a position on the board."""
    row: int
    col: int


class Board:
    """
    Blokus Duo game board.

    The board is a square grid where:
    - 0 represents an empty cell
    - 1-2 represent the owning player

    Only validated placements are written, through occupy_cells. Cells are
    never cleared once owned.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE,
                 start_corners: Optional[Tuple[Tuple[int, int], Tuple[int, int]]] = None):
        config = EngineConfig(board_size=size, start_corners=start_corners)
        self.size = config.board_size
        self.grid = np.zeros((self.size, self.size), dtype=np.int8)
        first, second = config.resolved_start_corners()
        self.player_start_corners: Dict[Player, Position] = {
            Player.ONE: Position(*first),
            Player.TWO: Position(*second),
        }

    @classmethod
    def from_config(cls, config: EngineConfig) -> "Board":
        return cls(config.board_size, config.start_corners)

    def is_on_board(self, row: int, col: int) -> bool:
        """Check if a coordinate is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_owner(self, row: int, col: int) -> Optional[Player]:
        """
        Get the player owning a cell, or None if it is empty.

        Raises:
            IndexError: If the coordinate is off the board
        """
        if not self.is_on_board(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off a {self.size}x{self.size} board")
        value = self.grid[row, col]
        if value == EMPTY:
            return None
        return Player(int(value))

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell_owner(row, col) is None

    def occupy_cells(self, cells: Iterable[Position], player: Player) -> None:
        """
        Write ownership for exactly the given cells.

        Callers must validate the placement first; nothing is checked here.
        """
        value = player.value
        for cell in cells:
            self.grid[cell.row, cell.col] = value

    def start_corner(self, player: Player) -> Position:
        """The corner the player's opening piece must cover."""
        return self.player_start_corners[player]

    def edge_neighbours(self, row: int, col: int) -> List[Position]:
        """Positions that share an edge with (row, col), clipped to the board."""
        return [
            Position(row + dr, col + dc)
            for dr, dc in EDGE_OFFSETS
            if self.is_on_board(row + dr, col + dc)
        ]

    def corner_neighbours(self, row: int, col: int) -> List[Position]:
        """Positions diagonally touching (row, col), clipped to the board."""
        return [
            Position(row + dr, col + dc)
            for dr, dc in CORNER_OFFSETS
            if self.is_on_board(row + dr, col + dc)
        ]

    def owned_cells(self, player: Player) -> List[Position]:
        """All cells owned by a player in row-major order."""
        rows, cols = np.nonzero(self.grid == player.value)
        return [Position(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_owned(self, player: Player) -> int:
        return int(np.count_nonzero(self.grid == player.value))

    def to_rows(self) -> List[List[Optional[Player]]]:
        """Ownership grid for rendering, None marking empty cells."""
        return [
            [Player(int(value)) if value != EMPTY else None for value in row]
            for row in self.grid
        ]

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board.grid = self.grid.copy()
        new_board.player_start_corners = dict(self.player_start_corners)
        return new_board

    def __str__(self) -> str:
        """String representation of the board."""
        result = []
        for row in range(self.size):
            row_str = ""
            for col in range(self.size):
                value = self.grid[row, col]
                row_str += "." if value == EMPTY else str(value)
            result.append(row_str)
        return "\n".join(result)
