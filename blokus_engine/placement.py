"""
Placement legality rules for Blokus Duo.

Rules, checked in order:
1. Every cell is on the board and empty
2. A player's first piece must cover their starting corner
3. Later pieces must not share an edge with the player's own cells
4. Later pieces must touch at least one of the player's own cells at a corner

Opponent cells impose no adjacency restriction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Player, Position
from .pieces import Piece


class RejectionReason(str, Enum):
    """Why a placement was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    OCCUPIED = "occupied"
    MISSING_START_CORNER = "missing_start_corner"
    EDGE_CONTACT = "edge_contact"
    NO_CORNER_CONTACT = "no_corner_contact"

    @property
    def message(self) -> str:
        return _REJECTION_MESSAGES[self]


_REJECTION_MESSAGES = {
    RejectionReason.OUT_OF_BOUNDS: "Piece would be out of bounds",
    RejectionReason.OCCUPIED: "Piece overlaps an occupied cell",
    RejectionReason.MISSING_START_CORNER: "First piece must cover your starting corner",
    RejectionReason.EDGE_CONTACT: "Piece cannot share an edge with your own pieces",
    RejectionReason.NO_CORNER_CONTACT: "Piece must touch the corner of one of your own pieces",
}


@dataclass(frozen=True)
class PlacementCheck:
    """Outcome of validating one placement attempt."""
    cells: Tuple[Position, ...]
    reason: Optional[RejectionReason] = None

    @property
    def is_legal(self) -> bool:
        return self.reason is None


def get_piece_positions(piece: Piece, anchor: Position) -> List[Position]:
    """
    Get the board positions a piece would occupy when placed at anchor.

    Args:
        piece: Piece in the orientation being placed
        anchor: Board position that offset (0, 0) maps to

    Returns:
        Positions in the piece's offset order
    """
    return [Position(anchor.row + r, anchor.col + c) for r, c in piece.cells]


def check_placement(board: Board, piece: Piece, anchor: Position,
                    player: Player, is_first_move: bool) -> PlacementCheck:
    """
    Decide whether a piece may be placed at anchor.

    Pure: neither the board nor any player state is touched.

    Args:
        board: Current board state
        piece: Piece in the orientation being placed
        anchor: Board position of offset (0, 0)
        player: Player making the placement
        is_first_move: Whether the player has not placed a piece yet

    Returns:
        PlacementCheck with the absolute cells and the rejection reason, if any
    """
    cells = tuple(get_piece_positions(piece, anchor))
    grid = board.grid  # Direct reference for faster access
    size = board.size

    for cell in cells:
        if not (0 <= cell.row < size and 0 <= cell.col < size):
            return PlacementCheck(cells, RejectionReason.OUT_OF_BOUNDS)
    for cell in cells:
        if grid[cell.row, cell.col] != 0:
            return PlacementCheck(cells, RejectionReason.OCCUPIED)

    if is_first_move:
        if board.start_corner(player) not in cells:
            return PlacementCheck(cells, RejectionReason.MISSING_START_CORNER)
        return PlacementCheck(cells)

    player_value = player.value
    has_corner_connection = False

    for cell in cells:
        for neighbour in board.edge_neighbours(cell.row, cell.col):
            if grid[neighbour.row, neighbour.col] == player_value:
                return PlacementCheck(cells, RejectionReason.EDGE_CONTACT)

        if not has_corner_connection:
            has_corner_connection = any(
                grid[neighbour.row, neighbour.col] == player_value
                for neighbour in board.corner_neighbours(cell.row, cell.col)
            )

    if not has_corner_connection:
        return PlacementCheck(cells, RejectionReason.NO_CORNER_CONTACT)

    return PlacementCheck(cells)


def is_valid_placement(board: Board, piece: Piece, anchor: Position,
                       player: Player, is_first_move: bool) -> bool:
    """Boolean shortcut for check_placement."""
    return check_placement(board, piece, anchor, player, is_first_move).is_legal
