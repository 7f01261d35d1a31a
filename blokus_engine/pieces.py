"""
Blokus piece definitions with all 21 polyominoes and their rotations/reflections.
"""

from dataclasses import dataclass, replace
from numbers import Integral
from typing import Dict, Iterable, List, Tuple

from .exceptions import InvalidOrientationError, UnknownPieceError

Offset = Tuple[int, int]

# Orientation indexes are rotations + 4 * flipped (flip applied before rotating)
ORIENTATION_COUNT = 8


def normalize_offsets(offsets: Iterable[Offset]) -> Tuple[Offset, ...]:
    """
    Normalize offsets so that min_row = 0 and min_col = 0.

    Args:
        offsets: Iterable of (row, col) tuples

    Returns:
        Normalized offsets, sorted for canonical ordering
    """
    offsets = list(offsets)
    if not offsets:
        return ()

    min_row = min(r for r, c in offsets)
    min_col = min(c for r, c in offsets)

    return tuple(sorted((r - min_row, c - min_col) for r, c in offsets))


def _is_edge_connected(cells: Tuple[Offset, ...]) -> bool:
    remaining = set(cells)
    stack = [cells[0]]
    remaining.discard(cells[0])
    while stack:
        r, c = stack.pop()
        for neighbour in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if neighbour in remaining:
                remaining.discard(neighbour)
                stack.append(neighbour)
    return not remaining


@dataclass(frozen=True)
class Piece:
    """
    A Blokus piece in one orientation.

    Cells are (row, col) offsets from the anchor, stored sorted so that two
    orientations covering the same offset set compare equal.
    """
    id: str
    name: str
    cells: Tuple[Offset, ...]

    def __post_init__(self):
        """Canonicalize and validate the offsets."""
        cells = tuple(sorted(set((int(r), int(c)) for r, c in self.cells)))
        if not cells:
            raise ValueError(f"Piece {self.id!r} must have at least one cell")
        if len(cells) != len(self.cells):
            raise ValueError(f"Piece {self.id!r} has duplicate cells")
        if min(r for r, _ in cells) != 0 or min(c for _, c in cells) != 0:
            raise ValueError(f"Piece {self.id!r} offsets must be normalized to a tight bounding box")
        if not _is_edge_connected(cells):
            raise ValueError(f"Piece {self.id!r} cells must be edge-connected")
        object.__setattr__(self, "cells", cells)

    @property
    def size(self) -> int:
        """Number of squares in the piece."""
        return len(self.cells)


def rotate_piece(piece: Piece) -> Piece:
    """
    Rotate a piece a quarter turn.

    Each offset (r, c) maps to (c, -r) and the result is shifted back to
    non-negative coordinates.
    """
    rotated = [(c, -r) for r, c in piece.cells]
    return replace(piece, cells=normalize_offsets(rotated))


def flip_piece(piece: Piece) -> Piece:
    """Mirror a piece horizontally inside its own bounding box."""
    max_col = max(c for _, c in piece.cells)
    return replace(piece, cells=tuple((r, max_col - c) for r, c in piece.cells))


def orient_piece(piece: Piece, orientation: int) -> Piece:
    """
    Get one orientation of a piece.

    Args:
        piece: Piece in its catalog orientation
        orientation: Index in 0..7; values 4..7 are the flipped variants

    Returns:
        The transformed piece

    Raises:
        InvalidOrientationError: If the index is out of range
    """
    if isinstance(orientation, bool) or not isinstance(orientation, Integral) \
            or not 0 <= orientation < ORIENTATION_COUNT:
        raise InvalidOrientationError(orientation)

    flipped, rotations = divmod(int(orientation), 4)
    result = flip_piece(piece) if flipped else piece
    for _ in range(rotations):
        result = rotate_piece(result)
    return result


def get_orientations(piece: Piece) -> List[Piece]:
    """All eight orientations of a piece in index order (duplicates kept)."""
    orientations = []
    current = piece
    for _ in range(4):
        orientations.append(current)
        current = rotate_piece(current)
    current = flip_piece(piece)
    for _ in range(4):
        orientations.append(current)
        current = rotate_piece(current)
    return orientations


def get_unique_orientations(piece: Piece) -> List[Tuple[int, Piece]]:
    """
    Deduplicated orientations of a piece.

    Returns:
        (orientation index, piece) pairs; when several indexes produce the same
        offsets, the lowest index is kept.
    """
    seen = set()
    unique = []
    for index, oriented in enumerate(get_orientations(piece)):
        if oriented.cells in seen:
            continue
        seen.add(oriented.cells)
        unique.append((index, oriented))
    return unique


def _build_catalog() -> Tuple[Piece, ...]:
    return (
        # Monomino (1 square)
        Piece("I1", "Single", ((0, 0),)),

        # Domino (2 squares)
        Piece("I2", "Domino", ((0, 0), (0, 1))),

        # Trominoes (3 squares)
        Piece("I3", "I-Tromino", ((0, 0), (0, 1), (0, 2))),
        Piece("V3", "V-Tromino", ((0, 0), (1, 0), (1, 1))),

        # Tetrominoes (4 squares)
        Piece("I4", "I-Tetromino", ((0, 0), (0, 1), (0, 2), (0, 3))),
        Piece("O4", "O-Tetromino", ((0, 0), (0, 1), (1, 0), (1, 1))),
        Piece("T4", "T-Tetromino", ((0, 0), (0, 1), (0, 2), (1, 1))),
        Piece("L4", "L-Tetromino", ((0, 0), (1, 0), (2, 0), (2, 1))),
        Piece("Z4", "Z-Tetromino", ((0, 0), (0, 1), (1, 1), (1, 2))),

        # Pentominoes (5 squares)
        Piece("F", "F-Pentomino", ((0, 1), (0, 2), (1, 0), (1, 1), (2, 1))),
        Piece("I5", "I-Pentomino", ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4))),
        Piece("L5", "L-Pentomino", ((0, 0), (1, 0), (2, 0), (3, 0), (3, 1))),
        Piece("N", "N-Pentomino", ((0, 1), (1, 0), (1, 1), (2, 0), (3, 0))),
        Piece("P", "P-Pentomino", ((0, 0), (0, 1), (1, 0), (1, 1), (2, 0))),
        Piece("T5", "T-Pentomino", ((0, 0), (0, 1), (0, 2), (1, 1), (2, 1))),
        Piece("U", "U-Pentomino", ((0, 0), (0, 2), (1, 0), (1, 1), (1, 2))),
        Piece("V5", "V-Pentomino", ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))),
        Piece("W", "W-Pentomino", ((0, 0), (1, 0), (1, 1), (2, 1), (2, 2))),
        Piece("X", "X-Pentomino", ((0, 1), (1, 0), (1, 1), (1, 2), (2, 1))),
        Piece("Y", "Y-Pentomino", ((0, 1), (1, 0), (1, 1), (2, 1), (3, 1))),
        Piece("Z5", "Z-Pentomino", ((0, 0), (0, 1), (1, 1), (2, 1), (2, 2))),
    )


# Global registry, built once on import and shared by every game
PIECE_CATALOG: Tuple[Piece, ...] = _build_catalog()
_PIECES_BY_ID: Dict[str, Piece] = {piece.id: piece for piece in PIECE_CATALOG}


def catalog_ids() -> Tuple[str, ...]:
    """Piece ids in catalog order."""
    return tuple(piece.id for piece in PIECE_CATALOG)


def get_piece(piece_id: str) -> Piece:
    """
    Look up a catalog piece by id.

    Raises:
        UnknownPieceError: If the id is not in the catalog
    """
    try:
        return _PIECES_BY_ID[piece_id]
    except (KeyError, TypeError):
        raise UnknownPieceError(piece_id) from None


def is_catalog_id(piece_id) -> bool:
    try:
        return piece_id in _PIECES_BY_ID
    except TypeError:
        return False
