"""
Legal placement search for Blokus Duo.

Every search is built on one lazy generator of candidate placements, ordered
by catalog order, then orientation index, then row-major anchor. The
game-over detector, hints and piece-tray hints all consume it, so the full
board scan is written once.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .board import Board, Player, Position
from .pieces import Piece, get_piece, get_unique_orientations, is_catalog_id
from .placement import check_placement

logger = logging.getLogger(__name__)

# Debug flag for search timing (controlled via environment variable)
SEARCH_DEBUG = bool(os.getenv("BLOKUS_SEARCH_DEBUG", ""))


@dataclass(frozen=True)
class Candidate:
    """One (piece, orientation, anchor) combination to try."""
    piece_id: str
    orientation: int
    piece: Piece
    anchor: Position


@dataclass(frozen=True)
class Placement:
    """A legal placement found by the search."""
    piece_id: str
    orientation: int
    anchor: Position
    cells: Tuple[Position, ...]

    def __str__(self):
        return (f"Placement(piece_id={self.piece_id}, orientation={self.orientation}, "
                f"anchor=({self.anchor.row}, {self.anchor.col}))")


def iter_anchors(board: Board) -> Iterator[Position]:
    """Every board cell in row-major order."""
    for row in range(board.size):
        for col in range(board.size):
            yield Position(row, col)


def iter_candidate_placements(board: Board, piece_ids: Iterable[str]) -> Iterator[Candidate]:
    """
    Lazily yield every candidate placement for the given pieces.

    Ids that are not in the catalog are skipped. Symmetric orientations are
    yielded once, under their lowest orientation index.

    Args:
        board: Board whose cells serve as anchors
        piece_ids: Piece ids in the order they should be tried
    """
    for piece_id in piece_ids:
        if not is_catalog_id(piece_id):
            logger.debug(f"Skipping unknown piece id {piece_id!r} during search")
            continue
        for orientation, oriented in get_unique_orientations(get_piece(piece_id)):
            for anchor in iter_anchors(board):
                yield Candidate(piece_id, orientation, oriented, anchor)


def iter_legal_placements(board: Board, piece_ids: Iterable[str], player: Player,
                          is_first_move: bool) -> Iterator[Placement]:
    """
    Lazily yield every legal placement for a player.

    Args:
        board: Current board state
        piece_ids: Player's available piece ids
        player: Player to search for
        is_first_move: Player's first-move flag
    """
    for candidate in iter_candidate_placements(board, piece_ids):
        check = check_placement(board, candidate.piece, candidate.anchor, player, is_first_move)
        if check.is_legal:
            yield Placement(candidate.piece_id, candidate.orientation,
                            candidate.anchor, check.cells)


def find_hint(board: Board, piece_ids: Iterable[str], player: Player,
              is_first_move: bool, debug: bool = SEARCH_DEBUG) -> Optional[Placement]:
    """
    Get the first legal placement in search order, or None.

    This short-circuits: the search stops at the first success.
    """
    start = time.perf_counter()
    placement = next(iter_legal_placements(board, piece_ids, player, is_first_move), None)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    if debug:
        logger.info(f"Search: player={player.name}, found={placement is not None}, "
                    f"elapsed_ms={elapsed_ms:.2f}")
    logger.debug(f"Legal placement search for player={player.name}: {placement} "
                 f"in {elapsed_ms:.2f}ms")
    return placement


def has_any_legal_move(board: Board, piece_ids: Iterable[str], player: Player,
                       is_first_move: bool, debug: bool = SEARCH_DEBUG) -> bool:
    """
    Check if a player has any legal placement left.

    Args:
        board: Current board state
        piece_ids: Player's available piece ids
        player: Player to check
        is_first_move: Player's first-move flag
        debug: Log search timing at INFO level

    Returns:
        True if at least one legal placement exists
    """
    return find_hint(board, piece_ids, player, is_first_move, debug) is not None


def valid_anchors(board: Board, piece: Piece, player: Player,
                  is_first_move: bool) -> List[Position]:
    """
    Every anchor at which one fixed orientation of a piece is legal.

    Used to highlight drop targets for the piece a player is holding.
    """
    return [
        anchor for anchor in iter_anchors(board)
        if check_placement(board, piece, anchor, player, is_first_move).is_legal
    ]


def playable_piece_ids(board: Board, piece_ids: Iterable[str], player: Player,
                       is_first_move: bool, debug: bool = SEARCH_DEBUG) -> List[str]:
    """Ids, in input order, with at least one legal placement."""
    return [
        piece_id for piece_id in piece_ids
        if has_any_legal_move(board, [piece_id], player, is_first_move, debug)
    ]
