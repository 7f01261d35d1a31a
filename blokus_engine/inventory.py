"""
Per-player piece inventory and the move executor.

execute_placement is the only code path that writes board ownership, moves a
piece from available to used, or clears a player's first-move flag.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .board import Board, Player, Position
from .exceptions import PieceAlreadyUsedError, PlacementContractError
from .pieces import PIECE_CATALOG, Piece, get_piece, get_unique_orientations
from .placement import check_placement

logger = logging.getLogger(__name__)


@dataclass
class PlayerInventory:
    """
    Available and used piece ids for one player.

    available and used are disjoint and together always equal the catalog id
    set the inventory was created from.
    """
    catalog_order: Tuple[str, ...]
    available: Set[str]
    used: List[str] = field(default_factory=list)

    @classmethod
    def for_catalog(cls, catalog: Sequence[Piece] = PIECE_CATALOG) -> "PlayerInventory":
        """Fresh inventory holding every piece of the catalog."""
        ids = tuple(piece.id for piece in catalog)
        return cls(catalog_order=ids, available=set(ids))

    def is_available(self, piece_id: str) -> bool:
        return piece_id in self.available

    def available_ids(self) -> List[str]:
        """Available ids in catalog order."""
        return [piece_id for piece_id in self.catalog_order if piece_id in self.available]

    def used_ids(self) -> List[str]:
        """Used ids in the order they were placed."""
        return list(self.used)

    def mark_used(self, piece_id: str, player: Optional[Player] = None) -> None:
        """
        Move a piece id from available to used.

        Raises:
            UnknownPieceError: If the id is not a catalog piece
            PieceAlreadyUsedError: If the id is not currently available
        """
        get_piece(piece_id)
        if piece_id not in self.available:
            raise PieceAlreadyUsedError(piece_id, player)
        self.available.remove(piece_id)
        self.used.append(piece_id)

    def restrict_to(self, piece_ids: Iterable[str]) -> None:
        """
        Keep only the given ids available; everything else counts as used.

        Used to set up mid-game positions (tests, replays). The union invariant
        is preserved.
        """
        keep = set(piece_ids)
        for piece_id in keep:
            get_piece(piece_id)
        for piece_id in self.available_ids():
            if piece_id not in keep:
                self.mark_used(piece_id)


@dataclass
class PlayerState:
    """Everything the rules need to know about one player."""
    player: Player
    inventory: PlayerInventory = field(default_factory=PlayerInventory.for_catalog)
    is_first_move: bool = True


def execute_placement(board: Board, state: PlayerState, piece: Piece,
                      anchor: Position) -> List[Position]:
    """
    Commit a validated placement.

    Writes ownership for every cell, moves the piece id from available to
    used and clears the first-move flag.

    Args:
        board: Board to write to
        state: Acting player's state
        piece: Piece in the orientation being placed
        anchor: Board position of offset (0, 0)

    Returns:
        The cells that were claimed

    Raises:
        UnknownPieceError: If the piece is not in the catalog
        PieceAlreadyUsedError: If the player no longer holds the piece
        PlacementContractError: If the cells are not an orientation of the
            catalog piece, or the placement does not pass validation
    """
    catalog_piece = get_piece(piece.id)
    if not state.inventory.is_available(piece.id):
        raise PieceAlreadyUsedError(piece.id, state.player)
    if piece.cells not in {oriented.cells for _, oriented in get_unique_orientations(catalog_piece)}:
        raise PlacementContractError(
            f"Cells {piece.cells} are not an orientation of catalog piece {piece.id}"
        )

    check = check_placement(board, piece, anchor, state.player, state.is_first_move)
    if not check.is_legal:
        raise PlacementContractError(
            f"Refusing to commit illegal placement of {piece.id} at "
            f"({anchor.row}, {anchor.col}) for {state.player.name}: {check.reason.value}"
        )

    board.occupy_cells(check.cells, state.player)
    state.inventory.mark_used(piece.id, state.player)
    if state.is_first_move:
        state.is_first_move = False

    logger.debug(f"Committed {piece.id} for {state.player.name} at cells "
                 f"{[(cell.row, cell.col) for cell in check.cells]}")
    return list(check.cells)
