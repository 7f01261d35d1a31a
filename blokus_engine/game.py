"""
Main game facade for Blokus Duo.

BlokusGame owns one board and both players' state. The external game loop
decides whose turn it is and whether a placement attempt is authorized; the
facade only applies the placement rules and reports results.
"""

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Dict, List, Optional, Tuple, Union

from .board import Board, Player, Position
from .config import EngineConfig
from .exceptions import PieceAlreadyUsedError
from .inventory import PlayerState, execute_placement
from .move_generator import Placement, find_hint, playable_piece_ids
from .move_generator import valid_anchors as search_valid_anchors
from .pieces import get_piece, orient_piece
from .placement import RejectionReason, check_placement
from .scoring import GameResult, calculate_score, detect_game_over

logger = logging.getLogger(__name__)

AnchorLike = Union[Position, Tuple[int, int]]


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of propose_placement."""
    accepted: bool
    player: Player
    piece_id: str
    orientation: int
    anchor: Position
    cells: Tuple[Position, ...] = ()
    reason: Optional[RejectionReason] = None

    @property
    def message(self) -> str:
        if self.accepted:
            return "Move successful"
        return self.reason.message


def _as_position(anchor: AnchorLike) -> Position:
    row, col = (anchor.row, anchor.col) if isinstance(anchor, Position) else anchor
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(f"Anchor coordinates must be integers, got {value!r}")
    return Position(int(row), int(col))


class BlokusGame:
    """A single two-player Blokus Duo game."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.board = Board.from_config(self.config)
        self.players: Dict[Player, PlayerState] = {player: PlayerState(player) for player in Player}
        self.move_history: List[PlacementResult] = []

    @property
    def move_count(self) -> int:
        return len(self.move_history)

    def get_player_state(self, player: Player) -> PlayerState:
        return self.players[Player(player)]

    def is_first_move(self, player: Player) -> bool:
        return self.get_player_state(player).is_first_move

    def available_pieces(self, player: Player) -> List[str]:
        return self.get_player_state(player).inventory.available_ids()

    def used_pieces(self, player: Player) -> List[str]:
        return self.get_player_state(player).inventory.used_ids()

    def propose_placement(self, piece_id: str, orientation: int, anchor: AnchorLike,
                          player: Player) -> PlacementResult:
        """
        Try to place a piece for a player.

        Rule violations come back as a rejected result and leave the game
        untouched. Caller errors raise.

        Args:
            piece_id: Catalog id of the piece
            orientation: Orientation index 0..7
            anchor: Board position of the oriented piece's (0, 0) offset
            player: Acting player

        Returns:
            PlacementResult, accepted or carrying the rejection reason

        Raises:
            UnknownPieceError: If piece_id is not in the catalog
            PieceAlreadyUsedError: If the player has already placed this piece
            InvalidOrientationError: If orientation is outside 0..7
            TypeError: If the anchor coordinates are not integers
        """
        state = self.get_player_state(player)
        piece = get_piece(piece_id)
        if not state.inventory.is_available(piece_id):
            raise PieceAlreadyUsedError(piece_id, state.player)
        oriented = orient_piece(piece, orientation)
        anchor = _as_position(anchor)

        check = check_placement(self.board, oriented, anchor, state.player, state.is_first_move)
        if not check.is_legal:
            logger.debug(f"Rejected {piece_id}/{orientation} at ({anchor.row}, {anchor.col}) "
                         f"for {state.player.name}: {check.reason.value}")
            return PlacementResult(False, state.player, piece_id, orientation, anchor,
                                   check.cells, check.reason)

        cells = execute_placement(self.board, state, oriented, anchor)
        result = PlacementResult(True, state.player, piece_id, orientation, anchor, tuple(cells))
        self.move_history.append(result)
        logger.info(f"Move {self.move_count}: {state.player.name} placed {piece_id} "
                    f"at ({anchor.row}, {anchor.col}), score now {self.score(state.player)}")
        return result

    def has_legal_move(self, player: Player) -> bool:
        """Check if a player can still place any piece."""
        return self.hint(player) is not None

    def hint(self, player: Player) -> Optional[Placement]:
        """First legal placement for a player in search order, or None."""
        state = self.get_player_state(player)
        return find_hint(self.board, state.inventory.available_ids(), state.player,
                         state.is_first_move, self.config.search_debug)

    def valid_anchors(self, piece_id: str, orientation: int, player: Player) -> List[Position]:
        """Anchors where the given orientation of a piece could be placed."""
        state = self.get_player_state(player)
        oriented = orient_piece(get_piece(piece_id), orientation)
        return search_valid_anchors(self.board, oriented, state.player, state.is_first_move)

    def playable_pieces(self, player: Player) -> List[str]:
        """Available piece ids that have at least one legal placement."""
        state = self.get_player_state(player)
        return playable_piece_ids(self.board, state.inventory.available_ids(),
                                  state.player, state.is_first_move, self.config.search_debug)

    def score(self, player: Player) -> int:
        """Squares left in the player's unplaced pieces (lower is better)."""
        return calculate_score(self.available_pieces(player))

    def check_game_over(self) -> GameResult:
        """Over when neither player has a legal placement. Never mutates."""
        return detect_game_over(self.board, self.players, self.config.search_debug)
