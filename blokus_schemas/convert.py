"""
Conversions between engine objects and the pydantic schemas.
"""

import logging

from blokus_engine.board import Player as EnginePlayer
from blokus_engine.exceptions import BlokusEngineError
from blokus_engine.game import BlokusGame

from .move import PlacementRequest, PlacementResponse, Player, Position
from .state_update import BoardState, GameState, PlayerState

logger = logging.getLogger(__name__)


def to_schema_player(player: EnginePlayer) -> Player:
    return Player(player.name)


def to_engine_player(player: Player) -> EnginePlayer:
    return EnginePlayer[player.value]


def game_state_from_game(game: BlokusGame, include_can_move: bool = False) -> GameState:
    """
    Build a full snapshot of a game for rendering.

    Args:
        game: Game to describe
        include_can_move: Run the legality search for each player and report it

    Returns:
        GameState snapshot
    """
    board = BoardState(
        size=game.board.size,
        cells=[
            [to_schema_player(owner) if owner is not None else None for owner in row]
            for row in game.board.to_rows()
        ],
        move_count=game.move_count,
    )

    players = []
    for player, state in game.players.items():
        corner = game.board.start_corner(player)
        players.append(PlayerState(
            player=to_schema_player(player),
            score=game.score(player),
            pieces_used=state.inventory.used_ids(),
            pieces_remaining=state.inventory.available_ids(),
            is_first_move=state.is_first_move,
            start_corner=Position(row=corner.row, col=corner.col),
            can_move=game.has_legal_move(player) if include_can_move else None,
        ))

    result = game.check_game_over()
    return GameState(
        board=board,
        players=players,
        game_over=result.is_over,
        winner=to_schema_player(result.winner) if result.winner is not None else None,
        is_draw=result.is_draw,
    )


def handle_placement_request(game: BlokusGame, request: PlacementRequest) -> PlacementResponse:
    """
    Apply a placement request and describe the outcome.

    Rule rejections and caller errors both come back as success=False; caller
    errors are marked with error="invalid_request".
    """
    player = to_engine_player(request.player)
    try:
        result = game.propose_placement(
            request.piece_id,
            request.orientation,
            (request.anchor_row, request.anchor_col),
            player,
        )
    except BlokusEngineError as e:
        logger.warning(f"Invalid placement request from {player.name}: {e}")
        return PlacementResponse(success=False, message=str(e), error="invalid_request")

    if not result.accepted:
        return PlacementResponse(
            success=False,
            message=result.message,
            reason=result.reason.value,
            new_score=game.score(player),
        )

    outcome = game.check_game_over()
    return PlacementResponse(
        success=True,
        message=result.message,
        positions=[Position(row=cell.row, col=cell.col) for cell in result.cells],
        new_score=game.score(player),
        game_over=outcome.is_over,
        winner=to_schema_player(outcome.winner) if outcome.winner is not None else None,
        is_draw=outcome.is_draw,
    )
