"""
Pydantic schemas for the views the surrounding game consumes.
"""

from .move import PlacementRequest, PlacementResponse, Player, Position
from .state_update import BoardState, GameState, PlayerState
from .convert import game_state_from_game, handle_placement_request

__all__ = [
    "PlacementRequest",
    "PlacementResponse",
    "Player",
    "Position",
    "BoardState",
    "PlayerState",
    "GameState",
    "game_state_from_game",
    "handle_placement_request",
]
