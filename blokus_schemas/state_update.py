"""
Pydantic schemas for game state snapshots.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .move import Player, Position


class BoardState(BaseModel):
    """Current ownership of every board cell."""
    size: int = Field(ge=1)
    cells: List[List[Optional[Player]]] = Field(description="Row-major grid, null for empty cells")
    move_count: int = Field(ge=0, description="Total number of placements made")

    class Config:
        json_schema_extra = {
            "example": {
                "size": 2,
                "cells": [
                    ["ONE", None],
                    [None, None]
                ],
                "move_count": 1
            }
        }


class PlayerState(BaseModel):
    """Piece tray and status of one player."""
    player: Player
    score: int = Field(ge=0, description="Squares left in unplaced pieces")
    pieces_used: List[str] = Field(description="IDs of pieces already placed")
    pieces_remaining: List[str] = Field(description="IDs of pieces still available")
    is_first_move: bool = Field(description="Whether the next piece must cover the start corner")
    start_corner: Position
    can_move: Optional[bool] = Field(default=None, description="Filled only when requested")

    class Config:
        json_schema_extra = {
            "example": {
                "player": "ONE",
                "score": 88,
                "pieces_used": ["I1"],
                "pieces_remaining": ["I2", "I3", "V3"],
                "is_first_move": False,
                "start_corner": {"row": 0, "col": 0},
                "can_move": True
            }
        }


class GameState(BaseModel):
    """Complete game snapshot."""
    board: BoardState
    players: List[PlayerState]
    game_over: bool = False
    winner: Optional[Player] = None
    is_draw: bool = False
