"""
Pydantic schemas for placement requests and responses.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Player(str, Enum):
    """Player enumeration."""
    ONE = "ONE"
    TWO = "TWO"


class Position(BaseModel):
    """Position on the board."""
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)


class PlacementRequest(BaseModel):
    """Request to place a piece. Sent only after the quiz gate authorized the attempt."""
    player: Player
    piece_id: str = Field(..., min_length=1, description="Catalog id of the piece to place")
    orientation: int = Field(0, ge=0, le=7, description="Orientation index (4..7 are flipped)")
    anchor_row: int = Field(..., description="Row of the oriented piece's (0, 0) offset")
    anchor_col: int = Field(..., description="Column of the oriented piece's (0, 0) offset")

    class Config:
        json_schema_extra = {
            "example": {
                "player": "ONE",
                "piece_id": "I1",
                "orientation": 0,
                "anchor_row": 0,
                "anchor_col": 0
            }
        }


class PlacementResponse(BaseModel):
    """Response after a placement attempt."""
    success: bool
    message: str
    reason: Optional[str] = Field(default=None, description="Rule that rejected the placement")
    error: Optional[str] = Field(default=None, description="'invalid_request' for caller errors")
    positions: List[Position] = Field(default_factory=list, description="Cells claimed by the piece")
    new_score: Optional[int] = None
    game_over: bool = False
    winner: Optional[Player] = None
    is_draw: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "message": "Move successful",
                "reason": None,
                "error": None,
                "positions": [{"row": 0, "col": 0}],
                "new_score": 88,
                "game_over": False,
                "winner": None,
                "is_draw": False
            }
        }
