"""
Blokus Duo rules engine package.

This package contains the core game logic for two-player Blokus, including:
- Piece catalog and orientations
- Board ownership model
- Placement legality rules
- Piece inventories and move execution
- Legal placement search, scoring and game-over detection
- Main game facade
"""

from .board import Board, Player, Position
from .config import EngineConfig
from .exceptions import (
    BlokusEngineError,
    InvalidOrientationError,
    PieceAlreadyUsedError,
    PlacementContractError,
    UnknownPieceError,
)
from .game import BlokusGame, PlacementResult
from .inventory import PlayerInventory, PlayerState, execute_placement
from .move_generator import Placement, has_any_legal_move, iter_legal_placements
from .pieces import PIECE_CATALOG, Piece, flip_piece, get_piece, orient_piece, rotate_piece
from .placement import PlacementCheck, RejectionReason, check_placement, is_valid_placement
from .scoring import GameResult, calculate_score, detect_game_over

__all__ = [
    'Board', 'Player', 'Position', 'EngineConfig',
    'BlokusEngineError', 'UnknownPieceError', 'PieceAlreadyUsedError',
    'InvalidOrientationError', 'PlacementContractError',
    'PIECE_CATALOG', 'Piece', 'get_piece', 'rotate_piece', 'flip_piece', 'orient_piece',
    'PlacementCheck', 'RejectionReason', 'check_placement', 'is_valid_placement',
    'PlayerInventory', 'PlayerState', 'execute_placement',
    'Placement', 'iter_legal_placements', 'has_any_legal_move',
    'GameResult', 'calculate_score', 'detect_game_over',
    'BlokusGame', 'PlacementResult',
]
