"""
Scoring and game-over detection.

Score is the number of squares a player still holds in unplaced pieces, so
lower is better.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional

from .board import Board, Player
from .inventory import PlayerState
from .move_generator import SEARCH_DEBUG, has_any_legal_move
from .pieces import get_piece, is_catalog_id

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """
    Result of a game-over check.

    Attributes:
        is_over: True when neither player can place another piece
        winner: Player with the strictly lower remaining score, if the game is over
        is_draw: True when the game is over with equal scores
        scores: Remaining-square score per player
    """
    is_over: bool
    winner: Optional[Player] = None
    is_draw: bool = False
    scores: Dict[Player, int] = field(default_factory=dict)


def calculate_score(available_ids: Iterable[str]) -> int:
    """Sum of the sizes of every unplaced piece."""
    return sum(get_piece(piece_id).size for piece_id in available_ids if is_catalog_id(piece_id))


def decide_winner(scores: Mapping[Player, int]) -> Optional[Player]:
    """Return the player with the strictly lowest score, or None on a tie."""
    ordered = sorted(scores.items(), key=lambda item: item[1])
    if len(ordered) > 1 and ordered[0][1] == ordered[1][1]:
        return None
    return ordered[0][0]


def detect_game_over(board: Board, player_states: Mapping[Player, PlayerState],
                     debug: bool = SEARCH_DEBUG) -> GameResult:
    """
    Check whether the game has ended.

    The game is over exactly when no player has a legal placement on the
    current board. Nothing is mutated, so this is safe to call at any time.

    Args:
        board: Current board state
        player_states: State for every player, keyed by player

    Returns:
        GameResult with scores always filled in
    """
    scores = {
        player: calculate_score(state.inventory.available_ids())
        for player, state in player_states.items()
    }

    for player, state in player_states.items():
        if has_any_legal_move(board, state.inventory.available_ids(), player,
                              state.is_first_move, debug):
            return GameResult(is_over=False, scores=scores)

    winner = decide_winner(scores)
    result = GameResult(is_over=True, winner=winner, is_draw=winner is None, scores=scores)
    named_scores = {player.name: score for player, score in scores.items()}
    logger.info(f"Game over: winner={winner.name if winner else 'draw'}, scores={named_scores}")
    return result
