"""
Self-play smoke tool.

Plays a deterministic game in which each player always takes the first legal
placement the search finds, then prints the final board and result.
"""

import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from .board import Player
from .config import EngineConfig
from .game import BlokusGame
from .logging_setup import setup_logging
from .scoring import GameResult

logger = logging.getLogger(__name__)


def play_selfplay_game(config: Optional[EngineConfig] = None,
                       max_moves: Optional[int] = None) -> BlokusGame:
    """
    Play a hint-driven game until it ends or max_moves placements are made.

    Players alternate; a player with no legal placement passes.
    """
    game = BlokusGame(config)
    player = Player.ONE

    while max_moves is None or game.move_count < max_moves:
        placement = game.hint(player)
        if placement is None:
            if not game.has_legal_move(player.opponent):
                break
            logger.info(f"{player.name} has no legal placement and passes")
        else:
            game.propose_placement(placement.piece_id, placement.orientation,
                                   placement.anchor, player)
        player = player.opponent

    return game


def format_result(result: GameResult) -> str:
    scores = ", ".join(f"{player.name}={score}" for player, score in result.scores.items())
    if not result.is_over:
        return f"Game still in progress ({scores})"
    if result.is_draw:
        return f"Draw ({scores})"
    return f"Winner: {result.winner.name} ({scores})"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play a deterministic Blokus Duo self-play game")
    parser.add_argument("--board-size", type=int, default=None,
                        help="Board side length (default: BLOKUS_BOARD_SIZE or 20)")
    parser.add_argument("--config", default=None, help="Path to a JSON engine config")
    parser.add_argument("--max-moves", type=int, default=None, help="Stop after this many placements")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = EngineConfig.from_file(args.config) if args.config else EngineConfig.from_env()
    if args.board_size is not None:
        config = replace(config, board_size=args.board_size)

    game = play_selfplay_game(config, args.max_moves)

    print(game.board)
    print(format_result(game.check_game_over()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
