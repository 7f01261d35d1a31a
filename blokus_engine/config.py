"""
Engine configuration for Blokus Duo games.

Configuration can come from defaults, environment variables or a JSON file.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 20

# Smallest board on which no two distinct corners share an edge
MIN_BOARD_SIZE = 3

Corner = Tuple[int, int]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() not in ("", "0", "false", "no")


@dataclass(frozen=True)
class EngineConfig:
    """
    Structured engine configuration.

    Attributes:
        board_size: Side length of the square board
        start_corners: Starting corner (row, col) for player one and player two.
            None uses the top-left and bottom-right corners.
        search_debug: Log timing of every legality search at INFO level
    """

    board_size: int = DEFAULT_BOARD_SIZE
    start_corners: Optional[Tuple[Corner, Corner]] = None
    search_debug: bool = field(default=False, compare=False)

    def __post_init__(self):
        self.validate()

    def resolved_start_corners(self) -> Tuple[Corner, Corner]:
        """Return the starting corners, filling in the default diagonal pair."""
        if self.start_corners is not None:
            return self.start_corners
        last = self.board_size - 1
        return ((0, 0), (last, last))

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If the board is too small or the corners are unusable
        """
        if not isinstance(self.board_size, int) or self.board_size < MIN_BOARD_SIZE:
            raise ValueError(
                f"board_size must be an integer >= {MIN_BOARD_SIZE}, got {self.board_size!r}"
            )

        if self.start_corners is None:
            return

        if len(self.start_corners) != 2:
            raise ValueError("start_corners must name exactly two corners")

        last = self.board_size - 1
        board_corners = {(0, 0), (0, last), (last, 0), (last, last)}
        first, second = (tuple(corner) for corner in self.start_corners)
        for corner in (first, second):
            if corner not in board_corners:
                raise ValueError(f"Start corner {corner} is not a corner of the board")
        if first == second:
            raise ValueError("Players must start from distinct corners")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        Build a config from BLOKUS_BOARD_SIZE and BLOKUS_SEARCH_DEBUG.

        Unset variables fall back to defaults.
        """
        raw_size = os.getenv("BLOKUS_BOARD_SIZE")
        board_size = DEFAULT_BOARD_SIZE
        if raw_size:
            try:
                board_size = int(raw_size)
            except ValueError:
                raise ValueError(f"BLOKUS_BOARD_SIZE must be an integer, got {raw_size!r}") from None
        return cls(board_size=board_size, search_debug=_env_flag("BLOKUS_SEARCH_DEBUG"))

    @classmethod
    def from_file(cls, config_path) -> "EngineConfig":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to a .json file with any of the dataclass fields

        Returns:
            EngineConfig instance

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file format is unsupported or values are invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        if config_path.suffix != ".json":
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        corners = data.get("start_corners")
        if corners is not None:
            corners = tuple(tuple(corner) for corner in corners)

        config = cls(
            board_size=data.get("board_size", DEFAULT_BOARD_SIZE),
            start_corners=corners,
            search_debug=bool(data.get("search_debug", False)),
        )
        logger.debug(f"Loaded engine config from {config_path}: {config}")
        return config
