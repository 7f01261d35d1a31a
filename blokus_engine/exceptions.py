"""
Caller-error exceptions raised by the Blokus engine.

Rule violations (an illegal placement) are never raised; they come back as
a rejection reason on the placement result. The exceptions here signal bugs
in the calling code: ids that do not exist, pieces that were already played,
or a commit that skipped validation.
"""


class BlokusEngineError(Exception):
    """Base class for all engine caller errors."""


class UnknownPieceError(BlokusEngineError, LookupError):
    """Raised when a piece id is not part of the catalog."""

    def __init__(self, piece_id):
        self.piece_id = piece_id
        super().__init__(f"Unknown piece id: {piece_id!r}")


class PieceAlreadyUsedError(BlokusEngineError):
    """Raised when a piece is not in the acting player's available set."""

    def __init__(self, piece_id, player=None):
        self.piece_id = piece_id
        self.player = player
        owner = f" for {player.name}" if player is not None else ""
        super().__init__(f"Piece {piece_id!r} has already been used{owner}")


class InvalidOrientationError(BlokusEngineError, ValueError):
    """Raised when an orientation index is outside 0..7."""

    def __init__(self, orientation):
        self.orientation = orientation
        super().__init__(f"Orientation must be in range 0..7, got {orientation!r}")


class PlacementContractError(BlokusEngineError):
    """Raised when a placement is committed without passing validation."""
