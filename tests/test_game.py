"""
End-to-end tests for the BlokusGame facade.
"""

import unittest

import numpy as np

from blokus_engine.board import Player, Position
from blokus_engine.config import EngineConfig
from blokus_engine.exceptions import (
    BlokusEngineError, InvalidOrientationError, PieceAlreadyUsedError, UnknownPieceError
)
from blokus_engine.game import BlokusGame
from blokus_engine.placement import RejectionReason


class TestFirstMoves(unittest.TestCase):

    def setUp(self):
        self.game = BlokusGame()

    def test_corner_placement_accepted(self):
        result = self.game.propose_placement("I1", 0, Position(0, 0), Player.ONE)

        self.assertTrue(result.accepted)
        self.assertEqual(result.message, "Move successful")
        self.assertEqual(result.cells, (Position(0, 0),))
        self.assertEqual(self.game.board.cell_owner(0, 0), Player.ONE)
        self.assertFalse(self.game.is_first_move(Player.ONE))
        self.assertEqual(self.game.used_pieces(Player.ONE), ["I1"])

    def test_off_corner_placement_rejected(self):
        result = self.game.propose_placement("I1", 0, (5, 5), Player.ONE)

        self.assertFalse(result.accepted)
        self.assertEqual(result.reason, RejectionReason.MISSING_START_CORNER)
        self.assertIn("starting corner", result.message.lower())
        self.assertTrue(self.game.is_first_move(Player.ONE))
        self.assertEqual(self.game.board.count_owned(Player.ONE), 0)
        self.assertEqual(self.game.move_count, 0)

    def test_first_move_flags_are_per_player(self):
        self.game.propose_placement("I1", 0, (0, 0), Player.ONE)
        self.assertFalse(self.game.is_first_move(Player.ONE))
        self.assertTrue(self.game.is_first_move(Player.TWO))

        # Player TWO still has to use its own corner
        result = self.game.propose_placement("I1", 0, (1, 1), Player.TWO)
        self.assertEqual(result.reason, RejectionReason.MISSING_START_CORNER)

    def test_tuple_and_position_anchors_match(self):
        a = BlokusGame().propose_placement("V3", 0, (0, 0), Player.ONE)
        b = BlokusGame().propose_placement("V3", 0, Position(0, 0), Player.ONE)
        self.assertEqual(a.cells, b.cells)
        self.assertEqual(a.anchor, Position(0, 0))

    def test_orientation_is_applied(self):
        result = self.game.propose_placement("I2", 1, (0, 0), Player.ONE)
        self.assertEqual(result.cells, (Position(0, 0), Position(1, 0)))

    def test_player_given_as_value(self):
        result = self.game.propose_placement("I1", 0, (19, 19), 2)
        self.assertTrue(result.accepted)
        self.assertEqual(result.player, Player.TWO)


class TestGameSequence(unittest.TestCase):

    def setUp(self):
        self.game = BlokusGame()
        self.game.propose_placement("I1", 0, (0, 0), Player.ONE)
        self.game.propose_placement("I1", 0, (19, 19), Player.TWO)

    def test_diagonal_follow_up_accepted(self):
        result = self.game.propose_placement("I2", 0, (1, 1), Player.ONE)
        self.assertTrue(result.accepted)
        self.assertEqual(result.cells, (Position(1, 1), Position(1, 2)))

    def test_edge_contact_rejected(self):
        self.game.propose_placement("I2", 0, (1, 1), Player.ONE)
        result = self.game.propose_placement("I3", 0, (0, 1), Player.ONE)
        self.assertFalse(result.accepted)
        self.assertEqual(result.reason, RejectionReason.EDGE_CONTACT)

    def test_detached_piece_rejected(self):
        result = self.game.propose_placement("I2", 0, (10, 10), Player.ONE)
        self.assertEqual(result.reason, RejectionReason.NO_CORNER_CONTACT)

    def test_score_tracks_placed_squares(self):
        self.assertEqual(self.game.score(Player.ONE), 88)
        self.game.propose_placement("I2", 0, (1, 1), Player.ONE)
        self.assertEqual(self.game.score(Player.ONE), 86)

        self.game.propose_placement("I3", 0, (0, 1), Player.ONE)
        self.assertEqual(self.game.score(Player.ONE), 86)
        self.assertEqual(self.game.score(Player.TWO), 88)

    def test_rejections_keep_first_move_flag_false(self):
        self.game.propose_placement("I2", 0, (1, 1), Player.ONE)

        edge = self.game.propose_placement("I3", 0, (0, 1), Player.ONE)
        self.assertEqual(edge.reason, RejectionReason.EDGE_CONTACT)
        self.assertFalse(self.game.is_first_move(Player.ONE))

        detached = self.game.propose_placement("V3", 0, (10, 10), Player.ONE)
        self.assertEqual(detached.reason, RejectionReason.NO_CORNER_CONTACT)
        self.assertFalse(self.game.is_first_move(Player.ONE))

    def test_move_history(self):
        self.game.propose_placement("I3", 0, (5, 5), Player.ONE)
        self.assertEqual(self.game.move_count, 2)
        self.assertEqual([(r.player, r.piece_id) for r in self.game.move_history],
                         [(Player.ONE, "I1"), (Player.TWO, "I1")])

    def test_hint_and_anchors_follow_state(self):
        hint = self.game.hint(Player.ONE)
        self.assertEqual(hint.piece_id, "I2")
        self.assertEqual(hint.anchor, Position(1, 1))
        self.assertIn(Position(1, 1), self.game.valid_anchors("I2", 0, Player.ONE))
        self.assertNotIn("I1", self.game.playable_pieces(Player.ONE))
        self.assertTrue(self.game.has_legal_move(Player.TWO))


class TestCallerErrors(unittest.TestCase):
    """Caller errors raise and leave the game unchanged."""

    def setUp(self):
        self.game = BlokusGame()
        self.game.propose_placement("I1", 0, (0, 0), Player.ONE)

    def assertUnchanged(self):
        self.assertEqual(self.game.board.count_owned(Player.ONE), 1)
        self.assertEqual(self.game.move_count, 1)
        self.assertEqual(self.game.used_pieces(Player.ONE), ["I1"])

    def test_unknown_piece(self):
        with self.assertRaises(UnknownPieceError):
            self.game.propose_placement("Q9", 0, (1, 1), Player.ONE)
        self.assertUnchanged()

    def test_reused_piece(self):
        with self.assertRaises(PieceAlreadyUsedError) as ctx:
            self.game.propose_placement("I1", 0, (1, 1), Player.ONE)
        self.assertIn("already been used", str(ctx.exception))
        self.assertUnchanged()

    def test_bad_orientation(self):
        with self.assertRaises(InvalidOrientationError):
            self.game.propose_placement("I2", 8, (1, 1), Player.ONE)
        self.assertUnchanged()

    def test_non_integer_anchor(self):
        with self.assertRaises(TypeError):
            self.game.propose_placement("I2", 0, (1.7, 1), Player.ONE)
        with self.assertRaises(TypeError):
            self.game.propose_placement("I2", 0, ("1", 1), Player.ONE)
        self.assertUnchanged()

    def test_numpy_integer_arguments(self):
        result = self.game.propose_placement("I2", np.int64(1), (np.int64(1), np.int32(1)),
                                             Player.ONE)
        self.assertTrue(result.accepted)
        self.assertEqual(result.anchor, Position(1, 1))
        self.assertEqual(result.cells, (Position(1, 1), Position(2, 1)))

    def test_errors_share_base_class(self):
        for piece_id, orientation in (("Q9", 0), ("I1", 0), ("I2", -1)):
            with self.assertRaises(BlokusEngineError):
                self.game.propose_placement(piece_id, orientation, (1, 1), Player.ONE)
        self.assertUnchanged()


class TestCustomBoards(unittest.TestCase):

    def test_custom_start_corners(self):
        game = BlokusGame(EngineConfig(board_size=6, start_corners=((0, 5), (5, 0))))
        self.assertFalse(game.propose_placement("I1", 0, (0, 0), Player.ONE).accepted)
        self.assertTrue(game.propose_placement("I1", 0, (0, 5), Player.ONE).accepted)
        self.assertTrue(game.propose_placement("I1", 0, (5, 0), Player.TWO).accepted)

    def test_search_debug_applies_to_tray_hints(self):
        game = BlokusGame(EngineConfig(board_size=5, search_debug=True))
        with self.assertLogs("blokus_engine.move_generator", level="INFO") as captured:
            game.playable_pieces(Player.ONE)
        self.assertTrue(any("elapsed_ms" in line for line in captured.output))

    def test_out_of_bounds_on_small_board(self):
        game = BlokusGame(EngineConfig(board_size=5))
        result = game.propose_placement("I5", 0, (4, 1), Player.TWO)
        self.assertEqual(result.reason, RejectionReason.OUT_OF_BOUNDS)


if __name__ == '__main__':
    unittest.main()
