from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from checkers.core.board import Board  # noqa: E402
from checkers.core.game import Game  # noqa: E402
from checkers.core.pieces import Color  # noqa: E402
from checkers.ui.pygame_gui import CheckersGUI  # noqa: E402


class CheckersGUITests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        pygame.init()

    @classmethod
    def tearDownClass(cls) -> None:
        pygame.quit()

    def _gui(self, game: Game | None = None) -> CheckersGUI:
        return CheckersGUI(game if game is not None else Game(), square_size=60)

    def test_pixel_to_cell_mapping(self) -> None:
        gui = self._gui()
        margin, size = gui.margin, gui.square_size
        self.assertEqual(gui._board_coords_from_pos((margin + 5, margin + 5 * size + 5)), (5, 0))
        self.assertEqual(gui._board_coords_from_pos((margin + 7 * size + 1, margin + 1)), (0, 7))
        self.assertIsNone(gui._board_coords_from_pos((margin - 1, margin + 10)))
        self.assertIsNone(gui._board_coords_from_pos((margin + 8 * size, margin)))

    def test_select_extend_and_submit(self) -> None:
        game = Game()
        gui = self._gui(game)

        gui.click_cell((5, 0))
        self.assertIs(gui.selected_piece, game.board.getPiece((5, 0)))
        self.assertEqual(gui.targets, [(4, 1)])

        gui.click_cell((4, 1))
        self.assertEqual(gui.path, [(4, 1)])
        self.assertEqual(gui.targets, [])

        result = gui.submit_path()
        self.assertIsNotNone(result)
        self.assertTrue(result.success)
        self.assertIsNone(gui.selected_piece)
        self.assertIs(game.currentTurnColor(), Color.BLACK)

    def test_double_jump_through_clicks(self) -> None:
        board = Board.empty()
        board.placePiece(Color.RED, (5, 1))
        board.placePiece(Color.BLACK, (4, 2))
        board.placePiece(Color.BLACK, (2, 4))
        game = Game(board)
        gui = self._gui(game)

        gui.click_cell((5, 1))
        gui.click_cell((3, 3))
        self.assertEqual(gui.targets, [(1, 5)])
        gui.click_cell((1, 5))
        result = gui.submit_path()

        self.assertTrue(result.success)
        self.assertEqual(result.captured, ((4, 2), (2, 4)))
        self.assertEqual(board.countPieces(Color.BLACK), 0)

    def test_clicking_opponent_piece_clears_selection(self) -> None:
        gui = self._gui()
        gui.click_cell((5, 0))
        gui.click_cell((2, 1))
        self.assertIsNone(gui.selected_piece)
        self.assertEqual(gui.message, "You must move one of your own pieces.")

    def test_undo_step_and_clear(self) -> None:
        board = Board.empty()
        board.placePiece(Color.RED, (5, 1))
        board.placePiece(Color.BLACK, (4, 2))
        gui = self._gui(Game(board))

        gui.click_cell((5, 1))
        gui.click_cell((3, 3))
        gui.undo_step()
        self.assertEqual(gui.path, [])
        self.assertEqual(gui.targets, [(4, 0), (3, 3)])

        gui.clear_selection("cleared")
        self.assertIsNone(gui.selected_piece)
        self.assertEqual(gui.targets, [])

    def test_rejected_path_keeps_turn(self) -> None:
        game = Game()
        gui = self._gui(game)
        before = game.board.to_state()

        gui.click_cell((5, 0))
        gui.path = [(3, 2)]
        result = gui.submit_path()

        self.assertFalse(result.success)
        self.assertTrue(gui.message.startswith("Rejected"))
        self.assertEqual(gui.path, [])
        self.assertIs(game.currentTurnColor(), Color.RED)
        self.assertEqual(game.board.to_state(), before)

    def test_submit_without_path_does_nothing(self) -> None:
        gui = self._gui()
        self.assertIsNone(gui.submit_path())
        gui.click_cell((5, 0))
        self.assertIsNone(gui.submit_path())

    def test_submit_hands_the_clicked_path_to_the_game(self) -> None:
        board = Board.empty()
        board.placePiece(Color.RED, (5, 1))
        board.placePiece(Color.BLACK, (4, 2))
        board.placePiece(Color.BLACK, (2, 4))
        game = Game(board)
        gui = self._gui(game)
        gui.click_cell((5, 1))
        gui.click_cell((3, 3))
        gui.click_cell((1, 5))

        with mock.patch.object(game, "playTurn", wraps=game.playTurn) as play_turn:
            result = gui.submit_path()

        play_turn.assert_called_once_with((5, 1), [(3, 3), (1, 5)])
        self.assertTrue(result.success)

    def test_keys(self) -> None:
        game = Game()
        gui = self._gui(game)
        game.playTurn((5, 0), [(4, 1)])

        self.assertTrue(gui._handle_key(pygame.K_r))
        self.assertEqual(game.turns_played, 0)
        self.assertFalse(gui._handle_key(pygame.K_q))

    def test_draw_smoke(self) -> None:
        board = Board.empty()
        board.placePiece(Color.RED, (5, 1))
        board.placePiece(Color.BLACK, (4, 2), king=True)
        gui = self._gui(Game(board))
        gui.click_cell((5, 1))
        gui.hover_cell = (3, 3)
        gui._draw()


if __name__ == "__main__":
    unittest.main()
