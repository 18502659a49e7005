from __future__ import annotations

import logging

import pygame
from pygame import gfxdraw

from checkers.core.errors import OwnershipError
from checkers.core.game import Game
from checkers.core.move import BOARD_SIZE, Coordinate, MoveResult
from checkers.core.pieces import Color, Piece
from checkers.core.validator import previewSteps

logger = logging.getLogger(__name__)


class CheckersGUI:
    """Mouse-driven front-end.

    Clicking a piece of the side on turn selects it; each further click on a
    highlighted square extends the path. Enter or a right click submits the
    whole path to the engine in one go.
    """

    def __init__(self, game: Game, square_size: int = 80, info_height: int = 170) -> None:
        self.game = game
        self.square_size = square_size
        self.board_pixels = self.square_size * BOARD_SIZE
        self.info_height = info_height

        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 22)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.selected_piece: Piece | None = None
        self.path: list[Coordinate] = []
        self.targets: list[Coordinate] = []
        self.hover_cell: Coordinate | None = None
        self.message = "Select a piece to move."

        self.colors = {
            "light": (233, 210, 173),
            "dark": (145, 104, 66),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "path": (110, 190, 120),
            "red_piece": (196, 40, 40),
            "black_piece": (35, 35, 35),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "info_bg": (40, 46, 60),
            "panel_border": (86, 94, 110),
            "text": (230, 230, 230),
            "error": (240, 120, 110),
            "king": (255, 215, 0),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key)
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_coords_from_pos(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        self._handle_click(event.pos)
                    elif event.button == 3:
                        self.submit_path()

            self._draw()
            pygame.display.flip()
            self.clock.tick(60)

    # input --------------------------------------------------------------

    def _handle_key(self, key: int) -> bool:
        if key == pygame.K_q:
            return False
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.submit_path()
        elif key == pygame.K_BACKSPACE:
            self.undo_step()
        elif key == pygame.K_ESCAPE:
            self.clear_selection("Selection cleared.")
        elif key == pygame.K_r:
            self.game.reset()
            self.clear_selection("New game.")
        return True

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is not None:
            self.click_cell(cell)

    def click_cell(self, cell: Coordinate) -> None:
        if self.selected_piece is not None and cell in self.targets:
            self.path.append(cell)
            self._refresh_targets()
            return

        if self.selected_piece is not None and not self.path and cell == self.selected_piece.position:
            self.clear_selection("Selection cleared.")
            return

        try:
            piece = self.game.selectPiece(cell)
        except OwnershipError as exc:
            logger.debug("Ignored click on %s: %s", cell, exc)
            self.clear_selection("You must move one of your own pieces.")
            return

        self.selected_piece = piece
        self.path = []
        self._refresh_targets()
        self.message = f"Selected {cell[0]},{cell[1]}."

    def undo_step(self) -> None:
        if self.path:
            self.path.pop()
            self._refresh_targets()

    def submit_path(self) -> MoveResult | None:
        if self.selected_piece is None or not self.path:
            return None
        result = self.game.playTurn(self.selected_piece.position, list(self.path))
        if result.success:
            self.clear_selection(f"Played {result}.")
        else:
            self.path = []
            self._refresh_targets()
            self.message = f"Rejected: {result.reason}"
        return result

    def clear_selection(self, message: str) -> None:
        self.selected_piece = None
        self.path = []
        self.targets = []
        self.message = message

    def _refresh_targets(self) -> None:
        if self.selected_piece is None:
            self.targets = []
            return
        self.targets = previewSteps(self.selected_piece, self.path)

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Coordinate | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return (y // self.square_size, x // self.square_size)

    # drawing ------------------------------------------------------------

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()

    def _draw_board(self) -> None:
        for row, col, _piece in self.game.board.cells():
            color = self.colors["light"] if (row + col) % 2 == 0 else self.colors["dark"]
            pygame.draw.rect(self.screen, color, self._rect_for_cell(row, col))
        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        pygame.draw.rect(self.screen, self.colors["outline"], board_rect, 2)

        for idx in range(BOARD_SIZE):
            label = self.small_font.render(str(idx), True, self.colors["text"])
            offset = self.margin + idx * self.square_size + self.square_size // 2
            self.screen.blit(label, label.get_rect(center=(offset, self.margin - 18)))
            self.screen.blit(label, label.get_rect(center=(self.margin - 18, offset)))

    def _draw_selection(self) -> None:
        if self.selected_piece is not None:
            rect = self._rect_for_cell(*self.selected_piece.position)
            pygame.draw.rect(self.screen, self.colors["selected"], rect, 4, border_radius=8)

        for step in self.path:
            pygame.draw.rect(self.screen, self.colors["path"], self._rect_for_cell(*step), 4, border_radius=8)

        for target in self.targets:
            cx, cy = self._center_for_cell(*target)
            radius = 16 if target == self.hover_cell else 12
            gfxdraw.filled_circle(self.screen, cx, cy, radius, (*self.colors["highlight"], 140))
            gfxdraw.aacircle(self.screen, cx, cy, radius, self.colors["outline"])

    def _draw_pieces(self) -> None:
        radius = (self.square_size - 14) // 2
        for piece in self.game.board.getAllPieces():
            center = self._center_for_cell(piece.row, piece.col)
            base = self.colors["red_piece"] if piece.color == Color.RED else self.colors["black_piece"]
            pygame.draw.circle(self.screen, base, center, radius)
            pygame.draw.circle(self.screen, self.colors["outline"], center, radius, 2)
            if piece.is_king:
                crown = self.king_font.render("K", True, self.colors["king"])
                self.screen.blit(crown, crown.get_rect(center=center))

    def _draw_info_panel(self) -> None:
        panel_top = self.margin + self.board_pixels + 20
        info_rect = pygame.Rect(self.margin, panel_top, self.board_pixels, self.info_height - 20)
        pygame.draw.rect(self.screen, self.colors["info_bg"], info_rect, border_radius=16)
        pygame.draw.rect(self.screen, self.colors["panel_border"], info_rect, 2, border_radius=16)

        board = self.game.board
        path_text = " ".join(f"{row},{col}" for row, col in self.path) or "-"
        lines = [
            (f"Turn {self.game.turns_played + 1}: {self.game.current_player.value.capitalize()} to move", self.font),
            (
                f"Red: {board.countPieces(Color.RED)} pieces, {board.countKings(Color.RED)} kings   "
                f"Black: {board.countPieces(Color.BLACK)} pieces, {board.countKings(Color.BLACK)} kings",
                self.small_font,
            ),
            (f"Path: {path_text}", self.small_font),
            (self.message, self.small_font),
            ("Enter/right click: play  |  Backspace: undo step  |  Esc: clear  |  R: reset  |  Q: quit", self.small_font),
        ]
        y_offset = info_rect.top + 14
        for text, font in lines:
            color = self.colors["error"] if text.startswith(("Rejected", "Invalid")) else self.colors["text"]
            surface = font.render(text, True, color)
            self.screen.blit(surface, (info_rect.left + 20, y_offset))
            y_offset += surface.get_height() + 6

    def _rect_for_cell(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(
            self.margin + col * self.square_size,
            self.margin + row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )
