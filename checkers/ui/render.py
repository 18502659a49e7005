from __future__ import annotations

from rich.text import Text

from checkers.core.board import Board
from checkers.core.move import BOARD_SIZE
from checkers.core.pieces import Color, Piece

MAN_GLYPH = "☻"
KING_GLYPH = "♛"

_SQUARE_STYLES = {0: "on bright_white", 1: "on bright_cyan"}
_PIECE_STYLES = {Color.RED: "bold red", Color.BLACK: "bold black"}


def piece_glyph(piece: Piece) -> str:
    return KING_GLYPH if piece.is_king else MAN_GLYPH


def render_board(board: Board) -> Text:
    """Colored text grid with row and column indices along the edges."""
    text = Text("   " + "".join(f"{col}  " for col in range(BOARD_SIZE)).rstrip())
    for row, col, piece in board.cells():
        if col == 0:
            text.append(f"\n{row} ")
        square = _SQUARE_STYLES[(row + col) % 2]
        if piece is None:
            text.append("   ", style=square)
        else:
            text.append(f" {piece_glyph(piece)} ", style=f"{_PIECE_STYLES[piece.color]} {square}")
    return text


def render_plain(board: Board) -> str:
    return render_board(board).plain


def render_summary(board: Board) -> str:
    parts = []
    for color in (Color.RED, Color.BLACK):
        parts.append(
            f"{color.value}: {board.countPieces(color)} pieces, {board.countKings(color)} kings"
        )
    return " | ".join(parts)
