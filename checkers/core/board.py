from __future__ import annotations

from typing import Iterator, Optional

from .errors import OutOfBoundsError
from .move import BOARD_SIZE, Coordinate
from .pieces import Color, Piece


BoardStatePiece = tuple[int, int, str, bool]
BoardState = tuple[BoardStatePiece, ...]
Cell = tuple[int, int, Optional[Piece]]

STARTING_ROWS: dict[Color, tuple[int, ...]] = {
    Color.BLACK: (0, 1, 2),
    Color.RED: (5, 6, 7),
}


class Board:
    def __init__(self, populate: bool = True) -> None:
        self.boardSize = BOARD_SIZE
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        if populate:
            self._set_start_pieces()

    @classmethod
    def initialStarting(cls) -> "Board":
        return cls()

    @classmethod
    def empty(cls) -> "Board":
        return cls(populate=False)

    # cell access --------------------------------------------------------

    def getPiece(self, pos: Coordinate) -> Optional[Piece]:
        row, col = self._require_in_bounds(pos)
        return self.board[row][col]

    def setPiece(self, pos: Coordinate, piece: Optional[Piece]) -> None:
        row, col = self._require_in_bounds(pos)
        self.board[row][col] = piece

    def isWithinBounds(self, pos: Coordinate) -> bool:
        row, col = pos
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    def isEmpty(self, pos: Coordinate) -> bool:
        return self.getPiece(pos) is None

    def placePiece(self, color: Color, pos: Coordinate, *, king: bool = False) -> Piece:
        return Piece(color, self, pos, king=king)

    # traversal ----------------------------------------------------------

    def cells(self) -> Iterator[Cell]:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                yield row, col, self.board[row][col]

    def getAllPieces(self, color: Optional[Color] = None) -> list[Piece]:
        return [
            piece
            for _, _, piece in self.cells()
            if piece is not None and (color is None or piece.color == color)
        ]

    def countPieces(self, color: Color) -> int:
        return len(self.getAllPieces(color))

    def countKings(self, color: Color) -> int:
        return sum(1 for piece in self.getAllPieces(color) if piece.is_king)

    def to_state(self) -> BoardState:
        return tuple(
            (row, col, piece.color.value, piece.is_king)
            for row, col, piece in self.cells()
            if piece is not None
        )

    # copying ------------------------------------------------------------

    def duplicate(self) -> "Board":
        clone = Board.empty()
        for _, _, piece in self.cells():
            if piece is not None:
                piece.getCopy(clone)
        return clone

    # helpers ------------------------------------------------------------

    def _require_in_bounds(self, pos: Coordinate) -> Coordinate:
        if not self.isWithinBounds(pos):
            raise OutOfBoundsError(pos)
        row, col = pos
        return row, col

    def _set_start_pieces(self) -> None:
        for color, rows in STARTING_ROWS.items():
            for row in rows:
                for col in range(self.boardSize):
                    if (row + col) % 2 == 1:
                        Piece(color, self, (row, col))

    def __repr__(self) -> str:
        return (
            f"Board(red={self.countPieces(Color.RED)}, "
            f"black={self.countPieces(Color.BLACK)})"
        )
