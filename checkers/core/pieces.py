from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from .errors import InvalidMoveError, OutOfBoundsError
from .move import BOARD_SIZE, Coordinate, Direction, midpoint, row_distance, to_coordinate

if TYPE_CHECKING:
    from .board import Board


logger = logging.getLogger(__name__)

MoveList = list[Coordinate]
KING_DIRECTIONS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class Color(Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED

    @property
    def forward(self) -> int:
        """Row delta of a forward step: red climbs toward row 0, black descends."""
        return -1 if self is Color.RED else 1

    @property
    def far_row(self) -> int:
        return 0 if self is Color.RED else BOARD_SIZE - 1


class Piece:
    """A checker bound to the board that hosts it.

    The board owns the grid; a piece keeps a back reference to the board
    until it is captured. Constructing a piece places it on the board, which
    must have that cell free.
    """

    def __init__(self, color: Color, board: "Board", position: Coordinate, *, king: bool = False) -> None:
        if not isinstance(color, Color):
            raise ValueError(f"Unsupported color {color!r}.")
        position = to_coordinate(position)
        if not board.isWithinBounds(position):
            raise OutOfBoundsError(position)
        occupant = board.getPiece(position)
        if occupant is not None:
            raise InvalidMoveError(f"{position} is already occupied by {occupant!r}.")
        self._color = color
        self._board: Optional["Board"] = board
        self.row, self.col = position
        self._is_king = bool(king)
        board.setPiece(position, self)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def position(self) -> Coordinate:
        return (self.row, self.col)

    @property
    def is_king(self) -> bool:
        return self._is_king

    @property
    def board(self) -> "Board":
        if self._board is None:
            raise RuntimeError(f"{self!r} is no longer on a board.")
        return self._board

    @property
    def on_board(self) -> bool:
        return self._board is not None

    def getCopy(self, board: "Board") -> "Piece":
        return Piece(self._color, board, self.position, king=self._is_king)

    # move generation ----------------------------------------------------

    def directions(self) -> tuple[Direction, ...]:
        if self._is_king:
            return KING_DIRECTIONS
        forward = self._color.forward
        return ((forward, 1), (forward, -1))

    def slideMoves(self) -> MoveList:
        board = self.board
        moves: MoveList = []
        for dr, dc in self.directions():
            target = (self.row + dr, self.col + dc)
            if board.isWithinBounds(target) and board.isEmpty(target):
                moves.append(target)
        return moves

    def jumpMoves(self) -> MoveList:
        board = self.board
        moves: MoveList = []
        for dr, dc in self.directions():
            over = (self.row + dr, self.col + dc)
            landing = (self.row + 2 * dr, self.col + 2 * dc)
            if not board.isWithinBounds(over) or not board.isWithinBounds(landing):
                continue
            jumped = board.getPiece(over)
            if jumped is None or jumped.color == self._color:
                continue
            if board.isEmpty(landing):
                moves.append(landing)
        return moves

    def validSteps(self) -> MoveList:
        return self.slideMoves() + self.jumpMoves()

    # move application ---------------------------------------------------

    def applySlide(self, to: Coordinate) -> None:
        target = to_coordinate(to)
        if target not in self.slideMoves():
            raise InvalidMoveError(f"{self!r} cannot slide to {target}.")
        self._relocate(target)
        self._check_promotion()

    def applyJump(self, to: Coordinate) -> Coordinate:
        target = to_coordinate(to)
        if target not in self.jumpMoves():
            raise InvalidMoveError(f"{self!r} cannot jump to {target}.")
        board = self.board
        origin = self.position
        self._relocate(target)

        captured_at = midpoint(origin, target)
        captured = board.getPiece(captured_at)
        board.setPiece(captured_at, None)
        if captured is not None:
            captured._detach()
        logger.debug("%r captured %r at %s", self, captured, captured_at)

        self._check_promotion()
        return captured_at

    def applyStep(self, to: Coordinate) -> Optional[Coordinate]:
        """Slide or jump depending on how many rows ``to`` is away.

        Returns the captured cell for a jump and ``None`` for a slide.
        """
        target = to_coordinate(to)
        distance = row_distance(self.position, target)
        if distance == 0:
            raise InvalidMoveError(f"{target} is not a step away from {self.position}.")
        if distance == 1:
            self.applySlide(target)
            return None
        return self.applyJump(target)

    def applySequence(self, steps: Iterable[Coordinate]) -> list[Coordinate]:
        captured: list[Coordinate] = []
        for step in steps:
            taken = self.applyStep(step)
            if taken is not None:
                captured.append(taken)
        return captured

    def promote(self) -> None:
        self._is_king = True

    def _check_promotion(self) -> bool:
        if self._is_king or self.row != self._color.far_row:
            return False
        self.promote()
        logger.info("%s piece crowned at %s", self._color.value, self.position)
        return True

    def _relocate(self, target: Coordinate) -> None:
        board = self.board
        board.setPiece(target, self)
        board.setPiece(self.position, None)
        self.row, self.col = target

    def _detach(self) -> None:
        self._board = None

    def __repr__(self) -> str:
        piece_type = "K" if self._is_king else "M"
        return f"{piece_type}({self._color.name},{self.row},{self.col})"
