from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

from .board import Board
from .errors import OwnershipError
from .move import Coordinate, MoveResult, to_coordinate
from .pieces import Color, Piece
from .validator import validateAndApply

logger = logging.getLogger(__name__)


class TurnState(Enum):
    RED_TURN = Color.RED
    BLACK_TURN = Color.BLACK

    @property
    def color(self) -> Color:
        return self.value

    def next(self) -> "TurnState":
        return TurnState.BLACK_TURN if self is TurnState.RED_TURN else TurnState.RED_TURN


class Game:
    """Two players taking turns on one board.

    Red moves first and the turn only passes after an accepted sequence.
    There is no terminal state: the game runs until the front-end stops it.
    """

    def __init__(self, board: Optional[Board] = None, *, first: Color = Color.RED) -> None:
        self.board = board if board is not None else Board.initialStarting()
        self.turn = TurnState(first)
        self.turns_played = 0
        self.last_result: Optional[MoveResult] = None

    def reset(self) -> None:
        self.board = Board.initialStarting()
        self.turn = TurnState.RED_TURN
        self.turns_played = 0
        self.last_result = None

    @property
    def current_player(self) -> Color:
        return self.turn.color

    def currentTurnColor(self) -> Color:
        return self.turn.color

    def switchTurn(self) -> None:
        self.turn = self.turn.next()

    def selectPiece(self, pos: Coordinate) -> Piece:
        position = to_coordinate(pos)
        piece = self.board.getPiece(position)
        if piece is None:
            raise OwnershipError(f"There is no piece at {position}.")
        if piece.color != self.current_player:
            raise OwnershipError(
                f"The piece at {position} belongs to {piece.color.value}, "
                f"but it is {self.current_player.value}'s turn."
            )
        return piece

    def makeMove(self, piece: Piece, steps: Iterable[Coordinate]) -> MoveResult:
        if piece.color != self.current_player:
            raise OwnershipError(f"{piece!r} cannot move on {self.current_player.value}'s turn.")
        if not piece.on_board or self.board.getPiece(piece.position) is not piece:
            raise ValueError("Piece must belong to the current board to move it.")

        result = validateAndApply(piece, steps)
        if result.success:
            self.last_result = result
            self.turns_played += 1
            logger.debug("Turn %d by %s: %s", self.turns_played, self.current_player.value, result)
            self.switchTurn()
        return result

    def playTurn(self, start: Coordinate, steps: Iterable[Coordinate]) -> MoveResult:
        return self.makeMove(self.selectPiece(start), steps)
