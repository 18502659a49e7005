"""Core checkers rules engine package."""

from .board import Board
from .errors import CheckersError, InvalidMoveError, OutOfBoundsError, OwnershipError
from .game import Game, TurnState
from .move import BOARD_SIZE, Coordinate, MoveResult
from .pieces import Color, Piece
from .validator import isValidSequence, previewSteps, validateAndApply

__all__ = [
	"BOARD_SIZE",
	"Board",
	"CheckersError",
	"Color",
	"Coordinate",
	"Game",
	"InvalidMoveError",
	"MoveResult",
	"OutOfBoundsError",
	"OwnershipError",
	"Piece",
	"TurnState",
	"isValidSequence",
	"previewSteps",
	"validateAndApply",
]
