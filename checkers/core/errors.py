from __future__ import annotations

from typing import Any


class CheckersError(Exception):
    """Base class for every error raised by the rules engine."""


class OutOfBoundsError(CheckersError, IndexError):
    """A coordinate outside the 8x8 grid reached a board accessor.

    This is a contract violation by the caller, not a game-rule error:
    user input must be range-checked before it reaches the board.
    """

    def __init__(self, position: Any) -> None:
        super().__init__(f"Position {position!r} is outside the board.")
        self.position = position


class InvalidMoveError(CheckersError, ValueError):
    """A step or sequence that the rules do not allow."""


class OwnershipError(CheckersError, ValueError):
    """The selected cell is empty or holds a piece of the other side."""
