"""Two-player checkers: rules engine plus console and pygame front-ends."""

from .core import Board, Color, Game, MoveResult, Piece, validateAndApply

__all__ = ["Board", "Color", "Game", "MoveResult", "Piece", "validateAndApply"]
