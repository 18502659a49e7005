"""All-or-nothing application of a move sequence.

Piece.applySequence mutates as it goes and has no rollback, so every
sequence is first rehearsed on a throwaway duplicate of the board. Only a
sequence that survives the rehearsal is replayed on the live board.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .errors import InvalidMoveError
from .move import Coordinate, MoveResult, StepSequence, to_coordinate
from .pieces import MoveList, Piece

logger = logging.getLogger(__name__)

CHAIN_SLIDE_MESSAGE = "no slide moves allowed in a chain of multiple moves"


def chain_slide_index(start: Coordinate, steps: StepSequence) -> Optional[int]:
    """Index of the first step of a chain that counts as a slide, if any.

    Step ``i`` is measured against the starting row: its row distance,
    integer-divided by ``i + 1``, equal to 1 marks a slide. Sequences of a
    single step are not checked.
    """
    if len(steps) <= 1:
        return None
    start_row = start[0]
    for index, (row, _col) in enumerate(steps):
        if abs(row - start_row) // (index + 1) == 1:
            return index
    return None


def _rehearse(piece: Piece, steps: StepSequence) -> Piece:
    scratch = piece.board.duplicate()
    stand_in = scratch.getPiece(piece.position)
    if stand_in is None:
        raise RuntimeError("Duplicated board lost the piece being validated.")
    stand_in.applySequence(steps)
    return stand_in


def isValidSequence(piece: Piece, steps: Iterable[Coordinate]) -> bool:
    path = tuple(to_coordinate(step) for step in steps)
    try:
        _rehearse(piece, path)
    except InvalidMoveError as exc:
        logger.debug("Sequence %s for %r is invalid: %s", path, piece, exc)
        return False
    return True


def validateAndApply(piece: Piece, steps: Iterable[Coordinate]) -> MoveResult:
    start = piece.position
    path = tuple(to_coordinate(step) for step in steps)

    if not path:
        return MoveResult.rejected(start, path, "At least one destination is required.")

    if chain_slide_index(start, path) is not None:
        logger.debug("Rejected chain %s -> %s: interior slide", start, path)
        return MoveResult.rejected(start, path, CHAIN_SLIDE_MESSAGE)

    try:
        _rehearse(piece, path)
    except InvalidMoveError as exc:
        logger.debug("Rejected %s -> %s: %s", start, path, exc)
        return MoveResult.rejected(start, path, str(exc))

    was_king = piece.is_king
    captured = piece.applySequence(path)
    result = MoveResult.accepted(
        start,
        path,
        tuple(captured),
        promoted=piece.is_king and not was_king,
    )
    logger.debug("Applied %s", result)
    return result


def previewSteps(piece: Piece, steps: Iterable[Coordinate] = ()) -> MoveList:
    """Legal next destinations for ``piece`` after the partial path ``steps``.

    Nothing is offered once the partial path is invalid or has already
    spent its step on a slide.
    """
    path = tuple(to_coordinate(step) for step in steps)
    if not path:
        return piece.validSteps()
    if chain_slide_index(piece.position, path) is not None:
        return []
    previous_row = path[-2][0] if len(path) > 1 else piece.row
    if abs(path[-1][0] - previous_row) == 1:
        return []
    try:
        stand_in = _rehearse(piece, path)
    except InvalidMoveError:
        return []
    return [
        landing
        for landing in stand_in.jumpMoves()
        if chain_slide_index(piece.position, path + (landing,)) is None
    ]
