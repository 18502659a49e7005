from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

BOARD_SIZE = 8

Coordinate = tuple[int, int]
Direction = tuple[int, int]
StepSequence = tuple[Coordinate, ...]


def to_coordinate(value: Sequence[int]) -> Coordinate:
    row, col = value
    return (int(row), int(col))


def row_distance(origin: Coordinate, target: Coordinate) -> int:
    return abs(target[0] - origin[0])


def midpoint(origin: Coordinate, target: Coordinate) -> Coordinate:
    return ((origin[0] + target[0]) // 2, (origin[1] + target[1]) // 2)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a validated move sequence.

    ``captured`` lists the cells cleared on the live board, in the order the
    jumps happened. A failed result never carries captures.
    """

    success: bool
    start: Coordinate
    steps: StepSequence
    reason: Optional[str] = None
    captured: StepSequence = ()
    promoted: bool = False

    @classmethod
    def accepted(
        cls,
        start: Coordinate,
        steps: StepSequence,
        captured: StepSequence = (),
        *,
        promoted: bool = False,
    ) -> "MoveResult":
        return cls(True, start, steps, None, captured, promoted)

    @classmethod
    def rejected(cls, start: Coordinate, steps: StepSequence, reason: str) -> "MoveResult":
        return cls(False, start, steps, reason)

    @property
    def end(self) -> Coordinate:
        return self.steps[-1] if self.steps else self.start

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        path = [f"{row},{col}" for row, col in (self.start, *self.steps)]
        text = connector.join(path)
        if not self.success:
            text += f" (rejected: {self.reason})"
        return text
