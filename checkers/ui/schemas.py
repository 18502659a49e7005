from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from checkers.core.move import BOARD_SIZE, Coordinate


class CoordinateModel(BaseModel):
    """A board square typed by a player, e.g. ``"2,3"``."""

    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)

    @model_validator(mode="before")
    @classmethod
    def _split_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            parts = [part.strip() for part in value.split(",")]
            if len(parts) != 2:
                raise ValueError(f"Expected 'row,col', got {value!r}.")
            return {"row": parts[0], "col": parts[1]}
        if isinstance(value, (tuple, list)):
            if len(value) != 2:
                raise ValueError(f"Expected a (row, col) pair, got {value!r}.")
            return {"row": value[0], "col": value[1]}
        return value

    def as_tuple(self) -> Coordinate:
        return (self.row, self.col)


class PathModel(BaseModel):
    """One or more destinations separated by whitespace, e.g. ``"2,0 4,2"``."""

    steps: list[CoordinateModel] = Field(
        ..., min_length=1, description="Ordered path after the starting square."
    )

    @model_validator(mode="before")
    @classmethod
    def _split_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"steps": value.split()}
        if isinstance(value, (tuple, list)):
            return {"steps": list(value)}
        return value

    def as_tuples(self) -> tuple[Coordinate, ...]:
        return tuple(step.as_tuple() for step in self.steps)


class MoveRequest(BaseModel):
    start: CoordinateModel
    steps: list[CoordinateModel] = Field(
        ..., min_length=1, description="Ordered path after the starting square."
    )

    def path(self) -> tuple[Coordinate, ...]:
        return tuple(step.as_tuple() for step in self.steps)


def parse_coordinate(text: str) -> Coordinate:
    return CoordinateModel.model_validate(text).as_tuple()


def parse_path(text: str) -> tuple[Coordinate, ...]:
    return PathModel.model_validate(text).as_tuples()
