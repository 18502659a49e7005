from __future__ import annotations

import logging
from typing import Callable, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from checkers.core.errors import OwnershipError
from checkers.core.game import Game
from checkers.core.move import MoveResult
from checkers.core.pieces import Color, Piece

from .render import render_board, render_summary
from .schemas import parse_coordinate, parse_path

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]

QUIT_WORDS = frozenset({"q", "quit", "exit"})
PIECE_PROMPT = "which piece do you want to move? (e.g. 5,0) "
PATH_PROMPT = (
    "where do you want to move it to? you can enter multiple coordinates "
    "(e.g. 4,1 or 3,2 1,4), or press enter to pick another piece "
)


class QuitRequested(Exception):
    """Raised when the player types a quit word at any prompt."""


class ConsolePlayer:
    """Prompts one side for a piece and a path until the engine accepts a move."""

    def __init__(self, color: Color, console: Console, read_line: Optional[LineReader] = None) -> None:
        self.color = color
        self.console = console
        self.read_line = read_line if read_line is not None else console.input

    def play_turn(self, game: Game) -> MoveResult:
        while True:
            piece = self._ask_for_piece(game)
            result = self._ask_for_path(game, piece)
            if result is not None:
                return result

    def _read(self, prompt: str) -> str:
        text = self.read_line(prompt).strip()
        if text.lower() in QUIT_WORDS:
            raise QuitRequested()
        return text

    def _ask_for_piece(self, game: Game) -> Piece:
        while True:
            text = self._read(PIECE_PROMPT)
            try:
                return game.selectPiece(parse_coordinate(text))
            except ValidationError:
                self.console.print("enter a square as row,col with both values between 0 and 7", style="yellow")
            except OwnershipError as exc:
                logger.debug("Rejected selection %r: %s", text, exc)
                self.console.print("you must move one of your own pieces", style="yellow")

    def _ask_for_path(self, game: Game, piece: Piece) -> Optional[MoveResult]:
        while True:
            text = self._read(PATH_PROMPT)
            if not text:
                return None
            try:
                steps = parse_path(text)
            except ValidationError:
                self.console.print("enter destinations as row,col separated by spaces", style="yellow")
                continue
            result = game.makeMove(piece, steps)
            if result.success:
                return result
            self.console.print(f"error: {escape(result.reason or 'invalid move')}", style="red")


def run_console(
    game: Optional[Game] = None,
    *,
    console: Optional[Console] = None,
    read_line: Optional[LineReader] = None,
    max_turns: Optional[int] = None,
) -> Game:
    """Alternate the two players on the console until they quit.

    ``max_turns`` stops the loop after that many accepted moves.
    """
    game = game if game is not None else Game()
    console = console if console is not None else Console()
    players = {
        color: ConsolePlayer(color, console, read_line)
        for color in (Color.RED, Color.BLACK)
    }

    played = 0
    try:
        while max_turns is None or played < max_turns:
            console.print()
            console.print(render_board(game.board))
            console.print(render_summary(game.board), markup=False)
            console.print()
            console.print(f"current player: {game.current_player.value}", markup=False)
            result = players[game.current_player].play_turn(game)
            console.print(f"played {result}", markup=False)
            played += 1
    except (QuitRequested, EOFError, KeyboardInterrupt):
        console.print("goodbye")
    return game
