from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from checkers.core.game import Game

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play two-player checkers.")
	parser.add_argument("--ui", choices=("console", "gui"), default="console", help="Front-end to play with.")
	parser.add_argument("--square-size", type=int, default=80, help="Pixel size of a board square in the window.")
	parser.add_argument("--log-level", default="warning", help="Logging level for engine diagnostics.")
	return parser.parse_args(argv)


def configure_logging(level_name: str) -> None:
	level = getattr(logging, level_name.upper(), None)
	if not isinstance(level, int):
		raise ValueError(f"Unknown log level '{level_name}'.")
	logging.basicConfig(level=level, format=LOG_FORMAT)


def run_gui(game: Game, square_size: int) -> None:
	import pygame

	from checkers.ui.pygame_gui import CheckersGUI

	pygame.init()
	try:
		gui = CheckersGUI(game, square_size=square_size)
		gui.run()
	finally:
		pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
	args = parse_args(argv)
	configure_logging(args.log_level)
	game = Game()
	if args.ui == "gui":
		run_gui(game, args.square_size)
	else:
		from checkers.ui.console import run_console

		run_console(game)


if __name__ == "__main__":
	main()
