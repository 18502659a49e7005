from __future__ import annotations

from importlib import import_module

from .console import ConsolePlayer, run_console
from .render import render_board, render_plain

__all__ = ["CheckersGUI", "ConsolePlayer", "render_board", "render_plain", "run_console"]


def __getattr__(name: str):
    # pygame is only imported when the window front-end is asked for
    if name == "CheckersGUI":
        module = import_module(".pygame_gui", __name__)
        return getattr(module, name)
    raise AttributeError(name)
