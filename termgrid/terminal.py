# terminal.py

import sys
import shutil
from dataclasses import dataclass
from typing import Optional

from .codes import CursorCodes


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class Terminal:
    """Low-level terminal operations on the current standard output."""

    def __init__(self, codes: Optional[CursorCodes] = None):
        self.codes = codes or CursorCodes()
        self._cursor_visible = True

    @property
    def stream(self):
        # Resolved on every access so an active output capture is honoured.
        return sys.stdout

    def is_terminal(self) -> bool:
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())

    def get_size(self) -> TerminalSize:
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    @property
    def width(self) -> int:
        return self.get_size().columns

    @property
    def height(self) -> int:
        return self.get_size().lines

    def _manage_cursor(self, show: bool) -> None:
        if self._cursor_visible != show and self.is_terminal():
            self._cursor_visible = show
            self.write(self.codes.control('show-cursor' if show else 'hide-cursor'))

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    def write(self, text: str = "", feature: str = "", newline: bool = False) -> None:
        """Write text, optionally decorated with a feature string."""
        stream = self.stream
        stream.write(self.codes.decorate(text, feature) if feature else text)
        if newline:
            stream.write('\n')
        stream.flush()

    def clear_screen(self) -> None:
        if self.is_terminal():
            self.write(self.codes.control('clear-screen') + self.codes.control('home'))

    def move_to(self, x: int, y: int) -> None:
        self.write(self.codes.move_to(x, y))
