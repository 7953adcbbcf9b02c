# graphics/canvas.py

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from rich.text import Text

from ..codes import CursorCodes, RESET
from ..errors import InvalidDimensionError
from ..logger import Logger


@dataclass(frozen=True)
class Cell:
    """One grid position: a display character and its feature string."""
    char: str = ' '
    feature: str = ''


class FrameStyle(Enum):
    """Border character sets: (top-left, top-right, bottom-left, bottom-right, horizontal, vertical)."""
    EMPTY = (' ', ' ', ' ', ' ', ' ', ' ')
    ASCII = ('+', '+', '+', '+', '-', '|')
    BOX = ('┌', '┐', '└', '┘', '─', '│')


class Canvas:
    """
    A width x height grid of cells rendered with ANSI escape sequences.

    Drawing outside [0, width) x [0, height) is a no-op. Rendering scans the
    grid row by row, jumps the cursor only at the start of each row and emits
    a feature sequence only where the feature changes, so the output is a
    pure function of the current grid.
    """

    def __init__(self, width: int, height: int,
                 codes: Optional[CursorCodes] = None, logger: Optional[Logger] = None):
        """
        Allocate the grid with every cell blank and undecorated.

        Args:
            width: Number of columns, at least 1
            height: Number of rows, at least 1
            codes: CursorCodes used for positioning and features
            logger: Optional Logger instance
        """
        if width < 1 or height < 1:
            raise InvalidDimensionError(width, height)
        self.width = width
        self.height = height
        self.codes = codes or CursorCodes()
        self.logger = logger or Logger(__name__)
        self._styles: Dict[str, str] = {}
        self._background = Cell()
        self._frame_enabled = False
        self._frame_style = FrameStyle.BOX
        self._frame_feature = ''
        self._cells: List[List[Cell]] = []
        self.clear()

    # Grid state

    def in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at (x, y), or None outside the grid."""
        if not self.in_range(x, y):
            return None
        return self._cells[y][x]

    @property
    def background(self) -> Cell:
        return self._background

    def set_background(self, char: str, feature: str = '') -> None:
        """Set the cell every clear() resets to. Existing cells are kept."""
        self._check_char(char)
        self._style(feature)
        self._background = Cell(char, feature)

    def clear(self) -> None:
        """Reset every cell to the background."""
        self._cells = [[self._background] * self.width for _ in range(self.height)]

    # Frame

    @property
    def frame_enabled(self) -> bool:
        return self._frame_enabled

    @property
    def frame_style(self) -> FrameStyle:
        return self._frame_style

    @property
    def frame_feature(self) -> str:
        return self._frame_feature

    def enable_frame(self, enabled: bool = True) -> None:
        self._frame_enabled = enabled

    def set_frame(self, style: FrameStyle, feature: str = '') -> None:
        """Select the border characters and their feature; enables the frame."""
        self._style(feature)
        self._frame_style = style
        self._frame_feature = feature
        self._frame_enabled = True

    # Drawing

    def put(self, x: int, y: int, char: str, feature: str = '') -> None:
        """Overwrite one cell; out-of-range coordinates are ignored."""
        if not self.in_range(x, y):
            return
        self._check_char(char)
        self._style(feature)
        self._cells[y][x] = Cell(char, feature)

    def line(self, x0: int, y0: int, x1: int, y1: int, char: str, feature: str = '') -> None:
        """Draw a straight line between two points, clipped to the grid."""
        dx, dy = abs(x1 - x0), -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self.put(x0, y0, char, feature)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def text(self, x: int, y: int, string: str, feature: str = '') -> None:
        """Write a string left to right starting at (x, y), clipped to the grid."""
        for i, char in enumerate(string):
            self.put(x + i, y, char, feature)

    # Rendering

    def rows(self) -> List[List[Cell]]:
        """Cells as displayed, including the frame when it is enabled."""
        if not self._frame_enabled:
            return [list(row) for row in self._cells]
        tl, tr, bl, br, h, v = (Cell(c, self._frame_feature) for c in self._frame_style.value)
        rows = [[tl] + [h] * self.width + [tr]]
        rows.extend([v] + list(row) + [v] for row in self._cells)
        rows.append([bl] + [h] * self.width + [br])
        return rows

    def render_to_string(self, x: int = 0, y: int = 0) -> str:
        """
        Build the escape stream reproducing the grid with its top-left
        corner at screen column x, row y.
        """
        out = []
        cursor = None
        current = None
        for row_index, row in enumerate(self.rows()):
            for col_index, cell in enumerate(row):
                position = (x + col_index, y + row_index)
                if position != cursor:
                    out.append(self.codes.move_to(*position))
                if cell.feature != current:
                    out.append(self._style(cell.feature))
                    current = cell.feature
                out.append(cell.char)
                cursor = (position[0] + 1, position[1])
        if current:
            out.append(RESET)
        return ''.join(out)

    def render(self, sink=None, x: int = 0, y: int = 0) -> None:
        """
        Write the rendered grid to a sink.

        Args:
            sink: Object with a write(str) method; defaults to the current sys.stdout
            x: Screen column of the top-left corner
            y: Screen row of the top-left corner
        """
        sink = sink if sink is not None else sys.stdout
        sink.write(self.render_to_string(x, y))
        flush = getattr(sink, 'flush', None)
        if flush:
            flush()

    def refresh(self, terminal) -> None:
        """Redraw the canvas on a cleared terminal and park the cursor below it."""
        terminal.hide_cursor()
        try:
            terminal.clear_screen()
            terminal.write(self.render_to_string())
            terminal.move_to(0, len(self.rows()))
        finally:
            terminal.show_cursor()

    def to_text(self) -> Text:
        """Return the grid as a rich Text, one line per row."""
        lines = []
        for row in self.rows():
            parts = []
            current = None
            for cell in row:
                if cell.feature != current:
                    parts.append(self._style(cell.feature))
                    current = cell.feature
                parts.append(cell.char)
            if current:
                parts.append(RESET)
            lines.append(Text.from_ansi(''.join(parts)))
        return Text('\n').join(lines)

    def __rich__(self) -> Text:
        return self.to_text()

    def _style(self, feature: str) -> str:
        """Composed sequence for a feature string, validated once per distinct string."""
        style = self._styles.get(feature)
        if style is None:
            style = self._styles[feature] = self.codes.compose(feature)
        return style

    @staticmethod
    def _check_char(char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"A cell holds exactly one character, got {char!r}")
