# display.py

from typing import Optional

from .codes import CursorCodes, FeatureDefinitions
from .graphics import Canvas, Plot2DCanvas
from .logger import Logger
from .redirection import DEFAULT_FILENAME, OutputCapture, StreamSlot
from .terminal import Terminal


class Display:
    """
    Coordinates the terminal components in a hierarchical structure.

    Component Hierarchy:
    FeatureDefinitions (base) → CursorCodes → Terminal
    """
    def __init__(self, definitions: Optional[FeatureDefinitions] = None,
                 logging_enabled: bool = False):
        """Initialize components in dependency order."""
        self.logger = Logger('termgrid', logging_enabled=logging_enabled)
        self.definitions = definitions or FeatureDefinitions()
        self.codes = CursorCodes(self.definitions)
        self.terminal = Terminal(codes=self.codes)

    def create_canvas(self, width: int, height: int) -> Canvas:
        return Canvas(width, height, codes=self.codes, logger=self.logger)

    def create_plot(self, width: int, height: int) -> Plot2DCanvas:
        return Plot2DCanvas(width, height, codes=self.codes, logger=self.logger)

    def create_capture(self, filename: str = DEFAULT_FILENAME,
                       slot: Optional[StreamSlot] = None) -> OutputCapture:
        return OutputCapture(filename, slot=slot, logger=self.logger)

    def show(self, canvas: Canvas) -> None:
        """Redraw a canvas on the terminal."""
        canvas.refresh(self.terminal)
