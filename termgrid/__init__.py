# __init__.py

from .logger import Logger
from .errors import (
    TermGridError, UnsupportedFeatureError, InvalidDimensionError,
    InvalidScaleError, FileAccessError,
)
from .codes import FeatureDefinitions, CursorCodes
from .graphics import Canvas, Cell, FrameStyle, Plot2DCanvas
from .redirection import OutputCapture, StdStreamSlot
from .terminal import Terminal
from .display import Display

__all__ = [
    "Display", "Logger", "Terminal",
    "FeatureDefinitions", "CursorCodes",
    "Canvas", "Cell", "FrameStyle", "Plot2DCanvas",
    "OutputCapture", "StdStreamSlot",
    "TermGridError", "UnsupportedFeatureError", "InvalidDimensionError",
    "InvalidScaleError", "FileAccessError",
]
