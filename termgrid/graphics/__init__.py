# graphics/__init__.py

from .canvas import Canvas, Cell, FrameStyle
from .plot_2d import Plot2DCanvas

__all__ = ['Canvas', 'Cell', 'FrameStyle', 'Plot2DCanvas']
