# graphics/plot_2d.py

import math
import numbers
from typing import Callable, Optional, Tuple

from ..codes import CursorCodes
from ..errors import InvalidScaleError
from ..logger import Logger
from .canvas import Canvas


class Plot2DCanvas(Canvas):
    """
    Canvas for plotting real functions of one real variable.

    The offset is the real value at grid column/row 0 and the scale is the
    real distance covered by one grid step, so a 15x10 canvas with offset
    (3, 2) and scale (7, 5) represents x in [3, 108) and y in [2, 52).
    """

    def __init__(self, width: int, height: int,
                 codes: Optional[CursorCodes] = None, logger: Optional[Logger] = None):
        super().__init__(width, height, codes=codes, logger=logger)
        self._offset_x = 0.0
        self._offset_y = 0.0
        self._scale_x = 1.0
        self._scale_y = 1.0

    @property
    def offset_x(self) -> float:
        return self._offset_x

    @property
    def offset_y(self) -> float:
        return self._offset_y

    @property
    def scale_x(self) -> float:
        return self._scale_x

    @property
    def scale_y(self) -> float:
        return self._scale_y

    def set_offset(self, x: float, y: float) -> None:
        self._offset_x = float(x)
        self._offset_y = float(y)

    def set_scale(self, x: float, y: float) -> None:
        if x == 0 or y == 0:
            raise InvalidScaleError(f"Plot scale must be non-zero, got ({x}, {y})")
        self._scale_x = float(x)
        self._scale_y = float(y)

    def domain(self) -> Tuple[float, float]:
        """Half-open x interval covered by the columns."""
        return self._offset_x, self._offset_x + self.width * self._scale_x

    def codomain(self) -> Tuple[float, float]:
        """Half-open y interval covered by the rows."""
        return self._offset_y, self._offset_y + self.height * self._scale_y

    def to_row(self, real_y: float) -> int:
        """Grid row holding a real y value (floored)."""
        return math.floor((real_y - self._offset_y) / self._scale_y)

    def draw(self, function: Callable[[float], float], char: str, feature: str = '') -> None:
        """
        Plot function with one mark per column.

        Columns whose sample is undefined or non-finite are skipped, and
        marks landing on row 0 or at/after the last row are clipped.

        Args:
            function: Callable mapping a real x to a real y
            char: Character marking each plotted point
            feature: Optional feature string for the marks
        """
        skipped = 0
        for x in range(self.width):
            real_x = self._offset_x + x * self._scale_x
            try:
                real_y = function(real_x)
                if not isinstance(real_y, numbers.Real) or not math.isfinite(real_y):
                    skipped += 1
                    continue
                y = self.to_row(real_y)
            except (ArithmeticError, ValueError):
                skipped += 1
                continue
            if 0 < y < self.height:
                self.put(x, y, char, feature)
        if skipped:
            self.logger.debug(f"Skipped {skipped} undefined samples while plotting")
