# test_plot_2d.py

import math
import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termgrid.graphics import Cell, Plot2DCanvas
from termgrid.errors import InvalidScaleError


class TestPlot2DCanvas:
    """Test suite for function plotting on a canvas."""

    def setup_method(self):
        self.plot = Plot2DCanvas(10, 10)

    def marks(self, plot):
        return {(x, y) for y in range(plot.height) for x in range(plot.width)
                if plot.cell(x, y) != Cell()}

    def test_defaults(self):
        assert (self.plot.offset_x, self.plot.offset_y) == (0.0, 0.0)
        assert (self.plot.scale_x, self.plot.scale_y) == (1.0, 1.0)

    def test_setters(self):
        self.plot.set_offset(3, 2)
        self.plot.set_scale(7, 5)
        assert (self.plot.offset_x, self.plot.offset_y) == (3.0, 2.0)
        assert (self.plot.scale_x, self.plot.scale_y) == (7.0, 5.0)

    def test_domain_and_codomain(self):
        plot = Plot2DCanvas(15, 10)
        plot.set_offset(3, 2)
        plot.set_scale(7, 5)
        assert plot.domain() == (3.0, 108.0)
        assert plot.codomain() == (2.0, 52.0)

    @pytest.mark.parametrize("scale", [(0, 1), (1, 0), (0.0, 0.0)])
    def test_zero_scale_rejected(self, scale):
        with pytest.raises(InvalidScaleError):
            self.plot.set_scale(*scale)
        assert (self.plot.scale_x, self.plot.scale_y) == (1.0, 1.0)

    def test_identity_marks_diagonal(self):
        self.plot.draw(lambda x: x, '*')
        assert self.marks(self.plot) == {(i, i) for i in range(1, 10)}
        assert self.plot.cell(0, 0) == Cell()

    def test_row_conversion_floors(self):
        self.plot.set_scale(1, 0.5)
        assert self.plot.to_row(1.2) == 2
        assert self.plot.to_row(-0.1) == -1

    def test_points_off_canvas_are_dropped(self):
        self.plot.draw(lambda x: x + 5, 'o', 'red')
        assert self.marks(self.plot) == {(x, x + 5) for x in range(0, 5)}
        assert self.plot.cell(2, 7) == Cell('o', 'red')

    def test_offset_and_scale_transform(self):
        self.plot.set_offset(-5, -5)
        self.plot.set_scale(1, 1)
        self.plot.draw(lambda x: 0.0, '-')
        assert self.marks(self.plot) == {(x, 5) for x in range(10)}

    def test_undefined_samples_are_skipped(self):
        self.plot.set_offset(-5, 0)
        self.plot.draw(lambda x: math.sqrt(x) + 1, '+')
        assert {x for x, _ in self.marks(self.plot)} == set(range(5, 10))

    def test_complex_samples_are_skipped(self):
        self.plot.set_offset(-5, 0)
        self.plot.draw(lambda x: x ** 0.5, '+')
        assert {x for x, _ in self.marks(self.plot)} == {6, 7, 8, 9}
        self.plot.draw(lambda x: None, '?')
        assert '?' not in {self.plot.cell(x, y).char for x, y in self.marks(self.plot)}

    def test_non_finite_samples_are_skipped(self):
        logger = Mock()
        plot = Plot2DCanvas(5, 5, logger=logger)
        plot.set_offset(-2, 0)
        plot.draw(lambda x: 1 / x + 2, 'x')
        plot.draw(lambda x: float('nan') if x < 0 else 2.0, 'y')
        assert plot.cell(2, 2).char == 'y'
        assert logger.debug.called

    def test_draws_are_cumulative(self):
        self.plot.draw(lambda x: 3, 'a')
        self.plot.draw(lambda x: x, 'b')
        assert self.plot.cell(3, 3).char == 'b'
        assert self.plot.cell(5, 3).char == 'a'
        assert self.plot.cell(5, 5).char == 'b'

    def test_clear_keeps_transform(self):
        self.plot.set_offset(1, 1)
        self.plot.draw(lambda x: x, '*')
        self.plot.clear()
        assert self.marks(self.plot) == set()
        assert self.plot.offset_x == 1.0
