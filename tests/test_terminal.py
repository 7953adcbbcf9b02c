# test_terminal.py

import io
import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termgrid import Display, Canvas, Plot2DCanvas, OutputCapture
from termgrid.terminal import Terminal


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestTerminal:
    """Test suite for the low-level terminal wrapper."""

    def setup_method(self):
        self.terminal = Terminal()

    def test_write_decorates(self, monkeypatch):
        out = io.StringIO()
        monkeypatch.setattr(sys, 'stdout', out)
        self.terminal.write("hi", feature="red", newline=True)
        assert out.getvalue() == "\033[31mhi\033[0m\n"

    def test_non_tty_skips_control_sequences(self, monkeypatch):
        out = io.StringIO()
        monkeypatch.setattr(sys, 'stdout', out)
        self.terminal.hide_cursor()
        self.terminal.clear_screen()
        assert out.getvalue() == ""

    def test_tty_cursor_and_clear(self, monkeypatch):
        out = FakeTTY()
        monkeypatch.setattr(sys, 'stdout', out)
        self.terminal.hide_cursor()
        self.terminal.hide_cursor()
        self.terminal.show_cursor()
        self.terminal.clear_screen()
        assert out.getvalue() == "\033[?25l\033[?25h\033[2J\033[H"

    def test_size(self):
        size = self.terminal.get_size()
        assert size.columns == self.terminal.width
        assert size.lines == self.terminal.height


class TestDisplay:
    """Test suite for the component coordinator."""

    def setup_method(self):
        self.display = Display()

    def test_components_share_codes(self):
        canvas = self.display.create_canvas(3, 2)
        plot = self.display.create_plot(4, 4)
        assert isinstance(canvas, Canvas) and isinstance(plot, Plot2DCanvas)
        assert canvas.codes is self.display.codes
        assert plot.codes is self.display.codes
        assert self.display.terminal.codes is self.display.codes
        assert self.display.codes.definitions is self.display.definitions

    def test_custom_feature_reaches_canvas(self):
        self.display.definitions.add_feature("warn", "1;33")
        canvas = self.display.create_canvas(1, 1)
        canvas.put(0, 0, '!', 'warn')
        assert "\033[0;1;33m!" in canvas.render_to_string()

    def test_create_capture(self, tmp_path):
        slot = Mock()
        capture = self.display.create_capture(str(tmp_path / "x.txt"), slot=slot)
        assert isinstance(capture, OutputCapture)
        assert capture.filename.endswith("x.txt")

    def test_show_refreshes_canvas(self):
        canvas = Mock()
        self.display.show(canvas)
        canvas.refresh.assert_called_once_with(self.display.terminal)
