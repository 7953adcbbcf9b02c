# codes/cursor.py

from typing import Dict, Optional

from ..errors import UnsupportedFeatureError
from .definitions import ESC, FeatureDefinitions, FeatureRequest

CSI = f'{ESC}['


class CursorCodes:
    """
    Cursor movement and terminal control sequences, layered on top of the
    feature definitions so callers get positioning and decoration from one
    object.
    """

    def __init__(self, definitions: Optional[FeatureDefinitions] = None):
        self.definitions = definitions or FeatureDefinitions()
        self.controls: Dict[str, str] = {
            'home': f'{CSI}H',
            'clear-screen': f'{CSI}2J',
            'clear-line': f'{CSI}2K',
            'clear-line-right': f'{CSI}K',
            'clear-line-left': f'{CSI}1K',
            'hide-cursor': f'{CSI}?25l',
            'show-cursor': f'{CSI}?25h',
            'save-cursor': f'{ESC}7',
            'restore-cursor': f'{ESC}8',
        }
        self.moves: Dict[str, str] = {
            'up': CSI + '{}A',
            'down': CSI + '{}B',
            'right': CSI + '{}C',
            'left': CSI + '{}D',
            'next-line': CSI + '{}E',
            'prev-line': CSI + '{}F',
            'column': CSI + '{}G',
        }

    def move_to(self, x: int, y: int) -> str:
        """Absolute jump to zero-based column x, row y."""
        return f'{CSI}{y + 1};{x + 1}H'

    def move_relative(self, dx: int, dy: int) -> str:
        """Relative jump; (0, 0) emits nothing."""
        out = []
        if dy > 0:
            out.append(self.move('down', dy))
        elif dy < 0:
            out.append(self.move('up', -dy))
        if dx > 0:
            out.append(self.move('right', dx))
        elif dx < 0:
            out.append(self.move('left', -dx))
        return ''.join(out)

    def move(self, name: str, n: int = 1) -> str:
        """Parametrized movement by name, e.g. move('up', 3)."""
        template = self.moves.get(name)
        if template is None:
            raise UnsupportedFeatureError(name)
        return template.format(n)

    def control(self, name: str) -> str:
        """Terminal control sequence by name, e.g. control('hide-cursor')."""
        try:
            return self.controls[name]
        except KeyError:
            raise UnsupportedFeatureError(name) from None

    def lookup(self, name: str) -> str:
        return self.definitions.lookup(name)

    def compose(self, request: FeatureRequest, reset: bool = True) -> str:
        return self.definitions.compose(request, reset=reset)

    def decorate(self, text: str, request: FeatureRequest) -> str:
        return self.definitions.decorate(text, request)
