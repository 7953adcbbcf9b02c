# codes/definitions.py

from typing import Dict, Iterable, List, Optional, Union

from ..errors import UnsupportedFeatureError

ESC = '\033'

# Select Graphic Rendition utility
FMT = lambda x: f'{ESC}[{x}m'

RESET = FMT('0')

_COLOR_NAMES = ['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']

FeatureRequest = Union[str, Iterable[str]]


def _default_features() -> Dict[str, str]:
    """Build the name -> SGR parameter table."""
    features = {
        'reset': '0',
        'bold': '1',
        'faint': '2',
        'italic': '3',
        'underline': '4',
        'blink': '5',
        'rapid-blink': '6',
        'inverse': '7',
        'conceal': '8',
        'crossed-out': '9',
        'double-underline': '21',
        'overline': '53',
        'default': '39',
        'bg-default': '49',
    }
    for i, color in enumerate(_COLOR_NAMES):
        features[color] = str(30 + i)
        features[f'bright-{color}'] = str(90 + i)
        features[f'bg-{color}'] = str(40 + i)
        features[f'bg-bright-{color}'] = str(100 + i)
    return features


class FeatureDefinitions:
    """
    Feature registry: the foundation layer that maps symbolic display
    attributes to SGR parameters. Has no dependencies besides the error
    types.

    Plain features map a name to a literal parameter ('red' -> '31').
    Parametrized features map a name to a template filled with an integer
    ('fg' -> '38;5;{}'); in a combined feature string they are written
    'fg:196'.
    """

    def __init__(
        self,
        features: Optional[Dict[str, str]] = None,
        parametric: Optional[Dict[str, str]] = None
    ):
        """
        Initialize definitions with optional replacement tables.

        Args:
            features: name -> SGR parameter table; defaults to the standard set
            parametric: name -> SGR template table; defaults to 256-color fg/bg
        """
        self._default_parametric = {
            'fg': '38;5;{}',
            'bg': '48;5;{}',
        }
        self.features = features if features is not None else _default_features()
        self.parametric = parametric if parametric is not None else self._default_parametric.copy()

    def find(self, name: str) -> Optional[str]:
        """Return the SGR parameter for a plain feature, or None if absent."""
        return self.features.get(name)

    def lookup(self, name: str) -> str:
        """Return the escape fragment for a plain feature."""
        code = self.find(name)
        if code is None:
            raise UnsupportedFeatureError(name)
        return FMT(code)

    def parametrize(self, name: str, value: int) -> str:
        """Return the escape fragment for a parametrized feature such as fg/bg."""
        return FMT(self._parametric_code(name, value))

    def add_feature(self, name: str, code: str) -> None:
        """Register a new plain feature."""
        if name in self.features or name in self.parametric:
            raise ValueError(f"Feature '{name}' already exists")
        self.features[name] = code

    def add_parametric(self, name: str, template: str) -> None:
        """Register a new parametrized feature; template holds one '{}' slot."""
        if name in self.features or name in self.parametric:
            raise ValueError(f"Feature '{name}' already exists")
        if template.count('{}') != 1:
            raise ValueError(f"Template for '{name}' must contain exactly one '{{}}' slot")
        self.parametric[name] = template

    def split(self, request: FeatureRequest) -> List[str]:
        """
        Split a feature request into individual names, preserving order.

        A string is split on commas ("red,bold"); an iterable of strings is
        flattened the same way. A blank string means no features.
        """
        if isinstance(request, str):
            if not request.strip():
                return []
            return [name.strip() for name in request.split(',')]
        names = []
        for part in request:
            names.extend(self.split(part))
        return names

    def codes(self, request: FeatureRequest) -> List[str]:
        """Resolve a feature request to its ordered SGR parameters."""
        result = []
        for name in self.split(request):
            code = self.find(name)
            if code is None:
                code = self._token_code(name)
            result.append(code)
        return result

    def compose(self, request: FeatureRequest, reset: bool = True) -> str:
        """
        Compose a feature request into one escape fragment.

        Args:
            request: "red,bold", ["red", "bold"] or "" for terminal defaults
            reset: prefix the sequence with a reset so earlier attributes
                do not leak into the decorated text

        Returns:
            One SGR sequence to emit verbatim before the decorated characters
        """
        codes = self.codes(request)
        if reset:
            codes.insert(0, '0')
        return FMT(';'.join(codes)) if codes else ''

    def decorate(self, text: str, request: FeatureRequest) -> str:
        """Wrap text in the composed features followed by a reset."""
        prefix = self.compose(request, reset=False)
        return f"{prefix}{text}{RESET}" if prefix else text

    def _token_code(self, token: str) -> str:
        name, sep, value = token.partition(':')
        if not sep or name not in self.parametric:
            raise UnsupportedFeatureError(token)
        try:
            number = int(value)
        except ValueError:
            raise UnsupportedFeatureError(token) from None
        return self._parametric_code(name, number)

    def _parametric_code(self, name: str, value: int) -> str:
        template = self.parametric.get(name)
        if template is None:
            raise UnsupportedFeatureError(name)
        if not 0 <= value <= 255:
            raise ValueError(f"Value {value} for feature '{name}' is outside 0..255")
        return template.format(value)
