# codes/__init__.py

from .definitions import FeatureDefinitions, FMT, RESET
from .cursor import CursorCodes

__all__ = ['FeatureDefinitions', 'CursorCodes', 'FMT', 'RESET']
