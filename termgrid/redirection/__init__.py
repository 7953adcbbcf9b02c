# redirection/__init__.py

from .capture import CaptureBuffer, OutputCapture, StdStreamSlot, StreamSlot, DEFAULT_FILENAME
from .files import erase_last_line, format_output, read_file, touch, write_file

__all__ = [
    'OutputCapture', 'CaptureBuffer', 'StreamSlot', 'StdStreamSlot', 'DEFAULT_FILENAME',
    'touch', 'read_file', 'write_file', 'erase_last_line', 'format_output',
]
