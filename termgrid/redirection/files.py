# redirection/files.py

import re

from ..errors import FileAccessError

ANSI_REGEX = re.compile(r'\x1B(?:\[[0-?]*[ -/]*[@-~]|[78])')


def touch(filename: str) -> None:
    """Make sure the file exists, creating it empty when it can't be read."""
    try:
        with open(filename, 'r', encoding='utf-8'):
            return
    except OSError:
        pass
    try:
        with open(filename, 'w', encoding='utf-8'):
            pass
    except OSError as e:
        raise FileAccessError(filename, e.strerror) from e


def read_file(filename: str) -> str:
    try:
        with open(filename, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filename, e.strerror) from e


def write_file(filename: str, content: str) -> None:
    """Replace the file's content."""
    try:
        with open(filename, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filename, e.strerror) from e


def erase_last_line(content: str) -> str:
    """
    Drop everything after the last newline.

    The last line of a captured terminal transcript is the live prompt, so
    it is overwritten rather than duplicated. Content without any newline
    is dropped entirely; content ending in a newline is kept whole.
    """
    return content[:content.rfind('\n') + 1]


def format_output(text: str) -> str:
    """
    Turn raw terminal output into plain file text: escape sequences are
    stripped and carriage returns behave like they do on screen.
    """
    text = ANSI_REGEX.sub('', text).replace('\r\n', '\n')
    return '\n'.join(line.rsplit('\r', 1)[-1] for line in text.split('\n'))
