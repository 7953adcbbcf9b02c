# redirection/capture.py

import io
import sys
import threading
import weakref
from typing import Optional, Protocol

from rich.console import Console

from ..errors import FileAccessError
from ..logger import Logger
from .files import erase_last_line, format_output, read_file, touch, write_file

DEFAULT_FILENAME = "redirected_output.txt"

# Session currently capturing each slot, keyed by slot_key().
_owners: "weakref.WeakValueDictionary" = weakref.WeakValueDictionary()
_owners_lock = threading.Lock()


class StreamSlot(Protocol):
    """Handle on a process-wide stream that can be swapped out."""
    def get(self): ...
    def set(self, stream) -> None: ...


class StdStreamSlot:
    """StreamSlot for sys.stdout or sys.stderr."""

    def __init__(self, name: str = "stdout"):
        if name not in ("stdout", "stderr"):
            raise ValueError(f"Unknown standard stream '{name}'")
        self.name = name
        self.key = ("std", name)

    def get(self):
        return getattr(sys, self.name)

    def set(self, stream) -> None:
        setattr(sys, self.name, stream)


def slot_key(slot):
    """Identity of the stream behind a slot; two slots with one key share a stream."""
    return getattr(slot, "key", None) or ("slot", id(slot))


class CaptureBuffer(io.TextIOBase):
    """In-memory text sink whose writes are serialized by the session lock."""

    def __init__(self, lock: threading.RLock):
        super().__init__()
        self._lock = lock
        self._chunks = []

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return False

    def write(self, s: str) -> int:
        if not isinstance(s, str):
            raise TypeError(f"write() argument must be str, not {type(s).__name__}")
        with self._lock:
            self._chunks.append(s)
        return len(s)

    def getvalue(self) -> str:
        with self._lock:
            return ''.join(self._chunks)

    def clear(self) -> None:
        with self._lock:
            self._chunks.clear()

    def __bool__(self) -> bool:
        with self._lock:
            return any(self._chunks)


class OutputCapture:
    """
    Diverts a process-wide stream into memory and merges what was written
    into a file.

    Lifecycle: idle -> begin() -> active -> end() -> idle. While active the
    slot holds the capture buffer and the original stream is kept as the
    backup until end() puts it back. flush() merges the buffer into the
    file by replacing the file's last line with the captured text. Every
    piece of session state is guarded by a single reentrant lock, so two
    flushes never interleave. At most one session captures a given stream;
    begin() on a stream another session holds is ignored with a warning.
    """

    def __init__(self, filename: str = DEFAULT_FILENAME,
                 slot: Optional[StreamSlot] = None, logger: Optional[Logger] = None):
        """
        Args:
            filename: Target file, relative to the working directory
            slot: Stream to capture; defaults to sys.stdout
            logger: Optional Logger instance
        """
        self._lock = threading.RLock()
        self._filename = filename
        self._slot = slot or StdStreamSlot()
        self._key = slot_key(self._slot)
        self.logger = logger or Logger(__name__)
        self._buffer = CaptureBuffer(self._lock)
        self._backup = None
        self._active = False

    @property
    def filename(self) -> str:
        with self._lock:
            return self._filename

    @filename.setter
    def filename(self, filename: str) -> None:
        with self._lock:
            self._filename = filename

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active

    @property
    def buffer(self) -> CaptureBuffer:
        return self._buffer

    def begin(self) -> None:
        """Back up the current stream and start capturing into the buffer."""
        with self._lock:
            if self._active:
                self.logger.warning("Output capture already active; begin() ignored")
                return
            with _owners_lock:
                owner = _owners.get(self._key)
                if owner is not None and owner is not self:
                    self.logger.warning("Stream is already captured by another session; begin() ignored")
                    return
                _owners[self._key] = self
            self._backup = self._slot.get()
            self._buffer.clear()
            self._slot.set(self._buffer)
            self._active = True
            self.logger.debug(f"Capturing output into '{self._filename}'")

    def end(self) -> None:
        """Restore the original stream and persist whatever is still buffered."""
        with self._lock:
            if not self._active:
                return
            if self._slot.get() is not self._buffer:
                self.logger.warning("Captured stream was replaced during the session; restoring backup")
            self._slot.set(self._backup)
            self._backup = None
            self._active = False
            with _owners_lock:
                if _owners.get(self._key) is self:
                    del _owners[self._key]
            self.logger.debug("Output capture ended")
            self._flush()

    def flush(self) -> None:
        """Merge the buffered output into the file without ending the session."""
        with self._lock:
            if not self._active:
                self.logger.debug("flush() on an idle capture ignored")
                return
            self._flush()

    def _flush(self) -> None:
        # Caller holds the lock.
        if not self._buffer:
            return
        try:
            self._redirect_output(self._filename)
        except FileAccessError as e:
            self.logger.error(str(e))
            self._report(e)
        finally:
            self._buffer.clear()

    def _redirect_output(self, filename: str) -> None:
        touch(filename)
        contents = erase_last_line(read_file(filename))
        write_file(filename, contents + format_output(self._buffer.getvalue()))

    def _report(self, error: Exception) -> None:
        stream = self._backup if self._active else self._slot.get()
        Console(file=stream, highlight=False, soft_wrap=True).print(str(error), style="bold red", markup=False)

    def __enter__(self) -> "OutputCapture":
        self.begin()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.end()

    def __del__(self):
        if getattr(self, '_active', False):
            self.end()
