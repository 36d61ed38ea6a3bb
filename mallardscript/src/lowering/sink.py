"""Output sinks shared by every recursive compile call of one build.

A sink appends text at the end and removes one trailing newline, keeping
the cursor at the new end. It also tells whether the output is empty.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional

from mallardscript.src.common.exceptions import WriteError


class OutputSink(ABC):
    """Append-only destination with tail trimming."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Append text at the end of the output."""

    @abstractmethod
    def trim_trailing_newline(self) -> None:
        """Remove one trailing newline, if the output ends with one."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True while nothing has been written, or everything was trimmed."""


class BufferSink(OutputSink):
    """In-memory sink."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, text: str) -> None:
        self._buffer.extend(text.encode("utf-8"))

    def trim_trailing_newline(self) -> None:
        if self._buffer.endswith(b"\n"):
            del self._buffer[-1]

    def is_empty(self) -> bool:
        return not self._buffer

    def getvalue(self) -> str:
        return self._buffer.decode("utf-8")


class FileSink(OutputSink):
    """Sink writing through a seekable binary file handle."""

    def __init__(self, handle: BinaryIO, path: Optional[Path] = None) -> None:
        self.handle = handle
        self.path = path

    @classmethod
    def create(cls, path: Path) -> "FileSink":
        """Create (or truncate) the file at path and wrap it."""
        return cls(open(path, "w+b"), Path(path))

    def write(self, text: str) -> None:
        try:
            self.handle.write(text.encode("utf-8"))
        except (OSError, ValueError) as exc:
            raise WriteError("Unable to write to output file.") from exc

    def trim_trailing_newline(self) -> None:
        try:
            length = self.handle.seek(0, os.SEEK_END)
            if length == 0:
                return
            self.handle.seek(length - 1)
            if self.handle.read(1) == b"\n":
                self.handle.truncate(length - 1)
            self.handle.seek(0, os.SEEK_END)
        except (OSError, ValueError) as exc:
            raise WriteError("Unable to trim output file.") from exc

    def is_empty(self) -> bool:
        try:
            return self.handle.seek(0, os.SEEK_END) == 0
        except (OSError, ValueError) as exc:
            raise WriteError("Unable to seek output file.") from exc

    def close(self) -> None:
        self.handle.close()

    def __enter__(self) -> "FileSink":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
