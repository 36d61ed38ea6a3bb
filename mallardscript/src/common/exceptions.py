from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Type, TypeVar

from .source_location import SourceLocation

"""Compilation exceptions.

Every layer re-raises with ``raise ... from exc`` so the ``__cause__`` chain
reads from the outermost context down to the root cause.
"""

E = TypeVar("E", bound=BaseException)


class CompilationError(Exception):
    """Base exception for all compilation failures."""

    def __init__(self, message: str, node: Optional[object] = None) -> None:
        self.message = message
        self.node = node
        location = SourceLocation.render(node)
        super().__init__(f"{message} ({location})" if location else message)

    def chain(self) -> Iterator[BaseException]:
        """Yield this error followed by every error in its cause chain."""
        error: Optional[BaseException] = self
        while error is not None:
            yield error
            error = error.__cause__

    @property
    def root_cause(self) -> BaseException:
        """The innermost error of the cause chain."""
        *_, last = self.chain()
        return last

    def find(self, error_type: Type[E]) -> Optional[E]:
        """Return the first error of the given type in the cause chain."""
        for error in self.chain():
            if isinstance(error, error_type):
                return error
        return None


class SourceNotFoundError(CompilationError):
    """An entry or import path does not resolve to an existing file."""

    def __init__(self, input_path: str, current_directory: Path) -> None:
        self.input_path = input_path
        self.current_directory = current_directory
        super().__init__(
            f"Unable to find file input '{input_path}' from '{current_directory}'."
        )


class CircularDependencyError(CompilationError):
    """A file (transitively) imports itself."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("Circular dependency detected.")


class SourceReadError(CompilationError):
    """A resolved file could not be read."""

    def __init__(self, path: Path, current_directory: Path) -> None:
        self.path = path
        super().__init__(
            f"Unable to load file input '{path}' from '{current_directory}'."
        )


class ParseError(CompilationError):
    """Source or emitted text does not match its dialect's grammar."""

    def __init__(
        self,
        message: str,
        source_file: Optional[str] = None,
        line: int = 0,
        column: int = 0,
        context: Optional[str] = None,
    ) -> None:
        self.source_file = source_file
        self.line = line
        self.column = column
        self.context = context
        text = message
        if line > 0:
            text += f"\n --> {line}:{column}"
        if context:
            text += "\n" + context.rstrip("\n")
        super().__init__(text)
        self.message = message


class InvalidStructureError(CompilationError):
    """The program tree contains a shape the lowering engine cannot render."""


class WriteError(CompilationError):
    """Writing to, truncating or seeking the output failed."""


class ImportFailedError(CompilationError):
    """Context layer added each time compilation crosses an IMPORT."""

    def __init__(self, import_path: str, importer: str) -> None:
        self.import_path = import_path
        self.importer = importer
        super().__init__(f"Unable to import file '{import_path}' from '{importer}'.")


class BuildError(CompilationError):
    """Context layer added by the build driver."""


def format_error_chain(error: BaseException) -> str:
    """Render an error and its causes for terminal display.

    Example:
        Failed to compile to output file 'output/index.ducky'.

        Caused by:
            0: Unable to import file './lib.ducky' from 'index.ducky'.
            1: Circular dependency detected.
    """
    causes = []
    cause = error.__cause__
    while cause is not None:
        causes.append(cause)
        cause = cause.__cause__

    text = str(error)
    if not causes:
        return text

    lines = [text, "", "Caused by:"]
    for index, cause in enumerate(causes):
        prefix = f"    {index}: "
        message_lines = str(cause).splitlines() or [type(cause).__name__]
        lines.append(prefix + message_lines[0])
        lines.extend(" " * len(prefix) + extra for extra in message_lines[1:])
    return "\n".join(lines)
