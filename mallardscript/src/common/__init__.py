"""Common utilities shared across compiler stages."""

from .exceptions import (
    CompilationError,
    SourceNotFoundError,
    CircularDependencyError,
    SourceReadError,
    ParseError,
    InvalidStructureError,
    WriteError,
    ImportFailedError,
    BuildError,
    format_error_chain,
)
from .source_location import SourceLocation
from .constants import *

__all__ = [
    "CompilationError",
    "SourceNotFoundError",
    "CircularDependencyError",
    "SourceReadError",
    "ParseError",
    "InvalidStructureError",
    "WriteError",
    "ImportFailedError",
    "BuildError",
    "format_error_chain",
    "SourceLocation",
    # Constants
    "INDENTATION_SIZE",
    "OUTPUT_FILE_NAME",
    "DEFAULT_INPUT_FILE",
    "DEFAULT_OUTPUT_DIRECTORY",
    "COMPLETION_SHELLS",
    "CompilerConfig",
    "DEFAULT_CONFIG",
]
