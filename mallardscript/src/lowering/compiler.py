"""
MallardScript to DuckyScript lowering.

This module resolves imports (with cycle detection) and hands every parsed
statement to the StatementLowerer, writing into one shared output sink.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set, Union

from mallardscript.src.ast.statements import Program
from mallardscript.src.common.constants import DEFAULT_CONFIG, CompilerConfig
from mallardscript.src.common.exceptions import (
    CircularDependencyError,
    CompilationError,
    ParseError,
    SourceNotFoundError,
    SourceReadError,
)
from mallardscript.src.parsing.parser import MallardParser

from .sink import BufferSink, OutputSink
from .statement_lowerer import StatementLowerer

logger = logging.getLogger(__name__)


class MallardCompiler:
    """Compiles MallardScript files into one DuckyScript output.

    One instance corresponds to one build: the visited-imports set lives on
    the instance and is shared by every nested import, so a file reached
    twice anywhere in the import tree is reported as a circular dependency.
    """

    def __init__(
        self,
        sink: OutputSink,
        config: CompilerConfig = DEFAULT_CONFIG,
        parser: Optional[MallardParser] = None,
    ):
        self.sink = sink
        self.config = config
        self.parser = parser or MallardParser()
        self.imports_visited: Set[Path] = set()
        self.stmt_lowerer = StatementLowerer(self)

    def compile(
        self,
        current_directory: Union[str, Path],
        input_path: str,
        indentation: int = 0,
    ) -> None:
        """Compile the file at input_path, relative to current_directory."""
        logger.info("Compiling '%s'.", input_path)
        current_directory = Path(current_directory)

        try:
            input_path_expanded = (
                current_directory / Path(input_path).expanduser()
            ).resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise SourceNotFoundError(input_path, current_directory) from exc

        # Membership test and insert both use the canonical path
        if input_path_expanded in self.imports_visited:
            raise CircularDependencyError(input_path_expanded)
        self.imports_visited.add(input_path_expanded)

        try:
            source_code = input_path_expanded.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(input_path_expanded, current_directory) from exc

        try:
            program = self.parser.parse(source_code, str(input_path_expanded))
        except ParseError as exc:
            raise CompilationError(
                f"Unable to parse input '{input_path_expanded}'."
            ) from exc

        self.lower_program(program, input_path_expanded, indentation)

    def lower_program(
        self,
        program: Program,
        source_path: Optional[Path] = None,
        indentation: int = 0,
    ) -> None:
        """Lower an already parsed program.

        Imports inside the program resolve relative to source_path's directory
        (the working directory when no path is given).
        """
        if source_path is None:
            source_path = Path.cwd() / "<string>"

        self.stmt_lowerer.lower_statements(
            program.statements, indentation, source_path
        )


def lower_program(
    program: Program,
    source_path: Optional[Path] = None,
    config: CompilerConfig = DEFAULT_CONFIG,
) -> str:
    """Lower a parsed program to DuckyScript text held in memory."""
    sink = BufferSink()
    MallardCompiler(sink, config).lower_program(program, source_path)
    return sink.getvalue()


def compile_file(
    input_path: Union[str, Path],
    current_directory: Optional[Path] = None,
    config: CompilerConfig = DEFAULT_CONFIG,
) -> str:
    """Compile a MallardScript file to DuckyScript text held in memory."""
    sink = BufferSink()
    compiler = MallardCompiler(sink, config)
    compiler.compile(current_directory or Path.cwd(), str(input_path))
    return sink.getvalue()
