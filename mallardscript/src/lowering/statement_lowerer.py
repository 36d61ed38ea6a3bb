"""Lowering of single statements, and of blocks recursively, to DuckyScript lines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

from mallardscript.src.ast.statements import (
    DefaultDelayCommand,
    DefineCommand,
    DelayCommand,
    EndOfDocument,
    ExfilCommand,
    IfBlock,
    ImportStatement,
    KeyChord,
    KeyValue,
    RemCommand,
    SimpleCommand,
    SingleCommand,
    Statement,
    StringCommand,
    StringlnCommand,
    VariableAssignment,
    VariableDeclaration,
    WhileBlock,
)
from mallardscript.src.common.exceptions import (
    CompilationError,
    ImportFailedError,
    InvalidStructureError,
)

from .key_chord import flatten_key_chord

logger = logging.getLogger(__name__)


class StatementLowerer:
    """Handles lowering of statements to DuckyScript lines."""

    def __init__(self, parent: Any) -> None:
        self.parent = parent

    @property
    def sink(self):
        return self.parent.sink

    @property
    def indentation_size(self) -> int:
        return self.parent.config.indentation_size

    def write_statement(self, indentation: int, line: str) -> None:
        """Write one line to the sink, prefixed with the indentation."""
        self.sink.write(" " * indentation + line)

    def lower_statements(
        self, statements: List[Statement], indentation: int, source_path: Path
    ) -> None:
        for stmt in statements:
            self.lower_statement(stmt, indentation, source_path)

    def lower_statement(
        self, stmt: Statement, indentation: int, source_path: Path
    ) -> None:
        handlers = {
            RemCommand: self.lower_simple_command,
            StringCommand: self.lower_simple_command,
            StringlnCommand: self.lower_simple_command,
            DelayCommand: self.lower_simple_command,
            DefaultDelayCommand: self.lower_simple_command,
            DefineCommand: self.lower_simple_command,
            ExfilCommand: self.lower_simple_command,
            SingleCommand: self.lower_single_command,
            KeyChord: self.lower_key_chord,
            KeyValue: self.lower_key_value,
            VariableDeclaration: self.lower_variable_declaration,
            VariableAssignment: self.lower_variable_assignment,
            ImportStatement: self.lower_import_statement,
            IfBlock: self.lower_if_block,
            WhileBlock: self.lower_while_block,
            EndOfDocument: self.lower_end_of_document,
        }

        handler = handlers.get(type(stmt))
        if handler is None:
            raise InvalidStructureError(
                f"Unknown statement type: {type(stmt).__name__}", stmt
            )
        handler(stmt, indentation, source_path)  # type: ignore[operator]

    def lower_simple_command(
        self, stmt: SimpleCommand, indentation: int, source_path: Path
    ) -> None:
        if stmt.value is not None:
            logger.info("Processing '%s %s'.", stmt.keyword, stmt.value)
            self.write_statement(indentation, f"{stmt.keyword} {stmt.value}\n")
        else:
            logger.info("Processing '%s'.", stmt.keyword)
            self.write_statement(indentation, f"{stmt.keyword}\n")

    def lower_single_command(
        self, stmt: SingleCommand, indentation: int, source_path: Path
    ) -> None:
        logger.info("Processing '%s'.", stmt.name)
        self.write_statement(indentation, f"{stmt.name}\n")

    def lower_key_chord(
        self, stmt: KeyChord, indentation: int, source_path: Path
    ) -> None:
        command = flatten_key_chord(stmt)
        logger.info("Processing '%s'.", command)
        self.write_statement(indentation, f"{command}\n")

    def lower_key_value(
        self, stmt: KeyValue, indentation: int, source_path: Path
    ) -> None:
        raise InvalidStructureError(
            "Provided statement KeyValue not supported at top level commands. "
            "These should be nested under KeyChord statements.",
            stmt,
        )

    def lower_variable_declaration(
        self, stmt: VariableDeclaration, indentation: int, source_path: Path
    ) -> None:
        logger.info("Processing '$%s = %s'.", stmt.name, stmt.assignment)
        self.write_statement(indentation, f"VAR ${stmt.name} = {stmt.assignment}\n")

    def lower_variable_assignment(
        self, stmt: VariableAssignment, indentation: int, source_path: Path
    ) -> None:
        logger.info("Processing '$%s = %s'.", stmt.name, stmt.assignment)
        self.write_statement(indentation, f"${stmt.name} = {stmt.assignment}\n")

    def lower_import_statement(
        self, stmt: ImportStatement, indentation: int, source_path: Path
    ) -> None:
        # Imports resolve relative to the directory of the importing file
        try:
            self.parent.compile(source_path.parent, stmt.path, indentation)
        except CompilationError as exc:
            raise ImportFailedError(stmt.path, str(source_path)) from exc

        # Restores the line break trimmed from the end of the imported body.
        # Written without indentation so the last imported line stays intact,
        # and skipped while the output is still empty.
        if not self.sink.is_empty():
            self.sink.write("\n")

    def lower_if_block(
        self, stmt: IfBlock, indentation: int, source_path: Path
    ) -> None:
        self.write_statement(indentation, f"IF {stmt.expression} THEN\n")
        self.lower_statements(
            stmt.statements_true, indentation + self.indentation_size, source_path
        )

        if stmt.statements_false:
            self.write_statement(indentation, "ELSE\n")
            self.lower_statements(
                stmt.statements_false,
                indentation + self.indentation_size,
                source_path,
            )

        self.write_statement(indentation, "END_IF\n")

    def lower_while_block(
        self, stmt: WhileBlock, indentation: int, source_path: Path
    ) -> None:
        self.write_statement(indentation, f"WHILE {stmt.expression}\n")
        self.lower_statements(
            stmt.statements, indentation + self.indentation_size, source_path
        )
        self.write_statement(indentation, "END_WHILE\n")

    def lower_end_of_document(
        self, stmt: EndOfDocument, indentation: int, source_path: Path
    ) -> None:
        logger.info("Processing End.")
        # The parser's implicit trailing line break never reaches the output
        self.sink.trim_trailing_newline()
