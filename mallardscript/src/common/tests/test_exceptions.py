"""
Tests for common/exceptions.py - Error hierarchy and cause chains.
"""

from pathlib import Path

import pytest

from mallardscript.src.ast.statements import KeyValue
from mallardscript.src.common.exceptions import (
    BuildError,
    CircularDependencyError,
    CompilationError,
    ImportFailedError,
    InvalidStructureError,
    ParseError,
    SourceNotFoundError,
    format_error_chain,
)


def _raise_chain():
    """Build BuildError -> ImportFailedError -> SourceNotFoundError -> OSError."""
    try:
        try:
            try:
                raise FileNotFoundError(2, "No such file or directory")
            except OSError as exc:
                raise SourceNotFoundError("./missing.ducky", Path("/payloads")) from exc
        except CompilationError as exc:
            raise ImportFailedError("./missing.ducky", "/payloads/index.ducky") from exc
    except CompilationError as exc:
        raise BuildError("Failed to compile to output file 'output/index.ducky'.") from exc


class TestCompilationError:
    """Tests for the CompilationError base class."""

    def test_all_errors_are_compilation_errors(self):
        assert issubclass(SourceNotFoundError, CompilationError)
        assert issubclass(CircularDependencyError, CompilationError)
        assert issubclass(ParseError, CompilationError)
        assert issubclass(InvalidStructureError, CompilationError)

    def test_message_includes_node_location(self):
        node = KeyValue("GUI", line=3)
        node.source_file = "/payloads/index.ducky"
        error = InvalidStructureError("Bad key.", node)
        assert str(error) == "Bad key. (index.ducky:3)"
        assert error.message == "Bad key."

    def test_root_cause_and_find(self):
        with pytest.raises(BuildError) as exc_info:
            _raise_chain()

        error = exc_info.value
        assert isinstance(error.root_cause, FileNotFoundError)
        assert isinstance(error.find(SourceNotFoundError), SourceNotFoundError)
        assert error.find(CircularDependencyError) is None

    def test_chain_order(self):
        with pytest.raises(BuildError) as exc_info:
            _raise_chain()

        kinds = [type(error) for error in exc_info.value.chain()]
        assert kinds == [
            BuildError,
            ImportFailedError,
            SourceNotFoundError,
            FileNotFoundError,
        ]


class TestParseError:
    """Tests for ParseError formatting."""

    def test_parse_error_location(self):
        error = ParseError(
            "Unable to parse provided document.",
            source_file="index.ducky",
            line=2,
            column=1,
            context="DEALAY 3000\n^\n",
        )
        assert error.line == 2
        assert error.column == 1
        assert error.message == "Unable to parse provided document."
        assert str(error) == (
            "Unable to parse provided document.\n --> 2:1\nDEALAY 3000\n^"
        )

    def test_parse_error_without_location(self):
        assert str(ParseError("Broken.")) == "Broken."


class TestFormatErrorChain:
    """Tests for format_error_chain."""

    def test_single_error(self):
        assert format_error_chain(CircularDependencyError(Path("/a"))) == (
            "Circular dependency detected."
        )

    def test_numbered_causes(self):
        with pytest.raises(BuildError) as exc_info:
            _raise_chain()

        text = format_error_chain(exc_info.value)
        lines = text.splitlines()
        assert lines[0] == "Failed to compile to output file 'output/index.ducky'."
        assert lines[2] == "Caused by:"
        assert lines[3] == (
            "    0: Unable to import file './missing.ducky' "
            "from '/payloads/index.ducky'."
        )
        assert lines[4] == (
            "    1: Unable to find file input './missing.ducky' from '/payloads'."
        )
        assert lines[5].startswith("    2: ")
        assert "No such file or directory" in lines[5]

    def test_multiline_cause_is_indented(self):
        try:
            try:
                raise ParseError("Unable to parse provided document.", line=2, column=1)
            except ParseError as exc:
                raise CompilationError("Unable to parse input 'x.ducky'.") from exc
        except CompilationError as exc:
            text = format_error_chain(exc)

        assert "    0: Unable to parse provided document.\n        --> 2:1" in text
