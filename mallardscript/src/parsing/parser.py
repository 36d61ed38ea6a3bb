"""Parser entry points for MallardScript and DuckyScript."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import UnexpectedInput

from mallardscript.src.ast import ASTNode, EndOfDocument, Program
from mallardscript.src.common.exceptions import ParseError
from .transformer import DuckyTransformer

GRAMMAR_DIRECTORY = Path(__file__).resolve().parent.parent.parent / "grammar"


class DialectParser:
    """Lark LALR parser for one dialect, producing a Program.

    Every parsed Program ends with an EndOfDocument marker standing for the
    trailing line break the parser guarantees.
    """

    grammar_name = ""

    def __init__(self, grammar_path: Optional[Path] = None):
        """Initialize parser with grammar file."""
        if grammar_path is None:
            grammar_path = GRAMMAR_DIRECTORY / self.grammar_name

        self.grammar_path = grammar_path
        self.parser = None
        self.transformer = DuckyTransformer()
        self._load_grammar()

    def _load_grammar(self) -> None:
        """Load and compile the Lark grammar."""
        try:
            # Lark.open resolves the relative %import of keys.lark
            self.parser = Lark.open(
                str(self.grammar_path),
                parser="lalr",
                transformer=self.transformer,
                start="start",
                debug=False,
            )
        except FileNotFoundError as exc:
            raise FileNotFoundError(
                f"Grammar file not found: {self.grammar_path}"
            ) from exc
        except Exception as exc:  # pragma: no cover - unexpected
            raise RuntimeError(f"Failed to load grammar: {exc}") from exc

    def parse(self, source_code: str, filename: str = "<string>") -> Program:
        """Parse source text into a Program.

        Args:
            source_code: The source code text to parse
            filename: Source file path for error reporting

        Returns:
            Program whose last statement is an EndOfDocument marker

        Raises:
            ParseError: If the text does not match the grammar
        """
        if self.parser is None:
            raise RuntimeError("Parser not initialized")

        if source_code and not source_code.endswith("\n"):
            source_code += "\n"

        try:
            program = self.parser.parse(source_code)
        except UnexpectedInput as exc:
            raise ParseError(
                "Unable to parse provided document.",
                source_file=filename,
                line=getattr(exc, "line", 0) or 0,
                column=getattr(exc, "column", 0) or 0,
                context=exc.get_context(source_code),
            ) from exc

        if not isinstance(program, Program):
            raise RuntimeError(f"Expected Program node, got {type(program)}")

        program.statements.append(EndOfDocument())
        self._attach_source_file(program, filename)
        return program

    def parse_file(self, file_path: Path) -> Program:
        """Parse a file into a Program."""
        try:
            source_code = Path(file_path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Source file not found: {file_path}") from exc
        return self.parse(source_code, str(file_path))

    def _attach_source_file(self, node: ASTNode, filename: str) -> None:
        """Recursively annotate nodes with their originating filename."""
        if not isinstance(node, ASTNode):
            return

        if filename:
            node.source_file = filename

        for attr in vars(node).values():
            if isinstance(attr, ASTNode):
                self._attach_source_file(attr, filename)
            elif isinstance(attr, list):
                for item in attr:
                    if isinstance(item, ASTNode):
                        self._attach_source_file(item, filename)


class MallardParser(DialectParser):
    """Parser for the MallardScript source dialect."""

    grammar_name = "mallardscript.lark"


class DuckyParser(DialectParser):
    """Parser for the DuckyScript target dialect, used to validate output."""

    grammar_name = "duckyscript.lark"
