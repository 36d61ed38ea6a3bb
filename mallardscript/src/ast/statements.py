from __future__ import annotations
from typing import List, Optional, Union
from .base import ASTNode

"""Statement node definitions for MallardScript and DuckyScript."""


class Program(ASTNode):
    """Root node representing one parsed document."""

    def __init__(
        self, statements: List["Statement"], line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.statements = statements


class Statement(ASTNode):
    """Base class for all statements."""

    def __init__(self, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)


class SimpleCommand(Statement):
    """KEYWORD [value]

    Subclasses fix the DuckyScript keyword; the value is kept verbatim.
    """

    keyword: str = ""

    def __init__(
        self, value: Optional[str] = None, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.value = value


class RemCommand(SimpleCommand):
    """REM comment text"""

    keyword = "REM"


class StringCommand(SimpleCommand):
    """STRING text to type"""

    keyword = "STRING"


class StringlnCommand(SimpleCommand):
    """STRINGLN text to type followed by ENTER"""

    keyword = "STRINGLN"


class DelayCommand(SimpleCommand):
    """DELAY milliseconds"""

    keyword = "DELAY"


class DefaultDelayCommand(SimpleCommand):
    """DEFAULTDELAY milliseconds (DEFAULT_DELAY is accepted as an alias)"""

    keyword = "DEFAULTDELAY"


class DefineCommand(SimpleCommand):
    """DEFINE #NAME value"""

    keyword = "DEFINE"


class ExfilCommand(SimpleCommand):
    """EXFIL $variable"""

    keyword = "EXFIL"


class SingleCommand(Statement):
    """A bare keyword such as STOP_PAYLOAD or WAIT_FOR_BUTTON_PRESS."""

    def __init__(self, name: str, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.name = name


class KeyValue(Statement):
    """A single key name inside a key chord."""

    def __init__(self, name: str, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.name = name


class KeyChord(Statement):
    """MODIFIER ... [KEY]

    Each modifier is a KeyValue leaf followed by a nested chord holding the
    rest of the line. A trailing non-modifier key is kept in remaining_keys.
    """

    def __init__(
        self,
        statements: List[Union["KeyChord", KeyValue]],
        remaining_keys: str = "",
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.statements = statements
        self.remaining_keys = remaining_keys


class VariableDeclaration(Statement):
    """VAR $name = expression"""

    def __init__(
        self, name: str, assignment: str, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.name = name  # Without the leading "$"
        self.assignment = assignment


class VariableAssignment(Statement):
    """$name = expression"""

    def __init__(
        self, name: str, assignment: str, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.name = name
        self.assignment = assignment


class ImportStatement(Statement):
    """IMPORT "path/relative/to/this/file.ducky" """

    def __init__(self, path: str, line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.path = path


class IfBlock(Statement):
    """IF expression THEN ... [ELSE ...] END_IF"""

    def __init__(
        self,
        expression: str,
        statements_true: List[Statement],
        statements_false: Optional[List[Statement]] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.expression = expression
        self.statements_true = statements_true
        self.statements_false = statements_false or []


class WhileBlock(Statement):
    """WHILE expression ... END_WHILE"""

    def __init__(
        self,
        expression: str,
        statements: List[Statement],
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.expression = expression
        self.statements = statements


class EndOfDocument(Statement):
    """Synthetic last statement of every parsed document.

    Stands for the single line break the parser guarantees at the end of the
    text; lowering removes it from the output again.
    """
