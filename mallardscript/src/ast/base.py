"""Base classes and utilities for the program tree."""

from __future__ import annotations

from abc import ABC
from typing import Any, Dict, Optional


class ASTNode(ABC):
    """Base class for all program tree nodes."""

    def __init__(
        self,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
    ) -> None:
        self.line = line
        self.column = column
        self.source_file = source_file


def ast_to_dict(node: ASTNode) -> Any:
    """Convert a node to a dictionary representation for debugging."""
    if not isinstance(node, ASTNode):
        return node

    result: Dict[str, Any] = {"type": type(node).__name__}
    for field_name, field_value in node.__dict__.items():
        if field_name in ("line", "column", "source_file"):
            continue
        if isinstance(field_value, list):
            result[field_name] = [ast_to_dict(item) for item in field_value]
        elif isinstance(field_value, ASTNode):
            result[field_name] = ast_to_dict(field_value)
        else:
            result[field_name] = field_value

    return result
