from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Any

"""Source location utilities for tracking code positions."""


@dataclass
class SourceLocation:
    """Represents a line in a source file."""

    file: Optional[str] = None
    line: int = 0

    def __str__(self) -> str:
        """Format as name:line, with ? standing in for an unknown file."""
        name = Path(self.file).name if self.file else "?"
        if self.line > 0:
            return f"{name}:{self.line}"
        return name

    @classmethod
    def of(cls, node: Optional[Any]) -> "SourceLocation":
        """Build a location from any node carrying line/source_file."""
        return cls(
            file=getattr(node, "source_file", None),
            line=getattr(node, "line", 0) or 0,
        )

    @staticmethod
    def render(
        node: Optional[Any], default_file: Optional[str] = None
    ) -> Optional[str]:
        """Format a human-friendly file:line string for a node."""
        if node is None:
            return None

        location = SourceLocation.of(node)
        location.file = location.file or default_file

        if not location.file and location.line <= 0:
            return None

        return str(location)
