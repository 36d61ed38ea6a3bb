"""
Shared fixtures for lowering tests.
"""

from pathlib import Path
from typing import Dict
from unittest.mock import MagicMock

import pytest

from mallardscript.src.common.constants import DEFAULT_CONFIG
from mallardscript.src.lowering.compiler import lower_program
from mallardscript.src.lowering.sink import BufferSink
from mallardscript.src.parsing.parser import MallardParser


@pytest.fixture
def write_sources(tmp_path):
    """Write a mapping of relative path -> text below tmp_path.

    Returns the directory the files were written to.
    """

    def _write(files: Dict[str, str]) -> Path:
        for name, text in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def lower_source():
    """Parse and lower a single MallardScript text without imports."""
    parser = MallardParser()

    def _lower(source: str) -> str:
        return lower_program(parser.parse(source))

    return _lower


@pytest.fixture
def mock_parent():
    """Stand-in for MallardCompiler when driving StatementLowerer directly."""
    parent = MagicMock()
    parent.sink = BufferSink()
    parent.config = DEFAULT_CONFIG
    return parent
