"""
Tests for common/source_location.py - Source location tracking.
"""

from mallardscript.src.ast.statements import RemCommand
from mallardscript.src.common.source_location import SourceLocation


class TestSourceLocation:
    """Tests for SourceLocation class."""

    def test_source_location_str_with_file(self):
        """File paths are shortened to their name."""
        loc = SourceLocation(file="/payloads/lib/helper.ducky", line=10)
        assert str(loc) == "helper.ducky:10"

    def test_source_location_str_without_file(self):
        assert str(SourceLocation(line=5)) == "?:5"

    def test_source_location_str_file_only(self):
        assert str(SourceLocation(file="index.ducky")) == "index.ducky"

    def test_of_node(self):
        """A location can be taken from any node."""
        node = RemCommand("Hello.", line=3, column=1)
        node.source_file = "index.ducky"
        assert SourceLocation.of(node) == SourceLocation("index.ducky", 3)


class TestRender:
    """Tests for SourceLocation.render."""

    def test_render_none(self):
        assert SourceLocation.render(None) is None

    def test_render_node_without_location(self):
        assert SourceLocation.render(RemCommand("Hello.")) is None

    def test_render_file_and_line(self):
        node = RemCommand("Hello.", line=4)
        node.source_file = "/tmp/index.ducky"
        assert SourceLocation.render(node) == "index.ducky:4"

    def test_render_line_only(self):
        assert SourceLocation.render(RemCommand("Hello.", line=7)) == "?:7"

    def test_render_default_file(self):
        node = RemCommand("Hello.")
        assert SourceLocation.render(node, "main.ducky") == "main.ducky"
