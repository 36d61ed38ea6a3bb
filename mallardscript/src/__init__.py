"""Compiler stages: program tree, parsing, lowering and shared utilities."""
