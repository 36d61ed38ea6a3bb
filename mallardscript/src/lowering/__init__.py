from .compiler import MallardCompiler, compile_file, lower_program
from .key_chord import collect_key_names, flatten_key_chord
from .sink import BufferSink, FileSink, OutputSink
from .statement_lowerer import StatementLowerer

"""Lowering subpackage exports."""


__all__ = [
    "MallardCompiler",
    "compile_file",
    "lower_program",
    "collect_key_names",
    "flatten_key_chord",
    "BufferSink",
    "FileSink",
    "OutputSink",
    "StatementLowerer",
]
