"""Program tree node definitions for MallardScript."""

from .base import ASTNode, ast_to_dict
from .statements import (
    Statement,
    Program,
    SimpleCommand,
    RemCommand,
    StringCommand,
    StringlnCommand,
    DelayCommand,
    DefaultDelayCommand,
    DefineCommand,
    ExfilCommand,
    SingleCommand,
    KeyValue,
    KeyChord,
    VariableDeclaration,
    VariableAssignment,
    ImportStatement,
    IfBlock,
    WhileBlock,
    EndOfDocument,
)

__all__ = [
    # Base classes
    "ASTNode",
    "ast_to_dict",
    # Statements
    "Statement",
    "Program",
    "SimpleCommand",
    "RemCommand",
    "StringCommand",
    "StringlnCommand",
    "DelayCommand",
    "DefaultDelayCommand",
    "DefineCommand",
    "ExfilCommand",
    "SingleCommand",
    "KeyValue",
    "KeyChord",
    "VariableDeclaration",
    "VariableAssignment",
    "ImportStatement",
    "IfBlock",
    "WhileBlock",
    "EndOfDocument",
]
