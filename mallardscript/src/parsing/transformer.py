"""Parse tree transformer producing program tree nodes."""

from __future__ import annotations

from typing import List, Optional, Type

from lark import Transformer, Token

from mallardscript.src.ast.statements import (
    ASTNode,
    Program,
    Statement,
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
)


class DuckyTransformer(Transformer):
    """Transforms the Lark parse tree of either dialect into typed nodes.

    The DuckyScript grammar has no ``import_statement`` rule, so the
    corresponding callback is simply never reached for that dialect.
    """

    def _set_position(self, node: ASTNode, token_or_tree) -> ASTNode:
        """Set line/column position on a node from a Lark token/tree."""
        if hasattr(token_or_tree, "meta"):
            node.line = token_or_tree.meta.line
            node.column = token_or_tree.meta.column
        elif hasattr(token_or_tree, "line"):
            node.line = token_or_tree.line
            node.column = token_or_tree.column
        return node

    def _simple(self, command: Type[SimpleCommand], items) -> SimpleCommand:
        token: Optional[Token] = items[0] if items else None
        node = command(value=str(token) if token is not None else None)
        if token is not None:
            self._set_position(node, token)
        return node

    def start(self, statements: List[Statement]) -> Program:
        """start: _NL? (statement _NL)*"""
        return Program(statements=list(statements))

    def block(self, statements: List[Statement]) -> List[Statement]:
        """block: (statement _NL)*"""
        return list(statements)

    def command_rem(self, items) -> SimpleCommand:
        """command_rem: _REM TEXT?"""
        return self._simple(RemCommand, items)

    def command_string(self, items) -> SimpleCommand:
        """command_string: _STRING TEXT"""
        return self._simple(StringCommand, items)

    def command_stringln(self, items) -> SimpleCommand:
        """command_stringln: _STRINGLN TEXT"""
        return self._simple(StringlnCommand, items)

    def command_delay(self, items) -> SimpleCommand:
        """command_delay: _DELAY TEXT"""
        return self._simple(DelayCommand, items)

    def command_default_delay(self, items) -> SimpleCommand:
        """command_default_delay: _DEFAULT_DELAY TEXT"""
        return self._simple(DefaultDelayCommand, items)

    def command_define(self, items) -> SimpleCommand:
        """command_define: _DEFINE TEXT"""
        return self._simple(DefineCommand, items)

    def command_exfil(self, items) -> SimpleCommand:
        """command_exfil: _EXFIL VARIABLE"""
        return self._simple(ExfilCommand, items)

    def single_command(self, items) -> SingleCommand:
        """single_command: BARE_COMMAND"""
        token = items[0]
        return self._set_position(SingleCommand(name=str(token)), token)

    def key_chord(self, items) -> KeyChord:
        """key_chord: MODIFIER key_chord | MODIFIER | KEY"""
        head = items[0]
        if head.type == "KEY":
            chord = KeyChord(statements=[], remaining_keys=str(head))
            return self._set_position(chord, head)

        # A modifier is a leaf followed by the chord for the rest of the line
        statements = [self._set_position(KeyValue(name=str(head)), head)]
        statements.extend(items[1:])

        chord = KeyChord(statements=statements)
        return self._set_position(chord, head)

    def variable_declaration(self, items) -> VariableDeclaration:
        """variable_declaration: _VAR VARIABLE "=" TEXT"""
        variable, assignment = items
        node = VariableDeclaration(
            name=str(variable)[1:], assignment=str(assignment).rstrip()
        )
        return self._set_position(node, variable)

    def variable_assignment(self, items) -> VariableAssignment:
        """variable_assignment: VARIABLE "=" TEXT"""
        variable, assignment = items
        node = VariableAssignment(
            name=str(variable)[1:], assignment=str(assignment).rstrip()
        )
        return self._set_position(node, variable)

    def import_statement(self, items) -> ImportStatement:
        """import_statement: _IMPORT IMPORT_PATH"""
        token = items[0]
        return self._set_position(ImportStatement(path=token.value[1:-1]), token)

    def if_block(self, items) -> IfBlock:
        """if_block: _IF CONDITION "THEN" _NL block else_clause? _END_IF"""
        condition = items[0]
        statements_false = items[2] if len(items) > 2 else []
        node = IfBlock(
            expression=str(condition),
            statements_true=items[1],
            statements_false=statements_false,
        )
        return self._set_position(node, condition)

    def else_clause(self, items) -> List[Statement]:
        """else_clause: _ELSE _NL block"""
        return items[0]

    def else_if_clause(self, items) -> List[Statement]:
        """ELSE IF ... becomes an IF nested in the false branch."""
        return [self.if_block(items)]

    def while_block(self, items) -> WhileBlock:
        """while_block: _WHILE TEXT _NL block _END_WHILE"""
        expression, statements = items
        node = WhileBlock(expression=str(expression).rstrip(), statements=statements)
        return self._set_position(node, expression)
