"""
Port: ExpressionParser
Odpowiedzialność: budowa AST z tekstu wyrażenia z zachowaniem priorytetów operatorów.
"""
from typing import Protocol, TextIO, Union, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class ExpressionParser(Protocol):
    def parse(self, source: Union[str, TextIO]) -> ExprAST:
        """
        Parses an arithmetic expression into a Constant / BinaryOp tree.
        Left-associative binary operators; '*' and '/' bind tighter than '+' and '-'.
        Raises ExprSyntaxError when the token stream does not match the grammar.
        Does not evaluate anything: '5/0' parses successfully.
        """
        ...
