"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wartości AST na liczbach int64.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, ast: ExprAST) -> int:
        """
        Evaluates an arithmetic AST to a signed 64-bit integer.
        Arithmetic wraps around like native int64; '/' truncates toward zero.
        Raises DivisionByZero when a '/' right operand evaluates to 0.
        """
        ...

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Same as evaluate(), but also returns human-readable computation steps
        in evaluation order (left subtree, right subtree, then the node itself).
        Never mutates the AST.
        """
        ...
