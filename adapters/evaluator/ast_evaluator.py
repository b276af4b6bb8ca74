"""
Adapter: ASTEvaluator
Implementuje port Evaluator — przejście ExprAST (jawny stos) na liczbach int64.

Arytmetyka naśladuje natywne int64:
  - każdy wynik pośredni jest zawijany (wrap_int64), bez wykrywania przepełnienia
  - '/' obcina w stronę zera (7/2 = 3, -7/2 = -3), a nie w dół jak '//'
  - dzielenie przez zero → DivisionByZero, dopiero w czasie liczenia

Zawsze liczone jest lewe poddrzewo, potem prawe, bez skracania.

evaluate()  — sama wartość
eval_expr() — wartość + czytelne kroki
"""
from __future__ import annotations

import logging
from typing import Optional

from contracts import (
    BinaryOp,
    Constant,
    DivisionByZero,
    EvalResult,
    ExprAST,
    wrap_int64,
)

logger = logging.getLogger("intcalc.evaluator")


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero("division by zero")
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


# Mapowanie symboli operatorów na operacje
_OP_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _trunc_div,
}


class ASTEvaluator:
    """Dokładny ewaluator wyrażeń całkowitoliczbowych oparty na AST."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, ast: ExprAST) -> int:
        return self._walk(ast, None)

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        steps: list[str] = []
        value = self._walk(ast, steps)
        logger.debug("Evaluated to %d in %d step(s)", value, len(steps))
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _walk(self, ast: ExprAST, steps: Optional[list[str]]) -> int:
        """
        Przejście post-order z jawnym stosem (długie łańcuchy "1+1+...+1"
        nie zużywają stosu wywołań). Lewe poddrzewo, prawe, potem węzeł.
        steps=None — liczona jest tylko wartość.
        """
        pending: list[tuple[ExprAST, bool]] = [(ast, False)]
        values: list[int] = []

        while pending:
            node, children_done = pending.pop()

            if isinstance(node, Constant):
                value = node.value
                if node.negated:
                    value = _negate(value, steps)
                values.append(value)
                continue

            if isinstance(node, BinaryOp):
                if not children_done:
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
                    continue

                fn = _OP_FUNCS.get(node.op)
                if fn is None:
                    raise ValueError(f"Unknown operator: {node.op!r}")

                right_val = values.pop()
                left_val = values.pop()
                result = wrap_int64(fn(left_val, right_val))
                if steps is not None:
                    steps.append(f"{left_val} {node.op} {right_val} = {result}")
                if node.negated:
                    result = _negate(result, steps)
                values.append(result)
                continue

            raise TypeError(f"Unknown AST node type: {type(node)}")

        return values.pop()


def _negate(value: int, steps: Optional[list[str]]) -> int:
    result = wrap_int64(-value)
    if steps is not None:
        steps.append(f"-({value}) = {result}")
    return result
