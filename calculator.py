"""
calculator.py — punkt wejścia biblioteki: tekst → AST → liczba.

evaluate_expression()     — rzuca wyjątki CalcError bez zmian
try_evaluate_expression() — nigdy nie rzuca CalcError; błąd zakodowany w EvalOutcome
parse_expression()        — tylko parsowanie (dla CLI `ast` i API)

Lexer i parser są tworzone na każde wywołanie; brak stanu globalnego.
"""
from __future__ import annotations

import logging

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from contracts import CalcError, CalcErrorInfo, EvalOutcome, EvalResult, ExprAST

logger = logging.getLogger("intcalc")


def parse_expression(text: str) -> ExprAST:
    return RecursiveDescentParser().parse(text)


def evaluate_with_steps(text: str) -> EvalResult:
    return ASTEvaluator().eval_expr(parse_expression(text))


def evaluate_expression(text: str) -> int:
    """Liczy wartość wyrażenia. Błędy (składnia, dzielenie przez zero) propagują do wołającego."""
    return ASTEvaluator().evaluate(parse_expression(text))


def try_evaluate_expression(text: str) -> EvalOutcome:
    try:
        result = evaluate_with_steps(text)
    except CalcError as exc:
        logger.info("Evaluation of %r failed: %s", text, exc)
        return EvalOutcome(
            ok=False,
            error=CalcErrorInfo(kind=exc.kind, message=str(exc)),
        )
    return EvalOutcome(ok=True, value=result.value, steps=result.steps)
