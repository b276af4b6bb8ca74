from __future__ import annotations

import pytest

from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from adapters.lexer.char_lexer import CharLexer
from contracts import BinaryOp, Constant, ExprSyntaxError, TokenKind


def test_parser_builds_single_constant():
    ast = RecursiveDescentParser().parse("42")

    assert ast == Constant(value=42)


def test_parser_respects_precedence():
    ast = RecursiveDescentParser().parse("2+3*4")

    assert ast == BinaryOp(
        op="+",
        left=Constant(value=2),
        right=BinaryOp(op="*", left=Constant(value=3), right=Constant(value=4)),
    )


def test_parser_folds_left_associatively():
    ast = RecursiveDescentParser().parse("10-2-3")

    assert ast == BinaryOp(
        op="-",
        left=BinaryOp(op="-", left=Constant(value=10), right=Constant(value=2)),
        right=Constant(value=3),
    )


def test_parser_unary_minus_before_number_negates_constant():
    ast = RecursiveDescentParser().parse("2*-3")

    assert isinstance(ast, BinaryOp)
    assert ast.right == Constant(value=3, negated=True)


def test_parser_unary_minus_before_paren_flags_subtree():
    ast = RecursiveDescentParser().parse("-(2+3)")

    assert isinstance(ast, BinaryOp)
    assert ast.op == "+"
    assert ast.negated is True
    assert ast.left == Constant(value=2)


def test_parser_nested_unary_minus_toggles_flag_back():
    ast = RecursiveDescentParser().parse("-(-5)")

    assert ast == Constant(value=5, negated=False)


@pytest.mark.parametrize("text", ["--5", "-+5", "-)"])
def test_parser_rejects_unary_minus_without_number_or_paren(text):
    with pytest.raises(ExprSyntaxError) as exc_info:
        RecursiveDescentParser().parse(text)

    assert "unary minus" in str(exc_info.value)


@pytest.mark.parametrize("text", ["", "*2", "2+", "()", "abc"])
def test_parser_rejects_missing_factor(text):
    with pytest.raises(ExprSyntaxError):
        RecursiveDescentParser().parse(text)


def test_syntax_error_carries_found_token():
    with pytest.raises(ExprSyntaxError) as exc_info:
        RecursiveDescentParser().parse("2+*3")

    assert exc_info.value.found.as_symbol() == "*"
    assert "expected" in str(exc_info.value)


def test_parser_accepts_missing_closing_paren():
    ast = RecursiveDescentParser().parse("(2+3")

    assert ast == BinaryOp(op="+", left=Constant(value=2), right=Constant(value=3))


def test_parser_skips_any_token_in_closing_paren_position():
    ast = RecursiveDescentParser().parse("(2+3]4")

    assert ast == BinaryOp(op="+", left=Constant(value=2), right=Constant(value=3))


def test_parser_ignores_trailing_tokens():
    ast = RecursiveDescentParser().parse("2+3)")

    assert ast == BinaryOp(op="+", left=Constant(value=2), right=Constant(value=3))


def test_parse_expression_leaves_trailing_token_as_lookahead():
    lexer = CharLexer("1+2)*3")
    RecursiveDescentParser().parse_expression(lexer)

    assert lexer.current().kind == TokenKind.SYMBOL
    assert lexer.current().symbol == ")"


def test_parser_does_not_evaluate_division_by_zero():
    ast = RecursiveDescentParser().parse("5/(2-2)")

    assert isinstance(ast, BinaryOp)
    assert ast.op == "/"


def test_parser_handles_long_flat_chain():
    ast = RecursiveDescentParser().parse("+".join(["1"] * 1500))

    assert isinstance(ast, BinaryOp)
    assert ast.right == Constant(value=1)


def test_parser_reports_too_deep_nesting_as_syntax_error():
    text = "(" * 1000 + "1" + ")" * 1000

    with pytest.raises(ExprSyntaxError) as exc_info:
        RecursiveDescentParser().parse(text)

    assert "nested too deeply" in str(exc_info.value)


def test_parser_accepts_moderate_nesting():
    ast = RecursiveDescentParser().parse("(" * 50 + "7" + ")" * 50)

    assert ast == Constant(value=7)
