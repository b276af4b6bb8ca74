"""
Adapter: RecursiveDescentParser
Implementuje port ExpressionParser — parser zstępujący, jedna metoda na poziom gramatyki:

  expression   = term (('+'|'-') term)*
  term         = factor (('*'|'/') factor)*
  factor       = NUMBER | '(' expression ')' | '-' factor_inner
  factor_inner = NUMBER | '(' expression ')'

Operatory binarne wiążą lewostronnie. Minus unarny dopuszczalny tylko
bezpośrednio przed liczbą lub '(' — "--5" to błąd składni.

Zachowana pobłażliwość:
  - nawias zamykający jest konsumowany bez sprawdzania, czy to naprawdę ')'
    ("(2+3" i "(2+3]4" dają 5)
  - tokeny po kompletnym wyrażeniu nie są sprawdzane ("2+3)" daje 5)
Oba przypadki są tylko logowane na poziomie DEBUG.

Zbyt głębokie zagnieżdżenie nawiasów (przepełnienie stosu) → ExprSyntaxError.
"""
from __future__ import annotations

import logging
from typing import TextIO, Union

from adapters.lexer.char_lexer import CharLexer
from contracts import (
    BinaryOp,
    Constant,
    ExprAST,
    ExprSyntaxError,
    TokenKind,
)
from ports.lexer import Lexer

logger = logging.getLogger("intcalc.parser")


class RecursiveDescentParser:
    """Bezstanowy parser; każdy parse() tworzy własny lexer."""

    # -- ExpressionParser protocol -----------------------------------------

    def parse(self, source: Union[str, TextIO]) -> ExprAST:
        lexer = CharLexer(source)
        try:
            ast = self.parse_expression(lexer)
        except RecursionError:
            # Każdy poziom nawiasów to kilka ramek stosu
            raise ExprSyntaxError(
                "expression nested too deeply", expected="shallower nesting", found=lexer.current()
            ) from None
        trailing = lexer.current()
        if trailing.kind != TokenKind.END:
            logger.debug("Ignoring trailing input starting at %s", trailing)
        return ast

    # -- Poziomy gramatyki -------------------------------------------------

    def parse_expression(self, lexer: Lexer) -> ExprAST:
        node = self.parse_term(lexer)
        while lexer.current().is_symbol("+", "-"):
            op = lexer.current().as_symbol()
            lexer.advance()
            right = self.parse_term(lexer)
            node = BinaryOp(op=op, left=node, right=right)  # type: ignore[arg-type]
        return node

    def parse_term(self, lexer: Lexer) -> ExprAST:
        node = self.parse_factor(lexer)
        while lexer.current().is_symbol("*", "/"):
            op = lexer.current().as_symbol()
            lexer.advance()
            right = self.parse_factor(lexer)
            node = BinaryOp(op=op, left=node, right=right)  # type: ignore[arg-type]
        return node

    def parse_factor(self, lexer: Lexer) -> ExprAST:
        token = lexer.current()

        if token.is_symbol("-"):
            lexer.advance()
            token = lexer.current()
            if token.kind == TokenKind.NUMBER:
                lexer.advance()
                return Constant(value=token.as_number(), negated=True)
            if token.is_symbol("("):
                lexer.advance()
                node = self._parenthesized(lexer)
                node.apply_minus()
                return node
            raise ExprSyntaxError(
                "invalid factor after unary minus", expected="number or '('", found=token
            )

        if token.kind == TokenKind.NUMBER:
            lexer.advance()
            return Constant(value=token.as_number())
        if token.is_symbol("("):
            lexer.advance()
            return self._parenthesized(lexer)
        raise ExprSyntaxError(
            "invalid factor", expected="number, '(' or unary '-'", found=token
        )

    # -- Prywatne ----------------------------------------------------------

    def _parenthesized(self, lexer: Lexer) -> ExprAST:
        """Wyrażenie po '('; następny token jest pomijany jako nawias zamykający."""
        node = self.parse_expression(lexer)
        closing = lexer.current()
        if not closing.is_symbol(")"):
            logger.debug("Expected ')', skipping %s instead", closing)
        lexer.advance()
        return node
