"""
contracts.py — Jedyne źródło prawdy dla typów danych w IntCalc.
Tokeny, węzły AST, wyniki ewaluacji i wyjątki. Wszystkie moduły importują stąd.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Int64 ───────────────────────────────────────

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def wrap_int64(value: int) -> int:
    """Zawija dowolny int do 64-bitowej liczby ze znakiem (uzupełnienie do dwóch)."""
    value &= 0xFFFFFFFFFFFFFFFF
    if value > INT64_MAX:
        value -= 2 ** 64
    return value


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorKind(str, Enum):
    TYPE_MISMATCH = "type_mismatch"
    SYNTAX_ERROR = "syntax_error"
    DIVISION_BY_ZERO = "division_by_zero"


class CalcError(Exception):
    """Bazowy wyjątek kalkulatora. `kind` rozróżnia rodzaj błędu."""

    kind: ErrorKind


class TokenTypeMismatch(CalcError, TypeError):
    """Zapytano token o wariant, którego nie przechowuje (błąd parsera, nie wejścia)."""

    kind = ErrorKind.TYPE_MISMATCH


class ExprSyntaxError(CalcError, SyntaxError):
    """Strumień tokenów nie pasuje do gramatyki w bieżącej pozycji."""

    kind = ErrorKind.SYNTAX_ERROR

    def __init__(self, message: str, expected: str, found: Token) -> None:
        super().__init__(f"{message}: expected {expected}, found {found}")
        self.expected = expected
        self.found = found


class DivisionByZero(CalcError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


# ─────────────────────────── Tokeny ──────────────────────────────────────

SYMBOLS = frozenset("+-*/()")


class TokenKind(str, Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    END = "end"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    number: Optional[int] = None
    symbol: Optional[str] = None

    @classmethod
    def of_number(cls, value: int) -> Token:
        return cls(kind=TokenKind.NUMBER, number=value)

    @classmethod
    def of_symbol(cls, char: str) -> Token:
        if char not in SYMBOLS:
            raise ValueError(f"Not a symbol: {char!r}")
        return cls(kind=TokenKind.SYMBOL, symbol=char)

    @classmethod
    def end(cls) -> Token:
        return cls(kind=TokenKind.END)

    def as_number(self) -> int:
        if self.kind != TokenKind.NUMBER:
            raise TokenTypeMismatch("current token not number")
        return self.number  # type: ignore[return-value]

    def as_symbol(self) -> str:
        if self.kind != TokenKind.SYMBOL:
            raise TokenTypeMismatch("current token not symbol")
        return self.symbol  # type: ignore[return-value]

    def is_symbol(self, *chars: str) -> bool:
        return self.kind == TokenKind.SYMBOL and self.symbol in chars

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"number {self.number}"
        if self.kind == TokenKind.SYMBOL:
            return f"symbol {self.symbol!r}"
        return "end of input"


# ─────────────────────────── AST ─────────────────────────────────────────

# Minus unarny przełącza flagę `negated` zamiast owijać węzeł w osobny Negate.

class Constant(BaseModel):
    node_type: Literal["constant"] = "constant"
    value: int
    negated: bool = False

    def apply_minus(self) -> None:
        self.negated = not self.negated


class BinaryOp(BaseModel):
    node_type: Literal["binop"] = "binop"
    op: Literal["+", "-", "*", "/"]
    left: "ExprAST"
    right: "ExprAST"
    negated: bool = False

    def apply_minus(self) -> None:
        self.negated = not self.negated


ExprAST = Union[Constant, BinaryOp]
BinaryOp.model_rebuild()


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: int
    steps: list[str] = Field(default_factory=list)  # czytelne kroki w kolejności liczenia


class CalcErrorInfo(BaseModel):
    kind: ErrorKind
    message: str


class EvalOutcome(BaseModel):
    """Jawny wynik: albo wartość, albo błąd. Nigdy oba."""
    ok: bool
    value: Optional[int] = None
    steps: list[str] = Field(default_factory=list)
    error: Optional[CalcErrorInfo] = None
