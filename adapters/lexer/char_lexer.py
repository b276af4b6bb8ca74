"""
Adapter: CharLexer
Implementuje port Lexer — skaner znak po znaku z jednym tokenem lookahead.

Zasady:
  - ciąg cyfr ASCII 0-9 → Number (akumulacja value*10 + cyfra, zawijanie int64)
  - jeden z + - * / ( ) → Symbol
  - każdy inny znak jest pomijany jak biały znak (także interpunkcja)
  - koniec wejścia → End (także przy kolejnych wywołaniach advance())

Pierwszy token jest czytany już w konstruktorze.
"""
from __future__ import annotations

import io
import logging
from typing import Iterator, Optional, TextIO, Union

from contracts import SYMBOLS, Token, TokenKind, wrap_int64

logger = logging.getLogger("intcalc.lexer")

_DIGITS = "0123456789"


class CharLexer:
    """Leniwy tokenizer nad napisem lub strumieniem tekstowym."""

    def __init__(self, source: Union[str, TextIO]) -> None:
        self._stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._pushback: Optional[str] = None
        self._current = Token.end()
        self.advance()

    # -- Lexer protocol ----------------------------------------------------

    def current(self) -> Token:
        return self._current

    def advance(self) -> Token:
        self._current = self._scan()
        logger.debug("token: %s", self._current)
        return self._current

    # -- Prywatne ----------------------------------------------------------

    def _read_char(self) -> str:
        """Zwraca kolejny znak albo '' na końcu wejścia."""
        if self._pushback is not None:
            char, self._pushback = self._pushback, None
            return char
        return self._stream.read(1)

    def _scan(self) -> Token:
        value = 0
        in_number = False
        while True:
            char = self._read_char()
            if not char:
                break
            if char in _DIGITS:
                in_number = True
                value = wrap_int64(value * 10 + int(char))
                continue
            if in_number:
                # Pierwszy znak po liczbie wraca do ponownego skanowania
                self._pushback = char
                return Token.of_number(value)
            if char in SYMBOLS:
                return Token.of_symbol(char)
            # reszta to szum

        if in_number:
            return Token.of_number(value)
        return Token.end()


def tokenize(source: Union[str, TextIO]) -> Iterator[Token]:
    """Zwraca wszystkie tokeny źródła, łącznie z końcowym End."""
    lexer = CharLexer(source)
    token = lexer.current()
    while token.kind != TokenKind.END:
        yield token
        token = lexer.advance()
    yield token
