"""
Port: Lexer
Odpowiedzialność: zamiana strumienia znaków na tokeny, jeden na żądanie.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Lexer(Protocol):
    def current(self) -> Token:
        """
        Returns the most recently produced token without consuming input.
        Valid right after construction (the first token is read eagerly).
        """
        ...

    def advance(self) -> Token:
        """
        Scans forward to the next token, replaces current() and returns it.
        Once the End token is reached, further calls keep returning End.
        """
        ...
