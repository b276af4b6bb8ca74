#!/usr/bin/env python3
"""
intcalc.py — CLI narzędzie IntCalc.

Bez podkomendy: wypisuje zachętę, czyta jedno słowo (do białego znaku) ze stdin
i liczy jego wartość. Kod wyjścia zawsze 0, także przy błędzie.

Podkomendy:
    eval    — policz wyrażenie (--expr lub stdin), opcjonalnie z krokami
    tokens  — pokaż tokeny wyrażenia
    ast     — pokaż AST wyrażenia jako JSON

Użycie:
    python intcalc.py
    python intcalc.py eval --expr "2+3*4" --steps
    python intcalc.py tokens --expr "(2+3)*4"
    python intcalc.py ast --expr "-(2+3)"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.lexer.char_lexer import tokenize
from calculator import evaluate_with_steps, parse_expression
from config import Settings
from contracts import CalcError

logger = logging.getLogger("intcalc.cli")

ERROR_PREAMBLE = "Occured error during evaluating expression"


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _read_word() -> str:
    """Pierwsze słowo ze stdin (jak `cin >> s`); pusty napis na końcu wejścia."""
    for line in sys.stdin:
        words = line.split()
        if words:
            return words[0]
    return ""


def _expression(args: argparse.Namespace, settings: Settings) -> str:
    expr = getattr(args, "expr", None)
    if expr is not None:
        return expr
    print(settings.prompt)
    return _read_word()


def _report_error(exc: CalcError) -> None:
    print(ERROR_PREAMBLE, file=sys.stderr)
    print(exc, file=sys.stderr)


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Step")
    for idx, step in enumerate(steps, 1):
        table.add_row(str(idx), step)
    _console().print(table)


def _print_tokens_table(tokens: list[Any]) -> None:
    table = Table(title=f"Tokens [{len(tokens)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True, style="cyan")
    table.add_column("Value")
    for idx, token in enumerate(tokens):
        if token.number is not None:
            value = str(token.number)
        else:
            value = token.symbol or "-"
        table.add_row(str(idx), token.kind.value, value)
    _console().print(table)


# -- commands --------------------------------------------------------------

def _eval(args: argparse.Namespace, settings: Settings) -> None:
    text = _expression(args, settings)
    try:
        result = evaluate_with_steps(text)
    except CalcError as exc:
        logger.info("Failed to evaluate %r: %s", text, exc)
        _report_error(exc)
        return
    print(f"Evaluated! Result is {result.value}")
    if getattr(args, "steps", False):
        _print_steps_table(result.steps)


def _tokens(args: argparse.Namespace, settings: Settings) -> None:
    text = _expression(args, settings)
    _print_tokens_table(list(tokenize(text)))


def _ast(args: argparse.Namespace, settings: Settings) -> None:
    text = _expression(args, settings)
    try:
        ast = parse_expression(text)
    except CalcError as exc:
        logger.info("Failed to parse %r: %s", text, exc)
        _report_error(exc)
        return
    print(ast.model_dump_json(indent=2))


def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = argparse.ArgumentParser(
        prog="intcalc",
        description="IntCalc — kalkulator wyrażeń całkowitoliczbowych",
    )
    sub = parser.add_subparsers(dest="command")

    # eval
    p = sub.add_parser("eval", help="Policz wyrażenie")
    p.add_argument("--expr", "-e", help="Wyrażenie (domyślnie: jedno słowo ze stdin)")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Wyświetl kroki obliczeń")

    # tokens
    p = sub.add_parser("tokens", help="Pokaż tokeny wyrażenia")
    p.add_argument("--expr", "-e", help="Wyrażenie (domyślnie: jedno słowo ze stdin)")

    # ast
    p = sub.add_parser("ast", help="Pokaż AST wyrażenia jako JSON")
    p.add_argument("--expr", "-e", help="Wyrażenie (domyślnie: jedno słowo ze stdin)")

    args = parser.parse_args(argv)

    cmds = {
        "eval":   _eval,
        "tokens": _tokens,
        "ast":    _ast,
    }
    cmds.get(args.command, _eval)(args, settings)


if __name__ == "__main__":
    main()
