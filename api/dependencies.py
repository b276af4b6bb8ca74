"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from ports.evaluator import Evaluator
from ports.expression_parser import ExpressionParser


def get_parser(request: Request) -> ExpressionParser:
    return request.app.state.parser


def get_evaluator(request: Request) -> Evaluator:
    return request.app.state.evaluator
