"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import ErrorKind, ExprAST, Token


class ExpressionRequest(BaseModel):
    expression: str = Field(max_length=10_000)


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateResponse(BaseModel):
    expression: str
    value: int
    steps: list[str]


# ─────────────────────────── /parse, /tokens ─────────────────────

class ParseResponse(BaseModel):
    expression: str
    ast: ExprAST


class TokensResponse(BaseModel):
    expression: str
    tokens: list[Token]


# ─────────────────────────── /health, błędy ──────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str


class ErrorResponse(BaseModel):
    detail: str
    kind: ErrorKind
