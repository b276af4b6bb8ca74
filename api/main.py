"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Inicjalizuje bezstanowe adaptery (parser, evaluator); lexer powstaje na każde żądanie

Błędy CalcError mapowane na statusy HTTP:
  syntax_error → 422, division_by_zero → 400, type_mismatch → 500
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from api.routers import evaluate, parse
from api.schemas import ErrorResponse, HealthResponse
from config import Settings
from contracts import CalcError, ErrorKind

logger = logging.getLogger("intcalc.api")

_STATUS_BY_KIND = {
    ErrorKind.SYNTAX_ERROR: 422,
    ErrorKind.DIVISION_BY_ZERO: 400,
    ErrorKind.TYPE_MISMATCH: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Adaptery bezstanowe — tworzone raz
    app.state.parser = RecursiveDescentParser()
    app.state.evaluator = ASTEvaluator()

    logger.info("IntCalc API ready.")
    yield
    logger.info("Shutting down.")


def create_app() -> FastAPI:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(parse.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalny handler błędów
    @app.exception_handler(CalcError)
    async def calc_error_handler(request: Request, exc: CalcError):
        status = _STATUS_BY_KIND.get(exc.kind, 500)
        if status >= 500:
            logger.error("Internal calculator error on %s: %s", request.url.path, exc)
        else:
            logger.info("Rejected expression on %s: %s", request.url.path, exc)
        body = ErrorResponse(detail=str(exc), kind=exc.kind)
        return JSONResponse(status_code=status, content=body.model_dump(mode="json"))

    return app


app = create_app()
