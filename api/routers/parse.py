"""
Router: POST /parse, POST /tokens
Podgląd etapów pośrednich: AST i tokeny, bez liczenia wartości.
"""
from fastapi import APIRouter, Depends

from adapters.lexer.char_lexer import tokenize
from api.dependencies import get_parser
from api.schemas import ExpressionRequest, ParseResponse, TokensResponse

router = APIRouter(tags=["parse"])


@router.post("/parse", response_model=ParseResponse)
def parse(
    body: ExpressionRequest,
    parser=Depends(get_parser),
) -> ParseResponse:
    return ParseResponse(expression=body.expression, ast=parser.parse(body.expression))


@router.post("/tokens", response_model=TokensResponse)
def tokens(body: ExpressionRequest) -> TokensResponse:
    return TokensResponse(expression=body.expression, tokens=list(tokenize(body.expression)))
