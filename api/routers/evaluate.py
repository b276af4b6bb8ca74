"""
Router: POST /evaluate
Parsuje i liczy wyrażenie. Błędy CalcError obsługuje globalny handler w api/main.py.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator, get_parser
from api.schemas import EvaluateResponse, ExpressionRequest

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
def evaluate(
    body: ExpressionRequest,
    parser=Depends(get_parser),
    evaluator=Depends(get_evaluator),
) -> EvaluateResponse:
    ast = parser.parse(body.expression)
    result = evaluator.eval_expr(ast)
    return EvaluateResponse(
        expression=body.expression,
        value=result.value,
        steps=result.steps,
    )
