"""
Router: POST /polynomial, POST /polynomial/canonical
Postać kanoniczna wielomianu i ewaluacja w punkcie x ze śladem.
Błąd parsowania -> 422 z serializowanym CompileFailure.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adapters.trace_printer import polynomial_trace_lines
from api.dependencies import get_polynomial_parser, get_settings
from api.schemas import (
    CanonicalRequest,
    CanonicalResponse,
    PolynomialRequest,
    PolynomialResponse,
)
from contracts import PolynomialResult

router = APIRouter(prefix="/polynomial", tags=["polynomial"])


def _failure_response(result: PolynomialResult) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": result.error.model_dump(mode="json")},
    )


@router.post("", response_model=PolynomialResponse)
async def evaluate(
    body: PolynomialRequest,
    parser=Depends(get_polynomial_parser),
    settings=Depends(get_settings),
):
    result = parser.evaluate(body.text, body.x)
    if not result.ok:
        return _failure_response(result)
    return PolynomialResponse(
        source=result.source,
        terms=result.polynomial.terms,
        canonical=result.canonical,
        x=result.x,
        steps=result.steps,
        value=result.value,
        trace=polynomial_trace_lines(result, settings.trace_float_format),
    )


@router.post("/canonical", response_model=CanonicalResponse)
async def canonicalize(
    body: CanonicalRequest,
    parser=Depends(get_polynomial_parser),
):
    result = parser.canonicalize(body.text)
    if not result.ok:
        return _failure_response(result)
    return CanonicalResponse(
        source=result.source,
        terms=result.polynomial.terms,
        canonical=result.canonical,
    )
