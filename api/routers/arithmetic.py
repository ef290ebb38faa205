"""
Router: POST /arithmetic
Kompiluje wyrażenie arytmetyczne: instrukcje, środowisko tempów, wynik, ślad.
Błąd kompilacji -> 422 z serializowanym CompileFailure.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adapters.trace_printer import arithmetic_trace_lines
from api.dependencies import get_expression_compiler, get_settings
from api.schemas import ArithmeticRequest, ArithmeticResponse

router = APIRouter(prefix="/arithmetic", tags=["arithmetic"])


@router.post("", response_model=ArithmeticResponse)
async def compile_expression(
    body: ArithmeticRequest,
    compiler=Depends(get_expression_compiler),
    settings=Depends(get_settings),
):
    result = compiler.compile(body.text)
    if not result.ok:
        return JSONResponse(
            status_code=422,
            content={"error": result.error.model_dump(mode="json")},
        )
    return ArithmeticResponse(
        source=result.source,
        instructions=result.instructions,
        environment=result.environment,
        result_name=result.result_name,
        value=result.value,
        trace=arithmetic_trace_lines(result, settings.trace_float_format),
    )
