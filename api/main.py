"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy bezstanowe adaptery (ExpressionCompiler, PolynomialEvaluator) raz
    na aplikację; każde wywołanie ma własny kursor / środowisko tempów
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adapters.expression_compiler import RecursiveDescentCompiler
from adapters.polynomial import PolynomialParser
from api.routers import arithmetic, polynomial
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("trace_comp.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.expression_compiler = RecursiveDescentCompiler()
    app.state.polynomial_parser = PolynomialParser()

    logger.info("TraceComp API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(arithmetic.router)
    app.include_router(polynomial.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    return app


app = create_app()
