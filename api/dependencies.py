"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.expression_compiler import RecursiveDescentCompiler
from adapters.polynomial import PolynomialParser
from config import Settings


def get_expression_compiler(request: Request) -> RecursiveDescentCompiler:
    return request.app.state.expression_compiler


def get_polynomial_parser(request: Request) -> PolynomialParser:
    return request.app.state.polynomial_parser


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
