"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import Instruction, Term, TraceStep


# ─────────────────────────── /arithmetic ─────────────────────────

class ArithmeticRequest(BaseModel):
    text: str


class ArithmeticResponse(BaseModel):
    source: str
    instructions: list[Instruction]
    environment: dict[str, float]
    result_name: str
    value: float
    trace: list[str]   # linie [LOAD]/[ADD]/... gotowe do wyświetlenia


# ─────────────────────────── /polynomial ─────────────────────────

class PolynomialRequest(BaseModel):
    text: str
    x: float = Field(allow_inf_nan=False)


class CanonicalRequest(BaseModel):
    text: str


class CanonicalResponse(BaseModel):
    source: str
    terms: list[Term]
    canonical: str


class PolynomialResponse(CanonicalResponse):
    x: float
    steps: list[TraceStep]
    value: float
    trace: list[str]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
