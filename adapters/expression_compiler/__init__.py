"""
Expression compiler adapter package.

Public import:
    from adapters.expression_compiler import RecursiveDescentCompiler, compile_arithmetic
"""

from adapters.expression_compiler.cursor import END, Cursor
from adapters.expression_compiler.recursive_descent import (
    RecursiveDescentCompiler,
    compile_arithmetic,
)

__all__ = ["Cursor", "END", "RecursiveDescentCompiler", "compile_arithmetic"]
