from .common import (
    BasicControlError,
    BasicError,
    BasicInputError,
    BasicMathError,
    BasicNameError,
    BasicSyntaxError,
)
from .core import RunResult
from .main import Interpreter
from .program import Program

__all__ = [
    "BasicControlError",
    "BasicError",
    "BasicInputError",
    "BasicMathError",
    "BasicNameError",
    "BasicSyntaxError",
    "Interpreter",
    "Program",
    "RunResult",
]
