from __future__ import annotations

import math
import random
import time
from typing import Callable, Dict, Sequence

from .common import BasicMathError, BasicNameError


class Builtin:
    """A fixed-arity numeric function callable from expressions."""

    __slots__ = ("name", "arity", "func")

    def __init__(self, name: str, arity: int, func: Callable[..., float]):
        self.name = name
        self.arity = arity
        self.func = func

    def __call__(self, args: Sequence[float]) -> float:
        if len(args) != self.arity:
            raise BasicNameError(f"Bad argument count in call to {self.name}")
        try:
            return float(self.func(*args))
        except ZeroDivisionError as exc:
            raise BasicMathError(f"Division by zero in call to {self.name}") from exc
        except (ValueError, OverflowError) as exc:
            raise BasicMathError(f"Math error in call to {self.name}") from exc

    def __repr__(self) -> str:
        return f"<Builtin {self.name}/{self.arity}>"


def _mod(a: float, b: float) -> float:
    # Remainder of the truncated operands, sign follows the dividend.
    divisor = math.trunc(b)
    if divisor == 0:
        raise ZeroDivisionError
    return math.fmod(math.trunc(a), divisor)


def _iif(cond: float, if_true: float, if_false: float) -> float:
    return if_true if cond != 0 else if_false


def make_builtins(rng: random.Random) -> Dict[str, Builtin]:
    """Build the builtin table; `rnd` draws from `rng`."""
    table = [
        Builtin("timer", 0, time.time),
        Builtin("rnd", 0, rng.random),
        Builtin("pi", 0, lambda: math.pi),
        Builtin("int", 1, math.trunc),
        Builtin("abs", 1, abs),
        Builtin("sqr", 1, math.sqrt),
        Builtin("sin", 1, math.sin),
        Builtin("cos", 1, math.cos),
        Builtin("rad", 1, math.radians),
        Builtin("deg", 1, math.degrees),
        Builtin("min", 2, min),
        Builtin("max", 2, max),
        Builtin("mod", 2, _mod),
        Builtin("hypot2", 2, math.hypot),
        Builtin("hypot3", 3, lambda a, b, c: math.sqrt(a * a + b * b + c * c)),
        Builtin("iif", 3, _iif),
    ]
    return {builtin.name: builtin for builtin in table}


def call_builtin(table: Dict[str, Builtin], name: str, args: Sequence[float]) -> float:
    builtin = table.get(name)
    if builtin is None:
        raise BasicNameError(f"No such function: {name}")
    return builtin(args)
