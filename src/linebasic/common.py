from __future__ import annotations

import math
from decimal import Decimal

TRUE = -1.0
FALSE = 0.0


def as_truth(value: bool) -> float:
    return TRUE if value else FALSE


class BasicError(Exception):
    """The single error value raised by the interpreter core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.line: int | None = None
        self.column: int | None = None

    def locate(self, line: int, column: int) -> "BasicError":
        self.line = line
        self.column = column
        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} in line {self.line}, column {self.column}"


class BasicSyntaxError(BasicError):
    pass


class BasicNameError(BasicError):
    pass


class BasicControlError(BasicError):
    pass


class BasicInputError(BasicError):
    pass


class BasicMathError(BasicError):
    pass


# ----- control stack frames -----


class Frame:
    """A pending jump target on the control stack."""

    __slots__ = ("position",)
    kind = "frame"

    def __init__(self, position: int):
        self.position = position

    def __repr__(self) -> str:
        return f"<{type(self).__name__} position={self.position}>"


class ReturnFrame(Frame):
    __slots__ = ()
    kind = "GOSUB"


class RepeatFrame(Frame):
    __slots__ = ()
    kind = "DO"


class CountedFrame(Frame):
    __slots__ = ("step", "limit")
    kind = "FOR"

    def __init__(self, step: float, limit: float, position: int):
        super().__init__(position)
        self.step = step
        self.limit = limit

    def __repr__(self) -> str:
        return (
            f"<CountedFrame step={self.step!r} limit={self.limit!r} "
            f"position={self.position}>"
        )


# ----- number formatting -----


def format_number(value: float) -> str:
    """Shortest round-trip digits, exponent form outside 1e-4 <= |x| < 1e6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"

    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    point = len(digits) + exponent  # digits before the decimal point
    exp = point - 1

    if exp < -4 or exp >= 6:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        exp_sign = "-" if exp < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"
