from __future__ import annotations

from typing import Callable, Dict, List

from .common import FALSE, TRUE, BasicMathError, BasicNameError, BasicSyntaxError, as_truth
from .functions import call_builtin

_RELATIONS: Dict[str, Callable[[float, float], bool]] = {
    "<=": lambda a, b: a <= b,
    "<>": lambda a, b: a != b,
    "<": lambda a, b: a < b,
    "=": lambda a, b: a == b,
    ">=": lambda a, b: a >= b,
    ">": lambda a, b: a > b,
}


class ExpressionMixin:
    """
    Precedence-climbing evaluator over the scanner's current line.

    Each level consumes text from the cursor and returns a float; nothing is
    built or cached between evaluations.
    """

    def eval_expression(self) -> float:
        return self.eval_disjunction()

    def eval_disjunction(self) -> float:
        lside = self.eval_conjunction()
        while self.match_keyword("or"):
            rside = self.eval_conjunction()
            lside = as_truth(lside != 0 or rside != 0)
        return lside

    def eval_conjunction(self) -> float:
        lside = self.eval_negation()
        while self.match_keyword("and"):
            rside = self.eval_negation()
            lside = as_truth(lside != 0 and rside != 0)
        return lside

    def eval_negation(self) -> float:
        if self.match_keyword("not"):
            return as_truth(self.eval_comparison() == 0)
        # purely arithmetic results pass through untouched
        return self.eval_comparison()

    def eval_comparison(self) -> float:
        lside = self.eval_arithmetic()
        if not self.match_relation():
            return lside
        op = self.token
        rside = self.eval_arithmetic()
        return TRUE if _RELATIONS[op](lside, rside) else FALSE

    def eval_arithmetic(self) -> float:
        value = self.eval_term()
        while self.match_any("+", "-"):
            op = self.token
            rside = self.eval_term()
            value = value + rside if op == "+" else value - rside
        return value

    def eval_term(self) -> float:
        value = self.eval_factor()
        while self.match_any("*", "/"):
            op = self.token
            rside = self.eval_factor()
            if op == "*":
                value *= rside
            elif rside == 0:
                raise BasicMathError("Division by zero")
            else:
                value /= rside
        return value

    def eval_factor(self) -> float:
        sign = -1.0 if self.match("-") else 1.0
        if sign > 0:
            self.match("+")

        if self.match_number():
            return sign * float(self.token)

        if self.match_identifier():
            name = self.token
            if name in self.builtins:
                # a leading sign is not applied to a call's result
                return call_builtin(self.builtins, name, self.eval_args())
            if name not in self.variables:
                raise BasicNameError(f"Variable not found: {name}")
            return sign * self.variables[name]

        if self.match("("):
            value = self.eval_expression()
            if not self.match(")"):
                raise BasicSyntaxError(f"Missing ')' near {self.rest()}")
            return sign * value

        raise BasicSyntaxError(f"Expression expected near {self.rest()}")

    def eval_args(self) -> List[float]:
        args: List[float] = []
        if not self.match("("):
            return args
        if self.match(")"):
            return args
        args.append(self.eval_expression())
        while self.match(","):
            args.append(self.eval_expression())
        if not self.match(")"):
            raise BasicSyntaxError(f"Missing ')' near {self.rest()}")
        return args
