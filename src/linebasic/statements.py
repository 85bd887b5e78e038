from __future__ import annotations

import time
from typing import List

from .common import (
    BasicControlError,
    BasicInputError,
    BasicMathError,
    BasicNameError,
    BasicSyntaxError,
    CountedFrame,
    RepeatFrame,
    ReturnFrame,
    format_number,
)


class StatementMixin:
    """One `exec_<keyword>` method per statement; see `exec_statement`."""

    def exec_statement(self) -> None:
        """Execute the statement starting at the cursor."""
        self.skip_whitespace()
        if not self.match_word():
            raise BasicSyntaxError(f"Statement expected, found: {self.rest()}")
        keyword = self.token
        m = getattr(self, f"exec_{keyword}", None)
        if m is None or keyword == "statement":
            raise BasicNameError(f"Unknown statement: {keyword}")
        try:
            m()
        except RecursionError:
            raise BasicSyntaxError("Expression too complex") from None

    # ----- assignment & conditionals -----

    def exec_let(self) -> None:
        name = self.expect_identifier()
        self.expect("=")
        self.variables[name] = self.eval_expression()

    def exec_if(self) -> None:
        condition = self.eval_expression()
        if not self.match_keyword("then"):
            raise BasicSyntaxError("IF without THEN")
        if condition != 0:
            self.exec_statement()
        else:
            self.cursor = len(self.text)

    def exec_rem(self) -> None:
        self.cursor = len(self.text)

    # ----- jumps -----

    def _jump_target(self) -> int:
        if not self.running:
            raise BasicControlError("Program not running")
        number = self.eval_arithmetic()
        try:
            return self.address.index(int(number))
        except (ValueError, OverflowError):
            raise BasicControlError(f"Line not found: {format_number(number)}") from None

    def exec_goto(self) -> None:
        self.position = self._jump_target()

    def exec_gosub(self) -> None:
        target = self._jump_target()
        self.stack.push(ReturnFrame(self.position))
        self.position = target

    def exec_return(self) -> None:
        frame = self.stack.pop(ReturnFrame, "RETURN without GOSUB")
        self.position = frame.position

    def exec_stop(self) -> None:
        self.halted = True

    def exec_end(self) -> None:
        self.position = len(self.address)

    # ----- loops -----

    def exec_for(self) -> None:
        name = self.expect_identifier()
        self.expect("=")
        self.variables[name] = self.eval_arithmetic()
        if not self.match_keyword("to"):
            raise BasicSyntaxError(f"'to' expected, found: {self.rest()}")
        limit = self.eval_arithmetic()
        step = 1.0
        if self.match_keyword("step"):
            step = self.eval_arithmetic()
            if step == 0:
                raise BasicControlError("Infinite loop")
        self.stack.push(CountedFrame(step, limit, self.position))

    def exec_next(self) -> None:
        name = self.expect_identifier()
        if name not in self.variables:
            raise BasicNameError(f"Variable not found: {name}")
        frame = self.stack.top(CountedFrame, "NEXT without FOR")
        value = self.variables[name] + frame.step
        self.variables[name] = value
        done = value > frame.limit if frame.step > 0 else value < frame.limit
        if done:
            self.stack.pop(CountedFrame, "NEXT without FOR")
        else:
            self.position = frame.position

    def exec_do(self) -> None:
        self.stack.push(RepeatFrame(self.position))

    def exec_loop(self) -> None:
        if self.match_keyword("while"):
            repeat = self.eval_expression() != 0
        elif self.match_keyword("until"):
            repeat = self.eval_expression() == 0
        else:
            raise BasicSyntaxError(f"Condition expected near {self.rest()}")
        frame = self.stack.top(RepeatFrame, "LOOP without DO")
        if repeat:
            self.position = frame.position
        else:
            self.stack.pop(RepeatFrame, "LOOP without DO")

    # ----- I/O -----

    def exec_print(self) -> None:
        if self.at_eol():
            self.stdout.write("\n")
            return
        parts = [self._printable()]
        end = "\n"
        # "," joins; ";" joins too and suppresses the newline
        while self.match_any(",", ";"):
            if self.token == ";":
                end = ""
                if self.at_eol():
                    break
            parts.append(self._printable())
        self.stdout.write("".join(parts) + end)
        self.stdout.flush()

    def _printable(self) -> str:
        if self.match_string():
            return self.token
        return format_number(self.eval_expression())

    def exec_input(self) -> None:
        prompt = ""
        if self.match_string():
            prompt = self.token
            if not self.match(","):
                raise BasicSyntaxError(f"Comma expected near {self.rest()}")
        names = self._variable_list()

        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        fields = line.rstrip("\r\n").split(",") if line else []

        values: List[float] = []
        for i in range(len(names)):
            field = fields[i].strip() if i < len(fields) else ""
            if not field:
                values.append(0.0)
                continue
            try:
                values.append(float(field))
            except ValueError:
                raise BasicInputError(f"Invalid number: {field}") from None
        self.variables.update(zip(names, values))

    def _variable_list(self) -> List[str]:
        names = [self.expect_identifier()]
        while self.match(","):
            names.append(self.expect_identifier())
        return names

    def exec_randomize(self) -> None:
        if self.at_eol():
            self.rng.seed(time.time_ns())
            return
        seed = self.eval_arithmetic()
        try:
            self.rng.seed(int(seed))
        except (ValueError, OverflowError):
            raise BasicMathError(f"Invalid seed: {format_number(seed)}") from None
