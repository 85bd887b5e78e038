from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from .common import BasicControlError, BasicError
from .functions import make_builtins
from .program import Program
from .stack import ControlStack

logger = logging.getLogger(__name__)


class RunResult:
    """Outcome of `run()` / `continue_()`; run errors are returned, not raised."""

    __slots__ = ("exception",)

    def __init__(self, exception: Optional[BasicError] = None):
        self.exception = exception

    @property
    def ok(self) -> bool:
        return self.exception is None

    @property
    def line(self) -> Optional[int]:
        return None if self.exception is None else self.exception.line

    @property
    def column(self) -> Optional[int]:
        return None if self.exception is None else self.exception.column

    def raise_for_exception(self) -> None:
        if self.exception is not None:
            raise self.exception

    def __repr__(self) -> str:
        if self.exception is None:
            return "<RunResult ok>"
        return f"<RunResult {self.exception}>"


class InterpreterCore:
    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        seed: Optional[int] = None,
    ):
        """
        stdin/stdout:
          - streams used by INPUT and PRINT (default: the process streams,
            looked up at call time so pytest's capsys sees them)
        seed:
          - initial seed for `rnd`; None seeds from the system
        """
        self._stdin = stdin
        self._stdout = stdout
        self.rng = random.Random(seed)
        self.builtins = make_builtins(self.rng)

        self.program = Program()
        self.variables: Dict[str, float] = {}
        self.stack = ControlStack()

        self.address: List[int] = []
        self.position = 0
        self.line_number: Optional[int] = None
        self.halted = False
        self.running = False

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    # ----- session state -----

    def clear(self) -> None:
        """Forget every variable."""
        self.variables.clear()

    def new(self) -> None:
        """Forget the stored program."""
        self.program.clear()

    # ----- line ingestion -----

    def ingest(self, text: str) -> None:
        """Store a numbered line, or execute any other line immediately."""
        text = text.lstrip()
        if text[:1].isdecimal():
            self.load_text(text)
            number = self.match_line_number()
            self.program.store(number, self.rest())
        else:
            self.execute(text)

    def execute(self, text: str) -> None:
        """Run one statement in immediate mode; errors propagate to the caller."""
        self.load_text(text)
        self.exec_statement()

    def load(self, path: str | Path) -> int:
        """Ingest every line of a program file; returns the number of lines read."""
        path = Path(path)
        count = 0
        with path.open(encoding="utf-8") as fh:
            for raw in fh:
                line = raw.rstrip("\r\n")
                count += 1
                if line.strip():
                    self.ingest(line)
        logger.info("loaded %d lines from %s", count, path)
        return count

    def save(self, path: str | Path) -> None:
        self.program.save(path)

    # ----- run -----

    def run(self) -> RunResult:
        """Snapshot the line numbers and execute from the first stored line."""
        self.address = self.program.line_numbers()
        self.stack.clear()
        self.position = 0
        logger.debug("run: %d lines", len(self.address))
        return self.continue_()

    def continue_(self) -> RunResult:
        """Resume at the current position without re-snapshotting."""
        self.halted = False
        self.running = True
        try:
            while self.position < len(self.address) and not self.halted:
                self.line_number = self.address[self.position]
                if self.line_number not in self.program:
                    # deleted since the snapshot was taken
                    self.load_text("")
                    raise BasicControlError(f"Line not found: {self.line_number}")
                self.load_text(self.program[self.line_number])
                self.position += 1
                logger.debug("line %d", self.line_number)
                self.exec_statement()
        except BasicError as exc:
            exc.locate(self.line_number, self.cursor)
            logger.debug("run aborted: %s", exc)
            return RunResult(exc)
        finally:
            self.running = False

        if self.halted:
            logger.debug("stopped before position %d", self.position)
        else:
            logger.debug("run finished")
        return RunResult()
