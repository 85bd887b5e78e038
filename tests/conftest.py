from __future__ import annotations

import io
import sys
from pathlib import Path

# Allow importing the package when running plain `pytest` without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import pytest

from linebasic import Interpreter


class Session:
    """An interpreter wired to in-memory streams."""

    def __init__(self, stdin: str = ""):
        self.stdin = io.StringIO(stdin)
        self.stdout = io.StringIO()
        self.interpreter = Interpreter(stdin=self.stdin, stdout=self.stdout, seed=1234)

    def load(self, source: str) -> None:
        for line in source.strip().splitlines():
            self.interpreter.ingest(line)

    def run(self, source: str | None = None) -> str:
        if source is not None:
            self.load(source)
        self.interpreter.run().raise_for_exception()
        return self.output()

    def output(self) -> str:
        value = self.stdout.getvalue()
        self.stdout.seek(0)
        self.stdout.truncate()
        return value


@pytest.fixture
def basic():
    return Session()


@pytest.fixture
def basic_with_input():
    def _make(stdin: str) -> Session:
        return Session(stdin)

    return _make
