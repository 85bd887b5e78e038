from __future__ import annotations

from .core import InterpreterCore
from .expressions import ExpressionMixin
from .scanner import ScannerMixin
from .statements import StatementMixin


class Interpreter(StatementMixin, ExpressionMixin, ScannerMixin, InterpreterCore):
    pass
