from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, TextIO

from .common import BasicError, BasicSyntaxError
from .core import RunResult
from .main import Interpreter

BANNER = "linebasic READY"
PROMPT = "> "


class Repl:
    """
    Interactive command loop around an `Interpreter`.

    Numbered lines are stored, commands are handled here, and anything else
    goes to the interpreter as an immediate statement.
    """

    def __init__(
        self,
        interpreter: Interpreter,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        *,
        banner: bool = True,
    ):
        self.interpreter = interpreter
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.banner = banner
        self._commands: Dict[str, Callable[[], Optional[bool]]] = {
            "bye": self.cmd_bye,
            "list": self.cmd_list,
            "run": self.cmd_run,
            "continue": self.cmd_continue,
            "clear": self.cmd_clear,
            "new": self.cmd_new,
            "delete": self.cmd_delete,
            "load": self.cmd_load,
            "save": self.cmd_save,
        }

    def loop(self) -> None:
        if self.banner:
            print(BANNER, file=self.stdout)
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            if not self.handle(line.rstrip("\r\n")):
                break

    def handle(self, line: str) -> bool:
        """Process one line of input; returns False when the session should end."""
        if not line.strip():
            return True
        interp = self.interpreter
        try:
            if line.lstrip()[:1].isdecimal():
                interp.ingest(line)
                return True
            interp.load_text(line)
            interp.skip_whitespace()
            command = None
            if interp.match_word():
                command = self._commands.get(interp.token)
            if command is None:
                interp.execute(line)
                return True
            return command() is not False
        except BasicError as exc:
            print(exc, file=self.stderr)
        except OSError as exc:
            print(f"{exc.strerror or exc}: {exc.filename}", file=self.stderr)
        return True

    def _report(self, result: RunResult) -> None:
        if not result.ok:
            print(result.exception, file=self.stderr)

    def _filename(self) -> str:
        interp = self.interpreter
        if not interp.match_string():
            raise BasicSyntaxError("String expected")
        return interp.token

    # ----- commands -----

    def cmd_bye(self) -> bool:
        return False

    def cmd_list(self) -> None:
        for line in self.interpreter.program.listing():
            print(line, file=self.stdout)

    def cmd_run(self) -> None:
        self._report(self.interpreter.run())

    def cmd_continue(self) -> None:
        self._report(self.interpreter.continue_())

    def cmd_clear(self) -> None:
        self.interpreter.clear()

    def cmd_new(self) -> None:
        self.interpreter.new()

    def cmd_delete(self) -> None:
        number = self.interpreter.match_line_number()
        if number is None:
            raise BasicSyntaxError("Line # expected")
        self.interpreter.program.delete(number)

    def cmd_load(self) -> None:
        self.interpreter.load(self._filename())
        print("File loaded", file=self.stdout)

    def cmd_save(self) -> None:
        self.interpreter.save(self._filename())
        print("File saved", file=self.stdout)
