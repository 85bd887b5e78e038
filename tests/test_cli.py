from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from linebasic.__main__ import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_module(*args: str, stdin: str = "") -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "linebasic", *args],
        check=False,
        capture_output=True,
        text=True,
        input=stdin,
        env=env,
    )


def test_module_runs_program_file(tmp_path) -> None:
    script = tmp_path / "count.bas"
    script.write_text("10 for i = 1 to 3\n20 print i;\n30 next i\n40 print\n")
    proc = _run_module(str(script))
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == "123\n"
    assert proc.stderr == ""


def test_module_starts_repl_without_program() -> None:
    proc = _run_module("--no-banner", stdin='print "hi"\nbye\n')
    assert proc.returncode == 0
    assert proc.stdout == "> hi\n> "


def test_main_reports_run_errors(tmp_path, capsys) -> None:
    script = tmp_path / "bad.bas"
    script.write_text("10 print 1\n20 goto 99\n")
    assert main([str(script)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert captured.err == "Line not found: 99 in line 20, column 7\n"


def test_main_missing_program(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "nope.bas")]) == 2
    assert "program not found" in capsys.readouterr().err


def test_main_rejects_unknown_option(capsys) -> None:
    assert main(["--bogus"]) == 2
    assert "usage: python -m linebasic" in capsys.readouterr().err


def test_seed_makes_rnd_repeatable(tmp_path, capsys) -> None:
    script = tmp_path / "rnd.bas"
    script.write_text("10 print rnd\n")
    main(["--seed", "5", str(script)])
    first = capsys.readouterr().out
    main(["--seed", "5", str(script)])
    assert capsys.readouterr().out == first


def test_verbose_logs_each_executed_line(tmp_path) -> None:
    script = tmp_path / "two.bas"
    script.write_text("10 print 1\n20 print 2\n")
    proc = _run_module("-v", str(script))
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == "1\n2\n"
    assert "DEBUG linebasic.core: run: 2 lines" in proc.stderr
    assert "DEBUG linebasic.core: line 10" in proc.stderr
    assert "DEBUG linebasic.core: line 20" in proc.stderr
    assert "INFO linebasic.core: loaded 2 lines" in proc.stderr
