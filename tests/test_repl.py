from __future__ import annotations

import io

from linebasic import Interpreter
from linebasic.repl import BANNER, PROMPT, Repl


def session(script: str):
    stdin = io.StringIO(script)
    stdout = io.StringIO()
    stderr = io.StringIO()
    interpreter = Interpreter(stdin=stdin, stdout=stdout)
    repl = Repl(interpreter, stdin=stdin, stdout=stdout, stderr=stderr)
    repl.loop()
    return interpreter, stdout.getvalue(), stderr.getvalue()


def test_banner_and_prompt():
    _, out, err = session("")
    assert out == f"{BANNER}\n{PROMPT}"
    assert err == ""


def test_store_list_and_run():
    _, out, err = session('20 print "world"\n10 print "hello"\nlist\nrun\n')
    assert '10\tprint "hello"\n20\tprint "world"\n' in out
    assert "hello\nworld\n" in out
    assert err == ""


def test_bye_ends_the_session():
    interpreter, out, _ = session('bye\nprint "after"\n')
    assert "after" not in out


def test_immediate_statement_and_error_recovery():
    interpreter, out, err = session('print 1 +\nprint "still here"\n')
    assert err.startswith("Expression expected")
    assert "still here\n" in out


def test_run_error_reports_line_and_column():
    _, _, err = session("10 print x\nrun\n")
    assert err == "Variable not found: x in line 10, column 7\n"


def test_stop_and_continue():
    _, out, err = session('10 print "a"\n20 stop\n30 print "b"\nrun\ncontinue\n')
    assert out.count("a\n") == 1
    assert out.index("a\n") < out.index("b\n")
    assert err == ""


def test_clear_new_and_delete():
    interpreter, _, err = session(
        "let x = 1\nclear\n10 print 1\n20 print 2\ndelete 10\n"
    )
    assert interpreter.variables == {}
    assert interpreter.program.line_numbers() == [20]
    interpreter, _, _ = session("10 print 1\nnew\n")
    assert len(interpreter.program) == 0


def test_delete_requires_line_number():
    _, _, err = session("delete\ndelete 99\n")
    assert err == "Line # expected\nLine not found: 99\n"


def test_save_and_load(tmp_path):
    path = tmp_path / "prog.bas"
    _, out, err = session(f'10 print "saved"\nsave "{path}"\n')
    assert "File saved" in out
    assert err == ""

    _, out, err = session(f'load "{path}"\nrun\n')
    assert "File loaded" in out
    assert "saved\n" in out


def test_load_requires_string():
    _, _, err = session("load prog\n")
    assert err == "String expected\n"


def test_load_missing_file_reports_os_error(tmp_path):
    _, _, err = session(f'load "{tmp_path / "missing.bas"}"\n')
    assert "missing.bas" in err


def test_input_reads_from_session_stream():
    interpreter, out, _ = session('10 input "n? ", n\n20 print n * 2\nrun\n21\n')
    assert "n? 42\n" in out


def test_too_complex_expression_does_not_end_the_session():
    depth = 1000
    nested = "(" * depth + "1" + ")" * depth
    _, out, err = session(f'print {nested}\n10 print {nested}\nrun\nprint "alive"\n')
    first, second = err.splitlines()
    assert first == "Expression too complex"
    assert second.startswith("Expression too complex in line 10, column ")
    assert "alive\n" in out


def test_oversized_line_numbers_do_not_end_the_session():
    big = "9" * 5000
    _, out, err = session(f"{big} print 1\ndelete {big}\nprint \"alive\"\n")
    assert err == "Line # too large\nLine # too large\n"
    assert "alive\n" in out
