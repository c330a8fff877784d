import io

from loxlang.lox import Lox, main


def _run(source):
    out = io.StringIO()
    lox = Lox(out)
    lox.run(source)
    return lox, out.getvalue()


def test_print_number_format():
    _, text = _run("print 1 + 2;")
    assert text == "3.000000\n"


def test_equivalent_programs_print_the_same():
    _, left = _run("print (4 - 1) * 2 == 6;")
    _, right = _run("print true;")
    assert left == right


def test_parse_error_is_reported_and_nothing_runs():
    lox, text = _run("print 1")
    assert lox.reporter.had_error is True
    assert "expected semicolon after value" in text


def test_runtime_error_marks_reporter():
    lox, text = _run('print "a" + 1;')
    assert lox.reporter.had_error is True
    assert "Cannot apply + operator to these types" in text


def test_scan_error_is_reported():
    lox, text = _run("print 1; @")
    assert lox.reporter.had_error is True
    assert "Unexpected character." in text


def test_run_file_success(tmp_path):
    script = tmp_path / "ok.lox"
    script.write_text('print "hello";\n')
    out = io.StringIO()
    assert Lox(out).run_file(script) == 0
    assert "hello\n" in out.getvalue()


def test_run_file_error_exit_code(tmp_path):
    script = tmp_path / "bad.lox"
    script.write_text("print -nil;\n")
    assert Lox(io.StringIO()).run_file(script) == 65


def test_run_prompt_stops_at_empty_line():
    out = io.StringIO()
    lox = Lox(out)
    lox.run_prompt(io.StringIO('print "first";\n\nprint "second";\n'))
    text = out.getvalue()
    assert "first" in text
    assert "second" not in text
    assert text.count(">") == 2


def test_run_prompt_resets_errors_between_lines():
    out = io.StringIO()
    lox = Lox(out)
    lox.run_prompt(io.StringIO("print -nil;\nprint 1;\n"))
    assert lox.reporter.had_error is False
    assert "non number" in out.getvalue()


def test_main_usage_error(capsys):
    assert main(["a.lox", "b.lox"]) == 64
    assert "Usage" in capsys.readouterr().out


def test_main_runs_file(tmp_path, capsys):
    script = tmp_path / "s.lox"
    script.write_text('print "from file";')
    assert main([str(script)]) == 0
    assert "from file" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.lox")]) == 66
    assert "missing.lox" in capsys.readouterr().err


def test_main_prompt_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('print "typed";\n'))
    assert main([]) == 0
    assert "typed" in capsys.readouterr().out