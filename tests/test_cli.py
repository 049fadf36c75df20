import io

from playground.calc import main, repl, run_one


def test_one_shot(capsys):
    assert main(["2^3^2"]) == 0
    assert capsys.readouterr().out.strip() == "512.0"

def test_leading_minus_after_separator(capsys):
    assert main(["--", "-3+5"]) == 0
    assert capsys.readouterr().out.strip() == "2.0"

def test_ast_flag(capsys):
    assert main(["--ast", "1+2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Add(+)")
    assert out.strip().endswith("3.0")

def test_error_exit_code(capsys):
    assert main(["(1+2"]) == 1
    assert capsys.readouterr().err.startswith("error: ")

def test_file(tmp_path, capsys):
    p = tmp_path / "exprs.txt"
    p.write_text("1+2\n\n2*3\n(\n", encoding="utf-8")
    assert main(["--file", str(p)]) == 1
    out = capsys.readouterr().out
    assert "2/3 evaluated, 1 failed" in out

def test_repl_continues_after_error():
    inp = io.StringIO("1+1\n1+\n\n2*5\nquit\n3\n")
    out, err = io.StringIO(), io.StringIO()
    assert repl(inp, out, err) == 0
    assert out.getvalue().split() == ["2.0", "10.0"]
    assert err.getvalue().count("error:") == 1

def test_run_one_writes_to_given_streams():
    out, err = io.StringIO(), io.StringIO()
    assert run_one("7&3", out=out, err=err) == 0
    assert out.getvalue() == "3.0\n"

def test_deeply_nested_reports_error():
    out, err = io.StringIO(), io.StringIO()
    assert run_one("(" * 3000 + "1" + ")" * 3000, out=out, err=err) == 1
    assert err.getvalue() == "error: expression nested too deeply\n"
