from datetime import datetime

import pytest

from sdscheme import runner
from sdscheme.interpreter import Interpreter

SOURCE = """\
;; basics
(define x 2)
(display x)
(car 5)
(* x 3) ;; six
"""


@pytest.fixture
def dirs(tmp_path):
    examples = tmp_path / "examples"
    results = tmp_path / "results"
    examples.mkdir()
    return examples, results


def test_run_source_records_each_form():
    result = runner.run_source(Interpreter(), SOURCE, "basics.scheme")
    assert result.total == 4
    assert result.failed == 1 and result.succeeded == 3
    assert not result.success
    assert result.expressions[1].display_output == ["2"]
    assert result.expressions[2].error.startswith("car")
    assert result.expressions[3].output == 6


def test_run_source_restores_display_sink():
    seen = []
    interp = Interpreter(display=seen.append)
    runner.run_source(interp, "(display 1)")
    interp.eval("(display 2)")
    assert seen == [2]


def test_format_log():
    result = runner.run_source(Interpreter(), '(display "hi")\n(+ 1 2)\n(nope)', "demo.scheme")
    log = runner.format_log(result, now=datetime(2024, 1, 2, 3, 4, 5))
    assert "Results: demo.scheme" in log
    assert "Run at: 2024-01-02 03:04:05" in log
    assert "Status: FAIL" in log
    assert '[display] "hi"' in log
    assert "[2/3] (+ 1 2)\n=> 3\n" in log
    assert "[3/3] (nope)\nError: Unbound variable: nope\n" in log


def test_format_report_lists_failures():
    result = runner.run_source(Interpreter(), "(car 5)")
    report = runner.format_report(result)
    assert "Status: FAIL" in report
    assert "1. (car 5)" in report


def test_main_runs_all_files(dirs, capsys):
    examples, results = dirs
    (examples / "a.scheme").write_text("(+ 1 2)\n", encoding="utf-8")
    (examples / "b.scheme").write_text("(display 1)\n", encoding="utf-8")
    (examples / "notes.txt").write_text("(car 5)\n", encoding="utf-8")
    assert runner.main(["--examples", str(examples), "--results", str(results)]) == 0
    assert sorted(p.name for p in results.iterdir()) == ["a.scheme.log", "b.scheme.log"]
    assert "Files: 2" in capsys.readouterr().out


def test_main_single_file_failure(dirs):
    examples, results = dirs
    (examples / "bad.scheme").write_text("(car 5)\n", encoding="utf-8")
    assert runner.main(["bad.scheme", "--examples", str(examples), "--results", str(results)]) == 1
    assert (results / "bad.scheme.log").is_file()


@pytest.mark.parametrize("argv", [["notes.txt"], ["missing.scheme"], []])
def test_main_rejects(dirs, argv):
    examples, results = dirs
    assert runner.main(argv + ["--examples", str(examples), "--results", str(results)]) == 1


def test_main_missing_examples_dir(tmp_path):
    assert runner.main(["--examples", str(tmp_path / "nope")]) == 1
