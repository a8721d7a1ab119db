"""Batch runner for `.scheme` files.

Each file gets a fresh Interpreter. Its top-level forms are evaluated one at a
time; a failing form is recorded and the run continues with the next one.
Results are summarised on stdout and written to `<results dir>/<file>.log`.

Usage:
    sdscheme-run                 # every .scheme file in the examples directory
    sdscheme-run basics.scheme   # a single file from the examples directory
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from io import StringIO
from pathlib import Path
from typing import Optional

from sdscheme import LispValue
from sdscheme.config import SOURCE_SUFFIX, configure_logging, get_examples_root, get_results_root
from sdscheme.errors import SchemeError
from sdscheme.interpreter import Interpreter
from sdscheme.printer import to_string
from sdscheme.reader.forms import extract_expressions

logger = logging.getLogger(__name__)

RULE = "=" * 60


@dataclass
class ExpressionResult:
    input: str
    output: LispValue = None
    error: Optional[str] = None
    display_output: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FileResult:
    file: str
    expressions: list[ExpressionResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.expressions)

    @property
    def failed(self) -> int:
        return sum(1 for e in self.expressions if not e.ok)

    @property
    def succeeded(self) -> int:
        return self.total - self.failed

    @property
    def success(self) -> bool:
        return self.failed == 0


def run_source(interp: Interpreter, text: str, name: str = "<source>") -> FileResult:
    """Evaluate each top-level form of `text`, capturing display output per form."""
    captured: list[str] = []
    previous = interp.display.sink
    interp.set_display_output(lambda value: captured.append(to_string(value)))
    result = FileResult(file=name)
    try:
        for form in extract_expressions(text):
            captured.clear()
            entry = ExpressionResult(input=form)
            try:
                entry.output = interp.eval(form)
            except SchemeError as exc:
                logger.debug("form failed in %s: %s", name, form, exc_info=True)
                entry.error = str(exc)
            entry.display_output = list(captured)
            result.expressions.append(entry)
    finally:
        interp.set_display_output(previous)
    return result


def run_file(path: Path) -> FileResult:
    logger.info("running %s", path)
    text = path.read_text(encoding="utf-8")
    return run_source(Interpreter(), text, path.name)


def _shorten(text: str, limit: int = 50) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def format_report(result: FileResult) -> str:
    with StringIO() as buffer:
        buffer.write(f"\n{RULE}\nFile: {result.file}\n{RULE}\n")
        buffer.write(f"Expressions: {result.total}\n")
        buffer.write(f"Succeeded: {result.succeeded}\n")
        buffer.write(f"Failed: {result.failed}\n")
        buffer.write(f"\nStatus: {'PASS' if result.success else 'FAIL'}\n")
        if not result.success:
            buffer.write("\nFailed expressions:\n")
            for index, entry in enumerate(result.expressions, 1):
                if entry.error is not None:
                    buffer.write(f"  {index}. {_shorten(entry.input)}\n")
                    buffer.write(f"     Error: {entry.error}\n")
        return buffer.getvalue()


def format_log(result: FileResult, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    with StringIO() as buffer:
        buffer.write(f"{RULE}\nResults: {result.file}\n{RULE}\n")
        buffer.write(f"Run at: {now.isoformat(sep=' ', timespec='seconds')}\n")
        buffer.write(f"Expressions: {result.total}\n")
        buffer.write(f"Succeeded: {result.succeeded}\n")
        buffer.write(f"Failed: {result.failed}\n")
        buffer.write(f"Status: {'PASS' if result.success else 'FAIL'}\n{RULE}\n\n")
        for index, entry in enumerate(result.expressions, 1):
            buffer.write(f"[{index}/{result.total}] {entry.input}\n")
            if entry.error is not None:
                buffer.write(f"Error: {entry.error}\n")
            else:
                buffer.write(f"=> {to_string(entry.output)}\n")
                for line in entry.display_output:
                    buffer.write(f"[display] {line}\n")
            buffer.write("\n")
        return buffer.getvalue()


def write_log(result: FileResult, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    log_path = results_dir / f"{result.file}.log"
    log_path.write_text(format_log(result), encoding="utf-8")
    logger.info("wrote %s", log_path)
    return log_path


def run_all(examples_dir: Path, results_dir: Path) -> list[FileResult]:
    files = sorted(p for p in examples_dir.iterdir() if p.suffix == SOURCE_SUFFIX)
    print(f"\nRunning {len(files)} example file(s)...\n")
    results = []
    for path in files:
        result = run_file(path)
        print(format_report(result))
        write_log(result, results_dir)
        results.append(result)
    passed = sum(1 for r in results if r.success)
    print(f"\n{RULE}\nSummary\n{RULE}")
    print(f"Files: {len(results)}\nPassed: {passed}\nFailed: {len(results) - passed}")
    print(f"\nDetailed logs are in {results_dir}/\n{RULE}\n")
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdscheme-run",
        description="Run .scheme example files and write per-file result logs.",
    )
    parser.add_argument("file", nargs="?", help="a single .scheme file in the examples directory")
    parser.add_argument("--examples", type=Path, default=None, help="examples directory")
    parser.add_argument("--results", type=Path, default=None, help="results directory")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    examples_dir = args.examples or get_examples_root()
    results_dir = args.results or get_results_root()

    if not examples_dir.is_dir():
        logger.error("examples directory not found: %s", examples_dir)
        return 1

    if args.file is None:
        results = run_all(examples_dir, results_dir)
        if not results:
            logger.error("no %s files in %s", SOURCE_SUFFIX, examples_dir)
            return 1
        return 0 if all(r.success for r in results) else 1

    if not args.file.endswith(SOURCE_SUFFIX):
        logger.error("only %s files can be run: %s", SOURCE_SUFFIX, args.file)
        return 1
    path = examples_dir / args.file
    if not path.is_file():
        logger.error("file not found: %s", path)
        return 1
    result = run_file(path)
    print(format_report(result))
    log_path = write_log(result, results_dir)
    print(f"\nDetailed log: {log_path}\n")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
