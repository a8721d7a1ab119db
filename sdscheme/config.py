from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List

SOURCE_SUFFIX = ".scheme"
COMMENT_MARKER = ";;"

# Defaults are relative to the working directory of the batch runner
_DEFAULT_EXAMPLES_DIRS = [Path("examples")]
_DEFAULT_RESULTS_DIRS = [Path("test-results")]


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_examples_root() -> Path:
    return paths_from_env('SDSCHEME_EXAMPLES_PATH', _DEFAULT_EXAMPLES_DIRS)[0]


def get_results_root() -> Path:
    return paths_from_env('SDSCHEME_RESULTS_PATH', _DEFAULT_RESULTS_DIRS)[0]


def get_log_level() -> int:
    name = os.environ.get('SDSCHEME_LOG_LEVEL', 'WARNING').strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    """Configure root logging for the CLI and language server entry points."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
