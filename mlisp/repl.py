"""Interactive read-eval-print loop.

Results go to stdout and error reports to stderr, one line each. Line
editing and persistent history are used when the readline module is
available.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from mlisp.config import get_prompt
from mlisp.errors import MLispError
from mlisp.interpreter import Interpreter, format_error
from mlisp.printer import RED, colorize, pr_str

try:
    import readline
except ImportError:  # e.g. Windows without pyreadline
    readline = None

logger = logging.getLogger(__name__)


def rep(
    interp: Interpreter,
    line: str,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> bool:
    """Evaluate one input line and print its outcome. Returns False on error."""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        result = interp.eval(line)
    except (MLispError, RecursionError) as ex:
        logger.debug("error evaluating %r", line, exc_info=True)
        print(colorize(format_error(ex), RED, err.isatty()), file=err)
        return False
    print(pr_str(result), file=out)
    return True


def _load_history(path: Path) -> None:
    try:
        readline.read_history_file(str(path))
    except FileNotFoundError:
        logger.debug("no history file at %s", path)
    except OSError as ex:
        logger.warning("could not read history %s: %s", path, ex)


def _save_history(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        readline.write_history_file(str(path))
    except OSError as ex:
        logger.warning("could not write history %s: %s", path, ex)


def run_repl(
    interp: Optional[Interpreter] = None,
    history_path: Optional[Path] = None,
    prompt: Optional[str] = None,
) -> None:
    """Loop until end of input. Blank lines are skipped."""
    interp = interp or Interpreter()
    prompt = get_prompt() if prompt is None else prompt
    use_history = readline is not None and history_path is not None
    if use_history:
        _load_history(history_path)
    try:
        while True:
            try:
                line = input(prompt)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue
            if line.strip():
                rep(interp, line)
    finally:
        if use_history:
            _save_history(history_path)
