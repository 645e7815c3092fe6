"""Command-line entry point: `mlisp` or `python -m mlisp`."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from mlisp.config import get_history_path, get_log_level
from mlisp.interpreter import Interpreter
from mlisp.repl import rep, run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mlisp',
        description='Lisp interpreter with numeric and matrix builtins',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the interactive REPL
  mlisp

  # Evaluate expressions and exit
  mlisp -e "(def! a (matrix [1 2 ; 3 4]))" -e "(** a (transpose a))"
"""
    )
    parser.add_argument(
        '-e', '--eval',
        dest='exprs',
        action='append',
        metavar='EXPR',
        help='Evaluate EXPR, print the result and exit (may be repeated)'
    )
    parser.add_argument(
        '--history',
        type=Path,
        help='REPL history file (default: $MLISP_HISTORY_PATH or ~/.mlisp_history)'
    )
    parser.add_argument(
        '--no-history',
        action='store_true',
        help='Do not read or write a history file'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug output to stderr'
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    interp = Interpreter()
    if args.exprs:
        ok = True
        for expr in args.exprs:
            ok = rep(interp, expr) and ok
        return 0 if ok else 1

    history = None if args.no_history else (args.history or get_history_path())
    run_repl(interp, history_path=history)
    return 0


if __name__ == '__main__':
    sys.exit(main())
