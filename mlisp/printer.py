"""Value to text, for display only.

Equality and hashing never go through here; they use each value's canonical
`render()`, which this module delegates to.
"""

from __future__ import annotations

from typing import Iterable

from mlisp import LispValue

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
RED = "\033[31m"


def pr_str(value: LispValue) -> str:
    """Printable text for a value; None (no result) prints as nothing."""
    if value is None:
        return ""
    return value.render()


def pr_seq(values: Iterable[LispValue], sep: str = " ") -> str:
    return sep.join(pr_str(v) for v in values)


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{color}{text}{RESET}"
