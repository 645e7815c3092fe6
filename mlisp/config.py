from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_HISTORY_PATH = Path.home() / '.mlisp_history'
_DEFAULT_PROMPT = 'user> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_history_path() -> Path:
    return path_from_env('MLISP_HISTORY_PATH', _DEFAULT_HISTORY_PATH)


def get_prompt() -> str:
    return os.environ.get('MLISP_PROMPT', _DEFAULT_PROMPT)


def get_random_seed() -> Optional[int]:
    """Seed for the randmat/randmatf generator, or None for fresh entropy."""
    raw = os.environ.get('MLISP_RANDOM_SEED')
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"MLISP_RANDOM_SEED must be an integer, got {raw!r}") from None


def get_log_level() -> int:
    name = os.environ.get('MLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
