from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_PROMPT = 'sl> '
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched by `load`, current directory first."""
    return [Path.cwd(), *paths_from_env('SLANG_PATH', [])]


def get_prompt() -> str:
    return os.environ.get('SLANG_PROMPT', _DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    raw = os.environ.get('SLANG_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 1000)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def get_log_level() -> str:
    return os.environ.get('SLANG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
