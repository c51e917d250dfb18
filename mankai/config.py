from __future__ import annotations
import os
from typing import Optional

# Defaults
_DEFAULT_PROMPT = "mankai> "
_DEFAULT_LOG_LEVEL = "WARNING"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_prompt() -> str:
    return str_from_env('MANKAI_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return str_from_env('MANKAI_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> Optional[int]:
    return int_from_env('MANKAI_RECURSION_LIMIT')
