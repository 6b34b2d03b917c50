from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_steps() -> Optional[int]:
    # unset means unbounded evaluation
    return int_from_env('GEXPR_MAX_STEPS')


def get_recursion_limit() -> Optional[int]:
    return int_from_env('GEXPR_RECURSION_LIMIT')


def get_log_level() -> str:
    return os.environ.get('GEXPR_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for command-line use."""
    level = (level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
