"""
Environment-derived settings for reference generation.

Variables (all optional):
- REFGEN_LOG_LEVEL: logging level name (default WARNING; unknown names fall back)
- REFGEN_OUTPUT: file to write the document to (default: stdout)
- REFGEN_JSON_INDENT: indent width for JSON text, 0..8 (default 2)

Command-line flags take precedence over these.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env_str(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    """Integer variable clamped to ``[lo, hi]``; unset or unparsable gives ``default``."""
    try:
        value = int(_env_str(name, str(default)))
    except ValueError:
        return default
    return min(max(value, lo), hi)


def parse_log_level(value: str) -> int | None:
    """Numeric level for a name like ``"debug"``; None when unknown."""
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else None


def _env_log_level(name: str, default: int) -> int:
    level = parse_log_level(_env_str(name, ""))
    return default if level is None else level


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    output_path: Optional[Path] = None
    json_indent: int = 2


def load_settings() -> Settings:
    output = _env_str("REFGEN_OUTPUT", "")
    return Settings(
        log_level=_env_log_level("REFGEN_LOG_LEVEL", logging.WARNING),
        output_path=Path(output) if output else None,
        json_indent=_env_int("REFGEN_JSON_INDENT", 2, lo=0, hi=8),
    )
