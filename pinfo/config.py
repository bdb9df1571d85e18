"""
Settings read from the environment (and a .env file, if present).
"""
from __future__ import annotations

import math
import os
import shlex
from dataclasses import dataclass

from dotenv import load_dotenv

from pinfo.errors import ConfigurationError

DEFAULT_CLASSIFIER_CMD = 'python3 prediction.py'
DEFAULT_CLASSIFIER_TIMEOUT = 60.0
DEFAULT_TEMPLATE = 'binpage.html'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _read_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        result = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}", name) from exc
    return check_timeout(result, name)


def check_timeout(value: float, name: str) -> float:
    """Reject timeouts that are not finite positive numbers."""
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive number, got {value!r}", name)
    return value


def _read_command(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, '').strip() or default
    try:
        parts = shlex.split(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} is not a valid command line: {exc}", name) from exc
    if not parts:
        raise ConfigurationError(f"{name} must not be empty", name)
    return tuple(parts)


@dataclass(frozen=True)
class Settings:
    classifier_cmd: tuple[str, ...]
    classifier_timeout: float
    template_path: str
    log_level: str


def load_settings() -> Settings:
    load_dotenv()

    log_level = os.getenv('PINFO_LOG_LEVEL', 'INFO').strip().upper() or 'INFO'
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(f"PINFO_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}", 'PINFO_LOG_LEVEL')

    return Settings(
        classifier_cmd=_read_command('PINFO_CLASSIFIER_CMD', DEFAULT_CLASSIFIER_CMD),
        classifier_timeout=_read_float('PINFO_CLASSIFIER_TIMEOUT', DEFAULT_CLASSIFIER_TIMEOUT),
        template_path=os.getenv('PINFO_TEMPLATE', '').strip() or DEFAULT_TEMPLATE,
        log_level=log_level
    )
