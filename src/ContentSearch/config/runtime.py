"""Logging settings read from the ``log`` section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ContentSearch.config.common import expect_bool, expect_str, get_required_value, get_section

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

DEFAULT_LOG_DIR = "log"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Console level plus the optional per-command log file."""

    level: str
    to_file: bool = False
    dir: str = DEFAULT_LOG_DIR


def parse_log_level(value: Any, config_key: str = "log.level") -> str:
    """Normalize a level name such as ``debug`` or ``warn`` to its canonical form."""
    name = expect_str(value, config_key).strip().upper()
    return _LEVEL_ALIASES.get(name, name)


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Read the ``log`` section.

    ``level`` is required; ``to_file`` and ``dir`` default to off and ``log``.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If the section or ``level`` is missing.
    """
    section = get_section(raw, "log", required=True)
    to_file = section.get("to_file")
    log_dir = section.get("dir")
    return RuntimeConfig(
        level=parse_log_level(get_required_value(section, "level", "log.level")),
        to_file=False if to_file is None else expect_bool(to_file, "log.to_file"),
        dir=DEFAULT_LOG_DIR if log_dir is None else expect_str(log_dir, "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    if config.level not in LOG_LEVELS:
        raise ValueError(f"log.level must be one of {list(LOG_LEVELS)}, got {config.level!r}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is enabled")
