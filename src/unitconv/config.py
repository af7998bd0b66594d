"""Centralized runtime settings for unitconv.

:func:`get_settings` returns the prompt shown by the interactive loop and the
logging destination. Values come from environment variables, from an optional
TOML/YAML document pointed to by ``UNITCONV_CONFIG_FILE``, or from the
built-in defaults, in that order of precedence. Settings are never written
back to disk.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = [
    "DEFAULT_EXIT_COMMAND",
    "DEFAULT_PROMPT",
    "Settings",
    "get_settings",
    "parse_log_level",
    "reset_settings",
]

DEFAULT_PROMPT = "Enter what you want to convert (or exit): "
DEFAULT_EXIT_COMMAND = "exit"

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    prompt: str = DEFAULT_PROMPT
    exit_command: str = DEFAULT_EXIT_COMMAND
    log_path: Optional[Path] = None
    log_level: int = logging.INFO

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as JSON friendly values."""

        return {
            "prompt": self.prompt,
            "exit_command": self.exit_command,
            "log_path": str(self.log_path) if self.log_path is not None else None,
            "log_level": logging.getLevelName(self.log_level),
        }


def parse_log_level(value: str | int) -> int:
    """Translate ``"debug"``/``"INFO"``/``20`` into a :mod:`logging` level."""

    if isinstance(value, int):
        return value
    candidate = value.strip()
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Any) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = config_file.expanduser().resolve()
        config_data = _load_config_file(config_file)
        config_dir = config_file.parent

    session_section = _coalesce_mapping(config_data.get("session"))
    logging_section = _coalesce_mapping(config_data.get("logging"))

    env = os.environ

    prompt = env.get("UNITCONV_PROMPT") or session_section.get("prompt") or DEFAULT_PROMPT
    exit_command = session_section.get("exit_command") or DEFAULT_EXIT_COMMAND

    # Environment paths are relative to the working directory, file paths to the file.
    env_log_path = env.get("UNITCONV_LOG_PATH")
    if env_log_path:
        log_path = _normalize_path(env_log_path, base=None)
    else:
        log_path = _normalize_path(logging_section.get("path"), base=config_dir)

    log_level = parse_log_level(env.get("UNITCONV_LOG_LEVEL") or logging_section.get("level") or logging.INFO)

    return Settings(
        prompt=str(prompt),
        exit_command=str(exit_command),
        log_path=log_path,
        log_level=log_level,
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached settings are discarded and recomputed.
    config_file:
        Optional explicit configuration document. The result is not cached,
        so callers (e.g. tests) can override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file))

    env_path = os.getenv("UNITCONV_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached settings (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
