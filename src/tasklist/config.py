"""Settings loaded from environment variables.

Every setting has a default, so a plain ``tasklist`` run in a directory
behaves like it always has: ``tasklist.json`` in the working directory,
coloured cells when stdout is a terminal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .logs import DEFAULT_LOG_DIR

ENV_PREFIX = "TASKLIST"

COLOR_MODES = ("auto", "always", "never")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple, default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    data_file: Path
    color_mode: str
    log_dir: Path = DEFAULT_LOG_DIR

    @staticmethod
    def from_env() -> "Settings":
        color_mode = _env_choice(_k("COLOR"), COLOR_MODES, "auto")
        # https://no-color.org
        if os.getenv("NO_COLOR") and color_mode == "auto":
            color_mode = "never"

        return Settings(
            data_file=_env_path(_k("FILE"), Path("tasklist.json")),
            color_mode=color_mode,
            log_dir=_env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR),
        )

    def use_color(self, isatty: bool) -> bool:
        if self.color_mode == "always":
            return True
        if self.color_mode == "never":
            return False
        return isatty


def get_settings() -> Settings:
    return Settings.from_env()
