"""Runtime settings, read from the environment.

A ``.env`` file in the project root is loaded first, so local overrides
don't need to be exported by hand.  Real environment variables win over
the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
ROOT_DIR = Path(__file__).resolve().parents[3]

DEFAULT_CART_KEY = "babylandCart"


def _get_env(key: str, default: str) -> str:
    v = os.getenv(key)
    if v is not None and v.strip() != "":
        return v.strip()
    return default


def _get_log_level(key: str, default: str) -> int:
    name = _get_env(key, default).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise RuntimeError(f"{key}={name!r} is not a valid logging level")
    return level


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    cart_key: str
    log_level: int


def load_settings() -> Settings:
    load_dotenv(dotenv_path=ROOT_DIR / ".env")
    return Settings(
        data_dir=Path(_get_env("BABYLAND_DATA_DIR", str(ROOT_DIR / "data"))),
        cart_key=_get_env("BABYLAND_CART_KEY", DEFAULT_CART_KEY),
        log_level=_get_log_level("BABYLAND_LOG_LEVEL", "WARNING"),
    )
