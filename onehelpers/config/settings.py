from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Settings:
    """Package configuration bundled in a single object."""

    encoding: str = DEFAULT_ENCODING
    log_dir: Optional[Path] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache configuration from environment variables.

    Raises:
        ValueError: if ONEHELPERS_ENCODING names a codec Python does not know.
    """
    load_dotenv()

    encoding = os.getenv("ONEHELPERS_ENCODING") or DEFAULT_ENCODING
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"Unknown text encoding in ONEHELPERS_ENCODING: {encoding}") from exc

    log_dir_raw = os.getenv("ONEHELPERS_LOG_DIR")
    log_dir = Path(log_dir_raw).expanduser() if log_dir_raw else None

    return Settings(encoding=encoding, log_dir=log_dir)


__all__ = ["Settings", "get_settings"]
