from __future__ import annotations

import logging
import os
from typing import Optional, Union

from ..config import get_settings

logger = logging.getLogger("onehelpers")


def read_text(path: Union[str, os.PathLike], *, encoding: Optional[str] = None) -> str:
    """
    Read the whole file at path and return its content as a single string.

    Line endings are returned exactly as stored. Decoding is strict, so
    undecodable bytes raise UnicodeDecodeError. OSError subclasses
    (FileNotFoundError, PermissionError, ...) propagate to the caller.
    """
    if encoding is None:
        encoding = get_settings().encoding

    with open(path, "r", encoding=encoding, newline="") as fh:
        content = fh.read()
    logger.debug("Read %d characters from %s", len(content), path)
    return content


__all__ = ["read_text"]
