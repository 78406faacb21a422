"""
Utility helpers kept intentionally small and stateless.
"""

from .files import read_text  # noqa: F401
from .maps import keys, values  # noqa: F401
from .text import split  # noqa: F401

__all__ = ["keys", "read_text", "split", "values"]
