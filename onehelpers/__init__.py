"""
onehelpers package bootstrap.

Expose the helpers at the top level so callers can import from `onehelpers`
without traversing the package hierarchy.
"""

from .config.settings import get_settings, Settings  # noqa: F401
from .utils import keys, read_text, split, values  # noqa: F401

__version__ = "0.1.0"

__all__ = ["Settings", "get_settings", "keys", "read_text", "split", "values"]
