"""Small path and string helpers."""

from __future__ import annotations

import os


def is_prefix(prefix: str, text: str) -> bool:
    """Return True when ``text`` starts with ``prefix``."""
    return text.startswith(prefix)


def absolute_address(relative: str) -> str:
    """Join ``relative`` onto the current working directory."""
    return f"{os.getcwd()}/{relative}"