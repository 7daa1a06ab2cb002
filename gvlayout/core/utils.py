"""Miscellaneous helpers."""

from __future__ import annotations

import logging
import os

_log = logging.getLogger(__name__)


def save_to_file(filename: str | os.PathLike[str], content: str) -> None:
    """Write ``content`` to ``filename``, replacing any existing file."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(content)
    _log.info("Wrote %s", filename)