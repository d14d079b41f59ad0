"""Filesystem helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["atomic_write_text"]


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``content`` so readers never see a partial file.

    The text is written and synced to a hidden sibling, which is then renamed
    over ``path``. On failure the sibling is removed and ``path`` is left as
    it was.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        "w",
        encoding=encoding,
        newline="",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    ) as staged:
        staging = Path(staged.name)
        try:
            staged.write(content)
            staged.flush()
            os.fsync(staged.fileno())
        except OSError:
            staged.close()
            staging.unlink(missing_ok=True)
            raise

    try:
        staging.replace(path)
    except OSError:
        staging.unlink(missing_ok=True)
        raise
