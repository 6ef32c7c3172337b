# topmark:header:start
#
#   project      : TomlRecord
#   file         : files.py
#   file_relpath : src/tomlrecord/core/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Atomic text file output."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from tomlrecord.config.logging import get_logger
from tomlrecord.core.errors import OutputError

if TYPE_CHECKING:
    from tomlrecord.config.logging import TomlRecordLogger

logger: TomlRecordLogger = get_logger(__name__)


def atomic_write_text(path: str | os.PathLike[str], text: str, encoding: str = "utf-8") -> None:
    """Write ``text`` to ``path`` through a temporary file in the same directory.

    The destination is either left untouched or fully replaced.

    Raises:
        OutputError: If the temporary file cannot be written or moved into place.
    """
    target = Path(path)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputError(f"Cannot write {target}: {exc}") from exc
    logger.info("Wrote %d characters to %s", len(text), target)
