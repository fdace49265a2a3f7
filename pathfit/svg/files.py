"""Document file I/O. Every OSError surfaces as IoError."""

from __future__ import annotations

import logging
from pathlib import Path

from pathfit.errors import IoError

logger = logging.getLogger(__name__)


def read_svg(path: str | Path) -> str:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"cannot read {path}: {e}") from e
    logger.debug("Read %d bytes from %s", len(text), path)
    return text


def write_svg(path: str | Path, text: str) -> None:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise IoError(f"cannot write {path}: {e}") from e
    logger.debug("Wrote %d bytes to %s", len(text), path)
