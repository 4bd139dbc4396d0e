"""Writes rendered documents to disk."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class OutputWriteError(RuntimeError):
    """Writing an output document failed."""


def write_output(content: str, file_path: Path) -> Path:
    """Write ``content`` as UTF-8, creating parent directories.

    Raises OutputWriteError wrapping the underlying OSError.
    """
    file_path = Path(file_path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Failed to write to file: {file_path}") from e
    logger.info("Saved to: %s", file_path.resolve())
    return file_path
