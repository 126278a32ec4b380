"""Writing rendered diagrams to files."""

import logging
from pathlib import Path

from ..errors import ExportWriteError

logger = logging.getLogger(__name__)


def write_file(text: str, path: str | Path) -> Path:
    """Write diagram text to `path`, replacing any existing file.

    Returns:
        The resolved path of the written file

    Raises:
        ExportWriteError: If the file cannot be opened or written. The
            original OSError is kept as the cause.
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise ExportWriteError(path, e) from e

    logger.info(f"Wrote {len(text)} characters to {path}")
    return path.resolve()
