"""Publishes the confirmed directory for the shell wrapper.

The output file holds exactly one newline-terminated absolute path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import OutputWriteError

LOGGER = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("/tmp/lazycd_selection")


def emit_path(path: Path, output_path: Path = DEFAULT_OUTPUT_PATH) -> None:
    """Overwrite ``output_path`` with ``path`` followed by a newline.

    Raises ``OutputWriteError`` when the file cannot be written.
    """
    line = f"{Path(path).absolute()}\n"
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(line)
    except OSError as exc:
        LOGGER.error("failed to write %s: %s", output_path, exc)
        raise OutputWriteError(output_path, exc) from exc
    LOGGER.debug("wrote selection %s to %s", path, output_path)


__all__ = ["DEFAULT_OUTPUT_PATH", "emit_path"]
