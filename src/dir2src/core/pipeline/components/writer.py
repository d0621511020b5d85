from __future__ import annotations

"""
Output Persistence Component.

Writes generated text to disk, creating the destination directory
hierarchy on demand. Existing files are replaced.
"""

import logging
import os

from dir2src.domain.errors import OutputWriteError
from dir2src.infra.fs import safe_mkdir

logger = logging.getLogger(__name__)


def write_output(directory: str, file_name: str, content: str) -> str:
    """
    Write a generated file, creating missing parent directories.

    Directory creation is attempted on every call and succeeds if the
    directory already exists. A failure while writing may leave a
    truncated file behind.

    Args:
        directory: Absolute destination directory.
        file_name: Name of the file to create or replace.
        content: Full text to write.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OutputWriteError: If the directory cannot be created or the file written.
    """
    ok, error = safe_mkdir(directory)
    if not ok:
        logger.debug(f"Failed to create output directory '{directory}': {error}")
        raise OutputWriteError(directory, error)

    file_path = os.path.abspath(os.path.join(directory, file_name))
    try:
        with open(file_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        logger.debug(f"Failed to write output file '{file_path}': {e}")
        raise OutputWriteError(file_path, e.strerror or str(e)) from e

    logger.debug(f"Wrote {len(content)} characters to {file_path}")
    return file_path
