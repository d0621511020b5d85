from __future__ import annotations

"""
Input File Reading Component.

Loads whole files into memory. Files are embedded verbatim, so content is
read in binary mode with no decoding step.
"""

import logging

from dir2src.domain.errors import InputOpenError

logger = logging.getLogger(__name__)


def read_file_bytes(file_path: str) -> bytes:
    """
    Read the complete content of a file.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        bytes: Raw file content.

    Raises:
        InputOpenError: If the file cannot be opened or read.
    """
    try:
        with open(file_path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.debug(f"Failed to read input file '{file_path}': {e}")
        raise InputOpenError(file_path, e.strerror or str(e)) from e

    logger.debug(f"Read {len(data)} bytes from {file_path}")
    return data
