from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, output path resolution and directory
creation. Acts as a thin abstraction over the 'os' module so the core
never builds platform-specific paths by hand.
"""

import os
from typing import Optional, Sequence, Tuple

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def get_output_directory(output_root: str, namespaces: Sequence[str]) -> str:
    """
    Resolve the directory receiving a generated source file.

    Args:
        output_root: Normalized output root.
        namespaces: Sanitized directory segments below the root namespace.

    Returns:
        str: Absolute destination directory.
    """
    return os.path.join(output_root, *namespaces)

# -----------------------------------------------------------------------------
# FILESYSTEM MUTATION API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
