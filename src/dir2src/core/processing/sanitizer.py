from __future__ import annotations

"""
Identifier Sanitization Service.

Turns arbitrary filesystem names into identifiers that are valid both as
C++ namespace names and as variable names. Only ASCII letters and digits
survive; everything else collapses to an underscore.
"""

import logging
import re
from typing import Final

from dir2src.domain.errors import InvalidNameError

logger = logging.getLogger(__name__)

_NON_ALNUM: Final[re.Pattern] = re.compile(r"[^A-Za-z0-9]")
_IDENTIFIER: Final[re.Pattern] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def sanitize_identifier(name: str) -> str:
    """
    Convert a path segment into a valid identifier.

    Every non-alphanumeric character becomes '_', leading underscores are
    dropped, and an identifier starting with a digit gets a '_' prefix.
    The function is idempotent on its own output.

    Args:
        name: Raw file or directory name.

    Returns:
        str: Sanitized identifier.

    Raises:
        InvalidNameError: If the name holds no alphanumeric character.
    """
    replaced = _NON_ALNUM.sub("_", name or "")
    stripped = replaced.lstrip("_")

    if not stripped:
        raise InvalidNameError(name)

    if stripped[0].isdigit():
        stripped = "_" + stripped

    if stripped != name:
        logger.debug(f"Sanitized name '{name}' -> '{stripped}'")
    return stripped


def is_valid_identifier(name: str) -> bool:
    """Check whether a string is already a valid ASCII identifier."""
    return bool(name) and _IDENTIFIER.match(name) is not None
