from __future__ import annotations

"""
Byte-Array Literal Emitter.

Serializes raw bytes into the body of a C++ brace initializer. Every byte
is written as a three-digit zero-padded decimal, twelve values per line,
so the generated text is stable across runs and friendly to diffs.
"""

import re
from typing import Final, List

from dir2src.domain.constants import ARRAY_INDENT, VALUES_PER_LINE

_VALUE_RX: Final[re.Pattern] = re.compile(r"\d{3}")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_byte_array(
        data: bytes,
        per_line: int = VALUES_PER_LINE,
        indent: str = ARRAY_INDENT,
) -> str:
    """
    Render bytes as the value list of an array initializer.

    Output Format (per_line=3):
        "    001, 002, 003,\\n    004, 005"

    The last value of a full line is followed by ",\\n"; the final value
    carries no trailing comma. Empty data renders as an empty string.

    Note: a C++ compiler reads a leading zero as an octal prefix, so values
    such as 008 or 019 are rejected and 010 means eight. The padded layout
    is kept to match existing generated trees.

    Args:
        data: Bytes to serialize.
        per_line: Number of values on each line.
        indent: Prefix written at the start of each line.

    Returns:
        str: Formatted value list without surrounding braces.
    """
    if per_line < 1:
        raise ValueError(f"per_line must be positive, got {per_line}")

    lines: List[str] = []
    for start in range(0, len(data), per_line):
        chunk = data[start:start + per_line]
        lines.append(indent + ", ".join(f"{b:03d}" for b in chunk))

    return ",\n".join(lines)


def parse_byte_array(text: str) -> bytes:
    """
    Recover the bytes from text produced by format_byte_array.

    Args:
        text: Formatted value list.

    Returns:
        bytes: The original byte sequence.
    """
    return bytes(int(value) for value in _VALUE_RX.findall(text))
