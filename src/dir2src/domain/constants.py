from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed literals of the generated C++ artifacts: banner,
includes, file naming, and the layout of the embedded byte arrays.
"""

from typing import Final, Tuple

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_ROOT_NAMESPACE: Final[str] = "Bin"

HEADER_FILE_NAME: Final[str] = "bin.h"
SOURCE_EXTENSION: Final[str] = ".cpp"

# -----------------------------------------------------------------------------
# GENERATED CODE LAYOUT
# -----------------------------------------------------------------------------

AUTOGENERATED_BANNER: Final[str] = "// AUTOGENERATED"
INCLUDES: Final[Tuple[str, ...]] = ("#include <array>", "#include <cstdint>")
ARRAY_ELEMENT_TYPE: Final[str] = "uint8_t"

VALUES_PER_LINE: Final[int] = 12
ARRAY_INDENT: Final[str] = "    "
