from __future__ import annotations

"""
Namespace Tree Rendering.

Maps directory paths onto nested C++ namespaces and renders the two kinds
of generated text:

- The per-file source, which always opens its full namespace path and
  closes it again. No state is carried between files.
- The aggregate header, built incrementally by a HeaderBuilder. Between
  two consecutive declarations only the namespaces past their common
  prefix are closed and reopened, so siblings share a single namespace
  block.
"""

import logging
from typing import List, Sequence, Set, Tuple

from dir2src.core.processing.array_emitter import format_byte_array
from dir2src.core.processing.sanitizer import sanitize_identifier
from dir2src.domain.constants import (
    ARRAY_ELEMENT_TYPE,
    AUTOGENERATED_BANNER,
    INCLUDES,
)
from dir2src.domain.errors import DuplicateSymbolError
from dir2src.domain.models import ArrayDeclaration

logger = logging.getLogger(__name__)

NamespacePath = Tuple[str, ...]

# -----------------------------------------------------------------------------
# PATH MAPPING
# -----------------------------------------------------------------------------

def namespace_path(root_namespace: str, directory: Sequence[str]) -> NamespacePath:
    """
    Build the namespace path of a file from its relative directory.

    Args:
        root_namespace: Outermost namespace (already a valid identifier).
        directory: Raw directory segments relative to the input root.

    Returns:
        NamespacePath: Root namespace followed by the sanitized segments.
    """
    return (root_namespace,) + tuple(sanitize_identifier(d) for d in directory)


def common_prefix_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Count leading segments shared by two paths, stopping at the first mismatch."""
    length = 0
    for left, right in zip(a, b):
        if left != right:
            break
        length += 1
    return length

# -----------------------------------------------------------------------------
# PER-FILE SOURCE
# -----------------------------------------------------------------------------

def render_array_type(size: int) -> str:
    return f"std::array<{ARRAY_ELEMENT_TYPE}, {size}>"


def render_source(namespaces: Sequence[str], declaration: ArrayDeclaration) -> str:
    """
    Render the complete source file defining one embedded array.

    Args:
        namespaces: Full namespace path, root first.
        declaration: Array to define.

    Returns:
        str: Source text.
    """
    parts: List[str] = [_preamble()]

    for name in namespaces:
        parts.append(f"namespace {name} {{\n")

    parts.append(f"\n{render_array_type(declaration.size)} {declaration.identifier} = {{\n\n")
    parts.append(format_byte_array(declaration.data))
    parts.append("\n\n};\n\n")

    for name in reversed(namespaces):
        parts.append(f"}} // end of namespace {name}\n")

    return "".join(parts)

# -----------------------------------------------------------------------------
# AGGREGATE HEADER
# -----------------------------------------------------------------------------

class HeaderBuilder:
    """
    Incremental writer of the aggregate header.

    Owns the list of currently open namespaces. The root namespace is
    opened on construction; finalize() closes everything and returns the
    text. Declarations must arrive in walk order (see the scanner module),
    otherwise a namespace may be closed and reopened, which is still valid
    C++ but no longer minimal.
    """

    def __init__(self, root_namespace: str) -> None:
        self._root = root_namespace
        self._parts: List[str] = [_preamble(pragma_once=True), f"namespace {root_namespace} {{\n\n"]
        self._open: NamespacePath = (root_namespace,)
        self._symbols: Set[str] = set()
        self._namespaces: Set[str] = {root_namespace}
        self._finalized = False

    @property
    def open_namespaces(self) -> NamespacePath:
        return self._open

    @property
    def declaration_count(self) -> int:
        return len(self._symbols)

    def add(self, namespaces: Sequence[str], declaration: ArrayDeclaration) -> None:
        """
        Append an extern declaration nested in the given namespace path.

        Args:
            namespaces: Full namespace path, starting with the root namespace.
            declaration: Array to declare.

        Raises:
            RuntimeError: If the builder was already finalized.
            ValueError: If the path does not start with the root namespace.
            DuplicateSymbolError: If the qualified symbol was already declared,
                or if an array and a namespace share one qualified name.
        """
        if self._finalized:
            raise RuntimeError("HeaderBuilder already finalized")

        target = tuple(namespaces)
        if not target or target[0] != self._root:
            raise ValueError(f"Namespace path {list(target)} does not start with '{self._root}'")

        symbol = "::".join(target + (declaration.identifier,))
        if symbol in self._symbols or symbol in self._namespaces:
            raise DuplicateSymbolError(symbol)

        # An array and a namespace may not share a qualified name
        scopes = ["::".join(target[:depth]) for depth in range(2, len(target) + 1)]
        for scope in scopes:
            if scope in self._symbols:
                raise DuplicateSymbolError(scope)

        self._symbols.add(symbol)
        self._namespaces.update(scopes)

        common = common_prefix_length(self._open, target)

        for name in reversed(self._open[common:]):
            self._close(name)
        for name in target[common:]:
            self._parts.append(f"\nnamespace {name} {{\n\n")
        self._open = target

        self._parts.append(
            f"extern {render_array_type(declaration.size)} {declaration.identifier};\n"
        )

    def finalize(self) -> str:
        """Close every open namespace, root included, and return the header text."""
        if self._finalized:
            raise RuntimeError("HeaderBuilder already finalized")

        for name in reversed(self._open):
            self._close(name)
        self._open = ()
        self._finalized = True

        logger.debug(f"Header finalized with {len(self._symbols)} declarations")
        return "".join(self._parts)

    def _close(self, name: str) -> None:
        self._parts.append(f"\n}} // end of namespace {name}\n")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _preamble(pragma_once: bool = False) -> str:
    lines = [AUTOGENERATED_BANNER, ""]
    if pragma_once:
        lines += ["#pragma once", ""]
    lines += list(INCLUDES) + ["", ""]
    return "\n".join(lines)
