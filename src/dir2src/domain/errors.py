from __future__ import annotations

"""
Domain Error Hierarchy.

Every failure the tool reports is a subclass of Dir2SrcError and carries
the path, name or option that caused it, so the interface layer can print
a short message without inspecting the cause.
"""

from typing import Optional


class Dir2SrcError(Exception):
    """Base class for all expected failures of a generation run."""


# -----------------------------------------------------------------------------
# I/O ERRORS
# -----------------------------------------------------------------------------

class InputOpenError(Dir2SrcError):
    """An input file or the input root could not be opened or read."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Failed to open input '{path}'"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class OutputWriteError(Dir2SrcError):
    """A destination directory could not be created or a file written."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Failed to write output '{path}'"
        super().__init__(f"{msg}: {reason}" if reason else msg)


# -----------------------------------------------------------------------------
# NAMING ERRORS
# -----------------------------------------------------------------------------

class InvalidNameError(Dir2SrcError):
    """A path segment sanitizes to an empty identifier."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Name '{name}' does not contain any alphanumeric character")


class DuplicateSymbolError(Dir2SrcError):
    """Two inputs map to the same qualified name, as arrays or as an array and a namespace."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol '{symbol}' is declared more than once")


# -----------------------------------------------------------------------------
# COMMAND LINE ERRORS
# -----------------------------------------------------------------------------

class UsageError(Dir2SrcError):
    """Invalid command line; raised before any traversal begins."""


class UnknownOptionError(UsageError):
    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f'Unknown option "{option}"')


class MissingOptionValueError(UsageError):
    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Missing value for option {option}")


class UnexpectedArgumentError(UsageError):
    """A positional argument beyond <input-path> and <output-path>."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f'Unexpected argument "{argument}"')
