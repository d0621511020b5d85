from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into the run configuration. Parsing never exits the
process: malformed command lines raise UsageError subclasses so the
application controller decides on output and exit status.
"""

import argparse
import sys
from typing import List, Optional

from dir2src.domain.config import EmbedConfig
from dir2src.domain.constants import DEFAULT_ROOT_NAMESPACE, HEADER_FILE_NAME
from dir2src.domain.errors import (
    MissingOptionValueError,
    UnexpectedArgumentError,
    UnknownOptionError,
)

_HELP_FLAGS = ("-h", "--help")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dir2src CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dir2src",
        description=(
            "Embed every file of a directory tree as a std::array in generated "
            "C++ sources, one per input file, and declare them all in "
            f"<output-path>/{HEADER_FILE_NAME}."
        ),
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )

    # --- Paths ---
    p.add_argument("input_path", nargs="?", metavar="<input-path>",
                   help="directory whose files are embedded")
    p.add_argument("output_path", nargs="?", metavar="<output-path>",
                   help="directory receiving the generated files")

    # --- Generation ---
    p.add_argument(
        "-h", "--help",
        action="store_true",
        help="print this summary",
    )
    p.add_argument(
        "-n", "--root-namespace",
        dest="root_namespace",
        metavar="NAME",
        default=DEFAULT_ROOT_NAMESPACE,
        help=f'name of root namespace in output [default: "{DEFAULT_ROOT_NAMESPACE}"]',
    )
    p.add_argument(
        "-p", "--print-output-files",
        action="store_true",
        help="print absolute paths of output source files, e.g. to feed into build systems",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="render everything but write nothing",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="elevate logging verbosity to DEBUG",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        metavar="PATH",
        default=None,
        help="also write diagnostics to a rotating log file",
    )

    return p


def parse_arguments(
        parser: argparse.ArgumentParser,
        argv: Optional[List[str]] = None,
) -> argparse.Namespace:
    """
    Parse a command line, mapping argparse failures to domain errors.

    A help flag anywhere on the command line wins: the returned namespace
    has help set even when other arguments are malformed.

    Args:
        parser: Parser returned by build_parser().
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed arguments.

    Raises:
        MissingOptionValueError: If a value-taking option has no value.
        UnknownOptionError: If an option is not recognized.
        UnexpectedArgumentError: If there are more than two positionals.
    """
    if argv is None:
        argv = sys.argv[1:]
    help_requested = any(arg in _HELP_FLAGS for arg in argv)

    try:
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        if help_requested:
            return parser.parse_known_args([_HELP_FLAGS[0]])[0]
        raise MissingOptionValueError(e.argument_name or "") from e

    if args.help or not extras:
        return args

    unknown_options = [arg for arg in extras if arg.startswith("-") and arg != "-"]
    if unknown_options:
        raise UnknownOptionError(unknown_options[0])
    raise UnexpectedArgumentError(extras[0])

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def wants_help(args: argparse.Namespace) -> bool:
    """Help wins over everything else, including a missing positional."""
    return bool(args.help) or not args.input_path or not args.output_path


def args_to_config(args: argparse.Namespace) -> EmbedConfig:
    """
    Translate the argparse Namespace into the run configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        EmbedConfig: Immutable run options.
    """
    return EmbedConfig(
        input_path=args.input_path,
        output_path=args.output_path,
        root_namespace=args.root_namespace,
        print_output_files=bool(args.print_output_files),
        dry_run=bool(args.dry_run),
    )
