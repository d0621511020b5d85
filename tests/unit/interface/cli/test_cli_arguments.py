from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Positional and option mapping into EmbedConfig.
2. Help detection (flag or missing positional).
3. Translation of unknown options and missing values into domain errors.
"""

import pytest

from dir2src.domain.errors import (
    MissingOptionValueError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from dir2src.interface.cli.args import args_to_config, build_parser, parse_arguments, wants_help


def parse(arg_list):
    """Helper to simulate CLI argument parsing."""
    return parse_arguments(build_parser(), arg_list)


def test_defaults() -> None:
    args = parse(["in", "out"])
    cfg = args_to_config(args)

    assert cfg.input_path == "in"
    assert cfg.output_path == "out"
    assert cfg.root_namespace == "Bin"
    assert cfg.print_output_files is False
    assert cfg.dry_run is False
    assert not wants_help(args)


def test_short_and_long_options() -> None:
    cfg = args_to_config(parse(["-n", "Assets", "-p", "in", "out"]))
    assert cfg.root_namespace == "Assets"
    assert cfg.print_output_files is True

    cfg = args_to_config(parse(["--root-namespace", "Res", "--print-output-files", "--dry-run", "in", "out"]))
    assert cfg.root_namespace == "Res"
    assert cfg.print_output_files is True
    assert cfg.dry_run is True


def test_diagnostic_options() -> None:
    args = parse(["--debug", "--log-file", "run.log", "in", "out"])
    assert args.debug is True
    assert args.log_file == "run.log"


def test_help_requested() -> None:
    assert wants_help(parse(["-h"]))
    assert wants_help(parse(["--help", "in", "out"]))


def test_help_overrides_unknown_option() -> None:
    args = parse(["--bogus", "-h", "in", "out"])
    assert wants_help(args)

    assert wants_help(parse(["in", "out", "stray", "--help"]))


def test_help_overrides_missing_option_value() -> None:
    assert wants_help(parse(["-h", "in", "out", "-n"]))


def test_missing_positionals_request_help() -> None:
    assert wants_help(parse([]))
    assert wants_help(parse(["in"]))


def test_unknown_option() -> None:
    with pytest.raises(UnknownOptionError) as exc_info:
        parse(["--bogus", "in", "out"])
    assert exc_info.value.option == "--bogus"


def test_unknown_abbreviation_is_not_expanded() -> None:
    with pytest.raises(UnknownOptionError):
        parse(["--root", "X", "in", "out"])


def test_extra_positional_is_rejected() -> None:
    with pytest.raises(UnexpectedArgumentError) as exc_info:
        parse(["in", "out", "extra"])
    assert exc_info.value.argument == "extra"


def test_stray_argument_is_not_called_an_option() -> None:
    with pytest.raises(UnexpectedArgumentError) as exc_info:
        parse(["-p", "in", "out", "more/files"])
    assert str(exc_info.value) == 'Unexpected argument "more/files"'


def test_unknown_option_reported_before_stray_argument() -> None:
    with pytest.raises(UnknownOptionError) as exc_info:
        parse(["in", "out", "extra", "--bogus"])
    assert exc_info.value.option == "--bogus"


def test_missing_option_value() -> None:
    with pytest.raises(MissingOptionValueError) as exc_info:
        parse(["in", "out", "-n"])
    assert "-n" in exc_info.value.option


def test_help_text_mentions_options() -> None:
    text = build_parser().format_help()
    for flag in ("--root-namespace", "--print-output-files", "<input-path>", "<output-path>"):
        assert flag in text
