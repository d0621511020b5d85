from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
input pre-flight checks, pipeline execution and exit status mapping.

Exit codes:
    0   success, or help printed
    1   invalid command line or failed generation
    2   input directory does not exist
    130 interrupted
"""

import os
import sys
from typing import List, Optional

from dir2src.core.pipeline.engine import run_pipeline
from dir2src.domain.errors import Dir2SrcError, UsageError
from dir2src.infra.fs import normalize_path
from dir2src.infra.logging import LoggingConfig, configure_logging, get_logger
from dir2src.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase (nothing touches the filesystem before this succeeds)
    parser = cli_args.build_parser()
    try:
        args = cli_args.parse_arguments(parser, argv)
    except UsageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(f"Run '{parser.prog} --help' for usage.", file=sys.stderr)
        return 1

    if cli_args.wants_help(args):
        parser.print_help(sys.stdout)
        return 0

    # 2. Logging bootstrap (stderr only; stdout carries the file list)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    config = cli_args.args_to_config(args)
    logger.debug(f"Resolved configuration: {config}")

    # 3. Pre-flight input verification
    input_path = normalize_path(config.input_path, os.getcwd())
    if not os.path.isdir(input_path):
        print(f"ERROR: Input directory does not exist: {input_path}", file=sys.stderr)
        return 2

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(config)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except Dir2SrcError as e:
        logger.debug("Generation aborted", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info(
        f"{result.file_count} files embedded ({result.total_bytes} bytes), "
        f"header: {result.header_path}"
    )
    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
