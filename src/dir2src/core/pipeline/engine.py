from __future__ import annotations

"""
Core generation pipeline.

This module coordinates a complete run:
1. Normalizes the input and output roots.
2. Walks the input tree in its fixed depth-first order.
3. Renders and writes one source file per input file.
4. Accumulates the extern declarations of the aggregate header.
5. Writes the header once every file has been processed.

Any error aborts the run: a partially generated tree is never reported
as a success.
"""

import logging
import os
from typing import Callable, List

from dir2src.core.analysis.namespace_tree import (
    HeaderBuilder,
    namespace_path,
    render_source,
)
from dir2src.core.pipeline.components.reader import read_file_bytes
from dir2src.core.pipeline.components.writer import write_output
from dir2src.core.processing.sanitizer import sanitize_identifier
from dir2src.core.services.scanner import DirectoryLister, FileReader, list_directory, walk_files
from dir2src.domain.config import EmbedConfig
from dir2src.domain.constants import HEADER_FILE_NAME, SOURCE_EXTENSION
from dir2src.domain.models import ArrayDeclaration, EmbedResult
from dir2src.infra.fs import get_output_directory, normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: EmbedConfig,
        *,
        lister: DirectoryLister = list_directory,
        reader: FileReader = read_file_bytes,
        echo: Callable[[str], None] = print,
) -> EmbedResult:
    """
    Execute a full generation run.

    Args:
        config: Options of the run.
        lister: Directory entry provider used by the walker.
        reader: File content provider used by the walker.
        echo: Receives the absolute path of each generated source when
              config.print_output_files is set.

    Returns:
        EmbedResult: Paths and totals of the generated artifacts.

    Raises:
        InputOpenError: If the input tree cannot be listed or read.
        OutputWriteError: If an artifact cannot be written.
        InvalidNameError: If a path segment has no usable characters.
        DuplicateSymbolError: If two files map to the same symbol.
    """
    cwd = os.getcwd()
    input_path = normalize_path(config.input_path, cwd)
    output_path = normalize_path(config.output_path, cwd)

    root_namespace = sanitize_identifier(config.root_namespace)
    if root_namespace != config.root_namespace:
        logger.warning(f"Root namespace '{config.root_namespace}' sanitized to '{root_namespace}'")

    logger.info(f"Embedding files from {input_path} into {output_path}")
    if config.dry_run:
        logger.info("Dry run: no files will be written.")

    header = HeaderBuilder(root_namespace)
    source_files: List[str] = []
    total_bytes = 0

    # -------------------------------------------------------------------------
    # Per-file sources
    # -------------------------------------------------------------------------
    for entry in walk_files(input_path, lister=lister, reader=reader):
        namespaces = namespace_path(root_namespace, entry.directory)
        declaration = ArrayDeclaration(
            identifier=sanitize_identifier(entry.name),
            data=entry.content,
        )

        # Declared first so a symbol collision aborts before anything is overwritten
        header.add(namespaces, declaration)

        destination = get_output_directory(output_path, namespaces[1:])
        file_name = entry.name + SOURCE_EXTENSION

        if config.dry_run:
            file_path = os.path.abspath(os.path.join(destination, file_name))
        else:
            file_path = write_output(destination, file_name, render_source(namespaces, declaration))

        logger.debug(f"{entry.path} -> {file_path} ({declaration.size} bytes)")
        source_files.append(file_path)
        total_bytes += declaration.size

        if config.print_output_files:
            echo(file_path)

    # -------------------------------------------------------------------------
    # Aggregate header
    # -------------------------------------------------------------------------
    header_text = header.finalize()
    if config.dry_run:
        header_path = os.path.abspath(os.path.join(output_path, HEADER_FILE_NAME))
    else:
        header_path = write_output(output_path, HEADER_FILE_NAME, header_text)

    logger.info(f"Generated {len(source_files)} sources ({total_bytes} bytes) and {header_path}")

    return EmbedResult(
        input_path=input_path,
        output_path=output_path,
        header_path=header_path,
        source_files=source_files,
        total_bytes=total_bytes,
        dry_run=config.dry_run,
    )
