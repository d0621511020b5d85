from __future__ import annotations

"""
Run Configuration Model.

A single immutable structure holding every option of a generation run.
It is built once after argument parsing and handed to the pipeline.
"""

from dataclasses import dataclass

from dir2src.domain.constants import DEFAULT_ROOT_NAMESPACE


@dataclass(frozen=True)
class EmbedConfig:
    """
    Options of a generation run.

    Attributes:
        input_path: Root directory whose files are embedded.
        output_path: Root directory receiving the generated sources and header.
        root_namespace: Outermost namespace wrapping every declaration.
        print_output_files: Echo the absolute path of each generated source.
        dry_run: Render everything but write nothing.
    """
    input_path: str
    output_path: str
    root_namespace: str = DEFAULT_ROOT_NAMESPACE
    print_output_files: bool = False
    dry_run: bool = False
