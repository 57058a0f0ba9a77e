from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the entire archiving workflow:
1. Validates that all inputs share one root.
2. Resolves the output path (explicit or collision-free default).
3. Walks the inputs and streams every node into the in-memory archive.
4. Finalizes the archive.
5. Persists the buffer to the output path (skipped on dry runs).

There is no recovery: the first failure propagates to the caller and
nothing is written to disk.
"""

import logging

from rootzip.core.pipeline.components.writer import write_archive
from rootzip.core.pipeline.stages.builder import build_archive
from rootzip.core.pipeline.stages.resolver import resolve_paths
from rootzip.core.pipeline.stages.walker import walk_inputs
from rootzip.domain.pipeline_models import (
    ArchiveConfig,
    PipelineResult,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_pipeline(config: ArchiveConfig) -> PipelineResult:
    """
    Execute the full archiving pipeline.

    Args:
        config: The immutable run configuration.

    Returns:
        PipelineResult: Object containing paths, entries and metrics.

    Raises:
        RootZipError: On configuration, archive or output failures.
        OSError: If an input cannot be read.
    """
    logger.info(f"Pipeline execution started ({len(config.inputs)} input(s)).")

    # -------------------------------------------------------------------------
    # 1) Root validation & output resolution
    # -------------------------------------------------------------------------
    resolved = resolve_paths(config)
    logger.info(f"Output path resolved: {resolved.output_path}")

    # -------------------------------------------------------------------------
    # 2) Walk & build (in memory)
    # -------------------------------------------------------------------------
    entries = walk_inputs(resolved.root, config.inputs)
    build = build_archive(entries, compression=config.compression)
    logger.info(
        f"Archive built: {build.file_count} file(s), {build.dir_count} folder(s), "
        f"{len(build.data)} bytes."
    )
    if build.duplicates:
        logger.warning(f"{len(build.duplicates)} duplicate entry name(s) were written.")

    # -------------------------------------------------------------------------
    # 3) Persistence
    # -------------------------------------------------------------------------
    if config.dry_run:
        logger.info("Dry run: output write skipped.")
    else:
        write_archive(resolved.output_path, build.data)

    return create_success_result(resolved, build, dry_run=config.dry_run)
