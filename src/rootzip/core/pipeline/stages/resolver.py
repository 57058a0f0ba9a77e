from __future__ import annotations

"""
Argument Resolution Stage.

Acts as the pre-flight gatekeeper of the pipeline: verifies that every
input shares the parent directory of the primary input and resolves the
destination archive path, applying collision-avoidance suffixing when no
explicit output path was given.
"""

import logging
import os
from typing import Sequence

from rootzip.domain.constants import ARCHIVE_EXTENSION, ROOT_MISMATCH_MSG
from rootzip.domain.errors import ConfigurationError
from rootzip.domain.pipeline_models import ArchiveConfig, ResolvedOutput
from rootzip.infra.fs import (
    extend_file_name,
    normalize_path,
    parent_dir,
    path_exists,
    strip_ext,
)

logger = logging.getLogger(__name__)

# Used when the primary input has no usable base name (e.g. '/')
FALLBACK_BASE_NAME = "archive"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_common_root(inputs: Sequence[str]) -> str:
    """
    Ensure all inputs live in the same parent directory.

    Args:
        inputs: Ordered input paths; the first one is the primary input.

    Returns:
        str: The absolute common parent directory (the root).

    Raises:
        ConfigurationError: If the list is empty or any input has a
                            different parent than the primary input.
    """
    if not inputs:
        raise ConfigurationError("at least one input path is required")

    root = parent_dir(inputs[0])
    for path in inputs[1:]:
        other = parent_dir(path)
        if other != root:
            logger.debug(f"Root mismatch: '{path}' lives in '{other}', expected '{root}'")
            raise ConfigurationError(f"{ROOT_MISMATCH_MSG} ('{path}' is not in '{root}')")

    return root


def default_output_path(primary: str, extension: str = ARCHIVE_EXTENSION) -> str:
    """
    Derive a non-colliding archive name from the primary input.

    The archive is placed in the current working directory and named after
    the primary input with its extension replaced. Existing entries are
    never overwritten: ' (2)', ' (3)', ... is appended until the name is free.

    Args:
        primary: The first input path.
        extension: Archive extension, including the leading dot.

    Returns:
        str: A relative path that did not exist at probe time.
    """
    base = strip_ext(os.path.basename(normalize_path(primary))) or FALLBACK_BASE_NAME
    candidate = base + extension

    unique = candidate
    n = 1
    while path_exists(unique):
        n += 1
        unique = extend_file_name(candidate, n)

    if n > 1:
        logger.info(f"'{candidate}' already exists, writing to '{unique}' instead.")
    return unique


def resolve_paths(config: ArchiveConfig) -> ResolvedOutput:
    """
    Run the root check and resolve the archive destination.

    An explicit output path is used verbatim, without collision checking.

    Args:
        config: The run configuration.

    Returns:
        ResolvedOutput: Root and output path for the rest of the pipeline.
    """
    root = validate_common_root(config.inputs)
    logger.debug(f"Common root resolved: {root}")

    if config.output_path:
        output_path = config.output_path
    else:
        output_path = default_output_path(config.primary)

    return ResolvedOutput(root=root, output_path=output_path)
