from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the core data structures and factory functions used to communicate
configuration, intermediate records and execution results between the
pipeline stages and the interface layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from rootzip.domain.constants import (
    COMPRESSION_METHODS,
    DEFAULT_COMPRESSION,
)
from rootzip.domain.errors import ConfigurationError

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ArchiveConfig:
    """
    Immutable run configuration, built once at startup.

    Attributes:
        inputs: Ordered input paths. The first one is the primary input.
        output_path: Explicit output path. None triggers default naming.
        compression: Compression method name ('deflate' or 'store').
        dry_run: Build the archive in memory but skip the output write.
    """
    inputs: Tuple[str, ...]
    output_path: Optional[str] = None
    compression: str = DEFAULT_COMPRESSION
    dry_run: bool = False

    @property
    def primary(self) -> str:
        return self.inputs[0]


def compression_type(name: str) -> int:
    """
    Map a compression method name to its zipfile constant.

    Raises:
        ConfigurationError: If the method is unknown.
    """
    method = (name or DEFAULT_COMPRESSION).strip().lower()
    if method not in COMPRESSION_METHODS:
        allowed = ", ".join(sorted(COMPRESSION_METHODS))
        raise ConfigurationError(f"unknown compression '{name}' (expected one of: {allowed})")
    return COMPRESSION_METHODS[method]


def build_config(
        inputs: Iterable[str],
        output_path: Optional[str] = None,
        compression: str = DEFAULT_COMPRESSION,
        dry_run: bool = False,
) -> ArchiveConfig:
    """
    Validate raw values and assemble an ArchiveConfig.

    An empty output path is treated as "not given".

    Raises:
        ConfigurationError: If there are no inputs or the compression
                            method is unknown.
    """
    paths = tuple(inputs)
    if not paths:
        raise ConfigurationError("at least one input path is required")

    method = (compression or DEFAULT_COMPRESSION).strip().lower()
    compression_type(method)

    return ArchiveConfig(
        inputs=paths,
        output_path=output_path or None,
        compression=method,
        dry_run=dry_run,
    )

# -----------------------------------------------------------------------------
# STAGE RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedOutput:
    """Common input root and the final archive destination."""
    root: str
    output_path: str


@dataclass(frozen=True)
class WalkEntry:
    """
    A single visited filesystem node.

    Attributes:
        abs_path: Absolute path on disk.
        rel_path: Path relative to the root, '/'-separated.
        is_dir: True for directories (written as zero-length markers).
    """
    abs_path: str
    rel_path: str
    is_dir: bool


@dataclass(frozen=True)
class BuildResult:
    """Finalized archive bytes plus the entry bookkeeping of the build."""
    data: bytes
    entries: List[str] = field(default_factory=list)
    file_count: int = 0
    dir_count: int = 0
    duplicates: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root: Common parent directory of the inputs.
        output_path: Resolved archive path.
        entries: Archive entry names in write order.
        file_count: Number of file entries.
        dir_count: Number of directory marker entries.
        archive_size: Size of the finalized archive in bytes.
        duplicates: Entry names written more than once.
        dry_run: Whether the output write was skipped.
    """
    ok: bool
    error: str

    root: str
    output_path: str

    entries: List[str] = field(default_factory=list)
    file_count: int = 0
    dir_count: int = 0
    archive_size: int = 0
    duplicates: List[str] = field(default_factory=list)

    dry_run: bool = False

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root: str = "",
        output_path: str = "",
        dry_run: bool = False,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        root: Root directory, if it was resolved before the failure.
        output_path: Output path, if it was resolved before the failure.
        dry_run: Whether the failed run was a simulation.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        root=root,
        output_path=output_path,
        dry_run=dry_run,
    )


def create_success_result(
        resolved: ResolvedOutput,
        build: BuildResult,
        dry_run: bool = False,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        resolved: Root and output path of the run.
        build: Bookkeeping of the finalized archive.
        dry_run: Whether the output write was skipped.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        root=resolved.root,
        output_path=resolved.output_path,
        entries=list(build.entries),
        file_count=build.file_count,
        dir_count=build.dir_count,
        archive_size=len(build.data),
        duplicates=list(build.duplicates),
        dry_run=dry_run,
    )
