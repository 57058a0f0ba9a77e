from __future__ import annotations

"""
Archive Building Stage.

Serializes walk entries into an in-memory ZIP buffer. Directories become
zero-length '<name>/' markers so empty folders survive extraction; files are
stream-copied from disk. The archive trailer is written exactly once, when
the builder is closed, and the buffer is only handed out after that.
"""

import io
import logging
import shutil
import warnings
import zipfile
from typing import Iterable, List, Set

from rootzip.domain.constants import DEFAULT_COMPRESSION, ENTRY_SEPARATOR
from rootzip.domain.errors import ArchiveError
from rootzip.domain.pipeline_models import BuildResult, WalkEntry, compression_type

logger = logging.getLogger(__name__)

# Chunk size used when streaming source files into the archive
COPY_CHUNK_SIZE = 64 * 1024

# Failures raised by zipfile itself (as opposed to reading the sources)
_ZIP_FAILURES = (zipfile.LargeZipFile, ValueError, RuntimeError)


class ArchiveBuilder:
    """
    Accumulates archive entries into a private BytesIO buffer.

    Use it as a context manager so the archive is finalized on every exit
    path. Entries are written in the order they are added; duplicates are
    kept and reported.
    """

    def __init__(self, compression: str = DEFAULT_COMPRESSION) -> None:
        self._compress_type = compression_type(compression)
        self._buffer = io.BytesIO()
        self._zip = zipfile.ZipFile(self._buffer, mode="w", compression=self._compress_type)
        self._closed = False

        self._seen: Set[str] = set()
        self.entries: List[str] = []
        self.duplicates: List[str] = []
        self.file_count = 0
        self.dir_count = 0

    # --------------------------------------------------------------------------
    # LIFECYCLE
    # --------------------------------------------------------------------------

    def __enter__(self) -> ArchiveBuilder:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return
        # Keep the original failure in front; the buffer is discarded anyway
        try:
            self.close()
        except ArchiveError as e:
            logger.warning(f"Archive could not be finalized after an earlier error: {e}")

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Write the central directory. Further calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        try:
            self._zip.close()
        except _ZIP_FAILURES as e:
            raise ArchiveError(f"Failed to finalize archive: {e}") from e
        logger.debug(f"Archive finalized: {len(self.entries)} entries, {self._buffer.tell()} bytes")

    def getvalue(self) -> bytes:
        """
        Return the finished archive bytes.

        Raises:
            ArchiveError: If the archive has not been finalized yet.
        """
        if not self._closed:
            raise ArchiveError("archive buffer requested before the archive was finalized")
        return self._buffer.getvalue()

    def result(self) -> BuildResult:
        return BuildResult(
            data=self.getvalue(),
            entries=list(self.entries),
            file_count=self.file_count,
            dir_count=self.dir_count,
            duplicates=list(self.duplicates),
        )

    # --------------------------------------------------------------------------
    # ENTRY WRITING
    # --------------------------------------------------------------------------

    def add_entry(self, entry: WalkEntry) -> str:
        """
        Append one walk entry to the archive.

        Args:
            entry: The node to serialize.

        Returns:
            str: The archive name that was written.

        Raises:
            ArchiveError: If the builder is closed or zipfile rejects the entry.
            OSError: If the source cannot be read.
        """
        if self._closed:
            raise ArchiveError("cannot add entries to a finalized archive")

        if entry.is_dir:
            name = entry.rel_path.rstrip(ENTRY_SEPARATOR) + ENTRY_SEPARATOR
        else:
            name = entry.rel_path

        duplicate = name in self._seen
        if duplicate:
            logger.warning(f"Duplicate archive entry kept: {name}")
            self.duplicates.append(name)

        with warnings.catch_warnings():
            if duplicate:
                warnings.filterwarnings("ignore", message="Duplicate name", category=UserWarning)
            if entry.is_dir:
                self._write_dir(entry.abs_path, name)
                self.dir_count += 1
            else:
                self._write_file(entry.abs_path, name)
                self.file_count += 1

        self._seen.add(name)
        self.entries.append(name)
        return name

    def _write_dir(self, abs_path: str, name: str) -> None:
        zinfo = zipfile.ZipInfo.from_file(abs_path, name, strict_timestamps=False)
        try:
            self._zip.writestr(zinfo, b"")
        except _ZIP_FAILURES as e:
            raise ArchiveError(f"Failed to create directory entry '{name}': {e}") from e

    def _write_file(self, abs_path: str, name: str) -> None:
        # The source is opened first so unreadable inputs fail as OSError
        with open(abs_path, "rb") as src:
            zinfo = zipfile.ZipInfo.from_file(abs_path, name, strict_timestamps=False)
            zinfo.compress_type = self._compress_type
            try:
                with self._zip.open(zinfo, mode="w") as dst:
                    shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
            except _ZIP_FAILURES as e:
                raise ArchiveError(f"Failed to write entry '{name}': {e}") from e


# ==============================================================================
# PUBLIC API
# ==============================================================================

def build_archive(
        entries: Iterable[WalkEntry],
        compression: str = DEFAULT_COMPRESSION,
) -> BuildResult:
    """
    Serialize every entry and finalize the archive.

    Args:
        entries: Walk entries in write order.
        compression: Compression method name.

    Returns:
        BuildResult: Archive bytes and entry bookkeeping.
    """
    with ArchiveBuilder(compression) as builder:
        for entry in entries:
            name = builder.add_entry(entry)
            logger.debug(f"Added entry: {name}")
    return builder.result()
