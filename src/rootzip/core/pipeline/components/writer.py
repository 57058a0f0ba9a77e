from __future__ import annotations

"""
Output Persistence.

Handles the physical persistence of the finalized archive buffer. The
whole buffer is written with a single call; there is no temp-file staging,
so a failed write may leave whatever the filesystem kept.
"""

import logging

from rootzip.domain.errors import OutputWriteError

logger = logging.getLogger(__name__)


def write_archive(output_path: str, data: bytes) -> int:
    """
    Write the complete archive to disk, replacing any existing file.

    The file is created with default permissions (subject to the umask).

    Args:
        output_path: Resolved destination path.
        data: Finalized archive bytes.

    Returns:
        int: Number of bytes written.

    Raises:
        OutputWriteError: If the file cannot be created or written.
    """
    try:
        with open(output_path, "wb") as out:
            written = out.write(data)
    except OSError as e:
        raise OutputWriteError(output_path, e.strerror or str(e)) from e

    logger.info(f"Archive written: {output_path} ({written} bytes)")
    return written
