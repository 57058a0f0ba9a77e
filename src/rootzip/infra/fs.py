from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and existence probing used by
the resolver and the walker. Acts as an abstraction over 'os.path' so that
parent resolution, extension handling and entry naming behave the same on
Windows and Unix-like systems.
"""

import logging
import os

from rootzip.domain.constants import ENTRY_SEPARATOR

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands user home shortcuts (~/) and collapses redundant separators
    and trailing slashes.

    Args:
        path: Raw input path string.

    Returns:
        str: Normalized absolute path.
    """
    return os.path.abspath(os.path.expanduser(path))


def parent_dir(path: str) -> str:
    """
    Resolve the directory that contains the given path.

    'foo', './foo', 'foo/' and '/cwd/foo' all resolve to '/cwd'.
    """
    return os.path.dirname(normalize_path(path))


def strip_ext(path: str) -> str:
    """Drop the last extension of a path ('a.tar.gz' -> 'a.tar')."""
    return os.path.splitext(path)[0]


def extend_file_name(path: str, n: int) -> str:
    """
    Insert a ' (n)' counter before the extension of a path.

    Example:
        extend_file_name("report.zip", 2) -> "report (2).zip"
    """
    stem, ext = os.path.splitext(path)
    return f"{stem} ({n}){ext}"


def path_exists(path: str) -> bool:
    """
    Probe a path without following symlinks.

    A dangling symlink counts as an existing entry.
    """
    return os.path.lexists(path)


def to_entry_name(abs_path: str, root: str) -> str:
    """
    Compute the '/'-separated name of a path relative to root.

    Names that are not valid UTF-8 on disk (surrogate-escaped by os.walk)
    cannot be stored by zipfile; their undecodable bytes become U+FFFD.

    Args:
        abs_path: Absolute path of the node.
        root: Absolute root directory.

    Returns:
        str: Relative path using the archive separator convention.
    """
    rel = os.path.relpath(abs_path, root)
    if os.sep != ENTRY_SEPARATOR:
        rel = rel.replace(os.sep, ENTRY_SEPARATOR)
    if os.altsep and os.altsep != ENTRY_SEPARATOR:
        rel = rel.replace(os.altsep, ENTRY_SEPARATOR)

    fixed = os.fsencode(rel).decode("utf-8", "replace")
    if fixed != rel:
        logger.warning(f"Entry name is not valid UTF-8, stored as: {fixed}")
    return fixed
