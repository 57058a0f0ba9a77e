from __future__ import annotations

"""
Tree Walking Stage.

Traverses every input path in the order given and yields one WalkEntry per
filesystem node: the input itself and, for directories, every descendant in
depth-first pre-order. Any I/O failure aborts the traversal.
"""

import logging
import os
import stat
from typing import Iterator, List, Sequence

from rootzip.domain.pipeline_models import WalkEntry
from rootzip.infra.fs import normalize_path, to_entry_name

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def walk_inputs(root: str, inputs: Sequence[str]) -> Iterator[WalkEntry]:
    """
    Yield the walk entries of all inputs, one input after the other.

    Args:
        root: Absolute common parent directory of the inputs.
        inputs: Ordered input paths.

    Yields:
        WalkEntry: Nodes in visiting order.

    Raises:
        OSError: If an input is missing or a directory cannot be listed.
    """
    for raw_path in inputs:
        abs_path = normalize_path(raw_path)
        logger.debug(f"Walking input: {abs_path}")
        yield from walk_path(root, abs_path)


def walk_path(root: str, abs_path: str) -> Iterator[WalkEntry]:
    """
    Yield a single input and, if it is a directory, all of its descendants.

    Children are visited sorted by name. Symbolic links are never descended:
    they are reported as file entries so their target content gets copied.

    Args:
        root: Absolute root used to compute relative names.
        abs_path: Absolute path of the input.

    Yields:
        WalkEntry: The input node first, then its subtree in pre-order.
    """
    # lstat raises for missing inputs and does not follow a symlinked input
    st = os.lstat(abs_path)
    if not stat.S_ISDIR(st.st_mode):
        yield _entry(root, abs_path, is_dir=False)
        return

    for dir_path, dir_names, file_names in os.walk(abs_path, onerror=_raise_walk_error):
        yield _entry(root, dir_path, is_dir=True)

        linked_dirs: List[str] = [d for d in dir_names if os.path.islink(os.path.join(dir_path, d))]
        dir_names[:] = sorted(d for d in dir_names if d not in linked_dirs)

        for name in sorted(file_names + linked_dirs):
            yield _entry(root, os.path.join(dir_path, name), is_dir=False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _entry(root: str, path: str, is_dir: bool) -> WalkEntry:
    return WalkEntry(abs_path=path, rel_path=to_entry_name(path, root), is_dir=is_dir)


def _raise_walk_error(error: OSError) -> None:
    """os.walk swallows listing errors by default; make them fatal."""
    raise error
