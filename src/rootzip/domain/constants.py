from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: the archive
extension, the supported compression methods, entry naming separators
and the fixed usage text printed when no inputs are given.
"""

import zipfile
from typing import Dict

APP_NAME = "rootzip"
APP_VERSION = "1.0.0"

ARCHIVE_EXTENSION = ".zip"

# Entry names always use '/' regardless of the host separator
ENTRY_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# COMPRESSION REGISTRY
# -----------------------------------------------------------------------------
DEFAULT_COMPRESSION = "deflate"

COMPRESSION_METHODS: Dict[str, int] = {
    "deflate": zipfile.ZIP_DEFLATED,
    "store": zipfile.ZIP_STORED,
}

# -----------------------------------------------------------------------------
# USER FACING TEXT
# -----------------------------------------------------------------------------
ROOT_MISMATCH_MSG = "all input files must be in the same folder"

USAGE = f"""Usage of {APP_NAME}:

  {APP_NAME} [-to=out/path] file1 [file2 ...]

  Provide one or more file/folder paths to be archived into one {ARCHIVE_EXTENSION} file.
  All paths must be rooted in the same folder.
  The default output file name is that of the first given input file with the
  extension changed to {ARCHIVE_EXTENSION}. Provide the -to option as the first argument to
  overwrite this path.
"""
