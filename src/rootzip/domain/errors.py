from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure aborts the run. These exceptions only classify the failure
so the CLI controller can report it; filesystem read errors raised while
walking or copying sources surface as the native OSError.
"""


class RootZipError(Exception):
    """Base class for all expected, user-reportable failures."""


class ConfigurationError(RootZipError):
    """Invalid invocation: mismatched roots, no inputs, bad compression settings."""


class ArchiveError(RootZipError):
    """Failure while creating an entry or finalizing the archive."""


class OutputWriteError(RootZipError):
    """
    Failure while persisting the finished archive buffer.

    Attributes:
        path: Target output path that could not be written.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot write archive to '{path}': {reason}")
        self.path = path
