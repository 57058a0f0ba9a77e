from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema (help messages, argument types
and defaults) and translates the raw argparse namespace into the immutable
ArchiveConfig consumed by the pipeline.
"""

import argparse

from rootzip.domain.constants import (
    APP_NAME,
    APP_VERSION,
    ARCHIVE_EXTENSION,
    DEFAULT_COMPRESSION,
)
from rootzip.domain.pipeline_models import ArchiveConfig, build_config

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rootzip CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"Archive files and folders that share one parent folder into a single {ARCHIVE_EXTENSION} file.",
    )

    # --- Path Management ---
    p.add_argument(
        "inputs",
        nargs="*",
        metavar="PATH",
        help="Files or folders to archive. All must live in the same folder.",
    )
    p.add_argument(
        "-to", "--to",
        dest="output_path",
        default="",
        metavar="OUTPUT",
        help=(
            f"Output file path. Defaults to the first input's name with a {ARCHIVE_EXTENSION} "
            "extension in the current folder, never overwriting an existing file."
        ),
    )

    # --- Archive Format ---
    p.add_argument(
        "--store",
        dest="compression",
        action="store_const",
        const="store",
        default=DEFAULT_COMPRESSION,
        help="Store entries without compression.",
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the archive in memory and list its entries without writing it.",
    )

    # --- Output Rendering ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run summary as JSON.",
    )
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print a summary on success.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report pipeline progress (INFO level).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> ArchiveConfig:
    """
    Translate the argparse Namespace into the run configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        ArchiveConfig: Validated, immutable configuration.

    Raises:
        ConfigurationError: If the arguments do not form a valid run.
    """
    return build_config(
        inputs=args.inputs,
        output_path=args.output_path or None,
        compression=args.compression,
        dry_run=bool(args.dry_run),
    )


def log_level_from_args(args: argparse.Namespace) -> str:
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    return "WARNING"

