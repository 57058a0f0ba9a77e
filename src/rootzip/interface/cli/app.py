from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration assembly, pipeline execution and result rendering. It is the
single top-level handler of the application: every failure raised by the
pipeline ends here, is reported once and turned into a non-zero exit code.
"""

import json
import sys
from dataclasses import asdict
from typing import List, Optional

from rootzip.core.pipeline.engine import run_pipeline
from rootzip.domain.constants import USAGE
from rootzip.domain.errors import RootZipError
from rootzip.domain.pipeline_models import PipelineResult, create_error_result
from rootzip.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from rootzip.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for failure, 130 on interrupt).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # Nothing to archive: show usage, which is not an error
    if not args.inputs:
        print(USAGE, end="")
        return 0

    # 2. Logging bootstrap (CLI-specific: console stderr, optional file)
    logging_conf = LoggingConfig(
        level=cli_args.log_level_from_args(args),
        console=True,
        log_file=args.log_file,
    )
    configure_logging(logging_conf, force=True)

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args) -> int:
    # 3. Configuration assembly and pipeline execution
    try:
        config = cli_args.args_to_config(args)
        result = run_pipeline(config)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. No archive was written.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except (RootZipError, OSError) as e:
        logger.error(f"Archiving aborted: {e}")
        return _report_failure(args, str(e))
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        return _report_failure(args, str(e))

    # 4. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif not args.quiet:
        _print_human_summary(result)

    return 0


def _report_failure(args, message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    if args.json_output:
        print(json.dumps(asdict(create_error_result(message, dry_run=bool(args.dry_run))), indent=2))
    return 1

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Format and print the execution result to the standard output.

    Args:
        result: The pipeline result to render.
    """
    if result.dry_run:
        print(f"Dry run, nothing written. Would create: {result.output_path}")
        for name in result.entries:
            print(f"  {name}")
    else:
        print(f"Created {result.output_path}")

    print(
        f"{result.file_count} file(s), {result.dir_count} folder(s), "
        f"{result.archive_size:,} bytes"
    )
    if result.duplicates:
        print(f"Duplicate entries: {', '.join(result.duplicates)}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
