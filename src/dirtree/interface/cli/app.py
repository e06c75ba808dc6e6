from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap, tree
generation to standard output and reporting of partial failures. Maps
failures to process exit codes.
"""

import os
import sys
from typing import BinaryIO, List, Optional

from dirtree.core.analysis.tree_service import generate_from_options
from dirtree.domain.tree_models import BuildResult, TreeBuildError
from dirtree.infra.logging import LoggingConfig, configure_logging, get_logger
from dirtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ROOT_ERROR = 1
EXIT_INTERRUPTED = 130

# Optional diagnostics file, rotated by the logging layer
LOG_FILE_ENV = "DIRTREE_LOG_FILE"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, out: Optional[BinaryIO] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        out: Optional binary sink. Defaults to ``sys.stdout.buffer``.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32" and hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase (exits with status 2 on usage errors)
    args = cli_args.parse_args(argv)
    options = cli_args.args_to_options(args)

    # 2. Logging bootstrap (console on stderr, warnings and above)
    configure_logging(LoggingConfig(
        level="WARNING",
        console=True,
        log_file=os.environ.get(LOG_FILE_ENV) or None,
    ))

    sink = out if out is not None else sys.stdout.buffer

    # 3. Build and render
    try:
        result = generate_from_options(options, sink)
        sink.flush()
    except TreeBuildError as e:
        logger.error(f"Cannot inspect root path: {e}")
        return EXIT_ROOT_ERROR
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); output is best-effort
        logger.debug("Output sink closed early.")
        _detach_stdout(sink)
        return EXIT_OK
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    # 4. Partial failures do not change the exit status
    _report_warnings(result)
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _report_warnings(result: BuildResult) -> None:
    """Log every non-fatal listing failure collected during the build."""
    for w in result.warnings:
        logger.warning(f"Skipped '{w.path}': {w.error}")


def _detach_stdout(sink: BinaryIO) -> None:
    """Point stdout at devnull so the interpreter's exit flush stays silent."""
    if sink is not getattr(sys.stdout, "buffer", None):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
