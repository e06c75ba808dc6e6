from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the ``dirtree <path> [-f]`` command-line schema. Arguments are
positional: the first is always the root path, even when it starts with a
dash, and files are listed only when the second is exactly ``-f``. Only the
argument count can make an invocation invalid; argparse supplies the usage
text and the exit status for that case.
"""

import argparse
import sys
from typing import List, Optional

from dirtree.domain.config import INCLUDE_FILES_FLAG, TreeOptions

USAGE = "%(prog)s <path> [-f]"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the parser that owns the usage text and error reporting.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    return argparse.ArgumentParser(
        prog="dirtree",
        usage=USAGE,
        description="List a directory's contents as a tree.",
        add_help=False,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Map raw arguments onto ``path`` and ``include_files``.

    Args:
        argv: User arguments without the program name. Defaults to sys.argv.

    Returns:
        argparse.Namespace: ``path`` and ``include_files``.

    Raises:
        SystemExit: With status 2 unless one or two arguments are given.
    """
    parser = build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)

    if not 1 <= len(raw) <= 2:
        parser.error("expected a path and an optional -f")

    return argparse.Namespace(
        path=raw[0],
        include_files=len(raw) == 2 and raw[1] == INCLUDE_FILES_FLAG,
    )

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> TreeOptions:
    """
    Translate the parsed Namespace into run options.

    Args:
        args: Parsed command-line arguments.

    Returns:
        TreeOptions: Options for the listing.
    """
    return TreeOptions(path=args.path, include_files=bool(args.include_files))
