from __future__ import annotations

"""
Run Configuration Model.

Holds the options that drive a single tree listing. There is no persistent
configuration; the CLI builds one instance per invocation.
"""

from dataclasses import dataclass

# Literal switch that enables file listing on the command line
INCLUDE_FILES_FLAG = "-f"


@dataclass(frozen=True)
class TreeOptions:
    """
    Immutable options for one tree listing.

    Attributes:
        path: Root directory (or file) to display.
        include_files: Whether non-directory entries appear as leaves.
    """
    path: str
    include_files: bool = False
