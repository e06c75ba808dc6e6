from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over ``os.lstat`` and ``os.scandir`` that return domain
metadata snapshots. Symbolic links are never followed.
"""

import os
from typing import List, Tuple

from dirtree.domain.tree_models import EntryInfo, ListingWarning

# -----------------------------------------------------------------------------
# INSPECTION API
# -----------------------------------------------------------------------------

def inspect_path(path: str) -> EntryInfo:
    """
    Read the metadata of a single path without following links.

    Args:
        path: Path to inspect.

    Returns:
        EntryInfo: Snapshot named after the path's base name.

    Raises:
        OSError: If the path does not exist or cannot be stat'ed.
    """
    st = os.lstat(path)
    name = os.path.basename(os.path.normpath(path))
    return EntryInfo.from_stat(name, st)


def list_entries(path: str) -> Tuple[List[EntryInfo], List[ListingWarning]]:
    """
    List the immediate entries of a directory.

    The directory handle is released before returning. Entries that vanish
    or cannot be stat'ed between the listing and the stat call are skipped
    and reported as warnings.

    Args:
        path: Directory to list.

    Returns:
        Tuple[List[EntryInfo], List[ListingWarning]]: Entries in platform order
        and per-entry failures.

    Raises:
        OSError: If the directory itself cannot be opened or read.
    """
    entries: List[EntryInfo] = []
    skipped: List[ListingWarning] = []

    with os.scandir(path) as it:
        for de in it:
            try:
                st = de.stat(follow_symlinks=False)
            except OSError as e:
                skipped.append(ListingWarning(path=de.path, error=str(e)))
                continue
            entries.append(EntryInfo.from_stat(de.name, st))

    return entries, skipped
