from __future__ import annotations

"""
Directory Tree Builder.

Walks the filesystem from a root path and produces the in-memory TreeNode
hierarchy. Unreadable subdirectories do not abort the walk; they are
collected as warnings on the BuildResult and left childless.
"""

import logging
from typing import List

from dirtree.domain.tree_models import (
    BuildResult,
    ListingWarning,
    TreeBuildError,
    TreeNode,
)
from dirtree.infra.fs import inspect_path, list_entries

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(path: str, include_files: bool) -> BuildResult:
    """
    Build the tree rooted at ``path``.

    Uses an explicit stack, so traversal is depth-first. Directories are
    always retained and expanded; other entries are retained as leaves only
    when ``include_files`` is set.

    Args:
        path: Root directory (or file) to walk.
        include_files: Whether non-directory entries become leaves.

    Returns:
        BuildResult: Root node and the non-fatal listing failures.

    Raises:
        TreeBuildError: If the root path cannot be inspected.
    """
    try:
        root_info = inspect_path(path)
    except OSError as e:
        raise TreeBuildError(path, e) from e

    result = BuildResult(root=TreeNode(path=path, info=root_info, level=0))

    stack: List[TreeNode] = [result.root]
    while stack:
        current = stack.pop()
        if not current.is_dir:
            continue

        try:
            entries, skipped = list_entries(current.path)
        except OSError as e:
            logger.debug(f"Cannot list '{current.path}': {e}")
            result.warnings.append(ListingWarning(path=current.path, error=str(e)))
            continue

        result.warnings.extend(skipped)

        for info in entries:
            if info.is_dir or include_files:
                stack.append(current.add_child(info))

    logger.debug(
        f"Built tree for '{path}' with {len(result.warnings)} warning(s)."
    )
    return result

