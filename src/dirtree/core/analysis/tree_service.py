from __future__ import annotations

"""
Directory Tree Service.

Orchestrates a complete listing: builds the tree, then renders it to the
output sink.
"""

import logging
from typing import BinaryIO

from dirtree.core.analysis.tree_builder import build_tree
from dirtree.core.analysis.tree_renderer import render_tree
from dirtree.domain.config import TreeOptions
from dirtree.domain.tree_models import BuildResult

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_tree(path: str, include_files: bool, out: BinaryIO) -> BuildResult:
    """
    Build and render the tree rooted at ``path``.

    Args:
        path: Root directory (or file) to display.
        include_files: Whether non-directory entries are listed.
        out: Binary sink receiving the rendered lines.

    Returns:
        BuildResult: The built tree and its non-fatal warnings.

    Raises:
        TreeBuildError: If the root path cannot be inspected.
    """
    logger.info(f"Generating directory tree for: {path}")

    result = build_tree(path, include_files)
    count = render_tree(result.root, out)

    logger.debug(f"Rendered {count} line(s).")
    return result


def generate_from_options(options: TreeOptions, out: BinaryIO) -> BuildResult:
    """Run ``generate_tree`` with the values of a TreeOptions instance."""
    return generate_tree(options.path, options.include_files, out)
