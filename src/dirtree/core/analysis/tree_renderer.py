from __future__ import annotations

"""
Tree Renderer.

Converts a built TreeNode hierarchy into the indented listing. Lines use
box-drawing connectors (├───, └───), a continuation bar (│) for levels that
still have pending siblings, and tab indentation. The root itself is never
printed, only its descendants.
"""

import os
from collections import deque
from typing import BinaryIO, Deque, Iterator, List

from dirtree.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# GLYPHS
# -----------------------------------------------------------------------------

BRANCH = "├───"
LAST_BRANCH = "└───"
CONTINUATION = "│"
INDENT = "\t"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: TreeNode, out: BinaryIO) -> int:
    """
    Write the listing of ``root``'s descendants to a binary sink.

    Each node is encoded as UTF-8 and written with a single ``write`` call.
    Names that are not valid UTF-8 are written back as their raw bytes.
    Errors raised by the sink propagate unchanged.

    Args:
        root: Root of the built tree.
        out: Binary sink (e.g. ``sys.stdout.buffer``).

    Returns:
        int: Number of lines written.
    """
    count = 0
    for line in _iter_lines(root):
        out.write((line + "\n").encode("utf-8", "surrogateescape"))
        count += 1
    return count


def render_tree_lines(root: TreeNode) -> List[str]:
    """Return the listing of ``root``'s descendants as lines without newlines."""
    return list(_iter_lines(root))


def format_line(node: TreeNode, levels: List[bool], is_last: bool) -> str:
    """
    Format a single node.

    Levels 1 through ``node.level - 1`` each contribute a tab, preceded by a
    continuation bar when that level still has pending siblings.

    Args:
        node: Node to format.
        levels: Pending-sibling flags indexed by level.
        is_last: Whether the node closes its run of siblings.

    Returns:
        str: The formatted line, without trailing newline.
    """
    parts = []
    for i in range(1, node.level):
        if levels[i]:
            parts.append(CONTINUATION)
        parts.append(INDENT)

    parts.append(LAST_BRANCH if is_last else BRANCH)
    parts.append(node.name)

    if not node.is_dir:
        parts.append(size_label(node.info.size))

    return "".join(parts)


def size_label(size: int) -> str:
    """Annotation appended to non-directory entries."""
    if size == 0:
        return " (empty)"
    return f" ({size}b)"

# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def _sorted_children(node: TreeNode) -> List[TreeNode]:
    # byte order of the on-disk names
    node.children.sort(key=lambda child: os.fsencode(child.name))
    return node.children


def _iter_lines(root: TreeNode) -> Iterator[str]:
    """
    Walk the tree in display order and yield formatted lines.

    A node is the last of its run when the next queued node sits on a
    different level (or nothing is queued). Children go to the front of the
    queue so a subtree is fully emitted before the next sibling.
    """
    if not root.children:
        return

    levels: List[bool] = [False]
    queue: Deque[TreeNode] = deque(_sorted_children(root))

    while queue:
        node = queue.popleft()

        if len(levels) <= node.level:
            levels.append(True)
        else:
            levels[node.level] = True

        children = _sorted_children(node)

        is_last = not queue or queue[0].level != node.level
        if is_last:
            levels[node.level] = False

        yield format_line(node, levels, is_last)

        queue.extendleft(reversed(children))
