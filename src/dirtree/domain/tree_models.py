from __future__ import annotations

"""
Directory Tree Data Models.

Provides the node types, metadata snapshots and build results shared by
the tree builder, the renderer and the interface layers.
"""

import os
import stat
from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# FILESYSTEM METADATA
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EntryInfo:
    """
    Immutable snapshot of the metadata reported by ``lstat`` for one entry.

    Attributes:
        name: Base name of the entry.
        is_dir: True if the entry itself is a directory (links are not followed).
        size: Size in bytes as reported by the platform.
        mode: Raw ``st_mode`` bits.
        mtime: Last modification timestamp.
    """
    name: str
    is_dir: bool
    size: int
    mode: int = 0
    mtime: float = 0.0

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "EntryInfo":
        return cls(
            name=name,
            is_dir=stat.S_ISDIR(st.st_mode),
            size=st.st_size,
            mode=st.st_mode,
            mtime=st.st_mtime,
        )

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode:
    """
    One filesystem entry in the in-memory tree.

    Attributes:
        path: Path of the entry, joined from the root path.
        info: Metadata snapshot of the entry.
        level: Depth of the node (root = 0).
        parent: Owning directory node, None for the root.
        children: Retained child nodes. Order is not significant until rendering.
    """
    path: str
    info: EntryInfo
    level: int = 0
    parent: Optional["TreeNode"] = field(default=None, repr=False)
    children: List["TreeNode"] = field(default_factory=list, repr=False)

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def is_dir(self) -> bool:
        return self.info.is_dir

    def add_child(self, info: EntryInfo) -> "TreeNode":
        """Create a child one level below this node and append it."""
        child = TreeNode(
            path=os.path.join(self.path, info.name),
            info=info,
            level=self.level + 1,
            parent=self,
        )
        self.children.append(child)
        return child

    def iter_nodes(self):
        """Yield this node and every descendant, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

# -----------------------------------------------------------------------------
# BUILD RESULTS AND ERRORS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListingWarning:
    """
    Non-fatal failure encountered while walking the tree.

    Attributes:
        path: Directory or entry that could not be read.
        error: Descriptive error message.
    """
    path: str
    error: str


@dataclass
class BuildResult:
    """
    Outcome of a tree build: the root node plus any partial failures.
    """
    root: TreeNode
    warnings: List[ListingWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


class TreeBuildError(OSError):
    """Raised when the root path of a build cannot be inspected."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(cause.errno, cause.strerror or str(cause), path)
        self.path = path
        self.__cause__ = cause
