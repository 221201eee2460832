"""Text tree view of uploaded artifact paths."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 200

ROOT_MARKER = "📦 "
DIR_MARKER = "📁 "
FILE_MARKER = "📄 "


@dataclass
class DirNode:
    """A directory in the tree. Owns its sub-directories and file leaves."""

    name: str
    marker: str = DIR_MARKER
    children: dict[str, DirNode] = field(default_factory=dict)
    leaves: dict[str, str] = field(default_factory=dict)

    def add_artifact(self, segments: list[str], link: str) -> bool:
        """Add a file below this node. Returns False for a duplicate leaf."""
        node = self
        for name in segments[:-1]:
            node = node.children.setdefault(name, DirNode(name=name))

        leaf = segments[-1]
        if leaf in node.leaves:
            return False
        node.leaves[leaf] = link
        return True

    def lines(self) -> list[str]:
        """Render this node and everything below it into lines."""
        lines = [f"{self.marker}{self.name}"]

        entries: list[list[str]] = [
            self.children[name].lines() for name in sorted(self.children)
        ]
        entries.extend(
            [_leaf_label(name, self.leaves[name])] for name in sorted(self.leaves)
        )

        for i, entry_lines in enumerate(entries):
            is_last = i == len(entries) - 1
            connector = "└── " if is_last else "├── "
            extension = "    " if is_last else "│   "
            lines.append(f"{connector}{entry_lines[0]}")
            lines.extend(f"{extension}{line}" for line in entry_lines[1:])
        return lines


def _leaf_label(name: str, link: str) -> str:
    if link:
        return f'<a href={link} target="_blank">{name}</a>'
    return f"{FILE_MARKER}{name}"


class PathTree:
    """File-system style tree built from slash-delimited artifact paths.

    Paths are added one by one with :meth:`insert`; :meth:`render` returns the
    text view.  Once more than *max_entries* files are offered, the tree is
    marked as overflowed for good and renders as an empty string.

    Example output::

        📦 repoA
        ├── 📁 dir1
        │   └── 📄 file1.txt
        └── 📄 file2.txt
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 0:
            raise ValueError(f"max_entries must be >= 0, got {max_entries}")
        self.max_entries = max_entries
        self.roots: dict[str, DirNode] = {}
        self._size = 0
        self._overflowed = False

    @property
    def size(self) -> int:
        """Number of files accepted into the tree."""
        return self._size

    @property
    def overflowed(self) -> bool:
        return self._overflowed

    def insert(self, path: str, link: str = "") -> bool:
        """Add a file path, optionally linked to *link*.

        The first segment names the root (usually the repository).  A path
        with a single segment is both the root and the file inside it.

        Returns True if the file was added, False if it was a duplicate,
        an empty path, or the tree is full.
        """
        if self._overflowed or self._size >= self.max_entries:
            if not self._overflowed:
                logger.info(
                    "Exceeded maximum number of files in tree (%d)", self.max_entries
                )
            self._overflowed = True
            return False

        if not path:
            logger.debug("Ignoring empty artifact path")
            return False

        segments = path.split("/")
        root_name = segments[0]
        remainder = segments[1:] or segments

        root = self.roots.get(root_name)
        if root is None:
            root = self.roots[root_name] = DirNode(name=root_name, marker=ROOT_MARKER)

        if not root.add_artifact(remainder, link):
            return False
        self._size += 1
        return True

    def render(self) -> str:
        """Return the tree as text, one block per root separated by a blank line.

        Returns an empty string if the tree overflowed.
        """
        if self._overflowed:
            return ""
        return "".join(
            "\n".join(self.roots[name].lines()) + "\n\n" for name in sorted(self.roots)
        )

    def __str__(self) -> str:
        return self.render()
