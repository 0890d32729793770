"""Filtered traversal of a project directory.

This module provides the TreeWalker class, which visits a project tree depth-first
and yields only the entries that survive the hidden-file, exclusion and
inclusion rules of the current request.
"""

import logging
import os
import posixpath
from typing import Iterator, List, Optional, Tuple

from minfileserver.exceptions import AccessDeniedError, PathReadError
from minfileserver.file_system_tree.error_action import ErrorAction
from minfileserver.file_system_tree.tree_node import DirectoryNode, ErrorNode, FileNode, TreeNode
from minfileserver.paths import is_within_root, resolve_within_root
from minfileserver.rules.matcher import extension_allowed, extension_of, file_excluded, folder_excluded
from minfileserver.rules.rule_set import EffectiveRuleSet
from minfileserver.types import PathType

logger = logging.getLogger(__name__)

# (name, absolute path) pairs of visible entries in one directory
_Entries = List[Tuple[str, str]]


class TreeWalker:
    """Depth-first, pre-order walker over the visible entries of a project.

    At each directory the walker lists its entries, drops hidden ones (unless
    show_hidden is set), prunes excluded folders, drops excluded file names and
    files whose extension is not allowed, then yields the surviving directories
    (each followed by its own subtree) before the surviving files. Both groups are
    sorted by name.

    Symbolic links are never descended into. A link is reported as a file only when
    it points at a regular file inside the project root; links to directories,
    links leaving the root and broken links are skipped.

    The start directory must be one a walk from the root would reach: a hidden,
    excluded or linked segment in its path refuses the walk.

    The walker holds no per-request state; every call to walk() performs an
    independent traversal. Yielded nodes are attached to a synthetic node for the
    start directory, so each node's ``level`` is its depth below that directory.

    Listing Failure Handling:
        A failure on the start directory always raises PathReadError. Failures on
        nested directories are handled according to error_action:
        - REPORT (default): yield an ErrorNode in place of the subtree and continue
        - RAISE: raise PathReadError immediately

    Attributes:
        root_path (str): The absolute project root.
        rules (EffectiveRuleSet): The visibility rules of the current request.
        show_hidden (bool): Whether dot-prefixed entries are visible.
        error_action (ErrorAction): How to handle nested listing failures.

    Example:
        >>> walker = TreeWalker("/srv/demo", EffectiveRuleSet())  # doctest: +SKIP
        >>> for node in walker.walk():  # doctest: +SKIP
        ...     print("  " * node.level + node.relative_path)
        src
          src/main.go
        README.md
    """

    def __init__(
        self,
        root_path: PathType,
        rules: Optional[EffectiveRuleSet] = None,
        show_hidden: bool = False,
        error_action: ErrorAction = ErrorAction.REPORT,
    ) -> None:
        self.root_path = os.path.abspath(root_path)
        self.rules = rules if rules is not None else EffectiveRuleSet()
        self.show_hidden = show_hidden
        self.error_action = error_action

    def walk(self, start_relative_path: str = "") -> Iterator[TreeNode]:
        """Lazily yield the visible nodes below a directory of the project.

        Args:
            start_relative_path: Directory to start from, relative to the project
                root. Defaults to the root itself.

        Yields:
            DirectoryNode, FileNode and (with REPORT) ErrorNode instances in
            pre-order.

        Raises:
            AccessDeniedError: If the start path lies outside the project root, or
                passes through a hidden, excluded or linked directory.
            PathReadError: If the start directory cannot be listed, or a nested
                directory cannot be listed and error_action is RAISE.
        """
        start_path, relative = resolve_within_root(self.root_path, start_relative_path)
        self._require_reachable(relative)
        start = DirectoryNode(posixpath.basename(relative) or os.path.basename(self.root_path), relative)

        directories, files = self._list_visible(start_path, relative)
        yield from self._visit(start, directories, files)

    def _visit(self, parent: DirectoryNode, directories: _Entries, files: _Entries) -> Iterator[TreeNode]:
        for name, path in directories:
            node = DirectoryNode(name, self._join(parent.relative_path, name), parent=parent)
            yield node

            try:
                child_directories, child_files = self._list_visible(path, node.relative_path)
            except PathReadError as e:
                if self.error_action == ErrorAction.RAISE:
                    raise
                logger.warning("Skipping unreadable directory %s: %s", path, e)
                yield ErrorNode(f"Error reading directory: {e}", node.relative_path, parent=node)
                continue

            yield from self._visit(node, child_directories, child_files)

        for name, _path in files:
            yield FileNode(name, self._join(parent.relative_path, name), parent=parent, extension=extension_of(name))

    def _require_reachable(self, relative_path: str) -> None:
        """Refuse a start path that a walk from the root would never enter.

        Raises:
            AccessDeniedError: If a segment is hidden, excluded or a symbolic link.
        """
        if not relative_path:
            return

        prefix = ""
        for name in relative_path.split("/"):
            prefix = self._join(prefix, name)
            if not self.show_hidden and name.startswith("."):
                raise AccessDeniedError("Path is hidden")
            if folder_excluded(name, prefix, self.rules.exclusive_folders):
                raise AccessDeniedError("Path is excluded")
            if os.path.islink(os.path.join(self.root_path, *prefix.split("/"))):
                raise AccessDeniedError("Path is a symbolic link")

    def _visible_link(self, path: str) -> bool:
        # Only links to regular files that stay inside the project are listed
        return os.path.isfile(path) and is_within_root(self.root_path, path)

    def _list_visible(self, path: str, relative_path: str) -> Tuple[_Entries, _Entries]:
        """List a directory and split its visible entries into sorted directories and files.

        Raises:
            PathReadError: If the directory cannot be listed.
        """
        try:
            with os.scandir(path) as it:
                entries = [
                    (entry.name, entry.path, entry.is_dir(follow_symlinks=False), entry.is_symlink()) for entry in it
                ]
        except OSError as e:
            raise PathReadError(path, e) from e

        rules = self.rules
        directories: _Entries = []
        files: _Entries = []
        for name, entry_path, is_dir, is_link in entries:
            if not self.show_hidden and name.startswith("."):
                continue
            if is_link and not self._visible_link(entry_path):
                logger.debug("Skipping symbolic link %s", entry_path)
                continue
            if is_dir:
                if folder_excluded(name, self._join(relative_path, name), rules.exclusive_folders):
                    continue
                directories.append((name, entry_path))
            else:
                if file_excluded(name, rules.exclusive_files):
                    continue
                if not extension_allowed(extension_of(name), rules.inclusive_extensions, rules.exclusive_extensions):
                    continue
                files.append((name, entry_path))

        directories.sort()
        files.sort()
        return directories, files

    @staticmethod
    def _join(relative_path: str, name: str) -> str:
        return f"{relative_path}/{name}" if relative_path else name
