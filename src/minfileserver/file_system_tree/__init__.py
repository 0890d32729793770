"""Filtered traversal of project directories.

This package provides the walker that decides which filesystem entries are
visible for a request, and the node types it yields.
"""

from .error_action import ErrorAction
from .tree_node import DirectoryNode, ErrorNode, FileNode, TreeNode
from .tree_walker import TreeWalker

__all__ = ["DirectoryNode", "ErrorAction", "ErrorNode", "FileNode", "TreeNode", "TreeWalker"]
