"""Renderer base class defining the interface for formatting a walk.

This module provides the abstract base class shared by every view of a project
tree. The walker decides what is visible; renderers only decide how each visible
node is written out.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List

from minfileserver.file_system_tree.error_action import ErrorAction
from minfileserver.file_system_tree.tree_node import DirectoryNode, ErrorNode, FileNode, TreeNode
from minfileserver.types import NodeType


class TreeRenderer(ABC):
    """Abstract base class for renderers consuming a pre-order walk.

    The rendering process is divided into phases, each handled by a format method:
    1. Start - anything written before the first node
    2. Nodes - one call per directory, file or error node, in walk order
    3. Directory end - called when the walk leaves a directory, deepest first
    4. End - anything written after the last node

    The base class tracks which directories are open, so renderers producing
    nested markup only have to emit opening and closing fragments.

    Concrete renderers also choose how the walker should treat unreadable nested
    directories through the error_action property.

    Example:
        >>> class NameRenderer(TreeRenderer):
        ...     def format_directory(self, node):
        ...         return node.name + "/\\n"
        ...
        ...     def format_file(self, node):
        ...         return node.name + "\\n"
        ...
        ...     def format_error(self, node):
        ...         return node.message + "\\n"
        >>> from minfileserver.file_system_tree.tree_node import DirectoryNode, FileNode
        >>> root = DirectoryNode("root")
        >>> src = DirectoryNode("src", "src", parent=root)
        >>> NameRenderer().render([src, FileNode("a.go", "src/a.go", parent=src)])
        'src/\\na.go\\n'
    """

    @property
    def error_action(self) -> ErrorAction:
        """How the walker feeding this renderer should handle unreadable nested directories."""
        return ErrorAction.REPORT

    def format_start(self) -> str:
        """Format anything that precedes the first node."""
        return ""

    def format_end(self) -> str:
        """Format anything that follows the last node."""
        return ""

    def format_directory_end(self, node: DirectoryNode) -> str:
        """Format the closing fragment of a directory once all its children are written."""
        return ""

    @abstractmethod
    def format_directory(self, node: DirectoryNode) -> str:
        """Format a directory. Its children are formatted next."""
        pass

    @abstractmethod
    def format_file(self, node: FileNode) -> str:
        """Format a file."""
        pass

    @abstractmethod
    def format_error(self, node: ErrorNode) -> str:
        """Format the placeholder of a directory that could not be listed."""
        pass

    def stream(self, nodes: Iterable[TreeNode]) -> Iterator[str]:
        """Yield formatted fragments for a walk, one or more per node.

        Raises:
            Any error raised by the walk or by a format method, unchanged.
        """
        yield self.format_start()

        open_directories: List[DirectoryNode] = []
        for node in nodes:
            while open_directories and open_directories[-1] is not node.parent:
                yield self.format_directory_end(open_directories.pop())

            if node.node_type == NodeType.DIRECTORY:
                yield self.format_directory(node)
                open_directories.append(node)
            elif node.node_type == NodeType.FILE:
                yield self.format_file(node)
            else:
                yield self.format_error(node)

        while open_directories:
            yield self.format_directory_end(open_directories.pop())

        yield self.format_end()

    def render(self, nodes: Iterable[TreeNode]) -> str:
        """Render a complete walk to a single string."""
        return "".join(self.stream(nodes))
