"""Node representation for entries produced by a tree walk."""

from typing import Any, Optional

from anytree import Node

from minfileserver.types import NodeType


class TreeNode(Node):  # type: ignore
    """Base node for a visible entry in a project walk.

    Extends anytree.Node so every node yielded by the walker is attached to its
    parent directory, which gives renderers the depth and ancestry of a node
    without any bookkeeping of their own.

    Attributes:
        name (str): The entry's base name (or the message, for error nodes).
        relative_path (str): Path relative to the project root, using forward slashes.
        node_type (NodeType): The kind of entry.
        parent (Optional[TreeNode]): The containing directory node.
    """

    node_type: NodeType

    def __init__(self, name: str, relative_path: str = "", parent: Optional["TreeNode"] = None, **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.relative_path = relative_path

    @property
    def level(self) -> int:
        """Indentation level below the directory the walk started from (0 for its children)."""
        return max(self.depth - 1, 0)


class DirectoryNode(TreeNode):
    """A visible directory. Its children follow it in walk order.

    Example:
        >>> root = DirectoryNode("demo")
        >>> src = DirectoryNode("src", "src", parent=root)
        >>> src.level
        0
        >>> src.node_type.value
        'directory'
    """

    node_type = NodeType.DIRECTORY


class FileNode(TreeNode):
    """A visible file.

    Example:
        >>> node = FileNode("main.go", "cmd/main.go", extension="go")
        >>> node.extension
        'go'
    """

    node_type = NodeType.FILE

    def __init__(
        self,
        name: str,
        relative_path: str = "",
        parent: Optional[TreeNode] = None,
        extension: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(name, relative_path, parent, **kwargs)
        self.extension = extension


class ErrorNode(TreeNode):
    """Placeholder for a directory whose contents could not be listed.

    The node's name is the error message; its relative path is that of the
    unreadable directory.
    """

    node_type = NodeType.ERROR

    @property
    def message(self) -> str:
        return str(self.name)
