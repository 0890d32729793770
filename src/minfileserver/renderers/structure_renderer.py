"""Indented plain-text listing of a project tree."""

from minfileserver.file_system_tree.tree_node import DirectoryNode, ErrorNode, FileNode

from .base_renderer import TreeRenderer

INDENT = "  "


class StructureRenderer(TreeRenderer):
    """Renderer that writes one line per visible node.

    Directories are written as ``[/path]`` and files as ``/path``, both relative
    to the project root and indented two spaces per level below the requested
    directory. An unreadable nested directory is reported on its own, unindented
    line in place of its contents.

    Example:
        >>> from minfileserver.file_system_tree.tree_node import DirectoryNode, FileNode
        >>> root = DirectoryNode("demo")
        >>> cmd = DirectoryNode("cmd", "cmd", parent=root)
        >>> main = FileNode("main.go", "cmd/main.go", parent=cmd, extension="go")
        >>> print(StructureRenderer().render([cmd, main]), end="")
        [/cmd]
          /cmd/main.go
    """

    def format_directory(self, node: DirectoryNode) -> str:
        return f"{INDENT * node.level}[/{node.relative_path}]\n"

    def format_file(self, node: FileNode) -> str:
        return f"{INDENT * node.level}/{node.relative_path}\n"

    def format_error(self, node: ErrorNode) -> str:
        return f"{node.message}\n"
