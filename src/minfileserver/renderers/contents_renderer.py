"""Concatenated file contents of a project tree."""

import os

from minfileserver.exceptions import PathReadError
from minfileserver.file_system_tree.error_action import ErrorAction
from minfileserver.file_system_tree.tree_node import DirectoryNode, ErrorNode, FileNode
from minfileserver.paths import resolve_within_root
from minfileserver.types import PathType

from .base_renderer import TreeRenderer

# Undecodable bytes are carried through as lone surrogates and restored on output
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"

SEPARATOR = "---------------"


class ContentsRenderer(TreeRenderer):
    """Renderer that concatenates every visible file below a directory.

    Each file is written as a header naming its path followed by its complete
    contents. Directories are only traversed, never written. There is no partial
    output: any listing or read failure aborts the whole rendering, as does a
    file whose real location has moved outside the project root.

    File bytes are decoded with the "surrogateescape" error handler, so encoding
    the rendered text with the same handler reproduces every file exactly.

    Attributes:
        root_path (str): The project root that relative paths are resolved against.
    """

    def __init__(self, root_path: PathType) -> None:
        self.root_path = os.path.abspath(root_path)

    @property
    def error_action(self) -> ErrorAction:
        return ErrorAction.RAISE

    def format_directory(self, node: DirectoryNode) -> str:
        return ""

    def format_file(self, node: FileNode) -> str:
        path, _relative = resolve_within_root(self.root_path, node.relative_path)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise PathReadError(path, e) from e

        body = data.decode(TEXT_ENCODING, TEXT_ERRORS)
        return f"{SEPARATOR}\nFile: /{node.relative_path}:\n\n{body}\n\n"

    def format_error(self, node: ErrorNode) -> str:
        # Walks feeding this renderer raise instead of reporting
        raise PathReadError(node.relative_path, OSError(node.message))
