from enum import Enum
from os import PathLike
from typing import Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Parsed form of a comma-separated rule string
RuleList = Tuple[str, ...]


class NodeType(Enum):
    """Enumeration of node kinds produced while walking a project tree.

    Attributes:
        DIRECTORY: A visible directory whose children follow it in the walk.
        FILE: A visible regular file (or a symlink, which is never followed).
        ERROR: A placeholder for a subtree that could not be listed.
    """

    DIRECTORY = "directory"
    FILE = "file"
    ERROR = "error"
