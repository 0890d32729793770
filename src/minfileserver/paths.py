"""Containment of client-supplied relative paths within a project root."""

import os
import posixpath
from typing import Tuple

from minfileserver.exceptions import AccessDeniedError
from minfileserver.types import PathType


def normalize_relative_path(relative_path: str) -> str:
    """Normalize a URL-style relative path to forward slashes without leading or trailing separators.

    Example:
        >>> normalize_relative_path("/src//pkg/")
        'src/pkg'
        >>> normalize_relative_path("./")
        ''
        >>> normalize_relative_path("a/../../etc")
        '../etc'
    """
    cleaned = relative_path.replace("\\", "/").strip("/")
    if not cleaned:
        return ""
    normalized = posixpath.normpath(cleaned)
    return "" if normalized == "." else normalized


def is_within_root(root_path: PathType, path: PathType) -> bool:
    """Report whether a path, with every symbolic link followed, lies inside a root.

    Both sides are resolved with ``os.path.realpath``, so a root that is itself
    reached through a link still contains its own entries.

    Example:
        >>> is_within_root("/srv/demo", "/srv/demo/docs/readme.md")
        True
        >>> is_within_root("/srv/demo", "/srv/other/readme.md")
        False
    """
    real_root = os.path.realpath(root_path)
    real_path = os.path.realpath(path)
    return os.path.commonpath([real_root, real_path]) == real_root


def resolve_within_root(root_path: PathType, relative_path: str) -> Tuple[str, str]:
    """Join a relative path onto a project root, refusing anything that escapes it.

    The normalized path must stay below the root, and so must its real location
    once symbolic links are followed; a link inside the project that points
    elsewhere is refused like a "../" path.

    Args:
        root_path: The project's root directory.
        relative_path: Path relative to the root, as received in a URL.

    Returns:
        The absolute filesystem path and the normalized relative path.

    Raises:
        AccessDeniedError: If the path resolves outside the root.

    Example:
        >>> resolve_within_root("/srv/demo", "docs/readme.md")
        ('/srv/demo/docs/readme.md', 'docs/readme.md')
        >>> resolve_within_root("/srv/demo", "../other")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        minfileserver.exceptions.AccessDeniedError: Path is outside the project root
    """
    root = os.path.abspath(root_path)
    relative = normalize_relative_path(relative_path)
    if relative == ".." or relative.startswith("../"):
        raise AccessDeniedError("Path is outside the project root")

    full_path = os.path.normpath(os.path.join(root, *relative.split("/"))) if relative else root
    if os.path.commonpath([root, full_path]) != root or not is_within_root(root, full_path):
        raise AccessDeniedError("Path is outside the project root")
    return full_path, relative
