"""Visibility predicates for extensions, file names and folders."""

from typing import Collection, Iterable

from minfileserver.rules.folder_rules import WILDCARD, FolderRule


def extension_of(name: str) -> str:
    """Return the extension of a file name without its leading dot.

    Everything after the last dot counts, so "a.tar.gz" has extension "gz" and
    ".bashrc" has extension "bashrc". A name without a dot has the empty
    extension.

    Example:
        >>> extension_of("main.go")
        'go'
        >>> extension_of("Makefile")
        ''
    """
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot + 1 :]  # noqa: E203


def extension_allowed(ext: str, inclusive: Collection[str], exclusive: Collection[str]) -> bool:
    """Decide whether a file with the given extension is visible.

    Example:
        >>> extension_allowed("", ["*"], [])
        True
        >>> extension_allowed("txt", ["go", "md"], [])
        False
        >>> extension_allowed("log", [], ["log"])
        False
    """
    included = not inclusive or WILDCARD in inclusive or ext in inclusive
    excluded = bool(exclusive) and ext in exclusive
    return included and not excluded


def file_excluded(name: str, exclusive_files: Collection[str]) -> bool:
    """Return True if the file name is listed verbatim among the exclusive files."""
    return name in exclusive_files


def folder_excluded(name: str, relative_path: str, exclusive_folders: Iterable[FolderRule]) -> bool:
    """Return True if any folder rule prunes this directory."""
    return any(rule.matches(name, relative_path) for rule in exclusive_folders)
