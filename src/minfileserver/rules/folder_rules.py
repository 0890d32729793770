from abc import ABC, abstractmethod
from typing import Iterable, Tuple

WILDCARD = "*"


class FolderRule(ABC):
    """
    Abstract base class for a single folder-exclusion rule.

    Folder rules are parsed once, when configuration is loaded, into one of two
    concrete variants. Matching is then a single method dispatch rather than
    re-inspecting the rule text on every directory.

    Example:
        >>> rule = parse_folder_rule("*node_modules")
        >>> rule.matches("node_modules", "web/app/node_modules")
        True
        >>> rule = parse_folder_rule("build")
        >>> rule.matches("build", "web/build")
        False
        >>> rule.matches("build", "build")
        True
    """

    @abstractmethod
    def matches(self, name: str, relative_path: str) -> bool:
        """
        Determine whether a directory is covered by this rule.

        Args:
            name (str): The directory's own name.
            relative_path (str): The directory's path relative to the project root,
                using forward slashes. A leading separator is ignored.

        Returns:
            bool: True if the directory (and thus its whole subtree) is excluded.
        """
        pass


class ExactPath(FolderRule):
    """Matches only the directory at one exact relative path."""

    def __init__(self, path: str) -> None:
        self.path = path

    def matches(self, name: str, relative_path: str) -> bool:
        return self.path == relative_path.lstrip("/")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExactPath) and other.path == self.path

    def __hash__(self) -> int:
        return hash((ExactPath, self.path))

    def __repr__(self) -> str:
        return f"ExactPath({self.path!r})"


class AnyNamed(FolderRule):
    """Matches every directory with the given name, at any depth."""

    def __init__(self, name: str) -> None:
        self.name = name

    def matches(self, name: str, relative_path: str) -> bool:
        return self.name == name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyNamed) and other.name == self.name

    def __hash__(self) -> int:
        return hash((AnyNamed, self.name))

    def __repr__(self) -> str:
        return f"AnyNamed({self.name!r})"


def parse_folder_rule(entry: str) -> FolderRule:
    """
    Parse one exclusive-folders entry into its rule variant.

    An entry starting with the wildcard marker becomes AnyNamed with the remainder
    (a single "/" after the marker is tolerated, so "*/dist" and "*dist" are the
    same rule). Anything else is an ExactPath relative to the project root.

    Args:
        entry (str): A single entry from the exclusive-folders list.

    Returns:
        FolderRule: The parsed rule.

    Example:
        >>> parse_folder_rule("*/dist")
        AnyNamed('dist')
        >>> parse_folder_rule("/docs/build/")
        ExactPath('docs/build')
    """
    if entry.startswith(WILDCARD):
        remainder = entry[len(WILDCARD) :]  # noqa: E203
        if remainder.startswith("/"):
            remainder = remainder[1:]
        return AnyNamed(remainder)
    return ExactPath(entry.strip("/"))


def parse_folder_rules(entries: Iterable[str]) -> Tuple[FolderRule, ...]:
    """Parse every entry of an exclusive-folders list, preserving order."""
    return tuple(parse_folder_rule(entry) for entry in entries)
