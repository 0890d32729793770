"""Parsing of comma-separated rule strings into rule lists."""

from typing import Any, Optional

from minfileserver.types import RuleList


def parse_rule_list(value: Optional[Any]) -> RuleList:
    """Parse a configured rule value into a tuple of entries.

    Configuration files historically store rule lists as comma-joined strings
    ("go,md,txt"); a JSON array is accepted as well. An absent value or empty
    string yields the empty list, which means "no restriction" (or "fall back
    to the general settings" for project overrides).

    Empty entries inside a non-empty string are kept as-is: an explicit ""
    entry is the only way to name files that have no extension.

    Args:
        value: The raw value from the configuration document.

    Returns:
        The parsed entries, with surrounding whitespace stripped.

    Raises:
        TypeError: If the value is neither a string nor a list of strings.

    Example:
        >>> parse_rule_list("go, md")
        ('go', 'md')
        >>> parse_rule_list("")
        ()
        >>> parse_rule_list(["*"])
        ('*',)
        >>> parse_rule_list("txt,")
        ('txt', '')
    """
    if value is None:
        return ()
    if isinstance(value, str):
        if not value.strip():
            return ()
        return tuple(entry.strip() for entry in value.split(","))
    if isinstance(value, (list, tuple)):
        if not all(isinstance(entry, str) for entry in value):
            raise TypeError(f"Rule list entries must be strings, got {value!r}")
        return tuple(entry.strip() for entry in value)
    raise TypeError(f"Expected a comma-separated string or list of strings, got {type(value).__name__}")
