"""Visibility rules for filtering files and directories."""

from .folder_rules import AnyNamed, ExactPath, FolderRule, parse_folder_rule, parse_folder_rules
from .matcher import extension_allowed, extension_of, file_excluded, folder_excluded
from .resolver import resolve
from .rule_list import parse_rule_list
from .rule_set import EffectiveRuleSet

__all__ = [
    "AnyNamed",
    "EffectiveRuleSet",
    "ExactPath",
    "FolderRule",
    "extension_allowed",
    "extension_of",
    "file_excluded",
    "folder_excluded",
    "parse_folder_rule",
    "parse_folder_rules",
    "parse_rule_list",
    "resolve",
]
