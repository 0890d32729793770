"""Effective rule set for a single request."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from minfileserver.rules.folder_rules import FolderRule
from minfileserver.types import RuleList


@dataclass(frozen=True)
class EffectiveRuleSet:
    """The resolved visibility rules applied while walking one project.

    Instances are derived per request by the resolver and never stored. An
    empty category means that category imposes no restriction.

    Attributes:
        inclusive_extensions: Extensions a file must have to be shown ("*" for any).
        exclusive_extensions: Extensions that hide a file.
        exclusive_folders: Folder rules that prune whole subtrees.
        exclusive_files: Exact file names that are hidden.
    """

    inclusive_extensions: RuleList = ()
    exclusive_extensions: RuleList = ()
    exclusive_folders: Tuple[FolderRule, ...] = ()
    exclusive_files: FrozenSet[str] = field(default_factory=frozenset)
