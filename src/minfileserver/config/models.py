"""Immutable configuration records loaded once at startup."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from minfileserver.rules.folder_rules import FolderRule
from minfileserver.types import RuleList

DEFAULT_SERVER_PORT = 8080


@dataclass(frozen=True)
class GeneralSettings:
    """Process-wide defaults read from the settings document.

    Attributes:
        server_port: TCP port the HTTP server listens on.
        disable_external_network_browsing: Refuse index and tree views to non-local callers.
        show_hidden: Include dot-prefixed entries in walks.
        time_stamp: Ask the browser script to append a timestamp to copied URLs.
        inclusive_extensions: Default inclusive extensions.
        exclusive_extensions: Default exclusive extensions.
        exclusive_folders: Default folder rules.
        exclusive_files: Default excluded file names.
        log_level: Logging level name used when the CLI does not override it.
    """

    server_port: int = DEFAULT_SERVER_PORT
    disable_external_network_browsing: bool = False
    show_hidden: bool = False
    time_stamp: bool = False
    inclusive_extensions: RuleList = ()
    exclusive_extensions: RuleList = ()
    exclusive_folders: Tuple[FolderRule, ...] = ()
    exclusive_files: FrozenSet[str] = field(default_factory=frozenset)
    log_level: str = "INFO"


@dataclass(frozen=True)
class ProjectConfig:
    """A single registered project.

    Rule fields left empty fall back to the matching GeneralSettings field when
    rules are resolved.

    Attributes:
        project_id: Identifier used in URLs (the config file name without ".json").
        project_name: Display name; a project without one is treated as unregistered.
        root_path: Absolute filesystem root of the project.
        project_url: External URL base used to build absolute links.
        inclusive_extensions: Project inclusive extensions override.
        exclusive_extensions: Project exclusive extensions override.
        exclusive_folders: Project folder rules override.
        exclusive_files: Project excluded file names override.
    """

    project_id: str
    project_name: str
    root_path: str
    project_url: str = ""
    inclusive_extensions: RuleList = ()
    exclusive_extensions: RuleList = ()
    exclusive_folders: Tuple[FolderRule, ...] = ()
    exclusive_files: FrozenSet[str] = field(default_factory=frozenset)
