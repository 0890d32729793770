"""Loading of the settings document and per-project configuration files.

The settings document holds process-wide defaults. Each ``*.json`` file in the
configuration directory registers one project, keyed by the file name without
its extension. Both are read once at startup; any failure is reported as a
ConfigLoadError and halts startup.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from minfileserver.config.models import DEFAULT_SERVER_PORT, GeneralSettings, ProjectConfig
from minfileserver.config.registry import ProjectRegistry
from minfileserver.exceptions import ConfigLoadError
from minfileserver.logging_config import parse_level
from minfileserver.rules.folder_rules import parse_folder_rules
from minfileserver.rules.rule_list import parse_rule_list
from minfileserver.types import PathType

logger = logging.getLogger(__name__)

PROJECT_CONFIG_SUFFIX = ".json"


def _read_json_object(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise ConfigLoadError(str(path), str(e)) from e
    except ValueError as e:
        raise ConfigLoadError(str(path), f"invalid JSON: {e}") from e

    if not isinstance(document, dict):
        raise ConfigLoadError(str(path), "expected a JSON object at the top level")
    return document


def _parse_port(path: Path, value: Any) -> int:
    if value is None or value == "":
        return DEFAULT_SERVER_PORT
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigLoadError(str(path), f"server_port must be a number, got {value!r}")
    if not 0 < port < 65536:
        raise ConfigLoadError(str(path), f"server_port out of range: {port}")
    return port


def _parse_bool(path: Path, key: str, value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigLoadError(str(path), f"{key} must be true or false, got {value!r}")
    return value


def _parse_log_level(path: Path, value: Any) -> str:
    level = str(value or "INFO").upper()
    try:
        parse_level(level)
    except ValueError as e:
        raise ConfigLoadError(str(path), str(e)) from e
    return level


def _parse_rules(path: Path, document: Dict[str, Any]) -> Dict[str, Any]:
    """Parse the four rule categories of a settings or project document."""
    try:
        return {
            "inclusive_extensions": parse_rule_list(document.get("inclusive_extensions")),
            "exclusive_extensions": parse_rule_list(document.get("exclusive_extensions")),
            "exclusive_folders": parse_folder_rules(parse_rule_list(document.get("exclusive_folders"))),
            "exclusive_files": frozenset(parse_rule_list(document.get("exclusive_files"))),
        }
    except TypeError as e:
        raise ConfigLoadError(str(path), str(e)) from e


def load_general_settings(settings_file: PathType) -> GeneralSettings:
    """Load the process-wide settings document.

    Args:
        settings_file: Path to the settings JSON file.

    Returns:
        The parsed, immutable settings.

    Raises:
        ConfigLoadError: If the file is missing, unreadable or malformed.
    """
    path = Path(settings_file)
    document = _read_json_object(path)

    settings = GeneralSettings(
        server_port=_parse_port(path, document.get("server_port")),
        disable_external_network_browsing=_parse_bool(
            path, "disable_external_network_browsing", document.get("disable_external_network_browsing")
        ),
        show_hidden=_parse_bool(path, "show_hidden", document.get("show_hidden")),
        time_stamp=_parse_bool(path, "time_stamp", document.get("time_stamp")),
        log_level=_parse_log_level(path, document.get("log_level")),
        **_parse_rules(path, document),
    )
    logger.info("Loaded general settings from %s", path)
    return settings


def load_project_config(config_file: PathType) -> ProjectConfig:
    """Load a single project configuration file.

    The project identifier is the file name without its ".json" suffix. A file
    without a project name still loads, but the registry treats it as unknown.

    Raises:
        ConfigLoadError: If the file is unreadable or malformed, or names a
            project without giving its root path.
    """
    path = Path(config_file)
    document = _read_json_object(path)

    project_name = str(document.get("project_name") or "")
    root_path = str(document.get("root_path") or "")
    if project_name and not root_path:
        raise ConfigLoadError(str(path), "root_path is required")

    return ProjectConfig(
        project_id=path.name[: -len(PROJECT_CONFIG_SUFFIX)],
        project_name=project_name,
        root_path=root_path,
        project_url=str(document.get("project_url") or ""),
        **_parse_rules(path, document),
    )


def load_project_registry(config_dir: PathType) -> ProjectRegistry:
    """Load every project configuration file from a directory.

    Args:
        config_dir: Directory containing one "<project_id>.json" file per project.

    Returns:
        A registry of all loaded projects.

    Raises:
        ConfigLoadError: If the directory cannot be listed or any project file fails to load.
    """
    directory = Path(config_dir)
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise ConfigLoadError(str(directory), str(e)) from e

    projects = {}
    for entry in entries:
        if entry.name.endswith(PROJECT_CONFIG_SUFFIX) and entry.is_file():
            project = load_project_config(entry)
            projects[project.project_id] = project
            logger.info("Registered project %r (%s) at %s", project.project_id, project.project_name, project.root_path)

    if not projects:
        logger.warning("No project configuration files found in %s", directory)
    return ProjectRegistry(projects)
