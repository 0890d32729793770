"""Test configuration and fixtures for minfileserver."""

import logging

import pytest

from minfileserver.config.models import GeneralSettings, ProjectConfig
from minfileserver.config.registry import ProjectRegistry
from minfileserver.logging_config import PACKAGE_LOGGER
from minfileserver.rules.folder_rules import parse_folder_rules
from minfileserver.rules.rule_list import parse_rule_list


@pytest.fixture
def project_dir(tmp_path):
    """Create a small project tree with hidden, excluded and nested entries."""
    root = tmp_path / "demo"
    root.mkdir()
    (root / "src").mkdir()
    (root / "src" / "main.go").write_text("package main\n")
    (root / "src" / "util").mkdir()
    (root / "src" / "util" / "strings.go").write_text("package util\n")
    (root / "src" / "node_modules").mkdir()
    (root / "src" / "node_modules" / "dep.js").write_text("module.exports = 1;\n")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "x.js").write_text("var x = 1;\n")
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide\n")
    (root / "README.md").write_text("# Demo\n")
    (root / "notes.txt").write_text("notes\n")
    (root / ".env").write_text("SECRET=1\n")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return root


def _make_project(root_path, project_id="demo", project_name="Demo", project_url="http://files.local", **rules):
    """Build a ProjectConfig with rule overrides given as config-style strings."""
    return ProjectConfig(
        project_id=project_id,
        project_name=project_name,
        root_path=str(root_path),
        project_url=project_url,
        inclusive_extensions=parse_rule_list(rules.get("inclusive_extensions")),
        exclusive_extensions=parse_rule_list(rules.get("exclusive_extensions")),
        exclusive_folders=parse_folder_rules(parse_rule_list(rules.get("exclusive_folders"))),
        exclusive_files=frozenset(parse_rule_list(rules.get("exclusive_files"))),
    )


@pytest.fixture
def make_project():
    """Factory for ProjectConfig instances with config-style rule strings."""
    return _make_project


@pytest.fixture
def general_settings():
    return GeneralSettings(inclusive_extensions=("*",))


@pytest.fixture
def registry(project_dir):
    return ProjectRegistry(
        {
            "demo": _make_project(project_dir),
            "other": _make_project(project_dir, project_id="other", project_name="Other Project"),
        }
    )


@pytest.fixture
def restore_package_logger():
    """Undo handler and level changes made to the package logger by a test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
