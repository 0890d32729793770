"""Resolution of per-project rules against the general defaults."""

import logging
from typing import TYPE_CHECKING

from minfileserver.rules.rule_set import EffectiveRuleSet

if TYPE_CHECKING:
    from minfileserver.config.models import GeneralSettings, ProjectConfig

logger = logging.getLogger(__name__)


def resolve(project: "ProjectConfig", general: "GeneralSettings") -> EffectiveRuleSet:
    """Merge a project's rule overrides with the general defaults.

    Each of the four rule categories is taken from the project when the project
    value is non-empty, and from the general settings otherwise. The inputs are
    left untouched; the result is a fresh value for the current request.

    Args:
        project: The project selected by the current request.
        general: The process-wide settings.

    Returns:
        The effective rules for walking this project.
    """
    rules = EffectiveRuleSet(
        inclusive_extensions=project.inclusive_extensions or general.inclusive_extensions,
        exclusive_extensions=project.exclusive_extensions or general.exclusive_extensions,
        exclusive_folders=project.exclusive_folders or general.exclusive_folders,
        exclusive_files=project.exclusive_files or general.exclusive_files,
    )
    logger.debug("Resolved rules for project %r: %r", project.project_id, rules)
    return rules
