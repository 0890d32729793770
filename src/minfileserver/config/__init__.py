"""Configuration records, registry and loaders."""

from .loader import load_general_settings, load_project_config, load_project_registry
from .models import GeneralSettings, ProjectConfig
from .registry import ProjectRegistry

__all__ = [
    "GeneralSettings",
    "ProjectConfig",
    "ProjectRegistry",
    "load_general_settings",
    "load_project_config",
    "load_project_registry",
]
