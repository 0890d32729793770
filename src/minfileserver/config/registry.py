"""Read-only registry of project configurations."""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from minfileserver.config.models import ProjectConfig


class ProjectRegistry:
    """Immutable lookup of registered projects by identifier.

    Example:
        >>> registry = ProjectRegistry({"demo": ProjectConfig("demo", "Demo", "/srv/demo")})
        >>> registry.lookup("demo").project_name
        'Demo'
        >>> registry.lookup("other") is None
        True
        >>> registry.lookup("") is None
        True
    """

    def __init__(self, projects: Mapping[str, ProjectConfig]) -> None:
        self._projects: Mapping[str, ProjectConfig] = MappingProxyType(dict(projects))

    def lookup(self, project_id: Optional[str]) -> Optional[ProjectConfig]:
        """Return the project for an identifier, or None if it is empty, unknown or nameless."""
        if not project_id:
            return None
        project = self._projects.get(project_id)
        if project is None or not project.project_name:
            return None
        return project

    def items(self) -> Iterator[Tuple[str, ProjectConfig]]:
        """Iterate over (identifier, project) pairs ordered by identifier."""
        for project_id in sorted(self._projects):
            yield project_id, self._projects[project_id]

    def __len__(self) -> int:
        return len(self._projects)

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._projects
