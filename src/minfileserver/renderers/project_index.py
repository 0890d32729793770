"""Flat link list of every registered project."""

from markupsafe import escape

from minfileserver.config.registry import ProjectRegistry
from minfileserver.link_synthesizer import project_link


def render_project_index(registry: ProjectRegistry) -> str:
    """Render one link per registered project, ordered by identifier.

    Projects without a display name are not browsable and are left out.

    Example:
        >>> from minfileserver.config.models import ProjectConfig
        >>> registry = ProjectRegistry({"demo": ProjectConfig("demo", "Demo <1>", "/srv/demo")})
        >>> render_project_index(registry)
        "<a href='/p/demo'>Demo &lt;1&gt;</a><br>"
    """
    return "".join(
        f"<a href='{escape(project_link(project_id))}'>{escape(project.project_name)}</a><br>"
        for project_id, project in registry.items()
        if project.project_name
    )
