from minfileserver.config.models import ProjectConfig
from minfileserver.config.registry import ProjectRegistry
from minfileserver.renderers.project_index import render_project_index


def test_index_lists_projects_by_identifier(registry):
    assert render_project_index(registry) == "<a href='/p/demo'>Demo</a><br><a href='/p/other'>Other Project</a><br>"


def test_index_skips_nameless_projects():
    registry = ProjectRegistry(
        {
            "b": ProjectConfig("b", "Beta", "/srv/b"),
            "a": ProjectConfig("a", "", "/srv/a"),
        }
    )
    assert render_project_index(registry) == "<a href='/p/b'>Beta</a><br>"


def test_index_of_empty_registry():
    assert render_project_index(ProjectRegistry({})) == ""


def test_index_escapes_names():
    registry = ProjectRegistry({"x": ProjectConfig("x", "<script>", "/srv/x")})
    assert render_project_index(registry) == "<a href='/p/x'>&lt;script&gt;</a><br>"
