import pytest

from minfileserver.config.models import ProjectConfig
from minfileserver.config.registry import ProjectRegistry


@pytest.fixture
def projects():
    return {
        "web": ProjectConfig("web", "Web", "/srv/web"),
        "api": ProjectConfig("api", "API", "/srv/api"),
        "draft": ProjectConfig("draft", "", "/srv/draft"),
    }


def test_lookup(projects):
    registry = ProjectRegistry(projects)
    assert registry.lookup("web") is projects["web"]


@pytest.mark.parametrize("project_id", ["", None, "missing", "draft"])
def test_lookup_of_unknown_empty_or_nameless(projects, project_id):
    assert ProjectRegistry(projects).lookup(project_id) is None


def test_items_are_ordered_by_identifier(projects):
    assert [project_id for project_id, _ in ProjectRegistry(projects).items()] == ["api", "draft", "web"]


def test_registry_is_isolated_from_source_mapping(projects):
    registry = ProjectRegistry(projects)
    projects["late"] = ProjectConfig("late", "Late", "/srv/late")
    assert registry.lookup("late") is None
    assert "late" not in registry
    assert len(registry) == 3
