"""Tests for the HTML tree page."""

import re

from minfileserver.file_system_tree.tree_node import DirectoryNode, ErrorNode, FileNode
from minfileserver.file_system_tree.tree_walker import TreeWalker
from minfileserver.renderers.presentation_renderer import PresentationRenderer


def render(project, nodes, time_stamp=False):
    return PresentationRenderer(project, time_stamp=time_stamp).render(nodes)


def test_page_frame(make_project, tmp_path):
    page = render(make_project(tmp_path, project_name="Demo"), [])

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Demo</title>" in page
    assert "<h1>Demo</h1>" in page
    assert '<link rel="stylesheet" href="/static/style.css">' in page
    assert '<script src="/static/clipboard.js"></script>' in page
    assert "var appendTimestamp = false;" in page
    assert page.rstrip().endswith("</html>")


def test_time_stamp_flag(make_project, tmp_path):
    assert "var appendTimestamp = true;" in render(make_project(tmp_path), [], time_stamp=True)


def test_root_item_links(make_project, tmp_path):
    page = render(make_project(tmp_path, project_url="http://files.local:8080"), [])

    assert "href='/s/demo/'" in page
    assert "href='/c/demo/'" in page
    assert "data-url='http://files.local:8080/s/demo/'" in page
    assert "data-url='http://files.local:8080/c/demo/'" in page


def test_file_item_links(make_project, tmp_path):
    root = DirectoryNode("demo")
    src = DirectoryNode("src", "src", parent=root)
    main = FileNode("main.go", "src/main.go", parent=src, extension="go")
    page = render(make_project(tmp_path), [src, main])

    assert "<a href='/v/demo/src/main.go' target='_blank'>main.go</a>" in page
    assert "href='http://files.local/f/demo/src/main.go'" in page
    assert "data-url='http://files.local/f/demo/src/main.go'" in page
    assert "data-info='main.go: http://files.local/f/demo/src/main.go'" in page
    assert "href='/j/demo/src/main.go'" in page
    assert "href='/s/demo/src'" in page
    assert "href='/c/demo/src'" in page


def test_directories_nest(make_project, tmp_path):
    root = DirectoryNode("demo")
    a = DirectoryNode("a", "a", parent=root)
    b = DirectoryNode("b", "a/b", parent=a)
    leaf = FileNode("x.txt", "a/b/x.txt", parent=b)
    top = FileNode("y.txt", "y.txt", parent=root)
    page = render(make_project(tmp_path), [a, b, leaf, top])

    body = page[page.index("<span>a</span>") :]
    assert body.index("<span>b</span>") < body.index(">x.txt</a>")
    # Both nested lists close before the top-level file
    closing = body[body.index(">x.txt</a>") : body.index(">y.txt</a>")]
    assert closing.count("</ul></li>") == 2


def test_markup_is_balanced(make_project, project_dir):
    project = make_project(project_dir)
    page = render(project, TreeWalker(project_dir).walk())
    assert page.count("<ul>") == page.count("</ul>")
    assert len(re.findall(r"<li[ >]", page)) == page.count("</li>")


def test_names_are_escaped(make_project, tmp_path):
    root = DirectoryNode("demo")
    node = FileNode("<b>.txt", "<b>.txt", parent=root)
    page = render(make_project(tmp_path, project_name="A & B"), [node])

    assert "<title>A &amp; B</title>" in page
    assert "&lt;b&gt;.txt" in page
    assert "<b>.txt" not in page


def test_error_item(make_project, tmp_path):
    root = DirectoryNode("demo")
    locked = DirectoryNode("locked", "locked", parent=root)
    error = ErrorNode("Error reading directory: denied", "locked", parent=locked)
    page = render(make_project(tmp_path), [locked, error])

    assert "<li class='error'>Error reading directory: denied</li>" in page


def test_hidden_entries_absent(make_project, project_dir):
    page = render(make_project(project_dir), TreeWalker(project_dir).walk())
    assert ".env" not in page
    assert ".git" not in page
