import pytest

from minfileserver.link_synthesizer import absolute_url, clean_path, project_link, synthesize_links


def test_file_links():
    links = synthesize_links("demo", "src/main.go", "http://files.local")
    assert links.view == "/v/demo/src/main.go"
    assert links.raw == "/f/demo/src/main.go"
    assert links.json == "/j/demo/src/main.go"
    assert links.external_raw == "http://files.local/f/demo/src/main.go"


def test_directory_links():
    links = synthesize_links("demo", "src/pkg", "https://example.com/files/")
    assert links.structure == "/s/demo/src/pkg"
    assert links.contents == "/c/demo/src/pkg"
    assert links.external_structure == "https://example.com/files/s/demo/src/pkg"
    assert links.external_contents == "https://example.com/files/c/demo/src/pkg"


def test_root_links_keep_trailing_separator():
    links = synthesize_links("demo", "", "http://files.local")
    assert links.structure == "/s/demo/"
    assert links.external_contents == "http://files.local/c/demo/"


def test_backslashes_and_repeated_separators_are_cleaned():
    links = synthesize_links("demo", "/src\\pkg//a.go", "http://files.local//")
    assert links.raw == "/f/demo/src/pkg/a.go"
    assert links.external_raw == "http://files.local/f/demo/src/pkg/a.go"


def test_links_without_external_base():
    assert synthesize_links("demo", "a.go", "").external_raw == "/f/demo/a.go"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a//b///c", "a/b/c"),
        ("a\\b", "a/b"),
        ("/s/demo/", "/s/demo/"),
    ],
)
def test_clean_path(path, expected):
    assert clean_path(path) == expected


def test_absolute_url_keeps_scheme_separator():
    assert absolute_url("http://host:8080", "/f/demo/a.go") == "http://host:8080/f/demo/a.go"


def test_project_link():
    assert project_link("demo") == "/p/demo"
