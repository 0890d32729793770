import os

import pytest

from minfileserver.exceptions import AccessDeniedError
from minfileserver.paths import is_within_root, normalize_relative_path, resolve_within_root


@pytest.mark.parametrize(
    "relative,expected",
    [
        ("", ""),
        ("/", ""),
        (".", ""),
        ("src/main.go", "src/main.go"),
        ("/src//main.go/", "src/main.go"),
        ("src\\main.go", "src/main.go"),
        ("src/./util/../main.go", "src/main.go"),
        ("../etc", "../etc"),
    ],
)
def test_normalize_relative_path(relative, expected):
    assert normalize_relative_path(relative) == expected


def test_resolve_within_root(tmp_path):
    full, relative = resolve_within_root(tmp_path, "/docs/guide.md")
    assert full == os.path.join(str(tmp_path), "docs", "guide.md")
    assert relative == "docs/guide.md"


def test_resolve_root_itself(tmp_path):
    assert resolve_within_root(tmp_path, "") == (str(tmp_path), "")


@pytest.mark.parametrize("relative", ["..", "../secret", "docs/../../secret", "/../../etc/passwd"])
def test_escaping_paths_are_refused(tmp_path, relative):
    with pytest.raises(AccessDeniedError):
        resolve_within_root(tmp_path, relative)


def test_sibling_with_common_prefix_is_refused(tmp_path):
    root = tmp_path / "demo"
    with pytest.raises(AccessDeniedError):
        resolve_within_root(root, "../demo-other/file.txt")


def test_link_leaving_root_is_refused(tmp_path):
    root = tmp_path / "demo"
    root.mkdir()
    secret = tmp_path / "outside_secret.txt"
    secret.write_text("TOP-SECRET\n")
    os.symlink(secret, root / "leak.txt")

    with pytest.raises(AccessDeniedError):
        resolve_within_root(root, "leak.txt")


def test_directory_link_leaving_root_is_refused(tmp_path):
    root = tmp_path / "demo"
    root.mkdir()
    (tmp_path / "elsewhere").mkdir()
    (tmp_path / "elsewhere" / "a.txt").write_text("a")
    os.symlink(tmp_path / "elsewhere", root / "elsewhere")

    with pytest.raises(AccessDeniedError):
        resolve_within_root(root, "elsewhere/a.txt")


def test_link_inside_root_is_allowed(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    os.symlink(tmp_path / "a.txt", tmp_path / "b.txt")
    assert resolve_within_root(tmp_path, "b.txt") == (os.path.join(str(tmp_path), "b.txt"), "b.txt")


def test_root_reached_through_link(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "a.txt").write_text("a")
    os.symlink(real, tmp_path / "alias")
    assert resolve_within_root(tmp_path / "alias", "a.txt")[1] == "a.txt"


def test_is_within_root(tmp_path):
    (tmp_path / "inner").mkdir()
    assert is_within_root(tmp_path, tmp_path / "inner")
    assert is_within_root(tmp_path, tmp_path)
    assert not is_within_root(tmp_path / "inner", tmp_path)
