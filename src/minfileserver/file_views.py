"""Single-file views: raw bytes, a minimal viewer page and a JSON line listing.

This module reads one file of a project at a time. Paths are resolved against
the project root and refused if they would escape it; any read failure is
reported as a PathReadError carrying the OS error text.
"""

import posixpath
from dataclasses import dataclass
from typing import Any, Dict, List

from markupsafe import escape

from minfileserver.exceptions import PathReadError
from minfileserver.paths import resolve_within_root
from minfileserver.types import PathType

TEXT_ENCODING = "utf-8"


@dataclass(frozen=True)
class FileData:
    """A file read from a project.

    Attributes:
        path: Absolute filesystem path of the file.
        relative_path: Normalized path relative to the project root.
        data: The complete file contents.
    """

    path: str
    relative_path: str
    data: bytes

    @property
    def name(self) -> str:
        return posixpath.basename(self.relative_path)

    @property
    def text(self) -> str:
        return self.data.decode(TEXT_ENCODING, errors="replace")


def read_project_file(root_path: PathType, relative_path: str) -> FileData:
    """Read a file of a project in full.

    Args:
        root_path: The project root.
        relative_path: Path of the file relative to the root.

    Returns:
        The file's location and contents.

    Raises:
        AccessDeniedError: If the path resolves outside the root.
        PathReadError: If the file does not exist, is a directory or cannot be read.
    """
    full_path, relative = resolve_within_root(root_path, relative_path)
    try:
        with open(full_path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise PathReadError(full_path, e) from e
    return FileData(path=full_path, relative_path=relative, data=data)


def render_file_viewer(file: FileData) -> str:
    """Wrap a file's contents in a minimal HTML page.

    Example:
        >>> page = render_file_viewer(FileData("/srv/a.html", "a.html", b"<b>hi</b>"))
        >>> "<pre>&lt;b&gt;hi&lt;/b&gt;</pre>" in page
        True
    """
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{escape(file.name)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"<pre>{escape(file.text)}</pre>\n"
        "</body>\n"
        "</html>\n"
    )


def file_to_json(file: FileData) -> Dict[str, Any]:
    """Build the JSON document listing a file line by line.

    Lines are split on "\\n" only and numbered from 1; a trailing newline yields
    a final empty line.

    Example:
        >>> document = file_to_json(FileData("/srv/demo/a.txt", "a.txt", b"one\\ntwo"))
        >>> document["file"], document["path"]
        ('a.txt', '/a.txt')
        >>> document["data"]
        [{'line': 1, 'content': 'one'}, {'line': 2, 'content': 'two'}]
    """
    lines: List[Dict[str, Any]] = [
        {"line": number, "content": content} for number, content in enumerate(file.text.split("\n"), start=1)
    ]
    return {"file": file.name, "path": "/" + file.relative_path, "data": lines}
