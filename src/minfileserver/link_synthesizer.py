"""Addressable links for projects, directories and files.

Every visible node in a rendered tree carries links to the views that can
display it. Relative links address this server; absolute links are built on the
project's external URL base so they can be copied and shared.
"""

import re
from dataclasses import dataclass

VIEW_PREFIX = "v"
RAW_PREFIX = "f"
JSON_PREFIX = "j"
STRUCTURE_PREFIX = "s"
CONTENTS_PREFIX = "c"
PROJECT_PREFIX = "p"

_REPEATED_SEPARATORS = re.compile(r"/{2,}")


@dataclass(frozen=True)
class NodeLinks:
    """All links derived for one node of a project.

    Attributes:
        view: Internal HTML viewer of a file.
        raw: Raw-content endpoint of a file.
        json: JSON line listing of a file.
        structure: Flat structure listing of a directory.
        contents: Concatenated contents of a directory.
        external_raw: Absolute URL of the raw-content endpoint.
        external_structure: Absolute URL of the structure listing.
        external_contents: Absolute URL of the concatenated contents.
    """

    view: str
    raw: str
    json: str
    structure: str
    contents: str
    external_raw: str
    external_structure: str
    external_contents: str


def clean_path(path: str) -> str:
    """Convert a path to forward slashes and collapse repeated separators.

    Example:
        >>> clean_path("/s/demo//src\\\\pkg")
        '/s/demo/src/pkg'
    """
    return _REPEATED_SEPARATORS.sub("/", path.replace("\\", "/"))


def absolute_url(url_base: str, link: str) -> str:
    """Join a relative link onto an external URL base.

    The "//" after the scheme is kept; any other repeated separators are collapsed.

    Example:
        >>> absolute_url("http://files.local:8080/", "/f/demo/a.go")
        'http://files.local:8080/f/demo/a.go'
        >>> absolute_url("", "/f/demo/a.go")
        '/f/demo/a.go'
    """
    scheme, separator, rest = url_base.partition("://")
    if not separator:
        return clean_path(f"{url_base}/{link}")
    return f"{scheme}://{clean_path(f'{rest}/{link}')}"


def _route(prefix: str, project_id: str, relative_path: str) -> str:
    return clean_path(f"/{prefix}/{project_id}/{relative_path}")


def project_link(project_id: str) -> str:
    """Return the tree view link of a project, as listed in the project index."""
    return _route(PROJECT_PREFIX, project_id, "").rstrip("/")


def synthesize_links(project_id: str, relative_path: str, project_url: str) -> NodeLinks:
    """Build every link for a node of a project.

    Args:
        project_id: Identifier of the project.
        relative_path: Path of the node relative to the project root ("" for the root).
        project_url: The project's external URL base.

    Returns:
        The relative and absolute links for the node's views.

    Example:
        >>> links = synthesize_links("demo", "src/main.go", "http://files.local")
        >>> links.view, links.json
        ('/v/demo/src/main.go', '/j/demo/src/main.go')
        >>> links.external_raw
        'http://files.local/f/demo/src/main.go'
        >>> synthesize_links("demo", "", "http://files.local").structure
        '/s/demo/'
    """
    structure = _route(STRUCTURE_PREFIX, project_id, relative_path)
    contents = _route(CONTENTS_PREFIX, project_id, relative_path)
    raw = _route(RAW_PREFIX, project_id, relative_path)
    return NodeLinks(
        view=_route(VIEW_PREFIX, project_id, relative_path),
        raw=raw,
        json=_route(JSON_PREFIX, project_id, relative_path),
        structure=structure,
        contents=contents,
        external_raw=absolute_url(project_url, raw),
        external_structure=absolute_url(project_url, structure),
        external_contents=absolute_url(project_url, contents),
    )
