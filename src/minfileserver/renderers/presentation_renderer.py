"""Browsable HTML tree of a project."""

from markupsafe import escape

from minfileserver.config.models import ProjectConfig
from minfileserver.file_system_tree.tree_node import DirectoryNode, ErrorNode, FileNode
from minfileserver.link_synthesizer import NodeLinks, synthesize_links

from .base_renderer import TreeRenderer

FONT_AWESOME_CSS = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/5.15.3/css/all.min.css"


def _e(value: object) -> str:
    return str(escape(value))


def _directory_buttons(links: NodeLinks) -> str:
    return (
        f"<a href='{_e(links.structure)}' target='_blank' class='buttons'>"
        "<i class='fas fa-sitemap' style='color:orange'></i></a>\n"
        f"<a href='{_e(links.contents)}' target='_blank' class='buttons'>"
        "<i class='fas fa-file-code' style='color:#6495ED'></i></a>\n"
        f"<button class='copy-button buttons' data-url='{_e(links.external_structure)}'>"
        "<i class='fas fa-copy' style='color:#20B2AA'></i></button>\n"
        f"<button class='copy-button buttons' data-url='{_e(links.external_contents)}'>"
        "<i class='fas fa-copy' style='color:green'></i></button>\n"
    )


class PresentationRenderer(TreeRenderer):
    """Renderer that writes a complete HTML page with a collapsible project tree.

    The root item is the project itself. Every directory item links to its
    structure and contents views and offers copy buttons for their absolute URLs.
    Every file item links to the internal viewer, the absolute raw URL and the JSON
    view, with copy buttons for the raw URL and for a "name: url" line.

    An unreadable nested directory is shown as an error item in place of its
    contents; the rest of the tree is still rendered.

    Attributes:
        project (ProjectConfig): The project being rendered.
        time_stamp (bool): Whether copied URLs get a timestamp query appended in the browser.
    """

    def __init__(self, project: ProjectConfig, time_stamp: bool = False) -> None:
        self.project = project
        self.time_stamp = time_stamp

    def _links(self, relative_path: str) -> NodeLinks:
        return synthesize_links(self.project.project_id, relative_path, self.project.project_url)

    def format_start(self) -> str:
        name = _e(self.project.project_name)
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="UTF-8">\n'
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f"<title>{name}</title>\n"
            '<link rel="stylesheet" href="/static/style.css">\n'
            f'<link rel="stylesheet" href="{FONT_AWESOME_CSS}">\n'
            "<script>\n"
            f"    var appendTimestamp = {'true' if self.time_stamp else 'false'};\n"
            "</script>\n"
            "</head>\n"
            "<body>\n"
            '<a href="/" class="back-button"><i class="fas fa-arrow-left"></i> Projects</a>\n'
            f"<h1>{name}</h1>\n"
            '<div class="tree-view">\n'
            "<ul>\n"
            '<li class="root-item expanded">\n'
            "<div class='item'>\n"
            f"<span>{name}</span>\n"
            f"{_directory_buttons(self._links(''))}"
            "</div>\n"
            "<ul>\n"
        )

    def format_directory(self, node: DirectoryNode) -> str:
        buttons = _directory_buttons(self._links(node.relative_path))
        return f"<li><div class='item'><span>{_e(node.name)}</span>\n{buttons}</div><ul>\n"

    def format_directory_end(self, node: DirectoryNode) -> str:
        return "</ul></li>\n"

    def format_file(self, node: FileNode) -> str:
        links = self._links(node.relative_path)
        info = f"{node.name}: {links.external_raw}"
        return (
            "<li><div class='item'>\n"
            f"<a href='{_e(links.view)}' target='_blank'>{_e(node.name)}</a>\n"
            f"<a href='{_e(links.external_raw)}' target='_blank' class='buttons'>"
            "<i class='fas fa-external-link-alt' style='color:orange'></i></a>\n"
            f"<button class='copy-button buttons' data-url='{_e(links.external_raw)}'>"
            "<i class='fas fa-copy' style='color:#20B2AA'></i></button>\n"
            f"<button class='copy-button-info buttons' data-info='{_e(info)}'>"
            "<i class='fas fa-copy'></i></button>\n"
            f"<a href='{_e(links.json)}' target='_blank' class='buttons'>"
            "<i class='fas fa-file-code' style='color:#87CEFA'></i></a>\n"
            "</div></li>\n"
        )

    def format_error(self, node: ErrorNode) -> str:
        return f"<li class='error'>{_e(node.message)}</li>\n"

    def format_end(self) -> str:
        return (
            "</ul></li>\n"
            "</ul>\n"
            "</div>\n"
            '<script src="/static/script.js"></script>\n'
            '<script src="/static/clipboard.js"></script>\n'
            "</body>\n"
            "</html>\n"
        )
