"""Renderers turning a filtered walk into the server's tree views."""

from .base_renderer import TreeRenderer
from .contents_renderer import ContentsRenderer
from .presentation_renderer import PresentationRenderer
from .project_index import render_project_index
from .structure_renderer import StructureRenderer

__all__ = [
    "ContentsRenderer",
    "PresentationRenderer",
    "StructureRenderer",
    "TreeRenderer",
    "render_project_index",
]
