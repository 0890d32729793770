"""Flask application exposing registered projects over HTTP.

Routes:
    /, /p/<id>        Project tree page, or the project index for an unknown id
    /v/<id>/<path>    File viewer page
    /f/<id>/<path>    Raw file contents
    /j/<id>/<path>    File contents as numbered JSON lines
    /s/<id>/[path]    Indented structure listing of a directory
    /c/<id>/[path]    Concatenated contents of a directory
    /static/...       Stylesheet and browser scripts

Configuration is loaded before the app is created and stored read-only in
``app.config``. Each request looks up its own project and resolves its own rules,
passing them explicitly to the walker and renderers; nothing selected for one
request is visible to another.
"""

import logging
from typing import Callable, Optional

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from minfileserver.access_guard import is_local_address
from minfileserver.config.models import GeneralSettings, ProjectConfig
from minfileserver.config.registry import ProjectRegistry
from minfileserver.exceptions import AccessDeniedError, PathReadError, UnknownProjectError
from minfileserver.file_system_tree.tree_walker import TreeWalker
from minfileserver.file_views import file_to_json, read_project_file, render_file_viewer
from minfileserver.renderers.base_renderer import TreeRenderer
from minfileserver.renderers.contents_renderer import TEXT_ENCODING, TEXT_ERRORS, ContentsRenderer
from minfileserver.renderers.presentation_renderer import PresentationRenderer
from minfileserver.renderers.project_index import render_project_index
from minfileserver.renderers.structure_renderer import StructureRenderer
from minfileserver.rules.resolver import resolve

logger = logging.getLogger(__name__)

SETTINGS_KEY = "GENERAL_SETTINGS"
REGISTRY_KEY = "PROJECT_REGISTRY"

PLAIN_TEXT = "text/plain; charset=UTF-8"
HTML = "text/html; charset=UTF-8"

views = Blueprint("views", __name__)


def _settings() -> GeneralSettings:
    return current_app.config[SETTINGS_KEY]


def _registry() -> ProjectRegistry:
    return current_app.config[REGISTRY_KEY]


def _text_response(body: str, content_type: str = PLAIN_TEXT, status: int = 200) -> Response:
    return Response(body.encode(TEXT_ENCODING, TEXT_ERRORS), status=status, content_type=content_type)


def _require_local_caller(settings: GeneralSettings) -> None:
    if settings.disable_external_network_browsing and not is_local_address(request.remote_addr):
        logger.warning("Refused external caller %s for %s", request.remote_addr, request.path)
        raise AccessDeniedError()


def _require_project(project_id: str) -> ProjectConfig:
    project = _registry().lookup(project_id)
    if project is None:
        raise UnknownProjectError(project_id)
    return project


def _render_tree(
    project: ProjectConfig,
    settings: GeneralSettings,
    renderer: TreeRenderer,
    relative_path: str = "",
) -> str:
    walker = TreeWalker(
        project.root_path,
        resolve(project, settings),
        show_hidden=settings.show_hidden,
        error_action=renderer.error_action,
    )
    return renderer.render(walker.walk(relative_path))


@views.route("/")
@views.route("/p/")
@views.route("/p/<project_id>")
def project_tree(project_id: str = "") -> Response:
    settings = _settings()
    _require_local_caller(settings)

    project = _registry().lookup(project_id)
    if project is None:
        return _text_response(render_project_index(_registry()), HTML)

    renderer = PresentationRenderer(project, time_stamp=settings.time_stamp)
    return _text_response(_render_tree(project, settings, renderer), HTML)


@views.route("/v/<project_id>/<path:relative_path>")
def file_viewer(project_id: str, relative_path: str) -> Response:
    project = _require_project(project_id)
    return _text_response(render_file_viewer(read_project_file(project.root_path, relative_path)), HTML)


@views.route("/f/<project_id>/<path:relative_path>")
def raw_file(project_id: str, relative_path: str) -> Response:
    project = _require_project(project_id)
    file = read_project_file(project.root_path, relative_path)
    return Response(file.data, content_type=PLAIN_TEXT)


@views.route("/j/<project_id>/<path:relative_path>")
def json_file(project_id: str, relative_path: str) -> Response:
    project = _require_project(project_id)
    return jsonify(file_to_json(read_project_file(project.root_path, relative_path)))


@views.route("/s/<project_id>/", defaults={"relative_path": ""})
@views.route("/s/<project_id>/<path:relative_path>")
def directory_structure(project_id: str, relative_path: str) -> Response:
    project = _require_project(project_id)
    return _text_response(_render_tree(project, _settings(), StructureRenderer(), relative_path))


@views.route("/c/<project_id>/", defaults={"relative_path": ""})
@views.route("/c/<project_id>/<path:relative_path>")
def directory_contents(project_id: str, relative_path: str) -> Response:
    project = _require_project(project_id)
    renderer = ContentsRenderer(project.root_path)
    return _text_response(_render_tree(project, _settings(), renderer, relative_path))


def _error_handler(status: int) -> Callable[[Exception], Response]:
    def handle(error: Exception) -> Response:
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, error)
        return _text_response(f"{error}\n", status=status)

    return handle


def create_app(
    settings: GeneralSettings,
    registry: ProjectRegistry,
    static_folder: Optional[str] = "static",
) -> Flask:
    """Create the Flask application serving the given projects.

    Args:
        settings: Process-wide settings, treated as read-only.
        registry: The registered projects, treated as read-only.
        static_folder: Static asset folder, relative to the package.

    Returns:
        The configured application.
    """
    app = Flask("minfileserver", static_folder=static_folder, static_url_path="/static")
    app.config[SETTINGS_KEY] = settings
    app.config[REGISTRY_KEY] = registry

    app.register_blueprint(views)
    app.register_error_handler(UnknownProjectError, _error_handler(400))
    app.register_error_handler(AccessDeniedError, _error_handler(403))
    app.register_error_handler(PathReadError, _error_handler(500))
    return app
