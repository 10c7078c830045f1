from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request, session

from .core.controller import RepositoryListController
from .render.renderer import ViewModelRenderer
from .sessions import ControllerRegistry

bp = Blueprint("showcase_api", __name__, url_prefix="/api")

REGISTRY_KEY = "showcase.registry"
_SESSION_KEY = "sid"


def get_registry() -> ControllerRegistry:
    return current_app.extensions[REGISTRY_KEY]


def current_controller() -> RepositoryListController:
    """Controller bound to the requesting browser session."""

    sid = session.get(_SESSION_KEY)
    if not sid:
        sid = uuid.uuid4().hex
        session[_SESSION_KEY] = sid
    return get_registry().get(sid)


def take_scroll_anchor(controller: RepositoryListController) -> Optional[str]:
    renderer = controller.renderer
    if isinstance(renderer, ViewModelRenderer):
        return renderer.take_scroll_anchor()
    return None


def _view_response(controller: RepositoryListController) -> Any:
    return jsonify({
        "view": controller.view().to_dict(),
        "scroll_to": take_scroll_anchor(controller),
    })


def _payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@bp.get("/view")
def get_view() -> Any:
    return _view_response(current_controller())


@bp.post("/view/search")
def search() -> Any:
    term = _payload().get("term", "")
    if term is not None and not isinstance(term, str):
        return jsonify({"error": "term 必须是字符串"}), 400
    controller = current_controller()
    controller.set_search_term(term)
    return _view_response(controller)


@bp.post("/view/language")
def select_language() -> Any:
    language = _payload().get("language")
    if language is not None and not isinstance(language, str):
        return jsonify({"error": "language 必须是字符串或 null"}), 400
    controller = current_controller()
    controller.select_language(language)
    return _view_response(controller)


@bp.post("/view/language-picker")
def language_picker() -> Any:
    """
    切换语言弹出列表：
    - 未提供 open 时切换当前状态
    - open == false 等同于点击外部区域关闭
    """
    wanted = _payload().get("open")
    if wanted is not None and not isinstance(wanted, bool):
        return jsonify({"error": "open 必须是布尔值"}), 400
    controller = current_controller()
    is_open = controller.state.language_picker_open
    if wanted is None or wanted != is_open:
        if wanted is False:
            controller.close_language_picker()
        else:
            controller.toggle_language_picker()
    return _view_response(controller)


@bp.post("/view/sort")
def toggle_sort() -> Any:
    controller = current_controller()
    controller.toggle_sort()
    return _view_response(controller)


@bp.post("/view/page")
def go_to_page() -> Any:
    page = _payload().get("page")
    # bool is an int subclass
    if isinstance(page, bool) or not isinstance(page, int):
        return jsonify({"error": "page 必须是整数"}), 400
    controller = current_controller()
    controller.go_to_page(page)
    return _view_response(controller)


@bp.get("/languages")
def list_languages() -> Any:
    controller = current_controller()
    options = controller.view().language_picker.options[1:]
    items = [
        {"language": o.value, "color": o.color, "icon": o.icon}
        for o in options
    ]
    return jsonify({"items": items, "total": len(items)})
