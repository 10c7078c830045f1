from __future__ import annotations

from typing import Any, Optional

from flask import Flask, redirect, render_template, request, url_for

from showcase import REGISTRY_KEY, bp as api_bp, current_controller, take_scroll_anchor
from showcase.config.settings import Settings, get_settings
from showcase.logging_config import setup_logging
from showcase.sessions import ControllerRegistry, ControllerFactory, make_controller_factory


def create_app(
    settings: Optional[Settings] = None,
    controller_factory: Optional[ControllerFactory] = None,
) -> Flask:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__, template_folder="frontend/templates", static_folder="frontend/static")
    app.secret_key = settings.secret_key
    app.extensions[REGISTRY_KEY] = ControllerRegistry(
        controller_factory or make_controller_factory(settings),
        max_sessions=settings.max_sessions,
    )

    # JSON 接口（供页面脚本调用）
    app.register_blueprint(api_bp)

    @app.route("/", methods=["GET"])
    def index() -> Any:
        controller = current_controller()
        anchor = take_scroll_anchor(controller)
        return render_template(
            "index.html",
            view=controller.view(),
            scroll_to=anchor,
        )

    @app.post("/search")
    def search() -> Any:
        current_controller().set_search_term(request.form.get("q", ""))
        return redirect(url_for("index"))

    @app.post("/language")
    def select_language() -> Any:
        current_controller().select_language(request.form.get("language"))
        return redirect(url_for("index"))

    @app.post("/language-picker")
    def toggle_language_picker() -> Any:
        current_controller().toggle_language_picker()
        return redirect(url_for("index"))

    @app.post("/language-picker/close")
    def close_language_picker() -> Any:
        current_controller().close_language_picker()
        return redirect(url_for("index"))

    @app.post("/sort")
    def toggle_sort() -> Any:
        current_controller().toggle_sort()
        return redirect(url_for("index"))

    @app.post("/page/<int:page>")
    def go_to_page(page: int) -> Any:
        controller = current_controller()
        if controller.go_to_page(page):
            anchor = take_scroll_anchor(controller)
            return redirect(url_for("index", _anchor=anchor))
        return redirect(url_for("index"))

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, host="0.0.0.0", port=5000)
