import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify

from .controllers.health_controller import health_bp
from .controllers.lessons_controller import lessons_bp
from .core import config
from .core.exceptions import ExampleNotFoundError, LessonNotFoundError, SolidGuideError
from .core.logging_config import setup_logging
from .services.lesson_service import LessonService, build_lesson_service

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Dict[str, Any]] = None,
    lesson_service: Optional[LessonService] = None,
) -> Flask:
    """Application factory.

    Args:
        settings: overrides applied on top of the environment settings
        lesson_service: service to serve lessons from (defaults to the
            packaged lessons and the stdout-capturing runner)
    """
    app = Flask(__name__)
    app.config.update(config.load_settings())
    if settings:
        app.config.update(settings)
    app.json.sort_keys = False

    setup_logging(
        app,
        log_level=app.config["LOG_LEVEL"],
        log_to_file=app.config["LOG_TO_FILE"],
        use_json_format=app.config["LOG_JSON"],
        log_dir=app.config["LOG_DIR"],
    )
    config.log_config(
        {k: app.config[k] for k in ("LOG_LEVEL", "LOG_JSON", "HOST", "PORT")}
    )

    app.extensions["lesson_service"] = lesson_service or build_lesson_service()

    app.register_blueprint(lessons_bp)
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    return app


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(LessonNotFoundError)
    @app.errorhandler(ExampleNotFoundError)
    def handle_not_found(error: SolidGuideError):
        logger.info(
            "Lookup failed",
            extra={"context": {"error": str(error)}},
        )
        return jsonify({"error": str(error)}), 404

    @app.errorhandler(404)
    def handle_unknown_route(error):
        return jsonify({"error": "Not found"}), 404
