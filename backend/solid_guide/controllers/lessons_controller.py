"""
Lessons controller - read-only JSON endpoints for lessons and their demos.
"""

import logging

from flask import Blueprint, current_app, jsonify

from ..services.lesson_service import LessonService

logger = logging.getLogger(__name__)

lessons_bp = Blueprint("lessons", __name__, url_prefix="/lessons")


def _get_service() -> LessonService:
    return current_app.extensions["lesson_service"]


@lessons_bp.route("", methods=["GET"])
@lessons_bp.route("/", methods=["GET"])
def list_lessons():
    """
    List every lesson in SOLID order.

    Returns:
        200 JSON array of {code, title, principle, summary}
    """
    lessons = _get_service().list_lessons()
    return jsonify([lesson.to_dict() for lesson in lessons]), 200


@lessons_bp.route("/<code>", methods=["GET"])
def get_lesson(code: str):
    """
    Get one lesson including its markdown body.

    Status codes:
        200: lesson found
        404: unknown lesson code (handled by the app error handler)
    """
    lesson = _get_service().get_lesson(code)
    return jsonify(lesson.to_dict(include_body=True)), 200


@lessons_bp.route("/<code>/examples", methods=["GET"])
def list_examples(code: str):
    examples = _get_service().list_examples(code)
    return jsonify([example.to_dict() for example in examples]), 200


@lessons_bp.route("/<code>/examples/<kind>", methods=["GET"])
def run_example(code: str, kind: str):
    """
    Run a violation or compliance demo and return its console output.

    Example response:
        {"lesson": "lsp", "kind": "violation", "succeeded": true, "error": null,
         "output": "Wrote 5 characters to notes.txt\\nError: Cannot write to a read-only file\\n"}
    """
    run = _get_service().run_example(code, kind)
    return jsonify(run.to_dict()), 200
