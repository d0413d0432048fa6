"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, current_app, jsonify

from ..principles import LESSON_CODES

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.route("", methods=["GET"])
@health_bp.route("/", methods=["GET"])
def health_check():
    """
    Report whether the packaged lessons can be read.

    Returns:
        JSON response with:
        - status: "healthy" if every lesson loads, "degraded" otherwise
        - lessons: number of lessons found

    Status codes:
        200: Always (a missing lesson does not make the service unavailable)
    """
    lessons = current_app.extensions["lesson_service"].list_lessons()
    status = "healthy" if len(lessons) == len(LESSON_CODES) else "degraded"

    logger.info(
        "Health check",
        extra={"context": {"endpoint": "/health", "status": status, "lessons": len(lessons)}},
    )
    return jsonify({"status": status, "lessons": len(lessons)}), 200
