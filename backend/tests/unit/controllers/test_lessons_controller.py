"""
Unit tests for the lessons and health blueprints with a mocked service.
"""

from unittest.mock import Mock

import pytest
from factories.repository_factories import make_example, make_lesson

from solid_guide.core.exceptions import ExampleNotFoundError, LessonNotFoundError
from solid_guide.domain.entities import ExampleRun
from solid_guide.main import create_app
from solid_guide.services.lesson_service import LessonService


@pytest.fixture
def mock_service():
    return Mock(spec=LessonService)


@pytest.fixture
def local_client(mock_service):
    app = create_app({"TESTING": True}, lesson_service=mock_service)
    with app.test_client() as client:
        yield client


class TestLessonsEndpoints:
    def test_list_lessons_returns_200_and_json_array(self, local_client, mock_service):
        mock_service.list_lessons.return_value = [make_lesson("srp"), make_lesson("ocp")]

        response = local_client.get("/lessons")

        assert response.status_code == 200
        data = response.get_json()
        assert [item["code"] for item in data] == ["srp", "ocp"]
        assert "body" not in data[0]

    def test_trailing_slash_is_accepted(self, local_client, mock_service):
        mock_service.list_lessons.return_value = []

        assert local_client.get("/lessons/").status_code == 200

    def test_get_lesson_includes_body(self, local_client, mock_service, sample_lesson):
        mock_service.get_lesson.return_value = sample_lesson

        response = local_client.get("/lessons/srp")

        assert response.status_code == 200
        assert response.get_json()["body"] == sample_lesson.body
        mock_service.get_lesson.assert_called_once_with("srp")

    def test_get_unknown_lesson_returns_404_json(self, local_client, mock_service):
        mock_service.get_lesson.side_effect = LessonNotFoundError("xyz")

        response = local_client.get("/lessons/xyz")

        assert response.status_code == 404
        assert response.get_json() == {"error": "Lesson 'xyz' not found"}

    def test_list_examples(self, local_client, mock_service):
        mock_service.list_examples.return_value = [
            make_example("lsp", "violation"),
            make_example("lsp", "compliance"),
        ]

        response = local_client.get("/lessons/lsp/examples")

        assert response.status_code == 200
        assert response.get_json() == [
            {"kind": "violation", "name": "lsp violation"},
            {"kind": "compliance", "name": "lsp compliance"},
        ]

    def test_run_example_returns_output(self, local_client, mock_service):
        mock_service.run_example.return_value = ExampleRun(
            lesson_code="lsp", kind="violation", output="out\n"
        )

        response = local_client.get("/lessons/lsp/examples/violation")

        assert response.status_code == 200
        assert response.get_json() == {
            "lesson": "lsp",
            "kind": "violation",
            "output": "out\n",
            "error": None,
            "succeeded": True,
        }
        mock_service.run_example.assert_called_once_with("lsp", "violation")

    def test_run_unknown_kind_returns_404(self, local_client, mock_service):
        mock_service.run_example.side_effect = ExampleNotFoundError("lsp", "other")

        response = local_client.get("/lessons/lsp/examples/other")

        assert response.status_code == 404
        assert response.get_json() == {"error": "Lesson 'lsp' has no 'other' example"}

    def test_unknown_route_returns_json_404(self, local_client):
        response = local_client.get("/nowhere")

        assert response.status_code == 404
        assert response.get_json() == {"error": "Not found"}


class TestHealthEndpoint:
    def test_healthy_when_every_lesson_loads(self, local_client, mock_service):
        mock_service.list_lessons.return_value = [
            make_lesson(code) for code in ("srp", "ocp", "lsp", "isp", "dip")
        ]

        response = local_client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy", "lessons": 5}

    def test_degraded_when_lessons_missing(self, local_client, mock_service):
        mock_service.list_lessons.return_value = [make_lesson("srp")]

        response = local_client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "degraded", "lessons": 1}
