"""
Central pytest configuration for the SOLID guide tests.

This file provides common fixtures, test markers, and setup
for both unit and integration tests following SOLID principles.
"""

import logging
import os

import pytest

# Keep tests independent of any developer .env
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["LOG_TO_FILE"] = "0"
os.environ["DIP_DATABASE_URL"] = "sqlite:///:memory:"

# Import markers and collection hooks from config modules
from config.markers import *  # noqa: E402,F401,F403

from solid_guide.domain.entities import Lesson  # noqa: E402
from solid_guide.main import create_app  # noqa: E402
from solid_guide.repositories.lesson_repository import LessonRepository  # noqa: E402
from solid_guide.services.example_runner import ExampleRunner  # noqa: E402
from solid_guide.services.lesson_service import LessonService  # noqa: E402


@pytest.fixture(autouse=True)
def clean_logging():
    """Restore root logger handlers after each test."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    yield

    # Only drop what setup_logging added; pytest manages its own capture handlers
    for handler in root_logger.handlers[:]:
        if handler in original_handlers or type(handler).__module__.startswith("_pytest"):
            continue
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def sample_lesson():
    """A lesson entity that does not depend on packaged markdown."""
    return Lesson(
        code="srp",
        title="Single Responsibility Principle (SRP)",
        principle="Single Responsibility Principle",
        summary="A class should have one, and only one, reason to change.",
        body="# Single Responsibility Principle (SRP)\n",
    )


@pytest.fixture
def lesson_repository():
    return LessonRepository()


@pytest.fixture
def lesson_service(lesson_repository):
    """Service wired with the real repository and runner."""
    return LessonService(lesson_repository, ExampleRunner())


@pytest.fixture
def app(lesson_service):
    """Create application for testing."""
    app = create_app({"TESTING": True}, lesson_service=lesson_service)
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    with app.test_client() as client:
        yield client



@pytest.fixture
def broken_lessons_package(tmp_path, monkeypatch):
    """Importable copy of the packaged lessons with isp.md made undecodable."""
    from importlib import resources

    name = f"broken_lessons_{tmp_path.name}".replace("-", "_")
    package_dir = tmp_path / name
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("")
    source = resources.files("solid_guide.lessons")
    for code in ("srp", "ocp", "lsp", "isp", "dip"):
        content = source.joinpath(f"{code}.md").read_bytes()
        (package_dir / f"{code}.md").write_bytes(content)
    (package_dir / "isp.md").write_bytes(b"# ISP\n\n\xff\xfe bad bytes\n")

    monkeypatch.syspath_prepend(str(tmp_path))
    return name
