"""
Lesson service - catalog queries and demo execution.

Following SOLID principles:
- Depends on ILessonReader and IExampleRunner, never on concrete classes
- Lookup failures surface as domain errors the outer layers translate
"""

import logging
from typing import Callable, List, Optional

from ..core.exceptions import ExampleNotFoundError, LessonNotFoundError
from ..domain.entities import Example, ExampleRun, Lesson
from ..domain.interfaces import IExampleRunner, ILessonReader
from ..principles import get_examples

logger = logging.getLogger(__name__)


class LessonService:
    def __init__(
        self,
        reader: ILessonReader,
        runner: IExampleRunner,
        examples_provider: Optional[Callable[[str], List[Example]]] = None,
    ):
        self.reader = reader
        self.runner = runner
        self.examples_provider = examples_provider or get_examples

    def list_lessons(self) -> List[Lesson]:
        return self.reader.list_all()

    def get_lesson(self, code: str) -> Lesson:
        """Get a lesson by code.

        Raises:
            LessonNotFoundError: no lesson matches the code
        """
        lesson = self.reader.get_by_code(code)
        if lesson is None:
            raise LessonNotFoundError(code)
        return lesson

    def list_examples(self, code: str) -> List[Example]:
        lesson = self.get_lesson(code)
        return self.examples_provider(lesson.code)

    def run_example(self, code: str, kind: str) -> ExampleRun:
        """Run the lesson's example of the given kind.

        Raises:
            LessonNotFoundError: no lesson matches the code
            ExampleNotFoundError: the lesson has no example of that kind
        """
        kind = (kind or "").strip().lower()
        example = next(
            (e for e in self.list_examples(code) if e.kind == kind),
            None,
        )
        if example is None:
            raise ExampleNotFoundError(code, kind)

        logger.info(
            f"Running {example.lesson_code} {example.kind} example",
            extra={"context": {"lesson": example.lesson_code, "kind": example.kind}},
        )
        return self.runner.run(example)


def build_lesson_service() -> LessonService:
    """Wire the service with its default implementations."""
    from ..repositories.lesson_repository import LessonRepository
    from .example_runner import ExampleRunner

    return LessonService(LessonRepository(), ExampleRunner())
