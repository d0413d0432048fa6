import logging
from importlib import resources
from typing import List, Optional, Tuple

from ..domain.entities import Lesson
from ..domain.interfaces import ILessonReader
from ..principles import LESSON_CODES, PRINCIPLE_NAMES

logger = logging.getLogger(__name__)

LESSONS_PACKAGE = "solid_guide.lessons"


class LessonRepository(ILessonReader):
    """Reads the markdown lessons shipped as package data."""

    def __init__(self, package: str = LESSONS_PACKAGE):
        self.package = package

    def get_by_code(self, code: str) -> Optional[Lesson]:
        code = (code or "").strip().lower()
        if code not in LESSON_CODES:
            return None
        body = self._read_markdown(code)
        if body is None:
            return None
        return self._to_domain(code, body)

    def list_all(self) -> List[Lesson]:
        lessons = []
        for code in LESSON_CODES:
            lesson = self.get_by_code(code)
            if lesson is not None:
                lessons.append(lesson)
        return lessons

    def _read_markdown(self, code: str) -> Optional[str]:
        resource = resources.files(self.package).joinpath(f"{code}.md")
        if not resource.is_file():
            logger.warning(
                "Lesson markdown missing",
                extra={"context": {"lesson": code, "package": self.package}},
            )
            return None
        try:
            return resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Lesson markdown unreadable",
                extra={
                    "context": {
                        "lesson": code,
                        "package": self.package,
                        "error": str(e),
                    }
                },
                exc_info=True,
            )
            return None

    def _to_domain(self, code: str, body: str) -> Lesson:
        title, summary = parse_heading_and_summary(body)
        return Lesson(
            code=code,
            title=title or PRINCIPLE_NAMES[code],
            principle=PRINCIPLE_NAMES[code],
            summary=summary,
            body=body,
        )


def parse_heading_and_summary(markdown: str) -> Tuple[str, str]:
    """Return the first level-1 heading and the first prose paragraph after it.

    Fenced code blocks, headings and list items never count as prose.
    """
    title = ""
    paragraph: List[str] = []
    in_fence = False

    for raw in markdown.splitlines():
        line = raw.strip()
        if line.startswith("```"):
            in_fence = not in_fence
            if paragraph:
                break
            continue
        if in_fence:
            continue
        if not title:
            if line.startswith("# "):
                title = line[2:].strip()
            continue
        if not line:
            if paragraph:
                break
            continue
        if line.startswith(("#", "-", "*", ">", "|")):
            if paragraph:
                break
            continue
        paragraph.append(line)

    return title, " ".join(paragraph)
