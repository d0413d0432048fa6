"""
Domain entities - Pure catalog data, no framework dependencies.

Following SOLID principles:
- Single Responsibility: Each entity represents one catalog concept
- Open/Closed: New lessons are new data, not new entity types
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

EXAMPLE_KINDS = ("violation", "compliance")


@dataclass
class Lesson:
    """Domain entity representing one principle's markdown lesson.

    This is the pure catalog representation, independent of:
    - Where the markdown is stored (package data)
    - How it is served (Flask, CLI)
    """

    code: str = ""
    title: str = ""
    principle: str = ""
    summary: str = ""
    body: str = field(default="", repr=False)

    def __post_init__(self):
        """Validate catalog rules."""
        if not self.code:
            raise ValueError("Lesson code is required")
        if self.code != self.code.lower():
            raise ValueError("Lesson code must be lowercase")
        if not self.title:
            raise ValueError("Lesson title is required")

    def to_dict(self, include_body: bool = False) -> dict:
        data = {
            "code": self.code,
            "title": self.title,
            "principle": self.principle,
            "summary": self.summary,
        }
        if include_body:
            data["body"] = self.body
        return data


@dataclass
class Example:
    """Domain entity for a runnable violation or compliance demo."""

    lesson_code: str = ""
    kind: str = ""
    name: str = ""
    func: Optional[Callable[[], None]] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        """Validate catalog rules."""
        if not self.lesson_code:
            raise ValueError("Lesson code is required")
        if self.kind not in EXAMPLE_KINDS:
            raise ValueError(f"Example kind must be one of {', '.join(EXAMPLE_KINDS)}")
        if self.func is None:
            raise ValueError("Example callable is required")

    def to_dict(self) -> dict:
        return {"kind": self.kind, "name": self.name}


@dataclass
class ExampleRun:
    """Captured console output of one demo execution."""

    lesson_code: str
    kind: str
    output: str = ""
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "lesson": self.lesson_code,
            "kind": self.kind,
            "output": self.output,
            "error": self.error,
            "succeeded": self.succeeded,
        }
