"""
Abstract interfaces following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Example, ExampleRun, Lesson


class ILessonReader(ABC):
    """Interface for lesson read operations - Interface Segregation Principle."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Lesson]:
        """Get lesson by code, None when unknown."""
        pass

    @abstractmethod
    def list_all(self) -> List[Lesson]:
        """Get all lessons in SOLID order."""
        pass


class IExampleRunner(ABC):
    """Interface for executing a demo and capturing what it prints."""

    @abstractmethod
    def run(self, example: Example) -> ExampleRun:
        """Run the example and return its captured output."""
        pass
