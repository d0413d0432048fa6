"""
Custom exceptions for the SOLID guide.
Following SOLID principles - centralized error handling.
"""


class SolidGuideError(Exception):
    """Base class for every error raised by the guide."""

    pass


class LessonNotFoundError(SolidGuideError):
    """
    Exception raised when a lesson code does not match any packaged lesson.
    Mapped to HTTP 404 by the web layer and to a CLI error by the commands.
    """

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Lesson '{code}' not found")


class ExampleNotFoundError(SolidGuideError):
    """Exception raised when a lesson has no example of the requested kind."""

    def __init__(self, code: str, kind: str):
        self.code = code
        self.kind = kind
        super().__init__(f"Lesson '{code}' has no '{kind}' example")


class UnsupportedOperationError(SolidGuideError):
    """
    Raised by snippet classes asked to do something their type cannot do,
    e.g. writing to a read-only file or a guest deleting content.
    """

    pass


class UnsupportedShapeError(SolidGuideError):
    """Raised by the closed-for-extension area calculator on unknown shapes."""

    pass
