import io
import logging
import threading
from contextlib import redirect_stdout

from ..domain.entities import Example, ExampleRun
from ..domain.interfaces import IExampleRunner

logger = logging.getLogger(__name__)

# redirect_stdout swaps the process-wide sys.stdout; one capture at a time
_capture_lock = threading.Lock()


class ExampleRunner(IExampleRunner):
    """Runs a demo and captures everything it prints."""

    def run(self, example: Example) -> ExampleRun:
        buffer = io.StringIO()
        error = None
        try:
            with _capture_lock, redirect_stdout(buffer):
                example.func()
        except Exception as e:
            # A demo crashing is reported back to the reader, not raised
            logger.error(
                "Example raised an unexpected error",
                extra={
                    "context": {
                        "lesson": example.lesson_code,
                        "kind": example.kind,
                        "error": str(e),
                    }
                },
                exc_info=True,
            )
            error = f"{type(e).__name__}: {e}"

        logger.debug(
            "Example executed",
            extra={
                "context": {
                    "lesson": example.lesson_code,
                    "kind": example.kind,
                    "succeeded": error is None,
                }
            },
        )
        return ExampleRun(
            lesson_code=example.lesson_code,
            kind=example.kind,
            output=buffer.getvalue(),
            error=error,
        )
