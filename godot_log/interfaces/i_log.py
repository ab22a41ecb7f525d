"""Log interface (adapter pattern).

A debug implementation might print messages to the console, while a
production implementation might write them to a file.
"""

from typing import Callable, Iterable, Optional, Protocol, TypeVar

from .i_stack_frame import IStackFrame

T = TypeVar("T")


class ILog(Protocol):
    """Interface for outputting messages produced during runtime."""

    def print(self, message: str) -> None:
        """Print the message to the log."""
        ...

    def print_stack(
        self, trace: Optional[Iterable[IStackFrame]] = None
    ) -> None:
        """Print a stack trace, one line per frame."""
        ...

    def print_error(self, error: BaseException) -> None:
        """Print an exception."""
        ...

    def warn(self, message: str) -> None:
        """Add a warning message to the log."""
        ...

    def error(self, message: str) -> None:
        """Add an error message to the log."""
        ...

    def assert_that(self, condition: bool, message: str) -> None:
        """Assert condition is true, or else log and raise."""
        ...

    def run(
        self,
        callback: Callable[[], T],
        on_error: Optional[Callable[[Exception], None]] = None
    ) -> T:
        """Run callback, returning its result.

        If it fails, the log outputs an error, on_error is invoked and the
        error is re-raised.
        """
        ...

    def always(self, callback: Callable[[], T], fallback: T) -> T:
        """Run callback, returning its result or fallback if it fails.

        Failures are logged as warnings and absorbed.
        """
        ...
