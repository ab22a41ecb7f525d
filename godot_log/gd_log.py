"""Default log, writing to the host print, warning and error channels."""

import inspect
from typing import Callable, Iterable, Optional, TypeVar

from .adapters import HostLogAdapter, StdoutAdapter
from .errors import AssertionFailure
from .interfaces import IStackFrame, LogSinks
from .stack import capture_stack, describe_error, format_frame, safe_str

T = TypeVar("T")

# Host primitives: print to stdout, push warnings/errors to the host logger
DEFAULT_SINKS = LogSinks(
    print_sink=StdoutAdapter(),
    warn_sink=HostLogAdapter("warning"),
    error_sink=HostLogAdapter("error")
)


class GDLog:
    """Log which outputs to the host print, warning and error channels.

    Warnings and errors are also printed, since the host's warning and
    error channels don't always show up in the output when debugging.
    """

    def __init__(self, prefix: str, sinks: Optional[LogSinks] = None):
        self._prefix = prefix
        self._sinks = sinks if sinks is not None else DEFAULT_SINKS

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def sinks(self) -> LogSinks:
        return self._sinks

    def _format(self, message: str) -> str:
        return f"{self._prefix}: {message}"

    def print(self, message: str) -> None:
        """Print the message to the log."""
        self._sinks.print_sink(self._format(message))

    def print_stack(
        self, trace: Optional[Iterable[IStackFrame]] = None
    ) -> None:
        """Print each frame of trace, outermost call first.

        Without a trace, the caller's current stack is printed.
        """
        if trace is None:
            trace = capture_stack(skip=1)

        for frame in trace:
            self.print(format_frame(frame))

    def print_error(self, error: BaseException) -> None:
        """Print an exception on the error path."""
        self.error("An error occurred.")
        self.error(describe_error(error))

    def warn(self, message: str) -> None:
        """Add a warning message to the log."""
        formatted = self._format(message)
        self._sinks.print_sink(formatted)
        self._sinks.warn_sink(formatted)

    def error(self, message: str) -> None:
        """Add an error message to the log."""
        formatted = self._format(message)
        self._sinks.print_sink(formatted)
        self._sinks.error_sink(formatted)

    def assert_that(self, condition: bool, message: str) -> None:
        """Assert condition is true, or else log and raise AssertionFailure."""
        if condition:
            return

        self.error(message)
        caller = inspect.currentframe()
        caller = caller.f_back if caller is not None else None
        if caller is None:
            raise AssertionFailure(message)
        raise AssertionFailure(
            message, file=caller.f_code.co_filename, line=caller.f_lineno
        )

    def run(
        self,
        callback: Callable[[], T],
        on_error: Optional[Callable[[Exception], None]] = None
    ) -> T:
        """Run callback; log, notify on_error and re-raise if it fails."""
        try:
            return callback()
        except Exception as e:
            self.print_error(e)
            if on_error is not None:
                on_error(e)
            raise

    def always(self, callback: Callable[[], T], fallback: T) -> T:
        """Run callback; on failure warn and return fallback instead."""
        try:
            return callback()
        except Exception as e:
            self.warn(
                "An error occurred. Using fallback value "
                f"`{safe_str(fallback)}`."
            )
            self.warn(describe_error(e))
            return fallback
