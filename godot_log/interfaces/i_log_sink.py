"""Log sink interface (adapter pattern)."""

from dataclasses import dataclass
from typing import Protocol


class ILogSink(Protocol):
    """Interface for a single output channel."""

    def __call__(self, message: str) -> None:
        """Write one formatted message."""
        ...


@dataclass(frozen=True)
class LogSinks:
    """Output channels a log writes to.

    Passed to each log explicitly, so separate logs (and separate tests)
    never share redirected output. Sinks are not synchronized; callers
    sharing one sink across threads must serialize access themselves.
    """
    print_sink: ILogSink
    warn_sink: ILogSink
    error_sink: ILogSink

    @classmethod
    def capture(cls) -> "LogSinks":
        """Build sinks that record every message in memory."""
        from ..adapters import BufferAdapter

        return cls(
            print_sink=BufferAdapter(),
            warn_sink=BufferAdapter(),
            error_sink=BufferAdapter()
        )
