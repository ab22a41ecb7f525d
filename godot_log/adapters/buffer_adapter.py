"""In-memory capture adapter."""

import io
from ..interfaces import ILogSink


class BufferAdapter:
    """Adapter recording every message, one line each."""

    def __init__(self):
        self.buffer = io.StringIO()
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        """Append message and a line terminator."""
        self.messages.append(message)
        self.buffer.write(message + "\n")

    def getvalue(self) -> str:
        """Everything written so far."""
        return self.buffer.getvalue()

    def clear(self) -> None:
        """Forget recorded output."""
        self.buffer = io.StringIO()
        self.messages.clear()
