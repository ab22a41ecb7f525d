"""Stdout print adapter."""

import sys
from typing import Optional, TextIO
from ..interfaces import ILogSink


class StdoutAdapter:
    """Adapter for the host print channel."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def __call__(self, message: str) -> None:
        """Write message to stdout."""
        # Resolved per call so redirected stdout is honored
        print(message, file=self.stream or sys.stdout, flush=True)
