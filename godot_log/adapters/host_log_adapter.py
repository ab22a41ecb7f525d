"""Host warning/error adapter (stdlib logging)."""

import logging
from typing import Optional
from ..interfaces import ILogSink
from ..logger import host_log

# Table-driven channel levels
CHANNEL_LEVELS = {
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


class HostLogAdapter:
    """Adapter for the host push-warning and push-error channels."""

    def __init__(
        self, channel: str, logger: Optional[logging.Logger] = None
    ):
        # Validate channel (early return)
        if channel not in CHANNEL_LEVELS:
            raise ValueError(f"unknown host channel: {channel!r}")

        self.channel = channel
        self.level = CHANNEL_LEVELS[channel]
        self.logger = logger

    def __call__(self, message: str) -> None:
        """Push message to the host logger."""
        # Passed as a literal so '%' in messages is never interpolated
        logger = self.logger or host_log
        logger.log(self.level, "%s", message)
