"""Adapter implementations for log output."""

from .stdout_adapter import StdoutAdapter
from .host_log_adapter import HostLogAdapter
from .buffer_adapter import BufferAdapter

__all__ = [
    'StdoutAdapter',
    'HostLogAdapter',
    'BufferAdapter',
]
