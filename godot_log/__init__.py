"""Logging facade for a game engine's scripting layer."""

from .errors import AssertionFailure
from .gd_log import DEFAULT_SINKS, GDLog
from .interfaces import (
    ILog,
    ILogSink,
    LogSinks,
    IMethodInfo,
    IStackFrame,
    MethodInfo,
    StackFrame
)
from .stack import (
    capture_stack,
    describe_error,
    format_frame,
    frames_from_traceback,
    safe_str
)

__all__ = [
    'AssertionFailure',
    'DEFAULT_SINKS',
    'GDLog',
    'ILog',
    'ILogSink',
    'LogSinks',
    'IMethodInfo',
    'IStackFrame',
    'MethodInfo',
    'StackFrame',
    'capture_stack',
    'describe_error',
    'format_frame',
    'frames_from_traceback',
    'safe_str',
]
