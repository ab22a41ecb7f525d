"""Interface definitions for log adapters."""

from .i_log import ILog
from .i_log_sink import ILogSink, LogSinks
from .i_stack_frame import IMethodInfo, IStackFrame, MethodInfo, StackFrame

__all__ = [
    'ILog',
    'ILogSink',
    'LogSinks',
    'IMethodInfo',
    'IStackFrame',
    'MethodInfo',
    'StackFrame',
]
