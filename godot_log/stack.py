"""Stack frame capture and formatting.

Frames are rendered one per line as::

    ClassName.method_name in path/to/file.py(12,5)

A frame without a file name renders ``**``. A method without a declaring
type renders ``UnknownClass``. A frame without a method renders
``UnknownClass.UnknownMethod``: no class name is shown unless the method
itself was resolved.
"""

import builtins
import inspect
import itertools
import traceback
from types import CodeType, FrameType, TracebackType
from typing import Optional

from .interfaces import IStackFrame, MethodInfo, StackFrame

UNKNOWN_FILE = "**"
UNKNOWN_CLASS = "UnknownClass"
UNKNOWN_METHOD = "UnknownMethod"


def format_frame(frame: IStackFrame) -> str:
    """Render a single frame."""
    file_name = frame.file_name or UNKNOWN_FILE
    method = frame.method

    if method is None:
        class_name, method_name = UNKNOWN_CLASS, UNKNOWN_METHOD
    else:
        class_name = method.declaring_type or UNKNOWN_CLASS
        method_name = method.name

    return (
        f"{class_name}.{method_name} in "
        f"{file_name}({frame.line},{frame.column})"
    )


def safe_str(value: object, what: str = "value") -> str:
    """str() of value, or a placeholder if its __str__ fails."""
    try:
        return str(value)
    except Exception:
        return f"<{what} str() failed>"


def describe_error(error: BaseException) -> str:
    """Render an exception as 'TypeName: message'."""
    error_type = type(error)
    name = error_type.__qualname__
    module = error_type.__module__
    if module not in (builtins.__name__, "__main__"):
        name = f"{module}.{name}"

    message = safe_str(error, "exception")
    return f"{name}: {message}" if message else name


def _column(code: CodeType, lasti: int) -> int:
    """1-based column of the instruction at lasti, 0 if unknown."""
    if lasti < 0:
        return 0

    # One position per 2-byte code unit
    positions = itertools.islice(code.co_positions(), lasti // 2, None)
    position = next(positions, None)
    if position is None or position[2] is None:
        return 0
    return position[2] + 1


def _declaring_type(code: CodeType) -> Optional[str]:
    """Name of the class defining the code's function, if any."""
    owner, _, _ = code.co_qualname.rpartition(".")
    if not owner or owner.endswith("<locals>"):
        return None
    return owner.rpartition(".")[2]


def _to_stack_frame(
    frame: FrameType, line: Optional[int], lasti: int
) -> StackFrame:
    code = frame.f_code
    return StackFrame(
        file_name=code.co_filename or None,
        line=line or 0,
        column=_column(code, lasti),
        method=MethodInfo(
            name=code.co_name,
            declaring_type=_declaring_type(code)
        )
    )


def capture_stack(skip: int = 0) -> list[StackFrame]:
    """Capture the caller's stack, outermost call first.

    skip drops that many innermost frames above the caller.
    """
    caller = inspect.currentframe()
    # Drop capture_stack itself, then the requested frames
    for _ in range(skip + 1):
        if caller is None:
            return []
        caller = caller.f_back
    if caller is None:
        return []

    frames = [
        _to_stack_frame(frame, line, frame.f_lasti)
        for frame, line in traceback.walk_stack(caller)
    ]
    frames.reverse()
    return frames


def frames_from_traceback(tb: Optional[TracebackType]) -> list[StackFrame]:
    """Frames of a traceback, outermost call first."""
    frames = []
    while tb is not None:
        frames.append(_to_stack_frame(tb.tb_frame, tb.tb_lineno, tb.tb_lasti))
        tb = tb.tb_next
    return frames
