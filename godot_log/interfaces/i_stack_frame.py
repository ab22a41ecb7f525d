"""Stack frame interface (adapter pattern)."""

from dataclasses import dataclass
from typing import Optional, Protocol


class IMethodInfo(Protocol):
    """Method executing in a frame."""

    @property
    def declaring_type(self) -> Optional[str]:
        """Name of the type declaring the method, if known."""
        ...

    @property
    def name(self) -> str:
        """Method name."""
        ...


class IStackFrame(Protocol):
    """One entry of a captured call stack."""

    @property
    def file_name(self) -> Optional[str]:
        ...

    @property
    def line(self) -> int:
        """1-based line number."""
        ...

    @property
    def column(self) -> int:
        """1-based column number, 0 if unknown."""
        ...

    @property
    def method(self) -> Optional[IMethodInfo]:
        ...


@dataclass(frozen=True)
class MethodInfo:
    """Method name plus the type declaring it, when known."""
    name: str
    declaring_type: Optional[str] = None


@dataclass(frozen=True)
class StackFrame:
    """Source location and method of a single frame."""
    file_name: Optional[str]
    line: int
    column: int = 0
    method: Optional[MethodInfo] = None
