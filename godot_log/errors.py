"""Log errors."""


class AssertionFailure(AssertionError):
    """Raised when a log assertion fails."""

    def __init__(
        self, message: str, file: str = "<unknown>", line: int = -1
    ):
        super().__init__(f"{file}:{line} {message}")
        self.message = message
        self.file = file
        self.line = line
