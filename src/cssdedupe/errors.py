"""Exception types raised by cssdedupe."""


class CssDedupeError(Exception):
    """Base class for all cssdedupe errors."""


class ParseError(CssDedupeError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class TransformError(CssDedupeError):
    """Raised when a tree cannot be traversed at all."""
