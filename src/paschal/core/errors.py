class PaschalError(Exception):
    """Base error."""

class InvalidDateError(PaschalError, ValueError):
    """Raised when a (year, month, day) triple is not a date in the target calendar."""

class OutOfRangeError(PaschalError, OverflowError):
    """Raised when a computed or converted date falls outside the supported year range."""
