class CircalError(Exception):
    """Base error."""

class InvalidMonthIndexError(CircalError, ValueError):
    """Raised when a month index falls outside 0..11."""

class InvalidWeekdayIndexError(CircalError, ValueError):
    """Raised when a weekday index falls outside 0..6 (0=Sunday)."""

class InvalidDateError(CircalError, TypeError):
    """Raised when a date operation receives something that is not a date."""

class UnknownPaletteError(CircalError, KeyError):
    """Raised when a palette name is not registered."""
