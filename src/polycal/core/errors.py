class PolycalError(Exception):
    """Base error."""

class DateRangeError(PolycalError, ValueError):
    """Raised when a year, month or day lies outside what a calendar accepts."""

class UnsupportedCalendarError(PolycalError, ValueError):
    """Raised when a calendar tag is not part of the catalog."""

class VerificationError(PolycalError):
    """Raised by strict verification when a documented fact does not hold."""
