class SunpathError(Exception):
    """Base error."""

class InvalidInputError(SunpathError, ValueError):
    """Raised by caller-side validation when user input is out of range or malformed."""

class UnknownProfileError(SunpathError, KeyError):
    """Raised when a sampling profile name is not registered."""
