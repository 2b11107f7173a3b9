class PhpDateError(Exception):
    """Base error."""

class InvalidArgumentError(PhpDateError, ValueError):
    """Raised for a wrong pattern type, an unrepresentable instant or an unknown zone."""
