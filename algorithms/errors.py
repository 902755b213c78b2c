class InvalidInput(ValueError):
    """Raised when a calculation receives values it cannot work with."""


class InvalidResult(ValueError):
    """Raised when a calculation produces a value that must not be shown."""
