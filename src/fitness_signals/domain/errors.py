"""Domain errors."""


class InvalidParameterError(ValueError):
    """Raised when a window, threshold or date value cannot be used."""
