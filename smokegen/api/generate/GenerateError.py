"""Generate error."""


class GenerateError(RuntimeError):
    """Raised when a test script cannot be written."""
