class InvalidArgumentError(ValueError):
    """Raised when a query names the wrong number of countries or unknown ones."""
