class InvalidParameter(ValueError):
    """Raised when a width, rate, capacity, suffix or length is out of range."""
