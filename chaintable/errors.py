class InvalidArgument(ValueError):
    """Raised when a table is constructed with an unusable capacity."""
