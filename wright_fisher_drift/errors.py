# wright_fisher_drift/errors.py

class DriftError(Exception):
    """Base class for exceptions in this package."""
    pass

class InvalidParameter(DriftError, ValueError):
    """Raised when simulation parameters fall outside their allowed ranges."""
    pass
