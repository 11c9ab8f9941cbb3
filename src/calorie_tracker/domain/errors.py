"""Error types shared across the tracker."""


class ValidationError(ValueError):
    """Raised when user input is rejected before any write happens."""


class NotFoundError(LookupError):
    """Raised when a stored record does not exist."""


class StoreError(RuntimeError):
    """Raised when the persistence layer fails."""


class LoadError(RuntimeError):
    """Raised when the batched initial load fails as a whole."""
