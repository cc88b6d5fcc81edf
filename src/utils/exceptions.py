"""Custom exception classes."""


class BackendError(Exception):
    """Raised when a query against the hosted database fails."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConcurrentUpdateError(BackendError):
    """Raised when the settings row changed between read and write."""
    pass


class ConfigurationError(Exception):
    """Raised when required backend settings are missing."""
    pass
