"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class NavigationError(BaseAppError):
    """Exception raised when a path cannot be placed inside the sandbox."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
