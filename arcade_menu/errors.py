"""Custom exceptions for the arcade menu."""


class MenuError(Exception):
    """Base exception for arcade menu errors."""


class CatalogError(MenuError):
    """Raised when the game catalog cannot be read."""

    def __init__(self, path, cause=None):
        self.path = path
        self.cause = cause
        message = f"Failed to load game catalog {path}"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)


class AssetError(MenuError):
    """Raised when the header image cannot be built."""

    def __init__(self, path, cause=None):
        self.path = path
        self.cause = cause
        message = f"Failed to load header image {path}"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)


class SessionError(MenuError):
    """Raised when a menu session is driven out of order."""
