"""Domain error taxonomy, mapped to HTTP statuses at the API boundary."""


class ArtVaultError(Exception):
    """Base class for expected, user-facing failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ArtVaultError):
    """Input is missing or out of range."""


class AuthenticationError(ArtVaultError):
    """Caller is not authenticated."""


class PermissionDeniedError(ArtVaultError):
    """Caller is authenticated but does not own the record."""


class NotFoundError(ArtVaultError):
    """Requested record does not exist."""


class ConflictError(ArtVaultError):
    """Record collides with existing data."""
