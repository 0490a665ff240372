"""Exception hierarchy for the endeavour library."""

from __future__ import annotations

from pathlib import Path


class EndeavourError(Exception):
    """Base exception for all endeavour errors."""

    pass


class ConfigurationError(EndeavourError):
    """Raised when the upload configuration is incomplete."""

    pass


class MissingFieldError(ConfigurationError):
    """Raised when a required configuration field is empty.

    The field attribute holds the name of the first unset field.
    """

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class FilesystemError(EndeavourError):
    """Raised when a local path cannot be stat-ed, listed or opened."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TransferError(EndeavourError):
    """Raised when the server rejects an upload or the request fails."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        expected: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.expected = expected
        self.body = body


class UploadError(EndeavourError):
    """Raised by the uploader with context about the path being uploaded.

    The underlying FilesystemError or TransferError is chained as __cause__.
    """

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = path
