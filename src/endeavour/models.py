"""Data models for the endeavour library."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from endeavour.exceptions import MissingFieldError


@dataclass(frozen=True)
class UploadConfig:
    """Everything a single upload run needs."""

    url: str
    repo: str
    path: str
    username: str
    password: str = field(repr=False)
    verbose: bool = False
    files: tuple[str | Path, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence of paths, store an immutable one
        object.__setattr__(self, "files", tuple(self.files))

    def validate(self) -> None:
        """Check required fields in a fixed order.

        Raises:
            MissingFieldError: naming the first field that is unset
        """
        if not self.url:
            raise MissingFieldError("a URL must be set", "url")
        if not self.username:
            raise MissingFieldError("nexus username must be set", "username")
        if not self.password:
            raise MissingFieldError("nexus password must be set", "password")
        if not any(os.fspath(f) for f in self.files):
            raise MissingFieldError("files to upload must be provided", "files")
        if not self.repo:
            raise MissingFieldError("a repo must be set", "repo")
        if not self.path:
            raise MissingFieldError("a path must be set", "path")


@dataclass(frozen=True)
class FileUploadTarget:
    """A local file and where it lands under the destination path."""

    local_path: Path
    remote_path: str
    from_directory_walk: bool = False


@dataclass(frozen=True)
class TransferOutcome:
    """Status and body of a finished PUT."""

    status_code: int
    body: str | None = None
